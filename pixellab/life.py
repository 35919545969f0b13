"""Conway's Game of Life on a fixed 80x60 board, drawn into a framebuffer."""

from __future__ import annotations

from collections.abc import Iterable

from pixellab.framebuffer import Color, Framebuffer
from pixellab.line import draw_line

WIDTH = 80
HEIGHT = 60

# Where each starting pattern is placed on the board, in the same order as
# ``_STARTING_PATTERNS``.
_OFFSETS: tuple[tuple[int, int], ...] = (
    (0, 0),
    (20, 0),
    (40, 0),
    (0, 20),
    (20, 20),
    (40, 20),
    (0, 40),
    (20, 40),
    (40, 40),
)

_STARTING_PATTERNS: tuple[tuple[tuple[int, int], ...], ...] = (
    ((1, 1), (2, 1), (1, 2), (2, 2)),  # block
    ((5, 1), (6, 1), (4, 2), (7, 2), (5, 3), (6, 3)),  # beehive
    ((10, 1), (11, 1), (9, 2), (12, 2), (10, 3), (12, 3), (11, 4)),  # loaf
    ((1, 6), (2, 6), (3, 6)),  # blinker
    ((6, 6), (7, 6), (8, 6), (5, 7), (6, 7), (7, 7)),  # toad
    ((10, 6), (11, 6), (10, 7), (13, 8), (12, 9), (13, 9)),  # beacon
    ((1, 12), (2, 13), (3, 11), (3, 12), (3, 13)),  # glider
    ((5, 12), (8, 12), (9, 13), (9, 14), (5, 15), (6, 15), (7, 15), (8, 15)),  # LWSS
    (
        (12, 12), (15, 12), (11, 13), (11, 14), (15, 14),
        (11, 15), (12, 15), (13, 15), (14, 15),
    ),  # MWSS
)

_SHOWCASE_PATTERNS: tuple[tuple[tuple[int, int], ...], ...] = (
    ((0, 0), (1, 0), (0, 1), (1, 1)),  # block
    ((5, 0), (6, 0), (4, 1), (7, 1), (5, 2), (6, 2)),  # beehive
    ((10, 0), (11, 0), (9, 1), (12, 1), (10, 2), (12, 2), (11, 3)),  # loaf
    ((0, 6), (1, 6), (2, 6)),  # blinker
    ((6, 6), (7, 6), (8, 6), (5, 7), (6, 7), (7, 7)),  # toad
    ((10, 6), (11, 6), (10, 7), (13, 8), (12, 9), (13, 9)),  # beacon
    ((0, 12), (1, 13), (2, 11), (2, 12), (2, 13)),  # glider
    ((5, 12), (8, 12), (9, 13), (9, 14), (5, 15), (6, 15), (7, 15), (8, 15), (9, 14)),  # LWSS
    (
        (12, 12), (15, 12), (11, 13), (11, 14), (15, 14),
        (11, 15), (12, 15), (13, 15), (14, 15), (15, 14),
    ),  # MWSS
)


def draw_cell(framebuffer: Framebuffer, x: int, y: int, size: int) -> None:
    """Fill a ``size``x``size`` square whose top-left corner is ``(x, y)``."""
    for dy in range(size):
        draw_line(framebuffer, (x, y + dy), (x + size - 1, y + dy), 1)


def _draw_pattern(
    framebuffer: Framebuffer,
    cells: Iterable[tuple[int, int]],
    translate_x: int,
    translate_y: int,
    size: int,
) -> None:
    for cx, cy in cells:
        draw_cell(framebuffer, translate_x + cx * size, translate_y + cy * size, size)


def render_showcase(
    framebuffer: Framebuffer, translate_x: int, translate_y: int, size: int
) -> None:
    """Draw the catalogue of classic patterns in light blue, shifted by the translation."""
    framebuffer.current_color = Color.LIGHTBLUE
    for pattern in _SHOWCASE_PATTERNS:
        _draw_pattern(framebuffer, pattern, translate_x, translate_y, size)


class GameOfLife:
    """A bounded (non-wrapping) Life board seeded with a set of classic patterns."""

    def __init__(self, cell_size: int) -> None:
        self.cell_size = cell_size
        self.grid: list[list[int]] = [[0] * WIDTH for _ in range(HEIGHT)]
        for (ox, oy), pattern in zip(_OFFSETS, _STARTING_PATTERNS):
            for px, py in pattern:
                gx, gy = ox + px, oy + py
                if gx < WIDTH and gy < HEIGHT:
                    self.grid[gy][gx] = 1

    def count_neighbors(self, x: int, y: int) -> int:
        """Number of live cells among the eight around ``(x, y)``; the edge does not wrap."""
        return sum(
            self.grid[ny][nx]
            for ny in range(max(y - 1, 0), min(y + 2, HEIGHT))
            for nx in range(max(x - 1, 0), min(x + 2, WIDTH))
            if (nx, ny) != (x, y)
        )

    def _next_state(self, x: int, y: int) -> int:
        neighbours = self.count_neighbors(x, y)
        if self.grid[y][x] == 1:
            return 1 if neighbours in (2, 3) else 0
        return 1 if neighbours == 3 else 0

    def update(self) -> None:
        """Advance the board by one generation."""
        self.grid = [
            [self._next_state(x, y) for x in range(WIDTH)] for y in range(HEIGHT)
        ]

    def render(self, framebuffer: Framebuffer) -> None:
        """Clear the framebuffer and draw every live cell in gold."""
        framebuffer.clear()
        framebuffer.current_color = Color.GOLD
        for y, row in enumerate(self.grid):
            for x, cell in enumerate(row):
                if cell == 1:
                    draw_cell(
                        framebuffer,
                        x * self.cell_size,
                        y * self.cell_size,
                        self.cell_size,
                    )