"""Outlining and scanline-filling polygons, plus a sample scene."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from pixellab.framebuffer import Brush, Color, Framebuffer
from pixellab.line import draw_line

DEFAULT_OUTPUT = "lAB1_image.png"
IMAGE_SIZE = 800

_SCENE: tuple[tuple[tuple[tuple[int, int], ...], Color], ...] = (
    (
        (
            (165, 380), (185, 360), (180, 330), (207, 345), (233, 330),
            (230, 360), (250, 380), (220, 385), (205, 410), (193, 383),
        ),
        Color.MAGENTA,
    ),
    (((321, 335), (288, 286), (339, 251), (374, 302)), Color.GREEN),
    (((377, 249), (411, 197), (436, 249)), Color.YELLOW),
    (
        (
            (413, 177), (448, 159), (502, 88), (553, 53), (535, 36), (676, 37),
            (660, 52), (750, 145), (761, 179), (672, 192), (659, 214), (615, 214),
            (632, 230), (580, 230), (597, 215), (552, 214), (517, 144), (466, 180),
        ),
        Color.CYAN,
    ),
    # drawn last in the background colour to cut a hole in the previous shape
    (((682, 175), (708, 120), (735, 148), (739, 170)), Color.BLACK),
)


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _edges(vertices: Sequence[tuple[int, int]]):
    return zip(vertices, [*vertices[1:], *vertices[:1]])


def fill_polygon(
    framebuffer: Framebuffer,
    vertices: Sequence[tuple[int, int]],
    thickness: int,
    color: Color,
) -> None:
    """Outline the closed polygon and fill its interior with ``color`` (even-odd rule)."""
    framebuffer.current_color = color
    vertices = list(vertices)

    for start, end in _edges(vertices):
        draw_line(framebuffer, start, end, thickness)

    for y in range(framebuffer.height):
        crossings = sorted(
            x1 + _trunc_div((y - y1) * (x2 - x1), y2 - y1)
            for (x1, y1), (x2, y2) in _edges(vertices)
            if (y1 <= y < y2) or (y2 <= y < y1)
        )
        for left, right in zip(crossings[::2], crossings[1::2]):
            for x in range(left, right + 1):
                framebuffer.set_pixel(x, y, color)


def draw_scene(framebuffer: Framebuffer) -> None:
    """Draw the sample scene of five filled polygons."""
    for vertices, color in _SCENE:
        fill_polygon(framebuffer, vertices, 1, color)


def main(argv: Sequence[str] | None = None) -> int:
    """Render the sample scene to an image file."""
    parser = argparse.ArgumentParser(description="Render filled polygons to an image.")
    parser.add_argument(
        "-o", "--output", default=DEFAULT_OUTPUT, help="image file to write"
    )
    args = parser.parse_args(argv)

    framebuffer = Framebuffer(
        IMAGE_SIZE, IMAGE_SIZE, background_color=Color.BLACK, brush=Brush.ROUND
    )
    framebuffer.clear()
    draw_scene(framebuffer)
    framebuffer.render_to_file(args.output)
    print(f"Image exported to: {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())