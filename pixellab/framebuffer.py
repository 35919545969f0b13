"""An in-memory RGBA framebuffer with simple pixel-plotting primitives."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from os import PathLike
from typing import ClassVar

from PIL import Image


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    BLACK: ClassVar[Color]
    WHITE: ClassVar[Color]
    GOLD: ClassVar[Color]
    LIGHTBLUE: ClassVar[Color]
    MAGENTA: ClassVar[Color]
    GREEN: ClassVar[Color]
    YELLOW: ClassVar[Color]
    CYAN: ClassVar[Color]

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


Color.BLACK = Color(0, 0, 0)
Color.WHITE = Color(255, 255, 255)
Color.GOLD = Color(255, 203, 0)
Color.LIGHTBLUE = Color(173, 216, 230)
Color.MAGENTA = Color(255, 0, 255)
Color.GREEN = Color(0, 228, 48)
Color.YELLOW = Color(253, 249, 0)
Color.CYAN = Color(0, 255, 255)


class Brush(enum.Enum):
    """Shape used by :meth:`Framebuffer.set_thick_pixel`.

    SQUARE paints a square whose half-width is ``thickness // 3``;
    ROUND paints a filled disc of radius ``thickness``.
    """

    SQUARE = "square"
    ROUND = "round"


class Framebuffer:
    """A grid of colours, addressed as ``pixels[y][x]``."""

    def __init__(
        self,
        width: int,
        height: int,
        background_color: Color = Color.BLACK,
        brush: Brush = Brush.SQUARE,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"framebuffer size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.background_color = background_color
        self.current_color = Color.BLACK
        self.brush = brush
        self.pixels: list[list[Color]] = []
        self.clear()

    def clear(self) -> None:
        """Fill every pixel with the background colour."""
        self.pixels = [[self.background_color] * self.width for _ in range(self.height)]

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        """Paint one pixel; coordinates outside the buffer are ignored."""
        if self._in_bounds(x, y):
            self.pixels[y][x] = color

    def get_pixel(self, x: int, y: int) -> Color:
        """Return the colour at ``(x, y)``."""
        if not self._in_bounds(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} buffer")
        return self.pixels[y][x]

    def set_thick_pixel(self, x: int, y: int, thickness: int, color: Color) -> None:
        """Paint a blob centred on ``(x, y)`` in the shape of the current brush."""
        if self.brush is Brush.SQUARE:
            half = int(thickness / 3)
            offsets = range(-half, half + 1)
            for dx in offsets:
                for dy in offsets:
                    self.set_pixel(x + dx, y + dy, color)
        else:
            radius = thickness
            offsets = range(-radius, radius + 1)
            for dy in offsets:
                for dx in offsets:
                    if dx * dx + dy * dy <= radius * radius:
                        self.set_pixel(x + dx, y + dy, color)

    def to_image(self) -> Image.Image:
        """Return the buffer as an opaque RGBA Pillow image."""
        image = Image.new("RGBA", (self.width, self.height))
        image.putdata([(c.r, c.g, c.b, 255) for row in self.pixels for c in row])
        return image

    def render_to_file(self, file_path: str | PathLike[str]) -> None:
        """Save the buffer as an image; the format follows the file extension."""
        self.to_image().save(file_path)