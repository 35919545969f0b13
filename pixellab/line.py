"""Rasterising straight lines onto a framebuffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import NamedTuple

from pixellab.framebuffer import Framebuffer


class Point(NamedTuple):
    """An integer pixel coordinate."""

    x: int
    y: int


def line_points(start: tuple[int, int], end: tuple[int, int]) -> Iterator[Point]:
    """Yield the pixels of the line from ``start`` to ``end``, both included."""
    x0, y0 = start
    x1, y1 = end
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy

    while x0 != x1 or y0 != y1:
        yield Point(x0, y0)
        e2 = 3 * err
        if e2 > -dy:
            err -= dy
            x0 += sx
        if e2 < dx:
            err += dx
            y0 += sy

    yield Point(x1, y1)


def draw_line(
    framebuffer: Framebuffer,
    start: tuple[int, int],
    end: tuple[int, int],
    thickness: int,
) -> None:
    """Draw a line in the framebuffer's current colour using its brush."""
    color = framebuffer.current_color
    for x, y in line_points(start, end):
        framebuffer.set_thick_pixel(x, y, thickness, color)