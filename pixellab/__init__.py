"""In-memory framebuffer with line drawing, polygon filling and Conway's Game of Life."""

__version__ = "0.1.0"
__all__ = ["framebuffer", "line", "life", "life_app", "polygons"]