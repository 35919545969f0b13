# pixellab

A small in-memory RGBA framebuffer with a few classic raster routines on top of it:

- thick Bresenham-style lines (`pixellab.line`),
- outlining and scanline filling of polygons, with image export (`pixellab.polygons`),
- Conway's Game of Life drawn cell by cell into the framebuffer (`pixellab.life`)
  and animated in a window (`pixellab.life_app`).

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Commands

Draw the sample scene of five filled polygons into an 800 × 800 framebuffer and
save it as an image (the format follows the file extension; the default file is
`lAB1_image.png` in the current directory):

```
pixellab-polygons
pixellab-polygons --output scene.png
```

Open an 800 × 600 window that runs the Game of Life on an 80 × 60 board, seeded
with still lifes, oscillators and spaceships. It runs until the window is
closed, or for a fixed number of frames with `--frames`:

```
pixellab-life
pixellab-life --frames 200
```

## Library use

### Framebuffer

`Framebuffer(width, height, background_color=Color.BLACK, brush=Brush.SQUARE)`
holds a grid of `Color` values addressed as `pixels[y][x]`.

- `clear()` fills every pixel with `background_color`.
- `set_pixel(x, y, color)` paints one pixel; coordinates outside the buffer are ignored.
- `get_pixel(x, y)` returns the colour there, and raises `IndexError` outside the buffer.
- `set_thick_pixel(x, y, thickness, color)` paints a blob shaped by the brush:
  `Brush.SQUARE` paints a square of half-width `thickness // 3`,
  `Brush.ROUND` a filled disc of radius `thickness`.
- `to_image()` returns an opaque RGBA Pillow image; `render_to_file(path)` saves it.

`Color(r, g, b, a=255)` is a frozen dataclass that rejects channels outside
0–255. Named colours such as `Color.BLACK`, `Color.WHITE`, `Color.GOLD` and
`Color.CYAN` are provided.

### Lines and polygons

```python
from pixellab.framebuffer import Color, Framebuffer
from pixellab.line import Point, draw_line, line_points
from pixellab.polygons import fill_polygon

fb = Framebuffer(200, 200)

fb.current_color = Color(255, 255, 255)
draw_line(fb, Point(10, 10), Point(190, 120), 1)

pixels = list(line_points((0, 0), (5, 2)))   # both ends included

triangle = [Point(20, 180), Point(100, 40), Point(180, 180)]
fill_polygon(fb, triangle, 1, Color(0, 228, 48))

fb.render_to_file("triangle.png")
```

`draw_line` paints in the framebuffer's `current_color`. `fill_polygon` sets
`current_color` to the given colour, outlines the closed polygon and fills its
interior with the even-odd rule. `draw_scene(framebuffer)` draws the sample
scene used by `pixellab-polygons`.

### Game of Life

The board can be stepped and rendered without a window:

```python
from pixellab.framebuffer import Framebuffer
from pixellab.life import GameOfLife

game = GameOfLife(10)          # cell size in pixels
fb = Framebuffer(800, 600)
game.update()                  # one generation
game.render(fb)                # clears fb, draws live cells in gold
image = fb.to_image()
```

The board is bounded: cells beyond the edge count as dead and nothing wraps
around. `game.grid` holds the cells as rows of 0 and 1, and
`count_neighbors(x, y)` gives the live neighbours of a cell. `draw_cell` fills a
single square, and `render_showcase(framebuffer, translate_x, translate_y, size)`
draws the catalogue of classic patterns in light blue.

`pixellab.life_app.run(frames=None)` opens the window used by `pixellab-life`
and returns the game in its final state.

## What it does not do

The Game of Life window only animates the board: it takes no mouse or keyboard
input for editing cells, pausing or changing speed, and the starting patterns
are fixed. The polygon command always draws the same built-in scene; it does not
read shapes from a file.