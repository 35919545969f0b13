import pytest
from PIL import Image

from pixellab.framebuffer import Brush, Color, Framebuffer


def painted(fb, background=Color.BLACK):
    return {
        (x, y)
        for y in range(fb.height)
        for x in range(fb.width)
        if fb.get_pixel(x, y) != background
    }


def test_new_buffer_is_background():
    fb = Framebuffer(4, 3)
    assert fb.pixels == [[Color.BLACK] * 4 for _ in range(3)]
    assert fb.current_color == Color.BLACK


def test_named_colors():
    assert Color.BLACK == Color(0, 0, 0, 255)
    assert Color.MAGENTA.rgb == (255, 0, 255)


def test_color_channel_out_of_range():
    with pytest.raises(ValueError):
        Color(256, 0, 0)


def test_invalid_size_rejected():
    with pytest.raises(ValueError):
        Framebuffer(0, 10)


def test_set_and_get_pixel():
    fb = Framebuffer(5, 5)
    fb.set_pixel(2, 3, Color.GOLD)
    assert fb.get_pixel(2, 3) == Color.GOLD
    assert painted(fb) == {(2, 3)}


def test_set_pixel_out_of_bounds_ignored():
    fb = Framebuffer(5, 5)
    for x, y in [(-1, 0), (0, -1), (5, 0), (0, 5)]:
        fb.set_pixel(x, y, Color.WHITE)
    assert painted(fb) == set()


def test_get_pixel_out_of_bounds_raises():
    fb = Framebuffer(5, 5)
    with pytest.raises(IndexError):
        fb.get_pixel(5, 0)


def test_clear_uses_background_color():
    fb = Framebuffer(3, 3)
    fb.set_pixel(1, 1, Color.GREEN)
    fb.background_color = Color.WHITE
    fb.clear()
    assert all(c == Color.WHITE for row in fb.pixels for c in row)


def test_square_brush_thickness_three():
    fb = Framebuffer(10, 10, brush=Brush.SQUARE)
    fb.set_thick_pixel(5, 5, 3, Color.CYAN)
    expected = {(x, y) for x in range(4, 7) for y in range(4, 7)}
    assert painted(fb) == expected


def test_square_brush_thin_is_single_pixel():
    fb = Framebuffer(10, 10, brush=Brush.SQUARE)
    fb.set_thick_pixel(5, 5, 1, Color.CYAN)
    assert painted(fb) == {(5, 5)}


def test_round_brush_radius_one_is_plus():
    fb = Framebuffer(10, 10, brush=Brush.ROUND)
    fb.set_thick_pixel(5, 5, 1, Color.CYAN)
    assert painted(fb) == {(5, 5), (4, 5), (6, 5), (5, 4), (5, 6)}


def test_round_brush_disc_invariant():
    fb = Framebuffer(20, 20, brush=Brush.ROUND)
    fb.set_thick_pixel(10, 10, 4, Color.YELLOW)
    for x, y in painted(fb):
        assert (x - 10) ** 2 + (y - 10) ** 2 <= 16
    assert (14, 10) in painted(fb)


def test_thick_pixel_clipped_at_edge():
    fb = Framebuffer(4, 4, brush=Brush.ROUND)
    fb.set_thick_pixel(0, 0, 2, Color.WHITE)
    assert all(0 <= x < 4 and 0 <= y < 4 for x, y in painted(fb))
    assert fb.get_pixel(0, 0) == Color.WHITE


def test_to_image_is_opaque():
    fb = Framebuffer(3, 2)
    fb.set_pixel(1, 0, Color(10, 20, 30, 40))
    image = fb.to_image()
    assert image.size == (3, 2)
    assert image.getpixel((1, 0)) == (10, 20, 30, 255)
    assert image.getpixel((0, 1)) == (0, 0, 0, 255)


def test_render_to_file_round_trip(tmp_path):
    fb = Framebuffer(6, 4)
    fb.set_pixel(5, 3, Color.MAGENTA)
    path = tmp_path / "out.png"
    fb.render_to_file(path)
    with Image.open(path) as image:
        loaded = image.convert("RGBA")
        assert loaded.size == (6, 4)
        assert loaded.getpixel((5, 3)) == (*Color.MAGENTA.rgb, 255)