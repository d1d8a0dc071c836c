import io

import pytest

from bwraster import BWRasterMem, ImageRasterView, InvalidArgument, Rectangle, SimpleRasterView, StringRasterView

PICTURE = (
    "****..\n"
    "*..*..\n"
    "*..*..\n"
    "****..\n"
    "......\n"
)


@pytest.fixture
def raster():
    raster = BWRasterMem(6, 5)
    raster.enable_flip_mode()
    Rectangle(0, 0, 4, 4).draw(raster)
    Rectangle(1, 1, 2, 2).draw(raster)
    return raster


def test_string_view(raster):
    assert StringRasterView().produce(raster) == PICTURE


def test_string_view_custom_characters(raster):
    assert StringRasterView("X", "_").produce(raster) == PICTURE.replace("*", "X").replace(".", "_")


def test_simple_view_prints(raster):
    out = io.StringIO()
    assert SimpleRasterView(stream=out).produce(raster) is None
    assert out.getvalue() == PICTURE + "\n"


def test_simple_view_defaults_to_stdout(raster, capsys):
    SimpleRasterView().produce(raster)
    assert capsys.readouterr().out == PICTURE + "\n"


@pytest.mark.parametrize("on,off", [("", "."), ("**", "."), ("*", None)])
def test_invalid_pixel_characters(on, off):
    with pytest.raises(InvalidArgument):
        SimpleRasterView(on, off)


def test_image_view(raster):
    im = ImageRasterView().produce(raster)
    assert im.mode == "1"
    assert im.size == (6, 5)
    assert im.getpixel((0, 0)) == 255
    assert im.getpixel((1, 1)) == 0
    assert im.getpixel((5, 4)) == 0


def test_image_view_scaled(raster):
    im = ImageRasterView(scale=3).produce(raster)
    assert im.size == (18, 15)
    assert im.getpixel((2, 2)) == 255
    assert im.getpixel((4, 4)) == 0


@pytest.mark.parametrize("scale", [0, -1, 1.5])
def test_image_view_invalid_scale(scale):
    with pytest.raises(InvalidArgument):
        ImageRasterView(scale)
