import pytest

from bwraster import BWRasterMem, InvalidArgument


@pytest.fixture
def raster():
    return BWRasterMem(6, 5)


@pytest.mark.parametrize("width,height", [(0, 1), (1, 0), (-3, 4), (2.5, 2), (True, 2)])
def test_invalid_size(width, height):
    with pytest.raises(InvalidArgument):
        BWRasterMem(width, height)


def test_size(raster):
    assert raster.get_width() == 6
    assert raster.get_height() == 5


def test_starts_blank(raster):
    assert not raster.pixels().any()


def test_turn_on_off(raster):
    raster.turn_on(5, 4)
    assert raster.is_turned_on(5, 4)
    raster.turn_on(5, 4)
    assert raster.is_turned_on(5, 4)
    raster.turn_off(5, 4)
    assert not raster.is_turned_on(5, 4)


def test_flip_mode_toggles(raster):
    raster.enable_flip_mode()
    raster.enable_flip_mode()
    assert raster.flip_mode
    raster.turn_on(1, 1)
    assert raster.is_turned_on(1, 1)
    raster.turn_on(1, 1)
    assert not raster.is_turned_on(1, 1)
    raster.disable_flip_mode()
    raster.disable_flip_mode()
    assert not raster.flip_mode
    raster.turn_on(1, 1)
    raster.turn_on(1, 1)
    assert raster.is_turned_on(1, 1)


def test_turn_off_ignores_flip_mode(raster):
    raster.enable_flip_mode()
    raster.turn_off(2, 2)
    assert not raster.is_turned_on(2, 2)


def test_clear(raster):
    raster.turn_on(0, 0)
    raster.turn_on(3, 2)
    raster.clear()
    assert not raster.pixels().any()


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (6, 0), (0, 5)])
def test_invalid_pixel(raster, x, y):
    with pytest.raises(InvalidArgument, match="Invalid pixel"):
        raster.is_turned_on(x, y)
    with pytest.raises(InvalidArgument):
        raster.turn_on(x, y)
    with pytest.raises(InvalidArgument):
        raster.turn_off(x, y)


def test_pixels_is_a_snapshot(raster):
    raster.turn_on(4, 1)
    pixels = raster.pixels()
    assert pixels.shape == (5, 6)
    assert pixels[1, 4]
    raster.clear()
    assert pixels[1, 4]
    with pytest.raises(ValueError):
        pixels[0, 0] = True
