import logging

import pytest

from bwraster import InvalidArgument, config, constants


def test_defaults():
    defaults = config.load(None)
    assert defaults == config.Config()
    assert defaults.pixel_on == constants.DEFAULT_ON
    assert defaults.pixel_off == constants.DEFAULT_OFF
    assert defaults.max_shapes == constants.MAX_SHAPES
    assert defaults.image_path is None
    assert defaults.level == logging.WARNING


def test_load_top_level(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('pixel_on = "@"\nlog_level = "debug"\n')
    loaded = config.load(path)
    assert loaded.pixel_on == "@"
    assert loaded.pixel_off == constants.DEFAULT_OFF
    assert loaded.level == logging.DEBUG


def test_load_raster_table(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("[raster]\nmax_shapes = 4\nimage_scale = 2\n")
    loaded = config.load(path)
    assert loaded.max_shapes == 4
    assert loaded.image_scale == 2


@pytest.mark.parametrize("data", [
    {"unknown": 1},
    {"pixel_on": "ab"},
    {"pixel_off": 3},
    {"max_shapes": 0},
    {"image_scale": True},
    {"log_level": "chatty"},
    {"image_path": 5},
])
def test_invalid_settings(data):
    with pytest.raises(InvalidArgument):
        config.parse(data)


def test_unparseable_file(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("pixel_on = \n")
    with pytest.raises(InvalidArgument, match="failed to parse"):
        config.load(path)
