import pytest

from bwraster import constants
from istring import IString


def s(text):
    """Shorthand used across the string tests."""
    return IString.from_string(text)


@pytest.fixture
def abra():
    return s("Abra kadabra")


@pytest.fixture
def empty():
    return s("")


@pytest.fixture(autouse=True)
def no_config_file(monkeypatch):
    """Keep a config file from the environment out of the demo tests."""
    monkeypatch.delenv(constants.CONFIG_ENV, raising=False)
