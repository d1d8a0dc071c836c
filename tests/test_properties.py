"""Properties that hold for every IString, checked over a handful of samples."""

import itertools

import numpy as np
import pytest

from istring import IString

from conftest import s

SAMPLES = ["", "a", "ab", "Abra kadabra", "ababab", "123 456", "ćžš"]


@pytest.fixture(params=SAMPLES)
def sample(request):
    return s(request.param)


def views(cstring):
    return [cstring.substring(i, j) for i, j in itertools.combinations_with_replacement(range(len(cstring) + 1), 2)]


def test_lengths_agree(sample):
    assert sample.length() == len(sample.to_char_array()) == len(str(sample))


def test_char_at_matches_array(sample):
    units = sample.to_char_array()
    for i in range(sample.length()):
        assert ord(sample.char_at(i)) == units[i]


def test_round_trip(sample):
    assert IString(sample.to_char_array()) == sample
    assert str(IString(sample.to_char_array())) == str(sample)


def test_substrings(sample):
    assert sample.substring(0, sample.length()) is sample
    units = sample.to_char_array()
    for i, j in itertools.combinations_with_replacement(range(sample.length() + 1), 2):
        sub = sample.substring(i, j)
        assert sub.length() == j - i
        assert np.array_equal(sub.to_char_array(), units[i:j])


def test_add_empty(sample, empty):
    assert sample.add(empty) is sample
    assert str(empty.add(sample)) == str(sample)


def test_identity_replacements(sample):
    assert sample.replace_all("a", "a") is sample
    assert sample.replace_all(s("ab"), s("ab")) is sample


def test_contains_agrees_with_index_of(sample):
    for other in SAMPLES + views(sample):
        other = s(other) if isinstance(other, str) else other
        assert sample.contains(other) == (sample.index_of(other) > -1)


def test_equal_iff_starts_and_ends_with(sample):
    for other in [s(text) for text in SAMPLES] + views(sample):
        both = sample.starts_with(other) and sample.ends_with(other) and sample.length() == other.length()
        assert both == (str(sample) == str(other))


def test_empty_is_found(sample, empty):
    assert sample.starts_with(empty)
    assert sample.ends_with(empty)
    assert sample.contains(empty)


def test_views_of_views_match_python_slicing(sample):
    for view in views(sample):
        for i, j in itertools.combinations_with_replacement(range(view.length() + 1), 2):
            assert str(view.substring(i, j)) == str(view)[i:j]
