"""Whole-pattern replacement over code-unit arrays.

The matches are collected first and the result is then built with a single
allocation of its final size.
"""
from __future__ import annotations

import numpy as np

from . import store


def match_positions(units: np.ndarray, pattern: np.ndarray) -> list[int]:
    """Start indices of the non-overlapping matches of a non-empty `pattern`,
    scanning left to right and resuming just past each match."""
    positions = []
    cursor = store.find(units, pattern)
    while cursor != -1:
        positions.append(cursor)
        cursor = store.find(units, pattern, cursor + len(pattern))
    return positions


def interleave(units: np.ndarray, replacement: np.ndarray) -> np.ndarray:
    """Inserts `replacement` before every code unit and once after the last."""
    size = len(units)
    step = len(replacement) + 1
    out = np.empty(size * step + len(replacement), dtype=units.dtype)
    for i in range(len(replacement)):
        out[i::step] = replacement[i]
    out[len(replacement)::step] = units
    return store.freeze(out)


def replace_all(units: np.ndarray, pattern: np.ndarray, replacement: np.ndarray) -> np.ndarray:
    """Returns a fresh store with every occurrence of `pattern` replaced."""
    if not len(pattern):
        return interleave(units, replacement)
    positions = match_positions(units, pattern)
    if not positions:
        return store.copy_units(units, 0, len(units))

    size = len(units) + len(positions) * (len(replacement) - len(pattern))
    out = np.empty(size, dtype=units.dtype)
    read = write = 0
    for position in positions:
        kept = position - read
        out[write:write + kept] = units[read:position]
        write += kept
        out[write:write + len(replacement)] = replacement
        write += len(replacement)
        read = position + len(pattern)
    out[write:] = units[read:]
    return store.freeze(out)
