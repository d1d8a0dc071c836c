from __future__ import annotations

from typing import Any

import numpy as np

from .constants import CODE_UNIT, MAX_CODE_UNIT


def freeze(array: np.ndarray) -> np.ndarray:
    """Marks a store read-only. Stores are never written after this."""
    array.flags.writeable = False
    return array


def encode(text: str) -> np.ndarray:
    """Translates a Python string to UTF-16 code units.

    The result is backed by an immutable bytes object, so it can be used as a
    store without copying.
    """
    return np.frombuffer(text.encode("utf-16-le", "surrogatepass"), dtype=CODE_UNIT)


def decode(units: np.ndarray) -> str:
    # lone surrogates survive the round trip
    return units.astype(CODE_UNIT, copy=False).tobytes().decode("utf-16-le", "surrogatepass")


def code_unit(c: Any) -> int:
    """Validates a single character: a one-character string inside the BMP,
    or an integer from 0 to 0xFFFF."""
    if isinstance(c, str):
        if len(c) != 1 or ord(c) > MAX_CODE_UNIT:
            raise ValueError(f"Expected a single UTF-16 code unit, got {c!r}")
        return ord(c)
    if isinstance(c, (bool, np.bool_)) or not isinstance(c, (int, np.integer)):
        raise TypeError(f"Expected a character or an integer code unit, got {c!r}")
    if not 0 <= c <= MAX_CODE_UNIT:
        raise ValueError(f"Code unit out of range: {c}")
    return int(c)


def as_code_units(data: Any) -> np.ndarray:
    """Interprets an owned array as code units, one per element.

    Accepts integer numpy arrays and sequences whose items are one-character
    strings or integers, each holding exactly one code unit. A plain `str` is
    encoded as a whole. The returned array may alias the caller's buffer;
    anything that keeps it must copy it first.
    """
    if isinstance(data, str):
        return encode(data)
    if isinstance(data, np.ndarray):
        if data.dtype.kind == "U":
            data = data.ravel().tolist()
        elif data.dtype.kind not in "iu":
            raise TypeError(f"Code units must be integers, got an array of {data.dtype}")
        elif data.dtype == CODE_UNIT:
            return data.ravel()
        elif data.size and (data.min() < 0 or data.max() > MAX_CODE_UNIT):
            raise ValueError(f"Code units must fit in 16 bits: {data.min()}..{data.max()}")
        else:
            return data.ravel().astype(CODE_UNIT)
    return np.fromiter((code_unit(c) for c in data), dtype=CODE_UNIT)


def copy_units(units: np.ndarray, offset: int, length: int) -> np.ndarray:
    """Returns a fresh store holding `units[offset:offset+length]`."""
    return freeze(np.array(units[offset:offset + length], dtype=CODE_UNIT, copy=True))


def concat(*parts: np.ndarray) -> np.ndarray:
    """Returns a fresh store of exactly the combined size of `parts`."""
    return freeze(np.concatenate(parts).astype(CODE_UNIT, copy=False))


def find_unit(haystack: np.ndarray, unit: int, start: int = 0) -> int:
    hits = np.flatnonzero(haystack[start:] == unit)
    return int(hits[0]) + start if hits.size else -1


def find(haystack: np.ndarray, needle: np.ndarray, start: int = 0) -> int:
    """Returns the first index >= start where `needle` occurs, or -1.

    `needle` must not be empty.
    """
    size = len(needle)
    last = len(haystack) - size
    if last < start:
        return -1
    candidates = np.flatnonzero(haystack[start:last + 1] == needle[0]) + start
    for i in candidates:
        if np.array_equal(haystack[i:i + size], needle):
            return int(i)
    return -1
