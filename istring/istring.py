from __future__ import annotations

import operator
from typing import Any, Iterator

import numpy as np
from attrs import define

from . import replace, store
from .errors import IndexOutOfRange, NullArgument


def _check_argument(arg, name: str = "argument"):
    if arg is None:
        raise NullArgument(name)
    return arg


@define(frozen=True, init=False, eq=False, repr=False)
class IString:
    """
    An immutable sequence of UTF-16 code units with zero-copy substrings.

    An IString is a window `[offset, offset+length)` over a read-only backing
    store. Substrings share the store of the string they were taken from;
    concatenation and replacement allocate a fresh one. Every public
    constructor copies the caller's data, so nothing outside can change a
    store after an IString has been built on it.

    Constructing an IString from another IString reuses its store only when
    the original fills it exactly. A small window onto a large store gets a
    compact copy, so the large store isn't kept alive by it.
    """
    _store: np.ndarray
    _offset: int
    _length: int

    def __init__(self, data: Any, offset: int = 0, length: int | None = None):
        _check_argument(data, "data")
        if isinstance(data, IString):
            if offset or length is not None:
                raise TypeError("offset and length can't be given when copying an IString")
            if data._length == len(data._store):
                units = data._store
            else:
                units = store.copy_units(data._store, data._offset, data._length)
            self.__attrs_init__(units, 0, data._length)
            return

        units = store.as_code_units(data)
        offset = operator.index(offset)
        length = len(units) - offset if length is None else operator.index(length)
        if offset < 0:
            raise IndexOutOfRange(offset)
        if length < 0:
            raise IndexOutOfRange(length)
        if len(units) < offset + length:
            raise IndexOutOfRange(offset + length)
        self.__attrs_init__(store.copy_units(units, offset, length), 0, length)

    @classmethod
    def _view(cls, offset: int, length: int, units: np.ndarray) -> IString:
        # Only for stores that nobody else can write to.
        instance = cls.__new__(cls)
        instance.__attrs_init__(units, offset, length)
        return instance

    @classmethod
    def from_string(cls, s: str) -> IString:
        """Returns a new IString holding the UTF-16 code units of `s`."""
        _check_argument(s, "s")
        units = store.encode(s)
        return cls._view(0, len(units), units)

    @property
    def _end_index(self) -> int:
        # may be negative for an empty string; never index with it then
        return self._offset + self._length - 1

    def _window(self) -> np.ndarray:
        return self._store[self._offset:self._offset + self._length]

    # basic access

    def length(self) -> int:
        return self._length

    def is_empty(self) -> bool:
        return self._length == 0

    def char_at(self, index: int) -> str:
        """Returns the code unit at `index` as a one-character string."""
        index = operator.index(index)
        if index < 0 or index >= self._length:
            raise IndexOutOfRange(index)
        return chr(self._store[self._offset + index])

    def to_char_array(self) -> np.ndarray:
        """Returns a fresh, writable copy of the code units."""
        return np.array(self._window(), copy=True)

    def __str__(self):
        return store.decode(self._window())

    def __repr__(self):
        return f'<IString: {self}>'

    # searching

    def index_of_char(self, c: str | int, from_index: int = 0) -> int:
        """Returns the index of the first occurrence of `c` at or after
        `from_index`, relative to the start of this string, or -1."""
        _check_argument(c, "c")
        from_index = max(from_index, 0)
        if from_index >= self._length:
            return -1
        return store.find_unit(self._window(), store.code_unit(c), from_index)

    def index_of(self, s: IString, from_index: int = 0) -> int:
        """
        Returns the index of the first occurrence of `s` at or after
        `from_index`, or -1 if it doesn't occur.

        A negative `from_index` is treated as 0. An empty `s` is found at
        `from_index` itself. A positive `from_index` past the last index
        raises `IndexOutOfRange`; an empty string still finds an empty `s`
        at 0.
        """
        _check_argument(s, "s")
        if s._length > self._length:
            return -1
        if from_index > 0 and from_index >= self._length:
            raise IndexOutOfRange(from_index)
        if from_index < 0:
            from_index = 0
        if s.is_empty():
            return from_index
        return store.find(self._window(), s._window(), from_index)

    def starts_with(self, s: IString) -> bool:
        _check_argument(s, "s")
        if s._length > self._length:
            return False
        head = self._store[self._offset:self._offset + s._length]
        return bool(np.array_equal(head, s._window()))

    def ends_with(self, s: IString) -> bool:
        _check_argument(s, "s")
        if s._length > self._length:
            return False
        tail = self._store[self._end_index - s._length + 1:self._end_index + 1]
        return bool(np.array_equal(tail, s._window()))

    def contains(self, s: IString) -> bool:
        return self.index_of(s) > -1

    # extraction

    def substring(self, begin: int, end: int) -> IString:
        """
        Returns the characters from `begin` up to, not including, `end`.

        The result shares this string's store, so this is O(1). Taking the
        whole range returns this very string.
        """
        begin, end = operator.index(begin), operator.index(end)
        if begin < 0:
            raise IndexOutOfRange(begin)
        if end > self._length:
            raise IndexOutOfRange(end)
        if end - begin < 0:
            raise IndexOutOfRange(end - begin)
        if begin == 0 and end == self._length:
            return self
        return IString._view(self._offset + begin, end - begin, self._store)

    def left(self, n: int) -> IString:
        """The first `n` characters."""
        n = operator.index(n)
        if n > self._length:
            raise IndexOutOfRange(n)
        return self.substring(0, n)

    def right(self, n: int) -> IString:
        """The last `n` characters."""
        n = operator.index(n)
        if n > self._length or n < 0:
            raise IndexOutOfRange(n)
        return self.substring(self._length - n, self._length)

    # building new strings

    def add(self, s: IString) -> IString:
        """Returns this string followed by `s`."""
        _check_argument(s, "s")
        if s.is_empty():
            return self
        units = store.concat(self._window(), s._window())
        return IString._view(0, len(units), units)

    def replace_all(self, old, new) -> IString:
        """
        Replaces every occurrence of `old` with `new`.

        `old` and `new` are either both characters (one-character strings or
        integer code units) or both IStrings. Patterns are matched left to
        right without overlapping; an empty pattern inserts `new` before
        every character and once more at the end.

        Returns this string if `old` and `new` are equal, otherwise always a
        new string with a store of its own.
        """
        _check_argument(old, "old")
        _check_argument(new, "new")
        if isinstance(old, IString) and isinstance(new, IString):
            return self._replace_string(old, new)
        if isinstance(old, IString) or isinstance(new, IString):
            raise TypeError("replace_all() needs two characters or two IStrings")
        return self._replace_char(store.code_unit(old), store.code_unit(new))

    def _replace_char(self, old: int, new: int) -> IString:
        if old == new:
            return self
        units = self.to_char_array()
        units[units == old] = new
        return IString._view(0, len(units), store.freeze(units))

    def _replace_string(self, old: IString, new: IString) -> IString:
        if old == new:
            return self
        units = replace.replace_all(self._window(), old._window(), new._window())
        return IString._view(0, len(units), units)

    # python protocols

    def __len__(self):
        return self._length

    def __bool__(self):
        return self._length != 0

    def __getitem__(self, key):
        if isinstance(key, slice):
            if key.step is not None:
                raise TypeError('IString does not support step when slicing')
            begin, end, _ = key.indices(self._length)
            return self.substring(begin, max(begin, end))
        if key < 0:
            key += self._length
        return self.char_at(key)

    def __iter__(self) -> Iterator[str]:
        return (chr(unit) for unit in self._window())

    def __contains__(self, item):
        if isinstance(item, str):
            item = IString.from_string(item)
        elif not isinstance(item, IString):
            raise TypeError(f"'in <IString>' requires a str or IString, not {type(item).__name__}")
        return self.contains(item)

    def __add__(self, other):
        if not isinstance(other, IString):
            return NotImplemented
        return self.add(other)

    def __eq__(self, other):
        if not isinstance(other, IString):
            return NotImplemented
        return self._length == other._length and bool(np.array_equal(self._window(), other._window()))

    def __hash__(self):
        return hash(self._window().tobytes())
