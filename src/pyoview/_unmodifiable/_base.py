from __future__ import annotations

from typing import NoReturn

from .._cursor import Cursor, ListCursor
from .._entry import Entry, EntryDecorator, MapCursor
from .._errors import UnsupportedOperationError, require_not_none


class Unmodifiable:
    """Marker for objects that reject every mutation.

    `unmodifiable()` returns instances of this type unchanged instead of wrapping them again.
    """

    __slots__ = ()


def rejected(operation: str) -> UnsupportedOperationError:
    return UnsupportedOperationError(
        f"{operation}() is not supported by a read-only view"
    )


class UnmodifiableCursor[T](Unmodifiable, Cursor[T]):
    """A `Cursor` whose `remove()` is rejected."""

    __slots__ = ("_cursor",)

    def __init__(self, cursor: Cursor[T]) -> None:
        self._cursor = require_not_none(cursor, "cursor")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._cursor!r})"

    def has_next(self) -> bool:
        return self._cursor.has_next()

    def __next__(self) -> T:
        return next(self._cursor)

    def remove(self) -> NoReturn:
        raise rejected("remove")


class UnmodifiableListCursor[T](UnmodifiableCursor[T]):
    """A `ListCursor` that can walk in both directions but not `remove`, `set` or `add`."""

    __slots__ = ()

    _cursor: ListCursor[T]

    def has_previous(self) -> bool:
        return self._cursor.has_previous()

    def previous(self) -> T:
        return self._cursor.previous()

    def next_index(self) -> int:
        return self._cursor.next_index()

    def previous_index(self) -> int:
        return self._cursor.previous_index()

    def set(self, value: T) -> NoReturn:  # noqa: ARG002
        raise rejected("set")

    def add(self, value: T) -> NoReturn:  # noqa: ARG002
        raise rejected("add")


class UnmodifiableEntry[K, V](Unmodifiable, EntryDecorator[K, V]):
    """An `Entry` whose `set_value` is rejected.

    Example:
    ```python
    >>> import pyoview as pv
    >>> entry = pv.unmodifiable(pv.MapEntry("a", 1))
    >>> entry == pv.MapEntry("a", 1)
    True
    >>> entry.set_value(2)
    Traceback (most recent call last):
        ...
    pyoview._errors.UnsupportedOperationError: set_value() is not supported by a read-only view

    ```
    """

    __slots__ = ()

    _entry: Entry[K, V]

    def set_value(self, value: V) -> NoReturn:  # noqa: ARG002
        raise rejected("set_value")


class UnmodifiableMapCursor[K, V](UnmodifiableCursor[K]):
    """A `MapCursor` that reads keys and values but rejects `set_value` and `remove`.

    Example:
    ```python
    >>> import pyoview as pv
    >>> cursor = pv.unmodifiable({"a": 1}).map_cursor()
    >>> next(cursor), cursor.value
    ('a', 1)
    >>> cursor.set_value(2)
    Traceback (most recent call last):
        ...
    pyoview._errors.UnsupportedOperationError: set_value() is not supported by a read-only view

    ```
    """

    __slots__ = ()

    _cursor: MapCursor[K, V]

    @property
    def key(self) -> K:
        return self._cursor.key

    @property
    def value(self) -> V:
        return self._cursor.value

    def set_value(self, value: V) -> NoReturn:  # noqa: ARG002
        raise rejected("set_value")
