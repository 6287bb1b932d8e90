from __future__ import annotations

from abc import abstractmethod
from collections.abc import (
    Callable,
    Collection,
    Iterable,
    Iterator,
    MutableMapping,
    MutableSequence,
    MutableSet,
)
from typing import Any

import more_itertools as mit

from ._core import Pipeable
from ._errors import IllegalStateError, UnsupportedOperationError, require_not_none
from ._results import NONE, Option, Some


class Cursor[T](Pipeable, Iterator[T]):
    """An `Iterator` that can look ahead and remove the element it produced last.

    Implements the `Iterator` Protocol from `collections.abc`, so it can be used in a for-loop.

    - `has_next()` tells whether another element is available, without ever raising.
    - `__next__()` produces it, and raises `StopIteration` once nothing remains.
    - `remove()` removes the last produced element from the underlying source.

    `remove()` raises `IllegalStateError` when no element was produced since construction or since the previous `remove()`.
    """

    __slots__ = ()

    @abstractmethod
    def has_next(self) -> bool: ...

    @abstractmethod
    def __next__(self) -> T: ...

    @abstractmethod
    def remove(self) -> None: ...

    def next(self) -> Option[T]:
        """Return the next element wrapped in an `Option`.

        Returns:
            Option[T]: `Some[T]`, or `NONE` if the cursor is exhausted.

        Example:
        ```python
        >>> import pyoview as pv
        >>> cursor = pv.ListCursor([1, 2])
        >>> cursor.next()
        Some(value=1)
        >>> cursor.next().unwrap()
        2
        >>> cursor.next()
        NONE

        ```
        """
        if self.has_next():
            return Some(next(self))
        return NONE


class ListCursor[T](Cursor[T]):
    """A bidirectional cursor over a `MutableSequence`.

    Beside forward iteration it can walk backwards with `previous()`, and edit the sequence in place:

    - `remove()` deletes the element returned by the last `next()`/`previous()`.
    - `set(value)` replaces that element.
    - `add(value)` inserts before the implicit cursor position; the following `next()` is unaffected.

    `remove()` and `set()` need a preceding `next()`/`previous()` that was not followed by `remove()` or `add()`.

    Args:
        data (MutableSequence[T]): The sequence to walk. Not copied.
        index (int): Starting position, between 0 and `len(data)`. Defaults to 0.

    Example:
    ```python
    >>> import pyoview as pv
    >>> data = ["a", "b", "c"]
    >>> cursor = pv.ListCursor(data)
    >>> next(cursor), next(cursor)
    ('a', 'b')
    >>> cursor.remove()
    >>> cursor.previous()
    'a'
    >>> cursor.set("z")
    >>> data
    ['z', 'c']

    ```
    """

    __slots__ = ("_cursor", "_data", "_last")

    def __init__(self, data: MutableSequence[T], index: int = 0) -> None:
        self._data = require_not_none(data, "data")
        if not 0 <= index <= len(data):
            msg = f"index {index} out of range for a sequence of length {len(data)}"
            raise IndexError(msg)
        self._cursor = index
        self._last = -1

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(index={self._cursor})"

    def has_next(self) -> bool:
        return self._cursor < len(self._data)

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        self._last = self._cursor
        self._cursor += 1
        return self._data[self._last]

    def has_previous(self) -> bool:
        return self._cursor > 0

    def previous(self) -> T:
        """Move one position back and return the element found there.

        Raises:
            StopIteration: If the cursor is already at the start.
        """
        if not self.has_previous():
            raise StopIteration
        self._cursor -= 1
        self._last = self._cursor
        return self._data[self._last]

    def next_index(self) -> int:
        return self._cursor

    def previous_index(self) -> int:
        return self._cursor - 1

    def remove(self) -> None:
        if self._last < 0:
            msg = "remove() needs a preceding next() or previous()"
            raise IllegalStateError(msg)
        del self._data[self._last]
        if self._last < self._cursor:
            self._cursor -= 1
        self._last = -1

    def set(self, value: T) -> None:
        if self._last < 0:
            msg = "set() needs a preceding next() or previous()"
            raise IllegalStateError(msg)
        self._data[self._last] = value

    def add(self, value: T) -> None:
        self._data.insert(self._cursor, value)
        self._cursor += 1
        self._last = -1


class CollectionCursor[T](Cursor[T]):
    """A cursor over a snapshot of a collection, removing from the live collection.

    The elements are captured when the cursor is built, so the collection can be mutated while it is walked.

    Removal uses `discard` for a `MutableSet`, `del` for a `MutableMapping` (whose elements are its keys),
    and the collection's own `remove` otherwise.

    Args:
        collection (Collection[T]): The collection to walk.
    """

    __slots__ = ("_collection", "_index", "_last", "_snapshot")

    def __init__(self, collection: Collection[T]) -> None:
        self._collection = require_not_none(collection, "collection")
        self._snapshot = tuple(collection)
        self._index = 0
        self._last: Option[T] = NONE

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._index}/{len(self._snapshot)})"

    def has_next(self) -> bool:
        return self._index < len(self._snapshot)

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        item = self._snapshot[self._index]
        self._index += 1
        self._last = Some(item)
        return item

    def remove(self) -> None:
        if self._last.is_none():
            msg = "remove() needs a preceding next()"
            raise IllegalStateError(msg)
        item = self._last.unwrap()
        match self._collection:
            case MutableSet():
                self._collection.discard(item)
            case MutableMapping():
                del self._collection[item]
            case _:
                remover: Callable[[T], object] | None = getattr(
                    self._collection, "remove", None
                )
                if remover is None:
                    msg = f"{type(self._collection).__name__} does not support removal"
                    raise UnsupportedOperationError(msg)
                remover(item)
        self._last = NONE


class IterCursor[T](Cursor[T]):
    """A cursor over any `Iterable`, without removal support.

    Looking ahead is done with `more_itertools.peekable`, so `has_next()` never loses an element.

    Example:
    ```python
    >>> import pyoview as pv
    >>> cursor = pv.IterCursor(x * 2 for x in range(2))
    >>> cursor.has_next(), next(cursor), next(cursor), cursor.has_next()
    (True, 0, 2, False)

    ```
    """

    __slots__ = ("_inner",)

    def __init__(self, data: Iterable[T]) -> None:
        self._inner = mit.peekable(require_not_none(data, "data"))

    def has_next(self) -> bool:
        return bool(self._inner)

    def __next__(self) -> T:
        return next(self._inner)

    def remove(self) -> None:
        msg = "remove() is not supported by a plain iterator"
        raise UnsupportedOperationError(msg)


class FilterCursor[T](Cursor[T]):
    """A cursor yielding only the elements of another cursor that satisfy a predicate.

    `remove()` is forwarded to the wrapped cursor. It is rejected once `has_next()` has looked ahead,
    since the wrapped cursor then points past the element that was returned.

    Args:
        data (Iterable[T]): The source, adapted with `as_cursor`.
        predicate (Callable[[T], bool]): Elements for which it returns `False` are skipped.
    """

    __slots__ = ("_cursor", "_peeked", "_predicate", "_removable")

    def __init__(self, data: Iterable[T], predicate: Callable[[T], bool]) -> None:
        self._cursor = as_cursor(data)
        self._predicate = require_not_none(predicate, "predicate")
        self._peeked: Option[T] = NONE
        self._removable = False

    def has_next(self) -> bool:
        if self._peeked.is_some():
            return True
        while self._cursor.has_next():
            item = next(self._cursor)
            self._removable = False
            if self._predicate(item):
                self._peeked = Some(item)
                return True
        return False

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        item = self._peeked.unwrap()
        self._peeked = NONE
        self._removable = True
        return item

    def remove(self) -> None:
        if not self._removable:
            msg = "remove() needs a preceding next(), with no has_next() in between"
            raise IllegalStateError(msg)
        self._cursor.remove()
        self._removable = False


class EmptyCursor(Cursor[Any]):
    __slots__ = ()

    def __repr__(self) -> str:
        return "EmptyCursor()"

    def has_next(self) -> bool:
        return False

    def __next__(self) -> Any:  # noqa: ANN401
        raise StopIteration

    def remove(self) -> None:
        msg = "remove() on an empty cursor"
        raise IllegalStateError(msg)


_EMPTY = EmptyCursor()


def empty[T]() -> Cursor[T]:
    """Return the shared cursor that has no elements."""
    return _EMPTY


def as_cursor[T](source: Iterable[T]) -> Cursor[T]:
    """Adapt **source** to a `Cursor`.

    - A `Cursor` is returned unchanged.
    - An object exposing a `cursor()` method (views, decorators, `TreeSet`) provides its own.
    - A `MutableSequence` gets a `ListCursor`, a `MutableSet` or `MutableMapping` a `CollectionCursor`.
    - Any other iterable gets an `IterCursor`, which cannot remove.

    Args:
        source (Iterable[T]): The object to adapt.

    Returns:
        Cursor[T]: A cursor over **source**.

    Raises:
        NullArgumentError: If **source** is `None`.
    """
    source = require_not_none(source, "source")
    match source:
        case Cursor():
            return source
        case _ if callable(getattr(source, "cursor", None)):
            return source.cursor()  # type: ignore[attr-defined]
        case MutableSequence():
            return ListCursor(source)
        case MutableSet() | MutableMapping():
            return CollectionCursor(source)
        case _:
            return IterCursor(source)
