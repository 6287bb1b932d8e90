from __future__ import annotations

from collections.abc import Collection, Mapping, Sequence, Set
from typing import Any, overload

from .._cursor import Cursor, ListCursor
from .._entry import Entry, EntrySet, MapCursor
from .._errors import require_not_none
from .._navigable import NavigableSet
from ._base import (
    Unmodifiable,
    UnmodifiableCursor,
    UnmodifiableEntry,
    UnmodifiableListCursor,
    UnmodifiableMapCursor,
)
from ._collection import (
    UnmodifiableCollection,
    UnmodifiableEntrySet,
    UnmodifiableSequence,
    UnmodifiableSet,
)
from ._mapping import UnmodifiableMapping
from ._navigable import UnmodifiableNavigableSet


@overload
def unmodifiable[T](target: ListCursor[T]) -> UnmodifiableListCursor[T]: ...
@overload
def unmodifiable[K, V](target: MapCursor[K, V]) -> UnmodifiableMapCursor[K, V]: ...
@overload
def unmodifiable[T](target: Cursor[T]) -> UnmodifiableCursor[T]: ...
@overload
def unmodifiable[K, V](target: Entry[K, V]) -> UnmodifiableEntry[K, V]: ...
@overload
def unmodifiable[K, V](target: EntrySet[K, V]) -> UnmodifiableEntrySet[K, V]: ...
@overload
def unmodifiable[T](target: NavigableSet[T]) -> UnmodifiableNavigableSet[T]: ...
@overload
def unmodifiable[K, V](target: Mapping[K, V]) -> UnmodifiableMapping[K, V]: ...
@overload
def unmodifiable[T](target: Set[T]) -> UnmodifiableSet[T]: ...
@overload
def unmodifiable[T](target: Sequence[T]) -> UnmodifiableSequence[T]: ...
@overload
def unmodifiable[T](target: Collection[T]) -> UnmodifiableCollection[T]: ...
def unmodifiable(target: Any) -> Any:  # noqa: PLR0911
    """Return a read-only view of **target**.

    Every view produced from the result (ranges, reversed order, keys, values, entries, slices, cursors) is
    built through this function as well, so it is read-only too.

    Args:
        target (Any): A cursor, entry, navigable set, mapping, set, sequence or other collection.

    Returns:
        Any: **target** itself if it is already read-only, otherwise a new view of it.

    Raises:
        NullArgumentError: If **target** is `None`.
        TypeError: If **target** is none of the supported kinds.

    Example:
    ```python
    >>> import pyoview as pv
    >>> data = [1, 2, 3]
    >>> view = pv.unmodifiable(data)
    >>> pv.unmodifiable(view) is view
    True
    >>> view.cursor().next().unwrap()
    1
    >>> cursor = view.cursor()
    >>> _ = next(cursor)
    >>> cursor.remove()
    Traceback (most recent call last):
        ...
    pyoview._errors.UnsupportedOperationError: remove() is not supported by a read-only view
    >>> data
    [1, 2, 3]

    ```
    """
    target = require_not_none(target, "target")
    match target:
        case Unmodifiable():
            return target
        case ListCursor():
            return UnmodifiableListCursor(target)
        case MapCursor():
            return UnmodifiableMapCursor(target)
        case Cursor():
            return UnmodifiableCursor(target)
        case Entry():
            return UnmodifiableEntry(target)
        case EntrySet():
            return UnmodifiableEntrySet(target)
        case NavigableSet():
            return UnmodifiableNavigableSet(target)
        case Mapping():
            return UnmodifiableMapping(target)
        case Set():
            return UnmodifiableSet(target)
        case Sequence():
            return UnmodifiableSequence(target)
        case Collection():
            return UnmodifiableCollection(target)
        case _:
            msg = f"cannot build a read-only view of {type(target).__name__}"
            raise TypeError(msg)
