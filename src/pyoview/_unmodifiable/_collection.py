from __future__ import annotations

from collections.abc import Callable, Collection, Iterable, Iterator, Sequence, Set
from typing import Any, NoReturn, overload

from .._core import Pipeable, get_config
from .._cursor import Cursor, IterCursor, ListCursor, as_cursor
from .._entry import Entry
from .._errors import require_not_none
from ._base import Unmodifiable, rejected


class UnmodifiableCollection[T](Unmodifiable, Pipeable, Collection[T]):
    """A read-only view of a `Collection`.

    Membership, size, iteration, equality, hashing and the string form are answered by the wrapped collection.
    Every mutator raises `UnsupportedOperationError` without touching it, and `cursor()` returns a cursor whose
    `remove()` is rejected.

    Build views with `unmodifiable()` rather than with the constructor, so an existing view is reused.

    Args:
        data (Collection[T]): The collection to expose. Not copied.
    """

    __slots__ = ("_inner",)

    def __init__(self, data: Collection[T]) -> None:
        self._inner = require_not_none(data, "data")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(self._inner)})"

    def __str__(self) -> str:
        return str(self._inner)

    def __eq__(self, other: object) -> bool:
        return other is self or self._inner == other

    def __hash__(self) -> int:
        return hash(self._inner)

    def __contains__(self, value: object) -> bool:
        return value in self._inner

    def __iter__(self) -> Iterator[T]:
        return iter(self._inner)

    def __len__(self) -> int:
        return len(self._inner)

    def cursor(self) -> Cursor[T]:
        from ._factory import unmodifiable

        return unmodifiable(as_cursor(self._inner))

    def add(self, value: T) -> NoReturn:  # noqa: ARG002
        raise rejected("add")

    def remove(self, value: T) -> NoReturn:  # noqa: ARG002
        raise rejected("remove")

    def discard(self, value: T) -> NoReturn:  # noqa: ARG002
        raise rejected("discard")

    def clear(self) -> NoReturn:
        raise rejected("clear")

    def pop(self, *args: Any) -> NoReturn:  # noqa: ARG002
        raise rejected("pop")

    def update(self, *others: Iterable[T]) -> NoReturn:  # noqa: ARG002
        raise rejected("update")

    def remove_if(self, predicate: Callable[[T], bool]) -> NoReturn:  # noqa: ARG002
        raise rejected("remove_if")

    def retain(self, predicate: Callable[[T], bool]) -> NoReturn:  # noqa: ARG002
        raise rejected("retain")


class UnmodifiableSet[T](UnmodifiableCollection[T], Set[T]):
    """A read-only view of a `Set`.

    Set algebra (`|`, `&`, `-`, `^`) is available and returns new `frozenset`s; the in-place forms are rejected.

    Example:
    ```python
    >>> import pyoview as pv
    >>> view = pv.unmodifiable({1, 2})
    >>> sorted(view | {3})
    [1, 2, 3]
    >>> view |= {3}
    Traceback (most recent call last):
        ...
    pyoview._errors.UnsupportedOperationError: __ior__() is not supported by a read-only view

    ```
    """

    __slots__ = ()

    @classmethod
    def _from_iterable(cls, it: Iterable[Any]) -> frozenset[Any]:
        return frozenset(it)

    def __ior__(self, other: Iterable[Any]) -> NoReturn:  # noqa: ARG002, PYI034
        raise rejected("__ior__")

    def __iand__(self, other: Iterable[Any]) -> NoReturn:  # noqa: ARG002, PYI034
        raise rejected("__iand__")

    def __isub__(self, other: Iterable[Any]) -> NoReturn:  # noqa: ARG002, PYI034
        raise rejected("__isub__")

    def __ixor__(self, other: Iterable[Any]) -> NoReturn:  # noqa: ARG002, PYI034
        raise rejected("__ixor__")

    def difference_update(self, *others: Iterable[Any]) -> NoReturn:  # noqa: ARG002
        raise rejected("difference_update")

    def intersection_update(self, *others: Iterable[Any]) -> NoReturn:  # noqa: ARG002
        raise rejected("intersection_update")

    def symmetric_difference_update(self, other: Iterable[Any]) -> NoReturn:  # noqa: ARG002
        raise rejected("symmetric_difference_update")


class UnmodifiableEntrySet[K, V](UnmodifiableSet[Entry[K, V]]):
    """A read-only view of a set of entries, yielding entries whose `set_value` is rejected."""

    __slots__ = ()

    def __iter__(self) -> Iterator[Entry[K, V]]:
        from ._factory import unmodifiable

        return map(unmodifiable, self._inner)

    def cursor(self) -> Cursor[Entry[K, V]]:
        from ._factory import unmodifiable

        return unmodifiable(IterCursor(self))


class UnmodifiableSequence[T](UnmodifiableCollection[T], Sequence[T]):
    """A read-only view of a `Sequence`.

    Slicing returns a read-only view of the slice the wrapped sequence produces. For a `list` that slice is a copy,
    so later changes to the list are not seen through it. `list_cursor()` returns a bidirectional cursor that
    cannot edit.

    Example:
    ```python
    >>> import pyoview as pv
    >>> view = pv.unmodifiable([3, 1, 2])
    >>> view[1:]
    UnmodifiableSequence(1, 2)
    >>> view.append(4)
    Traceback (most recent call last):
        ...
    pyoview._errors.UnsupportedOperationError: append() is not supported by a read-only view

    ```
    """

    __slots__ = ()

    _inner: Sequence[T]

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> UnmodifiableSequence[T]: ...
    def __getitem__(self, index: int | slice) -> T | UnmodifiableSequence[T]:
        if isinstance(index, slice):
            from ._factory import unmodifiable

            return unmodifiable(self._inner[index])
        return self._inner[index]

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._inner)

    def index(self, value: Any, start: int = 0, stop: int | None = None) -> int:  # noqa: ANN401
        if stop is None:
            return self._inner.index(value, start)
        return self._inner.index(value, start, stop)

    def count(self, value: Any) -> int:  # noqa: ANN401
        return self._inner.count(value)

    def list_cursor(self, index: int = 0) -> ListCursor[T]:
        from ._factory import unmodifiable

        return unmodifiable(ListCursor(self._inner, index))  # type: ignore[arg-type]

    def __setitem__(self, index: int | slice, value: Any) -> NoReturn:  # noqa: ARG002, ANN401
        raise rejected("__setitem__")

    def __delitem__(self, index: int | slice) -> NoReturn:  # noqa: ARG002
        raise rejected("__delitem__")

    def __iadd__(self, values: Iterable[T]) -> NoReturn:  # noqa: ARG002, PYI034
        raise rejected("__iadd__")

    def __imul__(self, n: int) -> NoReturn:  # noqa: ARG002, PYI034
        raise rejected("__imul__")

    def insert(self, index: int, value: T) -> NoReturn:  # noqa: ARG002
        raise rejected("insert")

    def append(self, value: T) -> NoReturn:  # noqa: ARG002
        raise rejected("append")

    def extend(self, values: Iterable[T]) -> NoReturn:  # noqa: ARG002
        raise rejected("extend")

    def reverse(self) -> NoReturn:
        raise rejected("reverse")

    def sort(self, *args: Any, **kwargs: Any) -> NoReturn:  # noqa: ARG002
        raise rejected("sort")
