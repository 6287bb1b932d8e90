from __future__ import annotations

from collections.abc import Iterator
from typing import NoReturn

from .._cursor import Cursor
from .._navigable import KeyFn, NavigableSet
from .._results import Option
from ._base import rejected
from ._collection import UnmodifiableSet


class UnmodifiableNavigableSet[T](UnmodifiableSet[T], NavigableSet[T]):
    """A read-only view of a `NavigableSet`.

    Neighbour queries pass through; `poll_first`/`poll_last` are rejected like every other mutator.
    Each range view (`descending_set`, `head_set`, `tail_set`, `sub_set`) is itself wrapped, so views derived
    from views, to any depth, stay read-only.

    Example:
    ```python
    >>> import pyoview as pv
    >>> view = pv.unmodifiable(pv.TreeSet([1, 2, 3, 4]))
    >>> window = view.sub_set(1, 4).descending_set().head_set(2)
    >>> window
    UnmodifiableNavigableSet(3)
    >>> window.poll_first()
    Traceback (most recent call last):
        ...
    pyoview._errors.UnsupportedOperationError: poll_first() is not supported by a read-only view

    ```
    """

    __slots__ = ()

    _inner: NavigableSet[T]

    @property
    def key(self) -> KeyFn[T]:
        return self._inner.key

    def lower(self, value: T) -> Option[T]:
        return self._inner.lower(value)

    def floor(self, value: T) -> Option[T]:
        return self._inner.floor(value)

    def ceiling(self, value: T) -> Option[T]:
        return self._inner.ceiling(value)

    def higher(self, value: T) -> Option[T]:
        return self._inner.higher(value)

    def first(self) -> Option[T]:
        return self._inner.first()

    def last(self) -> Option[T]:
        return self._inner.last()

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._inner)

    def poll_first(self) -> NoReturn:
        raise rejected("poll_first")

    def poll_last(self) -> NoReturn:
        raise rejected("poll_last")

    def descending_set(self) -> NavigableSet[T]:
        from ._factory import unmodifiable

        return unmodifiable(self._inner.descending_set())

    def head_set(self, to: T, *, inclusive: bool = False) -> NavigableSet[T]:
        from ._factory import unmodifiable

        return unmodifiable(self._inner.head_set(to, inclusive=inclusive))

    def tail_set(self, from_: T, *, inclusive: bool = True) -> NavigableSet[T]:
        from ._factory import unmodifiable

        return unmodifiable(self._inner.tail_set(from_, inclusive=inclusive))

    def sub_set(
        self,
        from_: T,
        to: T,
        *,
        from_inclusive: bool = True,
        to_inclusive: bool = False,
    ) -> NavigableSet[T]:
        from ._factory import unmodifiable

        return unmodifiable(
            self._inner.sub_set(
                from_, to, from_inclusive=from_inclusive, to_inclusive=to_inclusive
            )
        )

    def descending_cursor(self) -> Cursor[T]:
        from ._factory import unmodifiable

        return unmodifiable(self._inner.descending_cursor())
