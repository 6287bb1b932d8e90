from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

from .._cursor import Cursor
from .._errors import require_not_none
from .._navigable import KeyFn, NavigableSet
from .._results import Option
from ._base import TransformingDecorator


class TransformingNavigableSet[T](
    TransformingDecorator[NavigableSet[T]], NavigableSet[T]
):
    """A `NavigableSet` decorator mapping every added element through **func**.

    The decorated set orders and deduplicates the transformed values. Range views are decorated with the same
    function, so adding through them is transformed as well.

    Args:
        data (NavigableSet[T]): The set to decorate. Not copied.
        func (Callable[[Any], T]): The transformation applied on insertion.

    Example:
    ```python
    >>> import pyoview as pv
    >>> numbers = pv.TransformingNavigableSet(pv.TreeSet(), int)
    >>> for text in ("10", "9", "010"):
    ...     numbers.add(text)
    >>> numbers
    TransformingNavigableSet(9, 10)
    >>> numbers.tail_set(10).add("11")
    >>> numbers.inner()
    TreeSet(9, 10, 11)

    ```
    """

    __slots__ = ("_func",)

    def __init__(self, data: NavigableSet[T], func: Callable[[Any], T]) -> None:
        super().__init__(require_not_none(data, "data"))
        self._func = require_not_none(func, "func")

    @classmethod
    def _from_iterable(cls, it: Iterable[Any]) -> frozenset[Any]:
        return frozenset(it)

    def _wrap(self, view: NavigableSet[T]) -> TransformingNavigableSet[T]:
        return self.__class__(view, self._func)

    def _transform_existing(self) -> int:
        old = list(self._inner)
        values = [self._func(value) for value in old]
        self._inner.clear()
        try:
            self._inner.update(values)
        except Exception:
            # a range view rejects values mapped outside of it
            self._inner.clear()
            self._inner.update(old)
            raise
        return len(values)

    def add(self, value: Any) -> None:  # noqa: ANN401
        self._inner.add(self._func(value))

    def discard(self, value: Any) -> None:  # noqa: ANN401
        self._inner.discard(value)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._inner)

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

    def poll_first(self) -> Option[T]:
        return self._inner.poll_first()

    def poll_last(self) -> Option[T]:
        return self._inner.poll_last()

    def descending_set(self) -> TransformingNavigableSet[T]:
        return self._wrap(self._inner.descending_set())

    def head_set(self, to: T, *, inclusive: bool = False) -> TransformingNavigableSet[T]:
        return self._wrap(self._inner.head_set(to, inclusive=inclusive))

    def tail_set(
        self, from_: T, *, inclusive: bool = True
    ) -> TransformingNavigableSet[T]:
        return self._wrap(self._inner.tail_set(from_, inclusive=inclusive))

    def sub_set(
        self,
        from_: T,
        to: T,
        *,
        from_inclusive: bool = True,
        to_inclusive: bool = False,
    ) -> TransformingNavigableSet[T]:
        return self._wrap(
            self._inner.sub_set(
                from_, to, from_inclusive=from_inclusive, to_inclusive=to_inclusive
            )
        )

    def cursor(self) -> Cursor[T]:
        return self._inner.cursor()

    def descending_cursor(self) -> Cursor[T]:
        return self._inner.descending_cursor()
