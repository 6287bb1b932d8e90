from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, MutableSequence, MutableSet
from typing import Any, overload

from .._cursor import CollectionCursor, Cursor, ListCursor
from .._errors import require_not_none
from .._results import NONE, Option, Some
from ._base import TransformingDecorator


class TransformingList[T](TransformingDecorator[MutableSequence[T]], MutableSequence[T]):
    """A `MutableSequence` decorator mapping every inserted element through **func**.

    `append`, `insert`, `extend`, `+=` and item assignment store `func(value)`.
    `in`, `index`, `count` and `remove` compare against the stored values as given.

    `cursor()` returns a `ListCursor` over the decorator itself, so `set` and `add` through it are transformed too.

    Args:
        data (MutableSequence[T]): The sequence to decorate. Not copied.
        func (Callable[[Any], T]): The transformation applied on insertion.

    Example:
    ```python
    >>> import pyoview as pv
    >>> data = ["1"]
    >>> numbers = pv.TransformingList(data, int)
    >>> numbers.append("3")
    >>> data
    ['1', 3]
    >>> 3 in numbers, "3" in numbers
    (True, False)

    ```
    """

    __slots__ = ("_func",)

    def __init__(self, data: MutableSequence[T], func: Callable[[Any], T]) -> None:
        super().__init__(require_not_none(data, "data"))
        self._func = require_not_none(func, "func")

    def _transform_existing(self) -> int:
        values = [self._func(value) for value in self._inner]
        self._inner.clear()
        self._inner.extend(values)
        return len(values)

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> MutableSequence[T]: ...
    def __getitem__(self, index: int | slice) -> T | MutableSequence[T]:
        return self._inner[index]

    def __setitem__(self, index: int | slice, value: Any) -> None:  # noqa: ANN401
        if isinstance(index, slice):
            self._inner[index] = [self._func(item) for item in value]
        else:
            self._inner[index] = self._func(value)

    def __delitem__(self, index: int | slice) -> None:
        del self._inner[index]

    def insert(self, index: int, value: Any) -> None:  # noqa: ANN401
        self._inner.insert(index, self._func(value))

    def append(self, value: Any) -> None:  # noqa: ANN401
        self._inner.append(self._func(value))

    def extend(self, values: Iterable[Any]) -> None:
        self._inner.extend([self._func(value) for value in values])

    def index(self, value: Any, start: int = 0, stop: int | None = None) -> int:  # noqa: ANN401
        if stop is None:
            return self._inner.index(value, start)
        return self._inner.index(value, start, stop)

    def count(self, value: Any) -> int:  # noqa: ANN401
        return self._inner.count(value)

    def remove(self, value: Any) -> None:  # noqa: ANN401
        self._inner.remove(value)

    def reverse(self) -> None:
        # stored values are reordered, not inserted again
        self._inner.reverse()

    def cursor(self) -> ListCursor[T]:
        return ListCursor(self)


class TransformingQueue[T](TransformingList[T]):
    """A `deque` decorator mapping every element added at either end through **func**.

    Also offers the queue vocabulary: `offer` adds at the tail, `poll` and `peek` look at the head and
    return `NONE` on an empty queue.

    Example:
    ```python
    >>> from collections import deque
    >>> import pyoview as pv
    >>> queue = pv.TransformingQueue(deque(), str.lower)
    >>> queue.offer("B")
    True
    >>> queue.appendleft("A")
    >>> queue.poll(), queue.peek()
    (Some(value='a'), Some(value='b'))

    ```
    """

    __slots__ = ()

    _inner: deque[T]

    def appendleft(self, value: Any) -> None:  # noqa: ANN401
        self._inner.appendleft(self._func(value))

    def extendleft(self, values: Iterable[Any]) -> None:
        self._inner.extendleft([self._func(value) for value in values])

    def popleft(self) -> T:
        return self._inner.popleft()

    def offer(self, value: Any) -> bool:  # noqa: ANN401
        self.append(value)
        return True

    def poll(self) -> Option[T]:
        return Some(self._inner.popleft()) if self._inner else NONE

    def peek(self) -> Option[T]:
        return Some(self._inner[0]) if self._inner else NONE


class TransformingSet[T](TransformingDecorator[MutableSet[T]], MutableSet[T]):
    """A `MutableSet` decorator mapping every added element through **func**.

    Uniqueness is decided by the decorated set on the transformed values.
    `in`, `discard` and `remove` take values as they are stored.

    Args:
        data (MutableSet[T]): The set to decorate. Not copied.
        func (Callable[[Any], T]): The transformation applied on insertion.
    """

    __slots__ = ("_func",)

    def __init__(self, data: MutableSet[T], func: Callable[[Any], T]) -> None:
        super().__init__(require_not_none(data, "data"))
        self._func = require_not_none(func, "func")

    @classmethod
    def _from_iterable(cls, it: Iterable[Any]) -> frozenset[Any]:
        return frozenset(it)

    def _transform_existing(self) -> int:
        values = [self._func(value) for value in self._inner]
        self._inner.clear()
        for value in values:
            self._inner.add(value)
        return len(values)

    def add(self, value: Any) -> None:  # noqa: ANN401
        self._inner.add(self._func(value))

    def discard(self, value: Any) -> None:  # noqa: ANN401
        self._inner.discard(value)

    def update(self, *others: Iterable[Any]) -> None:
        for other in others:
            for value in other:
                self.add(value)

    def cursor(self) -> Cursor[T]:
        return CollectionCursor(self)
