from __future__ import annotations

from abc import abstractmethod
from bisect import bisect_left, bisect_right
from collections.abc import Callable, Iterable, Iterator, MutableSet
from dataclasses import dataclass
from typing import Any, Self

import more_itertools as mit

from ._core import Pipeable, get_config
from ._cursor import CollectionCursor, Cursor
from ._results import NONE, Option, Some

type KeyFn[T] = Callable[[T], Any] | None


class NavigableSet[T](Pipeable, MutableSet[T]):
    """A `MutableSet` kept in sorted order, with neighbour queries and live range views.

    Ordering is given by `key` (natural ordering when `None`). Queries that may find nothing return an `Option`.

    The range views returned by `descending_set`, `head_set`, `tail_set` and `sub_set` are backed by the same storage:
    changes made through a view are visible in the set, and the reverse.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def key(self) -> KeyFn[T]: ...

    @abstractmethod
    def lower(self, value: T) -> Option[T]:
        """Greatest element strictly before **value**."""
        ...

    @abstractmethod
    def floor(self, value: T) -> Option[T]:
        """Greatest element before or equal to **value**."""
        ...

    @abstractmethod
    def ceiling(self, value: T) -> Option[T]:
        """Least element after or equal to **value**."""
        ...

    @abstractmethod
    def higher(self, value: T) -> Option[T]:
        """Least element strictly after **value**."""
        ...

    @abstractmethod
    def first(self) -> Option[T]: ...

    @abstractmethod
    def last(self) -> Option[T]: ...

    @abstractmethod
    def poll_first(self) -> Option[T]:
        """Remove and return the first element."""
        ...

    @abstractmethod
    def poll_last(self) -> Option[T]:
        """Remove and return the last element."""
        ...

    @abstractmethod
    def descending_set(self) -> NavigableSet[T]: ...

    @abstractmethod
    def head_set(self, to: T, *, inclusive: bool = False) -> NavigableSet[T]:
        """Elements before **to** (and **to** itself when **inclusive**)."""
        ...

    @abstractmethod
    def tail_set(self, from_: T, *, inclusive: bool = True) -> NavigableSet[T]:
        """Elements after **from_** (and **from_** itself when **inclusive**)."""
        ...

    @abstractmethod
    def sub_set(
        self,
        from_: T,
        to: T,
        *,
        from_inclusive: bool = True,
        to_inclusive: bool = False,
    ) -> NavigableSet[T]: ...

    @abstractmethod
    def cursor(self) -> Cursor[T]: ...

    def descending_cursor(self) -> Cursor[T]:
        return self.descending_set().cursor()

    def __reversed__(self) -> Iterator[T]:
        return iter(self.descending_set())

    def update(self, *others: Iterable[T]) -> None:
        for other in others:
            for value in other:
                self.add(value)

    def remove_if(self, predicate: Callable[[T], bool]) -> bool:
        """Remove every element satisfying **predicate**.

        Returns:
            bool: Whether anything was removed.
        """
        removed = False
        cursor = self.cursor()
        for value in cursor:
            if predicate(value):
                cursor.remove()
                removed = True
        return removed

    def retain(self, predicate: Callable[[T], bool]) -> bool:
        """Keep only the elements satisfying **predicate**.

        Returns:
            bool: Whether anything was removed.
        """
        return self.remove_if(lambda value: not predicate(value))


@dataclass(slots=True, frozen=True)
class _Bound[T]:
    value: T
    inclusive: bool


class TreeSet[T](NavigableSet[T]):
    """A `NavigableSet` stored as a sorted list.

    Elements are unique according to their `key`. Range views share the list of the set they come from,
    and reject elements falling outside their range with a `ValueError`.

    Args:
        data (Iterable[T]): Initial elements, in any order.
        key (KeyFn[T]): Function extracting the comparison key of an element. Defaults to natural ordering.

    Example:
    ```python
    >>> import pyoview as pv
    >>> numbers = pv.TreeSet([5, 1, 3, 9, 7])
    >>> numbers.sub_set(3, 9)
    TreeSet(3, 5, 7)
    >>> numbers.head_set(5).descending_set()
    TreeSet(3, 1)
    >>> numbers.ceiling(4)
    Some(value=5)
    >>> numbers.tail_set(5).add(6)
    >>> numbers
    TreeSet(1, 3, 5, 6, 7, 9)

    ```
    """

    __slots__ = ("_descending", "_hi", "_items", "_key", "_lo")

    _items: list[T]
    _key: KeyFn[T]
    _lo: _Bound[T] | None
    _hi: _Bound[T] | None
    _descending: bool

    def __init__(self, data: Iterable[T] = (), *, key: KeyFn[T] = None) -> None:
        self._items = list(mit.unique_justseen(sorted(data, key=key), key=key))
        self._key = key
        self._lo = None
        self._hi = None
        self._descending = False

    def _derive(
        self, lo: _Bound[T] | None, hi: _Bound[T] | None, *, descending: bool
    ) -> Self:
        view = self.__class__.__new__(self.__class__)
        view._items = self._items
        view._key = self._key
        view._lo = lo
        view._hi = hi
        view._descending = descending
        return view

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(self)})"

    # ordering helpers, always in ascending terms

    def _k(self, value: T) -> Any:  # noqa: ANN401
        return value if self._key is None else self._key(value)

    def _too_low(self, value: T) -> bool:
        if self._lo is None:
            return False
        k, lo = self._k(value), self._k(self._lo.value)
        return k < lo if self._lo.inclusive else not lo < k

    def _too_high(self, value: T) -> bool:
        if self._hi is None:
            return False
        k, hi = self._k(value), self._k(self._hi.value)
        return hi < k if self._hi.inclusive else not k < hi

    def _in_range(self, value: T) -> bool:
        return not self._too_low(value) and not self._too_high(value)

    def _in_closed_range(self, value: T) -> bool:
        k = self._k(value)
        if self._lo is not None and k < self._k(self._lo.value):
            return False
        return self._hi is None or not self._k(self._hi.value) < k

    def _start(self) -> int:
        if self._lo is None:
            return 0
        find = bisect_left if self._lo.inclusive else bisect_right
        return find(self._items, self._k(self._lo.value), key=self._key)

    def _stop(self) -> int:
        if self._hi is None:
            return len(self._items)
        find = bisect_right if self._hi.inclusive else bisect_left
        return find(self._items, self._k(self._hi.value), key=self._key)

    def _window(self) -> list[T]:
        items = self._items[self._start() : self._stop()]
        return items[::-1] if self._descending else items

    def _index_of(self, value: T) -> Option[int]:
        k = self._k(value)
        idx = bisect_left(self._items, k, key=self._key)
        if (
            idx < len(self._items)
            and self._k(self._items[idx]) == k
            and self._in_range(value)
        ):
            return Some(idx)
        return NONE

    def _before(self, value: T, *, inclusive: bool) -> Option[T]:
        find = bisect_right if inclusive else bisect_left
        idx = min(find(self._items, self._k(value), key=self._key), self._stop()) - 1
        return Some(self._items[idx]) if idx >= self._start() else NONE

    def _after(self, value: T, *, inclusive: bool) -> Option[T]:
        find = bisect_left if inclusive else bisect_right
        idx = max(find(self._items, self._k(value), key=self._key), self._start())
        return Some(self._items[idx]) if idx < self._stop() else NONE

    def _edge(self, *, last: bool) -> Option[T]:
        start, stop = self._start(), self._stop()
        if start >= stop:
            return NONE
        return Some(self._items[stop - 1 if last else start])

    def _check_bound(self, value: T, *, inclusive: bool) -> None:
        inside = self._in_range(value) if inclusive else self._in_closed_range(value)
        if not inside:
            msg = f"{value!r} is outside the range of this view"
            raise ValueError(msg)

    # Set protocol

    def __contains__(self, value: object) -> bool:
        return self._index_of(value).is_some()  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        return iter(self._window())

    def __len__(self) -> int:
        return max(0, self._stop() - self._start())

    def add(self, value: T) -> None:
        if not self._in_range(value):
            msg = f"{value!r} is outside the range of this view"
            raise ValueError(msg)
        k = self._k(value)
        idx = bisect_left(self._items, k, key=self._key)
        if idx == len(self._items) or self._k(self._items[idx]) != k:
            self._items.insert(idx, value)

    def discard(self, value: T) -> None:
        match self._index_of(value):
            case Some(idx):
                del self._items[idx]

    # navigation

    @property
    def key(self) -> KeyFn[T]:
        return self._key

    def lower(self, value: T) -> Option[T]:
        if self._descending:
            return self._after(value, inclusive=False)
        return self._before(value, inclusive=False)

    def floor(self, value: T) -> Option[T]:
        if self._descending:
            return self._after(value, inclusive=True)
        return self._before(value, inclusive=True)

    def ceiling(self, value: T) -> Option[T]:
        if self._descending:
            return self._before(value, inclusive=True)
        return self._after(value, inclusive=True)

    def higher(self, value: T) -> Option[T]:
        if self._descending:
            return self._before(value, inclusive=False)
        return self._after(value, inclusive=False)

    def first(self) -> Option[T]:
        return self._edge(last=self._descending)

    def last(self) -> Option[T]:
        return self._edge(last=not self._descending)

    def poll_first(self) -> Option[T]:
        first = self.first()
        if first.is_some():
            self.discard(first.unwrap())
        return first

    def poll_last(self) -> Option[T]:
        last = self.last()
        if last.is_some():
            self.discard(last.unwrap())
        return last

    # range views

    def descending_set(self) -> Self:
        return self._derive(self._lo, self._hi, descending=not self._descending)

    def head_set(self, to: T, *, inclusive: bool = False) -> Self:
        self._check_bound(to, inclusive=inclusive)
        bound = _Bound(to, inclusive)
        if self._descending:
            return self._derive(bound, self._hi, descending=True)
        return self._derive(self._lo, bound, descending=False)

    def tail_set(self, from_: T, *, inclusive: bool = True) -> Self:
        self._check_bound(from_, inclusive=inclusive)
        bound = _Bound(from_, inclusive)
        if self._descending:
            return self._derive(self._lo, bound, descending=True)
        return self._derive(bound, self._hi, descending=False)

    def sub_set(
        self,
        from_: T,
        to: T,
        *,
        from_inclusive: bool = True,
        to_inclusive: bool = False,
    ) -> Self:
        low, high = _Bound(from_, from_inclusive), _Bound(to, to_inclusive)
        if self._descending:
            low, high = high, low
        if self._k(high.value) < self._k(low.value):
            msg = f"from_ {from_!r} comes after to {to!r}"
            raise ValueError(msg)
        self._check_bound(low.value, inclusive=low.inclusive)
        self._check_bound(high.value, inclusive=high.inclusive)
        return self._derive(low, high, descending=self._descending)

    def cursor(self) -> Cursor[T]:
        return CollectionCursor(self)
