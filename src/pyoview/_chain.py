from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from ._cursor import Cursor, as_cursor
from ._errors import IllegalStateError, require_not_none
from ._results import NONE, NoneOption, Option, Some

logger = logging.getLogger(__name__)

type Supplier[T] = Callable[[int], Option[Iterable[T]]]
"""Map a 1-based acquisition count to the next sub-sequence, or `NONE` when there are no more."""


class LazyChain[T](Cursor[T]):
    """A cursor over sub-sequences that are only acquired when traversal reaches them.

    The **supplier** is called with 1 for the first sub-sequence, 2 for the second, and so on.
    It returns `Some(sub_sequence)` or `NONE` to end the chain. Each count is requested at most once,
    and never after `NONE` was returned, so the supplier may open a resource per call.
    Any other return value raises `TypeError` when it is received.

    Sub-sequences that are not already a `Cursor` are adapted with `as_cursor`; empty ones are skipped.

    `remove()` is forwarded to the sub-sequence that produced the last element, even when `has_next()`
    has since moved on to a later one.

    Args:
        supplier (Supplier[T]): Provider of the sub-sequences.

    Example:
    ```python
    >>> import pyoview as pv
    >>> parts = [[], ["A", "B", "C"], [], ["D"]]
    >>> def supplier(count: int) -> pv.Option[list[str]]:
    ...     return pv.Some(parts[count - 1]) if count <= len(parts) else pv.NONE
    >>> list(pv.LazyChain(supplier))
    ['A', 'B', 'C', 'D']

    ```
    """

    __slots__ = (
        "_current",
        "_current_sub",
        "_exhausted",
        "_last_used",
        "_removable",
        "_subsequences",
        "_supplier",
    )

    def __init__(self, supplier: Supplier[T]) -> None:
        self._supplier = require_not_none(supplier, "supplier")
        self._subsequences: list[Cursor[T]] = []
        self._current = -1
        self._current_sub: Option[Cursor[T]] = NONE
        self._last_used: Option[Cursor[T]] = NONE
        self._exhausted = False
        self._removable = False

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(acquired={self.acquired()}, "
            f"exhausted={self._exhausted})"
        )

    def acquired(self) -> int:
        """Number of sub-sequences obtained from the supplier so far."""
        return len(self._subsequences)

    def _acquire(self) -> bool:
        if self._exhausted:
            return False
        count = len(self._subsequences) + 1
        match self._supplier(count):
            case Some(source):
                self._subsequences.append(as_cursor(source))
                logger.debug("acquired sub-sequence #%d", count)
                return True
            case NoneOption():
                self._exhausted = True
                logger.debug("supplier ended the chain at request #%d", count)
                return False
            case other:
                msg = f"supplier must return an Option, got {type(other).__name__}"
                raise TypeError(msg)

    def has_next(self) -> bool:
        while True:
            match self._current_sub:
                case Some(sub) if sub.has_next():
                    return True
            if self._current + 1 >= len(self._subsequences) and not self._acquire():
                return False
            self._current += 1
            self._current_sub = Some(self._subsequences[self._current])

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        sub = self._current_sub.unwrap()
        item = next(sub)
        self._last_used = Some(sub)
        self._removable = True
        return item

    def remove(self) -> None:
        if not self._removable:
            msg = "remove() needs a preceding next()"
            raise IllegalStateError(msg)
        self._last_used.unwrap().remove()
        self._removable = False


def chained[T](*sources: Iterable[T]) -> LazyChain[T]:
    """Chain already available **sources** into one cursor.

    Removal goes to the source that produced the element, as for any `LazyChain`.

    Args:
        *sources (Iterable[T]): The sub-sequences, in order.

    Returns:
        LazyChain[T]: A chain over **sources**.

    Example:
    ```python
    >>> import pyoview as pv
    >>> first, second = [1, 2], [3]
    >>> chain = pv.chained(first, second)
    >>> for item in chain:
    ...     if item % 2:
    ...         chain.remove()
    >>> first, second
    ([2], [])

    ```
    """
    for source in sources:
        require_not_none(source, "source")

    def _supplier(count: int) -> Option[Iterable[T]]:
        return Some(sources[count - 1]) if count <= len(sources) else NONE

    return LazyChain(_supplier)
