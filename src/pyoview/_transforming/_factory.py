from __future__ import annotations

from collections import deque
from collections.abc import Callable, MutableMapping, MutableSequence, MutableSet
from typing import Any, overload

from .._errors import require_not_none
from .._navigable import NavigableSet
from ._base import TransformingDecorator
from ._collection import TransformingList, TransformingQueue, TransformingSet
from ._mapping import TransformingMapping
from ._navigable import TransformingNavigableSet


@overload
def transforming[T](
    data: NavigableSet[T], func: Callable[[Any], T]
) -> TransformingNavigableSet[T]: ...
@overload
def transforming[K, V](
    data: MutableMapping[K, V], func: Callable[[Any], V]
) -> TransformingMapping[K, V]: ...
@overload
def transforming[T](data: deque[T], func: Callable[[Any], T]) -> TransformingQueue[T]: ...
@overload
def transforming[T](data: MutableSet[T], func: Callable[[Any], T]) -> TransformingSet[T]: ...
@overload
def transforming[T](
    data: MutableSequence[T], func: Callable[[Any], T]
) -> TransformingList[T]: ...
def transforming(data: Any, func: Callable[[Any], Any]) -> Any:
    """Decorate **data** so that every element added to it is first passed through **func**.

    The decorator is picked from the kind of **data**: navigable set, mapping (values are transformed),
    `deque`, set, then sequence. Elements already present are left untouched.

    Args:
        data (Any): The mutable container to decorate. Not copied.
        func (Callable[[Any], Any]): The transformation applied on insertion.

    Returns:
        Any: The decorator.

    Raises:
        NullArgumentError: If **data** or **func** is `None`.
        TypeError: If **data** is not a mutable container of a supported kind.

    Example:
    ```python
    >>> import pyoview as pv
    >>> data = {"a": "1"}
    >>> counts = pv.transforming(data, int)
    >>> counts["b"] = "2"
    >>> data
    {'a': '1', 'b': 2}

    ```
    """
    data = require_not_none(data, "data")
    func = require_not_none(func, "func")
    match data:
        case NavigableSet():
            return TransformingNavigableSet(data, func)
        case MutableMapping():
            return TransformingMapping(data, value_func=func)
        case deque():
            return TransformingQueue(data, func)
        case MutableSet():
            return TransformingSet(data, func)
        case MutableSequence():
            return TransformingList(data, func)
        case _:
            msg = f"cannot build a transforming decorator of {type(data).__name__}"
            raise TypeError(msg)


def transformed(data: Any, func: Callable[[Any], Any]) -> Any:
    """Like `transforming`, but also pass the elements already in **data** through **func**, once.

    Example:
    ```python
    >>> import pyoview as pv
    >>> data = ["1", "2"]
    >>> numbers = pv.transformed(data, int)
    >>> numbers.append("3")
    >>> data
    [1, 2, 3]

    ```
    """
    decorated: TransformingDecorator[Any] = transforming(data, func)
    decorated._rewrite_existing()  # noqa: SLF001
    return decorated
