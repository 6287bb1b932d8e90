from __future__ import annotations

import itertools
from collections.abc import Collection, Iterable, Iterator, Mapping, Set
from typing import Any, NoReturn

import cytoolz as cz

from .._core import Pipeable, get_config
from .._cursor import Cursor, as_cursor
from .._entry import Entry, EntrySet, MapCursor
from .._errors import require_not_none
from .._results import NONE, Option, Some
from ._base import Unmodifiable, UnmodifiableMapCursor, rejected


class UnmodifiableMapping[K, V](Unmodifiable, Pipeable, Mapping[K, V]):
    """A read-only view of a `Mapping`.

    `keys()`, `values()`, `items()` and `entries()` return read-only views; entries obtained from `entries()`
    reject `set_value`. `cursor()` walks the keys and rejects `remove()`, `map_cursor()` also exposes the values.
    `first_key`, `last_key`, `next_key` and `previous_key` navigate the keys in iteration order.

    Args:
        data (Mapping[K, V]): The mapping to expose. Not copied.

    Example:
    ```python
    >>> import pyoview as pv
    >>> data = {"a": 1}
    >>> view = pv.unmodifiable(data)
    >>> data["b"] = 2
    >>> view["b"], len(view.keys())
    (2, 2)
    >>> del view["a"]
    Traceback (most recent call last):
        ...
    pyoview._errors.UnsupportedOperationError: __delitem__() is not supported by a read-only view

    ```
    """

    __slots__ = ("_inner",)

    def __init__(self, data: Mapping[K, V]) -> None:
        self._inner = require_not_none(data, "data")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().dict_repr(self._inner)})"

    def __str__(self) -> str:
        return str(self._inner)

    def __eq__(self, other: object) -> bool:
        return other is self or self._inner == other

    def __hash__(self) -> int:
        return hash(self._inner)

    def __getitem__(self, key: K) -> V:
        return self._inner[key]

    def __contains__(self, key: object) -> bool:
        return key in self._inner

    def __iter__(self) -> Iterator[K]:
        return iter(self._inner)

    def __reversed__(self) -> Iterator[K]:
        return reversed(self._inner)  # type: ignore[call-overload]

    def __len__(self) -> int:
        return len(self._inner)

    def keys(self) -> Set[K]:  # type: ignore[override]
        from ._factory import unmodifiable

        return unmodifiable(self._inner.keys())

    def values(self) -> Collection[V]:  # type: ignore[override]
        from ._factory import unmodifiable

        return unmodifiable(self._inner.values())

    def items(self) -> Set[tuple[K, V]]:  # type: ignore[override]
        from ._factory import unmodifiable

        return unmodifiable(self._inner.items())

    def entries(self) -> Set[Entry[K, V]]:
        from ._factory import unmodifiable

        return unmodifiable(EntrySet(self._inner))  # type: ignore[arg-type]

    def cursor(self) -> Cursor[K]:
        from ._factory import unmodifiable

        return unmodifiable(as_cursor(self._inner))

    def map_cursor(self) -> UnmodifiableMapCursor[K, V]:
        """A key cursor also exposing the current `value`; `set_value` and `remove` are rejected."""
        from ._factory import unmodifiable

        return unmodifiable(MapCursor(self._inner))  # type: ignore[arg-type]

    # navigation in iteration order (insertion order for a dict)

    def first_key(self) -> Option[K]:
        return Some(cz.itertoolz.first(self._inner)) if self._inner else NONE

    def last_key(self) -> Option[K]:
        return Some(cz.itertoolz.last(self._inner)) if self._inner else NONE

    def next_key(self, key: K) -> Option[K]:
        """The key following **key**, or `NONE` if **key** is the last one or absent.

        Example:
        ```python
        >>> import pyoview as pv
        >>> view = pv.unmodifiable({"a": 1, "b": 2, "c": 3})
        >>> view.next_key("a"), view.previous_key("a"), view.last_key()
        (Some(value='b'), NONE, Some(value='c'))

        ```
        """
        for current, following in itertools.pairwise(self._inner):
            if current == key:
                return Some(following)
        return NONE

    def previous_key(self, key: K) -> Option[K]:
        """The key preceding **key**, or `NONE` if **key** is the first one or absent."""
        for preceding, current in itertools.pairwise(self._inner):
            if current == key:
                return Some(preceding)
        return NONE

    def __setitem__(self, key: K, value: V) -> NoReturn:  # noqa: ARG002
        raise rejected("__setitem__")

    def __delitem__(self, key: K) -> NoReturn:  # noqa: ARG002
        raise rejected("__delitem__")

    def __ior__(self, other: Mapping[K, V]) -> NoReturn:  # noqa: ARG002, PYI034
        raise rejected("__ior__")

    def pop(self, key: K, *default: V) -> NoReturn:  # noqa: ARG002
        raise rejected("pop")

    def popitem(self) -> NoReturn:
        raise rejected("popitem")

    def clear(self) -> NoReturn:
        raise rejected("clear")

    def update(self, *args: Mapping[K, V] | Iterable[tuple[K, V]], **kwargs: V) -> NoReturn:  # noqa: ARG002
        raise rejected("update")

    def setdefault(self, key: K, default: Any = None) -> NoReturn:  # noqa: ARG002, ANN401
        raise rejected("setdefault")
