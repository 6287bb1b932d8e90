from __future__ import annotations

from collections.abc import Callable, Iterator, MutableMapping
from typing import Any

import cytoolz as cz

from .._core import get_config
from .._cursor import CollectionCursor, Cursor
from .._entry import EntrySet, MapCursor
from .._errors import require_not_none
from ._base import TransformingDecorator


class TransformingMapping[K, V](
    TransformingDecorator[MutableMapping[K, V]], MutableMapping[K, V]
):
    """A `MutableMapping` decorator mapping keys and values through two functions on insertion.

    Either function may be omitted, in which case that side is stored unchanged.
    Item access, deletion and `in` take keys as they are stored.

    Values set through `entries()` are transformed with **value_func**, their keys are kept as stored.

    Args:
        data (MutableMapping[K, V]): The mapping to decorate. Not copied.
        key_func (Callable[[Any], K] | None): The transformation applied to keys.
        value_func (Callable[[Any], V] | None): The transformation applied to values.

    Example:
    ```python
    >>> import pyoview as pv
    >>> data = {"kept": "0"}
    >>> scores = pv.TransformingMapping(data, key_func=str.upper, value_func=int)
    >>> scores["alice"] = "12"
    >>> scores.update(bob="7")
    >>> data
    {'kept': '0', 'ALICE': 12, 'BOB': 7}
    >>> for entry in scores.entries():
    ...     _ = entry.set_value("1")
    >>> data
    {'kept': 1, 'ALICE': 1, 'BOB': 1}

    ```
    """

    __slots__ = ("_key_func", "_value_func")

    def __init__(
        self,
        data: MutableMapping[K, V],
        key_func: Callable[[Any], K] | None = None,
        value_func: Callable[[Any], V] | None = None,
    ) -> None:
        super().__init__(require_not_none(data, "data"))
        self._key_func: Callable[[Any], K] = key_func or cz.functoolz.identity
        self._value_func: Callable[[Any], V] = value_func or cz.functoolz.identity

    def _transform_existing(self) -> int:
        rewritten = cz.dicttoolz.keymap(
            self._key_func, cz.dicttoolz.valmap(self._value_func, dict(self._inner))
        )
        count = len(self._inner)
        self._inner.clear()
        self._inner.update(rewritten)
        return count

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().dict_repr(self._inner)})"

    def __getitem__(self, key: K) -> V:
        return self._inner[key]

    def __setitem__(self, key: Any, value: Any) -> None:  # noqa: ANN401
        self._inner[self._key_func(key)] = self._value_func(value)

    def __delitem__(self, key: K) -> None:
        del self._inner[key]

    def __iter__(self) -> Iterator[K]:
        return iter(self._inner)

    def entries(self) -> EntrySet[K, V]:
        return EntrySet(self.__class__(self._inner, value_func=self._value_func))

    def cursor(self) -> Cursor[K]:
        return CollectionCursor(self)

    def map_cursor(self) -> MapCursor[K, V]:
        """A key cursor whose `set_value` transforms values like `entries()` does."""
        return MapCursor(self.__class__(self._inner, value_func=self._value_func))
