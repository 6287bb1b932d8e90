from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, MutableMapping, Set
from typing import Any

from ._core import Pipeable, get_config
from ._cursor import CollectionCursor, Cursor
from ._errors import IllegalStateError, require_not_none
from ._results import NONE, Option, Some


class Entry[K, V](ABC, Pipeable):
    """A key/value pair whose value can be replaced.

    Two entries are equal when their keys and their values are equal, whatever their concrete type.
    The hash combines the key and value hashes, and the string form is `key=value`.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def key(self) -> K: ...

    @property
    @abstractmethod
    def value(self) -> V: ...

    @abstractmethod
    def set_value(self, value: V) -> V:
        """Replace the value and return the previous one."""
        ...

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Entry):
            return NotImplemented
        return self.key == other.key and self.value == other.value

    def __hash__(self) -> int:
        return hash(self.key) ^ hash(self.value)

    def __str__(self) -> str:
        return f"{self.key}={self.value}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.key!r}, {self.value!r})"


class MapEntry[K, V](Entry[K, V]):
    """A standalone, mutable `Entry`.

    Example:
    ```python
    >>> import pyoview as pv
    >>> entry = pv.MapEntry("a", 1)
    >>> entry.set_value(2)
    1
    >>> str(entry)
    'a=2'

    ```
    """

    __slots__ = ("_key", "_value")

    def __init__(self, key: K, value: V) -> None:
        self._key = key
        self._value = value

    @property
    def key(self) -> K:
        return self._key

    @property
    def value(self) -> V:
        return self._value

    def set_value(self, value: V) -> V:
        previous = self._value
        self._value = value
        return previous


class _MappingEntry[K, V](Entry[K, V]):
    __slots__ = ("_key", "_mapping")

    def __init__(self, mapping: MutableMapping[K, V], key: K) -> None:
        self._mapping = mapping
        self._key = key

    @property
    def key(self) -> K:
        return self._key

    @property
    def value(self) -> V:
        return self._mapping[self._key]

    def set_value(self, value: V) -> V:
        previous = self._mapping[self._key]
        self._mapping[self._key] = value
        return previous


class _EntryCursor[K, V](Cursor[Entry[K, V]]):
    __slots__ = ("_keys", "_mapping")

    def __init__(self, mapping: MutableMapping[K, V]) -> None:
        self._mapping = mapping
        self._keys = CollectionCursor(mapping)

    def has_next(self) -> bool:
        return self._keys.has_next()

    def __next__(self) -> Entry[K, V]:
        return _MappingEntry(self._mapping, next(self._keys))

    def remove(self) -> None:
        self._keys.remove()


class MapCursor[K, V](Cursor[K]):
    """A cursor over the keys of a mapping that can also read and replace the current value.

    After `next()` returned a key, `key` and `value` describe the current mapping, `set_value` writes
    through to the mapping and `remove()` deletes the key. All four raise `IllegalStateError` before the
    first `next()` and after `remove()`.

    Args:
        mapping (MutableMapping[K, V]): The mapping to walk. Not copied.

    Example:
    ```python
    >>> import pyoview as pv
    >>> data = {"a": 1, "b": 2}
    >>> cursor = pv.MapCursor(data)
    >>> for key in cursor:
    ...     if key == "a":
    ...         _ = cursor.set_value(cursor.value * 10)
    ...     else:
    ...         cursor.remove()
    >>> data
    {'a': 10}

    ```
    """

    __slots__ = ("_current", "_keys", "_mapping")

    def __init__(self, mapping: MutableMapping[K, V]) -> None:
        self._mapping = require_not_none(mapping, "mapping")
        self._keys = CollectionCursor(mapping)
        self._current: Option[K] = NONE

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._current!r})"

    def _require_current(self, operation: str) -> K:
        match self._current:
            case Some(key):
                return key
            case _:
                msg = f"{operation} needs a preceding next()"
                raise IllegalStateError(msg)

    def has_next(self) -> bool:
        return self._keys.has_next()

    def __next__(self) -> K:
        key = next(self._keys)
        self._current = Some(key)
        return key

    @property
    def key(self) -> K:
        return self._require_current("key")

    @property
    def value(self) -> V:
        return self._mapping[self._require_current("value")]

    def set_value(self, value: V) -> V:
        """Replace the value of the current key and return the previous one."""
        key = self._require_current("set_value()")
        previous = self._mapping[key]
        self._mapping[key] = value
        return previous

    def remove(self) -> None:
        self._require_current("remove()")
        self._keys.remove()
        self._current = NONE


class EntrySet[K, V](Pipeable, Set[Entry[K, V]]):
    """A live set of the entries of a mapping.

    Entries read their value from the mapping and `set_value` writes through to it.
    The `cursor()` removes the key of the last produced entry from the mapping.

    Args:
        mapping (MutableMapping[K, V]): The mapping to expose. Not copied.

    Example:
    ```python
    >>> import pyoview as pv
    >>> data = {"a": 1}
    >>> for entry in pv.EntrySet(data):
    ...     _ = entry.set_value(entry.value + 10)
    >>> data
    {'a': 11}

    ```
    """

    __slots__ = ("_mapping",)

    def __init__(self, mapping: MutableMapping[K, V]) -> None:
        self._mapping = require_not_none(mapping, "mapping")

    @classmethod
    def _from_iterable(cls, it: Iterable[Any]) -> frozenset[Any]:
        return frozenset(it)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(map(str, self))})"

    def __len__(self) -> int:
        return len(self._mapping)

    def __iter__(self) -> Iterator[Entry[K, V]]:
        mapping = self._mapping
        return (_MappingEntry(mapping, key) for key in mapping)

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, Entry):
            return False
        key: Any = item.key
        return key in self._mapping and self._mapping[key] == item.value

    def cursor(self) -> Cursor[Entry[K, V]]:
        return _EntryCursor(self._mapping)


class EntryDecorator[K, V](Entry[K, V]):
    """Base for decorators of a single `Entry`.

    Every operation, including equality, hashing and the string form, is answered by the wrapped entry,
    so a decorator is interchangeable with the entry it wraps.

    Args:
        entry (Entry[K, V]): The entry to decorate. Not copied.

    Raises:
        NullArgumentError: If **entry** is `None`.
    """

    __slots__ = ("_entry",)

    def __init__(self, entry: Entry[K, V]) -> None:
        self._entry = require_not_none(entry, "entry")

    @property
    def key(self) -> K:
        return self._entry.key

    @property
    def value(self) -> V:
        return self._entry.value

    def set_value(self, value: V) -> V:
        return self._entry.set_value(value)

    def __eq__(self, other: object) -> bool:
        return other is self or self._entry == other

    def __hash__(self) -> int:
        return hash(self._entry)

    def __str__(self) -> str:
        return str(self._entry)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._entry!r})"
