from ._base import (
    Unmodifiable,
    UnmodifiableCursor,
    UnmodifiableEntry,
    UnmodifiableListCursor,
    UnmodifiableMapCursor,
)
from ._collection import (
    UnmodifiableCollection,
    UnmodifiableEntrySet,
    UnmodifiableSequence,
    UnmodifiableSet,
)
from ._factory import unmodifiable
from ._mapping import UnmodifiableMapping
from ._navigable import UnmodifiableNavigableSet

__all__ = [
    "Unmodifiable",
    "UnmodifiableCollection",
    "UnmodifiableCursor",
    "UnmodifiableEntry",
    "UnmodifiableEntrySet",
    "UnmodifiableListCursor",
    "UnmodifiableMapCursor",
    "UnmodifiableMapping",
    "UnmodifiableNavigableSet",
    "UnmodifiableSequence",
    "UnmodifiableSet",
    "unmodifiable",
]
