import logging

from ._chain import LazyChain, Supplier, chained
from ._core import Config, get_config, set_config
from ._cursor import (
    CollectionCursor,
    Cursor,
    EmptyCursor,
    FilterCursor,
    IterCursor,
    ListCursor,
    as_cursor,
    empty,
)
from ._entry import Entry, EntryDecorator, EntrySet, MapCursor, MapEntry
from ._errors import IllegalStateError, NullArgumentError, UnsupportedOperationError
from ._navigable import NavigableSet, TreeSet
from ._results import NONE, NoneOption, Option, OptionUnwrapError, Some
from ._transforming import (
    TransformingDecorator,
    TransformingList,
    TransformingMapping,
    TransformingNavigableSet,
    TransformingQueue,
    TransformingSet,
    transformed,
    transforming,
)
from ._unmodifiable import (
    Unmodifiable,
    UnmodifiableCollection,
    UnmodifiableCursor,
    UnmodifiableEntry,
    UnmodifiableEntrySet,
    UnmodifiableListCursor,
    UnmodifiableMapCursor,
    UnmodifiableMapping,
    UnmodifiableNavigableSet,
    UnmodifiableSequence,
    UnmodifiableSet,
    unmodifiable,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "NONE",
    "CollectionCursor",
    "Config",
    "Cursor",
    "EmptyCursor",
    "Entry",
    "EntryDecorator",
    "EntrySet",
    "FilterCursor",
    "IllegalStateError",
    "IterCursor",
    "LazyChain",
    "ListCursor",
    "MapCursor",
    "MapEntry",
    "NavigableSet",
    "NoneOption",
    "NullArgumentError",
    "Option",
    "OptionUnwrapError",
    "Some",
    "Supplier",
    "TransformingDecorator",
    "TransformingList",
    "TransformingMapping",
    "TransformingNavigableSet",
    "TransformingQueue",
    "TransformingSet",
    "TreeSet",
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
    "UnsupportedOperationError",
    "as_cursor",
    "chained",
    "empty",
    "get_config",
    "set_config",
    "transformed",
    "transforming",
    "unmodifiable",
]
