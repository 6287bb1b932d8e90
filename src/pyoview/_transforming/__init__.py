from ._base import TransformingDecorator
from ._collection import TransformingList, TransformingQueue, TransformingSet
from ._factory import transformed, transforming
from ._mapping import TransformingMapping
from ._navigable import TransformingNavigableSet

__all__ = [
    "TransformingDecorator",
    "TransformingList",
    "TransformingMapping",
    "TransformingNavigableSet",
    "TransformingQueue",
    "TransformingSet",
    "transformed",
    "transforming",
]
