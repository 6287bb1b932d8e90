from __future__ import annotations

import logging
from abc import abstractmethod
from collections.abc import Iterator
from typing import Any, Self

from .._core import CommonBase, get_config

logger = logging.getLogger(__name__)


class TransformingDecorator[C](CommonBase[C]):
    """Base for decorators that transform values on their way into a container.

    Only insertion is transformed. Lookups, membership tests and removal by value receive the caller's
    argument unchanged, so they must be given values as they are stored.

    Elements already in the container when it is decorated are left as they are; use `transformed()`
    to also rewrite them once.
    """

    __slots__ = ()

    @classmethod
    def transformed(cls, data: C, *args: Any, **kwargs: Any) -> Self:  # noqa: ANN401
        """Decorate **data**, then transform the elements it already holds.

        Args:
            data (C): The container to decorate.
            *args (Any): Remaining positional constructor arguments (the transforming function).
            **kwargs (Any): Remaining keyword constructor arguments.

        Returns:
            Self: The new decorator.
        """
        decorated = cls(data, *args, **kwargs)
        decorated._rewrite_existing()
        return decorated

    def _rewrite_existing(self) -> None:
        count = self._transform_existing()
        logger.debug(
            "%s transformed %d existing element(s)", self.__class__.__name__, count
        )

    @abstractmethod
    def _transform_existing(self) -> int: ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(self._inner)})"  # type: ignore[arg-type]

    def __str__(self) -> str:
        return str(self._inner)

    def __eq__(self, other: object) -> bool:
        return other is self or self._inner == other

    def __hash__(self) -> int:
        return hash(self._inner)

    def __contains__(self, value: object) -> bool:
        return value in self._inner  # type: ignore[operator]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._inner)  # type: ignore[call-overload]

    def __len__(self) -> int:
        return len(self._inner)  # type: ignore[arg-type]
