from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from typing import Any

from ._format import dict_repr, iter_repr


@dataclass(slots=True, frozen=True)
class Config:
    """Display settings shared by every `__repr__` of the package.

    Attributes:
        max_items (int): Number of elements shown before the repr is truncated with `...`.
        depth (int): Nesting depth passed to `pprint.pformat` for each element.
        width (int): Line width passed to `pprint.pformat`.
        compact (bool): Whether `pprint.pformat` packs sequences on one line.
    """

    max_items: int = 20
    depth: int = 3
    width: int = 80
    compact: bool = True

    def iter_repr(self, v: Iterable[Any]) -> str:
        return iter_repr(
            v, self.max_items, self.depth, self.width, compact=self.compact
        )

    def dict_repr(self, v: Mapping[Any, Any]) -> str:
        return dict_repr(
            v, self.max_items, self.depth, self.width, compact=self.compact
        )


_CONFIG = Config()


def get_config() -> Config:
    """Return the active `Config`."""
    return _CONFIG


def set_config(**changes: Any) -> Config:  # noqa: ANN401
    """Replace the active `Config` with a copy carrying **changes**.

    Args:
        **changes (Any): Field values to override, e.g. `max_items=5`.

    Returns:
        Config: The new active configuration.

    Example:
    ```python
    >>> import pyoview as pv
    >>> previous = pv.get_config()
    >>> pv.set_config(max_items=2).max_items
    2
    >>> repr(pv.TreeSet(range(5)))
    'TreeSet(0, 1, ...)'
    >>> pv.set_config(max_items=previous.max_items).max_items
    20

    ```
    """
    global _CONFIG  # noqa: PLW0603
    _CONFIG = replace(_CONFIG, **changes)
    return _CONFIG
