from collections.abc import Iterable, Mapping
from pprint import pformat
from typing import Any

import cytoolz as cz


def dict_repr(
    v: Mapping[Any, Any],
    max_items: int = 20,
    depth: int = 3,
    width: int = 80,
    *,
    compact: bool = True,
) -> str:
    truncated = dict(cz.itertoolz.take(max_items, v.items()))
    suffix = "..." if len(v) > max_items else ""
    return pformat(truncated, depth=depth, width=width, compact=compact) + suffix


def iter_repr(
    v: Iterable[Any],
    max_items: int = 20,
    depth: int = 3,
    width: int = 80,
    *,
    compact: bool = True,
) -> str:
    head = tuple(cz.itertoolz.take(max_items + 1, v))
    parts = [
        pformat(item, depth=depth, width=width, compact=compact)
        for item in head[:max_items]
    ]
    if len(head) > max_items:
        parts.append("...")
    return ", ".join(parts)
