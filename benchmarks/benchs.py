"""Benchmarks for pyoview package - benchs.py."""

from collections import deque

import pyoview as pv

from ._registery import bench

# Helper functions
# ------------------------------------------------------------


def _chunks(data: range) -> list[list[int]]:
    """Split **data** in sub-lists of 16, with an empty one after each."""
    return [
        part
        for start in range(0, len(data), 16)
        for part in (list(data[start : start + 16]), [])
    ]


def _supplier(parts: list[list[int]]) -> pv.Supplier[int]:
    def _get(count: int) -> pv.Option[list[int]]:
        return pv.Some(parts[count - 1]) if count <= len(parts) else pv.NONE

    return _get


def _as_text(data: range) -> list[str]:
    return [str(x) for x in data]


# Benchmark classes
# ------------------------------------------------------------


class Chain:
    """Benchmark traversal of lazy chains."""

    @bench(gen=_chunks)
    @staticmethod
    def lazy_chain(data: list[list[int]]) -> object:
        """Full traversal through a supplier, skipping empty sub-lists."""
        return sum(pv.LazyChain(_supplier(data)))

    @bench(gen=_chunks)
    @staticmethod
    def chained(data: list[list[int]]) -> object:
        """Full traversal of already available sub-lists."""
        return sum(pv.chained(*data))

    @bench(gen=_chunks)
    @staticmethod
    def chain_remove_odd(data: list[list[int]]) -> object:
        """Traversal removing every odd element from its sub-list."""
        chain = pv.chained(*data)
        for item in chain:
            if item % 2:
                chain.remove()
        return data

    @bench(gen=_chunks)
    @staticmethod
    def filtered(data: list[list[int]]) -> object:
        """Traversal of a chain through a filtering cursor."""
        return sum(pv.FilterCursor(pv.chained(*data), lambda x: x % 3 == 0))


class ReadOnly:
    """Benchmark access through read-only views."""

    @bench()
    @staticmethod
    def sequence_iter(data: list[int]) -> object:
        """Iterate a read-only sequence."""
        return sum(pv.unmodifiable(data))

    @bench()
    @staticmethod
    def sequence_index(data: list[int]) -> object:
        """Random access through a read-only sequence."""
        view = pv.unmodifiable(data)
        return sum(view[i] for i in range(len(view)))

    @bench(gen=lambda size: dict.fromkeys(size, 0))
    @staticmethod
    def mapping_lookup(data: dict[int, int]) -> object:
        """Key lookup through a read-only mapping."""
        view = pv.unmodifiable(data)
        return sum(view[k] for k in view)

    @bench(gen=pv.TreeSet)
    @staticmethod
    def navigable_ranges(data: pv.TreeSet[int]) -> object:
        """Derive nested range views and walk them."""
        view = pv.unmodifiable(data)
        size = len(view)
        return sum(view.sub_set(size // 4, size).descending_set().head_set(size // 2))


class Transforming:
    """Benchmark insertion through transforming decorators."""

    @bench(gen=_as_text)
    @staticmethod
    def list_append(data: list[str]) -> object:
        """Append converted strings to a list."""
        numbers = pv.transforming([], int)
        for text in data:
            numbers.append(text)
        return numbers

    @bench(gen=_as_text)
    @staticmethod
    def queue_offer(data: list[str]) -> object:
        """Offer converted strings to a queue, then drain it."""
        queue = pv.transforming(deque(), int)
        for text in data:
            queue.offer(text)
        while queue.poll().is_some():
            pass
        return queue

    @bench(gen=_as_text)
    @staticmethod
    def tree_set_add(data: list[str]) -> object:
        """Add converted strings to a sorted set."""
        numbers = pv.transforming(pv.TreeSet(), int)
        for text in data:
            numbers.add(text)
        return numbers
