"""Tests for read-only views built with unmodifiable()."""

from collections.abc import Callable, Iterator
from typing import Any

import pytest

import pyoview as pv

type Mutation = Callable[[Any], object]

_SET_MUTATIONS: list[Mutation] = [
    lambda s: s.add(0),
    lambda s: s.remove(1),
    lambda s: s.discard(1),
    lambda s: s.clear(),
    lambda s: s.pop(),
    lambda s: s.update([0]),
    lambda s: s.remove_if(lambda _: True),
    lambda s: s.retain(lambda _: False),
    lambda s: s.poll_first(),
    lambda s: s.poll_last(),
]


def _derived_views(view: pv.NavigableSet[int], depth: int) -> Iterator[pv.NavigableSet[int]]:
    """Every range view reachable from **view** in at most **depth** derivations."""
    yield view
    if depth == 0:
        return
    low, high = view.first().unwrap(), view.last().unwrap()
    for child in (
        view.descending_set(),
        view.head_set(high, inclusive=True),
        view.tail_set(low),
        view.sub_set(low, high, to_inclusive=True),
    ):
        yield from _derived_views(child, depth - 1)


class TestFactory:
    """Dispatch and idempotence of unmodifiable()."""

    @pytest.mark.parametrize(
        ("target", "expected"),
        [
            (pv.ListCursor([1]), pv.UnmodifiableListCursor),
            (pv.IterCursor([1]), pv.UnmodifiableCursor),
            (pv.MapEntry("a", 1), pv.UnmodifiableEntry),
            (pv.EntrySet({"a": 1}), pv.UnmodifiableEntrySet),
            (pv.TreeSet([1]), pv.UnmodifiableNavigableSet),
            ({"a": 1}, pv.UnmodifiableMapping),
            ({1}, pv.UnmodifiableSet),
            (frozenset({1}), pv.UnmodifiableSet),
            ([1], pv.UnmodifiableSequence),
            ((1,), pv.UnmodifiableSequence),
            ({}.values(), pv.UnmodifiableCollection),
        ],
    )
    def test_dispatch(self, target: Any, expected: type) -> None:  # noqa: ANN401
        """Each kind of target gets its own view type."""
        assert type(pv.unmodifiable(target)) is expected

    def test_idempotent(self) -> None:
        """Wrapping a view returns the very same object."""
        view = pv.unmodifiable(pv.TreeSet([1, 2]))
        assert pv.unmodifiable(view) is view
        cursor = view.cursor()
        assert pv.unmodifiable(cursor) is cursor

    def test_none(self) -> None:
        """None is rejected with NullArgumentError."""
        with pytest.raises(pv.NullArgumentError):
            pv.unmodifiable(None)  # type: ignore[call-overload]

    def test_unsupported(self) -> None:
        """Objects that are not collections are rejected."""
        with pytest.raises(TypeError):
            pv.unmodifiable(42)  # type: ignore[call-overload]


class TestNavigableView:
    """Read-only navigable sets and every view derived from them."""

    def test_queries_pass_through(self) -> None:
        """Neighbour queries answer from the wrapped set."""
        view = pv.unmodifiable(pv.TreeSet([10, 20, 30]))
        assert view.lower(20) == pv.Some(10)
        assert view.floor(20) == pv.Some(20)
        assert view.ceiling(21) == pv.Some(30)
        assert view.higher(30) == pv.NONE
        assert (view.first(), view.last()) == (pv.Some(10), pv.Some(30))
        assert list(reversed(view)) == [30, 20, 10]

    def test_view_is_live(self) -> None:
        """Changes to the wrapped set are visible through the view."""
        data = pv.TreeSet([1, 2])
        view = pv.unmodifiable(data)
        window = view.tail_set(2)
        data.add(3)
        assert list(window) == [2, 3]
        assert 3 in view

    @pytest.mark.parametrize("mutation", _SET_MUTATIONS)
    def test_derived_views_reject_mutation(self, mutation: Mutation) -> None:
        """Every view derived from a read-only set, to any depth, is read-only."""
        data = pv.TreeSet(range(1, 9))
        for view in _derived_views(pv.unmodifiable(data), depth=3):
            assert isinstance(view, pv.Unmodifiable)
            with pytest.raises(pv.UnsupportedOperationError):
                mutation(view)
        assert list(data) == list(range(1, 9))

    def test_cursors_reject_removal(self) -> None:
        """Ascending and descending cursors cannot remove."""
        view = pv.unmodifiable(pv.TreeSet([1, 2]))
        for cursor in (view.cursor(), view.descending_cursor()):
            next(cursor)
            with pytest.raises(pv.UnsupportedOperationError):
                cursor.remove()

    def test_in_place_set_operators(self) -> None:
        """In-place set algebra is rejected, plain set algebra works."""
        view = pv.unmodifiable(pv.TreeSet([1, 2]))
        assert view & {2, 3} == {2}
        with pytest.raises(pv.UnsupportedOperationError):
            view -= {1}
        assert list(view) == [1, 2]


class TestCollectionViews:
    """Read-only sequences, sets and mappings."""

    def test_sequence(self) -> None:
        """Sequences keep read access and reject edits."""
        data = [3, 1, 2]
        view = pv.unmodifiable(data)
        assert view[0] == 3
        assert view.index(2) == 2
        assert view.count(1) == 1
        assert list(reversed(view)) == [2, 1, 3]
        assert isinstance(view[1:], pv.UnmodifiableSequence)
        for mutation in (
            lambda v: v.append(4),
            lambda v: v.insert(0, 4),
            lambda v: v.extend([4]),
            lambda v: v.sort(),
            lambda v: v.reverse(),
            lambda v: v.pop(),
            lambda v: v.clear(),
            lambda v: v.__setitem__(0, 4),
            lambda v: v.__delitem__(0),
        ):
            with pytest.raises(pv.UnsupportedOperationError):
                mutation(view)
        assert data == [3, 1, 2]

    def test_slice_of_list_is_snapshot(self) -> None:
        """Slicing a list view wraps the copy made by the list."""
        data = [0, 1, 2, 3]
        window = pv.unmodifiable(data)[2:]
        data[2] = 99
        assert list(window) == [2, 3]
        assert isinstance(window, pv.Unmodifiable)

    def test_list_cursor(self) -> None:
        """The list cursor walks both ways but cannot edit."""
        cursor = pv.unmodifiable(["a", "b"]).list_cursor(1)
        assert cursor.previous() == "a"
        assert cursor.next_index() == 0
        with pytest.raises(pv.UnsupportedOperationError):
            cursor.set("z")
        with pytest.raises(pv.UnsupportedOperationError):
            cursor.add("z")

    def test_mapping(self) -> None:
        """Mappings and every view of them are read-only."""
        data = {"a": 1, "b": 2}
        view = pv.unmodifiable(data)
        assert view["a"] == 1
        assert view.get("c") is None
        assert isinstance(view.keys(), pv.Unmodifiable)
        assert isinstance(view.values(), pv.Unmodifiable)
        assert isinstance(view.items(), pv.Unmodifiable)
        assert sorted(view.keys()) == ["a", "b"]
        with pytest.raises(pv.UnsupportedOperationError):
            view["c"] = 3
        with pytest.raises(pv.UnsupportedOperationError):
            view.update(c=3)
        with pytest.raises(pv.UnsupportedOperationError):
            view.setdefault("c", 3)
        cursor = view.cursor()
        next(cursor)
        with pytest.raises(pv.UnsupportedOperationError):
            cursor.remove()
        assert data == {"a": 1, "b": 2}

    def test_mapping_entries(self) -> None:
        """Entries of a read-only mapping reject set_value."""
        data = {"a": 1}
        entries = pv.unmodifiable(data).entries()
        assert isinstance(entries, pv.UnmodifiableEntrySet)
        (entry,) = list(entries)
        assert entry == pv.MapEntry("a", 1)
        with pytest.raises(pv.UnsupportedOperationError):
            entry.set_value(2)
        cursor = entries.cursor()
        assert isinstance(next(cursor), pv.UnmodifiableEntry)
        with pytest.raises(pv.UnsupportedOperationError):
            cursor.remove()
        assert data == {"a": 1}


class TestDelegation:
    """Equality, hashing and string forms come from the wrapped object."""

    def test_equality(self) -> None:
        """A view equals what it wraps."""
        assert pv.unmodifiable([1, 2]) == [1, 2]
        assert pv.unmodifiable({1}) == {1}
        assert pv.unmodifiable({"a": 1}) == {"a": 1}

    def test_hash(self) -> None:
        """Views of hashable objects hash like them."""
        assert hash(pv.unmodifiable((1, 2))) == hash((1, 2))
        assert hash(pv.unmodifiable(frozenset({1}))) == hash(frozenset({1}))
        with pytest.raises(TypeError):
            hash(pv.unmodifiable([1]))

    def test_str(self) -> None:
        """str() is the wrapped object's."""
        assert str(pv.unmodifiable([1, 2])) == "[1, 2]"
        assert str(pv.unmodifiable(pv.MapEntry("k", "v"))) == "k=v"

    def test_repr(self) -> None:
        """repr() names the view type."""
        assert repr(pv.unmodifiable([1, 2])) == "UnmodifiableSequence(1, 2)"
        assert repr(pv.unmodifiable({"a": 1})) == "UnmodifiableMapping({'a': 1})"

    def test_pipe(self) -> None:
        """Views can be piped into functions."""
        assert pv.unmodifiable([1, 2, 3]).into(sum) == 6


class TestOrderedMappingView:
    """Map cursor and key navigation on read-only mappings."""

    def test_map_cursor(self) -> None:
        """The map cursor reads values and rejects every change."""
        data = {"a": 1, "b": 2}
        view = pv.unmodifiable(data)
        cursor = view.map_cursor()
        assert isinstance(cursor, pv.UnmodifiableMapCursor)
        assert pv.unmodifiable(cursor) is cursor
        assert [(key, cursor.value) for key in cursor] == [("a", 1), ("b", 2)]
        assert cursor.key == "b"
        with pytest.raises(pv.UnsupportedOperationError):
            cursor.set_value(3)
        with pytest.raises(pv.UnsupportedOperationError):
            cursor.remove()
        assert data == {"a": 1, "b": 2}

    def test_factory_wraps_map_cursor(self) -> None:
        """unmodifiable() recognises map cursors."""
        assert type(pv.unmodifiable(pv.MapCursor({}))) is pv.UnmodifiableMapCursor

    def test_key_navigation(self) -> None:
        """Keys are navigated in insertion order."""
        view = pv.unmodifiable({"x": 0, "y": 0, "z": 0})
        assert view.first_key() == pv.Some("x")
        assert view.last_key() == pv.Some("z")
        assert view.next_key("x") == pv.Some("y")
        assert view.next_key("z") == pv.NONE
        assert view.previous_key("z") == pv.Some("y")
        assert view.previous_key("x") == pv.NONE
        assert view.next_key("missing") == pv.NONE

    def test_key_navigation_empty(self) -> None:
        """An empty mapping has no first or last key."""
        view = pv.unmodifiable({})
        assert view.first_key() == pv.NONE
        assert view.last_key() == pv.NONE

    def test_key_navigation_is_live(self) -> None:
        """Keys added to the wrapped dict are seen by navigation."""
        data = {"a": 1}
        view = pv.unmodifiable(data)
        data["b"] = 2
        assert view.last_key() == pv.Some("b")
        assert view.next_key("a") == pv.Some("b")
