"""Tests for the transforming decorators."""

import logging
from collections import deque

import pytest

import pyoview as pv


class TestTransformingList:
    """Insertion into a decorated list converts strings to integers."""

    def test_insertion_paths(self) -> None:
        """Every insertion path stores the transformed value."""
        data: list[object] = []
        numbers = pv.TransformingList(data, int)
        numbers.append("1")
        numbers.insert(0, "0")
        numbers.extend(["2", "3"])
        numbers += ["4"]
        numbers[1] = "10"
        numbers[4:] = ["40", "50"]
        assert data == [0, 10, 2, 3, 40, 50]

    def test_lookups_are_not_transformed(self) -> None:
        """in, index, count and remove take stored values."""
        numbers = pv.TransformingList([], int)
        numbers.append("7")
        assert 7 in numbers
        assert "7" not in numbers
        assert numbers.index(7) == 0
        assert numbers.count("7") == 0
        with pytest.raises(ValueError):  # noqa: PT011
            numbers.remove("7")
        numbers.remove(7)
        assert len(numbers) == 0

    def test_existing_elements_untouched(self) -> None:
        """Decorating does not rewrite what is already there."""
        data: list[object] = ["1", "2"]
        numbers = pv.TransformingList(data, int)
        numbers.append("3")
        assert data == ["1", "2", 3]
        numbers.reverse()
        assert data == [3, "2", "1"]

    def test_cursor_set_and_add(self) -> None:
        """set() and add() through the cursor are transformed."""
        data: list[object] = [1, 2]
        cursor = pv.TransformingList(data, int).cursor()
        next(cursor)
        cursor.set("5")
        cursor.add("6")
        assert data == [5, 6, 2]

    def test_delegation(self) -> None:
        """Equality and str come from the decorated list."""
        numbers = pv.TransformingList([1, 2], int)
        assert numbers == [1, 2]
        assert str(numbers) == "[1, 2]"
        assert repr(numbers) == "TransformingList(1, 2)"
        assert numbers.inner() == [1, 2]


class TestTransformingQueue:
    """Both ends of a decorated deque."""

    def test_both_ends(self) -> None:
        """Additions at either end are transformed."""
        data: deque[object] = deque()
        queue = pv.TransformingQueue(data, int)
        assert queue.offer("2")
        queue.appendleft("1")
        queue.extendleft(["0"])
        queue.append("3")
        assert list(data) == [0, 1, 2, 3]
        assert queue.popleft() == 0
        assert queue.pop() == 3

    def test_poll_peek(self) -> None:
        """poll and peek return NONE on an empty queue."""
        queue = pv.TransformingQueue(deque(), str.upper)
        assert queue.peek() == pv.NONE
        assert queue.poll() == pv.NONE
        queue.offer("a")
        assert queue.peek() == pv.Some("A")
        assert queue.poll() == pv.Some("A")
        assert len(queue) == 0


class TestTransformingSet:
    """Insertion into decorated sets."""

    def test_set(self) -> None:
        """Uniqueness is decided on transformed values."""
        data: set[object] = set()
        numbers = pv.TransformingSet(data, int)
        numbers.add("1")
        numbers.update(["01", "2"])
        numbers |= {"3"}
        assert data == {1, 2, 3}
        numbers.discard(1)
        assert data == {2, 3}
        assert numbers & {2} == {2}

    def test_set_cursor_removal(self) -> None:
        """The cursor removes from the decorated set."""
        data: set[object] = {1, 2}
        cursor = pv.TransformingSet(data, int).cursor()
        for _ in cursor:
            cursor.remove()
        assert data == set()

    def test_sorted_set(self) -> None:
        """Sorted sets order the transformed values, views included."""
        data = pv.TreeSet[int]()
        numbers = pv.TransformingNavigableSet(data, int)
        for text in ("30", "10", "20"):
            numbers.add(text)
        assert list(data) == [10, 20, 30]
        assert numbers.first() == pv.Some(10)
        assert numbers.ceiling(15) == pv.Some(20)
        high = numbers.tail_set(20)
        assert isinstance(high, pv.TransformingNavigableSet)
        high.add("25")
        assert list(data) == [10, 20, 25, 30]
        with pytest.raises(ValueError, match="outside the range"):
            high.add("5")
        assert list(reversed(numbers)) == [30, 25, 20, 10]
        assert numbers.poll_first() == pv.Some(10)


class TestTransformingMapping:
    """Keys and values of a decorated mapping."""

    def test_key_and_value(self) -> None:
        """Both sides are transformed on insertion."""
        data: dict[object, object] = {}
        scores = pv.TransformingMapping(data, key_func=str.lower, value_func=int)
        scores["Alice"] = "3"
        scores.update({"BOB": "4"})
        scores.setdefault("Carol", "5")
        assert data == {"alice": 3, "bob": 4, "carol": 5}
        assert scores["alice"] == 3
        del scores["bob"]
        assert "bob" not in scores

    def test_one_side_only(self) -> None:
        """An omitted function leaves that side unchanged."""
        data: dict[object, object] = {}
        pv.TransformingMapping(data, value_func=int)["K"] = "1"
        pv.TransformingMapping(data, key_func=str.lower)["Q"] = "2"
        assert data == {"K": 1, "q": "2"}

    def test_entries_set_value(self) -> None:
        """Values set through entries are transformed, keys are not."""
        data: dict[object, object] = {"A": 1}
        scores = pv.TransformingMapping(data, key_func=str.lower, value_func=int)
        (entry,) = list(scores.entries())
        assert entry.set_value("9") == 1
        assert data == {"A": 9}

    def test_repr(self) -> None:
        """The repr shows the decorated mapping."""
        assert repr(pv.TransformingMapping({"a": 1})) == "TransformingMapping({'a': 1})"


class TestFactories:
    """transforming() and transformed()."""

    @pytest.mark.parametrize(
        ("data", "expected"),
        [
            (pv.TreeSet(), pv.TransformingNavigableSet),
            ({}, pv.TransformingMapping),
            (deque(), pv.TransformingQueue),
            (set(), pv.TransformingSet),
            ([], pv.TransformingList),
        ],
    )
    def test_dispatch(self, data: object, expected: type) -> None:
        """Each container kind gets its own decorator."""
        assert type(pv.transforming(data, str)) is expected

    def test_mapping_transforms_values(self) -> None:
        """Mappings are decorated on their values."""
        data: dict[str, object] = {}
        pv.transforming(data, int)["a"] = "1"
        assert data == {"a": 1}

    def test_null_arguments(self) -> None:
        """Neither the container nor the function may be None."""
        with pytest.raises(pv.NullArgumentError):
            pv.transforming(None, int)
        with pytest.raises(pv.NullArgumentError):
            pv.transforming([], None)  # type: ignore[arg-type]
        with pytest.raises(pv.NullArgumentError):
            pv.TransformingList([], None)  # type: ignore[arg-type]

    def test_unsupported(self) -> None:
        """Immutable containers cannot be decorated."""
        with pytest.raises(TypeError):
            pv.transforming((1, 2), str)

    @pytest.mark.parametrize(
        ("data", "expected"),
        [
            (["1", "2"], [1, 2]),
            (deque(["1", "2"]), deque([1, 2])),
            ({"1", "2"}, {1, 2}),
            ({"a": "1"}, {"a": 1}),
        ],
    )
    def test_transformed_rewrites_existing(self, data: object, expected: object) -> None:
        """transformed() converts what the container already holds."""
        decorated = pv.transformed(data, int)
        assert decorated.inner() == expected
        assert data == expected

    def test_transformed_sorted_set(self) -> None:
        """transformed() reorders a sorted set by transformed value."""
        data = pv.TreeSet([1, 2, 3])
        pv.transformed(data, lambda x: -x)
        assert list(data) == [-3, -2, -1]

    def test_transformed_range_view_rollback(self) -> None:
        """A rewrite leaving a range view restores the original elements."""
        data = pv.TreeSet([1, 2, 3, 4])
        with pytest.raises(ValueError, match="outside the range"):
            pv.transformed(data.head_set(3), lambda x: x + 10)
        assert list(data) == [1, 2, 3, 4]

    def test_transformed_classmethod(self) -> None:
        """Decorator classes offer transformed() too."""
        data: dict[str, object] = {"A": "1"}
        pv.TransformingMapping.transformed(data, str.lower, int)
        assert data == {"a": 1}

    def test_transformed_logs(self, caplog: pytest.LogCaptureFixture) -> None:
        """The one-off rewrite is logged at DEBUG level."""
        with caplog.at_level(logging.DEBUG, logger="pyoview"):
            pv.transformed(["1", "2"], int)
        assert "TransformingList transformed 2 existing element(s)" in caplog.text
