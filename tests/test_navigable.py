"""Tests for TreeSet and its range views."""

import pytest

import pyoview as pv


def _numbers() -> pv.TreeSet[int]:
    return pv.TreeSet([50, 10, 40, 20, 30])


class TestTreeSet:
    """Ordering, uniqueness and neighbour queries."""

    def test_sorted_and_unique(self) -> None:
        """Elements are kept sorted without duplicates."""
        numbers = pv.TreeSet([3, 1, 3, 2, 1])
        assert list(numbers) == [1, 2, 3]
        numbers.add(2)
        assert len(numbers) == 3

    def test_key(self) -> None:
        """Ordering and uniqueness follow the key function."""
        words = pv.TreeSet(["bb", "a", "ccc", "dd"], key=len)
        assert list(words) == ["a", "bb", "ccc"]
        assert "zz" in words
        assert words.key is len

    def test_queries(self) -> None:
        """Neighbour queries return Some or NONE."""
        numbers = _numbers()
        assert numbers.lower(10) == pv.NONE
        assert numbers.lower(25) == pv.Some(20)
        assert numbers.floor(30) == pv.Some(30)
        assert numbers.ceiling(30) == pv.Some(30)
        assert numbers.higher(30) == pv.Some(40)
        assert numbers.higher(50) == pv.NONE

    def test_first_last_poll(self) -> None:
        """poll_* remove what first/last return."""
        numbers = _numbers()
        assert numbers.poll_first() == pv.Some(10)
        assert numbers.poll_last() == pv.Some(50)
        assert list(numbers) == [20, 30, 40]
        empty = pv.TreeSet[int]()
        assert empty.first() == pv.NONE
        assert empty.poll_last() == pv.NONE

    def test_set_protocol(self) -> None:
        """TreeSet behaves like any MutableSet."""
        numbers = _numbers()
        numbers.discard(30)
        numbers.discard(99)
        assert numbers == {10, 20, 40, 50}
        with pytest.raises(KeyError):
            numbers.remove(99)
        numbers |= {60}
        assert 60 in numbers

    def test_update_and_retain(self) -> None:
        """Bulk mutators go through the cursor and add()."""
        numbers = pv.TreeSet([1])
        numbers.update([3, 2], (5,))
        assert list(numbers) == [1, 2, 3, 5]
        assert numbers.retain(lambda x: x % 2 == 1)
        assert list(numbers) == [1, 3, 5]
        assert not numbers.remove_if(lambda x: x > 10)

    def test_repr(self) -> None:
        """The repr lists the elements in order."""
        assert repr(pv.TreeSet([2, 1])) == "TreeSet(1, 2)"


class TestRangeViews:
    """Live views over a part of a TreeSet."""

    def test_head_tail_sub(self) -> None:
        """Bounds and inclusiveness are honoured."""
        numbers = _numbers()
        assert list(numbers.head_set(30)) == [10, 20]
        assert list(numbers.head_set(30, inclusive=True)) == [10, 20, 30]
        assert list(numbers.tail_set(30)) == [30, 40, 50]
        assert list(numbers.tail_set(30, inclusive=False)) == [40, 50]
        assert list(numbers.sub_set(20, 40)) == [20, 30]
        assert list(
            numbers.sub_set(20, 40, from_inclusive=False, to_inclusive=True)
        ) == [30, 40]

    def test_descending(self) -> None:
        """The descending view reverses order and neighbour queries."""
        desc = _numbers().descending_set()
        assert list(desc) == [50, 40, 30, 20, 10]
        assert desc.first() == pv.Some(50)
        assert desc.higher(30) == pv.Some(20)
        assert desc.lower(30) == pv.Some(40)
        assert list(desc.head_set(30)) == [50, 40]
        assert list(desc.descending_set()) == [10, 20, 30, 40, 50]
        assert list(reversed(_numbers())) == [50, 40, 30, 20, 10]

    def test_views_are_live(self) -> None:
        """Changes show both ways between a set and its views."""
        numbers = _numbers()
        window = numbers.sub_set(15, 45)
        numbers.add(25)
        assert list(window) == [20, 25, 30, 40]
        window.discard(20)
        assert 20 not in numbers
        assert window.poll_last() == pv.Some(40)
        assert list(numbers) == [10, 25, 30, 50]
        assert 10 not in window
        assert len(window) == 2

    def test_out_of_range(self) -> None:
        """Views reject elements and bounds outside their range."""
        window = _numbers().head_set(30)
        with pytest.raises(ValueError, match="outside the range"):
            window.add(35)
        with pytest.raises(ValueError, match="outside the range"):
            window.tail_set(40)
        with pytest.raises(ValueError, match="comes after"):
            _numbers().sub_set(40, 20)

    def test_nested_views(self) -> None:
        """Views of views narrow the range further."""
        numbers = _numbers()
        nested = numbers.tail_set(20).head_set(50).descending_set().tail_set(30)
        assert list(nested) == [30, 20]
        nested.add(25)
        assert 25 in numbers

    def test_view_cursor(self) -> None:
        """Cursors of a view remove from the backing set."""
        numbers = _numbers()
        cursor = numbers.tail_set(40).descending_cursor()
        assert next(cursor) == 50
        cursor.remove()
        assert list(numbers) == [10, 20, 30, 40]
