"""Tests for display configuration and Option helpers."""

from collections.abc import Iterator

import pytest

import pyoview as pv


@pytest.fixture
def restore_config() -> Iterator[None]:
    """Put back the active configuration after the test."""
    previous = pv.get_config()
    yield
    pv.set_config(
        max_items=previous.max_items,
        depth=previous.depth,
        width=previous.width,
        compact=previous.compact,
    )


@pytest.mark.usefixtures("restore_config")
class TestConfig:
    """Repr truncation driven by the active Config."""

    def test_defaults(self) -> None:
        """Default settings show up to twenty elements."""
        config = pv.get_config()
        assert config == pv.Config()
        assert repr(pv.TreeSet(range(3))) == "TreeSet(0, 1, 2)"

    def test_truncation(self) -> None:
        """Long reprs end with an ellipsis."""
        pv.set_config(max_items=3)
        assert repr(pv.TreeSet(range(10))) == "TreeSet(0, 1, 2, ...)"
        assert repr(pv.unmodifiable(list(range(4)))) == "UnmodifiableSequence(0, 1, 2, ...)"
        assert repr(pv.unmodifiable(dict.fromkeys("abcd", 0))).endswith("...)")

    def test_config_is_frozen(self) -> None:
        """Configs are replaced, never mutated."""
        config = pv.get_config()
        with pytest.raises(AttributeError):
            config.max_items = 1  # type: ignore[misc]
        assert pv.set_config(width=40) is not config
        assert pv.get_config().width == 40

    def test_unknown_setting(self) -> None:
        """Unknown settings are rejected."""
        with pytest.raises(TypeError):
            pv.set_config(colour=True)


class TestOption:
    """Option values returned by queries."""

    def test_from(self) -> None:
        """None maps to NONE, anything else to Some."""
        assert pv.Option.from_(0) == pv.Some(0)
        assert pv.Option.from_(None) is pv.NONE

    def test_combinators(self) -> None:
        """map, and_then and or_else chain lookups."""
        numbers = pv.TreeSet([1, 5, 9])
        assert numbers.higher(5).map(lambda x: x * 10) == pv.Some(90)
        assert numbers.higher(9).map(lambda x: x * 10) == pv.NONE
        assert numbers.first().and_then(numbers.higher) == pv.Some(5)
        assert numbers.lower(1).or_else(numbers.first) == pv.Some(1)
        assert numbers.lower(1).unwrap_or(0) == 0
        assert numbers.lower(1).unwrap_or_else(lambda: -1) == -1

    def test_unwrap_none(self) -> None:
        """Unwrapping NONE raises with the given message."""
        with pytest.raises(pv.OptionUnwrapError):
            pv.NONE.unwrap()
        with pytest.raises(pv.OptionUnwrapError, match="empty set"):
            pv.TreeSet[int]().first().expect("empty set")
