from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Never, TypeIs


class OptionUnwrapError(RuntimeError): ...


class Option[T](ABC):
    """A value that is either present (`Some`) or absent (`NONE`).

    Returned wherever a lookup can legitimately find nothing: the next element of a cursor,
    the neighbours of a value in a `NavigableSet`, the head of a queue, or the next
    sub-sequence handed to a `LazyChain` by its supplier.
    """

    __slots__ = ()

    @staticmethod
    def from_[U](value: U | None) -> Option[U]:
        """Turn a `None`-or-value result into an `Option`.

        Example:
        ```python
        >>> from pyoview._results import Option
        >>> Option.from_({"a": 1}.get("a"))
        Some(value=1)
        >>> Option.from_({"a": 1}.get("b"))
        NONE

        ```
        """
        return NONE if value is None else Some(value)

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """Whether a value is present."""
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """Whether no value is present."""
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Return the value, failing loudly when there is none.

        Raises:
            OptionUnwrapError: On `NONE`.

        Example:
        ```python
        >>> import pyoview as pv
        >>> numbers = pv.TreeSet([4, 8])
        >>> numbers.higher(4).unwrap()
        8
        >>> numbers.higher(8).unwrap()
        Traceback (most recent call last):
            ...
        pyoview._results._option.OptionUnwrapError: called `unwrap` on a `None`

        ```
        """
        ...

    def expect(self, msg: str) -> T:
        """Like `unwrap`, with **msg** in the error raised on `NONE`."""
        if self.is_some():
            return self.unwrap()
        msg = f"{msg} (called `expect` on a `None`)"
        raise OptionUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """Return the value, or **default** on `NONE`.

        Example:
        ```python
        >>> import pyoview as pv
        >>> pv.TreeSet([4, 8]).floor(3).unwrap_or(0)
        0

        ```
        """
        return self.unwrap() if self.is_some() else default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        return self.unwrap() if self.is_some() else f()

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """Apply **f** to the value if there is one.

        Example:
        ```python
        >>> import pyoview as pv
        >>> cursor = pv.ListCursor(["ab"])
        >>> cursor.next().map(len)
        Some(value=2)
        >>> cursor.next().map(len)
        NONE

        ```
        """
        if self.is_some():
            return Some(f(self.unwrap()))
        return NONE

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Chain a second lookup that may itself find nothing."""
        if self.is_some():
            return f(self.unwrap())
        return NONE

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        return self if self.is_some() else f()


@dataclass(slots=True)
class Some[T](Option[T]):
    value: T

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True, repr=False)
class NoneOption(Option[Any]):
    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        msg = "called `unwrap` on a `None`"
        raise OptionUnwrapError(msg)


NONE: Option[Any] = NoneOption()
