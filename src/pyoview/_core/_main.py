from __future__ import annotations

from abc import ABC
from collections.abc import Callable
from typing import Concatenate, Self


class Pipeable:
    """Mixin letting cursors, views and decorators be passed along a call chain."""

    __slots__ = ()

    def into[**P, R](
        self,
        func: Callable[Concatenate[Self, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Hand the object to **func** and return what it produces.

        `view.into(f, x)` reads left to right where `f(view, x)` would not, which keeps long
        expressions over views and cursors in one chain.

        Args:
            func (Callable[Concatenate[Self, P], R]): Receives the object first, then **args** and **kwargs**.
            *args (P.args): Extra positional arguments for **func**.
            **kwargs (P.kwargs): Extra keyword arguments for **func**.

        Returns:
            R: Whatever **func** returns.

        Example:
        ```python
        >>> import pyoview as pv
        >>> pv.unmodifiable([1, 2, 3]).into(sum)
        6

        ```
        """
        return func(self, *args, **kwargs)

    def inspect[**P](
        self,
        func: Callable[Concatenate[Self, P], object],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Self:
        """Call **func** on the object for its side effect, then keep chaining on the object.

        The result of **func** is discarded.

        Example:
        ```python
        >>> import pyoview as pv
        >>> pv.TreeSet([3, 1, 2]).inspect(print).first().unwrap()
        TreeSet(1, 2, 3)
        1

        ```
        """
        func(self, *args, **kwargs)
        return self


class CommonBase[C](ABC, Pipeable):
    """Base class for decorators owning a reference to the container they decorate.

    The container is never copied, every operation of the decorator reaches the object the caller passed in.

    Args:
        data (C): The decorated container.
    """

    __slots__ = ("_inner",)

    _inner: C

    def __init__(self, data: C) -> None:
        self._inner = data

    def inner(self) -> C:
        """Return the decorated container itself."""
        return self._inner
