"""Error taxonomy shared by cursors, chains and decorators.

Exhaustion of a cursor is signalled with the built-in `StopIteration`, as for any Python iterator.
"""


class IllegalStateError(RuntimeError):
    """`remove()` called before any element was produced, or twice for the same element."""


class UnsupportedOperationError(TypeError):
    """Mutation attempted through a read-only view, or through a cursor that cannot remove."""


class NullArgumentError(TypeError):
    """A chain, decorator or entry wrapper was built around `None`."""


def require_not_none[T](value: T | None, name: str) -> T:
    if value is None:
        msg = f"{name} must not be None"
        raise NullArgumentError(msg)
    return value
