"""Values carrying a hash computed once, for repeated lookups."""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

__all__ = ["PreHashed"]

T = TypeVar("T")


class PreHashed(Generic[T]):
    """A value with its hash computed once at construction.

    It compares equal to the wrapped value, so it can be used to look up
    plain keys in dicts and sets. ``hasher`` must agree with the hash of
    those keys.
    """

    __slots__ = ("_value", "_hash")

    def __init__(self, value: T, hasher: Callable[[T], int] = hash) -> None:
        self._value = value
        self._hash = hasher(value)

    @classmethod
    def make(cls, *args: Any, **kwargs: Any) -> PreHashed:
        """Build the value and hash it.

        With a ``factory`` keyword, the value is ``factory(*args, **kwargs)``;
        without one, the single positional argument is the value. A
        ``hasher`` keyword replaces the built-in ``hash``.
        """
        factory = kwargs.pop("factory", None)
        hasher = kwargs.pop("hasher", hash)
        if factory is None:
            if len(args) != 1 or kwargs:
                raise TypeError("make() needs a factory or exactly one value")
            return cls(args[0], hasher)
        return cls(factory(*args, **kwargs), hasher)

    @property
    def value(self) -> T:
        return self._value

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PreHashed):
            return self._value == other._value
        return self._value == other

    def __repr__(self) -> str:
        return f"PreHashed({self._value!r})"