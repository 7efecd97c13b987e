"""Selection of values inside decoded JSON documents by path."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Sequence, Union

__all__ = ["Wildcard", "WILDCARD", "json_select"]


@dataclass(frozen=True)
class Wildcard:
    """A path component matching every child of a value."""

    def __repr__(self) -> str:
        return "Wildcard()"


WILDCARD = Wildcard()

PathComponent = Union[str, int, Wildcard]


def _children(data: Any) -> Iterable[Any]:
    if isinstance(data, dict):
        return data.values()
    if isinstance(data, list):
        return data
    if data is None:
        return ()
    return (data,)


def _select(data: Any, path: Sequence[PathComponent]) -> Iterator[Any]:
    if not path:
        yield data
        return
    head, rest = path[0], path[1:]
    if isinstance(head, Wildcard):
        for child in _children(data):
            yield from _select(child, rest)
    elif isinstance(head, str):
        if isinstance(data, dict) and head in data:
            yield from _select(data[head], rest)
    elif isinstance(head, int) and not isinstance(head, bool):
        if isinstance(data, list) and 0 <= head < len(data):
            yield from _select(data[head], rest)
    else:
        raise TypeError(f"Bad JSON path component: {head!r}")


def json_select(data: Any, path: Iterable[PathComponent]) -> Iterator[Any]:
    """Yield every value reached by following ``path`` from ``data``.

    A string selects an object key, an integer a list index, and a
    Wildcard every child (object values, list items; a scalar is its own
    single child, null has none). Missing keys and indices select nothing.
    """
    return _select(data, tuple(path))