"""Splitting and joining of strings."""

from __future__ import annotations

from typing import Iterable, Iterator

__all__ = ["split", "join"]


def _pieces(text: str, separator: str) -> Iterator[str]:
    start = 0
    while True:
        end = text.find(separator, start)
        if end < 0:
            yield text[start:]
            return
        yield text[start:end]
        start = end + len(separator)


def split(text: str, separator: str) -> Iterator[str]:
    """Lazily yield the pieces of ``text`` between occurrences of ``separator``.

    Empty pieces are kept, so leading, trailing or doubled separators give
    empty strings, and an empty text gives a single empty piece.
    """
    if not separator:
        raise ValueError("empty separator")
    return _pieces(text, separator)


def join(items: Iterable[object], separator: str) -> str:
    """Format each item and join the results with ``separator``."""
    return separator.join(str(item) for item in items)