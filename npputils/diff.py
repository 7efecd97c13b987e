"""Line-based diff using the Myers O(ND) shortest-edit-script algorithm."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Dict, List, Optional, Sequence, TextIO, Union

from npputils.text import split

__all__ = ["EditOp", "edit_path", "diff"]

Lines = Union[str, Sequence[str]]

_GREY = "\x1b[90m"
_GREEN = "\x1b[32m"
_RED = "\x1b[31m"
_RESET = "\x1b[0m"


class EditOp(Enum):
    """One step of an edit script."""

    KEEP = "keep"
    ADD = "add"
    DEL = "del"


def _as_lines(text: Lines) -> List[str]:
    if isinstance(text, str):
        return list(split(text, "\n"))
    return list(text)


def _forward(a: Sequence[str], b: Sequence[str]) -> List[Dict[int, int]]:
    """Return, for each depth ``d`` explored, the furthest-x table of depth ``d - 1``."""
    n, m = len(a), len(b)
    v: Dict[int, int] = {-1: 0, 0: 0, 1: 0}
    frames: List[Dict[int, int]] = []
    for d in range(n + m + 1):
        prev = dict(v)
        frames.append(prev)
        for k in range(-d, d + 1, 2):
            if k == -d or (k != d and prev.get(k - 1, 0) < prev.get(k + 1, 0)):
                x = prev.get(k + 1, 0)
            else:
                x = prev.get(k - 1, 0) + 1
            y = x - k
            while x < n and y < m and a[x] == b[y]:
                x += 1
                y += 1
            v[k] = x
            if x >= n and y >= m:
                return frames
    raise AssertionError("Entered theoretically unreachable section")


def _backtrack(frames: List[Dict[int, int]], n: int, m: int) -> List[EditOp]:
    ops: List[EditOp] = []
    x, y = n, m
    k = x - y
    d = len(frames) - 1
    while (x > 0 or y > 0) and d >= 0:
        prev = frames[d]
        if k == -d or (k != d and prev.get(k - 1, 0) < prev.get(k + 1, 0)):
            k += 1
        else:
            k -= 1
        prev_x = prev.get(k, 0)
        prev_y = prev_x - k
        while x > prev_x and y > prev_y:
            x -= 1
            y -= 1
            ops.append(EditOp.KEEP)
        if d > 0:
            ops.append(EditOp.ADD if x == prev_x else EditOp.DEL)
        x, y = prev_x, prev_y
        d -= 1
    ops.reverse()
    return ops


def edit_path(original: Lines, edited: Lines) -> Optional[List[EditOp]]:
    """Shortest edit script turning ``original`` into ``edited``, line by line.

    Strings are split on ``\\n``; sequences are taken as lines already.
    Returns None when both are identical.
    """
    a = _as_lines(original)
    b = _as_lines(edited)
    ops = _backtrack(_forward(a, b), len(a), len(b))
    if all(op is EditOp.KEEP for op in ops):
        return None
    return ops


def diff(original: str, edited: str, out: Optional[TextIO] = None) -> bool:
    """Write a coloured line diff to ``out`` (stdout by default).

    Returns True if the texts differ, False (writing nothing) otherwise.
    """
    stream = out if out is not None else sys.stdout
    a = _as_lines(original)
    b = _as_lines(edited)
    path = edit_path(a, b)
    if path is None:
        return False
    a_lines = iter(a)
    b_lines = iter(b)
    for op in path:
        if op is EditOp.KEEP:
            line = next(a_lines)
            next(b_lines)
            stream.write(f"{_GREY}  |{line}\n{_RESET}")
        elif op is EditOp.ADD:
            stream.write(f"{_GREEN}+ |{next(b_lines)}\n{_RESET}")
        else:
            stream.write(f"{_RED}- |{next(a_lines)}\n{_RESET}")
    return True