"""Closed integer intervals whose bounds may be infinite."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

__all__ = ["Interval"]


@dataclass(frozen=True)
class Interval:
    """``[lower, upper]``; a bound of ``None`` is infinite."""

    lower: Optional[int]
    upper: Optional[int]

    def __post_init__(self) -> None:
        if self.lower is not None and self.upper is not None and self.lower > self.upper:
            raise ValueError(f"Bad interval : [{self.lower}, {self.upper}]")

    def is_finite(self) -> bool:
        return self.lower is not None and self.upper is not None

    def length(self) -> Optional[int]:
        """Number of integers in the interval, or None if it is infinite."""
        if self.lower is None or self.upper is None:
            return None
        return self.upper - self.lower + 1

    def contains(self, value: int) -> bool:
        if self.lower is not None and self.lower > value:
            return False
        if self.upper is not None and self.upper < value:
            return False
        return True

    def __contains__(self, value: int) -> bool:
        return self.contains(value)

    def __str__(self) -> str:
        low = "-inf" if self.lower is None else str(self.lower)
        high = "+inf" if self.upper is None else str(self.upper)
        return f"[{low}, {high}]"