"""Two-dimensional vectors over integers or reals."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Union

__all__ = ["Vec2"]

Scalar = Union[int, float]


def _divide(a: Scalar, b: Scalar) -> Scalar:
    """Divide, truncating towards zero when both operands are integers."""
    if isinstance(a, int) and isinstance(b, int):
        quotient = abs(a) // abs(b)
        return quotient if (a < 0) == (b < 0) else -quotient
    return a / b


@dataclass
class Vec2:
    """A vector with ``x`` and ``y`` components."""

    x: Scalar
    y: Scalar

    @classmethod
    def zero(cls) -> Vec2:
        """The null vector."""
        return cls(0, 0)

    def __add__(self, other: Union[Vec2, Scalar]) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x + other.x, self.y + other.y)
        if isinstance(other, numbers.Real):
            return Vec2(self.x + other, self.y + other)
        return NotImplemented

    def __sub__(self, other: Union[Vec2, Scalar]) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x - other.x, self.y - other.y)
        if isinstance(other, numbers.Real):
            return Vec2(self.x - other, self.y - other)
        return NotImplemented

    def __mul__(self, other: Union[Vec2, Scalar]) -> Union[Vec2, Scalar]:
        """Scale by a number, or take the dot product with another vector."""
        if isinstance(other, Vec2):
            return self.x * other.x + self.y * other.y
        if isinstance(other, numbers.Real):
            return Vec2(self.x * other, self.y * other)
        return NotImplemented

    def __truediv__(self, other: Scalar) -> Vec2:
        if isinstance(other, numbers.Real):
            return Vec2(_divide(self.x, other), _divide(self.y, other))
        return NotImplemented