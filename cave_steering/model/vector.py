"""Immutable 2D vector used for positions and steering forces."""

from dataclasses import dataclass
from typing import Tuple
import math


@dataclass(frozen=True)
class Vector2:
    """2D real-valued vector (x, y)."""
    x: float
    y: float

    @classmethod
    def zero(cls) -> "Vector2":
        return cls(0.0, 0.0)

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __mul__(self, scalar: float) -> "Vector2":
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def length(self) -> float:
        """L2 norm."""
        return math.hypot(self.x, self.y)

    def dot(self, other: "Vector2") -> float:
        return self.x * other.x + self.y * other.y

    def distance_to(self, other: "Vector2") -> float:
        return (other - self).length()

    def normalized(self, length: float = 1.0) -> "Vector2":
        """
        Return a vector with the same direction and the given length.
        The zero vector has no direction and is returned unchanged.
        """
        current = self.length()
        if current == 0.0:
            return Vector2.zero()
        return self * (length / current)

    def clamped(self, max_length: float) -> "Vector2":
        """Shorten to max_length if longer, otherwise return as-is."""
        if self.length() > max_length:
            return self.normalized(max_length)
        return self

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)
