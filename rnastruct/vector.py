"""Three-component vectors and their text forms."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

_Number = (int, float)


@dataclass(frozen=True)
class Vector:
    """An immutable 3D vector of floats."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    @classmethod
    def from_str(cls, s: str) -> Vector:
        """Build from the first three whitespace-separated numbers in ``s``."""
        tokens = s.split()
        if len(tokens) < 3:
            raise ValueError(f"need at least three numbers to build a vector: {s!r}")
        return cls(*(float(t) for t in tokens[:3]))

    @classmethod
    def uniform(cls, t: float) -> Vector:
        """Return a vector with every component equal to ``t``."""
        return cls(t, t, t)

    def to_str(self) -> str:
        """Return the components with six decimals, separated by spaces."""
        return f"{self.x:f} {self.y:f} {self.z:f}"

    def __add__(self, other):
        if isinstance(other, Vector):
            return Vector(self.x + other.x, self.y + other.y, self.z + other.z)
        if isinstance(other, _Number):
            return Vector(self.x + other, self.y + other, self.z + other)
        return NotImplemented

    def __radd__(self, other):
        if isinstance(other, _Number):
            return Vector(other + self.x, other + self.y, other + self.z)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vector):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, _Number):
            return Vector(self.x - other, self.y - other, self.z - other)
        return NotImplemented

    def __rsub__(self, other):
        if isinstance(other, _Number):
            return Vector(other - self.x, other - self.y, other - self.z)
        return NotImplemented

    def __mul__(self, t):
        if isinstance(t, _Number):
            return Vector(self.x * t, self.y * t, self.z * t)
        return NotImplemented

    def __rmul__(self, t):
        if isinstance(t, _Number):
            return Vector(t * self.x, t * self.y, t * self.z)
        return NotImplemented

    def __truediv__(self, t):
        if isinstance(t, _Number):
            inv_t = 1.0 / t
            return Vector(self.x * inv_t, self.y * inv_t, self.z * inv_t)
        return NotImplemented

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def __getitem__(self, i: int) -> float:
        if i == 0:
            return self.x
        if i == 1:
            return self.y
        if i == 2:
            return self.z
        raise IndexError(f"vector index out of range: {i}")

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def normalized(self) -> Vector:
        """Return a unit vector in the same direction."""
        length = self.length()
        if length == 0:
            raise ZeroDivisionError("cannot normalize a zero-length vector")
        return self * (1.0 / length)

    def distance(self, other: Vector) -> float:
        return math.sqrt(self.distance_squared(other))

    def distance_squared(self, other: Vector) -> float:
        return (
            (self.x - other.x) ** 2 + (self.y - other.y) ** 2 + (self.z - other.z) ** 2
        )

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z


def dot_product(a: Vector, b: Vector) -> float:
    """Return the dot product of two vectors."""
    return a.dot(b)


def cross(a: Vector, b: Vector) -> Vector:
    """Return the cross product of two vectors."""
    return a.cross(b)


def vector_from_str(s: str) -> Vector:
    """Parse a vector from space-separated numbers; extras are ignored."""
    values = [float(t) for t in s.split()]
    if len(values) < 3:
        raise ValueError(f"need at least three numbers to build a vector: {s!r}")
    return Vector(*values[:3])


def vector_to_str(v: Vector) -> str:
    """Return the components in shortest general form, separated by spaces."""
    return f"{v.x:g} {v.y:g} {v.z:g}"


def vectors_to_str(vs: Iterable[Vector]) -> str:
    """Join vectors, each followed by a space."""
    return "".join(f"{v.x:g} {v.y:g} {v.z:g} " for v in vs)


def vectors_from_str(s: str) -> list[Vector]:
    """Parse consecutive triples of numbers; a trailing partial triple is dropped."""
    values = [float(t) for t in s.split()]
    return [Vector(*values[i : i + 3]) for i in range(0, len(values) - 2, 3)]