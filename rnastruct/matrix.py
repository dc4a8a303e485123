"""3x3 matrices and their text forms."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, fields, replace

from rnastruct.vector import Vector

_Number = (int, float)
_ROW_FIELDS = (("xx", "xy", "xz"), ("yx", "yy", "yz"), ("zx", "zy", "zz"))


@dataclass(frozen=True)
class Matrix:
    """An immutable 3x3 matrix of floats, stored row by row."""

    xx: float = 0.0
    xy: float = 0.0
    xz: float = 0.0
    yx: float = 0.0
    yy: float = 0.0
    yz: float = 0.0
    zx: float = 0.0
    zy: float = 0.0
    zz: float = 0.0

    def __post_init__(self) -> None:
        for f in fields(self):
            object.__setattr__(self, f.name, float(getattr(self, f.name)))

    @classmethod
    def from_str(cls, s: str) -> Matrix:
        """Build from the first nine whitespace-separated numbers in ``s``."""
        tokens = s.split()
        if len(tokens) < 9:
            raise ValueError(f"need at least nine numbers to build a matrix: {s!r}")
        return cls(*(float(t) for t in tokens[:9]))

    @classmethod
    def identity(cls) -> Matrix:
        return cls(1, 0, 0, 0, 1, 0, 0, 0, 1)

    @classmethod
    def uniform(cls, t: float) -> Matrix:
        """Return a matrix with every element equal to ``t``."""
        return cls(*([t] * 9))

    def _values(self) -> tuple[float, ...]:
        return (
            self.xx, self.xy, self.xz,
            self.yx, self.yy, self.yz,
            self.zx, self.zy, self.zz,
        )

    def __iter__(self) -> Iterator[float]:
        """Iterate over the nine elements row by row."""
        return iter(self._values())

    def rows(self) -> tuple[Vector, Vector, Vector]:
        return (
            Vector(self.xx, self.xy, self.xz),
            Vector(self.yx, self.yy, self.yz),
            Vector(self.zx, self.zy, self.zz),
        )

    def to_str(self) -> str:
        """Return the nine elements with six decimals, separated by spaces."""
        return " ".join(f"{v:f}" for v in self._values())

    def with_row(self, i: int, values: Iterable[float]) -> Matrix:
        """Return a copy with row ``i`` (0, 1 or 2) replaced by three values."""
        if i not in (0, 1, 2):
            raise IndexError(f"matrix row index out of range: {i}")
        vals = list(values)
        if len(vals) < 3:
            raise ValueError("a matrix row needs three values")
        return replace(self, **dict(zip(_ROW_FIELDS[i], vals[:3])))

    def _map(self, op) -> Matrix:
        return Matrix(*(op(v) for v in self._values()))

    def _zip(self, other: Matrix, op) -> Matrix:
        return Matrix(*(op(a, b) for a, b in zip(self._values(), other._values())))

    def __add__(self, other):
        if isinstance(other, Matrix):
            return self._zip(other, lambda a, b: a + b)
        if isinstance(other, _Number):
            return self._map(lambda a: a + other)
        return NotImplemented

    def __radd__(self, other):
        if isinstance(other, _Number):
            return self._map(lambda a: other + a)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Matrix):
            return self._zip(other, lambda a, b: a - b)
        if isinstance(other, _Number):
            return self._map(lambda a: a - other)
        return NotImplemented

    def __rsub__(self, other):
        if isinstance(other, _Number):
            return self._map(lambda a: other - a)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return dot(self, other)
        if isinstance(other, Vector):
            return Vector(*(row.dot(other) for row in self.rows()))
        if isinstance(other, _Number):
            return self._map(lambda a: a * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, _Number):
            return self._map(lambda a: other * a)
        return NotImplemented

    def __truediv__(self, t):
        if isinstance(t, _Number):
            inv_t = 1.0 / t
            return self._map(lambda a: a * inv_t)
        return NotImplemented

    def transposed(self) -> Matrix:
        return Matrix(
            self.xx, self.yx, self.zx,
            self.xy, self.yy, self.zy,
            self.xz, self.yz, self.zz,
        )

    def difference(self, other: Matrix) -> float:
        """Return the sum of absolute element-wise differences."""
        return sum(abs(a - b) for a, b in zip(self._values(), other._values()))

    def get_flip_orientation(self) -> Matrix:
        """Return a copy with the second and third rows negated."""
        return Matrix(
            self.xx, self.xy, self.xz,
            -self.yx, -self.yy, -self.yz,
            -self.zx, -self.zy, -self.zz,
        )

    def get_unitarize(self) -> Matrix:
        """Return the rows made orthonormal by Gram-Schmidt, first row first."""
        r0, r1, r2 = self.rows()
        r0 = r0 / math.sqrt(r0.dot(r0))
        r1 = r1 - r1.dot(r0) * r0
        r1 = r1 / math.sqrt(r1.dot(r1))
        r2 = r2 - r2.dot(r0) * r0
        r2 = r2 - r2.dot(r1) * r1
        r2 = r2 / math.sqrt(r2.dot(r2))
        return Matrix(*r0, *r1, *r2)

    def __str__(self) -> str:
        return "".join(f"({r.x:g}, {r.y:g}, {r.z:g})\n" for r in self.rows())


def dot(a: Matrix, b: Matrix) -> Matrix:
    """Return the matrix product ``a`` times ``b``."""
    cols = b.transposed().rows()
    return Matrix(*(row.dot(col) for row in a.rows() for col in cols))


def dot_vector(m: Matrix, v: Vector) -> Vector:
    """Return ``v`` as a row vector multiplied by ``m``."""
    return Vector(
        m.xx * v.x + m.yx * v.y + m.zx * v.z,
        m.xy * v.x + m.yy * v.y + m.zy * v.z,
        m.xz * v.x + m.yz * v.y + m.zz * v.z,
    )


def dot_vectors(m: Matrix, vectors: Iterable[Vector]) -> list[Vector]:
    """Apply :func:`dot_vector` to each vector."""
    return [dot_vector(m, v) for v in vectors]


def matrix_from_str(s: str) -> Matrix:
    """Fill rows from consecutive triples of numbers; missing rows stay zero."""
    values = [float(t) for t in s.split()]
    m = Matrix.uniform(0.0)
    for i in range(min(len(values) // 3, 3)):
        m = m.with_row(i, values[3 * i : 3 * i + 3])
    return m


def matrix_to_str(m: Matrix) -> str:
    """Return the elements in shortest general form, each followed by a space."""
    return "".join(f"{v:g} " for v in m)


def transform_1(m: Matrix) -> Matrix:
    """Return ``m`` with its second and third rows negated."""
    return m.get_flip_orientation()