"""The complex extension of the Mersenne-31 field."""

from __future__ import annotations

from dataclasses import dataclass

from .field import FieldElement
from .m31 import M31

P2 = 4611686014132420609  # (2 ** 31 - 1) ** 2


@dataclass(frozen=True, order=True, slots=True)
class CM31(FieldElement):
    """An element ``a + bi`` of M31[i] with i^2 = -1."""

    a: M31
    b: M31

    ORDER = P2

    @classmethod
    def from_u32_unchecked(cls, a: int, b: int) -> "CM31":
        return cls(M31(a), M31(b))

    @classmethod
    def from_m31(cls, a: M31, b: M31) -> "CM31":
        return cls(a, b)

    @classmethod
    def zero(cls) -> "CM31":
        return cls(M31.zero(), M31.zero())

    @classmethod
    def one(cls) -> "CM31":
        return cls(M31.one(), M31.zero())

    def __add__(self, other):
        if isinstance(other, CM31):
            return CM31(self.a + other.a, self.b + other.b)
        if isinstance(other, M31):
            return CM31(self.a + other, self.b)
        return NotImplemented

    def __radd__(self, other):
        if isinstance(other, M31):
            return self + other
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, CM31):
            return CM31(self.a - other.a, self.b - other.b)
        if isinstance(other, M31):
            return CM31(self.a - other, self.b)
        return NotImplemented

    def __rsub__(self, other):
        if isinstance(other, M31):
            return -self + other
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, CM31):
            # (a + bi) * (c + di) = (ac - bd) + (ad + bc)i.
            return CM31(
                self.a * other.a - self.b * other.b,
                self.a * other.b + self.b * other.a,
            )
        if isinstance(other, M31):
            return CM31(self.a * other, self.b * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, M31):
            return self * other
        return NotImplemented

    def __neg__(self) -> "CM31":
        return CM31(-self.a, -self.b)

    def complex_conjugate(self) -> "CM31":
        return CM31(self.a, -self.b)

    def to_m31_array(self) -> tuple[M31, M31]:
        return (self.a, self.b)

    def __str__(self) -> str:
        return f"{self.a} + {self.b}i"

    def __repr__(self) -> str:
        return str(self)