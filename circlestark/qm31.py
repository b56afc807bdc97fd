"""The degree-4 secure extension of the Mersenne-31 field."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .cm31 import CM31
from .field import FieldElement
from .m31 import M31

P4 = 21267647892944572736998860269687930881  # (2 ** 31 - 1) ** 4
R = CM31.from_u32_unchecked(2, 1)


def _lift(other) -> "CM31 | None":
    if isinstance(other, CM31):
        return other
    if isinstance(other, M31):
        return CM31(other, M31.zero())
    return None


@dataclass(frozen=True, order=True, slots=True)
class QM31(FieldElement):
    """An element ``c0 + c1*u`` of CM31[u] with u^2 = 2 + i."""

    c0: CM31
    c1: CM31

    ORDER = P4

    @classmethod
    def from_u32_unchecked(cls, a: int, b: int, c: int, d: int) -> "QM31":
        return cls(CM31.from_u32_unchecked(a, b), CM31.from_u32_unchecked(c, d))

    @classmethod
    def from_m31(cls, a: M31, b: M31, c: M31, d: M31) -> "QM31":
        return cls(CM31.from_m31(a, b), CM31.from_m31(c, d))

    @classmethod
    def from_m31_array(cls, array: Sequence[M31]) -> "QM31":
        if len(array) != 4:
            raise ValueError(f"expected 4 coordinates, got {len(array)}")
        return cls.from_m31(*array)

    @classmethod
    def zero(cls) -> "QM31":
        return cls(CM31.zero(), CM31.zero())

    @classmethod
    def one(cls) -> "QM31":
        return cls(CM31.one(), CM31.zero())

    def to_m31_array(self) -> tuple[M31, M31, M31, M31]:
        return (self.c0.a, self.c0.b, self.c1.a, self.c1.b)

    def __add__(self, other):
        if isinstance(other, QM31):
            return QM31(self.c0 + other.c0, self.c1 + other.c1)
        lifted = _lift(other)
        if lifted is None:
            return NotImplemented
        return QM31(self.c0 + lifted, self.c1)

    def __radd__(self, other):
        if _lift(other) is None:
            return NotImplemented
        return self + other

    def __sub__(self, other):
        if isinstance(other, QM31):
            return QM31(self.c0 - other.c0, self.c1 - other.c1)
        lifted = _lift(other)
        if lifted is None:
            return NotImplemented
        return QM31(self.c0 - lifted, self.c1)

    def __rsub__(self, other):
        if _lift(other) is None:
            return NotImplemented
        return -self + other

    def __mul__(self, other):
        if isinstance(other, QM31):
            # (a + bu) * (c + du) = (ac + rbd) + (ad + bc)u.
            return QM31(
                self.c0 * other.c0 + R * self.c1 * other.c1,
                self.c0 * other.c1 + self.c1 * other.c0,
            )
        lifted = _lift(other)
        if lifted is None:
            return NotImplemented
        return QM31(self.c0 * lifted, self.c1 * lifted)

    def __rmul__(self, other):
        if _lift(other) is None:
            return NotImplemented
        return self * other

    def __neg__(self) -> "QM31":
        return QM31(-self.c0, -self.c1)

    def complex_conjugate(self) -> "QM31":
        return QM31(self.c0, -self.c1)

    def __str__(self) -> str:
        return f"({self.c0}) + ({self.c1})u"

    def __repr__(self) -> str:
        return str(self)