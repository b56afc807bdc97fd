"""The Mersenne-31 prime field."""

from __future__ import annotations

from dataclasses import dataclass

from .field import FieldElement

MODULUS_BITS = 31
N_BYTES_FELT = 4
P = 2**31 - 1


@dataclass(frozen=True, order=True, slots=True)
class M31(FieldElement):
    """An element of the field of integers modulo 2^31 - 1.

    The constructor does not reduce its argument; use :func:`reduce` or
    :func:`partial_reduce` to build an element from an arbitrary integer.
    """

    value: int

    ORDER = P

    @classmethod
    def zero(cls) -> "M31":
        return cls(0)

    @classmethod
    def one(cls) -> "M31":
        return cls(1)

    def __add__(self, other):
        if not isinstance(other, M31):
            return NotImplemented
        return partial_reduce(self.value + other.value)

    def __sub__(self, other):
        if not isinstance(other, M31):
            return NotImplemented
        return partial_reduce(self.value + P - other.value)

    def __mul__(self, other):
        if not isinstance(other, M31):
            return NotImplemented
        return reduce(self.value * other.value)

    def __neg__(self) -> "M31":
        return partial_reduce(P - self.value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"M31({self.value})"

    def sqrt(self) -> "M31 | None":
        """A square root of the element, or None if it is not a square."""
        result = self.pow(1 << 29)
        return result if result.square() == self else None

    def complex_conjugate(self) -> "M31":
        return self

    def to_m31_array(self) -> tuple["M31"]:
        return (self,)


def partial_reduce(val: int) -> M31:
    """Reduce a value in [0, 2P) modulo P."""
    return M31(val - P if val >= P else val)


def reduce(val: int) -> M31:
    """Reduce a value in [0, P^2) modulo P."""
    return M31(((((val >> MODULUS_BITS) + val + 1) >> MODULUS_BITS) + val) & P)