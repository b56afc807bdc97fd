"""Operations shared by every field element type."""

from __future__ import annotations

from abc import ABC, abstractmethod
from itertools import accumulate
from typing import Iterable, Sequence, TypeVar

T = TypeVar("T", bound="FieldElement")


class FieldElement(ABC):
    """Base class for elements of prime fields and their extensions.

    Subclasses set ``ORDER`` to the number of elements of the field and
    implement the ring operations; inversion, powers and division are derived.
    """

    __slots__ = ()

    ORDER: int = 0

    @classmethod
    @abstractmethod
    def zero(cls: type[T]) -> T:
        """The additive identity."""

    @classmethod
    @abstractmethod
    def one(cls: type[T]) -> T:
        """The multiplicative identity."""

    @abstractmethod
    def __add__(self, other):
        """Field addition."""

    @abstractmethod
    def __sub__(self, other):
        """Field subtraction."""

    @abstractmethod
    def __mul__(self, other):
        """Field multiplication."""

    @abstractmethod
    def __neg__(self):
        """Additive inverse."""

    @abstractmethod
    def complex_conjugate(self):
        """Conjugate with respect to the complex extension."""

    @abstractmethod
    def to_m31_array(self) -> tuple:
        """The base field coordinates of the element."""

    def __truediv__(self, other):
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self * other.inverse()

    def square(self: T) -> T:
        return self * self

    def pow(self: T, exp: int) -> T:
        """Raise to a non-negative integer power by square-and-multiply."""
        if exp < 0:
            raise ValueError("exponent must be non-negative")
        result = self.one()
        base = self
        while exp > 0:
            if exp & 1:
                result = result * base
            base = base.square()
            exp >>= 1
        return result

    def inverse(self: T) -> T:
        """Multiplicative inverse; raises ZeroDivisionError for zero."""
        if self.is_zero():
            raise ZeroDivisionError("0 has no inverse")
        return self.pow(self.ORDER - 2)

    def double(self: T) -> T:
        return self + self

    def is_zero(self) -> bool:
        return self == self.zero()

    def is_one(self) -> bool:
        return self == self.one()


def batch_inverse(column: Sequence[T]) -> list[T]:
    """Invert every element of ``column`` with a single field inversion.

    Raises ZeroDivisionError if any element is zero.
    """
    if not column:
        return []
    prefix = list(accumulate(column, lambda a, b: a * b))
    current = prefix[-1].inverse()
    result = [current] * len(column)
    for i in range(len(column) - 1, 0, -1):
        result[i] = prefix[i - 1] * current
        current = current * column[i]
    result[0] = current
    return result


def into_bytes(elements: Iterable[FieldElement]) -> bytes:
    """Serialise elements as little-endian 32-bit base field coordinates."""
    return b"".join(
        coord.value.to_bytes(4, "little")
        for element in elements
        for coord in element.to_m31_array()
    )