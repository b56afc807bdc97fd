"""Points, point indices and cosets of the circle group x^2 + y^2 = 1."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Generic, Iterator, TypeVar

from .field import FieldElement
from .m31 import M31
from .qm31 import P4, QM31

F = TypeVar("F", bound=FieldElement)

M31_CIRCLE_LOG_ORDER = 31
"""Log of the order of :data:`M31_CIRCLE_GEN`."""

_CIRCLE_ORDER = 1 << M31_CIRCLE_LOG_ORDER
_INDEX_MASK = _CIRCLE_ORDER - 1

SECURE_FIELD_CIRCLE_ORDER = P4 - 1
"""Order of :data:`SECURE_FIELD_CIRCLE_GEN`."""


def _lift(value: FieldElement, field: type[FieldElement]) -> FieldElement:
    if isinstance(value, field):
        return value
    return field.zero() + value


def _egcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(s, t, g)`` with ``s*a + t*b == g == gcd(a, b)``."""
    old_r, r = a, b
    old_s, s = 1, 0
    old_t, t = 0, 1
    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s
        old_t, t = t, old_t - q * t
    return old_s, old_t, old_r


@dataclass(frozen=True, order=True, slots=True)
class CirclePoint(Generic[F]):
    """A point on the circle over a field, treated as an additive group."""

    x: F
    y: F

    @classmethod
    def zero(cls, field: type[F]) -> "CirclePoint[F]":
        """The identity of the group over ``field``."""
        return cls(field.one(), field.zero())

    def __add__(self, other: "CirclePoint[F]") -> "CirclePoint[F]":
        if not isinstance(other, CirclePoint):
            return NotImplemented
        return CirclePoint(
            self.x * other.x - self.y * other.y,
            self.x * other.y + self.y * other.x,
        )

    def __neg__(self) -> "CirclePoint[F]":
        return self.conjugate()

    def __sub__(self, other: "CirclePoint[F]") -> "CirclePoint[F]":
        if not isinstance(other, CirclePoint):
            return NotImplemented
        return self + (-other)

    def double(self) -> "CirclePoint[F]":
        return self + self

    @staticmethod
    def double_x(x: F) -> F:
        """The circle's x-coordinate doubling map ``2x^2 - 1``."""
        return x.square().double() - x.one()

    def log_order(self) -> int:
        """Log2 of the order of the point; every order is a power of two."""
        # Only the identity has x = 1, so the x-coordinate suffices.
        result = 0
        current = self.x
        while not current.is_one():
            current = self.double_x(current)
            result += 1
        return result

    def mul(self, scalar: int) -> "CirclePoint[F]":
        """Add the point to itself ``scalar`` times."""
        if scalar < 0:
            raise ValueError("scalar must be non-negative")
        result = CirclePoint.zero(type(self.x))
        current = self
        while scalar > 0:
            if scalar & 1:
                result = result + current
            current = current.double()
            scalar >>= 1
        return result

    def repeated_double(self, n: int) -> "CirclePoint[F]":
        result = self
        for _ in range(n):
            result = result.double()
        return result

    def conjugate(self) -> "CirclePoint[F]":
        return CirclePoint(self.x, -self.y)

    def antipode(self) -> "CirclePoint[F]":
        return CirclePoint(-self.x, -self.y)

    def into_ef(self, field: type[FieldElement]) -> "CirclePoint":
        """The same point with coordinates lifted into the extension ``field``."""
        return CirclePoint(_lift(self.x, field), _lift(self.y, field))

    def complex_conjugate(self) -> "CirclePoint[F]":
        return CirclePoint(self.x.complex_conjugate(), self.y.complex_conjugate())

    @classmethod
    def get_point(cls, index: int) -> "CirclePoint[QM31]":
        """The point ``index * SECURE_FIELD_CIRCLE_GEN``."""
        if not 0 <= index < SECURE_FIELD_CIRCLE_ORDER:
            raise ValueError(f"index {index} out of range of the secure circle group")
        return SECURE_FIELD_CIRCLE_GEN.mul(index)


M31_CIRCLE_GEN: CirclePoint[M31] = CirclePoint(M31(2), M31(1268011823))
"""A generator of the circle group over M31."""

SECURE_FIELD_CIRCLE_GEN: CirclePoint[QM31] = CirclePoint(
    QM31.from_u32_unchecked(1, 0, 478637715, 513582971),
    QM31.from_u32_unchecked(992285211, 649143431, 740191619, 1186584352),
)
"""A generator of the circle group over the secure field."""


@dataclass(frozen=True, order=True, slots=True)
class CirclePointIndex:
    """The integer ``i`` standing for ``i * M31_CIRCLE_GEN``, modulo 2^31."""

    value: int

    @classmethod
    def zero(cls) -> "CirclePointIndex":
        return cls(0)

    @classmethod
    def generator(cls) -> "CirclePointIndex":
        return cls(1)

    def reduce(self) -> "CirclePointIndex":
        return CirclePointIndex(self.value & _INDEX_MASK)

    @classmethod
    def subgroup_gen(cls, log_size: int) -> "CirclePointIndex":
        """Index of a generator of the subgroup of size ``2^log_size``."""
        if not 0 <= log_size <= M31_CIRCLE_LOG_ORDER:
            raise ValueError(f"log_size {log_size} exceeds {M31_CIRCLE_LOG_ORDER}")
        return cls(1 << (M31_CIRCLE_LOG_ORDER - log_size))

    def to_point(self) -> CirclePoint[M31]:
        return M31_CIRCLE_GEN.mul(self.value)

    def half(self) -> "CirclePointIndex":
        if self.value & 1:
            raise ValueError(f"index {self.value} is odd and cannot be halved")
        return CirclePointIndex(self.value >> 1)

    def try_div(self, rhs: "CirclePointIndex") -> int | None:
        """Some ``x`` with ``x * rhs == self`` modulo 2^31, or None."""
        s, _t, g = _egcd(rhs.value, _CIRCLE_ORDER)
        if self.value % g != 0:
            return None
        return s * (self.value // g)

    def __add__(self, other: "CirclePointIndex") -> "CirclePointIndex":
        if not isinstance(other, CirclePointIndex):
            return NotImplemented
        return CirclePointIndex(self.value + other.value).reduce()

    def __sub__(self, other: "CirclePointIndex") -> "CirclePointIndex":
        if not isinstance(other, CirclePointIndex):
            return NotImplemented
        return CirclePointIndex(self.value + _CIRCLE_ORDER - other.value).reduce()

    def __mul__(self, other: int) -> "CirclePointIndex":
        if not isinstance(other, int):
            return NotImplemented
        return CirclePointIndex(self.value * other).reduce()

    def __truediv__(self, other: "CirclePointIndex") -> int:
        if not isinstance(other, CirclePointIndex):
            return NotImplemented
        result = self.try_div(other)
        if result is None:
            raise ValueError(f"{self.value} is not divisible by {other.value}")
        return result

    def __neg__(self) -> "CirclePointIndex":
        return CirclePointIndex(_CIRCLE_ORDER - self.value).reduce()


@dataclass(frozen=True, slots=True)
class Coset:
    """The coset ``initial + <step>`` of size ``2^log_size``."""

    initial_index: CirclePointIndex
    initial: CirclePoint[M31]
    step_size: CirclePointIndex
    step: CirclePoint[M31]
    log_size: int

    @classmethod
    def create(cls, initial_index: CirclePointIndex, log_size: int) -> "Coset":
        if not 0 <= log_size <= M31_CIRCLE_LOG_ORDER:
            raise ValueError(f"log_size {log_size} exceeds {M31_CIRCLE_LOG_ORDER}")
        step_size = CirclePointIndex.subgroup_gen(log_size)
        return cls(
            initial_index=initial_index,
            initial=initial_index.to_point(),
            step_size=step_size,
            step=step_size.to_point(),
            log_size=log_size,
        )

    @classmethod
    def subgroup(cls, log_size: int) -> "Coset":
        """The subgroup ``<G_n>``."""
        return cls.create(CirclePointIndex.zero(), log_size)

    @classmethod
    def odds(cls, log_size: int) -> "Coset":
        """The coset ``G_2n + <G_n>``."""
        return cls.create(CirclePointIndex.subgroup_gen(log_size + 1), log_size)

    @classmethod
    def half_odds(cls, log_size: int) -> "Coset":
        """The coset ``G_4n + <G_n>``."""
        return cls.create(CirclePointIndex.subgroup_gen(log_size + 2), log_size)

    def size(self) -> int:
        return 1 << self.log_size

    def __iter__(self) -> Iterator[CirclePoint[M31]]:
        current = self.initial
        for _ in range(self.size()):
            yield current
            current = current + self.step

    def iter_indices(self) -> Iterator[CirclePointIndex]:
        current = self.initial_index
        for _ in range(self.size()):
            yield current
            current = current + self.step_size

    def double(self) -> "Coset":
        """The coset of all points of this one doubled."""
        if self.log_size <= 0:
            raise ValueError("cannot double a coset of size 1")
        return Coset(
            initial_index=self.initial_index * 2,
            initial=self.initial.double(),
            step_size=self.step_size * 2,
            step=self.step.double(),
            log_size=self.log_size - 1,
        )

    def repeated_double(self, n_doubles: int) -> "Coset":
        coset = self
        for _ in range(n_doubles):
            coset = coset.double()
        return coset

    def is_doubling_of(self, other: "Coset") -> bool:
        return self.log_size <= other.log_size and self == other.repeated_double(
            other.log_size - self.log_size
        )

    def index_at(self, index: int) -> CirclePointIndex:
        return self.initial_index + self.step_size * index

    def at(self, index: int) -> CirclePoint[M31]:
        return self.index_at(index).to_point()

    def shift(self, shift_size: CirclePointIndex) -> "Coset":
        initial_index = self.initial_index + shift_size
        return replace(self, initial_index=initial_index, initial=initial_index.to_point())

    def conjugate(self) -> "Coset":
        """The conjugate coset ``-initial - <step>``."""
        initial_index = -self.initial_index
        step_size = -self.step_size
        return Coset(
            initial_index=initial_index,
            initial=initial_index.to_point(),
            step_size=step_size,
            step=step_size.to_point(),
            log_size=self.log_size,
        )

    def find(self, i: CirclePointIndex) -> int | None:
        """Position of index ``i`` in the coset, or None if it is not a member."""
        result = (i - self.initial_index).try_div(self.step_size)
        if result is None:
            return None
        return result % self.size()