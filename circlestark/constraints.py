"""Vanishing polynomials and lines used to build constraint quotients."""

from __future__ import annotations

from .circle import CirclePoint, Coset
from .field import FieldElement
from .m31 import M31
from .qm31 import QM31
from .samples import PointSample


def coset_vanishing(coset: Coset, p: CirclePoint) -> FieldElement:
    """Evaluate the vanishing polynomial of ``coset`` at ``p``."""
    # Rotating by -initial + step/2 yields the canonic coset step/2 + <step>;
    # doubling it log_size - 1 times gives +-G_4, where x vanishes.
    field = type(p.x)
    shifted = (
        p
        - coset.initial.into_ef(field)
        + coset.step_size.half().to_point().into_ef(field)
    )
    x = shifted.x
    for _ in range(1, coset.log_size):
        x = CirclePoint.double_x(x)
    return x


def point_excluder(excluded: CirclePoint[M31], p: CirclePoint) -> FieldElement:
    """A polynomial with a double zero at ``excluded``, evaluated at ``p``."""
    return (p - excluded.into_ef(type(p.x))).x - M31.one()


def pair_vanishing(
    excluded0: CirclePoint, excluded1: CirclePoint, p: CirclePoint
) -> FieldElement:
    """The line through two circle points, evaluated at ``p``."""
    # Determinant of the rows (p.x, p.y, 1), (e0.x, e0.y, 1), (e1.x, e1.y, 1).
    return (
        (excluded0.y - excluded1.y) * p.x
        + (excluded1.x - excluded0.x) * p.y
        + (excluded0.x * excluded1.y - excluded0.y * excluded1.x)
    )


def point_vanishing(vanish_point: CirclePoint, p: CirclePoint) -> FieldElement:
    """A polynomial vanishing at ``vanish_point``, evaluated at ``p``.

    It has a pole at the antipode of ``vanish_point``; evaluating there raises
    ZeroDivisionError.
    """
    field = type(vanish_point.x)
    h = p.into_ef(field) - vanish_point
    return h.y / (field.one() + h.x)


def _check_not_real(point: CirclePoint[QM31]) -> None:
    if point.y == point.y.complex_conjugate():
        raise ValueError(f"Cannot evaluate a line with a single point ({point}).")


def complex_conjugate_line(
    point: CirclePoint[QM31], value: QM31, p: CirclePoint[M31]
) -> QM31:
    """Evaluate at ``p`` the line through ``(point.y, value)`` and its conjugate."""
    _check_not_real(point)
    return value + (value.complex_conjugate() - value) * (-point.y + p.y) / (
        point.complex_conjugate().y - point.y
    )


def complex_conjugate_line_coefficients(
    sample: PointSample, alpha: QM31
) -> tuple[QM31, QM31, QM31]:
    """Coefficients ``alpha*(a, b, c)`` with ``a*x + b - c*y = 0`` on the line.

    The line passes through ``(sample.point.y, sample.value)`` and its complex
    conjugate.
    """
    _check_not_real(sample.point)
    a = sample.value.complex_conjugate() - sample.value
    c = sample.point.complex_conjugate().y - sample.point.y
    b = sample.value * c - a * sample.point.y
    return alpha * a, alpha * b, alpha * c