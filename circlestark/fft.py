"""Butterfly steps of the circle FFT."""

from __future__ import annotations

from typing import TypeVar

from .m31 import M31

F = TypeVar("F")


def butterfly(v0: F, v1: F, twid: M31) -> tuple[F, F]:
    """Forward butterfly: returns ``(v0 + v1*twid, v0 - v1*twid)``."""
    tmp = v1 * twid
    return v0 + tmp, v0 - tmp


def ibutterfly(v0: F, v1: F, itwid: M31) -> tuple[F, F]:
    """Inverse butterfly: returns ``(v0 + v1, (v0 - v1)*itwid)``."""
    return v0 + v1, (v0 - v1) * itwid