"""Mersenne-31 field arithmetic, circle-group points and cosets, and vanishing polynomials."""

__version__ = "0.1.0"

__all__ = [
    "circle",
    "cm31",
    "constraints",
    "containers",
    "fft",
    "field",
    "m31",
    "qm31",
    "samples",
    "secure_column",
]