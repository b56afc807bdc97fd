"""Columns of secure field elements stored as base field coordinates."""

from __future__ import annotations

from dataclasses import dataclass

from .m31 import M31
from .qm31 import QM31

SECURE_EXTENSION_DEGREE = 4


@dataclass
class SecureColumn:
    """Four base field columns that together hold a column of QM31 values."""

    columns: list[list[M31]]

    def __post_init__(self) -> None:
        if len(self.columns) != SECURE_EXTENSION_DEGREE:
            raise ValueError(
                f"expected {SECURE_EXTENSION_DEGREE} columns, got {len(self.columns)}"
            )
        if len({len(column) for column in self.columns}) > 1:
            raise ValueError("columns must have equal lengths")

    @classmethod
    def zeros(cls, length: int) -> "SecureColumn":
        return cls([[M31.zero()] * length for _ in range(SECURE_EXTENSION_DEGREE)])

    def __len__(self) -> int:
        return len(self.columns[0])

    def at(self, index: int) -> QM31:
        return QM31.from_m31_array([column[index] for column in self.columns])

    def set(self, index: int, value: QM31) -> None:
        for column, coord in zip(self.columns, value.to_m31_array()):
            column[index] = coord

    def to_list(self) -> list[QM31]:
        return [QM31.from_m31_array(coords) for coords in zip(*self.columns)]