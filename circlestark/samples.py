"""Sampled column values at out-of-domain points, grouped by point."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from .circle import CirclePoint
from .qm31 import QM31


@dataclass(frozen=True, slots=True)
class PointSample:
    """The value of a column polynomial at a secure field circle point."""

    point: CirclePoint[QM31]
    value: QM31


@dataclass(slots=True)
class ColumnSampleBatch:
    """The columns sampled at one point, with their values there."""

    point: CirclePoint[QM31]
    columns_and_values: list[tuple[int, QM31]] = field(default_factory=list)

    @classmethod
    def new_vec(
        cls, samples: Sequence[Iterable[PointSample]]
    ) -> list["ColumnSampleBatch"]:
        """Group samples by point.

        ``samples`` holds, for each column, the samples of that column. The
        batches come out ordered by point; within a batch, columns keep their
        original order.
        """
        grouped: dict[CirclePoint[QM31], list[tuple[int, QM31]]] = {}
        for column_index, column_samples in enumerate(samples):
            for sample in column_samples:
                grouped.setdefault(sample.point, []).append(
                    (column_index, sample.value)
                )
        return [cls(point, grouped[point]) for point in sorted(grouped)]