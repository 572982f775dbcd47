# src/welltracks/render/normalize.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np

from welltracks.model import Dataset, Measurement, Range


class EmptyInputError(ValueError):
    """Raised when there are no measurements to lay out."""


@dataclass(frozen=True)
class NormalizedDataset:
    records: Dataset
    depth: Range
    value_a: Range
    value_b: Range

    def __len__(self) -> int:
        return len(self.records)


def _range(x: np.ndarray) -> Range:
    return Range(min=float(np.min(x)), max=float(np.max(x)))


def normalize(records: Iterable[Measurement]) -> NormalizedDataset:
    """
    Sort measurements by depth and derive the numeric ranges.

    The sort is stable (mergesort): equal depths keep their input order.
    Raises EmptyInputError before any min/max is attempted on an empty set.
    """
    recs = tuple(records)
    if not recs:
        raise EmptyInputError("No measurements to render")

    depth = np.asarray([r.depth for r in recs], dtype="float64")
    order = np.argsort(depth, kind="mergesort")
    ordered = tuple(recs[int(i)] for i in order)

    value_a = np.asarray([r.value_a for r in ordered], dtype="float64")
    value_b = np.asarray([r.value_b for r in ordered], dtype="float64")

    return NormalizedDataset(
        records=ordered,
        depth=_range(depth),
        value_a=_range(value_a),
        value_b=_range(value_b),
    )
