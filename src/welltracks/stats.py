# src/welltracks/stats.py
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, Tuple

import numpy as np

from welltracks.model import Dataset, Measurement, Range
from welltracks.render.normalize import normalize

SAMPLE_SIZE = 10


@dataclass(frozen=True)
class ValueStats:
    min: float
    max: float
    mean: float


@dataclass(frozen=True)
class DatasetSummary:
    n_records: int
    depth: Range
    categories: Tuple[str, ...]
    value_a: ValueStats
    value_b: ValueStats
    sample: Dataset = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "n_records": self.n_records,
            "depth_min": self.depth.min,
            "depth_max": self.depth.max,
            "categories": list(self.categories),
            "value_a": {"min": self.value_a.min, "max": self.value_a.max, "mean": self.value_a.mean},
            "value_b": {"min": self.value_b.min, "max": self.value_b.max, "mean": self.value_b.mean},
            "sample": [asdict(r) for r in self.sample],
        }


def _stats(x: np.ndarray, r: Range) -> ValueStats:
    return ValueStats(min=r.min, max=r.max, mean=float(np.mean(x)))


def summarize(records: Iterable[Measurement], *, sample_size: int = SAMPLE_SIZE) -> DatasetSummary:
    """
    Depth range, distinct categories (first-seen in depth order),
    min/max/mean of both value logs and the shallowest `sample_size` records.
    Raises EmptyInputError on no records.
    """
    ds = normalize(records)
    cats: Dict[str, None] = {}
    for r in ds.records:
        cats.setdefault(r.category, None)

    a = np.asarray([r.value_a for r in ds.records], dtype="float64")
    b = np.asarray([r.value_b for r in ds.records], dtype="float64")
    return DatasetSummary(
        n_records=len(ds),
        depth=ds.depth,
        categories=tuple(cats),
        value_a=_stats(a, ds.value_a),
        value_b=_stats(b, ds.value_b),
        sample=ds.records[: max(0, int(sample_size))],
    )
