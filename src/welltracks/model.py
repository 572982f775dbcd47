# src/welltracks/model.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Measurement:
    """
    One depth-indexed drilling sample.

    value_a / value_b are the two continuous logs (DT and GR in the
    original upload format); category is the lithology name.
    """
    depth: float
    category: str
    value_a: float
    value_b: float


@dataclass(frozen=True)
class Range:
    min: float
    max: float

    @property
    def span(self) -> float:
        return float(self.max) - float(self.min)


@dataclass(frozen=True)
class CategoryBand:
    """Depth interval [depth_start, depth_end) assigned to one category."""
    category: str
    depth_start: float
    depth_end: float


Dataset = Tuple[Measurement, ...]
