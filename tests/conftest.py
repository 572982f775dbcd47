from __future__ import annotations

from typing import List

import matplotlib

matplotlib.use("Agg")

import pytest

from welltracks.model import Measurement


@pytest.fixture
def two_records() -> List[Measurement]:
    return [
        Measurement(depth=100, category="Shale", value_a=80, value_b=40),
        Measurement(depth=200, category="Sandstone", value_a=90, value_b=60),
    ]


@pytest.fixture
def log_records() -> List[Measurement]:
    # deliberately unordered, with a repeated depth and non-monotonic values
    return [
        Measurement(depth=1300, category="Limestone", value_a=70, value_b=30),
        Measurement(depth=1000, category="Sandstone", value_a=95, value_b=45),
        Measurement(depth=1100, category="Shale", value_a=80, value_b=110),
        Measurement(depth=1100, category="Sandstone", value_a=85, value_b=60),
        Measurement(depth=1200, category="Sandstone", value_a=60, value_b=75),
    ]
