from __future__ import annotations

import pytest

from welltracks.model import Measurement
from welltracks.render.normalize import EmptyInputError, normalize


def test_sorts_by_depth_and_keeps_tie_order(log_records) -> None:
    ds = normalize(log_records)
    assert [r.depth for r in ds.records] == [1000, 1100, 1100, 1200, 1300]
    # the two 1100 samples keep their input order (Shale was listed first)
    assert [r.category for r in ds.records[1:3]] == ["Shale", "Sandstone"]


def test_ranges(log_records) -> None:
    ds = normalize(log_records)
    assert (ds.depth.min, ds.depth.max) == (1000.0, 1300.0)
    assert (ds.value_a.min, ds.value_a.max) == (60.0, 95.0)
    assert (ds.value_b.min, ds.value_b.max) == (30.0, 110.0)
    assert ds.depth.span == 300.0
    assert len(ds) == 5


def test_does_not_mutate_input(log_records) -> None:
    before = list(log_records)
    normalize(log_records)
    assert log_records == before


def test_empty_raises() -> None:
    with pytest.raises(EmptyInputError):
        normalize([])


def test_accepts_generator() -> None:
    gen = (Measurement(depth=d, category="Shale", value_a=1, value_b=2) for d in (3, 1, 2))
    ds = normalize(gen)
    assert [r.depth for r in ds.records] == [1, 2, 3]
