from __future__ import annotations

import pytest

from welltracks.config import default_config
from welltracks.model import Measurement
from welltracks.render.normalize import normalize
from welltracks.render.scales import LinearScale, PlotGeometry, build_scales


def test_linear_scale_maps_endpoints() -> None:
    s = LinearScale(domain_min=1000.0, domain_max=1300.0, range_offset=40.0, range_span=500.0)
    assert s(1000.0) == 40.0
    assert s(1300.0) == 540.0
    assert s(1150.0) == pytest.approx(290.0)


def test_linear_scale_degenerate_returns_midpoint() -> None:
    s = LinearScale(domain_min=5.0, domain_max=5.0, range_offset=100.0, range_span=50.0)
    assert s.is_degenerate
    assert s(5.0) == 125.0
    assert s(-1e9) == 125.0
    assert s.invert(110.0) == 5.0


def test_linear_scale_invert() -> None:
    s = LinearScale(domain_min=100.0, domain_max=200.0, range_offset=40.0, range_span=500.0)
    assert s.invert(540.0) == pytest.approx(200.0)
    assert s.invert(s(137.5)) == pytest.approx(137.5)


def test_geometry_defaults() -> None:
    g = PlotGeometry.from_config(default_config())
    assert (g.plot_top, g.plot_bottom, g.plot_left, g.plot_right) == (40.0, 540.0, 80.0, 860.0)
    assert g.track_width == pytest.approx(260.0)
    left, width = g.track_inner(1)
    assert left == pytest.approx(366.0)
    assert width == pytest.approx(208.0)
    assert g.track_center(2) == pytest.approx(730.0)


def test_build_scales_tracks_are_inset_thirds(log_records) -> None:
    g = PlotGeometry.from_config(default_config())
    sc = build_scales(normalize(log_records), g)

    assert sc.depth(1000.0) == g.plot_top
    assert sc.depth(1300.0) == g.plot_bottom

    assert sc.value_a(60.0) == pytest.approx(366.0)
    assert sc.value_a(95.0) == pytest.approx(574.0)
    assert sc.value_b(30.0) == pytest.approx(626.0)
    assert sc.value_b(110.0) == pytest.approx(834.0)


def test_build_scales_constant_value_maps_to_track_middle() -> None:
    recs = [Measurement(depth=d, category="Shale", value_a=42.0, value_b=float(d)) for d in (10, 20, 30)]
    g = PlotGeometry.from_config(default_config())
    sc = build_scales(normalize(recs), g)
    xs = {sc.value_a(r.value_a) for r in recs}
    assert len(xs) == 1
    assert xs.pop() == pytest.approx(g.track_center(1))
