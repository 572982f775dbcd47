from __future__ import annotations

from .defaults import default_config
from .schema import (
    DEFAULT_PALETTE,
    BandConfig,
    ChartConfig,
    GridConfig,
    PaddingConfig,
    RenderConfig,
    TrackConfig,
)

__all__ = [
    "DEFAULT_PALETTE",
    "BandConfig",
    "ChartConfig",
    "GridConfig",
    "PaddingConfig",
    "RenderConfig",
    "TrackConfig",
    "default_config",
]
