from __future__ import annotations

from .schema import RenderConfig


def default_config() -> RenderConfig:
    return RenderConfig()
