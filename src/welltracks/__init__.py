from __future__ import annotations

from .model import CategoryBand, Measurement, Range
from .render import EmptyInputError, EmptyInputState, Layout, render

__all__ = [
    "CategoryBand",
    "EmptyInputError",
    "EmptyInputState",
    "Layout",
    "Measurement",
    "Range",
    "render",
]

__version__ = "0.1.0"
