"""Layout package: reference layouts and coordinate calibration.

Submodules:
- catalog: immutable reference layouts per (game, aspect ratio)
- calibration: scaling a layout onto a captured window
"""
from .catalog import (
    DEFAULT_CATALOG,
    GENSHIN_16_9,
    STAR_RAIL_16_9,
    LayoutCatalog,
    Rect,
    ReferenceLayout,
    classify_aspect,
)
from .calibration import PixelRect, ScanGeometry, calibrate

__all__ = [
    "DEFAULT_CATALOG",
    "GENSHIN_16_9",
    "STAR_RAIL_16_9",
    "LayoutCatalog",
    "Rect",
    "ReferenceLayout",
    "classify_aspect",
    "PixelRect",
    "ScanGeometry",
    "calibrate",
]
