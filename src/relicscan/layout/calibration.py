"""Coordinate calibration.

Maps a ReferenceLayout onto the pixel geometry of one captured window. Both
axes are scaled independently; every rectangle except the panel is expressed
relative to the panel's top-left, so sub-regions do not depend on where the
panel sits on screen. Every edge is rounded in window coordinates with
round-half-to-even (``numpy.rint``) before the rounded panel origin is
subtracted, so ``absolute()`` always lands on the rounded edge.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, NamedTuple

import numpy as np

from .catalog import PANEL, ReferenceLayout


class PixelRect(NamedTuple):
    left: int
    top: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.left + self.width

    @property
    def bottom(self) -> int:
        return self.top + self.height

    def translate(self, dx: int, dy: int) -> "PixelRect":
        return PixelRect(self.left + dx, self.top + dy, self.width, self.height)

    def to_region(self) -> dict:
        """Return the rect as an mss-style region dict."""
        return {"left": self.left, "top": self.top, "width": self.width, "height": self.height}


@dataclass(frozen=True)
class ScanGeometry:
    """Calibrated geometry of one captured window.

    ``panel`` is relative to the window's client area, ``regions`` are
    relative to the panel, and ``left``/``top`` locate the window on screen.
    """

    width: int
    height: int
    left: int
    top: int
    panel: PixelRect
    regions: Mapping[str, PixelRect]
    points: Mapping[str, int]
    counts: Mapping[str, int]

    def region(self, name: str) -> PixelRect:
        if name == PANEL:
            return self.panel
        return self.regions[name]

    def absolute(self, name: str) -> PixelRect:
        """Return a region in screen coordinates."""
        if name == PANEL:
            return self.panel.translate(self.left, self.top)
        return self.regions[name].translate(self.panel.left + self.left, self.panel.top + self.top)


def _edges_to_rect(edges: np.ndarray) -> PixelRect:
    top, right, bottom, left = (int(v) for v in edges)
    return PixelRect(left=left, top=top, width=right - left, height=bottom - top)


def calibrate(layout: ReferenceLayout, width: int, height: int, left: int = 0, top: int = 0) -> ScanGeometry:
    """Scale ``layout`` to a ``width`` x ``height`` window at (``left``, ``top``)."""
    sx = float(width) / float(layout.width)
    sy = float(height) / float(layout.height)

    names = list(layout.rects)
    # rows are (top, right, bottom, left)
    edges = np.array([layout.rects[n] for n in names], dtype=np.float64).reshape(-1, 4)
    rounded = np.rint(edges * np.array([sy, sx, sy, sx]))

    panel = _edges_to_rect(rounded[names.index(PANEL)])
    regions = {}
    for i, name in enumerate(names):
        if name == PANEL:
            continue
        regions[name] = _edges_to_rect(rounded[i]).translate(-panel.left, -panel.top)

    points = {}
    for name, value in layout.x_scalars.items():
        points[name] = int(np.rint(value * sx))
    for name, value in layout.y_scalars.items():
        points[name] = int(np.rint(value * sy))

    return ScanGeometry(
        width=int(width),
        height=int(height),
        left=int(left),
        top=int(top),
        panel=panel,
        regions=MappingProxyType(regions),
        points=MappingProxyType(points),
        counts=MappingProxyType(dict(layout.counts)),
    )
