"""Reference layouts of the inventory screens.

Each layout describes one (game, aspect ratio) pair in a fixed reference
resolution: named rectangles as (top, right, bottom, left), horizontal and
vertical scalars, and unscaled grid counts. Layouts are immutable and built
once at import time; the catalog is shared read-only by every caller.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, NamedTuple, Optional, Tuple

from ..core.errors import UnsupportedResolutionError

logger = logging.getLogger(__name__)

PANEL = "panel"


class Rect(NamedTuple):
    """Rectangle edges in reference-resolution units."""

    top: float
    right: float
    bottom: float
    left: float


@dataclass(frozen=True)
class ReferenceLayout:
    name: str
    width: float
    height: float
    rects: Mapping[str, Rect]
    x_scalars: Mapping[str, float] = field(default_factory=dict)
    y_scalars: Mapping[str, float] = field(default_factory=dict)
    counts: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if PANEL not in self.rects:
            raise ValueError(f"layout {self.name!r} has no {PANEL!r} rectangle")
        overlap = set(self.x_scalars) & set(self.y_scalars)
        if overlap:
            raise ValueError(f"layout {self.name!r} scales {sorted(overlap)} on both axes")
        # Freeze the tables so a shared layout can never be edited in place
        object.__setattr__(self, "rects", MappingProxyType({k: Rect(*v) for k, v in self.rects.items()}))
        object.__setattr__(self, "x_scalars", MappingProxyType(dict(self.x_scalars)))
        object.__setattr__(self, "y_scalars", MappingProxyType(dict(self.y_scalars)))
        object.__setattr__(self, "counts", MappingProxyType(dict(self.counts)))


def classify_aspect(width: int, height: int) -> Optional[str]:
    """Return the aspect-ratio class of a window size, or None."""
    if width <= 0 or height <= 0:
        return None
    if height * 16 == width * 9:
        return "16:9"
    if height * 8 == width * 5:
        return "8:5"
    if height * 4 == width * 3:
        return "4:3"
    return None


class LayoutCatalog:
    """Read-only registry of reference layouts keyed by (game, ratio)."""

    def __init__(self, layouts: Mapping[Tuple[str, str], ReferenceLayout]) -> None:
        self._layouts: Mapping[Tuple[str, str], ReferenceLayout] = MappingProxyType(dict(layouts))

    def __contains__(self, key: Tuple[str, str]) -> bool:
        return key in self._layouts

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self._layouts)

    def __len__(self) -> int:
        return len(self._layouts)

    def get(self, game: str, ratio: str) -> Optional[ReferenceLayout]:
        return self._layouts.get((game, ratio))

    def ratios(self, game: str) -> Tuple[str, ...]:
        return tuple(r for g, r in self._layouts if g == game)

    def select(self, game: str, width: int, height: int) -> ReferenceLayout:
        """Pick the layout for a captured window size.

        Raises UnsupportedResolutionError when the ratio is unknown or has no
        layout for this game.
        """
        ratio = classify_aspect(width, height)
        if ratio is None:
            raise UnsupportedResolutionError(f"unsupported resolution {width}x{height}")
        layout = self.get(game, ratio)
        if layout is None:
            raise UnsupportedResolutionError(
                f"no {ratio} layout for {game} (supported: {', '.join(self.ratios(game)) or 'none'})"
            )
        logger.debug("Selected layout %s for %dx%d", layout.name, width, height)
        return layout


# --------------------------- Reference layouts ---------------------------

GENSHIN_16_9 = ReferenceLayout(
    name="genshin-16:9",
    width=1600.0,
    height=900.0,
    rects={
        "title": Rect(106.6, 1417.7, 139.6, 1111.8),
        "main_stat_name": Rect(224.3, 1253.9, 248.0, 1110.0),
        "main_stat_value": Rect(248.4, 1246.8, 286.8, 1110.0),
        "level": Rect(360.0, 1160.0, 378.0, 1117.0),
        PANEL: Rect(100.0, 1500.0, 800.0, 1090.0),
        "sub_stat_1": Rect(398.1, 1343.0, 427.3, 1130.2),
        "sub_stat_2": Rect(427.3, 1343.0, 458.2, 1130.2),
        "sub_stat_3": Rect(458.2, 1343.0, 490.9, 1130.2),
        "sub_stat_4": Rect(490.9, 1343.0, 523.0, 1130.2),
        "equip": Rect(762.6, 1389.4, 787.8, 1154.9),
        "item_count": Rect(27.1, 1504.7, 52.9, 1314.9),
    },
    x_scalars={
        "tile_width": 1055.0 - 953.0,
        "gap_x": 953.0 - 933.0,
        "left_margin": 98.0,
        "flag_x": 271.1,
        "star_x": 379.4,
        "lock_x": 1450.0,
        "tile_lock_x": 12.0,
        "ruler_left": 272.0,
        "menu_x": 540.0,
        "scrollbar_left": 1074.0,
        "tile_shift_x": 122.0,
    },
    y_scalars={
        "tile_height": 373.0 - 247.0,
        "gap_y": 247.0 - 227.0,
        "top_margin": 100.0,
        "flag_y": 89.8,
        "star_y": 23.9,
        "lock_y": 357.0,
        "tile_lock_y": 14.0,
        "ruler_top": 102.0,
        "ruler_height": 123.0,
        "menu_y": 50.0,
        "scrollbar_top": 108.0,
        "scrollbar_height": 668.0,
        "tile_shift_y": 146.0,
    },
    counts={"rows": 5, "cols": 8},
)

STAR_RAIL_16_9 = ReferenceLayout(
    name="starrail-16:9",
    width=1600.0,
    height=900.0,
    rects={
        "title": Rect(111.0, 1400.0, 132.0, 1169.0),
        "main_stat_name": Rect(335.0, 1407.0, 355.0, 1207.0),
        "main_stat_value": Rect(335.0, 1535.0, 355.0, 1465.0),
        "level": Rect(258.0, 1240.0, 285.0, 1170.0),
        PANEL: Rect(100.0, 1550.0, 780.0, 1150.0),
        "sub_stat_1_name": Rect(370.0, 1369.0, 392.0, 1204.0),
        "sub_stat_1_value": Rect(370.0, 1534.0, 392.0, 1380.0),
        "sub_stat_2_name": Rect(402.0, 1369.0, 425.0, 1204.0),
        "sub_stat_2_value": Rect(402.0, 1534.0, 425.0, 1380.0),
        "sub_stat_3_name": Rect(435.0, 1369.0, 458.0, 1204.0),
        "sub_stat_3_value": Rect(435.0, 1534.0, 458.0, 1380.0),
        "sub_stat_4_name": Rect(467.0, 1369.0, 489.0, 1204.0),
        "sub_stat_4_value": Rect(467.0, 1534.0, 489.0, 1380.0),
        "equip": Rect(741.0, 1340.0, 775.0, 1305.0),
        "item_count": Rect(813.0, 960.0, 836.0, 753.0),
    },
    x_scalars={
        "tile_width": 96.0,
        "gap_x": 8.0,
        "left_margin": 108.0,
        "flag_x": 270.0,
        "star_x": 383.0,
        "lock_x": 1510.0,
        "tile_lock_x": 89.0,
        "ruler_left": 270.0,
        "menu_x": 690.0,
        "scrollbar_left": 1127.0,
        "tile_shift_x": 104.0,
    },
    y_scalars={
        "tile_height": 112.0,
        "gap_y": 12.0,
        "top_margin": 166.0,
        "flag_y": 158.0,
        "star_y": 38.0,
        "lock_y": 271.0,
        "tile_lock_y": 72.0,
        "ruler_top": 166.0,
        "ruler_height": 112.0,
        "menu_y": 50.0,
        "scrollbar_top": 166.0,
        "scrollbar_height": 610.0,
        "tile_shift_y": 124.0,
    },
    counts={"rows": 5, "cols": 9},
)

_DEFAULT_LAYOUTS: Dict[Tuple[str, str], ReferenceLayout] = {
    ("genshin", "16:9"): GENSHIN_16_9,
    ("starrail", "16:9"): STAR_RAIL_16_9,
}

DEFAULT_CATALOG = LayoutCatalog(_DEFAULT_LAYOUTS)
