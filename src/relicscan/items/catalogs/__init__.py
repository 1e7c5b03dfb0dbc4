"""Per-game lookup tables, built once at import and never mutated."""
from __future__ import annotations

from typing import Dict

from ..lookup import GameCatalog
from .genshin import GENSHIN
from .starrail import STAR_RAIL

CATALOGS: Dict[str, GameCatalog] = {
    GENSHIN.game: GENSHIN,
    STAR_RAIL.game: STAR_RAIL,
}


def get_catalog(game: str) -> GameCatalog:
    try:
        return CATALOGS[game]
    except KeyError:
        raise ValueError(f"unknown game {game!r}") from None


__all__ = ["CATALOGS", "GENSHIN", "STAR_RAIL", "get_catalog"]
