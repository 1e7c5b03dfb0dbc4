"""Name lookup tables: display name -> identity, owner name -> character key.

Lookups are exact. ``ItemCatalog.suggest`` finds the nearest known display
name by edit distance, for diagnostics when a recognized name misses.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from rapidfuzz import process
from rapidfuzz.distance import Levenshtein

from .models import ItemIdentity
from .stats import StatCatalog


class ItemCatalog:
    def __init__(self, entries: Mapping[str, ItemIdentity]) -> None:
        self._entries = MappingProxyType(dict(entries))

    def __contains__(self, name: str) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def names(self):
        return self._entries.keys()

    def resolve(self, display_name: str) -> Optional[ItemIdentity]:
        return self._entries.get(display_name)

    def suggest(self, display_name: str, max_distance: int = 2) -> Optional[str]:
        """Return the closest known display name within ``max_distance`` edits."""
        if not display_name or not self._entries:
            return None
        match = process.extractOne(
            display_name,
            list(self._entries),
            scorer=Levenshtein.distance,
            score_cutoff=max_distance,
        )
        if match is None:
            return None
        return match[0]


class CharacterCatalog:
    """Localized character name -> export character key."""

    def __init__(self, entries: Mapping[str, str]) -> None:
        self._entries = MappingProxyType(dict(entries))

    def __contains__(self, name: str) -> bool:
        return name in self._entries

    def resolve(self, name: str) -> Optional[str]:
        return self._entries.get(name)


@dataclass(frozen=True)
class GameCatalog:
    """All static lookup tables for one game."""

    game: str
    stats: StatCatalog
    items: ItemCatalog
    characters: CharacterCatalog


def resolve_identity(display_name: str, catalog: GameCatalog) -> Optional[ItemIdentity]:
    return catalog.items.resolve(display_name)
