"""Stat parsing, catalogs and the recognition-to-domain pipeline."""

from .lock import LockAction, LockIntent
from .lookup import GameCatalog, resolve_identity
from .models import ItemIdentity, Relic
from .pipeline import RawScanRecord, assemble, collect
from .stats import StatName, StatRecord, parse_stat

__all__ = [
    "GameCatalog",
    "ItemIdentity",
    "LockAction",
    "LockIntent",
    "RawScanRecord",
    "Relic",
    "StatName",
    "StatRecord",
    "assemble",
    "collect",
    "parse_stat",
    "resolve_identity",
]
