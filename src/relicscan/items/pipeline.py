"""Recognition-to-domain pipeline.

Turns the raw text fields produced by the recognition pass into ``Relic``
entities. Malformed fields drop the field or the entity; nothing here raises
for bad input.
"""
from __future__ import annotations

import logging
import re
from dataclasses import asdict, dataclass
from typing import Any, Iterable, List, Mapping, Optional

from .lookup import GameCatalog, resolve_identity
from .models import Relic
from .stats import parse_stat

logger = logging.getLogger(__name__)

LEVEL_MARKER = "+"
EQUIPPED_MARKER = "已装备"
# "<owner>已装备": the marker is a trailing UI decoration
_EQUIPPED_SUFFIX_LEN = 3

_LEVEL_DIGITS = re.compile(r"[0-9]+", re.ASCII)


@dataclass(frozen=True)
class RawScanRecord:
    """Text fields of one inventory item as recognized from the screen."""

    name: str
    main_stat_name: str
    main_stat_value: str
    sub_stat_1: str = ""
    sub_stat_2: str = ""
    sub_stat_3: str = ""
    sub_stat_4: str = ""
    level: str = ""
    location: str = ""
    rarity: int = 0
    lock: bool = False

    @property
    def sub_stats(self):
        return (self.sub_stat_1, self.sub_stat_2, self.sub_stat_3, self.sub_stat_4)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RawScanRecord":
        return cls(
            name=str(data.get("name", "")),
            main_stat_name=str(data.get("main_stat_name", "")),
            main_stat_value=str(data.get("main_stat_value", "")),
            sub_stat_1=str(data.get("sub_stat_1", "")),
            sub_stat_2=str(data.get("sub_stat_2", "")),
            sub_stat_3=str(data.get("sub_stat_3", "")),
            sub_stat_4=str(data.get("sub_stat_4", "")),
            level=str(data.get("level", "")),
            location=str(data.get("location", "")),
            rarity=int(data.get("rarity", 0)),
            lock=bool(data.get("lock", False)),
        )

    def to_dict(self) -> dict:
        return asdict(self)


def _parse_level(text: str) -> Optional[int]:
    if not text.startswith(LEVEL_MARKER):
        return None
    digits = text[len(LEVEL_MARKER):]
    if not _LEVEL_DIGITS.fullmatch(digits):
        return None
    return int(digits)


def _resolve_owner(record: RawScanRecord, catalog: GameCatalog) -> Optional[str]:
    location = record.location
    if EQUIPPED_MARKER not in location:
        return None
    owner = location[:-_EQUIPPED_SUFFIX_LEN]
    key = catalog.characters.resolve(owner)
    if key is None:
        logger.error(
            "unknown owner %r: name=%r main=%r %r subs=%r location=%r",
            owner,
            record.name,
            record.main_stat_name,
            record.main_stat_value,
            list(record.sub_stats),
            location,
        )
    return key


def assemble(record: RawScanRecord, catalog: GameCatalog) -> Optional[Relic]:
    """Build a Relic from one raw record, or None when the record is unusable."""
    identity = resolve_identity(record.name, catalog)
    if identity is None:
        hint = catalog.items.suggest(record.name)
        if hint is not None:
            logger.warning("unknown item name %r (closest known: %r)", record.name, hint)
        else:
            logger.warning("unknown item name %r", record.name)
        return None

    level = _parse_level(record.level)
    if level is None:
        logger.debug("bad level text %r for %r", record.level, record.name)
        return None

    # Main stat names may contain '+' themselves; parse_stat splits on it
    main_raw = record.main_stat_name.replace("+", "?") + "+" + record.main_stat_value
    main_stat = parse_stat(main_raw, catalog.stats)
    if main_stat is None:
        logger.debug("bad main stat %r for %r", main_raw, record.name)
        return None

    sub_stats = tuple(parse_stat(raw, catalog.stats) for raw in record.sub_stats)

    return Relic(
        identity=identity,
        rarity=record.rarity,
        level=level,
        lock=record.lock,
        main_stat=main_stat,
        sub_stats=sub_stats,
        location=_resolve_owner(record, catalog),
    )


def collect(
    records: Iterable[RawScanRecord],
    catalog: GameCatalog,
    min_rarity: int = 0,
    min_level: int = 0,
) -> List[Relic]:
    """Assemble a batch, keeping order and dropping rejects and low tiers."""
    kept: List[Relic] = []
    total = rejected = filtered = 0
    for record in records:
        total += 1
        relic = assemble(record, catalog)
        if relic is None:
            rejected += 1
            continue
        if relic.rarity < min_rarity or relic.level < min_level:
            filtered += 1
            continue
        kept.append(relic)
    logger.info(
        "collected %d of %d records (%d rejected, %d below thresholds)",
        len(kept), total, rejected, filtered,
    )
    return kept
