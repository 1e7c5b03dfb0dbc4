"""Stat kinds, stat records and the text parser for recognized stat lines.

Recognized stat lines look like ``"生命值+4,123"`` or ``"暴击率+10%"``.
Percentage values are stored as fractions (``0.10``), never as 0-100.
"""
from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

_VALUE_NOISE = re.compile(r"[%,]")


class StatName(Enum):
    HP = "HP"
    HPPercentage = "HPPercentage"
    ATK = "ATK"
    ATKPercentage = "ATKPercentage"
    DEF = "DEF"
    DEFPercentage = "DEFPercentage"
    SPD = "SPD"
    CRITRate = "CRITRate"
    CRITDMG = "CRITDMG"
    BreakEffect = "BreakEffect"
    OutgoingHealingBoost = "OutgoingHealingBoost"
    EnergyRegenerationRate = "EnergyRegenerationRate"
    EffectHitRate = "EffectHitRate"
    EffectRES = "EffectRES"
    ElementalMastery = "ElementalMastery"
    PhysicalDMGBoost = "PhysicalDMGBoost"
    # Star Rail damage types
    FireDMGBoost = "FireDMGBoost"
    IceDMGBoost = "IceDMGBoost"
    LightningDMGBoost = "LightningDMGBoost"
    WindDMGBoost = "WindDMGBoost"
    QuantumDMGBoost = "QuantumDMGBoost"
    ImaginaryDMGBoost = "ImaginaryDMGBoost"
    # Genshin elements
    PyroDMGBonus = "PyroDMGBonus"
    HydroDMGBonus = "HydroDMGBonus"
    ElectroDMGBonus = "ElectroDMGBonus"
    AnemoDMGBonus = "AnemoDMGBonus"
    CryoDMGBonus = "CryoDMGBonus"
    GeoDMGBonus = "GeoDMGBonus"
    DendroDMGBonus = "DendroDMGBonus"


@dataclass(frozen=True, eq=False)
class StatRecord:
    """One stat kind with its value.

    Two records are the same when the kinds match and the values agree after
    truncating to three decimal digits; recognized values are rebuilt from
    noisy text and must still collapse to one record.
    """

    name: StatName
    value: float

    def _key(self) -> Tuple[StatName, int]:
        return self.name, int(self.value * 1000.0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StatRecord):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())


class StatCatalog:
    """Display name -> (flat kind, percentage kind) for one game."""

    def __init__(self, entries: Mapping[str, Tuple[StatName, StatName]]) -> None:
        self._entries = MappingProxyType(dict(entries))

    def __contains__(self, name: str) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def resolve(self, name: str, is_percentage: bool) -> Optional[StatName]:
        entry = self._entries.get(name)
        if entry is None:
            return None
        flat, percentage = entry
        return percentage if is_percentage else flat


def parse_stat(raw: str, catalog: StatCatalog) -> Optional[StatRecord]:
    """Parse ``"<name>+<value>[%]"`` into a StatRecord, or None."""
    if not raw:
        return None
    parts = raw.split("+")
    if len(parts) != 2:
        return None
    name_part, value_part = parts

    is_percentage = "%" in value_part
    name = catalog.resolve(name_part, is_percentage)
    if name is None:
        return None

    try:
        value = float(_VALUE_NOISE.sub("", value_part))
    except ValueError:
        logger.error("stat `%s` parse error", raw)
        return None
    if not math.isfinite(value):
        logger.error("stat `%s` parse error", raw)
        return None

    if is_percentage:
        value /= 100.0
    return StatRecord(name=name, value=value)
