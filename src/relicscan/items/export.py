"""Export serializers.

Each format is a fixed renaming of the ``Relic`` fields:

- SROD (Star Rail relics), the format read by most Star Rail optimizers
- HOOD (Star Rail relics), the older layout some tools still read
- GOOD (Genshin artifacts)

Every format carries the main-stat value next to its key. Percentage stats
are written as fractions in every format.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Sequence

from .models import ArtifactSetName, ArtifactSlot, Relic, RelicSetName, RelicSlot
from .stats import StatName as S
from .stats import StatRecord

logger = logging.getLogger(__name__)

SOURCE = "relicscan"

SROD_STATS: Mapping[S, str] = {
    S.HP: "hp",
    S.HPPercentage: "hp_",
    S.ATK: "atk",
    S.ATKPercentage: "atk_",
    S.DEF: "def",
    S.DEFPercentage: "def_",
    S.SPD: "spd",
    S.CRITRate: "crit_",
    S.CRITDMG: "crit_dmg_",
    S.BreakEffect: "brEff_",
    S.OutgoingHealingBoost: "heal_",
    S.EnergyRegenerationRate: "enerRegen_",
    S.EffectHitRate: "eff_",
    S.EffectRES: "eff_res_",
    S.PhysicalDMGBoost: "physical_dmg_",
    S.FireDMGBoost: "fire_dmg_",
    S.IceDMGBoost: "ice_dmg_",
    S.LightningDMGBoost: "lightning_dmg_",
    S.WindDMGBoost: "wind_dmg_",
    S.QuantumDMGBoost: "quantum_dmg_",
    S.ImaginaryDMGBoost: "imaginary_dmg_",
}

SROD_SLOTS: Mapping[RelicSlot, str] = {
    RelicSlot.Head: "head",
    RelicSlot.Hands: "hand",
    RelicSlot.Body: "body",
    RelicSlot.Feet: "feet",
    RelicSlot.PlanarSphere: "sphere",
    RelicSlot.LinkRope: "rope",
}

# Set keys follow the enum names except where the format settled on another name
SROD_SET_RENAMES: Mapping[RelicSetName, str] = {
    RelicSetName.PanCosmicCommercialEnterprise: "PanGalacticCommercialEnterprise",
}

HOOD_STATS: Mapping[S, str] = {
    S.HP: "hp",
    S.HPPercentage: "hp_",
    S.ATK: "atk",
    S.ATKPercentage: "atk_",
    S.DEF: "def",
    S.DEFPercentage: "def_",
    S.SPD: "spd",
    S.CRITRate: "critRate",
    S.CRITDMG: "critDMG",
    S.BreakEffect: "break",
    S.OutgoingHealingBoost: "heal",
    S.EnergyRegenerationRate: "enerRegen",
    S.EffectHitRate: "eff",
    S.EffectRES: "effRes",
    S.PhysicalDMGBoost: "physicalDmg",
    S.FireDMGBoost: "fireDmg",
    S.IceDMGBoost: "iceDmg",
    S.LightningDMGBoost: "lightningDmg",
    S.WindDMGBoost: "windDmg",
    S.QuantumDMGBoost: "quantumDmg",
    S.ImaginaryDMGBoost: "imaginaryDmg",
}

HOOD_SLOTS: Mapping[RelicSlot, str] = {
    RelicSlot.Head: "head",
    RelicSlot.Hands: "hands",
    RelicSlot.Body: "body",
    RelicSlot.Feet: "feet",
    RelicSlot.PlanarSphere: "planarSphere",
    RelicSlot.LinkRope: "linkRope",
}

GOOD_STATS: Mapping[S, str] = {
    S.HP: "hp",
    S.HPPercentage: "hp_",
    S.ATK: "atk",
    S.ATKPercentage: "atk_",
    S.DEF: "def",
    S.DEFPercentage: "def_",
    S.ElementalMastery: "eleMas",
    S.EnergyRegenerationRate: "enerRech_",
    S.CRITRate: "critRate_",
    S.CRITDMG: "critDMG_",
    S.OutgoingHealingBoost: "heal_",
    S.PhysicalDMGBoost: "physical_dmg_",
    S.PyroDMGBonus: "pyro_dmg_",
    S.HydroDMGBonus: "hydro_dmg_",
    S.ElectroDMGBonus: "electro_dmg_",
    S.AnemoDMGBonus: "anemo_dmg_",
    S.CryoDMGBonus: "cryo_dmg_",
    S.GeoDMGBonus: "geo_dmg_",
    S.DendroDMGBonus: "dendro_dmg_",
}

GOOD_SLOTS: Mapping[ArtifactSlot, str] = {
    ArtifactSlot.Flower: "flower",
    ArtifactSlot.Plume: "plume",
    ArtifactSlot.Sands: "sands",
    ArtifactSlot.Goblet: "goblet",
    ArtifactSlot.Circlet: "circlet",
}


def _key(table: Mapping[Any, str], member: Any, fmt: str) -> str:
    try:
        return table[member]
    except KeyError:
        raise ValueError(f"{member} has no {fmt} key") from None


def _stat(record: StatRecord, table: Mapping[S, str], fmt: str) -> Dict[str, Any]:
    return {"key": _key(table, record.name, fmt), "value": record.value}


def _require_set(relic: Relic, kind: type, fmt: str) -> None:
    if not isinstance(relic.set_name, kind):
        raise ValueError(f"{relic.set_name} cannot be written as {fmt}")


def srod_relic(relic: Relic) -> Dict[str, Any]:
    _require_set(relic, RelicSetName, "SROD")
    return {
        "setKey": SROD_SET_RENAMES.get(relic.set_name, relic.set_name.value),
        "slotKey": _key(SROD_SLOTS, relic.slot, "SROD"),
        "level": relic.level,
        "rarity": relic.rarity,
        "mainStatKey": _key(SROD_STATS, relic.main_stat.name, "SROD"),
        "mainStatValue": relic.main_stat.value,
        "location": relic.location,
        "lock": relic.lock,
        "substats": [_stat(s, SROD_STATS, "SROD") for s in relic.present_sub_stats],
    }


def hood_relic(relic: Relic) -> Dict[str, Any]:
    _require_set(relic, RelicSetName, "HOOD")
    return {
        "setKey": relic.set_name.value,
        "slotKey": _key(HOOD_SLOTS, relic.slot, "HOOD"),
        "level": relic.level,
        "rarity": relic.rarity,
        "lock": relic.lock,
        "mainStatKey": _key(HOOD_STATS, relic.main_stat.name, "HOOD"),
        "mainTag": _stat(relic.main_stat, HOOD_STATS, "HOOD"),
        "substats": [_stat(s, HOOD_STATS, "HOOD") for s in relic.present_sub_stats],
        "star": relic.rarity,
        "location": relic.location,
        "equip": relic.location,
    }


def good_artifact(relic: Relic) -> Dict[str, Any]:
    _require_set(relic, ArtifactSetName, "GOOD")
    return {
        "setKey": relic.set_name.value,
        "slotKey": _key(GOOD_SLOTS, relic.slot, "GOOD"),
        "level": relic.level,
        "rarity": relic.rarity,
        "mainStatKey": _key(GOOD_STATS, relic.main_stat.name, "GOOD"),
        "mainStatValue": relic.main_stat.value,
        # GOOD uses an empty string for "not equipped"
        "location": relic.location or "",
        "lock": relic.lock,
        "substats": [_stat(s, GOOD_STATS, "GOOD") for s in relic.present_sub_stats],
    }


def srod_document(relics: Iterable[Relic]) -> Dict[str, Any]:
    return {"format": "SROD", "version": 1, "source": SOURCE, "relics": [srod_relic(r) for r in relics]}


def hood_document(relics: Iterable[Relic]) -> Dict[str, Any]:
    return {"format": "HOOD", "version": 1, "source": SOURCE, "relics": [hood_relic(r) for r in relics]}


def good_document(relics: Iterable[Relic]) -> Dict[str, Any]:
    return {"format": "GOOD", "version": 1, "source": SOURCE, "artifacts": [good_artifact(r) for r in relics]}


# game -> [(file name, document builder)]; the first entry is the primary format
EXPORTS: Mapping[str, Sequence] = {
    "starrail": (("srod.json", srod_document), ("hood.json", hood_document)),
    "genshin": (("good.json", good_document),),
}


def _formats(game: str) -> Sequence:
    try:
        return EXPORTS[game]
    except KeyError:
        raise ValueError(f"unknown game {game!r}") from None


def export_json(relics: Sequence[Relic], game: str) -> str:
    """Primary export of ``relics`` as a JSON string (the remote scan payload)."""
    _, build = _formats(game)[0]
    return json.dumps(build(relics), ensure_ascii=False)


def write_exports(relics: Sequence[Relic], game: str, output_dir) -> List[Path]:
    """Write every export format for ``game`` into ``output_dir``."""
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)
    written = []
    for file_name, build in _formats(game):
        path = out / file_name
        path.write_text(json.dumps(build(relics), ensure_ascii=False), encoding="utf-8")
        logger.info("exported %d items to %s", len(relics), path)
        written.append(path)
    return written
