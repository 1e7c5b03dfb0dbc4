"""Domain records for scanned items.

A ``Relic`` is one successfully recognized inventory item: a Star Rail relic
or a Genshin artifact. Instances are frozen; corrections produce a new
instance.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple, Union

from .stats import StatRecord


class RelicSlot(Enum):
    Head = "Head"
    Hands = "Hands"
    Body = "Body"
    Feet = "Feet"
    PlanarSphere = "PlanarSphere"
    LinkRope = "LinkRope"


class ArtifactSlot(Enum):
    Flower = "Flower"
    Plume = "Plume"
    Sands = "Sands"
    Goblet = "Goblet"
    Circlet = "Circlet"


class RelicSetName(Enum):
    # Version 1.0
    PasserbyofWanderingCloud = "PasserbyofWanderingCloud"
    MusketeerofWildWheat = "MusketeerofWildWheat"
    KnightofPurityPalace = "KnightofPurityPalace"
    HunterofGlacialForest = "HunterofGlacialForest"
    ChampionofStreetwiseBoxing = "ChampionofStreetwiseBoxing"
    GuardofWutheringSnow = "GuardofWutheringSnow"
    FiresmithofLavaForging = "FiresmithofLavaForging"
    GeniusofBrilliantStars = "GeniusofBrilliantStars"
    BandofSizzlingThunder = "BandofSizzlingThunder"
    EagleofTwilightLine = "EagleofTwilightLine"
    ThiefofShootingMeteor = "ThiefofShootingMeteor"
    WastelanderofBanditryDesert = "WastelanderofBanditryDesert"
    SpaceSealingStation = "SpaceSealingStation"
    FleetoftheAgeless = "FleetoftheAgeless"
    PanCosmicCommercialEnterprise = "PanCosmicCommercialEnterprise"
    BelobogoftheArchitects = "BelobogoftheArchitects"
    CelestialDifferentiator = "CelestialDifferentiator"
    InertSalsotto = "InertSalsotto"
    TaliaKingdomofBanditry = "TaliaKingdomofBanditry"
    SprightlyVonwacq = "SprightlyVonwacq"
    # Version 1.2
    LongevousDisciple = "LongevousDisciple"
    MessengerTraversingHackerspace = "MessengerTraversingHackerspace"
    RutilantArena = "RutilantArena"
    BrokenKeel = "BrokenKeel"
    # Version 1.5
    TheAshblazingGrandDuke = "TheAshblazingGrandDuke"
    PrisonerinDeepConfinement = "PrisonerinDeepConfinement"
    FirmamentFrontlineGlamoth = "FirmamentFrontlineGlamoth"
    PenaconyLandoftheDreams = "PenaconyLandoftheDreams"
    # Version 2.0
    PioneerDiverofDeadWaters = "PioneerDiverofDeadWaters"
    WatchmakerMasterofDreamMachinations = "WatchmakerMasterofDreamMachinations"
    # Version 2.3
    IronCavalryAgainsttheScourge = "IronCavalryAgainsttheScourge"
    TheWindSoaringValorous = "TheWindSoaringValorous"
    DuranDynastyofRunningWolves = "DuranDynastyofRunningWolves"
    ForgeoftheKalpagniLantern = "ForgeoftheKalpagniLantern"


class ArtifactSetName(Enum):
    GladiatorsFinale = "GladiatorsFinale"
    WanderersTroupe = "WanderersTroupe"
    CrimsonWitchOfFlames = "CrimsonWitchOfFlames"
    ViridescentVenerer = "ViridescentVenerer"
    NoblesseOblige = "NoblesseOblige"
    TenacityOfTheMillelith = "TenacityOfTheMillelith"
    ShimenawasReminiscence = "ShimenawasReminiscence"
    EmblemOfSeveredFate = "EmblemOfSeveredFate"


SetName = Union[RelicSetName, ArtifactSetName]
Slot = Union[RelicSlot, ArtifactSlot]


@dataclass(frozen=True)
class ItemIdentity:
    set_name: SetName
    slot: Slot


@dataclass(frozen=True)
class Relic:
    """A recognized relic (Star Rail) or artifact (Genshin).

    ``sub_stats`` always has four positions in recognition order; a position
    is None when that line was missing or unparsable. ``location`` is the
    owner's character key, or None when unequipped.
    """

    identity: ItemIdentity
    rarity: int
    level: int
    lock: bool
    main_stat: StatRecord
    sub_stats: Tuple[Optional[StatRecord], ...] = (None, None, None, None)
    location: Optional[str] = None

    def __post_init__(self) -> None:
        if len(self.sub_stats) != 4:
            raise ValueError(f"expected 4 sub-stat positions, got {len(self.sub_stats)}")
        object.__setattr__(self, "sub_stats", tuple(self.sub_stats))

    @property
    def set_name(self) -> SetName:
        return self.identity.set_name

    @property
    def slot(self) -> Slot:
        return self.identity.slot

    @property
    def present_sub_stats(self) -> Tuple[StatRecord, ...]:
        return tuple(s for s in self.sub_stats if s is not None)

    def with_location(self, location: Optional[str]) -> "Relic":
        return replace(self, location=location)

    def with_lock(self, lock: bool) -> "Relic":
        return replace(self, lock=lock)
