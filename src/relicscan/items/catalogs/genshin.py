"""Genshin Impact (zh-CN) lookup tables."""
from __future__ import annotations

from typing import Dict

from ..lookup import CharacterCatalog, GameCatalog, ItemCatalog
from ..models import ArtifactSetName, ArtifactSlot, ItemIdentity
from ..stats import StatCatalog, StatName as S

STATS = StatCatalog({
    "生命值": (S.HP, S.HPPercentage),
    "攻击力": (S.ATK, S.ATKPercentage),
    "防御力": (S.DEF, S.DEFPercentage),
    "元素精通": (S.ElementalMastery, S.ElementalMastery),
    "元素充能效率": (S.EnergyRegenerationRate, S.EnergyRegenerationRate),
    "暴击率": (S.CRITRate, S.CRITRate),
    "暴击伤害": (S.CRITDMG, S.CRITDMG),
    "治疗加成": (S.OutgoingHealingBoost, S.OutgoingHealingBoost),
    "物理伤害加成": (S.PhysicalDMGBoost, S.PhysicalDMGBoost),
    "火元素伤害加成": (S.PyroDMGBonus, S.PyroDMGBonus),
    "水元素伤害加成": (S.HydroDMGBonus, S.HydroDMGBonus),
    "雷元素伤害加成": (S.ElectroDMGBonus, S.ElectroDMGBonus),
    "风元素伤害加成": (S.AnemoDMGBonus, S.AnemoDMGBonus),
    "冰元素伤害加成": (S.CryoDMGBonus, S.CryoDMGBonus),
    "岩元素伤害加成": (S.GeoDMGBonus, S.GeoDMGBonus),
    "草元素伤害加成": (S.DendroDMGBonus, S.DendroDMGBonus),
})

# flower, plume, sands, goblet, circlet
_SETS = (
    (ArtifactSetName.GladiatorsFinale, ("角斗士的留恋", "角斗士的归宿", "角斗士的希冀", "角斗士的酣醉", "角斗士的凯旋")),
    (ArtifactSetName.WanderersTroupe, ("乐团的晨光", "琴师的箭羽", "终幕的时计", "吟游者之壶", "指挥的礼帽")),
    (ArtifactSetName.CrimsonWitchOfFlames, ("魔女的炎之花", "魔女常燃之羽", "魔女破灭之时", "魔女的心之火", "焦灼的魔女帽")),
    (ArtifactSetName.ViridescentVenerer, ("野花记忆的绿野", "猎人青翠的箭羽", "翠绿猎人的笃定", "翠绿猎人的容器", "翠绿的猎人之冠")),
    (ArtifactSetName.NoblesseOblige, ("宗室之花", "宗室之翎", "宗室时计", "宗室银瓮", "宗室面具")),
    (ArtifactSetName.TenacityOfTheMillelith, ("勋绩之花", "昭武翎羽", "金铜时晷", "盟誓金爵", "将帅兜鍪")),
    (ArtifactSetName.ShimenawasReminiscence, ("羁缠之花", "思忆之矢", "朝露之时", "祈望之心", "无常之面")),
    (ArtifactSetName.EmblemOfSeveredFate, ("明威之镡", "切落之羽", "雷云之笼", "绯花之壶", "华饰之兜")),
)

_SLOTS = (ArtifactSlot.Flower, ArtifactSlot.Plume, ArtifactSlot.Sands, ArtifactSlot.Goblet, ArtifactSlot.Circlet)


def _build_items() -> Dict[str, ItemIdentity]:
    entries: Dict[str, ItemIdentity] = {}
    for set_name, names in _SETS:
        for slot, display in zip(_SLOTS, names):
            entries[display] = ItemIdentity(set_name, slot)
    return entries


ITEMS = ItemCatalog(_build_items())

CHARACTERS = CharacterCatalog({
    "旅行者": "Traveler",
    "安柏": "Amber",
    "凯亚": "Kaeya",
    "丽莎": "Lisa",
    "琴": "Jean",
    "迪卢克": "Diluc",
    "温迪": "Venti",
    "可莉": "Klee",
    "香菱": "Xiangling",
    "行秋": "Xingqiu",
    "班尼特": "Bennett",
    "钟离": "Zhongli",
    "甘雨": "Ganyu",
    "胡桃": "HuTao",
    "枫原万叶": "KaedeharaKazuha",
    "神里绫华": "KamisatoAyaka",
    "雷电将军": "RaidenShogun",
    "夜兰": "Yelan",
    "纳西妲": "Nahida",
    "芙宁娜": "Furina",
})

GENSHIN = GameCatalog(game="genshin", stats=STATS, items=ITEMS, characters=CHARACTERS)
