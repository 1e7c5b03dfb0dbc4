"""Honkai: Star Rail (zh-CN) lookup tables."""
from __future__ import annotations

from typing import Dict

from ..lookup import CharacterCatalog, GameCatalog, ItemCatalog
from ..models import ItemIdentity, RelicSetName, RelicSlot
from ..stats import StatCatalog, StatName as S

STATS = StatCatalog({
    "生命值": (S.HP, S.HPPercentage),
    "攻击力": (S.ATK, S.ATKPercentage),
    "防御力": (S.DEF, S.DEFPercentage),
    "速度": (S.SPD, S.SPD),
    "暴击率": (S.CRITRate, S.CRITRate),
    "暴击伤害": (S.CRITDMG, S.CRITDMG),
    "击破特攻": (S.BreakEffect, S.BreakEffect),
    "治疗量加成": (S.OutgoingHealingBoost, S.OutgoingHealingBoost),
    "能量恢复效率": (S.EnergyRegenerationRate, S.EnergyRegenerationRate),
    "效果命中": (S.EffectHitRate, S.EffectHitRate),
    "效果抵抗": (S.EffectRES, S.EffectRES),
    "物理属性伤害提高": (S.PhysicalDMGBoost, S.PhysicalDMGBoost),
    "火属性伤害提高": (S.FireDMGBoost, S.FireDMGBoost),
    "冰属性伤害提高": (S.IceDMGBoost, S.IceDMGBoost),
    "雷属性伤害提高": (S.LightningDMGBoost, S.LightningDMGBoost),
    "风属性伤害提高": (S.WindDMGBoost, S.WindDMGBoost),
    "量子属性伤害提高": (S.QuantumDMGBoost, S.QuantumDMGBoost),
    "虚数属性伤害提高": (S.ImaginaryDMGBoost, S.ImaginaryDMGBoost),
})

# Cavern relics: head, hands, body, feet
_CAVERN = (
    (RelicSetName.PasserbyofWanderingCloud, ("过客的逢春木簪", "过客的游龙臂鞲", "过客的残绣风衣", "过客的冥途游履")),
    (RelicSetName.MusketeerofWildWheat, ("快枪手的野穗毡帽", "快枪手的粗革手套", "快枪手的猎风披肩", "快枪手的铆钉马靴")),
    (RelicSetName.KnightofPurityPalace, ("圣骑的宽恕盔面", "圣骑的沉默誓环", "圣骑的肃穆胸甲", "圣骑的秩序铁靴")),
    (RelicSetName.HunterofGlacialForest, ("雪猎的荒神兜帽", "雪猎的巨蜥手套", "雪猎的冰龙披风", "雪猎的鹿皮软靴")),
    (RelicSetName.ChampionofStreetwiseBoxing, ("拳王的冠军护头", "拳王的重炮拳套", "拳王的贴身护胸", "拳王的弧步战靴")),
    (RelicSetName.GuardofWutheringSnow, ("铁卫的铸铁面盔", "铁卫的银鳞手甲", "铁卫的旧制军服", "铁卫的白银护胫")),
    (RelicSetName.FiresmithofLavaForging, ("火匠的黑曜目镜", "火匠的御火戒指", "火匠的阻燃围裙", "火匠的合金义肢")),
    (RelicSetName.GeniusofBrilliantStars, ("天才的超距遥感", "天才的频变捕手", "天才的元域深潜", "天才的引力漫步")),
    (RelicSetName.BandofSizzlingThunder, ("乐队的偏光墨镜", "乐队的巡演手绳", "乐队的钉刺皮衣", "乐队的铆钉短靴")),
    (RelicSetName.EagleofTwilightLine, ("翔鹰的长喙头盔", "翔鹰的鹰击指环", "翔鹰的翼装束带", "翔鹰的绒羽绑带")),
    (RelicSetName.ThiefofShootingMeteor, ("怪盗的千人假面", "怪盗的绘纹手套", "怪盗的纤钢爪钩", "怪盗的流星快靴")),
    (RelicSetName.WastelanderofBanditryDesert, ("废土客的呼吸面罩", "废土客的荒漠终端", "废土客的修士长袍", "废土客的动力腿甲")),
    (RelicSetName.LongevousDisciple, ("莳者的复明义眼", "莳者的机巧木手", "莳者的承露羽衣", "莳者的天人丝履")),
    (RelicSetName.MessengerTraversingHackerspace, ("信使的全息目镜", "信使的百变义手", "信使的密信挎包", "信使的酷跑板鞋")),
    (RelicSetName.TheAshblazingGrandDuke, ("大公的冥焰冠冕", "大公的绒火指套", "大公的蒙恩长袍", "大公的绅雅礼靴")),
    (RelicSetName.PrisonerinDeepConfinement, ("系囚的合啮拘笼", "系囚的铅石梏铐", "系囚的幽闭缚束", "系囚的绝足锁桎")),
    (RelicSetName.PioneerDiverofDeadWaters, ("先驱的绝热围壳", "先驱的虚极罗盘", "先驱的密合铅衣", "先驱的泊星桩锚")),
    (RelicSetName.WatchmakerMasterofDreamMachinations, ("钟表匠的极目透镜", "钟表匠的交运腕表", "钟表匠的空幻礼服", "钟表匠的隐梦革履")),
    (RelicSetName.IronCavalryAgainsttheScourge, ("铁骑的索敌战盔", "铁骑的摧坚铁腕", "铁骑的银影装甲", "铁骑的行空护胫")),
    (RelicSetName.TheWindSoaringValorous, ("勇烈的玄枵面甲", "勇烈的钩爪腕甲", "勇烈的飞翎瓷甲", "勇烈的逐猎腿甲")),
)

# Planar ornaments: sphere, rope
_PLANAR = (
    (RelicSetName.SpaceSealingStation, ("「黑塔」的空间站点", "「黑塔」的漫历轨迹")),
    (RelicSetName.FleetoftheAgeless, ("罗浮仙舟的天外楼船", "罗浮仙舟的建木枝蔓")),
    (RelicSetName.PanCosmicCommercialEnterprise, ("公司的巨构总部", "公司的贸易航道")),
    (RelicSetName.BelobogoftheArchitects, ("贝洛伯格的存护堡垒", "贝洛伯格的铁卫防线")),
    (RelicSetName.CelestialDifferentiator, ("螺丝星的机械烈阳", "螺丝星的环星孔带")),
    (RelicSetName.InertSalsotto, ("萨尔索图的移动城市", "萨尔索图的晨昏界线")),
    (RelicSetName.TaliaKingdomofBanditry, ("塔利亚的钉壳小镇", "塔利亚的裸皮电线")),
    (RelicSetName.SprightlyVonwacq, ("翁瓦克的诞生之岛", "翁瓦克的环岛海岸")),
    (RelicSetName.RutilantArena, ("泰科铵的镭射球场", "泰科铵的弧光赛道")),
    (RelicSetName.BrokenKeel, ("伊须磨洲的残船鲸落", "伊须磨洲的坼裂缆索")),
    (RelicSetName.FirmamentFrontlineGlamoth, ("格拉默的铁骑兵团", "格拉默的寂静坟碑")),
    (RelicSetName.PenaconyLandoftheDreams, ("匹诺康尼的堂皇饭店", "匹诺康尼的逐梦轨道")),
    (RelicSetName.DuranDynastyofRunningWolves, ("都蓝的器兽缰辔", "都蓝的穹窿金帐")),
    (RelicSetName.ForgeoftheKalpagniLantern, ("铸炼宫的焰轮天绸", "铸炼宫的莲华灯芯")),
)

_CAVERN_SLOTS = (RelicSlot.Head, RelicSlot.Hands, RelicSlot.Body, RelicSlot.Feet)
_PLANAR_SLOTS = (RelicSlot.PlanarSphere, RelicSlot.LinkRope)


def _build_items() -> Dict[str, ItemIdentity]:
    entries: Dict[str, ItemIdentity] = {}
    for slots, table in ((_CAVERN_SLOTS, _CAVERN), (_PLANAR_SLOTS, _PLANAR)):
        for set_name, names in table:
            for slot, display in zip(slots, names):
                entries[display] = ItemIdentity(set_name, slot)
    return entries


ITEMS = ItemCatalog(_build_items())

CHARACTERS = CharacterCatalog({
    "三月七": "March7th",
    "丹恒": "DanHeng",
    "姬子": "Himeko",
    "瓦尔特": "Welt",
    "布洛妮娅": "Bronya",
    "希儿": "Seele",
    "景元": "JingYuan",
    "银狼": "SilverWolf",
    "罗刹": "Luocha",
    "停云": "Tingyun",
    "符玄": "FuXuan",
    "卡芙卡": "Kafka",
    "刃": "Blade",
    "镜流": "Jingliu",
    "饮月": "DanHengImbibitorLunae",
})

STAR_RAIL = GameCatalog(game="starrail", stats=STATS, items=ITEMS, characters=CHARACTERS)
