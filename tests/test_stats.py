import logging

import pytest

from relicscan.items.catalogs import GENSHIN, STAR_RAIL, get_catalog
from relicscan.items.stats import StatName, StatRecord, parse_stat


@pytest.mark.parametrize(
    "raw,name,value",
    [
        ("生命值+4,123", StatName.HP, 4123.0),
        ("生命值+4.3%", StatName.HPPercentage, 0.043),
        ("暴击率+10%", StatName.CRITRate, 0.10),
        ("速度+2.3", StatName.SPD, 2.3),
        ("攻击力+3.9%", StatName.ATKPercentage, 0.039),
        ("效果抵抗+6.9%", StatName.EffectRES, 0.069),
    ],
)
def test_parse_star_rail_stats(raw, name, value):
    stat = parse_stat(raw, STAR_RAIL.stats)
    assert stat is not None
    assert stat.name is name
    assert stat.value == pytest.approx(value)


def test_parse_genshin_stats():
    assert parse_stat("元素精通+23", GENSHIN.stats) == StatRecord(StatName.ElementalMastery, 23.0)
    pyro = parse_stat("火元素伤害加成+46.6%", GENSHIN.stats)
    assert pyro.name is StatName.PyroDMGBonus
    assert pyro.value == pytest.approx(0.466)


@pytest.mark.parametrize("raw", ["", "生命值", "生命值+1+2", "不存在+12", "+12"])
def test_rejects_malformed_or_unknown(raw):
    assert parse_stat(raw, STAR_RAIL.stats) is None


@pytest.mark.parametrize("raw", ["生命值+abc", "生命值+inf", "生命值+"])
def test_unparsable_value_is_logged(raw, caplog):
    with caplog.at_level(logging.ERROR, logger="relicscan.items.stats"):
        assert parse_stat(raw, STAR_RAIL.stats) is None
    assert raw in caplog.text


def test_equality_truncates_to_three_decimals():
    a = StatRecord(StatName.CRITRate, 0.1)
    b = StatRecord(StatName.CRITRate, 0.1004)
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert StatRecord(StatName.CRITRate, 0.101) != a
    assert StatRecord(StatName.CRITDMG, 0.1) != a


def test_flat_and_percentage_are_distinct_kinds():
    flat = parse_stat("攻击力+19", STAR_RAIL.stats)
    pct = parse_stat("攻击力+19%", STAR_RAIL.stats)
    assert flat.name is StatName.ATK
    assert pct.name is StatName.ATKPercentage
    assert flat != pct


def test_get_catalog():
    assert get_catalog("starrail") is STAR_RAIL
    assert get_catalog("genshin") is GENSHIN
    with pytest.raises(ValueError):
        get_catalog("zzz")


def test_item_catalog_lookup_and_suggest():
    assert len(STAR_RAIL.items) == 20 * 4 + 14 * 2
    assert len(GENSHIN.items) == 8 * 5
    assert STAR_RAIL.items.suggest("过客的逢春木") == "过客的逢春木簪"
    assert STAR_RAIL.items.suggest("完全无关的名字") is None
    assert STAR_RAIL.items.suggest("") is None
