import json

import pytest

from relicscan.items.catalogs import GENSHIN, STAR_RAIL
from relicscan.items.export import (
    export_json,
    good_artifact,
    hood_relic,
    srod_document,
    srod_relic,
    write_exports,
)
from relicscan.items.pipeline import RawScanRecord, assemble


def _relic(catalog, **fields):
    record = RawScanRecord(**fields)
    relic = assemble(record, catalog)
    assert relic is not None
    return relic


@pytest.fixture
def planar():
    return _relic(
        STAR_RAIL,
        name="公司的贸易航道",
        main_stat_name="能量恢复效率",
        main_stat_value="19.4%",
        sub_stat_1="",
        sub_stat_2="暴击伤害+5.8%",
        sub_stat_3="速度+2",
        level="+15",
        location="卡芙卡已装备",
        rarity=5,
        lock=True,
    )


@pytest.fixture
def artifact():
    return _relic(
        GENSHIN,
        name="宗室银瓮",
        main_stat_name="火元素伤害加成",
        main_stat_value="46.6%",
        sub_stat_1="暴击率+3.9%",
        level="+20",
        rarity=5,
    )


def test_srod_renames_fields(planar):
    out = srod_relic(planar)
    assert out["setKey"] == "PanGalacticCommercialEnterprise"
    assert out["slotKey"] == "rope"
    assert out["level"] == 15
    assert out["rarity"] == 5
    assert out["mainStatKey"] == "enerRegen_"
    assert out["location"] == "Kafka"
    assert out["lock"] is True
    # only present sub-stats, in recognition order, as fractions
    assert [s["key"] for s in out["substats"]] == ["crit_dmg_", "spd"]
    assert out["substats"][0]["value"] == pytest.approx(0.058)
    assert out["substats"][1]["value"] == pytest.approx(2.0)


def test_srod_document(planar):
    doc = srod_document([planar])
    assert doc["format"] == "SROD"
    assert doc["version"] == 1
    assert doc["source"] == "relicscan"
    assert len(doc["relics"]) == 1


def test_hood_keeps_enum_set_names(planar):
    out = hood_relic(planar)
    assert out["setKey"] == "PanCosmicCommercialEnterprise"
    assert out["slotKey"] == "linkRope"
    assert out["mainStatKey"] == "enerRegen"


def test_good_artifact(artifact):
    out = good_artifact(artifact)
    assert out["setKey"] == "NoblesseOblige"
    assert out["slotKey"] == "goblet"
    assert out["mainStatKey"] == "pyro_dmg_"
    assert out["location"] == ""
    assert out["lock"] is False
    assert out["substats"][0]["key"] == "critRate_"
    assert out["substats"][0]["value"] == pytest.approx(0.039)


def test_format_and_game_must_match(planar, artifact):
    with pytest.raises(ValueError):
        srod_relic(artifact)
    with pytest.raises(ValueError):
        good_artifact(planar)
    with pytest.raises(ValueError):
        export_json([planar], "zzz")


def test_export_json_is_primary_format(planar, artifact):
    assert json.loads(export_json([planar], "starrail"))["format"] == "SROD"
    assert json.loads(export_json([artifact], "genshin"))["format"] == "GOOD"


def test_write_exports(tmp_path, planar):
    paths = write_exports([planar], "starrail", tmp_path / "out")
    assert [p.name for p in paths] == ["srod.json", "hood.json"]
    doc = json.loads(paths[0].read_text(encoding="utf-8"))
    assert doc["relics"][0]["location"] == "Kafka"


def test_main_stat_value_is_written_by_every_format(planar, artifact):
    head = _relic(
        STAR_RAIL,
        name="过客的逢春木簪",
        main_stat_name="生命值",
        main_stat_value="705",
        sub_stat_1="速度+2",
        level="+15",
        rarity=5,
    )
    hood = hood_relic(head)
    assert hood["mainTag"] == {"key": "hp", "value": pytest.approx(705.0)}
    assert hood["star"] == 5
    assert hood["equip"] is None
    assert srod_relic(head)["mainStatValue"] == pytest.approx(705.0)
    assert "705" in json.dumps(srod_document([head]))

    assert hood_relic(planar)["mainTag"]["value"] == pytest.approx(0.194)
    assert hood_relic(planar)["equip"] == "Kafka"
    assert srod_relic(planar)["mainStatValue"] == pytest.approx(0.194)
    assert good_artifact(artifact)["mainStatValue"] == pytest.approx(0.466)
