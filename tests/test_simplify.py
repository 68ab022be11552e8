from zzz_curator.models import ProjectionRules
from zzz_curator.simplify import simplify_character


def _raw():
    return {
        "Id": 1041,
        "Name": "<b>Soldier 11</b>",
        "CodeName": "Soldier11",
        "Rarity": 4,
        "WeaponType": {"ja": "Sword"},
        "ElementType": {"201": "Fire"},
        "SpecialElementType": {"Name": "Frost", "Desc": "x"},
        "HitType": {"101": "Slash"},
        "Camp": {"2": "OBOLS Squad"},
        "Stats": {"HP": 100, "HPGrowth": 5, "Note": "x"},
        "Skill": {
            "Basic": {
                "Description": [
                    {"Name": "Warmup", "Param": {"1": {"Main": 50, "MainGrowth": 5, "Format": "%"}}},
                ]
            }
        },
        "Passive": {"Level": {"1": {"Param": {"1": {"Main": 10}}}}},
        "Unused": {"Drop": "me"},
    }


def test_end_to_end_simplification():
    out = simplify_character(_raw())
    assert out["id"] == 1041
    assert out["name"] == "Soldier 11"
    assert out["rarity"] == "S"
    assert out["weaponType"] == "Sword"
    assert out["elementType"] == "Fire"
    assert out["specialElementType"] == "Frost"
    assert out["hitType"] == "Slash"
    assert out["camp"] == "OBOLS Squad"
    assert out["stats"] == {"hP": 100}
    assert "unused" not in out
    assert "level" not in out


def test_skill_params_are_projected():
    out = simplify_character(_raw())
    param = out["skill"]["basic"]["description"][0]["param"]["1"]
    assert param == {"format": "%", "levelValues": {"12": {"main": 1.05}, "16": {"main": 1.25}}}
    # passive is only projected when configured
    assert out["passive"]["level"]["1"]["param"]["1"] == {"main": 10}


def test_projection_can_be_disabled():
    out = simplify_character(_raw(), project_skill_levels=False)
    assert out["skill"]["basic"]["description"][0]["param"]["1"] == {"main": 50, "mainGrowth": 5, "format": "%"}


def test_projected_fields_follow_rules():
    rules = ProjectionRules(projected_fields=("skill", "passive"))
    out = simplify_character(_raw(), rules)
    assert out["passive"]["level"]["1"]["param"]["1"] == {"levelValues": {"12": {"main": 10}, "16": {"main": 10}}}


def test_missing_fields_become_none_and_stats_omitted():
    out = simplify_character({"Id": 1, "Rarity": 5, "Stats": {"Note": "x"}})
    assert out == {
        "id": 1,
        "name": None,
        "codeName": None,
        "rarity": 5,
        "weaponType": None,
        "elementType": None,
        "specialElementType": None,
        "hitType": None,
        "camp": None,
    }
