from zzz_curator.naming import detail_output_name, index_output_name, slugify


def test_slugify():
    assert slugify("Alice: The Good!") == "alice-the-good"
    assert slugify("  Anby  ") == "anby"
    assert slugify("Soldier 11") == "soldier-11"
    assert slugify("   ") == ""
    assert slugify("!!!") == ""


def test_index_name_prefers_codename_then_code():
    assert index_output_name("1011", {"CodeName": "Anby", "code": "ignored"}) == "anby"
    assert index_output_name("1011", {"code": "Anby Demara"}) == "anby-demara"


def test_index_name_falls_back_to_key():
    assert index_output_name("1011", {}) == "1011"
    assert index_output_name("1011", None) == "1011"
    assert index_output_name("1011", {"CodeName": "   "}) == "1011"
    assert index_output_name("1011", {"CodeName": 12}) == "1011"


def test_both_policies_agree():
    entry = {"CodeName": "Nicole Demara", "rank": 4}
    detail = {"Id": 1031, "CodeName": "Nicole Demara"}
    assert index_output_name("1031", entry) == detail_output_name("1031", detail) == "nicole-demara"
    assert detail_output_name("1031", {"CodeName": ""}) == "1031"
