"""Assemble the curated character record from an upstream detail payload."""
from .models import ProjectionRules, RawCharacter
from .normalize import format_rarity, get_string, normalize_keys, pick_first_value, simplify_stats
from .projector import DEFAULT_RULES, project_fields

# Upstream blocks copied as-is (modulo key normalization) when present
PASSTHROUGH_FIELDS = (
    "Level",
    "ExtraLevel",
    "LevelEXP",
    "Skill",
    "SkillList",
    "Passive",
    "Talent",
    "FairyRecommend",
    "Potential",
    "PotentialDetail",
    "Live2D",
)


def _special_element_name(detail: RawCharacter):
    special = detail.get("SpecialElementType")
    if isinstance(special, dict):
        return get_string(special.get("Name"))
    return None


def simplify_character(
    detail: RawCharacter,
    rules: ProjectionRules = DEFAULT_RULES,
    project_skill_levels: bool = True,
) -> RawCharacter:
    simplified: RawCharacter = {
        "Id": detail.get("Id"),
        "Name": detail.get("Name"),
        "CodeName": detail.get("CodeName"),
        "Rarity": format_rarity(detail.get("Rarity")),
        "WeaponType": pick_first_value(detail.get("WeaponType")),
        "ElementType": pick_first_value(detail.get("ElementType")),
        "SpecialElementType": _special_element_name(detail),
        "HitType": pick_first_value(detail.get("HitType")),
        "Camp": pick_first_value(detail.get("Camp")),
    }
    stats = simplify_stats(detail.get("Stats"))
    if stats:
        # growth companions only matter for projection, not for display
        stats = {k: v for k, v in stats.items() if not k.endswith(rules.growth_suffix)}
    if stats:
        simplified["Stats"] = stats
    for key in PASSTHROUGH_FIELDS:
        if key in detail:
            simplified[key] = detail[key]

    normalized = normalize_keys(simplified, rules.icon_tag_prefix)
    if project_skill_levels:
        normalized = project_fields(normalized, rules)
    return normalized
