"""Project skill parameters onto fixed milestone levels.

Upstream ships each skill multiplier as a level-1 base value plus a
``<name>Growth`` sibling. Consumers only care about a couple of reference
levels, so each param stat block is rewritten into::

    {"format": "%", "levelValues": {"12": {"main": 2.1}, "16": {"main": 2.5}}}

Percentages arrive as integers scaled by 100 and are stored as ratios.
"""
from typing import Any

from .models import JsonValue, ProjectionRules, RawCharacter
from .normalize import is_number

DEFAULT_RULES = ProjectionRules()


def _is_growth_key(key: str, rules: ProjectionRules) -> bool:
    return key.endswith(rules.growth_suffix)


def _tidy(value: float) -> float | int:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def should_normalize_as_percent(key: str, fmt: Any = None, rules: ProjectionRules = DEFAULT_RULES) -> bool:
    normalized_key = key.lower()
    format_string = fmt if isinstance(fmt, str) else ""
    if normalized_key == rules.main_key.lower() and rules.percent_format_marker in format_string:
        return True
    return any(part in normalized_key for part in rules.percent_substrings)


def build_level_values(stat: RawCharacter, rules: ProjectionRules = DEFAULT_RULES) -> RawCharacter:
    fmt = stat.get("format")
    level_values: RawCharacter = {}
    for level in rules.target_levels:
        values: RawCharacter = {}
        for key, entry in stat.items():
            if not is_number(entry) or _is_growth_key(key, rules):
                continue
            growth = stat.get(f"{key}{rules.growth_suffix}")
            if not is_number(growth):
                growth = 0
            raw = entry + (level - 1) * growth
            values[key] = _tidy(raw / 100 if should_normalize_as_percent(key, fmt, rules) else raw)
        if values:
            level_values[str(level)] = values
    return level_values


def convert_param_stat(stat: RawCharacter, rules: ProjectionRules = DEFAULT_RULES) -> RawCharacter:
    if isinstance(stat.get(rules.level_values_key), (dict, list)):
        return stat
    level_values = build_level_values(stat, rules)
    converted: RawCharacter = {}
    for key, entry in stat.items():
        if not is_number(entry):
            converted[key] = entry
        elif rules.keep_growth_fields and _is_growth_key(key, rules):
            converted[key] = entry
    if level_values:
        converted[rules.level_values_key] = level_values
    return converted


def _convert_param_block(block: RawCharacter, rules: ProjectionRules) -> RawCharacter:
    return {
        key: convert_param_stat(value, rules) if isinstance(value, dict) else value
        for key, value in block.items()
    }


def transform_skill_params(value: JsonValue, rules: ProjectionRules = DEFAULT_RULES) -> JsonValue:
    """Rewrite every ``param`` block found anywhere under `value`."""
    if isinstance(value, list):
        return [transform_skill_params(v, rules) for v in value]
    if not isinstance(value, dict):
        return value
    transformed: RawCharacter = {}
    for key, entry in value.items():
        if key == rules.param_key and isinstance(entry, dict):
            transformed[key] = _convert_param_block(entry, rules)
        else:
            transformed[key] = transform_skill_params(entry, rules)
    return transformed


def project_fields(record: RawCharacter, rules: ProjectionRules = DEFAULT_RULES) -> RawCharacter:
    """Apply :func:`transform_skill_params` to each projected field present in `record`."""
    out = dict(record)
    for name in rules.projected_fields:
        if out.get(name):
            out[name] = transform_skill_params(out[name], rules)
    return out
