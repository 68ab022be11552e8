"""Key casing, tag stripping and the small field simplifiers."""
import re
from typing import Any, Optional

from .models import JsonValue, RawCharacter

_WORD_BREAK_RE = re.compile(r"[^a-zA-Z0-9]+(.)")
_LEADING_UPPER_RE = re.compile(r"^[A-Z]")
_TAG_RE = re.compile(r"<([^>]+)>")

RARITY_LABELS = {3: "A", 4: "S"}


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def get_string(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def to_lower_camel_case(key: str) -> str:
    key = _WORD_BREAK_RE.sub(lambda m: m.group(1).upper(), key)
    return _LEADING_UPPER_RE.sub(lambda m: m.group(0).lower(), key)


def strip_html_tags(value: str, keep_prefix: str = "IconMap:") -> str:
    """Drop markup tags, keeping icon references such as ``<IconMap:Icon_Fire>``."""
    return _TAG_RE.sub(lambda m: m.group(0) if m.group(1).startswith(keep_prefix) else "", value)


def normalize_keys(value: JsonValue, keep_prefix: str = "IconMap:") -> JsonValue:
    if isinstance(value, str):
        return strip_html_tags(value, keep_prefix)
    if isinstance(value, list):
        return [normalize_keys(v, keep_prefix) for v in value]
    if isinstance(value, dict):
        return {to_lower_camel_case(str(k)): normalize_keys(v, keep_prefix) for k, v in value.items()}
    return value


def format_rarity(value: Any) -> Any:
    if is_number(value) and value in RARITY_LABELS:
        return RARITY_LABELS[value]
    return value


def pick_first_value(value: Any) -> Any:
    # locale maps list the preferred locale first
    if not isinstance(value, dict):
        return None
    for entry in value.values():
        if entry is not None:
            return entry
    return None


def simplify_stats(stats: Any) -> Optional[RawCharacter]:
    if not isinstance(stats, dict):
        return None
    simplified = {k: v for k, v in stats.items() if is_number(v)}
    return simplified or None
