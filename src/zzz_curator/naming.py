"""Output file names for curated characters.

Files are named after the character's code name so that both naming policies
(from the index entry before fetching, or from the detail record after
fetching) land on the same path.
"""
import re
from typing import Any, Optional

from .normalize import get_string

_NON_SLUG_RE = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    s = name.strip().lower()
    s = _NON_SLUG_RE.sub("-", s)
    return s.strip("-")


def _name_from_code(key: str, code: Optional[str]) -> str:
    if not code:
        return key
    return slugify(code) or key


def index_output_name(key: str, entry: Any) -> str:
    if not isinstance(entry, dict):
        return key
    code = entry.get("CodeName")
    if code is None:
        code = entry.get("code")
    return _name_from_code(key, get_string(code))


def detail_output_name(key: str, detail: Any) -> str:
    if not isinstance(detail, dict):
        return key
    return _name_from_code(key, get_string(detail.get("CodeName")))
