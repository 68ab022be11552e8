"""Load the skill projection rule table from YAML.

Example ``rules.yaml``::

    target_levels: [12, 16]
    percent_substrings: [percentage, ratio]
    projected_fields: [skill, passive, talent]

Keys left out keep their defaults from :class:`ProjectionRules`.
"""
from dataclasses import fields, replace
from pathlib import Path
import logging
import yaml
from .models import ProjectionRules

LOG = logging.getLogger(__name__)

_TUPLE_FIELDS = ("target_levels", "percent_substrings", "projected_fields")


def rules_from_mapping(data: dict) -> ProjectionRules:
    known = {f.name for f in fields(ProjectionRules)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"unknown projection rule(s): {', '.join(unknown)}")
    overrides = {}
    for key, value in data.items():
        if key in _TUPLE_FIELDS:
            if isinstance(value, (str, int)):
                value = [value]
            value = tuple(value)
        overrides[key] = value
    if "target_levels" in overrides:
        overrides["target_levels"] = tuple(int(level) for level in overrides["target_levels"])
    return replace(ProjectionRules(), **overrides)


def load_rules(path: str | Path | None = None) -> ProjectionRules:
    """Return the rule table stored at `path`, or the defaults when `path` is None."""
    if path is None:
        return ProjectionRules()
    p = Path(path)
    raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"{p}: expected a mapping of rule names, got {type(raw).__name__}")
    rules = rules_from_mapping(raw)
    LOG.info("Loaded projection rules from %s", p)
    return rules
