"""Schemaless character records and the knobs of the curation pipeline.

Upstream payloads are heterogeneous, so records stay plain mappings. Only the
pipeline options and the projection rule table get real types.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple, Union

JsonValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]

# A raw or simplified character: a schemaless mapping parsed from JSON
RawCharacter = Dict[str, Any]

NAMING_POLICIES = ("index", "detail")


@dataclass(frozen=True)
class ProjectionRules:
    """Naming heuristics used when projecting skill params to target levels."""

    target_levels: Tuple[int, ...] = (12, 16)
    growth_suffix: str = "Growth"
    main_key: str = "main"
    percent_format_marker: str = "%"
    percent_substrings: Tuple[str, ...] = ("percentage", "ratio")
    level_values_key: str = "levelValues"
    param_key: str = "param"
    projected_fields: Tuple[str, ...] = ("skill",)
    keep_growth_fields: bool = False
    icon_tag_prefix: str = "IconMap:"


@dataclass(frozen=True)
class PipelineOptions:
    project_skill_levels: bool = True
    skip_existing: bool = True
    naming: str = "index"

    def __post_init__(self):
        if self.naming not in NAMING_POLICIES:
            raise ValueError(f"unknown naming policy {self.naming!r}, expected one of {NAMING_POLICIES}")


@dataclass
class SyncResult:
    fetched: int = 0
    skipped: int = 0
    written: List[str] = field(default_factory=list)

    def summary(self) -> str:
        return f"saved {self.fetched} characters, skipped {self.skipped} already downloaded"
