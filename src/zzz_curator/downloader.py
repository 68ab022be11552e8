"""Fetch character data from the hakush.in API and write curated JSON files.

This module exposes the same `sync_characters` function used by the batch CLI
(`scripts/fetch_data.py`) and the FastMCP tools. Every call is synchronous and
sequential; the first HTTP, decoding or filesystem error aborts the run.
"""
from pathlib import Path
from urllib.parse import quote
import argparse
import json
import logging
import requests
from . import config
from .models import PipelineOptions, ProjectionRules, RawCharacter, SyncResult
from .naming import detail_output_name, index_output_name
from .projector import DEFAULT_RULES
from .rules import load_rules
from .simplify import simplify_character

LOG = logging.getLogger(__name__)

# sub-delims left unescaped in the key path segment, on top of quote()'s defaults
_URI_COMPONENT_SAFE = "!*'()~"


def fetch_json(url: str, timeout: float | None = None):
    """GET `url` and decode its JSON body; non-2xx responses raise `requests.HTTPError`."""
    resp = requests.get(url, timeout=timeout or config.HTTP_TIMEOUT)
    resp.raise_for_status()
    return resp.json()


def fetch_index(index_url: str | None = None) -> dict:
    index_url = index_url or config.INDEX_URL
    LOG.info("Fetching character index from %s", index_url)
    index = fetch_json(index_url)
    if not isinstance(index, dict):
        raise ValueError(f"unexpected index payload from {index_url}: {type(index).__name__}")
    return index


def detail_url_for(key: str, detail_url: str | None = None) -> str:
    base = (detail_url or config.DETAIL_URL).rstrip("/")
    return f"{base}/{quote(str(key), safe=_URI_COMPONENT_SAFE)}.json"


def fetch_detail(key: str, detail_url: str | None = None) -> RawCharacter:
    return fetch_json(detail_url_for(key, detail_url))


def write_json(dest: Path, data) -> Path:
    """Write `data` as pretty-printed UTF-8 JSON with a trailing newline."""
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_text(json.dumps(data, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
    return dest


def output_path(output_name: str, dest_dir: Path | None = None) -> Path:
    return (dest_dir or config.OUTPUT_DIR) / f"{output_name}.json"


def save_simplified(output_name: str, data: RawCharacter, dest_dir: Path | None = None) -> Path:
    return write_json(output_path(output_name, dest_dir), data)


def dump_index(dest: Path | None = None, index_url: str | None = None) -> Path:
    """Save the raw index payload, unmodified, to a single JSON file."""
    dest = dest or config.INDEX_OUTPUT_FILE
    index = fetch_json(index_url or config.INDEX_URL)
    write_json(dest, index)
    LOG.info("Saved character index -> %s", dest)
    return dest


def sync_characters(
    options: PipelineOptions | None = None,
    rules: ProjectionRules | None = None,
    dest_dir: Path | None = None,
    index_url: str | None = None,
    detail_url: str | None = None,
) -> SyncResult:
    """Fetch every character in the index and write its curated record.

    With the "index" naming policy the output name is known before fetching,
    so existing files are skipped without a request. With "detail" naming the
    record is fetched first and the skip check happens afterwards.
    """
    options = options or PipelineOptions(
        project_skill_levels=config.PROJECT_SKILL_LEVELS,
        skip_existing=config.SKIP_EXISTING,
        naming=config.NAMING,
    )
    rules = rules or DEFAULT_RULES
    dest_dir = dest_dir or config.OUTPUT_DIR
    dest_dir.mkdir(parents=True, exist_ok=True)

    index = fetch_index(index_url)
    result = SyncResult()
    for key, entry in index.items():
        detail = None
        if options.naming == "index":
            output_name = index_output_name(key, entry)
        else:
            detail = fetch_detail(key, detail_url)
            output_name = detail_output_name(key, detail)

        dest = output_path(output_name, dest_dir)
        if options.skip_existing and dest.exists():
            LOG.debug("Skipping %s, %s already exists", key, dest)
            result.skipped += 1
            continue

        if detail is None:
            detail = fetch_detail(key, detail_url)
        simplified = simplify_character(detail, rules, options.project_skill_levels)
        save_simplified(output_name, simplified, dest_dir)
        LOG.info("Saved %s -> %s", key, dest)
        result.fetched += 1
        result.written.append(output_name)

    return result


def list_local_characters(dest_dir: Path | None = None) -> list[str]:
    """Return sorted output names of the curated characters found locally."""
    dest_dir = dest_dir or config.OUTPUT_DIR
    if not dest_dir.is_dir():
        return []
    return sorted(p.stem for p in dest_dir.glob("*.json"))


def load_character(name: str, dest_dir: Path | None = None) -> RawCharacter:
    if Path(name).name != name:
        raise ValueError(f"invalid character name {name!r}")
    p = output_path(name, dest_dir)
    if not p.exists():
        raise FileNotFoundError(p)
    return json.loads(p.read_text(encoding="utf-8"))


def build_parser():
    parser = argparse.ArgumentParser(prog="zzz-curator-fetch", description="Fetch and curate character data.")
    parser.add_argument("--index-url", default=None)
    parser.add_argument("--detail-url", default=None)
    parser.add_argument("--dest", default=None, help="Output directory for curated characters (overrides OUTPUT_DIR env)")
    parser.add_argument("--rules", default=None, help="YAML file overriding the skill projection rules (overrides RULES_FILE env)")
    parser.add_argument("--naming", choices=["index", "detail"], default=None,
                        help="Name files from the index entry before fetching, or from the fetched record")
    parser.add_argument("--project-levels", action=argparse.BooleanOptionalAction, default=None,
                        help="Project skill params to per-level values (overrides PROJECT_SKILL_LEVELS env)")
    parser.add_argument("--skip-existing", action=argparse.BooleanOptionalAction, default=None,
                        help="Skip characters whose output file already exists (overrides SKIP_EXISTING env)")
    parser.add_argument("--index-only", action="store_true", help="Only save the raw index payload to a single file")
    parser.add_argument("--index-file", default=None, help="Destination for --index-only (overrides INDEX_OUTPUT_FILE env)")
    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    ns = build_parser().parse_args(argv)
    try:
        if ns.index_only:
            dump_index(Path(ns.index_file) if ns.index_file else None, ns.index_url)
            return 0
        options = PipelineOptions(
            project_skill_levels=config.PROJECT_SKILL_LEVELS if ns.project_levels is None else ns.project_levels,
            skip_existing=config.SKIP_EXISTING if ns.skip_existing is None else ns.skip_existing,
            naming=ns.naming or config.NAMING,
        )
        rules = load_rules(ns.rules or config.RULES_FILE)
        result = sync_characters(options, rules, Path(ns.dest) if ns.dest else None, ns.index_url, ns.detail_url)
    except Exception:
        LOG.exception("Unable to fetch or save character data")
        return 1
    print(result.summary())
    return 0


if __name__ == "__main__":
    import sys
    sys.exit(main(sys.argv[1:]))
