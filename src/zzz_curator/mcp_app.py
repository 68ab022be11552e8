"""FastMCP integration: expose the curated character files as MCP tools.

Run in dev with:

    python -m zzz_curator.mcp_app

Tools:
- list_characters() -> {count, characters}
- get_character(name) -> curated record
- sync_characters(...) -> trigger the downloader
Resources:
- character://{name} -> curated record as JSON
"""
from fastmcp import FastMCP
from pathlib import Path
import argparse
import asyncio
import json
import logging
import sys
from . import config, downloader
from .models import PipelineOptions, RawCharacter
from .rules import load_rules

LOG = logging.getLogger(__name__)

mcp = FastMCP("zzz-curator")


def character_summary(name: str, record: RawCharacter) -> dict:
    """Short listing entry built from a curated record's identity fields."""
    return {
        "name": name,
        "id": record.get("id"),
        "displayName": record.get("name"),
        "codeName": record.get("codeName"),
        "rarity": record.get("rarity"),
        "weaponType": record.get("weaponType"),
        "elementType": record.get("elementType"),
    }


def summarize_local_characters(dest_dir: Path | None = None) -> dict:
    entries = []
    for name in downloader.list_local_characters(dest_dir):
        try:
            record = downloader.load_character(name, dest_dir)
        except (OSError, ValueError) as ex:
            LOG.warning("Skipping unreadable character file %s: %s", name, ex)
            continue
        if isinstance(record, dict):
            entries.append(character_summary(name, record))
    return {"count": len(entries), "characters": entries}


def run_sync(overwrite: bool | None = None, project_levels: bool | None = None, dest_dir: Path | None = None) -> dict:
    """Run the downloader; unset arguments fall back to the env configuration."""
    options = PipelineOptions(
        project_skill_levels=config.PROJECT_SKILL_LEVELS if project_levels is None else project_levels,
        skip_existing=config.SKIP_EXISTING if overwrite is None else not overwrite,
        naming=config.NAMING,
    )
    result = downloader.sync_characters(options, load_rules(config.RULES_FILE), dest_dir)
    return {"fetched": result.fetched, "skipped": result.skipped, "written": result.written, "summary": result.summary()}


@mcp.tool
def list_characters() -> dict:
    """Return a summary of the curated characters found locally."""
    return summarize_local_characters()


@mcp.tool
def get_character(name: str) -> dict:
    """Return one curated character record by its output name (e.g. `anby`)."""
    return downloader.load_character(name)


@mcp.tool
async def sync_characters(overwrite: bool | None = None, project_levels: bool | None = None) -> dict:
    """Fetch characters from the upstream API and write curated files.

    Existing files are kept unless `overwrite` is set. Omitted arguments use
    the server configuration.
    """
    return await asyncio.to_thread(run_sync, overwrite, project_levels)


@mcp.resource("character://{name}", mime_type="application/json")
def character_resource(name: str) -> str:
    """Return the curated character as a JSON resource."""
    return json.dumps(downloader.load_character(name), ensure_ascii=False)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="zzz-curator-mcp")
    parser.add_argument("--transport", choices=["stdio", "http", "sse"], default="stdio",
                        help="Transport to use: stdio (default), http (streamable HTTP), or sse")
    parser.add_argument("--host", default=None, help="Host to bind when using network transports")
    parser.add_argument("--port", type=int, default=None, help="Port to bind when using network transports")
    parser.add_argument("--output-dir", default=None,
                        help="Directory holding curated character files (overrides OUTPUT_DIR env)")
    ns = parser.parse_args(argv if argv is not None else sys.argv[1:])
    logging.basicConfig(level=logging.INFO)

    if ns.output_dir:
        config.OUTPUT_DIR = Path(ns.output_dir)
        LOG.info("Using output dir: %s", config.OUTPUT_DIR)

    # First-run: fetch remote data if nothing has been curated yet
    if not downloader.list_local_characters() and not config.DISABLE_AUTO_DOWNLOAD:
        LOG.info("No curated characters found; fetching remote data...")
        try:
            run_sync()
        except Exception as ex:
            LOG.warning("Initial fetch failed: %s", ex)

    transport = ns.transport
    if transport == "stdio":
        mcp.run()
        return

    host = ns.host or config.HOST
    port = ns.port or config.PORT
    mcp.run(transport=transport, host=host, port=port)


if __name__ == "__main__":
    main(sys.argv[1:])
