from pathlib import Path
import os
from dotenv import load_dotenv

# Load .env (if present) so env-based configuration works in dev
load_dotenv()

# Remote sources (overrideable)
INDEX_URL = os.getenv("INDEX_URL", "https://api.hakush.in/zzz/data/character.json")
DETAIL_URL = os.getenv("DETAIL_URL", "https://api.hakush.in/zzz/data/ja/character")

# Output locations
OUTPUT_DIR = Path(os.getenv("OUTPUT_DIR", "output/character"))
INDEX_OUTPUT_FILE = Path(os.getenv("INDEX_OUTPUT_FILE", "output/character.json"))

# Optional YAML file overriding the skill projection rules
RULES_FILE = os.getenv("RULES_FILE") or None

# HTTP / runtime
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "30"))
PORT = int(os.getenv("PORT", "3334"))
HOST = os.getenv("HOST", "127.0.0.1")

# Behavior
PROJECT_SKILL_LEVELS = os.getenv("PROJECT_SKILL_LEVELS", "1") in ("1", "true", "True")
SKIP_EXISTING = os.getenv("SKIP_EXISTING", "1") in ("1", "true", "True")
# "index" names files before fetching, "detail" after
NAMING = os.getenv("NAMING", "index")
# Skip the first-run sync when the MCP server starts with an empty output dir
DISABLE_AUTO_DOWNLOAD = os.getenv("DISABLE_AUTO_DOWNLOAD", "0") in ("1", "true", "True")
