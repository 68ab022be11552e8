"""Convenience CLI to fetch and curate character data (wraps zzz_curator.downloader)."""
import sys
from zzz_curator import downloader


if __name__ == "__main__":
    sys.exit(downloader.main(sys.argv[1:]))
