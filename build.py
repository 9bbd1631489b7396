"""Minify the site assets and assemble ``dist/`` next to this script."""

import sys
from pathlib import Path

from sitebuild.pipeline import main

ROOT_DIR = Path(__file__).resolve().parent


if __name__ == "__main__":
    sys.exit(main(["--root", str(ROOT_DIR), *sys.argv[1:]]))
