"""Build the distributable copy of the site.

The pipeline is linear and single pass: the output directory is created,
``styles.css`` and ``script.js`` are minified, ``index.html`` is rewritten to
reference the minified files and every other top-level file is copied
verbatim.  Missing sources are skipped; any I/O error aborts the run and
leaves whatever was already written in place.

Example usage::

    python build.py
    python build.py --root site --output site/public
    python build.py --templates --report out/build.json
"""

from __future__ import annotations

import argparse
import shutil
import sys
from pathlib import Path
from typing import Collection, List, Optional, Sequence

from .markup import render_partials, rewrite_markup
from .minify import minify_script, minify_stylesheet
from .report import BuildReport

STYLESHEET = "styles.css"
SCRIPT = "script.js"
MARKUP = "index.html"
STYLESHEET_OUTPUT = "styles.min.css"
SCRIPT_OUTPUT = "script.min.js"

DEFAULT_OUTPUT_DIRNAME = "dist"

# Pipeline internals plus the sources that are transformed rather than copied.
EXCLUDED_FILES = frozenset(
    {
        "build.js",
        "build.py",
        "package.json",
        "pyproject.toml",
        "README.md",
        STYLESHEET,
        SCRIPT,
        MARKUP,
    }
)


def ensure_output_directory(path: Path) -> Path:
    """Create ``path`` (and parents) if missing; existing contents are kept."""
    path.mkdir(parents=True, exist_ok=True)
    return path


def copy_auxiliary_files(
    source_dir: Path,
    dest_dir: Path,
    exclusions: Collection[str] = EXCLUDED_FILES,
) -> List[str]:
    """Copy top-level files of ``source_dir`` into ``dest_dir`` byte for byte.

    Directories and names in ``exclusions`` are skipped.  Returns the copied
    file names in the order they were written.
    """
    copied: List[str] = []
    for path in sorted(source_dir.iterdir()):
        if not path.is_file() or path.name in exclusions:
            continue
        shutil.copyfile(path, dest_dir / path.name)
        copied.append(path.name)
    return copied


def _read_source(path: Path, encoding: str = "utf-8") -> Optional[str]:
    # newline="" keeps CRLF line endings intact.
    if not path.is_file():
        return None
    with path.open("r", encoding=encoding, newline="") as handle:
        return handle.read()


def _write_output(path: Path, text: str) -> None:
    with path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(text)


def run(
    root: Path | str = ".",
    output_dir: Path | str | None = None,
    *,
    templates: bool = False,
    report: Path | str | None = None,
) -> BuildReport:
    """Run every pipeline step in order and return what was produced."""
    root = Path(root)
    dist = Path(output_dir) if output_dir is not None else root / DEFAULT_OUTPUT_DIRNAME
    ensure_output_directory(dist)
    build_report = BuildReport(output_dir=dist)

    # utf-8-sig strips a leading BOM.
    css = _read_source(root / STYLESHEET, encoding="utf-8-sig")
    if css is not None:
        minified = minify_stylesheet(css)
        _write_output(dist / STYLESHEET_OUTPUT, minified)
        build_report.record_step("stylesheet", STYLESHEET_OUTPUT, css, minified)
        print(f"{STYLESHEET_OUTPUT} written")

    js = _read_source(root / SCRIPT, encoding="utf-8-sig")
    if js is not None:
        minified = minify_script(js)
        _write_output(dist / SCRIPT_OUTPUT, minified)
        build_report.record_step("script", SCRIPT_OUTPUT, js, minified)
        print(f"{SCRIPT_OUTPUT} written")

    html = _read_source(root / MARKUP)
    if html is not None:
        source = render_partials(root, MARKUP) if templates else html
        rewritten = rewrite_markup(source)
        _write_output(dist / MARKUP, rewritten)
        build_report.record_step("markup", MARKUP, html, rewritten)
        print(f"{dist.name}/{MARKUP} written")

    build_report.record_copies(copy_auxiliary_files(root, dist))

    if report is not None:
        build_report.write(Path(report))

    print(f"\nBuild complete: output in {dist.name}/")
    return build_report


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Minify the site assets and assemble the distribution folder.")
    parser.add_argument(
        "--root",
        default=".",
        help="Directory holding styles.css, script.js, index.html and other assets (defaults to the current directory).",
    )
    parser.add_argument(
        "--output",
        default=None,
        help=f"Destination directory, relative to the root unless absolute (defaults to '{DEFAULT_OUTPUT_DIRNAME}').",
    )
    parser.add_argument(
        "--templates",
        action="store_true",
        help="Render Jinja2 partials in index.html before rewriting asset references.",
    )
    parser.add_argument(
        "--report",
        default=None,
        help="Also write a JSON build report to this path.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    root = Path(args.root).expanduser()
    if not root.exists():
        print(f"Error: root path {root} does not exist.", file=sys.stderr)
        return 1
    if not root.is_dir():
        print(f"Error: root path {root} is not a directory.", file=sys.stderr)
        return 1

    output_dir = None
    if args.output:
        output_dir = Path(args.output).expanduser()
        if not output_dir.is_absolute():
            output_dir = root / output_dir
        if output_dir.resolve() == root.resolve():
            print(f"Error: output path {output_dir} is the root directory.", file=sys.stderr)
            return 1

    run(root, output_dir, templates=args.templates, report=args.report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
