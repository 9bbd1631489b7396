"""Prepare the HTML entry point for the distribution folder."""

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

from jinja2 import Environment, FileSystemLoader

# Exact attribute text swapped for the minified asset names.
REFERENCE_REWRITES: List[Tuple[str, str]] = [
    ('href="styles.css"', 'href="styles.min.css"'),
    ('src="script.js"', 'src="script.min.js"'),
]


def rewrite_markup(html: str) -> str:
    """Point the stylesheet and script references at their minified files.

    The match is literal and case-sensitive; tags are not parsed, so
    ``href='styles.css'`` (single quotes) is left untouched.  References
    that were already rewritten never match again.
    """
    for source, target in REFERENCE_REWRITES:
        html = html.replace(source, target)
    return html


def render_partials(root: Path, name: str) -> str:
    """Render ``root / name`` through Jinja2 so ``{% include %}`` partials resolve."""
    env = Environment(loader=FileSystemLoader(str(root)), autoescape=False)
    template = env.get_template(name)
    return template.render()
