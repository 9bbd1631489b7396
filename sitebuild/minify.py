"""Text-level minification for the site's stylesheet and script.

Both transforms are plain regular expression passes: nothing is parsed or
validated, so malformed input simply produces (deterministic) malformed
output.  ``minify_script`` in particular has no notion of string or regex
literals; a ``//`` or ``/*`` inside a literal is stripped like a comment::

    >>> minify_script('var url = "http://example.com";')
    'var url = "http:'
"""

from __future__ import annotations

import re

BLOCK_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
LINE_COMMENT_RE = re.compile(r"//.*$", re.MULTILINE)
NEWLINES_RE = re.compile(r"\n+")
WHITESPACE_RE = re.compile(r"\s+")
CSS_PUNCTUATION_RE = re.compile(r"\s*([{:;,}])\s*")


def strip_block_comments(text: str) -> str:
    """Remove every ``/* ... */`` span, including multi-line ones."""
    return BLOCK_COMMENT_RE.sub("", text)


def collapse_whitespace(text: str) -> str:
    return WHITESPACE_RE.sub(" ", text)


def minify_stylesheet(css: str) -> str:
    """Return ``css`` without comments and with whitespace squeezed out.

    Whitespace runs collapse to a single space, and spaces touching any of
    ``{ } : ; ,`` are dropped entirely.
    """
    text = strip_block_comments(css)
    text = collapse_whitespace(text)
    text = CSS_PUNCTUATION_RE.sub(r"\1", text)
    return text.strip()


def minify_script(js: str) -> str:
    """Return ``js`` on a single line with block and line comments removed."""
    text = strip_block_comments(js)
    text = LINE_COMMENT_RE.sub("", text)
    text = NEWLINES_RE.sub(" ", text)
    text = collapse_whitespace(text)
    return text.strip()
