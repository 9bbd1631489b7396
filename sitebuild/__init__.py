"""Sitebuild package containing the static site asset pipeline."""

from .markup import rewrite_markup
from .minify import minify_script, minify_stylesheet
from .pipeline import copy_auxiliary_files, ensure_output_directory, run

__all__ = [
    "copy_auxiliary_files",
    "ensure_output_directory",
    "minify_script",
    "minify_stylesheet",
    "rewrite_markup",
    "run",
]
