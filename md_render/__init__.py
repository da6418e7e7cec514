"""
md_render — renderowanie drzewa dokumentu do Markdown i poprawki tekstowe.

Publiczne API:
  render_markdown(document)            -> str
  strip_comments(markdown, language)   -> str
  format_tables(markdown)              -> str
  postprocess(markdown, language)      -> str
"""

from .renderer import render_markdown
from .filters import (
    is_heading,
    is_table_row,
    strip_comments,
    format_tables,
    postprocess,
)

__all__ = [
    "render_markdown",
    "is_heading",
    "is_table_row",
    "strip_comments",
    "format_tables",
    "postprocess",
]
