"""
xref — aktualizacja odwołań '*.feature' w plikach .md / .yaml / .yml.

Publiczne API:
  rewrite_references(text, suffix)  -> str
  fix_references(path, suffix)      -> bool
  OUTPUT_SUFFIX, REFERENCE_EXTENSIONS
"""

from .rewriter import (
    OUTPUT_SUFFIX,
    REFERENCE_EXTENSIONS,
    rewrite_references,
    fix_references,
)

__all__ = [
    "OUTPUT_SUFFIX",
    "REFERENCE_EXTENSIONS",
    "rewrite_references",
    "fix_references",
]
