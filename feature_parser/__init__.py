"""
feature_parser — parsowanie plików .feature (Gherkin) do drzewa feature_model.

Publiczne API:
  parse_feature_text(text, source)   -> FeatureDocument
  parse_feature_file(path)           -> FeatureDocument
  outline_keywords(language)         -> frozenset[str]
  heading_keywords(language)         -> frozenset[str]
  is_outline_keyword(kw, language)   -> bool
"""

from .parser import parse_feature_text, parse_feature_file
from .dialects import (
    DEFAULT_LANGUAGE,
    outline_keywords,
    heading_keywords,
    is_outline_keyword,
)

__all__ = [
    "parse_feature_text",
    "parse_feature_file",
    "DEFAULT_LANGUAGE",
    "outline_keywords",
    "heading_keywords",
    "is_outline_keyword",
]
