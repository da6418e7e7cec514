"""
badges — znaczniki statusu dla tytułów cech i scenariuszy.

Publiczne API:
  feature_tag(feature)                        -> str
  scenario_tag(feature, scenario)             -> str
  outline_tag(feature, outline)               -> str
  badge_tag(feature, scenario, outline)       -> str
  slugify(name)                               -> str
  badge_markdown(url, feature, scenario)      -> str
  annotate_document(doc, mode, url, placement) -> FeatureDocument
"""

from .tags import (
    FEATURE_TEMPLATE,
    SCENARIO_TEMPLATE,
    OUTLINE_TEMPLATE,
    feature_tag,
    scenario_tag,
    outline_tag,
    badge_tag,
)
from .urls import slugify, badge_markdown
from .annotator import AnnotationMode, Placement, annotate_document

__all__ = [
    "FEATURE_TEMPLATE",
    "SCENARIO_TEMPLATE",
    "OUTLINE_TEMPLATE",
    "feature_tag",
    "scenario_tag",
    "outline_tag",
    "badge_tag",
    "slugify",
    "badge_markdown",
    "AnnotationMode",
    "Placement",
    "annotate_document",
]
