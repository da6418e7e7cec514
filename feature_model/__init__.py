"""
feature_model — struktury danych drzewa dokumentu Gherkin.

Użycie:
  from feature_model import FeatureDocument, Feature, Scenario, ...

Moduły:
  documents — FeatureDocument, Feature, Rule, Background, Scenario,
              ScenarioOutline, Examples, Step, TableRow, DocString,
              Tag, Comment
  errors    — ParseError, MissingNameWarning, InvalidArgument

Drzewo powstaje osobno dla każdego pliku .feature, jest przekształcane przez
annotator (na kopii) i konsumowane raz przez renderer Markdown.
"""

from .documents import (
    Tag,
    Comment,
    TableRow,
    DocString,
    Step,
    Examples,
    Background,
    Scenario,
    ScenarioOutline,
    Rule,
    Feature,
    FeatureChild,
    FeatureDocument,
)
from .errors import (
    ParseError,
    MissingNameWarning,
    InvalidArgument,
)

__all__ = [
    # documents
    "Tag",
    "Comment",
    "TableRow",
    "DocString",
    "Step",
    "Examples",
    "Background",
    "Scenario",
    "ScenarioOutline",
    "Rule",
    "Feature",
    "FeatureChild",
    "FeatureDocument",
    # errors
    "ParseError",
    "MissingNameWarning",
    "InvalidArgument",
]
