"""
feature_model/documents.py — drzewo dokumentu Gherkin (plik .feature).

FeatureDocument odpowiada jednemu plikowi; Feature zawiera uporządkowaną
listę dzieci (Background | Rule | Scenario | ScenarioOutline). Rule ma własną
listę dzieci bez zagnieżdżonych reguł.

Numery linii (`line`, 1-based) pochodzą z parsera i służą rendererowi do
wstawiania komentarzy źródłowych we właściwe miejsca.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias


# ---------------------------------------------------------------------------
# Elementy liściaste
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Tag:
    name: str            # np. "@smoke"
    line: int


@dataclass(slots=True)
class Comment:
    text: str            # cała linia źródłowa razem z wcięciem
    line: int


@dataclass(slots=True)
class TableRow:
    cells: list[str]
    line: int


@dataclass(slots=True)
class DocString:
    content: str
    delimiter: str       # '"""' lub '```'
    media_type: str | None
    line: int


@dataclass(slots=True)
class Step:
    """
    Krok scenariusza.

    - keyword:    słowo kluczowe razem ze spacją, np. "Given "
    - text:       treść kroku (w konspektach może zawierać <placeholdery>)
    - data_table: opcjonalna tabela danych (lista wierszy)
    - doc_string: opcjonalny blok tekstu
    """
    keyword: str
    text: str
    line: int
    data_table: list[TableRow] | None = None
    doc_string: DocString | None = None


@dataclass(slots=True)
class Examples:
    """Blok Examples; rows[0] to nagłówek (pusta lista gdy blok nie ma tabeli)."""
    keyword: str
    name: str
    line: int
    description: str = ""
    tags: list[Tag] = field(default_factory=list)
    rows: list[TableRow] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Kontenery kroków
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Background:
    keyword: str
    name: str
    line: int
    description: str = ""
    steps: list[Step] = field(default_factory=list)


@dataclass(slots=True)
class Scenario:
    keyword: str
    name: str
    line: int
    description: str = ""
    tags: list[Tag] = field(default_factory=list)
    steps: list[Step] = field(default_factory=list)
    examples: list[Examples] = field(default_factory=list)


@dataclass(slots=True)
class ScenarioOutline(Scenario):
    """Scenariusz szablonowy — kroki rozwijane wierszami tabel Examples."""


@dataclass(slots=True)
class Rule:
    keyword: str
    name: str
    line: int
    description: str = ""
    tags: list[Tag] = field(default_factory=list)
    children: list[Background | Scenario] = field(default_factory=list)


@dataclass(slots=True)
class Feature:
    keyword: str
    name: str
    line: int
    language: str = "en"
    description: str = ""
    tags: list[Tag] = field(default_factory=list)
    children: list[FeatureChild] = field(default_factory=list)


@dataclass(slots=True)
class FeatureDocument:
    feature: Feature
    comments: list[Comment] = field(default_factory=list)
    source: str | None = None    # ścieżka pliku źródłowego (do komunikatów)


# Dziecko Feature w kolejności dokumentu.
FeatureChild: TypeAlias = Background | Rule | Scenario
