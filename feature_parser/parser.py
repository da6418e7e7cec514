"""
feature_parser/parser.py — parsowanie tekstu Gherkin do FeatureDocument.

Architektura:
  tekst → gherkin.parser.Parser (gherkin-official) → AST (dict, camelCase)
  → _build_feature() → FeatureDocument (dataclasses z feature_model)

Kluczowe funkcje publiczne:
  parse_feature_text(text, source) -> FeatureDocument
  parse_feature_file(path)         -> FeatureDocument
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from gherkin.errors import CompositeParserException, ParserException
from gherkin.parser import Parser
from gherkin.token_scanner import TokenScanner

from feature_model.documents import (
    Background,
    Comment,
    DocString,
    Examples,
    Feature,
    FeatureChild,
    FeatureDocument,
    Rule,
    Scenario,
    ScenarioOutline,
    Step,
    TableRow,
    Tag,
)
from feature_model.errors import ParseError
from feature_parser.dialects import DEFAULT_LANGUAGE, is_outline_keyword


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def parse_feature_text(text: str, source: str | None = None) -> FeatureDocument:
    """
    Parsuje tekst pliku .feature.

    Args:
        text:   treść pliku.
        source: ścieżka pliku (tylko do komunikatów błędów).

    Raises:
        ParseError: tekst narusza gramatykę albo nie zawiera sekcji Feature.
    """
    try:
        ast = Parser().parse(TokenScanner(text))
    except CompositeParserException as e:
        first = e.errors[0] if e.errors else None
        raise ParseError(_error_message(e), source, _error_line(first)) from e
    except ParserException as e:
        raise ParseError(_error_message(e), source, _error_line(e)) from e

    feature = ast.get("feature")
    if not feature:
        raise ParseError("Brak sekcji Feature w dokumencie.", source)

    return FeatureDocument(
        feature=_build_feature(feature),
        comments=[
            Comment(text=c["text"], line=_line(c))
            for c in ast.get("comments", [])
        ],
        source=source,
    )


def parse_feature_file(path: str | Path) -> FeatureDocument:
    """Odczytuje plik (UTF-8) i parsuje go do FeatureDocument."""
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    return parse_feature_text(text, str(path))


# ---------------------------------------------------------------------------
# Budowanie drzewa z AST
# ---------------------------------------------------------------------------

def _build_feature(node: dict[str, Any]) -> Feature:
    language = node.get("language") or DEFAULT_LANGUAGE
    children: list[FeatureChild] = []
    for child in node.get("children", []):
        if "rule" in child:
            children.append(_build_rule(child["rule"], language))
        elif "background" in child:
            children.append(_build_background(child["background"]))
        elif "scenario" in child:
            children.append(_build_scenario(child["scenario"], language))

    return Feature(
        keyword=node.get("keyword", ""),
        name=node.get("name", ""),
        line=_line(node),
        language=language,
        description=node.get("description") or "",
        tags=_build_tags(node),
        children=children,
    )


def _build_rule(node: dict[str, Any], language: str) -> Rule:
    children: list[Background | Scenario] = []
    for child in node.get("children", []):
        if "background" in child:
            children.append(_build_background(child["background"]))
        elif "scenario" in child:
            children.append(_build_scenario(child["scenario"], language))

    return Rule(
        keyword=node.get("keyword", ""),
        name=node.get("name", ""),
        line=_line(node),
        description=node.get("description") or "",
        tags=_build_tags(node),
        children=children,
    )


def _build_background(node: dict[str, Any]) -> Background:
    return Background(
        keyword=node.get("keyword", ""),
        name=node.get("name", ""),
        line=_line(node),
        description=node.get("description") or "",
        steps=[_build_step(s) for s in node.get("steps", [])],
    )


def _build_scenario(node: dict[str, Any], language: str) -> Scenario:
    # Konspekt rozpoznajemy po słowie kluczowym dialektu, nie po obecności Examples
    keyword = node.get("keyword", "")
    cls = ScenarioOutline if is_outline_keyword(keyword, language) else Scenario
    return cls(
        keyword=keyword,
        name=node.get("name", ""),
        line=_line(node),
        description=node.get("description") or "",
        tags=_build_tags(node),
        steps=[_build_step(s) for s in node.get("steps", [])],
        examples=[_build_examples(e) for e in node.get("examples", [])],
    )


def _build_examples(node: dict[str, Any]) -> Examples:
    rows: list[TableRow] = []
    header = node.get("tableHeader")
    if header:
        rows.append(_build_row(header))
        rows.extend(_build_row(r) for r in node.get("tableBody", []))

    return Examples(
        keyword=node.get("keyword", ""),
        name=node.get("name", ""),
        line=_line(node),
        description=node.get("description") or "",
        tags=_build_tags(node),
        rows=rows,
    )


def _build_step(node: dict[str, Any]) -> Step:
    data_table = node.get("dataTable")
    doc_string = node.get("docString")
    return Step(
        keyword=node.get("keyword", ""),
        text=node.get("text", ""),
        line=_line(node),
        data_table=[_build_row(r) for r in data_table.get("rows", [])] if data_table else None,
        doc_string=DocString(
            content=doc_string.get("content", ""),
            delimiter=doc_string.get("delimiter", '"""'),
            media_type=doc_string.get("mediaType") or None,
            line=_line(doc_string),
        ) if doc_string else None,
    )


def _build_row(node: dict[str, Any]) -> TableRow:
    return TableRow(
        cells=[c.get("value", "") for c in node.get("cells", [])],
        line=_line(node),
    )


def _build_tags(node: dict[str, Any]) -> list[Tag]:
    return [Tag(name=t["name"], line=_line(t)) for t in node.get("tags", [])]


# ---------------------------------------------------------------------------
# Pomocnicze
# ---------------------------------------------------------------------------

def _line(node: dict[str, Any]) -> int:
    return int(node.get("location", {}).get("line", 0))


def _error_line(error: Any) -> int | None:
    location = getattr(error, "location", None)
    if isinstance(location, dict) and location.get("line"):
        return int(location["line"])
    return None


def _error_message(error: Exception) -> str:
    """Pierwsza niepusta linia komunikatu parsera (bez nagłówka 'Parser errors:')."""
    lines = [ln.strip() for ln in str(error).splitlines() if ln.strip()]
    lines = [ln for ln in lines if ln != "Parser errors:"]
    return lines[0] if lines else "Niepoprawny dokument Gherkin."
