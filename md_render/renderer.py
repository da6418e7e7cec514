"""
md_render/renderer.py — serializacja drzewa dokumentu do Markdown.

Format (jak markdownowy pretty-printer gherkin-utils):
  - Feature                    → "# Feature: …"
  - Background/Scenario/Rule   → "## …"; scenariusze w regule → "### …"
  - Examples                   → poziom niżej niż ich scenariusz
  - kroki                      → "* Given …"
  - tabele (dane i przykłady)  → wiersze "  | a | b |" wcięte o 2 spacje,
                                 wiersz separatora "| --- |" pod nagłówkiem
  - doc stringi                → blok ``` (wcięty o 2 spacje)
  - tagi                       → linia z nazwami w `backtickach`
  - komentarze źródłowe        → dosłownie, wcięte co najmniej o 2 spacje,
                                 przed pierwszym węzłem, który następuje
                                 po nich w źródle

Renderer nie wie, jak ma wyglądać docelowy Markdown — wcięte tabele
i komentarze porządkują dopiero filtry z md_render.filters.
"""

from __future__ import annotations

import re

from feature_model.documents import (
    Background,
    DocString,
    Examples,
    FeatureDocument,
    Rule,
    Scenario,
    Step,
    TableRow,
    Tag,
)
from feature_parser.dialects import DEFAULT_LANGUAGE

# Wcięcie wierszy tabel i doc stringów pod elementem listy.
_INDENT = "  "

# Odpowiednik parseFloat(s) != NaN — komórki liczbowe wyrównujemy do prawej.
_NUMERIC_RE = re.compile(r"^\s*[-+]?(?:\d|\.\d|Infinity)")

# Najdłuższy ciąg backticków w treści doc stringu (do doboru ogrodzenia).
_BACKTICKS_RE = re.compile(r"`{3,}")

# Wiodące białe znaki linii opisu (łącznie z pustymi liniami).
_LEADING_WS_RE = re.compile(r"^\s*", re.MULTILINE)


def render_markdown(document: FeatureDocument) -> str:
    """Zwraca Markdown dla całego dokumentu."""
    return _MarkdownRenderer(document).render()


class _MarkdownRenderer:
    def __init__(self, document: FeatureDocument) -> None:
        self._document = document
        self._comments = sorted(document.comments, key=lambda c: c.line)
        self._parts: list[str] = []

    # ------------------------------------------------------------------
    # Publiczny interfejs
    # ------------------------------------------------------------------

    def render(self) -> str:
        feature = self._document.feature
        if feature.language != DEFAULT_LANGUAGE:
            self._parts.append(f"# language: {feature.language}\n")

        self._container(feature.keyword, feature.name, feature.description,
                        feature.line, level=0, tags=feature.tags)

        for child in feature.children:
            if isinstance(child, Rule):
                self._rule(child)
            else:
                self._scenario_like(child, level=1)

        self._flush_comments(None)
        return "".join(self._parts)

    # ------------------------------------------------------------------
    # Kontenery
    # ------------------------------------------------------------------

    def _rule(self, rule: Rule) -> None:
        self._container(rule.keyword, rule.name, rule.description,
                        rule.line, level=1, tags=rule.tags)
        for child in rule.children:
            self._scenario_like(child, level=2)

    def _scenario_like(self, node: Background | Scenario, level: int) -> None:
        tags = [] if isinstance(node, Background) else node.tags
        self._container(node.keyword, node.name, node.description,
                        node.line, level=level, tags=tags, step_count=len(node.steps))
        for step in node.steps:
            self._step(step)
        if isinstance(node, Scenario):
            for examples in node.examples:
                self._examples(examples, level + 1)

    def _examples(self, examples: Examples, level: int) -> None:
        self._container(examples.keyword, examples.name, examples.description,
                        examples.line, level=level, tags=examples.tags)
        self._table(examples.rows)

    def _container(
        self,
        keyword: str,
        name: str,
        description: str,
        line: int,
        level: int,
        tags: list[Tag],
        step_count: int = 0,
    ) -> None:
        first_line = min([line] + [t.line for t in tags])
        self._flush_comments(first_line)

        out = "" if level == 0 else "\n"
        if tags:
            out += " ".join(f"`{t.name}`" for t in tags) + "\n"
        out += "#" * (level + 1) + f" {keyword}: {name}\n"

        desc = _description(description)
        out += desc
        if desc and step_count > 0:
            out += "\n"
        self._parts.append(out)

    # ------------------------------------------------------------------
    # Kroki, tabele, doc stringi
    # ------------------------------------------------------------------

    def _step(self, step: Step) -> None:
        self._flush_comments(step.line)
        self._parts.append(f"* {step.keyword}{step.text}\n")
        if step.data_table:
            self._table(step.data_table)
        if step.doc_string:
            self._doc_string(step.doc_string)

    def _table(self, rows: list[TableRow]) -> None:
        if not rows:
            return
        ncols = max(len(r.cells) for r in rows)
        widths = [1] * ncols
        for row in rows:
            for j, cell in enumerate(row.cells):
                widths[j] = max(widths[j], len(_escape_cell(cell)))

        for i, row in enumerate(rows):
            self._flush_comments(row.line)
            self._parts.append(_table_row(row.cells, widths))
            if i == 0:
                self._parts.append(_table_row(["-" * w for w in widths], widths))

    def _doc_string(self, doc_string: DocString) -> None:
        longest = max((len(m) for m in _BACKTICKS_RE.findall(doc_string.content)), default=0)
        fence = "`" * max(3, longest + 1)
        content = "\n".join(_INDENT + ln for ln in doc_string.content.split("\n"))
        self._parts.append(
            f"{_INDENT}{fence}{doc_string.media_type or ''}\n"
            f"{content}\n"
            f"{_INDENT}{fence}\n"
        )

    # ------------------------------------------------------------------
    # Komentarze
    # ------------------------------------------------------------------

    def _flush_comments(self, before_line: int | None) -> None:
        """Emituje komentarze leżące w źródle przed `before_line` (None = wszystkie)."""
        while self._comments and (before_line is None or self._comments[0].line < before_line):
            text = self._comments.pop(0).text.rstrip()
            # Komentarz nigdy w kolumnie 0 — inaczej '# Rule: …' wyglądałby jak nagłówek
            if not text[:1].isspace():
                text = _INDENT + text
            self._parts.append(text + "\n")


# ---------------------------------------------------------------------------
# Pomocnicze
# ---------------------------------------------------------------------------

def _description(description: str) -> str:
    if not description:
        return ""
    return _LEADING_WS_RE.sub("", description) + "\n"


def _escape_cell(value: str) -> str:
    return value.replace("\\", "\\\\").replace("\n", "\\n").replace("|", "\\|")


def _table_row(cells: list[str], widths: list[int]) -> str:
    padded: list[str] = []
    for j, width in enumerate(widths):
        value = _escape_cell(cells[j]) if j < len(cells) else ""
        fill = " " * (width - len(value))
        padded.append(fill + value if _NUMERIC_RE.match(value) else value + fill)
    return f"{_INDENT}| " + " | ".join(padded) + " |\n"
