"""
md_render/filters.py — tekstowe poprawki Markdown po renderowaniu.

Co usuwamy:
  - Komentarze Gherkin (linie, których treść po trim zaczyna się od '#'),
    także komentarze wewnątrz tabel Examples i dyrektywę '# language:'
  - Wcięcia wierszy tabel (renderer wcina je pod elementem listy, a procesory
    Markdown nie rozpoznają wtedy tabeli)
  - Nadmiarowe puste linie za tabelą

Co zachowujemy:
  - Nagłówki: linia od kolumny 0, 1–6 znaków '#', spacja, słowo kluczowe
    dialektu (Feature/Rule/Background/Scenario/Scenario Outline/Examples)
    i dwukropek
  - Zawartość bloków ``` doc stringów (ogrodzenie wcięte o 2 spacje) bez zmian
  - Pionowe kreski w tekście kroków ("opcja1|opcja2") — tabelą jest tylko
    linia, która po trim zaczyna się i kończy znakiem '|'

Oba filtry są idempotentne.
"""

from __future__ import annotations

import re

from feature_parser.dialects import DEFAULT_LANGUAGE, heading_keywords

# Nagłówek Markdown: "## Scenario: …" (słowo kluczowe weryfikowane osobno).
_HEADING_RE = re.compile(r"^#{1,6} (?P<keyword>[^\s:][^:]*):(?: |$)")

# Ogrodzenie doc stringu — renderer wcina je zawsze o 2 spacje; ``` w opisie
# (kolumna 0) nie otwiera bloku.
_FENCE_RE = re.compile(r"^ {2}(`{3,})")


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def is_heading(line: str, language: str = DEFAULT_LANGUAGE) -> bool:
    """True gdy linia jest nagłówkiem wygenerowanym przez renderer."""
    m = _HEADING_RE.match(line)
    return bool(m) and m.group("keyword").strip() in heading_keywords(language)


def strip_comments(markdown: str, language: str = DEFAULT_LANGUAGE) -> str:
    """Usuwa linie-komentarze; nagłówki i bloki kodu zostają."""
    out: list[str] = []
    fence: str | None = None

    for line in markdown.split("\n"):
        m = _FENCE_RE.match(line)
        if fence is not None:
            if m and m.group(1) == fence and line.strip() == fence:
                fence = None
            out.append(line)
            continue
        if m:
            fence = m.group(1)
            out.append(line)
            continue

        if line.strip().startswith("#") and not is_heading(line, language):
            continue
        out.append(line)

    return "\n".join(out)


def is_table_row(line: str) -> bool:
    stripped = line.strip()
    return len(stripped) >= 2 and stripped.startswith("|") and stripped.endswith("|")


def format_tables(markdown: str) -> str:
    """
    Przesuwa wiersze tabel do kolumny 0 i zamyka każdą tabelę jedną pustą linią.

    Za ostatnim wierszem tabeli:
      - kolejna linia z treścią  → wstawiamy jedną pustą linię
      - kilka pustych linii      → zostaje jedna
      - koniec dokumentu         → tekst kończy się '|\\n\\n'
    """
    lines = markdown.split("\n")
    out: list[str] = []
    fence: str | None = None
    i = 0

    while i < len(lines):
        line = lines[i]

        m = _FENCE_RE.match(line)
        if fence is not None:
            if m and m.group(1) == fence and line.strip() == fence:
                fence = None
            out.append(line)
            i += 1
            continue
        if m:
            fence = m.group(1)
            out.append(line)
            i += 1
            continue

        if not is_table_row(line):
            out.append(line)
            i += 1
            continue

        # Ciągły przebieg wierszy tabeli
        while i < len(lines) and is_table_row(lines[i]):
            out.append(lines[i].strip())
            i += 1

        # Pomiń puste linie za tabelą i wstaw dokładnie jedną
        while i < len(lines) and not lines[i].strip():
            i += 1
        out.append("")
        if i == len(lines):
            out.append("")

    return "\n".join(out)


def postprocess(markdown: str, language: str = DEFAULT_LANGUAGE) -> str:
    """Komentarze, potem tabele — w tej kolejności."""
    return format_tables(strip_comments(markdown, language))
