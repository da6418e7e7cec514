"""
xref/rewriter.py — przepisywanie odwołań do plików .feature w dokumentacji.

Każdy token (ciąg znaków niebiałych) kończący się na '.feature' dostaje
sufiks wygenerowanego Markdown. Pomijamy tokeny, po których następuje
'.md', '.yml' lub '.yaml' (np. 'config.feature.yml') albo dalsza litera
('a.features'). Zmiana jest czysto tekstowa — bez parsowania Markdown/YAML.
"""

from __future__ import annotations

import re
from pathlib import Path

# Sufiks plików generowanych przez konwerter — wspólny dla obu przebiegów.
OUTPUT_SUFFIX = ".generated.md"

# Rozszerzenia plików, w których szukamy odwołań.
REFERENCE_EXTENSIONS = (".md", ".yaml", ".yml")

_FEATURE_REF_RE = re.compile(r"(\S+?)\.feature(?!\.(?:md|yml|yaml)\b)(?![\w-])")


def rewrite_references(text: str, suffix: str = OUTPUT_SUFFIX) -> str:
    """Zwraca tekst z odwołaniami '*.feature' zamienionymi na '*<suffix>'."""
    return _FEATURE_REF_RE.sub(lambda m: m.group(1) + suffix, text)


def fix_references(path: str | Path, suffix: str = OUTPUT_SUFFIX) -> bool:
    """
    Przepisuje odwołania w pliku. Zapisuje tylko gdy treść się zmieniła.

    Zwraca True gdy plik został zaktualizowany.
    """
    path = Path(path)
    content = path.read_text(encoding="utf-8")
    replaced = rewrite_references(content, suffix)
    if replaced == content:
        return False
    path.write_text(replaced, encoding="utf-8")
    return True
