"""Wyszukiwanie plików w drzewie katalogów."""

from __future__ import annotations

import os
from pathlib import Path

from xref.rewriter import OUTPUT_SUFFIX, REFERENCE_EXTENSIONS

FEATURE_SUFFIX = ".feature"

# Katalogi, do których nie schodzimy.
_SKIP_DIRS = frozenset({".git", ".hg", ".venv", "venv", "node_modules", "__pycache__"})


def find_files(root: str | Path, extensions: tuple[str, ...]) -> list[Path]:
    """Rekurencyjnie zwraca pliki z podanymi rozszerzeniami (posortowane)."""
    results: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = [d for d in dirnames if d not in _SKIP_DIRS]
        for name in filenames:
            if name.endswith(extensions):
                results.append(Path(dirpath) / name)
    return sorted(results)


def find_feature_files(root: str | Path) -> list[Path]:
    return find_files(root, (FEATURE_SUFFIX,))


def find_reference_files(root: str | Path) -> list[Path]:
    return find_files(root, REFERENCE_EXTENSIONS)


def output_path(feature_path: str | Path) -> Path:
    """'docs/login.feature' → 'docs/login.generated.md'."""
    p = Path(feature_path)
    stem = p.name[: -len(FEATURE_SUFFIX)] if p.name.endswith(FEATURE_SUFFIX) else p.name
    return p.with_name(stem + OUTPUT_SUFFIX)
