"""Komenda: f2md fix-refs — odwołania '*.feature' → '*.generated.md' w .md / .yaml / .yml."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from xref.rewriter import fix_references

from f2md._files import find_reference_files

console = Console()


def fix_tree(root: Path) -> tuple[int, int]:
    """Przepisuje odwołania we wszystkich plikach pod `root`. Zwraca (zaktualizowane, błędy)."""
    updated = 0
    errors = 0
    for path in find_reference_files(root):
        try:
            changed = fix_references(path)
        except (OSError, UnicodeDecodeError) as e:
            console.print(f"[red]Błąd odczytu/zapisu {escape(str(path))}:[/red] {escape(str(e))}")
            errors += 1
            continue
        if changed:
            updated += 1
            console.print(f"[green]Zaktualizowano:[/green] {escape(str(path))}")

    if errors:
        console.print(f"[yellow]Zaktualizowano {updated} plików, błędy: {errors}.[/yellow]")
    else:
        console.print(f"Zaktualizowano {updated} plików.")
    return updated, errors


def run(args: argparse.Namespace) -> None:
    root = Path(args.root)
    if not root.is_dir():
        console.print(f"[red]Katalog nie istnieje:[/red] {escape(str(root))}")
        raise SystemExit(1)
    fix_tree(root)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "fix-refs",
        help="Przepisuje odwołania do plików .feature na wygenerowany Markdown.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Przeszukuje rekurencyjnie pliki .md, .yaml i .yml i zamienia odwołania
'<ścieżka>.feature' na '<ścieżka>.generated.md'. Plik zapisywany jest tylko,
gdy jego treść się zmieniła. Odwołania '.feature.md', '.feature.yml'
i '.feature.yaml' pozostają bez zmian.

Przykłady:
  f2md fix-refs
  f2md fix-refs --root docs
        """,
    )
    p.add_argument(
        "--root",
        metavar="KATALOG",
        default=".",
        help="Katalog przeszukiwany rekurencyjnie (domyślnie: bieżący).",
    )
    p.set_defaults(func=run)
