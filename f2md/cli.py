"""
f2md — konwersja plików Gherkin (.feature) do Markdown dla dokumentacji.

Użycie:
  f2md [<komenda>] [opcje]

Komendy:
  convert   Konwertuje pliki .feature do <nazwa>.generated.md (domyślna).
  fix-refs  Przepisuje odwołania '*.feature' w plikach .md / .yaml / .yml.
  build     convert + fix-refs.

Wywołanie bez argumentów = 'f2md convert' w bieżącym katalogu.
Wywołanie 'f2md <BADGE_URL>' albo 'f2md --root …' = 'f2md convert …'.
"""

from __future__ import annotations

import argparse
import sys

from f2md import __version__
from f2md.commands import build as cmd_build
from f2md.commands import convert as cmd_convert
from f2md.commands import fix_refs as cmd_fix_refs

COMMANDS = ("convert", "fix-refs", "build")
# Opcje obsługiwane przez parser główny, a nie przez komendę.
TOP_LEVEL_OPTIONS = ("-h", "--help", "--version")
DEFAULT_COMMAND = "convert"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="f2md",
        description="feature2md — pliki .feature → Markdown ze znacznikami.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"f2md {__version__}"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_convert.add_parser(subparsers)
    cmd_fix_refs.add_parser(subparsers)
    cmd_build.add_parser(subparsers)

    return parser


def _with_default_command(argv: list[str]) -> list[str]:
    """Brak komendy (pusto, URL albo opcja convert, np. --root) → convert."""
    if not argv:
        return [DEFAULT_COMMAND]
    first = argv[0]
    if first in COMMANDS or first in TOP_LEVEL_OPTIONS:
        return argv
    return [DEFAULT_COMMAND, *argv]


def main(argv: list[str] | None = None) -> None:
    # Windows: terminal może używać cp1252 — wymuszamy UTF-8 dla polskich znaków.
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")
    if hasattr(sys.stderr, "reconfigure"):
        sys.stderr.reconfigure(encoding="utf-8", errors="replace")

    parser = build_parser()
    args = parser.parse_args(_with_default_command(list(sys.argv[1:] if argv is None else argv)))
    args.func(args)


if __name__ == "__main__":
    main()
