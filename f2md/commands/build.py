"""Komenda: f2md build — convert, a następnie fix-refs w tym samym katalogu."""

from __future__ import annotations

import argparse

from rich.console import Console

from f2md.commands import convert as cmd_convert
from f2md.commands import fix_refs as cmd_fix_refs

console = Console()


def run(args: argparse.Namespace) -> None:
    settings = cmd_convert.settings_from_args(args)
    root = cmd_convert.root_from_args(args)

    console.rule("convert")
    results = cmd_convert.convert_tree(root, settings, verbose=args.verbose)
    if args.show:
        cmd_convert.show_table(results)

    console.rule("fix-refs")
    _, ref_errors = cmd_fix_refs.fix_tree(root)

    if args.strict and (ref_errors or any(not r.ok for r in results)):
        raise SystemExit(1)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "build",
        help="Konwersja plików .feature i aktualizacja odwołań (convert + fix-refs).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Pełne przygotowanie dokumentacji: najpierw convert, potem fix-refs
w tym samym katalogu. Opcje jak w 'f2md convert'.

Przykłady:
  f2md build
  f2md build --root docs --show
        """,
    )
    cmd_convert.add_convert_arguments(p)
    p.set_defaults(func=run)
