"""Komenda: f2md convert — konwersja plików .feature do Markdown ze znacznikami."""

from __future__ import annotations

import argparse
import warnings
from dataclasses import dataclass, field
from pathlib import Path

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from feature_model.documents import FeatureDocument, Rule
from feature_model.errors import InvalidArgument, MissingNameWarning, ParseError

from f2md._config import Settings, load_settings
from f2md._files import find_feature_files
from f2md.pipeline import convert_feature_file

console = Console()


@dataclass(slots=True)
class FileResult:
    source: Path
    output: Path | None = None
    error: str | None = None
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None


# ---------------------------------------------------------------------------
# Konwersja drzewa katalogów
# ---------------------------------------------------------------------------

def convert_tree(root: Path, settings: Settings, verbose: bool = False) -> list[FileResult]:
    """Konwertuje wszystkie pliki .feature pod `root`; błędy jednego pliku nie przerywają reszty."""
    files = find_feature_files(root)
    if not files:
        console.print(f"[yellow]Nie znaleziono plików .feature w {escape(str(root))}.[/yellow]")
        console.print("Skonwertowano 0 plików .feature.")
        return []

    results: list[FileResult] = []
    for i, path in enumerate(files, 1):
        console.print(f"[{i}/{len(files)}] Przetwarzanie: [bold]{escape(str(path))}[/bold]")
        results.append(_convert_one(path, settings, verbose))

    converted = sum(1 for r in results if r.ok)
    failed = len(results) - converted
    console.print()
    if failed:
        console.print(f"[yellow]Skonwertowano {converted} plików .feature, błędy: {failed}.[/yellow]")
    else:
        console.print(f"[green]Skonwertowano {converted} plików .feature.[/green]")
    return results


def _convert_one(path: Path, settings: Settings, verbose: bool) -> FileResult:
    result = FileResult(source=path)
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", MissingNameWarning)
        try:
            conversion = convert_feature_file(path, settings)
        except ParseError as e:
            result.error = f"błąd parsowania: {e}"
        except (OSError, UnicodeDecodeError) as e:
            result.error = f"błąd odczytu/zapisu: {e}"

    for w in caught:
        if issubclass(w.category, MissingNameWarning):
            result.warnings.append(str(w.message))
            console.print(f"    [yellow]Ostrzeżenie ({escape(str(path))}):[/yellow] {escape(str(w.message))}")

    if result.error:
        console.print(f"    [red]Pominięto {escape(str(path))} —[/red] {escape(result.error)}")
        return result

    result.output = conversion.output
    if verbose:
        _print_details(conversion.document)
    console.print(f"    [green]Zapisano:[/green] {escape(str(conversion.output))}")
    return result


def _print_details(document: FeatureDocument) -> None:
    feature = document.feature
    console.print(f"    [dim]# elementów w cesze: {len(feature.children)}[/dim]")
    for child in feature.children:
        scenarios = child.children if isinstance(child, Rule) else [child]
        for scenario in scenarios:
            console.print(
                f"    [dim]{escape(scenario.keyword)}:[/dim] [cyan]{escape(scenario.name)}[/cyan]"
            )


# ---------------------------------------------------------------------------
# Wyświetlanie w terminalu
# ---------------------------------------------------------------------------

def show_table(results: list[FileResult]) -> None:
    if not results:
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("PLIK", no_wrap=False, style="bold cyan")
    table.add_column("WYNIK", no_wrap=False)
    table.add_column("OSTRZ.", justify="right", no_wrap=True)
    table.add_column("STATUS", justify="center", no_wrap=True)

    for r in results:
        table.add_row(
            escape(str(r.source)),
            escape(str(r.output)) if r.output else "-",
            str(len(r.warnings)),
            "[green]OK[/green]" if r.ok else "[red]BŁĄD[/red]",
        )

    console.print()
    console.print(table)


# ---------------------------------------------------------------------------
# Główna logika komendy
# ---------------------------------------------------------------------------

def settings_from_args(args: argparse.Namespace) -> Settings:
    """Settings z argumentów; błędny argument kończy program przed przetwarzaniem."""
    try:
        return load_settings(
            badge_url=args.badge_url,
            mode=args.mode,
            placement=args.placement,
            stylesheet=args.stylesheet,
        )
    except InvalidArgument as e:
        console.print(f"[red]Błędny argument:[/red] {escape(str(e))}")
        raise SystemExit(1)


def root_from_args(args: argparse.Namespace) -> Path:
    root = Path(args.root)
    if not root.is_dir():
        console.print(f"[red]Katalog nie istnieje:[/red] {escape(str(root))}")
        raise SystemExit(1)
    return root


def run(args: argparse.Namespace) -> None:
    settings = settings_from_args(args)
    root = root_from_args(args)

    console.print(
        f"Konwersja plików .feature w [bold]{escape(str(root))}[/bold] "
        f"(tryb=[cyan]{settings.mode}[/cyan])"
    )
    results = convert_tree(root, settings, verbose=args.verbose)

    if args.show:
        show_table(results)

    if args.strict and any(not r.ok for r in results):
        raise SystemExit(1)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_convert_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "badge_url",
        nargs="?",
        metavar="BADGE_URL",
        default=None,
        help="Bazowy URL usługi badge (włącza tryb badge zamiast znaczników <span>).",
    )
    p.add_argument(
        "--root",
        metavar="KATALOG",
        default=".",
        help="Katalog przeszukiwany rekurencyjnie (domyślnie: bieżący).",
    )
    p.add_argument(
        "--mode",
        choices=["inline", "badge"],
        default=None,
        help="Tryb adnotacji tytułów (domyślnie: inline, albo badge gdy podano URL).",
    )
    p.add_argument(
        "--placement",
        choices=["replace", "append"],
        default=None,
        help="Tryb inline: zastąp tytuł znacznikiem albo dopisz znacznik za tytułem.",
    )
    p.add_argument(
        "--stylesheet",
        metavar="PLIK",
        default=None,
        help="Plik wstawiany bez zmian na początek każdego wygenerowanego Markdown.",
    )
    p.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Wypisz liczbę elementów i oznaczane scenariusze.",
    )
    p.add_argument(
        "--show",
        action="store_true",
        help="Wyświetl tabelę wyników w terminalu.",
    )
    p.add_argument(
        "--strict",
        action="store_true",
        help="Zakończ z kodem 1, jeśli którykolwiek plik się nie skonwertował.",
    )


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "convert",
        help="Konwertuje pliki .feature do <nazwa>.generated.md.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wyszukuje rekurencyjnie pliki .feature i zapisuje obok nich Markdown
(<nazwa>.generated.md) z oznaczonymi tytułami cech i scenariuszy.

Przykłady:
  f2md convert
  f2md convert --root docs/features --show
  f2md convert https://badges.example.com
  f2md convert --placement append --stylesheet docs/bdd-badges.css
        """,
    )
    add_convert_arguments(p)
    p.set_defaults(func=run)
