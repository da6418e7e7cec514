"""
f2md/pipeline.py — konwersja jednego pliku .feature do Markdown.

Architektura:
  tekst → parse_feature_text() → FeatureDocument
  → annotate_document()        → kopia z oznaczonymi tytułami
  → render_markdown()          → Markdown (wcięte tabele, komentarze)
  → postprocess()              → Markdown po filtrach
  → (opcjonalnie) arkusz stylów na początku
  → plik <nazwa>.generated.md

Plik wyjściowy zapisywany jest dopiero po udanej transformacji — błąd
parsowania nie zostawia częściowego pliku.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from badges.annotator import annotate_document
from feature_model.documents import FeatureDocument
from feature_parser.parser import parse_feature_text
from md_render.filters import postprocess
from md_render.renderer import render_markdown

from f2md._config import Settings
from f2md._files import output_path


@dataclass(slots=True)
class Conversion:
    source: Path
    output: Path
    document: FeatureDocument    # drzewo przed adnotacją
    markdown: str


def document_to_markdown(document: FeatureDocument, settings: Settings) -> str:
    annotated = annotate_document(
        document,
        mode=settings.mode,
        badge_url=settings.badge_url,
        placement=settings.placement,
    )
    markdown = postprocess(render_markdown(annotated), annotated.feature.language)
    # Arkusz po filtrach — selektory '#id' nie mogą zostać wzięte za komentarze
    if settings.stylesheet:
        markdown = settings.stylesheet.rstrip("\n") + "\n\n" + markdown
    return markdown


def feature_to_markdown(text: str, settings: Settings, source: str | None = None) -> str:
    """Tekst .feature → gotowy Markdown (bez zapisu na dysk)."""
    return document_to_markdown(parse_feature_text(text, source), settings)


def convert_feature_file(path: str | Path, settings: Settings) -> Conversion:
    """
    Konwertuje plik i zapisuje wynik obok źródła.

    Raises:
        ParseError:         niepoprawny Gherkin (nic nie zostaje zapisane).
        OSError:            błąd odczytu/zapisu.
        UnicodeDecodeError: plik nie jest w UTF-8.
    """
    source = Path(path)
    text = source.read_text(encoding="utf-8")
    document = parse_feature_text(text, str(source))
    markdown = document_to_markdown(document, settings)

    out = output_path(source)
    out.write_text(markdown, encoding="utf-8")
    return Conversion(source=source, output=out, document=document, markdown=markdown)
