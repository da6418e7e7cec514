"""Konfiguracja konwersji — zmienne środowiskowe, nadpisywane argumentami CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from badges.annotator import AnnotationMode, Placement
from feature_model.errors import InvalidArgument

_URL_SCHEMES = ("http://", "https://")


@dataclass(slots=True)
class Settings:
    mode: AnnotationMode = AnnotationMode.INLINE
    badge_url: str | None = None
    placement: Placement = Placement.REPLACE
    stylesheet: str | None = None        # treść arkusza wstawiana na początek pliku


def validate_badge_url(url: str) -> str:
    if not url.startswith(_URL_SCHEMES):
        raise InvalidArgument(f"URL usługi badge musi zaczynać się od http:// lub https:// (otrzymano: {url!r}).")
    return url


def load_settings(
    badge_url: str | None = None,
    mode: str | None = None,
    placement: str | None = None,
    stylesheet: str | Path | None = None,
) -> Settings:
    """
    Składa Settings z argumentów CLI i zmiennych środowiskowych.

    Zmienne: F2MD_MODE, F2MD_BADGE_URL, F2MD_PLACEMENT, F2MD_STYLESHEET.
    URL podany w CLI bez jawnego trybu oznacza tryb badge. Tryb i URL
    rozstrzygane są razem: gdy CLI podaje którekolwiek z nich, zmienne
    środowiskowe uzupełniają tylko URL dla jawnego --mode badge.

    Raises:
        InvalidArgument: nieznany tryb/położenie, zły URL, konflikt trybów,
                         brak pliku arkusza stylów.
    """
    if mode is None and badge_url is None:
        mode = os.getenv("F2MD_MODE") or None
        badge_url = os.getenv("F2MD_BADGE_URL") or None
    elif mode is None:
        mode = AnnotationMode.BADGE
    elif mode == AnnotationMode.BADGE and badge_url is None:
        badge_url = os.getenv("F2MD_BADGE_URL") or None
    placement = placement or os.getenv("F2MD_PLACEMENT") or Placement.REPLACE
    stylesheet = stylesheet or os.getenv("F2MD_STYLESHEET") or None

    if mode is None:
        mode = AnnotationMode.BADGE if badge_url else AnnotationMode.INLINE

    try:
        resolved_mode = AnnotationMode(mode)
    except ValueError:
        raise InvalidArgument(f"Nieznany tryb adnotacji: {mode!r} (dozwolone: inline, badge).") from None
    try:
        resolved_placement = Placement(placement)
    except ValueError:
        raise InvalidArgument(f"Nieznane położenie znacznika: {placement!r} (dozwolone: replace, append).") from None

    if resolved_mode == AnnotationMode.BADGE:
        if not badge_url:
            raise InvalidArgument("Tryb badge wymaga URL usługi badge.")
        validate_badge_url(badge_url)
    elif badge_url:
        raise InvalidArgument("Tryby inline i badge wykluczają się — usuń URL albo wybierz --mode badge.")

    return Settings(
        mode=resolved_mode,
        badge_url=badge_url,
        placement=resolved_placement,
        stylesheet=_read_stylesheet(stylesheet) if stylesheet else None,
    )


def _read_stylesheet(path: str | Path) -> str:
    p = Path(path)
    try:
        return p.read_text(encoding="utf-8")
    except OSError as e:
        raise InvalidArgument(f"Nie można odczytać arkusza stylów {p}: {e}") from e
