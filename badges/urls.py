"""badges/urls.py — obrazki statusu z zewnętrznej usługi badge (tryb BADGE)."""

from __future__ import annotations

import re
import warnings

from feature_model.errors import MissingNameWarning

_UNSAFE_RE = re.compile(r"[^a-zA-Z0-9\s-]")
_SPACES_RE = re.compile(r"\s+")
_DASHES_RE = re.compile(r"-+")


def slugify(name: str) -> str:
    """Zamień nazwę cechy/scenariusza na segment URL, np. 'My Feature!' → 'my-feature'."""
    text = _UNSAFE_RE.sub("", name.strip())
    text = _SPACES_RE.sub("-", text)
    text = _DASHES_RE.sub("-", text)
    return text.strip("-").lower()


def badge_markdown(
    badge_service_url: str | None,
    feature: str | None,
    scenario: str | None,
) -> str:
    """
    Zwraca ' ![badge](<url>/<cecha>/<scenariusz>)' do doklejenia za tytułem.

    Pusty ciąg (plus MissingNameWarning) gdy brakuje URL, nazwy cechy
    lub nazwy scenariusza.
    """
    if not badge_service_url:
        warnings.warn("Nie podano URL usługi badge — pomijam badge.", MissingNameWarning, stacklevel=2)
        return ""
    if not feature:
        warnings.warn("Brak nazwy cechy — pomijam badge.", MissingNameWarning, stacklevel=2)
        return ""
    if not scenario:
        warnings.warn("Brak nazwy scenariusza — pomijam badge.", MissingNameWarning, stacklevel=2)
        return ""

    base = badge_service_url.rstrip("/")
    return f" ![badge]({base}/{slugify(feature)}/{slugify(scenario)})"
