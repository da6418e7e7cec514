"""
badges/tags.py — znaczniki HTML identyfikujące tytuły cech i scenariuszy.

Znacznik (<span class="bdd-badge-…">) owija oryginalny tytuł; dodatek
renderujący dokumentację dopina do niego później status wyników testów.

Tytuły wstawiane są dosłownie, bez escapowania cudzysłowów i nawiasów
ostrych — to znane ograniczenie formatu.
"""

from __future__ import annotations

import warnings

from feature_model.errors import MissingNameWarning

FEATURE_TEMPLATE = '<span class="bdd-badge-feature" data-feature="{feature}">{feature}</span>'
SCENARIO_TEMPLATE = (
    '<span class="bdd-badge-scenario" data-feature="{feature}" '
    'data-scenario="{scenario}">{scenario}</span>'
)
OUTLINE_TEMPLATE = (
    '<span class="bdd-badge-scenario-outline" data-feature="{feature}" '
    'data-scenario-outline="{outline}">{outline}</span>'
)


def feature_tag(feature: str | None) -> str:
    if not feature:
        warnings.warn("Brak nazwy cechy — pomijam znacznik.", MissingNameWarning, stacklevel=2)
        return ""
    return FEATURE_TEMPLATE.format(feature=feature)


def scenario_tag(feature: str | None, scenario: str | None) -> str:
    if not feature:
        warnings.warn("Brak nazwy cechy — pomijam znacznik scenariusza.", MissingNameWarning, stacklevel=2)
        return ""
    if not scenario:
        warnings.warn(
            f"Brak nazwy scenariusza w cesze '{feature}' — pomijam znacznik.",
            MissingNameWarning,
            stacklevel=2,
        )
        return ""
    return SCENARIO_TEMPLATE.format(feature=feature, scenario=scenario)


def outline_tag(feature: str | None, outline: str | None) -> str:
    if not feature:
        warnings.warn("Brak nazwy cechy — pomijam znacznik konspektu.", MissingNameWarning, stacklevel=2)
        return ""
    if not outline:
        warnings.warn(
            f"Brak nazwy konspektu scenariusza w cesze '{feature}' — pomijam znacznik.",
            MissingNameWarning,
            stacklevel=2,
        )
        return ""
    return OUTLINE_TEMPLATE.format(feature=feature, outline=outline)


def badge_tag(
    feature: str | None,
    scenario: str | None = None,
    outline: str | None = None,
) -> str:
    """
    Zwraca znacznik dla cechy, scenariusza albo konspektu.

    Rodzaj znacznika wynika z tego, który argument podano:
      - tylko feature          → bdd-badge-feature
      - feature + scenario     → bdd-badge-scenario
      - feature + outline      → bdd-badge-scenario-outline
    """
    if scenario is not None and outline is not None:
        raise ValueError("Podaj scenario albo outline, nie oba naraz.")
    if outline is not None:
        return outline_tag(feature, outline)
    if scenario is not None:
        return scenario_tag(feature, scenario)
    return feature_tag(feature)
