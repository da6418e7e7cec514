"""
badges/annotator.py — dekorowanie tytułów drzewa dokumentu znacznikami.

annotate_document():
  - Zwraca głęboką kopię dokumentu; drzewo wejściowe pozostaje bez zmian.
  - INLINE: tytuł cechy → bdd-badge-feature, scenariusza → bdd-badge-scenario,
    konspektu → bdd-badge-scenario-outline. Reguła przepuszcza swój tytuł
    bez zmian, a jej scenariusze dostają znaczniki jak scenariusze cechy.
  - BADGE: za tytułem każdego scenariusza/konspektu doklejany jest obrazek
    ' ![badge](…)'; tytuł cechy bez zmian.
  - Background nie jest oznaczany w żadnym trybie.

Po adnotacji każdy tytuł nadal zawiera oryginalny tytuł jako podciąg; gdy
znacznika nie da się zbudować (brak nazwy), tytuł zostaje bez zmian.
"""

from __future__ import annotations

import copy
from enum import StrEnum

from feature_model.documents import (
    Background,
    FeatureDocument,
    Rule,
    Scenario,
    ScenarioOutline,
)

from .tags import feature_tag, outline_tag, scenario_tag
from .urls import badge_markdown


class AnnotationMode(StrEnum):
    """Sposób oznaczania tytułów (tryby wzajemnie wykluczające się)."""
    INLINE = "inline"    # znacznik <span> w tytule
    BADGE  = "badge"     # obrazek z zewnętrznej usługi badge


class Placement(StrEnum):
    """Położenie znacznika INLINE względem tytułu."""
    REPLACE = "replace"  # tytuł → znacznik (domyślnie; znacznik zawiera tytuł)
    APPEND  = "append"   # "tytuł znacznik"


def annotate_document(
    document: FeatureDocument,
    mode: AnnotationMode = AnnotationMode.INLINE,
    badge_url: str | None = None,
    placement: Placement = Placement.REPLACE,
) -> FeatureDocument:
    """
    Zwraca kopię dokumentu z oznaczonymi tytułami.

    Args:
        document:  drzewo z parse_feature_text().
        mode:      INLINE albo BADGE.
        badge_url: bazowy URL usługi badge (tylko tryb BADGE).
        placement: REPLACE albo APPEND (tylko tryb INLINE).
    """
    document = copy.deepcopy(document)
    feature = document.feature
    feature_name = feature.name  # oryginalny tytuł — do atrybutów data-*

    if mode == AnnotationMode.INLINE:
        feature.name = _place(feature.name, feature_tag(feature_name), placement)

    for child in feature.children:
        if isinstance(child, Rule):
            for scenario in child.children:
                _annotate_scenario(scenario, feature_name, mode, badge_url, placement)
        else:
            _annotate_scenario(child, feature_name, mode, badge_url, placement)

    return document


def _annotate_scenario(
    node: Background | Scenario,
    feature_name: str,
    mode: AnnotationMode,
    badge_url: str | None,
    placement: Placement,
) -> None:
    if isinstance(node, Background):
        return

    if mode == AnnotationMode.BADGE:
        node.name += badge_markdown(badge_url, feature_name, node.name)
        return

    if isinstance(node, ScenarioOutline):
        tag = outline_tag(feature_name, node.name)
    else:
        tag = scenario_tag(feature_name, node.name)
    node.name = _place(node.name, tag, placement)


def _place(title: str, tag: str, placement: Placement) -> str:
    if not tag:
        return title
    if placement == Placement.APPEND:
        return f"{title} {tag}"
    return tag
