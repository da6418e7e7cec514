"""
feature_parser/dialects.py — słowa kluczowe dialektów Gherkin.

Zbiory słów kluczowych pochodzą z gherkin.dialect (gherkin-official), więc
działają dla każdego języka obsługiwanego przez parser (`# language: xx`).
Nieznany język → dialekt angielski.
"""

from __future__ import annotations

from functools import lru_cache

from gherkin.dialect import Dialect

DEFAULT_LANGUAGE = "en"


def _dialect(language: str | None) -> Dialect:
    return Dialect.for_name(language or DEFAULT_LANGUAGE) or Dialect.for_name(DEFAULT_LANGUAGE)


@lru_cache(maxsize=None)
def outline_keywords(language: str | None = DEFAULT_LANGUAGE) -> frozenset[str]:
    """Słowa kluczowe konspektu scenariusza, np. {"Scenario Outline", "Scenario Template"}."""
    return frozenset(k.strip() for k in _dialect(language).scenario_outline_keywords)


@lru_cache(maxsize=None)
def heading_keywords(language: str | None = DEFAULT_LANGUAGE) -> frozenset[str]:
    """
    Słowa kluczowe, które renderer zamienia na nagłówki Markdown:
    Feature, Rule, Background, Scenario, Scenario Outline, Examples.
    """
    d = _dialect(language)
    keywords = (
        list(d.feature_keywords)
        + list(d.rule_keywords)
        + list(d.background_keywords)
        + list(d.scenario_keywords)
        + list(d.scenario_outline_keywords)
        + list(d.examples_keywords)
    )
    return frozenset(k.strip() for k in keywords)


def is_outline_keyword(keyword: str, language: str | None = DEFAULT_LANGUAGE) -> bool:
    return keyword.strip() in outline_keywords(language)
