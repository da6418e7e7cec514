from __future__ import annotations

import textwrap

import pytest

from badges import AnnotationMode, Placement, annotate_document
from badges.tags import feature_tag, outline_tag, scenario_tag
from feature_model.documents import Background, Rule
from feature_model.errors import MissingNameWarning
from feature_parser.parser import parse_feature_text


def _mixed_document():
    return parse_feature_text(textwrap.dedent(
        """\
        Feature: Shop
          Background:
            Given an open shop

          Scenario: Buy
            Given a product

          Scenario Outline: Pay <method>
            Given I pay with <method>

            Examples:
              | method |
              | card   |

          Rule: Limits
            Scenario: Too many items
              Given 100 items
        """
    ))


def test_inline_mode_replaces_titles_with_tags() -> None:
    annotated = annotate_document(_mixed_document())
    feature = annotated.feature
    background, buy, pay, rule = feature.children

    assert feature.name == feature_tag("Shop")
    assert isinstance(background, Background)
    assert background.name == ""
    assert buy.name == scenario_tag("Shop", "Buy")
    assert pay.name == outline_tag("Shop", "Pay <method>")
    assert isinstance(rule, Rule)
    assert rule.name == "Limits"
    assert rule.children[0].name == scenario_tag("Shop", "Too many items")


def test_annotation_keeps_original_titles_as_substrings() -> None:
    original = _mixed_document()
    annotated = annotate_document(original)

    assert "Shop" in annotated.feature.name
    for before, after in zip(original.feature.children, annotated.feature.children):
        assert before.name in after.name


def test_parsed_document_is_not_mutated() -> None:
    original = _mixed_document()
    annotate_document(original)

    assert original.feature.name == "Shop"
    assert original.feature.children[1].name == "Buy"


def test_append_placement_keeps_title_before_tag() -> None:
    annotated = annotate_document(_mixed_document(), placement=Placement.APPEND)

    assert annotated.feature.name == "Shop " + feature_tag("Shop")
    assert annotated.feature.children[1].name == "Buy " + scenario_tag("Shop", "Buy")


def test_badge_mode_appends_badge_images() -> None:
    annotated = annotate_document(
        _mixed_document(),
        mode=AnnotationMode.BADGE,
        badge_url="https://badges.example.com/",
    )
    feature = annotated.feature

    assert feature.name == "Shop"
    assert feature.children[1].name == "Buy ![badge](https://badges.example.com/shop/buy)"
    assert feature.children[2].name == "Pay <method> ![badge](https://badges.example.com/shop/pay-method)"
    assert feature.children[3].children[0].name.endswith("/shop/too-many-items)")
    assert "bdd-badge" not in feature.children[1].name


def test_missing_feature_name_leaves_titles_untouched() -> None:
    document = parse_feature_text("Feature:\n  Scenario: Lonely\n    Given x\n")

    with pytest.warns(MissingNameWarning):
        annotated = annotate_document(document)

    assert annotated.feature.name == ""
    assert annotated.feature.children[0].name == "Lonely"
