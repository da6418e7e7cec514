from __future__ import annotations

import textwrap

import pytest

from feature_model.documents import Background, Rule, Scenario, ScenarioOutline
from feature_model.errors import ParseError
from feature_parser import heading_keywords, is_outline_keyword, outline_keywords
from feature_parser.parser import parse_feature_file, parse_feature_text


def test_parses_feature_title_and_scenario(simple_feature: str) -> None:
    document = parse_feature_text(simple_feature)
    feature = document.feature

    assert feature.name == "Test Feature"
    assert feature.keyword == "Feature"
    assert feature.language == "en"
    assert "This is a test feature" in feature.description
    assert len(feature.children) == 1

    scenario = feature.children[0]
    assert type(scenario) is Scenario
    assert scenario.name == "Test Scenario"
    assert [s.keyword.strip() for s in scenario.steps] == ["Given", "When", "Then"]
    assert scenario.steps[0].text == "something"


def test_outline_is_recognised_by_keyword(outline_feature: str) -> None:
    document = parse_feature_text(outline_feature)
    outline = document.feature.children[0]

    assert isinstance(outline, ScenarioOutline)
    assert outline.name == "Adding numbers"
    assert len(outline.examples) == 1
    rows = outline.examples[0].rows
    assert [r.cells for r in rows] == [["a", "b", "sum"], ["1", "2", "3"], ["5", "5", "10"]]


def test_scenario_template_keyword_is_an_outline() -> None:
    text = textwrap.dedent(
        """\
        Feature: F
          Scenario Template: T
            Given <x>

            Examples:
              | x |
              | 1 |
        """
    )
    assert isinstance(parse_feature_text(text).feature.children[0], ScenarioOutline)


def test_rule_children_are_nested(rule_feature: str) -> None:
    feature = parse_feature_text(rule_feature).feature
    rule = feature.children[0]

    assert isinstance(rule, Rule)
    assert rule.name == "Business Rule"
    assert [c.name for c in rule.children] == ["Scenario under rule"]


def test_background_comments_tags_tables_and_doc_strings() -> None:
    text = textwrap.dedent(
        '''\
        @billing
        Feature: Invoices
          Background:
            Given an account

          # komentarz
          @fast @smoke
          Scenario: Send invoice
            Given the customers:
              | name | city   |
              | Jan  | Kraków |
            Then the mail contains:
              """text/plain
              Dear customer
              """
        '''
    )
    document = parse_feature_text(text)
    feature = document.feature

    assert [t.name for t in feature.tags] == ["@billing"]
    assert isinstance(feature.children[0], Background)

    scenario = feature.children[1]
    assert [t.name for t in scenario.tags] == ["@fast", "@smoke"]
    assert [r.cells for r in scenario.steps[0].data_table] == [["name", "city"], ["Jan", "Kraków"]]
    doc_string = scenario.steps[1].doc_string
    assert doc_string.content == "Dear customer"
    assert doc_string.media_type == "text/plain"

    assert [c.text.strip() for c in document.comments] == ["# komentarz"]
    assert document.comments[0].line == 6


def test_non_english_dialect() -> None:
    text = textwrap.dedent(
        """\
        # language: pl
        Właściwość: Logowanie
          Szablon scenariusza: Wiele kont
            * <konto>

            Przykłady:
              | konto |
              | a     |
        """
    )
    feature = parse_feature_text(text).feature
    assert feature.language == "pl"
    assert isinstance(feature.children[0], ScenarioOutline)


def test_invalid_gherkin_raises_parse_error() -> None:
    text = "Feature: Broken\n  Scenario: S\n    Given x\n  this is not gherkin\n    | a |\n"
    with pytest.raises(ParseError) as info:
        parse_feature_text(text, "broken.feature")
    assert info.value.source == "broken.feature"
    assert "broken.feature" in str(info.value)


def test_document_without_feature_is_parse_error() -> None:
    with pytest.raises(ParseError):
        parse_feature_text("# tylko komentarz\n")


def test_parse_feature_file_records_source(tmp_path, simple_feature: str) -> None:
    path = tmp_path / "test.feature"
    path.write_text(simple_feature, encoding="utf-8")

    document = parse_feature_file(path)
    assert document.source == str(path)


def test_dialect_keywords() -> None:
    assert {"Scenario Outline", "Scenario Template"} <= outline_keywords("en")
    assert {"Feature", "Rule", "Background", "Scenario", "Examples"} <= heading_keywords("en")
    assert is_outline_keyword("Scenario Outline")
    assert not is_outline_keyword("Scenario")
    # nieznany język → angielski
    assert is_outline_keyword("Scenario Outline", "xx-unknown")
