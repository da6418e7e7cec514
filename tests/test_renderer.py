from __future__ import annotations

import textwrap

from feature_parser.parser import parse_feature_text
from md_render.renderer import render_markdown


def test_renders_headings_description_and_steps(simple_feature: str) -> None:
    markdown = render_markdown(parse_feature_text(simple_feature))

    assert markdown == (
        "# Feature: Test Feature\n"
        "This is a test feature\n"
        "\n"
        "## Scenario: Test Scenario\n"
        "* Given something\n"
        "* When something happens\n"
        "* Then something should occur\n"
    )


def test_rule_children_are_one_level_deeper(rule_feature: str) -> None:
    markdown = render_markdown(parse_feature_text(rule_feature))
    lines = markdown.splitlines()

    assert "## Rule: Business Rule" in lines
    assert "This is a business rule" in lines
    assert "### Scenario: Scenario under rule" in lines
    assert lines.index("## Rule: Business Rule") < lines.index("### Scenario: Scenario under rule")


def test_examples_table_is_padded_with_separator_and_comment(outline_feature: str) -> None:
    markdown = render_markdown(parse_feature_text(outline_feature))

    assert "## Scenario Outline: Adding numbers\n" in markdown
    assert "### Examples: \n" in markdown
    assert (
        "  | a | b | sum |\n"
        "  | - | - | --- |\n"
        "      # pierwszy wiersz\n"
        "  | 1 | 2 |   3 |\n"
        "  | 5 | 5 |  10 |\n"
    ) in markdown


def test_tags_data_tables_and_doc_strings() -> None:
    text = textwrap.dedent(
        '''\
        @billing
        Feature: Invoices

          @fast
          Scenario: Send invoice
            Given the customers:
              | name | note   |
              | Jan  | a\\|b   |
            Then the mail contains:
              """markdown
              ```
              code
              ```
              """
        '''
    )
    markdown = render_markdown(parse_feature_text(text))

    assert markdown.startswith("`@billing`\n# Feature: Invoices\n")
    assert "\n`@fast`\n## Scenario: Send invoice\n" in markdown
    assert "  | name | note |\n" in markdown
    assert "  | Jan  | a\\|b |\n" in markdown
    assert "  ````markdown\n  ```\n  code\n  ```\n  ````\n" in markdown


def test_non_english_document_gets_language_line() -> None:
    text = "# language: pl\nWłaściwość: Logowanie\n  Scenariusz: Poprawne hasło\n    * loguję się\n"
    markdown = render_markdown(parse_feature_text(text))

    assert markdown.startswith("# language: pl\n# Właściwość: Logowanie\n")
    assert "## Scenariusz: Poprawne hasło\n" in markdown


def test_column_zero_comments_are_indented() -> None:
    markdown = render_markdown(parse_feature_text("Feature: F\n# Rule: old\n  Scenario: S\n    Given x\n"))

    assert markdown == "# Feature: F\n  # Rule: old\n\n## Scenario: S\n* Given x\n"
