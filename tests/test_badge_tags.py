from __future__ import annotations

import pytest

from badges.tags import badge_tag, feature_tag, outline_tag, scenario_tag
from feature_model.errors import MissingNameWarning


def test_feature_tag_matches_template() -> None:
    assert feature_tag("Login") == (
        '<span class="bdd-badge-feature" data-feature="Login">Login</span>'
    )


def test_scenario_tag_matches_template() -> None:
    assert scenario_tag("Login", "Wrong password") == (
        '<span class="bdd-badge-scenario" data-feature="Login" '
        'data-scenario="Wrong password">Wrong password</span>'
    )


def test_outline_tag_matches_template() -> None:
    assert outline_tag("Login", "Many users") == (
        '<span class="bdd-badge-scenario-outline" data-feature="Login" '
        'data-scenario-outline="Many users">Many users</span>'
    )


@pytest.mark.parametrize(
    ("feature", "scenario"),
    [
        ("Test Feature", "Test Scenario"),
        ("Zamówienia", "Klient płaci kartą"),
        ("A", "B"),
    ],
)
def test_scenario_tag_contains_both_titles(feature: str, scenario: str) -> None:
    tag = badge_tag(feature, scenario=scenario)
    assert feature in tag
    assert scenario in tag
    assert tag.endswith(f">{scenario}</span>")


def test_feature_only_tag_has_no_scenario_attribute() -> None:
    tag = badge_tag("Checkout")
    assert "data-scenario" not in tag
    assert 'class="bdd-badge-feature"' in tag


def test_outline_tag_never_has_plain_scenario_attribute() -> None:
    tag = badge_tag("Checkout", outline="Totals")
    assert "data-scenario-outline" in tag
    assert "data-scenario=" not in tag


def test_badge_tag_rejects_scenario_and_outline_together() -> None:
    with pytest.raises(ValueError):
        badge_tag("Checkout", scenario="a", outline="b")


def test_titles_are_inserted_verbatim() -> None:
    tag = scenario_tag('Say "hi"', "<b>bold</b>")
    assert 'data-feature="Say "hi""' in tag
    assert ">&lt;" not in tag
    assert "<b>bold</b></span>" in tag


@pytest.mark.parametrize("missing", ["", None])
def test_missing_feature_name_warns_and_returns_empty(missing: str | None) -> None:
    with pytest.warns(MissingNameWarning):
        assert feature_tag(missing) == ""
    with pytest.warns(MissingNameWarning):
        assert scenario_tag(missing, "Scenario") == ""
    with pytest.warns(MissingNameWarning):
        assert outline_tag(missing, "Outline") == ""


def test_missing_scenario_name_warns_and_returns_empty() -> None:
    with pytest.warns(MissingNameWarning):
        assert scenario_tag("Feature", "") == ""
    with pytest.warns(MissingNameWarning):
        assert badge_tag("Feature", outline="") == ""
