from __future__ import annotations

import sys
import textwrap
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


import pytest

EXAMPLES_DIR = ROOT / "examples"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("F2MD_MODE", "F2MD_BADGE_URL", "F2MD_PLACEMENT", "F2MD_STYLESHEET"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def simple_feature() -> str:
    return textwrap.dedent(
        """\
        Feature: Test Feature
          This is a test feature

          Scenario: Test Scenario
            Given something
            When something happens
            Then something should occur
        """
    )


@pytest.fixture
def outline_feature() -> str:
    return textwrap.dedent(
        """\
        Feature: Calculator

          Scenario Outline: Adding numbers
            Given I have entered <a> and <b>
            Then the result should be <sum>

            Examples:
              | a | b | sum |
              # pierwszy wiersz
              | 1 | 2 | 3   |
              | 5 | 5 | 10  |
        """
    )


@pytest.fixture
def rule_feature() -> str:
    return textwrap.dedent(
        """\
        Feature: Feature with Rules

          Rule: Business Rule
            This is a business rule

            Scenario: Scenario under rule
              Given something
              When something happens
              Then something should occur
        """
    )


@pytest.fixture
def write_file():
    def _write(path: Path, content: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
