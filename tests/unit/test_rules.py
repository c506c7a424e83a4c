"""
Tests for rules.yaml loading and validation.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from kata.rules.loader import DEFAULT_RULES_PATH, load_rules
from kata.rules.models import Rules

VALID_RULES = """
project:
  slug: test
  rules_version: "1.0"
coupons:
  - code: SAVE10
    discount: 0.1
usernames: {min: 5, max: 15}
user_input:
  username: {min: 3, max: 255}
  min_age: 18
driving:
  minimum_age: {US: 16}
currency:
  rates: {USD: 1.0}
shipping:
  US: {cost: 10, estimated_days: 2}
security:
  login_code_digits: 6
"""


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "rules.yaml"
    path.write_text(content)
    return path


class TestLoadRules:
    def test_loads_project_rules(self, rules: Rules) -> None:
        assert rules.project.slug == "testing-kata"
        assert [c.code for c in rules.coupons] == ["SAVE10", "SAVE20"]
        assert rules.driving.minimum_age == {"US": 16, "UK": 17}
        assert rules.currency.rates["AUD"] == 1.5

    def test_default_path_is_project_rules(self) -> None:
        assert DEFAULT_RULES_PATH.name == "rules.yaml"
        assert load_rules().project.slug == "testing-kata"

    def test_loads_valid_file(self, tmp_path: Path) -> None:
        rules = load_rules(_write(tmp_path, VALID_RULES))
        assert rules.shipping["US"].estimated_days == 2

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_rules(_write(tmp_path, "coupons: [unclosed"))

    def test_schema_violation(self, tmp_path: Path) -> None:
        bad = VALID_RULES.replace("discount: 0.1", "discount: 1.5")
        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(_write(tmp_path, bad))

    def test_empty_coupon_catalog_rejected(self, tmp_path: Path) -> None:
        bad = VALID_RULES.replace(
            "coupons:\n  - code: SAVE10\n    discount: 0.1", "coupons: []"
        )
        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(_write(tmp_path, bad))
