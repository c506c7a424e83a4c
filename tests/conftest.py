from pathlib import Path

import pytest

from kata.app_shell.context import StorefrontContext
from kata.rules.loader import load_rules
from kata.rules.models import Rules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def rules() -> Rules:
    """Load REAL rules from project root."""
    return load_rules(PROJECT_ROOT / "rules.yaml")


@pytest.fixture
def ctx(rules: Rules) -> StorefrontContext:
    """Context wired with the default dev adapters."""
    return StorefrontContext.create(rules)
