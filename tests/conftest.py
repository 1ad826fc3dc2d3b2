"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

from pathlib import Path

import pytest

import moneytrack.core.config as config_module
from moneytrack.categories import Lexicon, MerchantClassifier, reset_default_lexicon


def _reset_global_state() -> None:
    config_module._config = None
    reset_default_lexicon()


@pytest.fixture
def small_lexicon() -> Lexicon:
    """Small lexicon with overlapping keywords across categories."""
    return Lexicon.from_mapping(
        {
            "food-dining": ["food", "pak n save", "cafe"],
            "shopping": ["pak", "warehouse"],
            "transportation": ["bp", "shell"],
            "utilities": ["gas", "cafe"],
        }
    )


@pytest.fixture
def small_classifier(small_lexicon) -> MerchantClassifier:
    """Classifier over the small lexicon."""
    return MerchantClassifier(small_lexicon)


@pytest.fixture
def lexicon_file(tmp_path) -> Path:
    """YAML lexicon file with two categories."""
    path = tmp_path / "lexicon.yaml"
    path.write_text(
        "# custom lexicon\n"
        "food-dining:\n"
        "  - \"Corner Dairy\"\n"
        "  - \"bakery\"\n"
        "salary:\n"
        "  - \"acme payroll\"\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def amount_parse_cases() -> list[tuple[str, float]]:
    """Raw amount text and the value it should parse to."""
    return [
        ("$1,234.56", 1234.56),
        ("1.234.567,89", 1234567.89),
        ("1,000,000.50", 1000000.50),
        ("100,50", 100.50),
        ("1,000", 1000.0),
        ("1,000,000", 1000000.0),
        ("1.000.000", 1000000.0),
        ("1 000.50", 1000.50),
        ("€ 12,5", 12.5),
        ("£99.99", 99.99),
        ("NZD 45.00", 45.0),
    ]


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Set up test environment variables and clear cached configuration."""
    monkeypatch.setenv("MONEYTRACK_ENV", "test")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.delenv("MONEYTRACK_LEXICON_PATH", raising=False)
    monkeypatch.delenv("MONEYTRACK_SHOW_CENTS", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)

    _reset_global_state()
    yield
    _reset_global_state()


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests for complete workflows"
    )
    config.addinivalue_line(
        "markers", "currency: Tests for currency parsing and formatting"
    )
    config.addinivalue_line(
        "markers", "classifier: Tests for merchant category classification"
    )
