"""
Core Utilities Package

Shared logic, data models and configuration used across moneytrack.

This package provides:
- Currency input parsing, validation and display formatting
- Common data models for categories and transaction types
- Configuration management for environment-specific settings
"""

from .config import (
    Config,
    Environment,
    get_config,
    is_development,
    is_production,
    is_test,
    reload_config,
)
from .currency import (
    MAX_AMOUNT,
    amount_validation_error,
    format_for_display,
    is_valid_amount,
    parse_amount,
    parse_amount_to_cents,
    sanitize_numeric_input,
)
from .models import Category, TransactionType

__all__ = [
    # Currency utilities
    "MAX_AMOUNT",
    "Category",
    # Configuration
    "Config",
    "Environment",
    # Data models
    "TransactionType",
    "amount_validation_error",
    "format_for_display",
    "get_config",
    "is_development",
    "is_production",
    "is_test",
    "is_valid_amount",
    "parse_amount",
    "parse_amount_to_cents",
    "reload_config",
    "sanitize_numeric_input",
]
