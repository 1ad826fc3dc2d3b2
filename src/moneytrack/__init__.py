"""
Moneytrack - Personal Finance Entry Tools

Normalizes the free-text fields of a transaction entry: amounts typed,
spoken or scanned in regional formats, and merchant text that should map
to a spending or income category.

Domain Packages:
- core: Currency parsing, data models, configuration
- categories: Category catalog, keyword lexicon, merchant classifier
- entry: Voice/receipt prefill and batch categorization
- cli: Command-line interface

Example Usage:
    from moneytrack.core.currency import parse_amount, amount_validation_error
    from moneytrack.categories import classify

Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "Moneytrack Developers"

# Export core utilities for easy access
from .categories.catalog import CategoryCatalog
from .categories.classifier import MerchantClassifier, classify
from .core.config import Environment, get_config
from .core.currency import (
    amount_validation_error,
    format_for_display,
    is_valid_amount,
    parse_amount,
)
from .core.models import Category, TransactionType

__all__ = [
    # Core currency functions
    "parse_amount",
    "is_valid_amount",
    "amount_validation_error",
    "format_for_display",

    # Categories
    "Category",
    "CategoryCatalog",
    "MerchantClassifier",
    "TransactionType",
    "classify",

    # Configuration
    "get_config",
    "Environment",
]
