"""
Categories Package

Category catalog, merchant keyword lexicon and the longest-match
classifier that turns free text into a category suggestion.
"""

from .catalog import (
    EXPENSE_CATEGORIES,
    INCOME_CATEGORIES,
    CatalogError,
    CategoryCatalog,
)
from .classifier import (
    CategoryMatch,
    MerchantClassifier,
    classify,
    default_classifier,
    keywords_for_category,
    known_category_ids,
)
from .lexicon import Lexicon, LexiconError, default_lexicon, reset_default_lexicon

__all__ = [
    "EXPENSE_CATEGORIES",
    "INCOME_CATEGORIES",
    "CatalogError",
    "CategoryCatalog",
    "CategoryMatch",
    "Lexicon",
    "LexiconError",
    "MerchantClassifier",
    "classify",
    "default_classifier",
    "default_lexicon",
    "keywords_for_category",
    "known_category_ids",
    "reset_default_lexicon",
]
