#!/usr/bin/env python3
"""
Merchant Category Classifier

Maps free text (merchant name, voice transcript, receipt text) to the single
best matching category id using the keyword lexicon.

Matching Policy:
- Text is lower-cased and trimmed
- A keyword matches when it occurs anywhere in the text (partial words count)
- The longest matching keyword wins, so "pak n save" beats a generic "food"
- Equal lengths go to the keyword met first in lexicon order
- No match is not an error: the result is None and the user picks a category
"""

import logging
from dataclasses import dataclass

from .lexicon import Lexicon, default_lexicon

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CategoryMatch:
    """Winning category and the keyword that selected it."""

    category_id: str
    keyword: str


class MerchantClassifier:
    """
    Longest-match keyword classifier over a static lexicon.

    Examples:
        >>> classifier = MerchantClassifier(Lexicon.from_mapping({
        ...     "food-dining": ["food", "pak n save"],
        ...     "shopping": ["pak"],
        ... }))
        >>> classifier.classify("PAK N SAVE Food")
        'food-dining'
        >>> classifier.classify("random unrelated text") is None
        True
    """

    def __init__(self, lexicon: Lexicon):
        self.lexicon = lexicon

    def match(self, text: str | None) -> CategoryMatch | None:
        """
        Find the winning keyword for a piece of text.

        Args:
            text: Merchant name, transcript or receipt text

        Returns:
            CategoryMatch for the longest matching keyword, or None
        """
        if not text:
            return None

        search_text = text.lower().strip()
        if not search_text:
            return None

        best: CategoryMatch | None = None
        for category_id, keyword in self.lexicon.entries:
            # Strictly longer only: the first keyword of a given length keeps the win
            if keyword in search_text and (best is None or len(keyword) > len(best.keyword)):
                best = CategoryMatch(category_id=category_id, keyword=keyword)

        if best is None:
            logger.debug("No category keyword matched %r", search_text)
        else:
            logger.debug("Matched %r to %s via keyword %r", search_text, best.category_id, best.keyword)
        return best

    def classify(self, text: str | None) -> str | None:
        """
        Get the best matching category id for a piece of text.

        Args:
            text: Merchant name, transcript or receipt text

        Returns:
            Category id, or None if no keyword matches

        Examples:
            classify("woolworths shopping") -> "food-dining"
            classify("random unrelated text") -> None
        """
        best = self.match(text)
        return best.category_id if best else None

    def keywords_for_category(self, category_id: str) -> tuple[str, ...]:
        """Get the keywords for a category (empty if the id is unknown)."""
        return self.lexicon.keywords_for(category_id)

    def known_category_ids(self) -> list[str]:
        """Get every category id that has keywords."""
        return self.lexicon.category_ids()


# Global classifier instance
_classifier: MerchantClassifier | None = None


def default_classifier() -> MerchantClassifier:
    """Get the process-wide classifier over the default lexicon."""
    global _classifier
    if _classifier is None or _classifier.lexicon is not default_lexicon():
        _classifier = MerchantClassifier(default_lexicon())
    return _classifier


# Convenience functions
def classify(text: str | None) -> str | None:
    """Classify text with the default lexicon."""
    return default_classifier().classify(text)


def keywords_for_category(category_id: str) -> tuple[str, ...]:
    """Get keywords for a category from the default lexicon."""
    return default_classifier().keywords_for_category(category_id)


def known_category_ids() -> list[str]:
    """Get every category id in the default lexicon."""
    return default_classifier().known_category_ids()
