#!/usr/bin/env python3
"""
Transaction Prefill from Voice and Receipt Parsing

The speech-to-text and receipt-scan services return a loose guess of the
transaction (amount text, merchant, description, category name). This
module turns that guess into an editable form suggestion: a parsed and
validated amount plus a category id the user can accept or change.
"""

import logging
import math
from dataclasses import dataclass
from typing import Any

from ..categories.catalog import CategoryCatalog
from ..categories.classifier import MerchantClassifier, default_classifier
from ..core.currency import amount_validation_error, parse_amount
from ..core.models import TransactionType

logger = logging.getLogger(__name__)


@dataclass
class ParsedDetails:
    """Structured guess returned by the voice/receipt parsing service."""

    amount: str = ""
    description: str = ""
    merchant: str = ""
    category: str = ""
    account: str = ""
    date: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ParsedDetails":
        """Create ParsedDetails from a service response, tolerating missing keys."""

        def text(key: str) -> str:
            value = data.get(key)
            return "" if value is None else str(value).strip()

        return cls(
            amount=text("amount"),
            description=text("description"),
            merchant=text("merchant"),
            category=text("category"),
            account=text("account"),
            date=text("date") or None,
        )


@dataclass
class TransactionSuggestion:
    """Prefilled, still editable transaction form values."""

    amount: float
    amount_error: str | None
    category_id: str | None
    category_source: str | None
    merchant: str = ""
    description: str = ""
    account: str = ""
    date: str | None = None

    @property
    def is_submittable(self) -> bool:
        """Check if the form could be submitted as-is."""
        return self.amount_error is None and self.category_id is not None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization (NaN amount becomes None)."""
        return {
            "amount": self.amount if math.isfinite(self.amount) else None,
            "amount_error": self.amount_error,
            "category_id": self.category_id,
            "category_source": self.category_source,
            "merchant": self.merchant,
            "description": self.description,
            "account": self.account,
            "date": self.date,
        }


def suggest_transaction(
    details: ParsedDetails | dict[str, Any],
    *,
    transaction_type: TransactionType = TransactionType.EXPENSE,
    transcript: str | None = None,
    classifier: MerchantClassifier | None = None,
    catalog: CategoryCatalog | None = None,
) -> TransactionSuggestion:
    """
    Build a form suggestion from a parsed voice/receipt guess.

    Category lookup order: merchant, description, raw transcript (keyword
    classifier), then the service's own category name. Only categories of
    the requested transaction type are accepted.

    Args:
        details: Parsed guess (dataclass or raw service dictionary)
        transaction_type: Expense or income form being filled
        transcript: Original voice transcript or receipt text, if available
        classifier: Keyword classifier (default lexicon if None)
        catalog: Category catalog (standard catalog if None)

    Returns:
        TransactionSuggestion with amount, validation message and category
    """
    if isinstance(details, dict):
        details = ParsedDetails.from_dict(details)
    classifier = classifier or default_classifier()
    catalog = catalog or CategoryCatalog.default()

    category_id = None
    category_source = None

    for source, text in (
        ("merchant", details.merchant),
        ("description", details.description),
        ("transcript", transcript),
    ):
        candidate = classifier.classify(text)
        if candidate is not None and catalog.get(candidate, transaction_type) is not None:
            category_id, category_source = candidate, source
            break
        if candidate is not None:
            logger.debug("Ignoring %s category %s for %s form", source, candidate, transaction_type.value)

    if category_id is None and details.category:
        named = catalog.find_by_name(details.category, transaction_type)
        if named is not None:
            category_id, category_source = named.id, "ai"

    amount = parse_amount(details.amount)
    suggestion = TransactionSuggestion(
        amount=amount,
        amount_error=amount_validation_error(amount),
        category_id=category_id,
        category_source=category_source,
        merchant=details.merchant,
        description=details.description,
        account=details.account,
        date=details.date,
    )
    logger.debug(
        "Suggested amount=%s category=%s (source=%s)",
        amount,
        category_id,
        category_source,
    )
    return suggestion
