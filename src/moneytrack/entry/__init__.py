"""
Transaction Entry Package

Helpers that feed form and import workflows: prefilling a transaction
from a voice/receipt guess, and categorizing whole transaction tables.
"""

from .batch import classify_frame, load_transactions_csv, parse_amount_column
from .prefill import ParsedDetails, TransactionSuggestion, suggest_transaction

__all__ = [
    "ParsedDetails",
    "TransactionSuggestion",
    "classify_frame",
    "load_transactions_csv",
    "parse_amount_column",
    "suggest_transaction",
]
