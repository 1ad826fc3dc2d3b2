#!/usr/bin/env python3
"""
Batch Transaction Categorization

Applies the amount parser and merchant classifier to whole tables of
transactions (for example a bank CSV export) using pandas.
"""

import logging
from collections.abc import Sequence
from pathlib import Path

import pandas as pd

from ..categories.classifier import MerchantClassifier, default_classifier
from ..core.currency import amount_validation_error, parse_amount

logger = logging.getLogger(__name__)

DEFAULT_TEXT_COLUMNS = ("merchant", "description")


def load_transactions_csv(path: str | Path) -> pd.DataFrame:
    """
    Load a transactions CSV with every column read as text.

    Args:
        path: CSV file path

    Returns:
        DataFrame with empty cells as empty strings
    """
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    logger.info("Loaded %d transactions from %s", len(df), path)
    return df


def classify_frame(
    df: pd.DataFrame,
    text_columns: Sequence[str] = DEFAULT_TEXT_COLUMNS,
    *,
    classifier: MerchantClassifier | None = None,
) -> pd.DataFrame:
    """
    Add category suggestions to a transactions table.

    Each row tries the text columns in order and keeps the first match.
    Columns missing from the frame are skipped.

    Args:
        df: Transactions table
        text_columns: Columns holding merchant/description text, in priority order
        classifier: Keyword classifier (default lexicon if None)

    Returns:
        Copy of df with 'category_id' and 'matched_keyword' columns (None when unmatched)
    """
    classifier = classifier or default_classifier()
    columns = [column for column in text_columns if column in df.columns]
    if not columns:
        logger.warning("None of the text columns %s are present", list(text_columns))

    def match_row(row: pd.Series) -> tuple[str | None, str | None]:
        for column in columns:
            value = row[column]
            if not isinstance(value, str):
                continue
            best = classifier.match(value)
            if best is not None:
                return best.category_id, best.keyword
        return None, None

    result = df.copy()
    matches = [match_row(row) for _, row in df.iterrows()]
    # object dtype keeps None for unmatched rows
    result["category_id"] = pd.Series([category_id for category_id, _ in matches], index=df.index, dtype=object)
    result["matched_keyword"] = pd.Series([keyword for _, keyword in matches], index=df.index, dtype=object)

    matched = sum(1 for category_id, _ in matches if category_id is not None)
    logger.info("Categorized %d of %d transactions", matched, len(df))
    return result


def parse_amount_column(df: pd.DataFrame, column: str = "amount") -> pd.DataFrame:
    """
    Parse a column of raw amount text.

    Args:
        df: Transactions table
        column: Column holding amount text

    Returns:
        Copy of df with 'amount_value' (float, NaN when unparseable) and
        'amount_error' (validation message or None) columns

    Raises:
        KeyError: If the column is missing
    """
    if column not in df.columns:
        raise KeyError(f"Amount column not found: {column}")

    result = df.copy()
    result["amount_value"] = [float(parse_amount(value)) for value in df[column]]
    result["amount_error"] = pd.Series(
        [amount_validation_error(value) for value in result["amount_value"]],
        index=df.index,
        dtype=object,
    )
    return result
