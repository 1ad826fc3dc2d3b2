#!/usr/bin/env python3
"""
JSON Utilities Module

Centralized JSON formatting so CLI output is consistently pretty-printed.
"""

import json
import math
from typing import Any


def _replace_nan(data: Any) -> Any:
    """Recursively replace float NaN/infinity with None (JSON has no NaN)."""
    if isinstance(data, float) and not math.isfinite(data):
        return None
    if isinstance(data, dict):
        return {key: _replace_nan(value) for key, value in data.items()}
    if isinstance(data, (list, tuple)):
        return [_replace_nan(value) for value in data]
    return data


def format_json(data: Any, ensure_ascii: bool = False, sort_keys: bool = False) -> str:
    """
    Format data as a pretty-printed JSON string.

    Args:
        data: Data to format
        ensure_ascii: If True, escape non-ASCII characters (default: False)
        sort_keys: If True, sort dictionary keys (default: False)

    Returns:
        Pretty-printed JSON string
    """
    return json.dumps(_replace_nan(data), indent=2, ensure_ascii=ensure_ascii, sort_keys=sort_keys, allow_nan=False)
