"""
Command Line Interface Package

Unified CLI for moneytrack.

Command Structure:
- moneytrack: Main entry point with utility commands (version, config)
- moneytrack amount: Parse, format and sanitize amounts
- moneytrack classify / categories / keywords: Merchant categorization
- moneytrack classify-csv: Categorize a transactions CSV
- moneytrack prefill: Form suggestion from a voice/receipt guess
"""
