"""
Test Suite for Moneytrack

Test Structure:
- unit/: Unit tests mirroring src/ package structure
- integration/: Configuration and CLI workflow tests

Test Categories:
- Core utilities (currency, models, config)
- Category catalog, keyword lexicon and merchant classifier
- Transaction prefill and batch categorization
"""
