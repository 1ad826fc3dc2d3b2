#!/usr/bin/env python3
"""
Integration tests for amount, classification and prefill CLI commands.
"""

import json

import pytest
from click.testing import CliRunner

from moneytrack.cli.main import main


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.mark.integration
class TestAmountCommands:
    """Test moneytrack amount subcommands."""

    def test_parse_valid_amount(self, runner):
        result = runner.invoke(main, ["amount", "parse", "1.234.567,89"])

        assert result.exit_code == 0
        assert "Parsed: 1234567.89" in result.output
        assert "Display: 1,234,567.89" in result.output
        assert "Cents: 123456789" in result.output

    def test_parse_invalid_amount_fails(self, runner):
        result = runner.invoke(main, ["amount", "parse", "abc"])

        assert result.exit_code == 1
        assert "Parsed: (not a number)" in result.output
        assert "Please enter a valid number" in result.output

    def test_parse_over_maximum_fails(self, runner):
        result = runner.invoke(main, ["amount", "parse", "100,000,000"])

        assert result.exit_code == 1
        assert "Amount exceeds maximum limit of 99,999,999.99" in result.output

    def test_parse_dot_grouped_thousands(self, runner):
        result = runner.invoke(main, ["amount", "parse", "1.000.000"])

        assert result.exit_code == 0
        assert "Parsed: 1000000.0" in result.output
        assert "Cents: 100000000" in result.output

    def test_parse_negative_amount_is_an_argument(self, runner):
        result = runner.invoke(main, ["amount", "parse", "-5"])

        assert result.exit_code == 1
        assert "Parsed: -5.0" in result.output
        assert "Amount must be greater than zero" in result.output

    def test_format_negative_value(self, runner):
        result = runner.invoke(main, ["amount", "format", "-42.5"])

        assert result.exit_code == 0
        assert result.output.strip() == "-42.50"

    def test_format_shows_cents_by_default(self, runner):
        result = runner.invoke(main, ["amount", "format", "1234.5"])

        assert result.exit_code == 0
        assert result.output.strip() == "1,234.50"

    def test_format_uses_display_preference(self, runner):
        result = runner.invoke(main, ["amount", "format", "1234.5"], env={"MONEYTRACK_SHOW_CENTS": "false"})
        assert result.output.strip() == "1,235"

    def test_format_flag_overrides_preference(self, runner):
        result = runner.invoke(main, ["amount", "format", "1234.5", "--no-cents"])

        assert result.exit_code == 0
        assert result.output.strip() == "1,235"

    def test_sanitize(self, runner):
        result = runner.invoke(main, ["amount", "sanitize", "$1,234.56 NZD"])

        assert result.output.strip() == "1,234.56"


@pytest.mark.integration
class TestCategoryCommands:
    """Test classification and catalog commands."""

    def test_classify(self, runner):
        result = runner.invoke(main, ["classify", "woolworths shopping"])

        assert result.exit_code == 0
        assert result.output.strip() == "food-dining"

    def test_classify_explain(self, runner):
        result = runner.invoke(main, ["classify", "AA Insurance premium", "--explain"])

        assert result.exit_code == 0
        assert "insurance" in result.output
        assert "Matched keyword: 'aa insurance' (Insurance)" in result.output

    def test_classify_no_match(self, runner):
        result = runner.invoke(main, ["classify", "random unrelated text"])

        assert result.exit_code == 0
        assert "No category match" in result.output

    def test_classify_with_custom_lexicon(self, runner, lexicon_file):
        result = runner.invoke(
            main,
            ["classify", "ACME PAYROLL JUNE", "--explain"],
            env={"MONEYTRACK_LEXICON_PATH": str(lexicon_file)},
        )

        assert result.exit_code == 0
        assert "salary" in result.output
        assert "(Salary)" in result.output

    def test_classify_with_broken_lexicon(self, runner, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("groceries:\n  - aldi\n", encoding="utf-8")

        result = runner.invoke(main, ["classify", "aldi"], env={"MONEYTRACK_LEXICON_PATH": str(path)})

        assert result.exit_code == 1
        assert "unknown category id: groceries" in result.output

    def test_categories_lists_both_sets(self, runner):
        result = runner.invoke(main, ["categories"])

        assert result.exit_code == 0
        assert "Expense categories:" in result.output
        assert "Income categories:" in result.output
        assert "Food & Dining" in result.output

    def test_categories_income_only(self, runner):
        result = runner.invoke(main, ["categories", "--type", "income"])

        assert result.exit_code == 0
        assert "Expense categories:" not in result.output
        assert "investment-income" in result.output

    def test_keywords(self, runner):
        result = runner.invoke(main, ["keywords", "education"])

        assert result.exit_code == 0
        assert result.output.splitlines()[0] == "whitcoulls"

    def test_keywords_unknown_category(self, runner):
        result = runner.invoke(main, ["keywords", "other"])

        assert result.exit_code == 1
        assert "No keywords for category: other" in result.output


@pytest.mark.integration
class TestClassifyCsvCommand:
    """Test categorizing a CSV file."""

    def test_writes_output_file(self, runner, tmp_path):
        input_path = tmp_path / "transactions.csv"
        input_path.write_text("merchant,description\nCountdown,\nMystery,uber home\nMystery,nothing\n", encoding="utf-8")
        output_path = tmp_path / "out" / "categorized.csv"

        result = runner.invoke(main, ["classify-csv", str(input_path), "--output", str(output_path)])

        assert result.exit_code == 0
        assert "Categorized 2 of 3 transactions" in result.output
        lines = output_path.read_text(encoding="utf-8").splitlines()
        assert lines[0] == "merchant,description,category_id,matched_keyword"
        assert lines[1] == "Countdown,,food-dining,countdown"
        assert lines[2] == "Mystery,uber home,transportation,uber"

    def test_prints_to_stdout(self, runner, tmp_path):
        input_path = tmp_path / "transactions.csv"
        input_path.write_text("payee\nbunnings warehouse\n", encoding="utf-8")

        result = runner.invoke(main, ["classify-csv", str(input_path), "--column", "payee"])

        assert result.exit_code == 0
        assert "bunnings warehouse,housing,bunnings" in result.output

    def test_missing_columns_fail(self, runner, tmp_path):
        input_path = tmp_path / "transactions.csv"
        input_path.write_text("payee\nbunnings\n", encoding="utf-8")

        result = runner.invoke(main, ["classify-csv", str(input_path)])

        assert result.exit_code == 1
        assert "None of the columns merchant, description exist" in result.output


@pytest.mark.integration
class TestPrefillCommand:
    """Test the prefill command's JSON output."""

    def test_expense_prefill(self, runner):
        result = runner.invoke(main, ["prefill", "--amount", "$45.50", "--merchant", "Countdown Ponsonby"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["amount"] == 45.5
        assert data["amount_error"] is None
        assert data["category_id"] == "food-dining"
        assert data["category_source"] == "merchant"

    def test_income_prefill(self, runner):
        result = runner.invoke(
            main,
            ["prefill", "--type", "income", "--description", "march salary", "--amount", "5.000,00"],
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["amount"] == 5000.0
        assert data["category_id"] == "salary"

    def test_invalid_amount_is_null(self, runner):
        result = runner.invoke(main, ["prefill", "--amount", "lots"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["amount"] is None
        assert data["amount_error"].startswith("Please enter a valid number")
        assert data["category_id"] is None
