#!/usr/bin/env python3
"""
Category Catalog

Standard expense and income categories used for transactions and budgets.
The catalog is built once and never modified; pass it to whatever needs
category metadata instead of reaching for module globals.
"""

from collections.abc import Iterable

from ..core.models import Category, TransactionType


class CatalogError(Exception):
    """Raised when a category catalog is inconsistent."""

    pass


EXPENSE_CATEGORIES: tuple[Category, ...] = (
    Category("food-dining", "Food & Dining", "🍽️", "Restaurants, groceries, takeout"),
    Category("transportation", "Transportation", "🚗", "Gas, public transport, car maintenance"),
    Category("housing", "Housing", "🏠", "Rent, mortgage, property taxes"),
    Category("utilities", "Bills & Utilities", "💡", "Electricity, water, internet, phone"),
    Category("healthcare", "Health & Fitness", "🏥", "Medical, dental, gym, supplements"),
    Category("shopping", "Shopping", "🛍️", "Clothing, electronics, household items"),
    Category("entertainment", "Entertainment", "🎬", "Movies, concerts, games, subscriptions"),
    Category("travel", "Travel", "✈️", "Flights, hotels, vacation expenses"),
    Category("education", "Education", "📚", "Books, courses, tuition, training"),
    Category("personal-care", "Personal Care", "💅", "Haircuts, beauty products, clothing"),
    Category("insurance", "Insurance", "🛡️", "Health, car, home, life insurance"),
    Category("investment", "Investment", "📈", "Stocks, bonds, retirement contributions"),
    Category("other", "Other", "📦", "Miscellaneous expenses"),
)

INCOME_CATEGORIES: tuple[Category, ...] = (
    Category("salary", "Salary", "💼", "Regular employment income"),
    Category("freelance", "Freelance", "💻", "Contract and freelance work"),
    Category("business", "Business", "🏢", "Business income and profits"),
    Category("investment-income", "Investment Income", "📊", "Dividends, interest, capital gains"),
    Category("rental", "Rental Income", "🏘️", "Property rental income"),
    Category("gift", "Gift/Bonus", "🎁", "Gifts, bonuses, winnings"),
    Category("refund", "Refund", "💰", "Tax refunds, returns"),
    Category("other-income", "Other Income", "📦", "Miscellaneous income"),
)

FALLBACK_CATEGORY_NAME = "Other"


class CategoryCatalog:
    """
    Immutable pair of disjoint category sets (expense and income).

    Examples:
        >>> catalog = CategoryCatalog.default()
        >>> catalog.name_for("food-dining")
        'Food & Dining'
        >>> catalog.name_for("salary", TransactionType.INCOME)
        'Salary'
    """

    __slots__ = ("_expense", "_income", "_by_id")

    def __init__(self, expense: Iterable[Category], income: Iterable[Category]):
        expense = tuple(expense)
        income = tuple(income)

        by_id: dict[str, tuple[TransactionType, Category]] = {}
        for category_type, categories in ((TransactionType.EXPENSE, expense), (TransactionType.INCOME, income)):
            for category in categories:
                if category.id in by_id:
                    raise CatalogError(f"Duplicate category id: {category.id}")
                by_id[category.id] = (category_type, category)

        self._expense = expense
        self._income = income
        self._by_id = by_id

    @classmethod
    def default(cls) -> "CategoryCatalog":
        """Get the standard catalog (built once per process)."""
        return _default_catalog()

    @property
    def expense(self) -> tuple[Category, ...]:
        return self._expense

    @property
    def income(self) -> tuple[Category, ...]:
        return self._income

    def categories(self, category_type: TransactionType = TransactionType.EXPENSE) -> tuple[Category, ...]:
        """Get the category set for a transaction type."""
        return self._expense if category_type == TransactionType.EXPENSE else self._income

    def all_ids(self) -> list[str]:
        """Get every category id, expense categories first."""
        return list(self._by_id)

    def type_of(self, category_id: str) -> TransactionType | None:
        """Get the transaction type a category id belongs to, or None if unknown."""
        entry = self._by_id.get(category_id)
        return entry[0] if entry else None

    def get(self, category_id: str, category_type: TransactionType = TransactionType.EXPENSE) -> Category | None:
        """Find a category by id within one category set."""
        entry = self._by_id.get(category_id)
        if entry is None or entry[0] != category_type:
            return None
        return entry[1]

    def name_for(self, category_id: str, category_type: TransactionType = TransactionType.EXPENSE) -> str:
        """Get a category's display name, falling back to "Other"."""
        category = self.get(category_id, category_type)
        return category.name if category else FALLBACK_CATEGORY_NAME

    def names(self, category_type: TransactionType = TransactionType.EXPENSE) -> list[str]:
        """Get display names in catalog order."""
        return [category.name for category in self.categories(category_type)]

    def find_by_name(self, name: str, category_type: TransactionType | None = None) -> Category | None:
        """
        Find a category by display name or id, ignoring case.

        Args:
            name: Display name ("Food & Dining") or id ("food-dining")
            category_type: Restrict the search to one set (both sets if None)

        Returns:
            Matching category, or None
        """
        wanted = name.strip().lower()
        if not wanted:
            return None

        for current_type, category in self._by_id.values():
            if category_type is not None and current_type != category_type:
                continue
            if wanted in (category.id, category.name.lower()):
                return category
        return None

    def __contains__(self, category_id: object) -> bool:
        return category_id in self._by_id

    def __len__(self) -> int:
        return len(self._by_id)

    def __repr__(self) -> str:
        return f"CategoryCatalog(expense={len(self._expense)}, income={len(self._income)})"


# Global catalog instance
_catalog: CategoryCatalog | None = None


def _default_catalog() -> CategoryCatalog:
    global _catalog
    if _catalog is None:
        _catalog = CategoryCatalog(EXPENSE_CATEGORIES, INCOME_CATEGORIES)
    return _catalog
