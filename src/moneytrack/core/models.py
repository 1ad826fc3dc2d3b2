#!/usr/bin/env python3
"""
Core Data Models for Moneytrack

Common data structures shared by the amount parser, the category
classifier and the transaction entry helpers.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class TransactionType(Enum):
    """Types of transactions a category can belong to."""

    EXPENSE = "expense"
    INCOME = "income"


@dataclass(frozen=True)
class Category:
    """
    Spending or income category.

    ``id`` is the stable key used for classification and storage;
    ``name`` is what users see.
    """

    id: str
    name: str
    icon: str | None = None
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "icon": self.icon,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Category":
        """Create Category from dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            icon=data.get("icon"),
            description=data.get("description"),
        )
