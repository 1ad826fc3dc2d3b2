#!/usr/bin/env python3
"""
Merchant Keyword Lexicon

Static mapping from category id to the keyword substrings used to classify
free text (merchant names, voice transcripts, receipt OCR output).

The lexicon keeps an explicit ordered tuple of (category_id, keyword)
entries: category order first, then keyword order, exactly as loaded. That
order is what decides ties between equally long matching keywords.
"""

import logging
from collections.abc import Iterable, Mapping
from importlib import resources
from pathlib import Path

import yaml

from ..core.config import get_config
from .catalog import CategoryCatalog

logger = logging.getLogger(__name__)

DEFAULT_LEXICON_RESOURCE = "business_mapping.yaml"


class LexiconError(Exception):
    """Raised when a keyword lexicon cannot be loaded or is inconsistent."""

    pass


class Lexicon:
    """
    Immutable, ordered keyword lexicon.

    Examples:
        >>> lexicon = Lexicon.from_mapping({"food-dining": ["Cafe", "bakery"]})
        >>> lexicon.keywords_for("food-dining")
        ('cafe', 'bakery')
        >>> lexicon.keywords_for("unknown")
        ()
    """

    __slots__ = ("_entries", "_by_category")

    def __init__(self, entries: Iterable[tuple[str, str]]):
        self._entries: tuple[tuple[str, str], ...] = tuple(entries)

        by_category: dict[str, list[str]] = {}
        for category_id, keyword in self._entries:
            by_category.setdefault(category_id, []).append(keyword)
        self._by_category = {category_id: tuple(keywords) for category_id, keywords in by_category.items()}

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[str, Iterable[str]],
        catalog: CategoryCatalog | None = None,
    ) -> "Lexicon":
        """
        Build a lexicon from a category id -> keywords mapping.

        Keywords are lower-cased and stripped. Mapping iteration order is kept.

        Args:
            mapping: Category id to keyword list
            catalog: If given, every category id must be defined in it

        Returns:
            New Lexicon

        Raises:
            LexiconError: On unknown category ids, blank keywords or wrong shapes
        """
        entries: list[tuple[str, str]] = []

        for category_id, keywords in mapping.items():
            if not isinstance(category_id, str) or not category_id.strip():
                raise LexiconError(f"Category id must be a non-empty string: {category_id!r}")
            if catalog is not None and category_id not in catalog:
                raise LexiconError(f"Lexicon references unknown category id: {category_id}")
            if isinstance(keywords, str) or not isinstance(keywords, Iterable):
                raise LexiconError(f"Keywords for {category_id} must be a list")

            for keyword in keywords:
                if not isinstance(keyword, str):
                    raise LexiconError(f"Keyword for {category_id} must be a string: {keyword!r}")
                normalized = keyword.strip().lower()
                if not normalized:
                    raise LexiconError(f"Blank keyword for category {category_id}")
                entries.append((category_id, normalized))

        return cls(entries)

    @classmethod
    def load(cls, path: str | Path | None = None, catalog: CategoryCatalog | None = None) -> "Lexicon":
        """
        Load a lexicon from a YAML file.

        Args:
            path: YAML file mapping category id -> keyword list
                  (the bundled NZ/AU merchant lexicon if None)
            catalog: If given, every category id must be defined in it

        Returns:
            Loaded Lexicon

        Raises:
            LexiconError: If the file is missing, malformed or inconsistent
        """
        if path is None:
            source = f"package resource {DEFAULT_LEXICON_RESOURCE}"
            try:
                resource = resources.files(__package__) / "data" / DEFAULT_LEXICON_RESOURCE
                text = resource.read_text(encoding="utf-8")
            except OSError as e:
                raise LexiconError(f"Cannot read bundled lexicon: {e}") from e
        else:
            source = str(path)
            try:
                text = Path(path).read_text(encoding="utf-8")
            except OSError as e:
                raise LexiconError(f"Cannot read lexicon file {path}: {e}") from e

        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise LexiconError(f"Invalid YAML in lexicon {source}: {e}") from e

        if not isinstance(data, dict):
            raise LexiconError(f"Lexicon {source} must be a mapping of category id to keywords")

        lexicon = cls.from_mapping(data, catalog=catalog)
        logger.info(
            "Loaded %d keywords for %d categories from %s",
            len(lexicon),
            len(lexicon.category_ids()),
            source,
        )
        return lexicon

    @property
    def entries(self) -> tuple[tuple[str, str], ...]:
        """All (category_id, keyword) pairs in match order."""
        return self._entries

    def category_ids(self) -> list[str]:
        """Get category ids in lexicon order."""
        return list(self._by_category)

    def keywords_for(self, category_id: str) -> tuple[str, ...]:
        """Get the keywords for a category, or an empty tuple if unknown."""
        return self._by_category.get(category_id, ())

    def to_mapping(self) -> dict[str, list[str]]:
        """Convert back to a category id -> keywords mapping."""
        return {category_id: list(keywords) for category_id, keywords in self._by_category.items()}

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"Lexicon(categories={len(self._by_category)}, keywords={len(self._entries)})"


# Global lexicon instance
_lexicon: Lexicon | None = None


def default_lexicon() -> Lexicon:
    """
    Get the process-wide lexicon, loading it on first use.

    Uses MONEYTRACK_LEXICON_PATH from configuration when set, otherwise the
    bundled lexicon. Category ids are checked against the standard catalog.
    """
    global _lexicon
    if _lexicon is None:
        _lexicon = Lexicon.load(get_config().classifier.lexicon_path, catalog=CategoryCatalog.default())
    return _lexicon


def reset_default_lexicon() -> None:
    """Forget the cached lexicon so the next call reloads it (useful for testing)."""
    global _lexicon
    _lexicon = None
