#!/usr/bin/env python3
"""
Configuration Management for Moneytrack

Handles environment-based configuration with defaults and validation.
Supports multiple environments (development, test, production).
"""

import logging
import os
from dataclasses import dataclass, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class DisplayConfig:
    """User display preferences for amounts."""

    show_cents: bool = True


@dataclass
class ClassifierConfig:
    """Merchant category classifier configuration."""

    # None means the lexicon bundled with the package
    lexicon_path: Path | None = None


@dataclass
class Config:
    """
    Main configuration class for the moneytrack application.

    Loads configuration from environment variables with defaults
    and validation for each environment type.
    """

    environment: Environment

    # Component configurations
    display: DisplayConfig
    classifier: ClassifierConfig

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("MONEYTRACK_ENV", "development"))

        lexicon_path = os.getenv("MONEYTRACK_LEXICON_PATH")
        classifier = ClassifierConfig(
            lexicon_path=Path(lexicon_path).expanduser() if lexicon_path else None,
        )

        display = DisplayConfig(
            show_cents=_parse_bool(os.getenv("MONEYTRACK_SHOW_CENTS", "true")),
        )

        return cls(
            environment=env,
            display=display,
            classifier=classifier,
            debug=_parse_bool(os.getenv("DEBUG", "false")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        lexicon_path = self.classifier.lexicon_path
        if lexicon_path is not None and not lexicon_path.is_file():
            errors.append(f"lexicon file does not exist: {lexicon_path}")

        if self.log_level not in _LOG_LEVELS:
            errors.append(f"Unknown log level: {self.log_level}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        # Configure format based on environment
        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a JSON-friendly dictionary."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if is_dataclass(field_value):
                # Nested dataclass
                result[field_name] = {
                    nested_name: _plain_value(nested_value)
                    for nested_name, nested_value in field_value.__dict__.items()
                }
            else:
                result[field_name] = _plain_value(field_value)

        return result


def _plain_value(value: Any) -> Any:
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    return value


def _parse_bool(value: str) -> bool:
    """Parse a boolean environment value ("true", "1", "yes" are truthy)."""
    return value.strip().lower() in ("true", "1", "yes")


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_environment()

        # Validate configuration
        errors = _config.validate()
        if errors:
            _config = None
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        # Setup logging
        _config.setup_logging()

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()


# Convenience functions
def is_development() -> bool:
    """Check if running in development environment."""
    return get_config().environment == Environment.DEVELOPMENT


def is_test() -> bool:
    """Check if running in test environment."""
    return get_config().environment == Environment.TEST


def is_production() -> bool:
    """Check if running in production environment."""
    return get_config().environment == Environment.PRODUCTION
