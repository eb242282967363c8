"""
Core module providing foundational components.

This module contains the configuration loader, centralized logging setup,
and custom exception hierarchy. It has no internal dependencies.
"""

from .config_loader import get_config, Config, IngestionConfig, SheetMapping
from .logger import get_logger
from .exceptions import (
    QuestionSearchError,
    ConfigurationError,
    IngestionError,
    SearchError
)

__all__ = [
    "get_config",
    "Config",
    "IngestionConfig",
    "SheetMapping",
    "get_logger",
    "QuestionSearchError",
    "ConfigurationError",
    "IngestionError",
    "SearchError"
]
