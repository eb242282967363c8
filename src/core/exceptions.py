"""
Custom exception hierarchy for the question search application.

Provides specific exception types for different failure modes:
configuration errors, spreadsheet ingestion failures, and search problems.
"""


class QuestionSearchError(Exception):
    """Base exception for all question search errors."""

    def __init__(self, message: str, details: dict = None):
        """
        Initialize the exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary with additional context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(QuestionSearchError):
    """Raised when configuration is invalid or missing."""
    pass


class IngestionError(QuestionSearchError):
    """Raised when the question workbook cannot be loaded."""

    def __init__(self, message: str, source: str = None, details: dict = None):
        """
        Initialize ingestion error.

        Args:
            message: Error description.
            source: Path or sheet name of the problematic source.
            details: Additional context.
        """
        super().__init__(message, details)
        self.source = source


class SearchError(QuestionSearchError):
    """Raised when a search cannot be executed."""

    def __init__(self, message: str, query: str = None, details: dict = None):
        """
        Initialize search error.

        Args:
            message: Error description.
            query: The problematic search query.
            details: Additional context.
        """
        super().__init__(message, details)
        self.query = query


if __name__ == "__main__":
    try:
        raise ConfigurationError("Config file not found", {"path": "/config/config.json"})
    except QuestionSearchError as e:
        print(f"Caught: {e.__class__.__name__}: {e.message}")
        print(f"Details: {e.details}")

    try:
        raise IngestionError("Sheet missing", source="questions.xlsx")
    except IngestionError as e:
        print(f"Ingestion failed for: {e.source}")
