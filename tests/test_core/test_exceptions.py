"""
Tests for custom exception classes.

Tests exception creation, message formatting, and details handling.
"""

import pytest

from src.core.exceptions import (
    QuestionSearchError,
    ConfigurationError,
    IngestionError,
    SearchError
)


class TestQuestionSearchError:
    """Tests for base QuestionSearchError."""

    def test_basic_creation(self):
        """Test creating exception with just a message."""
        error = QuestionSearchError("Something went wrong")

        assert error.message == "Something went wrong"
        assert error.details == {}
        assert str(error) == "Something went wrong"

    def test_creation_with_details(self):
        """Test creating exception with details dict."""
        error = QuestionSearchError(
            "Sheet error",
            {"sheet": "CE", "rows": 12}
        )

        assert error.message == "Sheet error"
        assert error.details["sheet"] == "CE"
        assert error.details["rows"] == 12


class TestConfigurationError:
    """Tests for ConfigurationError."""

    def test_is_subclass_of_base(self):
        """Test that ConfigurationError inherits from QuestionSearchError."""
        error = ConfigurationError("Config missing")

        assert isinstance(error, QuestionSearchError)

    def test_can_be_caught_as_base(self):
        """Test that ConfigurationError can be caught as QuestionSearchError."""
        with pytest.raises(QuestionSearchError):
            raise ConfigurationError("Test error")


class TestIngestionError:
    """Tests for IngestionError."""

    def test_with_source(self):
        """Test IngestionError with source parameter."""
        error = IngestionError(
            "Workbook not found",
            source="/data/questions.xlsx"
        )

        assert error.source == "/data/questions.xlsx"
        assert error.message == "Workbook not found"

    def test_with_source_and_details(self):
        """Test IngestionError with source and details."""
        error = IngestionError(
            "Missing sheet",
            source="/data/questions.xlsx",
            details={"available": ["CE", "CO"]}
        )

        assert error.details["available"] == ["CE", "CO"]
        assert isinstance(error, QuestionSearchError)


class TestSearchError:
    """Tests for SearchError."""

    def test_search_error_with_query(self):
        """Test SearchError with query parameter."""
        error = SearchError(
            "Unknown level: Z9",
            query="parler"
        )

        assert error.query == "parler"
        assert error.message == "Unknown level: Z9"

    def test_search_error_without_query(self):
        """Test SearchError defaults."""
        error = SearchError("Failure")

        assert error.query is None
        assert error.details == {}
