"""
Tests for the openpyxl workbook reader.
"""

from pathlib import Path

import pytest

from src.core.exceptions import IngestionError
from src.ingestion.workbook_reader import WorkbookReader


class TestWorkbookReader:
    """Tests for WorkbookReader."""

    def test_reads_configured_sheets(self, sample_workbook: Path):
        """Test that each requested sheet is returned without its header."""
        reader = WorkbookReader(header_rows=1)

        sheets = reader.read(sample_workbook, ["CE", "EO"])

        assert set(sheets) == {"CE", "EO"}
        assert sheets["EO"][0][:3] == (4, 1, "Parlez de votre famille.")

    def test_header_rows_zero_keeps_header(self, sample_workbook: Path):
        """Test that header skipping follows the setting."""
        reader = WorkbookReader(header_rows=0)

        sheets = reader.read(sample_workbook, ["EO"])

        assert sheets["EO"][0][0] == "Test"

    def test_missing_file_raises(self, temp_dir: Path):
        """Test that a missing workbook raises IngestionError."""
        reader = WorkbookReader()

        with pytest.raises(IngestionError) as exc_info:
            reader.read(temp_dir / "absent.xlsx", ["CE"])

        assert "not found" in exc_info.value.message.lower()

    def test_corrupt_file_raises(self, temp_dir: Path):
        """Test that an unreadable workbook raises IngestionError."""
        path = temp_dir / "broken.xlsx"
        path.write_text("not a workbook")

        reader = WorkbookReader()

        with pytest.raises(IngestionError):
            reader.read(path, ["CE"])

    def test_missing_sheet_raises(self, temp_dir: Path, workbook_factory):
        """Test that a workbook lacking a configured sheet is rejected."""
        path = workbook_factory(temp_dir / "partial.xlsx", {"CE": [("h",), ("x",)]})

        reader = WorkbookReader()

        with pytest.raises(IngestionError) as exc_info:
            reader.read(path, ["CE", "CO"])

        assert "CO" in exc_info.value.message
        assert exc_info.value.details["available"] == ["CE"]
