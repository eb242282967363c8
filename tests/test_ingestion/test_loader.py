"""
Tests for corpus loading.

Tests the all-or-nothing loader and its success/failure result wrapper.
"""

from pathlib import Path

import pytest

from src.core.exceptions import IngestionError
from src.ingestion.loader import load_corpus, load_corpus_result


class TestLoadCorpus:
    """Tests for load_corpus."""

    def test_loads_every_sheet(self, configured):
        """Test that all four sheets contribute records in config order."""
        corpus = load_corpus(configured)

        assert len(corpus) == 7
        assert corpus.count_by_type() == {"CE": 4, "CO": 1, "EE": 1, "EO": 1}
        assert [r.type for r in corpus][:4] == ["CE"] * 4

    def test_record_fields(self, configured):
        """Test that loaded records carry mapped and cleaned values."""
        corpus = load_corpus(configured)

        first = corpus.get("CE-2")
        assert first.level == "B1"
        assert first.choices == "A) Oui\nB) Non"

        repaired = corpus.get("CE-4")
        assert repaired.content == "Le directeur a été remplacé."
        assert repaired.level == "B2"

        spoken = corpus.get("CO-2")
        assert spoken.test_num == "1"
        assert spoken.question_num == "4"

    def test_unknown_level_kept_as_record(self, configured):
        """Test that a row with an unknown level still loads, without level."""
        corpus = load_corpus(configured)

        cafe = [r for r in corpus if "café" in r.content]
        assert len(cafe) == 1
        assert cafe[0].level is None

    def test_ids_unique(self, configured):
        """Test that every id is unique."""
        corpus = load_corpus(configured)

        ids = [r.id for r in corpus]
        assert len(ids) == len(set(ids))

    def test_workbook_override(self, configured, temp_dir: Path, workbook_factory):
        """Test loading a different workbook than the configured one."""
        other = workbook_factory(temp_dir / "other.xlsx", {
            "CE": [("h",), (1, 1, "A1", "Seule question", None)],
            "CO": [("h",)],
            "EE": [("h",)],
            "EO": [("h",)],
        })

        corpus = load_corpus(configured, workbook_path=other)

        assert len(corpus) == 1

    def test_missing_sheet_fails_whole_load(self, configured, temp_dir: Path, workbook_factory):
        """Test that a missing sheet gives no partial corpus."""
        partial = workbook_factory(temp_dir / "partial.xlsx", {
            "CE": [("h",), (1, 1, "A1", "Question", None)],
        })

        with pytest.raises(IngestionError):
            load_corpus(configured, workbook_path=partial)


class TestLoadCorpusResult:
    """Tests for load_corpus_result."""

    def test_success(self, configured):
        """Test that a good workbook yields a corpus and no error."""
        result = load_corpus_result(configured)

        assert result.ok
        assert result.error is None
        assert len(result.corpus) == 7

    def test_failure_is_a_value(self, configured, temp_dir: Path):
        """Test that load failure becomes a readable message, not an exception."""
        result = load_corpus_result(configured, workbook_path=temp_dir / "absent.xlsx")

        assert not result.ok
        assert result.corpus is None
        assert "absent.xlsx" in result.error
