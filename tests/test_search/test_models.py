"""
Tests for search data models.

Tests QuestionRecord, Corpus, FacetSelection and ContingencyTable.
"""

import dataclasses

import numpy as np
import pytest

from src.core.exceptions import IngestionError
from src.search.models import (
    LEVELS,
    QUESTION_TYPES,
    ContingencyTable,
    Corpus,
    FacetSelection,
    QuestionRecord,
)


class TestQuestionRecord:
    """Tests for QuestionRecord dataclass."""

    def test_normalized_content_covers_content_and_choices(self):
        """Test that the comparison key folds content and choices together."""
        record = QuestionRecord(
            id="CE-2",
            type="CE",
            content="Étude du CAFÉ",
            choices="A) Thé"
        )

        assert record.normalized_content == "etude du cafe a) the"

    def test_normalized_content_without_choices(self):
        """Test the key when there are no choices."""
        record = QuestionRecord(id="EE-2", type="EE", content="Parlez")

        assert record.normalized_content == "parlez "

    def test_record_is_immutable(self):
        """Test that records cannot be modified after creation."""
        record = QuestionRecord(id="CE-2", type="CE", content="Texte")

        with pytest.raises(dataclasses.FrozenInstanceError):
            record.content = "Autre"

    def test_optional_fields_default(self):
        """Test default values of optional fields."""
        record = QuestionRecord(id="EO-2", type="EO", content="Sujet")

        assert record.choices == ""
        assert record.level is None
        assert record.test_num is None
        assert record.question_num is None


class TestCorpus:
    """Tests for the Corpus container."""

    def test_keeps_order_and_size(self, sample_records):
        """Test that the corpus preserves record order."""
        corpus = Corpus(sample_records)

        assert len(corpus) == len(sample_records)
        assert [r.id for r in corpus] == [r.id for r in sample_records]

    def test_duplicate_ids_rejected(self):
        """Test that duplicate ids raise IngestionError."""
        records = [
            QuestionRecord(id="CE-2", type="CE", content="Un"),
            QuestionRecord(id="CE-2", type="CE", content="Deux"),
        ]

        with pytest.raises(IngestionError):
            Corpus(records)

    def test_get_by_id(self, sample_records):
        """Test lookup by id."""
        corpus = Corpus(sample_records)

        assert corpus.get("CO-3").content == "Une Étude du climat"
        assert corpus.get("missing") is None

    def test_count_by_type(self, sample_records):
        """Test per-type counts in fixed type order."""
        counts = Corpus(sample_records).count_by_type()

        assert list(counts) == list(QUESTION_TYPES)
        assert counts == {"CE": 2, "CO": 2, "EE": 1, "EO": 1}


class TestFacetSelection:
    """Tests for FacetSelection."""

    def test_default_is_empty(self):
        """Test that a default selection has no active facet."""
        assert FacetSelection().is_empty

    def test_partial_selection_not_empty(self):
        """Test that one active facet is enough."""
        assert not FacetSelection(level="B1").is_empty


class TestContingencyTable:
    """Tests for ContingencyTable."""

    def test_totals(self):
        """Test row, column and grand totals."""
        counts = np.zeros((len(QUESTION_TYPES), len(LEVELS)), dtype=np.int64)
        counts[0, 2] = 3
        counts[1, 2] = 1
        counts[3, 5] = 2

        table = ContingencyTable(counts=counts)

        assert table.cell("CE", "B1") == 3
        assert table.row_totals["CE"] == 3
        assert table.column_totals["B1"] == 4
        assert table.column_totals["C2"] == 2
        assert table.grand_total == 6

    def test_rows_for_rendering(self):
        """Test that rows() lists every type with its total."""
        counts = np.ones((len(QUESTION_TYPES), len(LEVELS)), dtype=np.int64)

        rows = ContingencyTable(counts=counts).rows()

        assert [r[0] for r in rows] == list(QUESTION_TYPES)
        assert rows[0][1] == [1] * len(LEVELS)
        assert rows[0][2] == len(LEVELS)
