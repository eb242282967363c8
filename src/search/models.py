"""
Data models for search functionality.

Defines the question record, the read-only corpus, facet selection,
highlight spans and the type x level contingency table used
throughout the search module.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from ..core import IngestionError
from ..core.config_loader import KNOWN_QUESTION_TYPES
from ..utils import normalize


QUESTION_TYPES: Tuple[str, ...] = KNOWN_QUESTION_TYPES

QUESTION_TYPE_LABELS = {
    "CE": "Compréhension écrite",
    "CO": "Compréhension orale",
    "EE": "Expression écrite",
    "EO": "Expression orale",
}

LEVELS: Tuple[str, ...] = ("A1", "A2", "B1", "B2", "C1", "C2")


@dataclass(frozen=True)
class QuestionRecord:
    """
    A single exam question.

    Attributes:
        id: Unique identifier, stable for the session.
        type: Question category, one of QUESTION_TYPES.
        content: Question body (never empty in a loaded corpus).
        choices: Answer options, may be empty.
        level: CEFR level from LEVELS, or None.
        test_num: Test number, display only.
        question_num: Question number within the test, display only.
        normalized_content: Comparison key for content and choices,
            computed once at construction.
    """
    id: str
    type: str
    content: str
    choices: str = ""
    level: Optional[str] = None
    test_num: Optional[str] = None
    question_num: Optional[str] = None
    normalized_content: str = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(
            self,
            "normalized_content",
            normalize(f"{self.content} {self.choices or ''}")
        )


class Corpus:
    """
    Read-only, ordered collection of question records.

    Built once per session from the workbook and never mutated.
    """

    def __init__(self, records: Sequence[QuestionRecord]):
        """
        Build the corpus.

        Args:
            records: Records in display order.

        Raises:
            IngestionError: If two records share an id.
        """
        seen = {}
        for record in records:
            if record.id in seen:
                raise IngestionError(
                    f"Duplicate question id: {record.id}",
                    details={"id": record.id}
                )
            seen[record.id] = record

        self._records: Tuple[QuestionRecord, ...] = tuple(records)
        self._by_id: Dict[str, QuestionRecord] = seen

    @property
    def records(self) -> Tuple[QuestionRecord, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[QuestionRecord]:
        return iter(self._records)

    def get(self, record_id: str) -> Optional[QuestionRecord]:
        """Look up a record by id."""
        return self._by_id.get(record_id)

    def count_by_type(self) -> Dict[str, int]:
        """Number of records per question type, in QUESTION_TYPES order."""
        counts = {question_type: 0 for question_type in QUESTION_TYPES}
        for record in self._records:
            if record.type in counts:
                counts[record.type] += 1
        return counts


@dataclass(frozen=True)
class FacetSelection:
    """Active exact-match filters. None means the facet is unset."""
    type: Optional[str] = None
    level: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.type is None and self.level is None


@dataclass(frozen=True)
class HighlightSpan:
    """A piece of display text, flagged when it matched the query."""
    text: str
    is_match: bool = False


@dataclass
class ContingencyTable:
    """
    Counts of records per (type, level) cell.

    Attributes:
        counts: Integer matrix, one row per type and one column per level.
        types: Row labels.
        levels: Column labels.
    """
    counts: np.ndarray
    types: Tuple[str, ...] = QUESTION_TYPES
    levels: Tuple[str, ...] = LEVELS

    @property
    def row_totals(self) -> Dict[str, int]:
        sums = self.counts.sum(axis=1)
        return {t: int(sums[i]) for i, t in enumerate(self.types)}

    @property
    def column_totals(self) -> Dict[str, int]:
        sums = self.counts.sum(axis=0)
        return {lvl: int(sums[j]) for j, lvl in enumerate(self.levels)}

    @property
    def grand_total(self) -> int:
        return int(self.counts.sum())

    def cell(self, question_type: str, level: str) -> int:
        """Count for one cell."""
        return int(self.counts[self.types.index(question_type), self.levels.index(level)])

    def rows(self) -> List[Tuple[str, List[int], int]]:
        """(type, per-level counts, row total) for every type, for rendering."""
        return [
            (t, [int(c) for c in self.counts[i]], int(self.counts[i].sum()))
            for i, t in enumerate(self.types)
        ]


@dataclass
class SearchOutcome:
    """
    Everything the presentation layer needs after a search.

    Attributes:
        query: The (debounced) query that produced the outcome.
        facets: Facet selection applied.
        records: Matching records in corpus order.
        table: Contingency table of the matching records, or None when empty.
        corpus_size: Total number of records in the corpus.
        execution_time_ms: Time spent filtering and aggregating.
    """
    query: str
    facets: FacetSelection
    records: List[QuestionRecord]
    table: Optional[ContingencyTable]
    corpus_size: int
    execution_time_ms: float = 0.0

    @property
    def total_results(self) -> int:
        return len(self.records)


if __name__ == "__main__":
    record = QuestionRecord(
        id="CE-2",
        type="CE",
        level="B1",
        content="Il parle français avec son élève.",
        choices="A) Oui\nB) Non"
    )
    print(f"Record: {record}")
    print(f"Normalized: {record.normalized_content!r}")

    corpus = Corpus([record])
    print(f"Corpus: {len(corpus)} record(s), by type {corpus.count_by_type()}")
