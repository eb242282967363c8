"""
Facet filtering and type x level aggregation.

Filters keep corpus order and are conjunctive: text match first, then
exact type, then exact level. The contingency table counts only records
whose type and level both belong to the fixed domains.
"""

import time
from typing import Iterable, List, Optional

import numpy as np

from ..core import get_logger, SearchError
from .match_engine import MatchEngine
from .models import (
    LEVELS,
    QUESTION_TYPES,
    ContingencyTable,
    Corpus,
    FacetSelection,
    QuestionRecord,
    SearchOutcome,
)

logger = get_logger(__name__)


_TYPE_INDEX = {t: i for i, t in enumerate(QUESTION_TYPES)}
_LEVEL_INDEX = {lvl: j for j, lvl in enumerate(LEVELS)}


def filter_records(
    records: Iterable[QuestionRecord],
    query: str,
    type_facet: Optional[str] = None,
    level_facet: Optional[str] = None,
    engine: Optional[MatchEngine] = None
) -> List[QuestionRecord]:
    """
    Narrow records by text query and exact facets.

    Args:
        records: Records in corpus order.
        query: Raw query; blank means no text filtering.
        type_facet: Exact type to keep, or None.
        level_facet: Exact level to keep, or None.
        engine: Match engine to use. A fresh one is created if omitted.

    Returns:
        Matching records, in their original order.

    Raises:
        SearchError: If a facet value is outside its fixed domain.
    """
    if type_facet is not None and type_facet not in QUESTION_TYPES:
        raise SearchError(f"Unknown question type: {type_facet}", query=query)
    if level_facet is not None and level_facet not in LEVELS:
        raise SearchError(f"Unknown level: {level_facet}", query=query)

    engine = engine or MatchEngine()
    result = list(records)

    if query and query.strip():
        result = [r for r in result if engine.matches(r, query)]

    if type_facet is not None:
        result = [r for r in result if r.type == type_facet]

    if level_facet is not None:
        result = [r for r in result if r.level == level_facet]

    return result


def aggregate(records: Iterable[QuestionRecord]) -> Optional[ContingencyTable]:
    """
    Build the type x level contingency table.

    Records with a type or level outside the fixed domains are skipped.

    Args:
        records: Records to count.

    Returns:
        The table, or None when no record falls in the domains.
    """
    counts = np.zeros((len(QUESTION_TYPES), len(LEVELS)), dtype=np.int64)

    for record in records:
        i = _TYPE_INDEX.get(record.type)
        j = _LEVEL_INDEX.get(record.level)
        if i is None or j is None:
            continue
        counts[i, j] += 1

    if counts.sum() == 0:
        return None

    return ContingencyTable(counts=counts)


def toggle_facets(current: FacetSelection, question_type: str, level: str) -> FacetSelection:
    """
    Apply a click on a table cell.

    Clicking the active (type, level) pair clears both facets; any other
    cell replaces both.
    """
    if current.type == question_type and current.level == level:
        return FacetSelection()
    return FacetSelection(type=question_type, level=level)


def select_type(current: FacetSelection, question_type: Optional[str]) -> FacetSelection:
    """Set or clear the type facet alone."""
    return FacetSelection(type=question_type, level=current.level)


def select_level(current: FacetSelection, level: Optional[str]) -> FacetSelection:
    """Set or clear the level facet alone."""
    return FacetSelection(type=current.type, level=level)


def run_search(
    corpus: Corpus,
    query: str,
    facets: FacetSelection = FacetSelection(),
    engine: Optional[MatchEngine] = None
) -> SearchOutcome:
    """
    Filter the corpus and aggregate the result in one pass.

    Args:
        corpus: The session corpus.
        query: Debounced query string.
        facets: Active facet selection.
        engine: Match engine, shared across calls to reuse its caches.

    Returns:
        SearchOutcome with matching records and their table.
    """
    start_time = time.time()

    records = filter_records(corpus, query, facets.type, facets.level, engine=engine)
    table = aggregate(records)

    execution_time = (time.time() - start_time) * 1000

    logger.debug(
        f"Search '{query}' type={facets.type} level={facets.level}: "
        f"{len(records)}/{len(corpus)} records in {execution_time:.1f}ms"
    )

    return SearchOutcome(
        query=query,
        facets=facets,
        records=records,
        table=table,
        corpus_size=len(corpus),
        execution_time_ms=round(execution_time, 2)
    )


if __name__ == "__main__":
    corpus = Corpus([
        QuestionRecord(id="CE-2", type="CE", level="B1", content="Il parle français"),
        QuestionRecord(id="CO-2", type="CO", level="A2", content="Nous mangeons ensemble"),
        QuestionRecord(id="EE-2", type="EE", content="Parlez de vos vacances"),
    ])

    outcome = run_search(corpus, "parler")
    print(f"{outcome.total_results} of {outcome.corpus_size} questions")
    if outcome.table:
        for question_type, cells, total in outcome.table.rows():
            print(f"  {question_type}: {cells} = {total}")
        print(f"  columns: {outcome.table.column_totals}, total {outcome.table.grand_total}")

    facets = toggle_facets(FacetSelection(), "CE", "B1")
    print(f"After click: {facets}")
    print(f"After second click: {toggle_facets(facets, 'CE', 'B1')}")
