"""
Search module for accent- and conjugation-tolerant question matching.

Provides the question data model, word variations, the match engine
with highlighting, and facet filtering with type x level aggregation.
"""

from .models import (
    QUESTION_TYPES,
    QUESTION_TYPE_LABELS,
    LEVELS,
    QuestionRecord,
    Corpus,
    FacetSelection,
    HighlightSpan,
    ContingencyTable,
    SearchOutcome
)
from .variations import expand_variations, expand_surface_forms
from .match_engine import MatchEngine, build_candidates, matches, highlight_spans
from .aggregator import (
    filter_records,
    aggregate,
    toggle_facets,
    select_type,
    select_level,
    run_search
)

__all__ = [
    "QUESTION_TYPES",
    "QUESTION_TYPE_LABELS",
    "LEVELS",
    "QuestionRecord",
    "Corpus",
    "FacetSelection",
    "HighlightSpan",
    "ContingencyTable",
    "SearchOutcome",
    "expand_variations",
    "expand_surface_forms",
    "MatchEngine",
    "build_candidates",
    "matches",
    "highlight_spans",
    "filter_records",
    "aggregate",
    "toggle_facets",
    "select_type",
    "select_level",
    "run_search"
]
