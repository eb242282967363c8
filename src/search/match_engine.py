"""
Boolean text matching and highlighting for question records.

A query is split on whitespace and every token is expanded into its
variations. All variations of all tokens go into one candidate pool:
a record matches when its normalized content contains any candidate
as a substring. Multi-word queries are therefore an OR over every
variation of every word, not an AND across words.

Highlighting searches the folded display text with the same candidates
and maps each hit back onto the original characters, which are never
altered.
"""

import re
from functools import lru_cache
from typing import List, Optional, Pattern, Tuple

from ..core import get_logger
from ..utils import normalize
from .models import HighlightSpan, QuestionRecord
from .variations import expand_surface_forms, expand_variations

logger = get_logger(__name__)


def tokenize_query(query: str) -> List[str]:
    """Split a query on whitespace, dropping empty tokens."""
    if not query:
        return []
    return query.split()


def _longest_first(candidates) -> List[str]:
    return sorted(set(candidates), key=lambda c: (-len(c), c))


def build_candidates(query: str) -> List[str]:
    """
    Normalized candidates for matching.

    Args:
        query: Raw query string.

    Returns:
        De-duplicated candidates, longest first. Empty for a blank query.
    """
    pool = set()
    for token in tokenize_query(query):
        pool.update(expand_variations(token))
    return _longest_first(pool)


def build_highlight_candidates(query: str) -> List[str]:
    """
    Candidates for highlighting: the normalized forms plus the literal,
    accented forms ("parlé", "parlées"). They are folded again
    before searching.
    """
    pool = set(build_candidates(query))
    for token in tokenize_query(query):
        pool.update(expand_surface_forms(token))
    return _longest_first(pool)


def _fold_with_offsets(text: str) -> Tuple[str, List[int]]:
    """
    Normalize text one character at a time.

    Returns the folded text and, for each folded character, the index of
    the display character it came from. Combining marks fold to nothing.
    """
    folded = []
    offsets = []
    for index, char in enumerate(text):
        for piece in normalize(char):
            folded.append(piece)
            offsets.append(index)
    return "".join(folded), offsets


class MatchEngine:
    """
    Matches records against a query and splits text into highlight spans.

    Candidate lists and compiled patterns are cached per query, since the
    same query is applied to every record of the corpus.
    """

    def __init__(self, cache_size: int = 64):
        """
        Initialize the engine.

        Args:
            cache_size: Number of distinct queries to keep compiled.
        """
        self._candidates = lru_cache(maxsize=cache_size)(self._compute_candidates)
        self._pattern = lru_cache(maxsize=cache_size)(self._compile_pattern)

    @staticmethod
    def _compute_candidates(query: str) -> Tuple[str, ...]:
        return tuple(build_candidates(query))

    @staticmethod
    def _compile_pattern(query: str) -> Optional[Pattern]:
        folded = _longest_first(normalize(c) for c in build_highlight_candidates(query))
        folded = [c for c in folded if c]
        if not folded:
            return None

        alternation = "|".join(re.escape(c) for c in folded)
        return re.compile(f"(?:{alternation})")

    def candidates(self, query: str) -> Tuple[str, ...]:
        """Normalized candidates for a query (cached)."""
        return self._candidates((query or "").strip())

    def matches(self, record: QuestionRecord, query: str) -> bool:
        """
        Check whether a record matches a query.

        A blank query matches every record.

        Args:
            record: Record with precomputed normalized content.
            query: Raw query string.

        Returns:
            True if any candidate occurs in the record's normalized content.
        """
        candidates = self.candidates(query)
        if not candidates:
            return True

        content = record.normalized_content
        return any(candidate in content for candidate in candidates)

    def highlight_spans(self, text: str, query: str) -> List[HighlightSpan]:
        """
        Split display text into matched and unmatched spans.

        Matching runs on the folded text, the same comparison key used by
        matches(), and each hit is mapped back to display offsets. So an
        unaccented query still marks "français" in the original text.

        Never raises: on any pattern failure the text comes back as a
        single unmatched span.

        Args:
            text: Original display text (casing and accents kept).
            query: Raw query string.

        Returns:
            Spans whose texts concatenate back to the input text.
        """
        if not text:
            return []

        try:
            pattern = self._pattern((query or "").strip())
            if pattern is None:
                return [HighlightSpan(text)]

            folded, offsets = _fold_with_offsets(text)
            ranges = []
            for match in pattern.finditer(folded):
                start = offsets[match.start()]
                end = offsets[match.end()] if match.end() < len(offsets) else len(text)
                if start >= end or (ranges and start < ranges[-1][1]):
                    continue
                ranges.append((start, end))
        except Exception as e:
            logger.warning(f"Could not highlight '{query}': {e}")
            return [HighlightSpan(text)]

        spans = []
        position = 0
        for start, end in ranges:
            if start > position:
                spans.append(HighlightSpan(text[position:start]))
            spans.append(HighlightSpan(text[start:end], True))
            position = end
        if position < len(text):
            spans.append(HighlightSpan(text[position:]))

        return spans

    def clear_cache(self) -> None:
        """Drop cached candidates and patterns."""
        self._candidates.cache_clear()
        self._pattern.cache_clear()


_default_engine = MatchEngine()


def matches(record: QuestionRecord, query: str) -> bool:
    """Module-level shortcut using a shared engine."""
    return _default_engine.matches(record, query)


def highlight_spans(text: str, query: str) -> List[HighlightSpan]:
    """Module-level shortcut using a shared engine."""
    return _default_engine.highlight_spans(text, query)


if __name__ == "__main__":
    record = QuestionRecord(id="CE-2", type="CE", level="B1", content="Il parle français")

    for q in ["parler", "manger", "", "Français", "manger parler"]:
        print(f"  {q!r}: candidates={build_candidates(q)} -> {matches(record, q)}")

    print("\n=== Highlighting ===")
    text = "Elles ont parlé, puis il PARLE encore."
    for span in highlight_spans(text, "parler"):
        marker = "*" if span.is_match else " "
        print(f"  [{marker}] {span.text!r}")
