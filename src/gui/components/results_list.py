"""
Results list component for displaying matching questions.

Renders one card per question with its badges and the content and
choices, highlighted for the active query.
"""

import html
from typing import List

import streamlit as st

from ...search import HighlightSpan, MatchEngine, QuestionRecord


def spans_to_html(spans: List[HighlightSpan]) -> str:
    """Render highlight spans as escaped HTML with <mark> around matches."""
    parts = []
    for span in spans:
        text = html.escape(span.text)
        parts.append(f"<mark>{text}</mark>" if span.is_match else text)
    return "".join(parts)


def _highlighted(text: str, query: str, engine: MatchEngine) -> str:
    if not query.strip():
        return html.escape(text)
    return spans_to_html(engine.highlight_spans(text, query))


def _badges(record: QuestionRecord) -> str:
    badges = [f'<span class="badge badge-type">{html.escape(record.type)}</span>']

    if record.level:
        badges.append(f'<span class="badge badge-level">Niveau {html.escape(record.level)}</span>')
    if record.test_num:
        badges.append(f'<span class="badge badge-meta">Test {html.escape(record.test_num)}</span>')
    if record.question_num:
        badges.append(f'<span class="badge badge-meta">Question {html.escape(record.question_num)}</span>')

    return "".join(badges)


def render_results(
    records: List[QuestionRecord],
    query: str,
    engine: MatchEngine,
    max_results: int
) -> None:
    """
    Render the list of matching questions.

    Args:
        records: Questions to display, in corpus order.
        query: Debounced query used for highlighting.
        engine: Shared match engine.
        max_results: Maximum number of cards to render.
    """
    for record in records[:max_results]:
        _render_question_card(record, query, engine)

    if len(records) > max_results:
        st.caption(
            f"{len(records) - max_results} question(s) supplémentaire(s) non affichée(s). "
            "Affinez la recherche ou utilisez les filtres."
        )


def _render_question_card(record: QuestionRecord, query: str, engine: MatchEngine) -> None:
    """Render a single question card."""
    body = f'<div class="question-content">{_highlighted(record.content, query, engine)}</div>'

    if record.choices:
        body += f'<div class="question-choices">{_highlighted(record.choices, query, engine)}</div>'

    st.markdown(
        f'<div class="question-card">{_badges(record)}{body}</div>',
        unsafe_allow_html=True
    )
