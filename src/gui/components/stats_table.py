"""
Contingency table component.

Shows the matching questions counted by type and level, with row and
column totals. Each non-empty cell is a button that toggles the
type/level facets.
"""

import streamlit as st
from typing import Optional

from ...search import ContingencyTable, FacetSelection, QUESTION_TYPE_LABELS
from ..state import get_session, set_session


def _on_cell_click(question_type: str, level: str) -> None:
    set_session(get_session().with_facets_toggled(question_type, level))


def render_stats_table(table: Optional[ContingencyTable], facets: FacetSelection) -> None:
    """
    Render the type x level table.

    Args:
        table: Table to render, or None when nothing matched.
        facets: Active facets, used to mark the selected cell.
    """
    if table is None:
        return

    widths = [3] + [1] * len(table.levels) + [1]

    header = st.columns(widths)
    header[0].markdown("**Type**")
    for col, level in zip(header[1:], table.levels):
        col.markdown(f"**{level}**")
    header[-1].markdown("**Total**")

    for question_type, cells, row_total in table.rows():
        cols = st.columns(widths)
        cols[0].markdown(
            f"{question_type}",
            help=QUESTION_TYPE_LABELS.get(question_type)
        )

        for col, level, count in zip(cols[1:], table.levels, cells):
            active = facets.type == question_type and facets.level == level
            col.button(
                str(count) if count else "·",
                key=f"cell_{question_type}_{level}",
                type="primary" if active else "secondary",
                disabled=count == 0 and not active,
                on_click=_on_cell_click,
                args=(question_type, level),
                use_container_width=True
            )

        cols[-1].markdown(f"**{row_total}**")

    footer = st.columns(widths)
    footer[0].markdown("**Total**")
    column_totals = table.column_totals
    for col, level in zip(footer[1:], table.levels):
        col.markdown(f"**{column_totals[level]}**")
    footer[-1].markdown(f"**{table.grand_total}**")
