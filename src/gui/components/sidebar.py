"""
Sidebar component.

Displays corpus statistics, independent type and level filters, and
search help.
"""

import streamlit as st

from ...search import Corpus, LEVELS, QUESTION_TYPES, QUESTION_TYPE_LABELS
from ..state import get_session, get_state, set_session

ALL_LABEL = "Tous"

TYPE_SELECT_KEY = "type_select"
LEVEL_SELECT_KEY = "level_select"


def _on_type_change() -> None:
    value = get_state(TYPE_SELECT_KEY, ALL_LABEL)
    set_session(get_session().with_type(None if value == ALL_LABEL else value))


def _on_level_change() -> None:
    value = get_state(LEVEL_SELECT_KEY, ALL_LABEL)
    set_session(get_session().with_level(None if value == ALL_LABEL else value))


def _on_reset() -> None:
    set_session(get_session().with_facets_cleared())


def render_sidebar(corpus: Corpus) -> None:
    """
    Render the sidebar.

    Args:
        corpus: Loaded corpus, for statistics.
    """
    with st.sidebar:
        st.title("Questions")

        st.subheader("Statistiques")
        _render_statistics(corpus)

        st.divider()

        st.subheader("Filtres")
        _render_filters()

        st.divider()

        _render_help()


def _render_statistics(corpus: Corpus) -> None:
    st.metric("Questions", f"{len(corpus):,}")

    for question_type, count in corpus.count_by_type().items():
        st.caption(f"{QUESTION_TYPE_LABELS[question_type]} ({question_type}) : {count}")


def _render_filters() -> None:
    """Type and level selectors, kept in sync with the session facets."""
    facets = get_session().facets

    type_options = [ALL_LABEL] + list(QUESTION_TYPES)
    level_options = [ALL_LABEL] + list(LEVELS)

    # Facets can change from a table click, so the widgets follow the session
    st.session_state[TYPE_SELECT_KEY] = facets.type or ALL_LABEL
    st.session_state[LEVEL_SELECT_KEY] = facets.level or ALL_LABEL

    st.selectbox(
        "Type de question",
        options=type_options,
        key=TYPE_SELECT_KEY,
        on_change=_on_type_change,
        format_func=lambda t: t if t == ALL_LABEL else f"{t} - {QUESTION_TYPE_LABELS[t]}"
    )

    st.selectbox(
        "Niveau",
        options=level_options,
        key=LEVEL_SELECT_KEY,
        on_change=_on_level_change
    )

    st.button(
        "Réinitialiser les filtres",
        on_click=_on_reset,
        disabled=facets.is_empty,
        use_container_width=True
    )


def _render_help() -> None:
    """Display search help text."""
    with st.expander("Aide à la recherche"):
        st.markdown("""
        **Recherche :**
        - La recherche ignore les accents et les majuscules (`etude` trouve « Étude »)
        - Un verbe en -er trouve aussi ses formes conjuguées : `parler` trouve
          « parle », « parles », « parlent », « parlé », « parlée »...
        - Les mots sont recherchés aussi à l'intérieur d'autres mots
        - Plusieurs mots : une question est retenue si elle contient **l'un** d'eux

        **Tableau :**
        - Cliquez sur une case pour filtrer par type et niveau
        - Cliquez à nouveau sur la même case pour retirer le filtre
        """)
