"""
Search bar component.

Keystrokes update the live query immediately; the query used for
filtering follows after the debounce window. Streamlit interrupts a
running script on every new widget event, so sleeping out the window
and rerunning gives a delayed action that each keystroke restarts.
"""

import time

import streamlit as st

from ..state import get_debouncer, get_session, get_state, set_session, set_state

SEARCH_INPUT_KEY = "search_input"


def _on_query_change() -> None:
    """Widget callback: store the live value and restart the debounce."""
    value = get_state(SEARCH_INPUT_KEY, "")
    set_session(get_session().with_query_input(value))
    get_debouncer().push(value)


def _on_clear() -> None:
    set_state(SEARCH_INPUT_KEY, "")
    get_debouncer().cancel()
    set_session(get_session().cleared_query())


def render_search_bar() -> None:
    """Render the search input and its clear button."""
    col1, col2 = st.columns([6, 1])

    with col1:
        st.text_input(
            "Rechercher",
            placeholder="Rechercher en français...",
            key=SEARCH_INPUT_KEY,
            on_change=_on_query_change,
            label_visibility="collapsed"
        )

    with col2:
        st.button(
            "Effacer",
            on_click=_on_clear,
            use_container_width=True,
            disabled=not get_session().query_input
        )


def settle_debounce() -> None:
    """
    Promote the pending query once the debounce window has elapsed.

    Waits out the remaining window and reruns; a keystroke arriving in
    the meantime interrupts this run and restarts the window.
    """
    debouncer = get_debouncer()
    if not debouncer.pending:
        return

    remaining = debouncer.remaining()
    if remaining > 0:
        time.sleep(remaining)

    value = debouncer.poll()
    if value is None:
        return

    session = get_session()
    updated = session.with_debounced_query(value)
    if updated is not session:
        set_session(updated)
        st.rerun()


def render_result_count(shown: int, total: int) -> None:
    """Caption with the number of displayed questions."""
    st.caption(f"{shown} question(s) affichée(s) sur {total}")


def render_no_results(query: str) -> None:
    """Display no results message with suggestions."""
    st.info(f"Aucune question ne correspond à \"{query}\"")

    with st.expander("Suggestions"):
        st.markdown("""
        - Vérifiez l'orthographe
        - Les accents et les majuscules sont ignorés
        - Un verbe à l'infinitif (« parler ») trouve aussi « parle », « parlent », « parlé »...
        - Retirez le filtre de type ou de niveau
        """)
