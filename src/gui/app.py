"""
Main Streamlit application for the question search.

Entry point that assembles all components into the complete web
interface: search box, type x level table and highlighted results.

Note: This file is run directly by Streamlit, so it needs to
set up the Python path before importing other modules.
"""

import sys
from pathlib import Path

# Add project root to path for imports when run directly by Streamlit
_project_root = Path(__file__).parent.parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import streamlit as st  # noqa: E402

from src.core import get_config, get_logger, SearchError  # noqa: E402
from src.ingestion import LoadResult, load_corpus_result  # noqa: E402
from src.search import MatchEngine, run_search  # noqa: E402

from src.gui.state import init_state, get_session, set_session  # noqa: E402
from src.gui.components import (  # noqa: E402
    render_sidebar,
    render_search_bar,
    render_stats_table,
    render_results,
)
from src.gui.components.search_bar import (  # noqa: E402
    render_no_results,
    render_result_count,
    settle_debounce,
)

logger = get_logger(__name__)


@st.cache_resource(show_spinner=False)
def _load_corpus() -> LoadResult:
    """Load the corpus once per server process."""
    return load_corpus_result()


@st.cache_resource
def _get_engine() -> MatchEngine:
    return MatchEngine()


def load_css(css_path: Path) -> None:
    """
    Load and inject custom CSS into Streamlit.

    Args:
        css_path: Path to the CSS file.
    """
    if css_path.exists():
        with open(css_path, "r", encoding="utf-8") as f:
            css_content = f.read()
        st.markdown(f"<style>{css_content}</style>", unsafe_allow_html=True)


def render_banner(title: str, subtitle: str) -> None:
    """Render the main header banner."""
    st.markdown(
        f"""
        <div class="main-header">
            <h1>{title}</h1>
            <p>{subtitle}</p>
        </div>
        """,
        unsafe_allow_html=True
    )


def main():
    """Main application entry point."""
    config = get_config()

    st.set_page_config(
        page_title=config.gui.page_title,
        layout="wide",
        initial_sidebar_state="expanded"
    )

    load_css(config.assets.css_path)

    init_state(config.search.debounce_ms)

    with st.spinner("Chargement des questions..."):
        result = _load_corpus()

    session = get_session()
    if session.loading:
        session = session.with_loaded() if result.ok else session.with_load_error(result.error)
        set_session(session)

    if session.error:
        st.error(session.error)
        st.stop()

    corpus = result.corpus

    render_sidebar(corpus)

    render_banner(config.gui.page_title, config.gui.subtitle)

    render_search_bar()

    _render_results_section(corpus, config.search.max_results)

    settle_debounce()


def _render_results_section(corpus, max_results: int) -> None:
    """Run the search for the current session state and render it."""
    session = get_session()
    engine = _get_engine()

    try:
        outcome = run_search(corpus, session.debounced_query, session.facets, engine=engine)
    except SearchError as e:
        st.error(f"Erreur lors de la recherche : {e.message}")
        logger.error(f"Search error: {e.message}")
        return

    if session.is_searching:
        render_stats_table(outcome.table, session.facets)
        render_result_count(outcome.total_results, outcome.corpus_size)
        logger.debug(f"Query '{session.debounced_query}': {outcome.total_results} results")

    if not outcome.records:
        render_no_results(session.debounced_query)
        return

    st.divider()

    render_results(outcome.records, session.debounced_query, engine, max_results)


if __name__ == "__main__":
    main()
