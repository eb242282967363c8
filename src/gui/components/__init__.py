"""
Reusable UI components for the Streamlit application.

Contains modular components for the sidebar, search bar,
contingency table, and results display.
"""

from .sidebar import render_sidebar
from .search_bar import render_search_bar
from .stats_table import render_stats_table
from .results_list import render_results

__all__ = [
    "render_sidebar",
    "render_search_bar",
    "render_stats_table",
    "render_results"
]
