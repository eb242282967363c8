"""
GUI module providing the Streamlit web interface.

Contains the main application, session state and debounce handling,
and reusable UI components for the question search.
"""

from .state import SessionState, Debouncer, init_state, get_session, set_session

__all__ = [
    "SessionState",
    "Debouncer",
    "init_state",
    "get_session",
    "set_session"
]
