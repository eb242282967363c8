"""
Session state management for the Streamlit application.

The whole interface state lives in one immutable SessionState object
changed only through its transition methods. A small adapter stores it
in st.session_state next to the query Debouncer.
"""

import time
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Optional

import streamlit as st

from ..search import FacetSelection, toggle_facets, select_type, select_level


DEFAULT_DEBOUNCE_MS = 300


@dataclass(frozen=True)
class SessionState:
    """
    Interface state for one user session.

    Attributes:
        query_input: Live value of the search box.
        debounced_query: Value that drives matching and filtering.
        facets: Active type/level selection.
        loading: True until the corpus load has completed.
        error: Terminal load error message, if any.
    """
    query_input: str = ""
    debounced_query: str = ""
    facets: FacetSelection = field(default_factory=FacetSelection)
    loading: bool = True
    error: Optional[str] = None

    def with_query_input(self, value: str) -> "SessionState":
        return replace(self, query_input=value or "")

    def with_debounced_query(self, value: str) -> "SessionState":
        value = value or ""
        if value == self.debounced_query:
            return self
        return replace(self, debounced_query=value)

    def cleared_query(self) -> "SessionState":
        return replace(self, query_input="", debounced_query="")

    def with_facets_toggled(self, question_type: str, level: str) -> "SessionState":
        return replace(self, facets=toggle_facets(self.facets, question_type, level))

    def with_type(self, question_type: Optional[str]) -> "SessionState":
        return replace(self, facets=select_type(self.facets, question_type))

    def with_level(self, level: Optional[str]) -> "SessionState":
        return replace(self, facets=select_level(self.facets, level))

    def with_facets_cleared(self) -> "SessionState":
        return replace(self, facets=FacetSelection())

    def with_loaded(self) -> "SessionState":
        return replace(self, loading=False, error=None)

    def with_load_error(self, message: str) -> "SessionState":
        return replace(self, loading=False, error=message)

    @property
    def is_searching(self) -> bool:
        return bool(self.debounced_query.strip())


class Debouncer:
    """
    Restartable delayed update with last-write-wins semantics.

    Every push restarts the quiescence window. poll() hands out the
    latest pushed value once, after the window has elapsed with no
    further push; intermediate values are never delivered.
    """

    def __init__(self, delay_ms: int = DEFAULT_DEBOUNCE_MS, clock: Callable[[], float] = time.monotonic):
        """
        Initialize the debouncer.

        Args:
            delay_ms: Quiescence window in milliseconds.
            clock: Monotonic clock returning seconds.
        """
        self.delay = delay_ms / 1000.0
        self._clock = clock
        self._value: Optional[str] = None
        self._deadline: Optional[float] = None

    @property
    def pending(self) -> bool:
        return self._deadline is not None

    def push(self, value: str) -> None:
        """Record a new value and restart the window."""
        self._value = value
        self._deadline = self._clock() + self.delay

    def remaining(self) -> float:
        """Seconds until the pending value is due, 0 if none is pending."""
        if self._deadline is None:
            return 0.0
        return max(0.0, self._deadline - self._clock())

    def poll(self) -> Optional[str]:
        """
        Deliver the pending value if its window has elapsed.

        Returns:
            The latest pushed value, or None if nothing is due.
        """
        if self._deadline is None or self._clock() < self._deadline:
            return None

        value = self._value
        self.cancel()
        return value

    def cancel(self) -> None:
        """Drop any pending value."""
        self._value = None
        self._deadline = None


SESSION_KEY = "session"
DEBOUNCER_KEY = "query_debouncer"


def init_state(debounce_ms: int = DEFAULT_DEBOUNCE_MS) -> None:
    """
    Initialize Streamlit session state.

    Only sets values that don't already exist, preserving state across reruns.
    """
    if SESSION_KEY not in st.session_state:
        st.session_state[SESSION_KEY] = SessionState()
    if DEBOUNCER_KEY not in st.session_state:
        st.session_state[DEBOUNCER_KEY] = Debouncer(debounce_ms)


def get_session() -> SessionState:
    """Current session state."""
    return st.session_state.get(SESSION_KEY, SessionState())


def set_session(session: SessionState) -> None:
    """Replace the session state."""
    st.session_state[SESSION_KEY] = session


def get_debouncer() -> Debouncer:
    """Debouncer for the search box."""
    return st.session_state[DEBOUNCER_KEY]


def get_state(key: str, default: Any = None) -> Any:
    """
    Get a raw value from Streamlit session state (widget values).

    Args:
        key: State key to retrieve.
        default: Default value if key doesn't exist.

    Returns:
        The stored value or default.
    """
    return st.session_state.get(key, default)


def set_state(key: str, value: Any) -> None:
    """
    Set a raw value in Streamlit session state.

    Args:
        key: State key to set.
        value: Value to store.
    """
    st.session_state[key] = value
