"""Helpers for initializing Streamlit session state."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Callable

import streamlit as st

from constants.keys import StateKeys
from utils.logging_context import set_session_id

logger = logging.getLogger(__name__)


_DEFAULT_STATE_FACTORIES: Mapping[str, Callable[[], Any]] = MappingProxyType(
    {
        StateKeys.SESSION_ID: lambda: uuid.uuid4().hex[:12],
    }
)


def ensure_state() -> None:
    """Initialize ``st.session_state`` with required keys.

    Existing keys are preserved so reruns keep the applicant's session. The
    session identifier is bound to the logging context on every call.
    """

    for key, factory in _DEFAULT_STATE_FACTORIES.items():
        if key not in st.session_state:
            st.session_state[key] = factory()
    if not st.session_state.get(StateKeys.STATE_READY):
        logger.debug("Initialized session %s", st.session_state[StateKeys.SESSION_ID])
        st.session_state[StateKeys.STATE_READY] = True
    set_session_id(str(st.session_state[StateKeys.SESSION_ID]))
