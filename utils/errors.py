"""Utility helpers for rendering page-level notices in Streamlit."""

from __future__ import annotations

from typing import Callable

import streamlit as st

from constants.content import DISMISS_LABEL, NOTICE_TITLE
from constants.keys import UIKeys
from wizard.controller import Notice, NoticeKind


def display_notice(notice: Notice | None, *, on_dismiss: Callable[[], None] | None = None) -> None:
    """Render a dismissible page-level notice.

    Connectivity problems use ``st.error``; messages from the submission
    endpoint use ``st.warning`` so applicants can tell the two apart.
    """

    if notice is None:
        return
    text = f"**{NOTICE_TITLE}**\n\n{notice.message}"
    if notice.kind is NoticeKind.CONNECTION:
        st.error(text, icon="📡")
    else:
        st.warning(text)
    if on_dismiss is not None:
        st.button(DISMISS_LABEL, key=UIKeys.DISMISS_NOTICE, on_click=on_dismiss)
