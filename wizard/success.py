from __future__ import annotations

import streamlit as st

from constants import content
from constants.keys import UIKeys
from wizard.controller import WizardController


def render_success(controller: WizardController) -> None:
    """Render the confirmation screen; the only action left is a new application."""

    with st.container(border=True):
        st.success(f"### {content.SUCCESS_TITLE}", icon="✅")
        st.write(content.SUCCESS_BODY)
        st.button(
            content.NEW_APPLICATION_LABEL,
            key=UIKeys.NEW_APPLICATION,
            on_click=controller.start_new_application,
            type="primary",
        )


__all__ = ["render_success"]
