"""Top-level rendering of the application wizard."""

from __future__ import annotations

import streamlit as st

from components.stepper import render_stepper
from constants import content
from utils.errors import display_notice
from utils.logging_context import log_context
from wizard.controller import WizardController
from wizard.navigation.ui import render_navigation, render_validation_warnings
from wizard.steps import STEP_RENDERERS
from wizard.success import render_success
from wizard_pages import STEPS


def run_wizard(controller: WizardController | None = None) -> WizardController:
    """Render the current step (or the success screen) for this session."""

    controller = controller or WizardController()
    state = controller.state
    if state.succeeded:
        render_success(controller)
        return controller

    page = controller.current_page
    with log_context(wizard_step=page.key):
        with st.container(border=True):
            title_col, progress_col = st.columns((4, 1))
            title_col.subheader(content.FORM_TITLE)
            progress_col.markdown(f"**{controller.progress}%**")
            render_stepper(state.step, [step.title for step in STEPS], progress=controller.progress)

            display_notice(state.notice, on_dismiss=controller.dismiss_notice)

            st.markdown(f"### {page.title}")
            st.caption(page.description)
            STEP_RENDERERS[state.step](controller)

            render_validation_warnings(controller)
            render_navigation(controller)
    return controller


__all__ = ["run_wizard"]
