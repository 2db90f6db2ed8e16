from __future__ import annotations

import streamlit as st

from constants import content
from constants.keys import UIKeys
from wizard.controller import SubmitOutcome, WizardController


def render_validation_warnings(controller: WizardController) -> None:
    """Point the applicant at the first field that blocked the last transition."""

    focus = controller.state.focus_field
    if not focus or focus not in controller.visible_errors():
        return
    question = content.QUESTIONS.get(focus, content.FIELD_LABELS.get(focus, focus))
    st.warning(f"{content.STEP_BLOCKED_HINT}\n\n{question}")


def _run_submit(controller: WizardController) -> SubmitOutcome:
    with st.spinner(content.SUBMITTING_LABEL):
        return controller.submit()


def render_navigation(controller: WizardController) -> None:
    """Render the previous / next (or submit) controls for the current step."""

    state = controller.state
    cols = st.columns((1, 1), gap="small")
    with cols[0]:
        st.button(
            f"→ {content.PREVIOUS_LABEL}",
            key=UIKeys.PREVIOUS,
            on_click=controller.previous_step,
            disabled=controller.is_first_step or state.submitting,
            use_container_width=True,
        )
    with cols[1]:
        if not controller.is_last_step:
            st.button(
                f"{content.NEXT_LABEL} ←",
                key=UIKeys.NEXT,
                type="primary",
                on_click=controller.next_step,
                disabled=state.submitting,
                use_container_width=True,
            )
            return
        label = content.SUBMITTING_LABEL if state.submitting else content.SUBMIT_LABEL
        triggered = st.button(
            label,
            key=UIKeys.SUBMIT,
            type="primary",
            disabled=state.submitting,
            use_container_width=True,
        )
    if triggered:
        outcome = _run_submit(controller)
        if outcome is not SubmitOutcome.IGNORED:
            st.rerun()


__all__ = ["render_navigation", "render_validation_warnings"]
