from __future__ import annotations

import streamlit as st

from components.form_fields import agreement_checkbox, text_field
from constants import content
from wizard.controller import WizardController

__all__ = ["step_questions"]


def step_questions(controller: WizardController) -> None:
    """Render the open questions and the repeated policy confirmation."""

    text_field(
        controller,
        "why_choose_you",
        content.QUESTIONS["why_choose_you"],
        multiline=True,
        placeholder="اكتبي إجابتك هنا...",
    )
    text_field(
        controller,
        "supervision_role_idea",
        content.QUESTIONS["supervision_role_idea"],
        multiline=True,
        placeholder="اكتبي فكرتك باختصار ووضوح...",
    )

    with st.container(border=True):
        st.markdown(f"**{content.QUESTIONS['convince_parent_message']}**")
        for note in content.CONVINCE_PARENT_NOTES:
            st.caption(note)
        text_field(
            controller,
            "convince_parent_message",
            "رسالتك",
            multiline=True,
            height=220,
            placeholder="اكتبي رسالتك بالفصحى...",
        )

    st.markdown("**8) شرط عدم التوقف قبل 6 أشهر**")
    st.info(f"**{content.POLICY_TITLE}**\n\n{content.NO_STOPPING_POLICY}")
    agreement_checkbox(
        controller,
        "agree_no_stopping_policy",
        content.AGREEMENT_CHECKBOX_REPEAT_LABEL,
        accepted_value=content.AGREE,
        variant="questions",
    )
