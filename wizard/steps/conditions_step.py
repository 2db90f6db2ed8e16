from __future__ import annotations

import streamlit as st

from components.form_fields import agreement_checkbox, radio_field
from constants import content
from models.application import eligibility_block_message
from wizard.controller import WizardController

__all__ = ["step_conditions"]


def step_conditions(controller: WizardController) -> None:
    """Render the eligibility questions and the first policy confirmation."""

    with st.container(border=True):
        st.markdown("#### الشروط الأساسية")
        st.caption("نرجو قراءة الشروط التالية قبل التقديم لضمان توافق المتطلبات.")
        st.markdown("\n".join(f"- {condition}" for condition in content.BASIC_CONDITIONS))

    blocked = eligibility_block_message(controller.state.values)
    if blocked:
        st.error(f"**{content.BLOCKED_TITLE}**\n\n{blocked}", icon="⚠️")

    radio_field(
        controller,
        "agree_all_conditions",
        content.QUESTIONS["agree_all_conditions"],
        content.AGREEMENT_OPTIONS,
    )
    radio_field(
        controller,
        "salary_acceptance",
        content.QUESTIONS["salary_acceptance"],
        content.AGREEMENT_OPTIONS,
    )
    radio_field(
        controller,
        "daily_work_no_weekly_off",
        content.QUESTIONS["daily_work_no_weekly_off"],
        content.AGREEMENT_OPTIONS,
    )
    radio_field(
        controller,
        "all_day_availability",
        content.QUESTIONS["all_day_availability"],
        content.AVAILABILITY_OPTIONS,
    )
    radio_field(
        controller,
        "can_use_tools",
        content.QUESTIONS["can_use_tools"],
        content.YES_NO_OPTIONS,
    )

    st.markdown(f"**{content.QUESTIONS['agree_no_stopping_policy']}**")
    st.info(f"**{content.POLICY_TITLE}**\n\n{content.NO_STOPPING_POLICY}")
    agreement_checkbox(
        controller,
        "agree_no_stopping_policy",
        content.AGREEMENT_CHECKBOX_LABEL,
        accepted_value=content.AGREE,
        variant="conditions",
    )
