"""Wizard step metadata registry."""

from __future__ import annotations

from .base import WizardPage


STEPS: tuple[WizardPage, ...] = (
    WizardPage(
        key="conditions",
        title="الشروط والالتزام",
        description="تأكيد المتطلبات الأساسية",
        fields=(
            "agree_all_conditions",
            "salary_acceptance",
            "daily_work_no_weekly_off",
            "all_day_availability",
            "can_use_tools",
            "agree_no_stopping_policy",
        ),
    ),
    WizardPage(
        key="personal",
        title="البيانات الشخصية",
        description="معلومات التواصل",
        fields=(
            "full_name_3",
            "age",
            "marital_status",
            "whatsapp_number",
            "education",
            "finished_study",
        ),
    ),
    WizardPage(
        key="experience",
        title="خبرات العمل",
        description="أسئلة عن الخبرة والدوام",
        fields=(
            "supervision_experience_details",
            "current_job_and_hours",
            "previous_jobs",
            "agree_attend_trial_sessions",
            "internet_stability",
        ),
    ),
    WizardPage(
        key="questions",
        title="أسئلة تمييزية",
        description="طريقة التفكير والتواصل",
        # The no-stopping policy is confirmed again here; it is the same field as on step one.
        fields=(
            "why_choose_you",
            "supervision_role_idea",
            "convince_parent_message",
            "agree_no_stopping_policy",
        ),
    ),
)

LAST_STEP_INDEX: int = len(STEPS) - 1


def step_fields(index: int) -> tuple[str, ...]:
    """Return the fields gated by the step at ``index``."""

    if not 0 <= index < len(STEPS):
        raise IndexError(f"Unknown wizard step index: {index}")
    return STEPS[index].fields


__all__ = ["LAST_STEP_INDEX", "STEPS", "WizardPage", "step_fields"]
