from __future__ import annotations

from components.form_fields import radio_field, text_field
from constants import content
from wizard.controller import WizardController

__all__ = ["step_experience"]


def step_experience(controller: WizardController) -> None:
    """Render the work-experience questions."""

    text_field(
        controller,
        "supervision_experience_details",
        content.QUESTIONS["supervision_experience_details"],
        multiline=True,
        placeholder="اكتبي تفاصيل خبرتك والمهام...",
    )
    text_field(
        controller,
        "current_job_and_hours",
        content.QUESTIONS["current_job_and_hours"],
        multiline=True,
        placeholder="مثال: موظفة إدارية من 9 صباحًا حتى 3 عصرًا",
    )
    text_field(
        controller,
        "previous_jobs",
        content.QUESTIONS["previous_jobs"],
        multiline=True,
        placeholder="اذكري الوظائف السابقة باختصار",
    )
    radio_field(
        controller,
        "agree_attend_trial_sessions",
        content.QUESTIONS["agree_attend_trial_sessions"],
        content.AGREEMENT_OPTIONS,
    )
    radio_field(
        controller,
        "internet_stability",
        content.QUESTIONS["internet_stability"],
        content.INTERNET_OPTIONS,
    )
