from __future__ import annotations

from components.form_fields import radio_field, text_field
from constants import content
from wizard.controller import WizardController

__all__ = ["step_personal"]


def step_personal(controller: WizardController) -> None:
    """Render identity and contact details."""

    text_field(controller, "full_name_3", content.QUESTIONS["full_name_3"], placeholder="مثال: فاطمة أحمد علي")
    text_field(controller, "age", content.QUESTIONS["age"], help=content.AGE_HINT, placeholder="25")
    radio_field(
        controller,
        "marital_status",
        content.QUESTIONS["marital_status"],
        content.MARITAL_STATUS_OPTIONS,
    )
    text_field(
        controller,
        "whatsapp_number",
        content.QUESTIONS["whatsapp_number"],
        help=content.WHATSAPP_HINT,
        placeholder="+201234567890",
    )
    text_field(controller, "education", content.QUESTIONS["education"], placeholder="مثال: بكالوريوس")
    radio_field(
        controller,
        "finished_study",
        content.QUESTIONS["finished_study"],
        content.YES_NO_OPTIONS,
    )
