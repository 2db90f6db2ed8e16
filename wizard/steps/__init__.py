"""Renderers for the four wizard steps."""

from __future__ import annotations

from typing import Callable

from wizard.controller import WizardController

from .conditions_step import step_conditions
from .experience_step import step_experience
from .personal_step import step_personal
from .questions_step import step_questions

StepRenderer = Callable[[WizardController], None]

# Indexed like ``wizard_pages.STEPS``.
STEP_RENDERERS: tuple[StepRenderer, ...] = (
    step_conditions,
    step_personal,
    step_experience,
    step_questions,
)

__all__ = [
    "STEP_RENDERERS",
    "StepRenderer",
    "step_conditions",
    "step_experience",
    "step_personal",
    "step_questions",
]
