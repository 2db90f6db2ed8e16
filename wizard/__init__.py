"""Wizard helpers package."""

from __future__ import annotations

import importlib
from typing import Any

from .controller import Notice, NoticeKind, SubmitOutcome, WizardController, WizardState
from .step_gate import StepGateResult, check_step, first_step_with_errors

__all__ = [
    "Notice",
    "NoticeKind",
    "StepGateResult",
    "SubmitOutcome",
    "WizardController",
    "WizardState",
    "check_step",
    "first_step_with_errors",
]


FLOW_EXPORTS: list[str] = []


def _load_flow_attribute(name: str) -> Any:
    """Lazily import ``wizard.flow`` to avoid circular imports."""

    flow = importlib.import_module(f"{__name__}.flow")

    value: Any = getattr(flow, name)
    if name not in globals():
        globals()[name] = value
    if name not in FLOW_EXPORTS:
        FLOW_EXPORTS.append(name)
    return value


def __getattr__(name: str) -> Any:
    """Load attributes such as ``run_wizard`` from ``wizard.flow`` lazily."""

    if name.startswith("__"):
        raise AttributeError(name)
    try:
        return _load_flow_attribute(name)
    except AttributeError as exc:
        raise AttributeError(f"module {__name__} has no attribute {name}") from exc
