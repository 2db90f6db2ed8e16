"""Per-step validation that decides whether the wizard may move forward."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from models.application import validate_application
from wizard_pages import STEPS, step_fields


@dataclass(frozen=True)
class StepGateResult:
    """Outcome of validating one wizard step."""

    ok: bool
    errors: dict[str, str] = field(default_factory=dict)
    first_invalid: str | None = None


def check_step(index: int, values: Mapping[str, object]) -> StepGateResult:
    """Validate only the fields owned by step ``index``.

    Fields of other steps are ignored, so an untouched later step never blocks
    the current one. ``first_invalid`` follows the step's widget order.
    """

    fields = step_fields(index)
    outcome = validate_application(values, fields=fields)
    if outcome.ok:
        return StepGateResult(ok=True)
    first_invalid = next((name for name in fields if name in outcome.errors), None)
    return StepGateResult(ok=False, errors=dict(outcome.errors), first_invalid=first_invalid)


def first_step_with_errors(errors: Mapping[str, object]) -> int | None:
    """Return the earliest step index owning a field in ``errors``."""

    for index, page in enumerate(STEPS):
        if any(page.owns(name) for name in errors):
            return index
    return None


__all__ = ["StepGateResult", "check_step", "first_step_with_errors"]
