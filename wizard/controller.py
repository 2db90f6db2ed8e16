from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import MutableMapping, cast

import streamlit as st

from constants.content import CONNECTION_ERROR_MESSAGE, SUBMIT_REJECTED_FALLBACK
from infra.logging import log_event
from integrations.submission import SubmissionClient, SubmissionConnectionError
from models.application import FIELD_NAMES, empty_values, validate_application
from utils.logging_context import log_context
from wizard.navigation.keys import WizardSessionKeys
from wizard.step_gate import check_step, first_step_with_errors
from wizard_pages import LAST_STEP_INDEX, STEPS, WizardPage, step_fields

logger = logging.getLogger(__name__)


class NoticeKind(str, Enum):
    """Origin of a page-level notice."""

    SERVER = "server"
    CONNECTION = "connection"


@dataclass(frozen=True)
class Notice:
    """Dismissible page-level message shown above the form."""

    kind: NoticeKind
    message: str


class SubmitOutcome(str, Enum):
    """Result of a submit attempt."""

    SUCCEEDED = "succeeded"
    INVALID = "invalid"
    REJECTED = "rejected"
    CONNECTION_FAILED = "connection_failed"
    IGNORED = "ignored"


@dataclass
class WizardState:
    """Everything the form knows about the application in progress.

    ``touched`` holds the fields whose errors may be shown: a field becomes
    touched on its first edit or when the applicant tries to leave its step.
    """

    step: int = 0
    direction: int = 1
    values: dict[str, object] = field(default_factory=empty_values)
    errors: dict[str, str] = field(default_factory=dict)
    touched: set[str] = field(default_factory=set)
    submitting: bool = False
    succeeded: bool = False
    notice: Notice | None = None
    focus_field: str | None = None


class WizardController:
    """Drive step transitions, validation and the final submission.

    State lives in ``session_state`` (Streamlit's by default) under a
    namespaced key so a rerun of the script picks up where the applicant
    left off.
    """

    def __init__(
        self,
        *,
        client: SubmissionClient | None = None,
        wizard_id: str = "default",
        session_state: MutableMapping[str, object] | None = None,
    ) -> None:
        self._client = client
        self._session_state = cast(
            MutableMapping[str, object],
            session_state if session_state is not None else st.session_state,
        )
        self._session_keys = WizardSessionKeys(wizard_id=wizard_id)

    @property
    def state(self) -> WizardState:
        raw_state = self._session_state.get(self._session_keys.state)
        if isinstance(raw_state, WizardState):
            return raw_state
        state = WizardState()
        self._session_state[self._session_keys.state] = state
        return state

    @property
    def current_page(self) -> WizardPage:
        return STEPS[self.state.step]

    @property
    def is_first_step(self) -> bool:
        return self.state.step == 0

    @property
    def is_last_step(self) -> bool:
        return self.state.step == LAST_STEP_INDEX

    @property
    def progress(self) -> int:
        """Completion percentage shown next to the form title."""

        return round((self.state.step + 1) / len(STEPS) * 100)

    @property
    def locked(self) -> bool:
        """``True`` while a submission is running or after it succeeded."""

        state = self.state
        return state.submitting or state.succeeded

    def value(self, name: str) -> object:
        return self.state.values.get(name, "")

    def visible_errors(self) -> dict[str, str]:
        """Return errors for touched fields only."""

        state = self.state
        return {name: message for name, message in state.errors.items() if name in state.touched}

    def set_field(self, name: str, value: object) -> None:
        """Store a new answer for ``name`` and re-validate that field."""

        if name not in FIELD_NAMES:
            raise KeyError(name)
        state = self.state
        if self.locked:
            logger.debug("Ignoring edit of %s while the form is locked", name)
            return
        state.values[name] = value
        state.touched.add(name)
        self._revalidate((name,))

    def _revalidate(self, fields: tuple[str, ...]) -> dict[str, str]:
        state = self.state
        outcome = validate_application(state.values, fields=fields)
        for name in fields:
            state.errors.pop(name, None)
        state.errors.update(outcome.errors)
        return outcome.errors

    def next_step(self) -> bool:
        """Advance when the current step validates; otherwise surface its errors."""

        state = self.state
        state.notice = None
        if self.locked or self.is_last_step:
            return False
        page = self.current_page
        fields = step_fields(state.step)
        result = check_step(state.step, state.values)
        state.touched.update(fields)
        for name in fields:
            state.errors.pop(name, None)
        state.errors.update(result.errors)
        with log_context(wizard_step=page.key):
            if not result.ok:
                state.focus_field = result.first_invalid
                log_event("info", "step_blocked", step=page.key, fields=list(result.errors))
                return False
            state.direction = 1
            state.step += 1
            state.focus_field = None
            log_event("info", "step_advanced", step=page.key, target=self.current_page.key)
        return True

    def previous_step(self) -> bool:
        """Go back one step without validating or discarding answers."""

        state = self.state
        state.notice = None
        if self.locked or self.is_first_step:
            return False
        state.direction = -1
        state.step -= 1
        state.focus_field = None
        return True

    def _get_client(self) -> SubmissionClient:
        if self._client is None:
            self._client = SubmissionClient.from_config()
        return self._client

    def submit(self) -> SubmitOutcome:
        """Validate the whole application and send it once."""

        state = self.state
        if self.locked or not self.is_last_step:
            logger.debug("Submit ignored (step=%s, locked=%s)", state.step, self.locked)
            return SubmitOutcome.IGNORED
        state.notice = None

        outcome = validate_application(state.values)
        if outcome.record is None:
            state.errors = dict(outcome.errors)
            state.touched.update(outcome.errors)
            # Stay put when the visible step can fix the problem.
            if any(self.current_page.owns(name) for name in outcome.errors):
                target: int | None = state.step
            else:
                target = first_step_with_errors(outcome.errors)
            if target is not None and target != state.step:
                state.direction = -1
                state.step = target
            page_fields = step_fields(state.step)
            state.focus_field = next((name for name in page_fields if name in outcome.errors), None)
            log_event("warning", "submit_invalid", fields=list(outcome.errors))
            return SubmitOutcome.INVALID

        state.submitting = True
        log_event("info", "submit_started")
        try:
            result = self._get_client().submit(outcome.record.to_payload())
        except SubmissionConnectionError:
            state.notice = Notice(NoticeKind.CONNECTION, CONNECTION_ERROR_MESSAGE)
            log_event("warning", "submit_connection_failed")
            return SubmitOutcome.CONNECTION_FAILED
        finally:
            state.submitting = False

        if result.ok:
            state.succeeded = True
            state.errors.clear()
            state.focus_field = None
            log_event("info", "submit_succeeded", status=result.status_code)
            return SubmitOutcome.SUCCEEDED

        for name, message in result.field_errors.items():
            if name not in FIELD_NAMES:
                logger.warning("Submission endpoint reported an error for unknown field %r", name)
                continue
            state.errors[name] = message
            state.touched.add(name)
        state.focus_field = next((name for name in FIELD_NAMES if name in result.field_errors), None)
        state.notice = Notice(NoticeKind.SERVER, result.message or SUBMIT_REJECTED_FALLBACK)
        log_event(
            "warning",
            "submit_rejected",
            status=result.status_code,
            fields=list(result.field_errors),
        )
        return SubmitOutcome.REJECTED

    def dismiss_notice(self) -> None:
        self.state.notice = None

    def start_new_application(self) -> None:
        """Discard every answer and return to the first step."""

        self._session_state[self._session_keys.state] = WizardState()
        log_event("info", "application_reset")


__all__ = [
    "Notice",
    "NoticeKind",
    "SubmitOutcome",
    "WizardController",
    "WizardState",
]
