from __future__ import annotations

from typing import Any, Mapping

import pytest
import streamlit as st

from constants.content import CONNECTION_ERROR_MESSAGE, SUBMIT_REJECTED_FALLBACK
from integrations.submission import SubmissionConnectionError, SubmissionResult
from wizard.controller import NoticeKind, SubmitOutcome, WizardController, WizardState
from wizard_pages import LAST_STEP_INDEX, step_fields


class FakeClient:
    """Records payloads and replays queued answers."""

    def __init__(self, *answers: SubmissionResult | Exception) -> None:
        self.answers = list(answers) or [SubmissionResult(ok=True, status_code=200)]
        self.payloads: list[dict[str, Any]] = []
        self.on_submit = None

    def submit(self, payload: Mapping[str, Any]) -> SubmissionResult:
        self.payloads.append(dict(payload))
        if self.on_submit is not None:
            self.on_submit()
        answer = self.answers.pop(0) if len(self.answers) > 1 else self.answers[0]
        if isinstance(answer, Exception):
            raise answer
        return answer


def _fill_step(controller: WizardController, index: int, values: Mapping[str, object]) -> None:
    for name in step_fields(index):
        controller.set_field(name, values[name])


def _walk_to_last_step(controller: WizardController, values: Mapping[str, object]) -> None:
    for index in range(LAST_STEP_INDEX):
        _fill_step(controller, index, values)
        assert controller.next_step()
    _fill_step(controller, LAST_STEP_INDEX, values)


def test_state_is_stored_in_streamlit_session_by_default() -> None:
    controller = WizardController(client=FakeClient())

    state = controller.state

    assert isinstance(state, WizardState)
    assert st.session_state["wiz:default:state"] is state
    assert state.step == 0
    assert controller.progress == 25


def test_fresh_form_shows_no_errors() -> None:
    controller = WizardController(client=FakeClient(), session_state={})

    assert controller.visible_errors() == {}
    assert controller.state.notice is None


def test_set_field_marks_touched_and_revalidates() -> None:
    controller = WizardController(client=FakeClient(), session_state={})

    controller.set_field("age", "15")
    assert controller.visible_errors() == {"age": "من فضلك اكتب السن رقمًا بين 16 و 80."}

    controller.set_field("age", "30")
    assert controller.visible_errors() == {}
    assert controller.value("age") == "30"


def test_set_field_rejects_unknown_names() -> None:
    controller = WizardController(client=FakeClient(), session_state={})

    with pytest.raises(KeyError):
        controller.set_field("favourite_colour", "blue")


def test_blocked_step_surfaces_errors_and_focus() -> None:
    controller = WizardController(client=FakeClient(), session_state={})

    assert controller.next_step() is False

    state = controller.state
    assert state.step == 0
    assert set(controller.visible_errors()) == set(step_fields(0))
    assert state.focus_field == "agree_all_conditions"


def test_refused_condition_blocks_advance(valid_values) -> None:
    controller = WizardController(client=FakeClient(), session_state={})
    _fill_step(controller, 0, valid_values)
    controller.set_field("salary_acceptance", "غير موافقة")

    assert controller.next_step() is False
    assert controller.state.focus_field == "salary_acceptance"
    assert controller.state.step == 0


def test_first_step_advances_with_later_steps_empty(valid_values) -> None:
    controller = WizardController(client=FakeClient(), session_state={})
    _fill_step(controller, 0, valid_values)

    assert controller.next_step() is True

    state = controller.state
    assert state.step == 1
    assert state.direction == 1
    assert controller.visible_errors() == {}
    assert controller.progress == 50


def test_previous_step_never_validates(valid_values) -> None:
    controller = WizardController(client=FakeClient(), session_state={})
    _fill_step(controller, 0, valid_values)
    controller.next_step()
    controller.set_field("age", "٢٥")

    assert controller.previous_step() is True

    state = controller.state
    assert state.step == 0
    assert state.direction == -1
    assert state.values["age"] == "٢٥"
    assert controller.previous_step() is False


def test_full_flow_posts_normalized_payload_once(valid_values) -> None:
    client = FakeClient()
    controller = WizardController(client=client, session_state={})
    valid_values["full_name_3"] = "  فاطمة أحمد علي "
    _walk_to_last_step(controller, valid_values)

    assert controller.is_last_step
    assert controller.progress == 100
    assert controller.next_step() is False

    assert controller.submit() is SubmitOutcome.SUCCEEDED

    assert len(client.payloads) == 1
    payload = client.payloads[0]
    assert payload["age"] == 25
    assert payload["full_name_3"] == "فاطمة أحمد علي"
    assert controller.state.succeeded
    assert controller.locked


def test_success_locks_the_form(valid_values) -> None:
    client = FakeClient()
    controller = WizardController(client=client, session_state={})
    _walk_to_last_step(controller, valid_values)
    controller.submit()

    controller.set_field("full_name_3", "اسم آخر مختلف")

    assert controller.value("full_name_3") == valid_values["full_name_3"]
    assert controller.submit() is SubmitOutcome.IGNORED
    assert controller.previous_step() is False
    assert len(client.payloads) == 1


def test_submit_is_ignored_before_last_step() -> None:
    client = FakeClient()
    controller = WizardController(client=client, session_state={})

    assert controller.submit() is SubmitOutcome.IGNORED
    assert client.payloads == []


def test_double_submit_while_in_flight_is_ignored(valid_values) -> None:
    client = FakeClient()
    controller = WizardController(client=client, session_state={})
    _walk_to_last_step(controller, valid_values)
    nested: list[SubmitOutcome] = []

    def _resubmit() -> None:
        assert controller.state.submitting
        nested.append(controller.submit())

    client.on_submit = _resubmit

    assert controller.submit() is SubmitOutcome.SUCCEEDED
    assert nested == [SubmitOutcome.IGNORED]
    assert len(client.payloads) == 1
    assert controller.state.submitting is False


def test_submit_safety_net_returns_to_failing_step(valid_values) -> None:
    client = FakeClient()
    controller = WizardController(client=client, session_state={})
    _walk_to_last_step(controller, valid_values)
    controller.set_field("age", "10")

    assert controller.submit() is SubmitOutcome.INVALID

    state = controller.state
    assert state.step == 1
    assert state.focus_field == "age"
    assert "age" in controller.visible_errors()
    assert client.payloads == []


def test_policy_cleared_on_last_step_keeps_applicant_there(valid_values) -> None:
    controller = WizardController(client=FakeClient(), session_state={})
    _walk_to_last_step(controller, valid_values)
    controller.set_field("agree_no_stopping_policy", "")

    assert controller.submit() is SubmitOutcome.INVALID
    assert controller.state.step == LAST_STEP_INDEX
    assert controller.state.focus_field == "agree_no_stopping_policy"


def test_rejection_merges_field_errors_and_sets_notice(valid_values) -> None:
    rejection = SubmissionResult(
        ok=False,
        status_code=422,
        field_errors={"whatsapp_number": "هذا الرقم مسجل بالفعل.", "unknown_field": "x"},
    )
    controller = WizardController(client=FakeClient(rejection), session_state={})
    _walk_to_last_step(controller, valid_values)

    assert controller.submit() is SubmitOutcome.REJECTED

    state = controller.state
    assert state.errors == {"whatsapp_number": "هذا الرقم مسجل بالفعل."}
    assert controller.visible_errors() == state.errors
    assert state.focus_field == "whatsapp_number"
    assert state.notice is not None
    assert state.notice.kind is NoticeKind.SERVER
    assert state.notice.message == SUBMIT_REJECTED_FALLBACK
    assert not controller.locked


def test_rejection_message_is_shown_and_editing_clears_server_error(valid_values) -> None:
    rejection = SubmissionResult(
        ok=False,
        status_code=400,
        message="البيانات غير مكتملة",
        field_errors={"whatsapp_number": "هذا الرقم مسجل بالفعل."},
    )
    client = FakeClient(rejection, SubmissionResult(ok=True, status_code=201))
    controller = WizardController(client=client, session_state={})
    _walk_to_last_step(controller, valid_values)

    controller.submit()
    assert controller.state.notice.message == "البيانات غير مكتملة"

    controller.set_field("whatsapp_number", "+201098765432")
    assert "whatsapp_number" not in controller.state.errors

    assert controller.submit() is SubmitOutcome.SUCCEEDED
    assert client.payloads[-1]["whatsapp_number"] == "+201098765432"


def test_connection_failure_keeps_answers_for_retry(valid_values) -> None:
    client = FakeClient(SubmissionConnectionError("timed out"), SubmissionResult(ok=True, status_code=200))
    controller = WizardController(client=client, session_state={})
    _walk_to_last_step(controller, valid_values)

    assert controller.submit() is SubmitOutcome.CONNECTION_FAILED

    state = controller.state
    assert state.notice is not None
    assert state.notice.kind is NoticeKind.CONNECTION
    assert state.notice.message == CONNECTION_ERROR_MESSAGE
    assert state.submitting is False
    assert state.values["full_name_3"] == valid_values["full_name_3"]

    assert controller.submit() is SubmitOutcome.SUCCEEDED
    assert len(client.payloads) == 2


def test_dismiss_and_navigation_clear_notice(valid_values) -> None:
    client = FakeClient(SubmissionConnectionError("down"))
    controller = WizardController(client=client, session_state={})
    _walk_to_last_step(controller, valid_values)

    controller.submit()
    controller.dismiss_notice()
    assert controller.state.notice is None

    controller.submit()
    controller.previous_step()
    assert controller.state.notice is None


def test_start_new_application_resets_everything(valid_values) -> None:
    session: dict[str, object] = {}
    controller = WizardController(client=FakeClient(), session_state=session)
    _walk_to_last_step(controller, valid_values)
    controller.submit()

    controller.start_new_application()

    state = controller.state
    assert state.step == 0
    assert not state.succeeded
    assert state.values["full_name_3"] == ""
    assert state.touched == set()


def test_controllers_share_state_by_wizard_id() -> None:
    session: dict[str, object] = {}
    first = WizardController(client=FakeClient(), session_state=session)
    first.set_field("education", "بكالوريوس")

    second = WizardController(client=FakeClient(), session_state=session)
    other = WizardController(client=FakeClient(), session_state=session, wizard_id="other")

    assert second.value("education") == "بكالوريوس"
    assert other.value("education") == ""
