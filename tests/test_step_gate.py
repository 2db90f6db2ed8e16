from __future__ import annotations

import pytest

from models.application import FIELD_NAMES, empty_values
from wizard.step_gate import check_step, first_step_with_errors
from wizard_pages import LAST_STEP_INDEX, STEPS, step_fields


def test_every_field_belongs_to_a_step() -> None:
    owned = {name for page in STEPS for name in page.fields}

    assert owned == set(FIELD_NAMES)
    assert LAST_STEP_INDEX == 3


def test_policy_field_is_gated_on_first_and_last_step() -> None:
    assert "agree_no_stopping_policy" in step_fields(0)
    assert "agree_no_stopping_policy" in step_fields(LAST_STEP_INDEX)


def test_first_step_passes_while_later_steps_are_empty(valid_values) -> None:
    values = empty_values()
    for name in step_fields(0):
        values[name] = valid_values[name]

    result = check_step(0, values)

    assert result.ok
    assert result.errors == {}
    assert result.first_invalid is None


def test_errors_are_limited_to_the_step_fields() -> None:
    result = check_step(1, empty_values())

    assert not result.ok
    assert set(result.errors) == set(step_fields(1))
    assert result.first_invalid == "full_name_3"


def test_first_invalid_follows_widget_order(valid_values) -> None:
    valid_values["whatsapp_number"] = "12"
    valid_values["age"] = "٣٠"

    result = check_step(1, valid_values)

    assert set(result.errors) == {"age", "whatsapp_number"}
    assert result.first_invalid == "age"


def test_refused_eligibility_answer_blocks_first_step(valid_values) -> None:
    valid_values["can_use_tools"] = "لا"

    result = check_step(0, valid_values)

    assert result.errors == {"can_use_tools": "يشترط القدرة على التعامل مع ZOOM و Google Meet."}


def test_last_step_rechecks_policy_agreement(valid_values) -> None:
    valid_values["agree_no_stopping_policy"] = ""

    result = check_step(LAST_STEP_INDEX, valid_values)

    assert result.first_invalid == "agree_no_stopping_policy"


@pytest.mark.parametrize("index", [-1, 4, 10])
def test_unknown_step_index_raises(index: int) -> None:
    with pytest.raises(IndexError):
        check_step(index, empty_values())


def test_first_step_with_errors_returns_earliest_owner() -> None:
    assert first_step_with_errors({}) is None
    assert first_step_with_errors({"why_choose_you": "x", "previous_jobs": "y"}) == 2
    assert first_step_with_errors({"agree_no_stopping_policy": "x"}) == 0
    assert first_step_with_errors({"unknown": "x"}) is None
