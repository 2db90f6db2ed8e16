"""Shared validation schema for supervisor applications.

The same ruleset gates each wizard step and the final submission. Every
failure is reported as a single Arabic message per field: the first rule that
fails for a field wins, while all fields are checked independently so callers
receive the complete error map in one pass.
"""

from __future__ import annotations

import re
from collections.abc import Collection, Mapping
from dataclasses import dataclass, field
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, ValidationError, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from constants import content

WHATSAPP_PATTERN: Final[re.Pattern[str]] = re.compile(r"\+?[0-9]{10,15}")
ASCII_DIGITS_PATTERN: Final[re.Pattern[str]] = re.compile(r"[0-9]+")
AGE_MIN: Final[int] = 16
AGE_MAX: Final[int] = 80

_ERROR_TYPE: Final[str] = "application_field"

FIELD_NAMES: Final[tuple[str, ...]] = (
    "agree_all_conditions",
    "salary_acceptance",
    "daily_work_no_weekly_off",
    "all_day_availability",
    "can_use_tools",
    "agree_no_stopping_policy",
    "full_name_3",
    "age",
    "marital_status",
    "whatsapp_number",
    "education",
    "finished_study",
    "supervision_experience_details",
    "current_job_and_hours",
    "previous_jobs",
    "agree_attend_trial_sessions",
    "internet_stability",
    "why_choose_you",
    "supervision_role_idea",
    "convince_parent_message",
)

# Fields that only accept one exact answer.
ACCEPTED_VALUES: Final[dict[str, str]] = {
    "agree_all_conditions": content.AGREE,
    "salary_acceptance": content.AGREE,
    "daily_work_no_weekly_off": content.AGREE,
    "all_day_availability": content.FULL_DAY_AVAILABLE,
    "can_use_tools": content.YES,
    "agree_no_stopping_policy": content.AGREE,
    "agree_attend_trial_sessions": content.AGREE,
}

_ACCEPTANCE_MESSAGES: Final[dict[str, str]] = {
    "agree_all_conditions": "لا يمكن إرسال الطلب دون الموافقة على الشروط المذكورة.",
    "salary_acceptance": "يلزم الموافقة على الراتب لاستكمال التقديم.",
    "daily_work_no_weekly_off": "يلزم الموافقة على نظام العمل اليومي (بدون إجازة أسبوعية).",
    "all_day_availability": "يشترط التواجد للرد على الرسائل ومتابعة دخول الحلقات على مدار اليوم.",
    "can_use_tools": "يشترط القدرة على التعامل مع ZOOM و Google Meet.",
    "agree_no_stopping_policy": "يلزم الموافقة على شرط عدم التوقف لاستكمال الإرسال.",
    "agree_attend_trial_sessions": "يلزم الموافقة على حضور الحصص التجريبية لتقييم الحلقات.",
}

# Closed option sets and the message shown for anything outside them.
CHOICE_OPTIONS: Final[dict[str, tuple[str, ...]]] = {
    "marital_status": content.MARITAL_STATUS_OPTIONS,
    "finished_study": content.YES_NO_OPTIONS,
    "internet_stability": content.INTERNET_OPTIONS,
}

_CHOICE_MESSAGES: Final[dict[str, str]] = {
    "marital_status": "من فضلك اختاري الحالة الاجتماعية من الخيارات المتاحة.",
    "finished_study": "من فضلك اختاري نعم أو لا.",
    "internet_stability": "من فضلك اختاري نوع الإنترنت من الخيارات.",
}

MIN_LENGTHS: Final[dict[str, int]] = {
    "full_name_3": 3,
    "education": 2,
    "supervision_experience_details": 10,
    "current_job_and_hours": 5,
    "previous_jobs": 5,
    "why_choose_you": 10,
    "supervision_role_idea": 10,
    "convince_parent_message": 20,
}

# Page-level warnings for eligibility answers that rule the applicant out.
_ELIGIBILITY_BLOCKS: Final[tuple[tuple[str, str], ...]] = (
    ("agree_all_conditions", "لا يمكن إكمال التقديم دون الموافقة على الشروط المذكورة."),
    ("salary_acceptance", "يلزم الموافقة على الراتب لاستكمال التقديم."),
    ("daily_work_no_weekly_off", "يلزم الموافقة على نظام العمل اليومي (بدون إجازة أسبوعية)."),
    ("all_day_availability", "يشترط التواجد طوال اليوم للرد على الرسائل ومتابعة دخول الحلقات."),
    ("can_use_tools", "يشترط القدرة على التعامل مع ZOOM و Google Meet."),
)

_AGE_LABEL: Final[str] = content.FIELD_LABELS["age"]
_AGE_REQUIRED_MESSAGE: Final[str] = f"من فضلك اكتب {_AGE_LABEL}."
_AGE_DIGITS_MESSAGE: Final[str] = f"من فضلك اكتب {_AGE_LABEL} بالأرقام الإنجليزية فقط."
_AGE_RANGE_MESSAGE: Final[str] = f"من فضلك اكتب {_AGE_LABEL} رقمًا بين {AGE_MIN} و {AGE_MAX}."
_WHATSAPP_REQUIRED_MESSAGE: Final[str] = "من فضلك اكتبِي رقم الواتساب."
_WHATSAPP_INVALID_MESSAGE: Final[str] = (
    "رقم واتساب غير صالح. اكتبيه بالأرقام الإنجليزية فقط (مثال: +201234567890)."
)


def _fail(message: str) -> PydanticCustomError:
    return PydanticCustomError(_ERROR_TYPE, message)


def _required_text(value: object, name: str, min_length: int) -> str:
    """Return the trimmed text or fail with the field's "write it correctly" message."""

    text = value.strip() if isinstance(value, str) else ""
    if len(text) < min_length:
        raise _fail(f"من فضلك اكتب {content.FIELD_LABELS[name]} بشكل صحيح.")
    return text


def _required_choice(value: object, name: str) -> str:
    """Return the raw answer, failing when nothing was chosen."""

    if not isinstance(value, str) or not value.strip():
        raise _fail(f'من فضلك اختر إجابة لـ "{content.FIELD_LABELS[name]}".')
    return value


def _age_as_text(value: object) -> str:
    if value is None:
        raise _fail(_AGE_REQUIRED_MESSAGE)
    if isinstance(value, bool):
        raise _fail(_AGE_DIGITS_MESSAGE)
    if isinstance(value, int):
        if value > AGE_MAX:
            raise _fail(_AGE_RANGE_MESSAGE)
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else str(value)
    if isinstance(value, str):
        return value
    raise _fail(_AGE_DIGITS_MESSAGE)


class ApplicationRecord(BaseModel):
    """A fully validated, normalized supervisor application."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    # Step 1: eligibility
    agree_all_conditions: str
    salary_acceptance: str
    daily_work_no_weekly_off: str
    all_day_availability: str
    can_use_tools: str
    agree_no_stopping_policy: str

    # Step 2: identity
    full_name_3: str
    age: int
    marital_status: str
    whatsapp_number: str
    education: str
    finished_study: str

    # Step 3: experience
    supervision_experience_details: str
    current_job_and_hours: str
    previous_jobs: str
    agree_attend_trial_sessions: str
    internet_stability: str

    # Step 4: open questions
    why_choose_you: str
    supervision_role_idea: str
    convince_parent_message: str

    @field_validator(*ACCEPTED_VALUES, mode="before")
    @classmethod
    def _check_accepted_value(cls, value: object, info: ValidationInfo) -> str:
        name = info.field_name
        answer = _required_choice(value, name)
        if answer != ACCEPTED_VALUES[name]:
            raise _fail(_ACCEPTANCE_MESSAGES[name])
        return answer

    @field_validator(*CHOICE_OPTIONS, mode="before")
    @classmethod
    def _check_choice(cls, value: object, info: ValidationInfo) -> str:
        name = info.field_name
        answer = _required_choice(value, name)
        if answer not in CHOICE_OPTIONS[name]:
            raise _fail(_CHOICE_MESSAGES[name])
        return answer

    @field_validator(*MIN_LENGTHS, mode="before")
    @classmethod
    def _check_text(cls, value: object, info: ValidationInfo) -> str:
        name = info.field_name
        return _required_text(value, name, MIN_LENGTHS[name])

    @field_validator("age", mode="before")
    @classmethod
    def _check_age(cls, value: object) -> int:
        text = _age_as_text(value).strip()
        if not text:
            raise _fail(_AGE_REQUIRED_MESSAGE)
        if not ASCII_DIGITS_PATTERN.fullmatch(text):
            raise _fail(_AGE_DIGITS_MESSAGE)
        # Anything longer than the largest allowed age is out of range.
        if len(text.lstrip("0")) > len(str(AGE_MAX)):
            raise _fail(_AGE_RANGE_MESSAGE)
        number = int(text)
        if not AGE_MIN <= number <= AGE_MAX:
            raise _fail(_AGE_RANGE_MESSAGE)
        return number

    @field_validator("whatsapp_number", mode="before")
    @classmethod
    def _check_whatsapp(cls, value: object) -> str:
        number = value.strip() if isinstance(value, str) else ""
        if not number:
            raise _fail(_WHATSAPP_REQUIRED_MESSAGE)
        if not WHATSAPP_PATTERN.fullmatch(number):
            raise _fail(_WHATSAPP_INVALID_MESSAGE)
        return number

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON body sent to the submission endpoint."""

        return self.model_dump(mode="json")


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of a validation pass over a candidate application."""

    ok: bool
    record: ApplicationRecord | None = None
    errors: dict[str, str] = field(default_factory=dict)


def empty_values() -> dict[str, str]:
    """Return a fresh candidate with every field blank."""

    return {name: "" for name in FIELD_NAMES}


def validate_application(
    values: Mapping[str, object],
    fields: Collection[str] | None = None,
) -> ValidationOutcome:
    """Validate ``values`` against the shared schema.

    Missing keys count as blank answers. When ``fields`` is given, only errors
    for those fields are reported and ``ok`` reflects that subset; ``record``
    is populated only when the whole application is valid.
    """

    candidate = {name: values.get(name, "") for name in FIELD_NAMES}
    try:
        record = ApplicationRecord.model_validate(candidate)
    except ValidationError as exc:
        errors: dict[str, str] = {}
        for error in exc.errors():
            loc = error.get("loc") or ()
            if not loc:
                continue
            errors.setdefault(str(loc[0]), error["msg"])
        if fields is not None:
            wanted = set(fields)
            errors = {name: message for name, message in errors.items() if name in wanted}
        return ValidationOutcome(ok=not errors, errors=errors)
    return ValidationOutcome(ok=True, record=record)


def eligibility_block_message(values: Mapping[str, object]) -> str | None:
    """Return the first warning for an eligibility answer that rules the applicant out."""

    for name, message in _ELIGIBILITY_BLOCKS:
        answer = values.get(name)
        if answer and answer != ACCEPTED_VALUES[name]:
            return message
    return None


__all__ = [
    "ACCEPTED_VALUES",
    "AGE_MAX",
    "AGE_MIN",
    "ApplicationRecord",
    "CHOICE_OPTIONS",
    "FIELD_NAMES",
    "MIN_LENGTHS",
    "ValidationOutcome",
    "WHATSAPP_PATTERN",
    "eligibility_block_message",
    "empty_values",
    "validate_application",
]
