from pathlib import Path
import sys

import streamlit as st

import pytest


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class _SessionDict(dict[str, object]):
    """Lightweight replacement for ``st.session_state`` during tests."""

    def clear(self) -> None:  # type: ignore[override]
        super().clear()


@pytest.fixture(autouse=True)
def _stub_streamlit_session_state(monkeypatch: pytest.MonkeyPatch) -> None:
    """Replace Streamlit's runtime-bound session state with a plain dictionary."""

    session_state = _SessionDict()
    monkeypatch.setattr(st, "session_state", session_state, raising=False)
    yield


@pytest.fixture
def valid_values() -> dict[str, object]:
    """A complete application that satisfies every rule."""

    return {
        "agree_all_conditions": "موافقة",
        "salary_acceptance": "موافقة",
        "daily_work_no_weekly_off": "موافقة",
        "all_day_availability": "متفرغة وأستطيع التواجد والعمل على مدار اليوم",
        "can_use_tools": "نعم",
        "agree_no_stopping_policy": "موافقة",
        "full_name_3": "فاطمة أحمد علي",
        "age": "25",
        "marital_status": "عزباء",
        "whatsapp_number": "+201234567890",
        "education": "بكالوريوس",
        "finished_study": "نعم",
        "supervision_experience_details": "عملت مشرفة حلقات لمدة عام ومتابعة الحضور",
        "current_job_and_hours": "لا أعمل حاليًا",
        "previous_jobs": "معلمة قرآن أونلاين",
        "agree_attend_trial_sessions": "موافقة",
        "internet_stability": "كلاهما",
        "why_choose_you": "الالتزام وسرعة الرد والتنظيم",
        "supervision_role_idea": "متابعة المعلمات والطلاب وضمان جودة الحلقات",
        "convince_parent_message": "السلام عليكم، الحلقات الأونلاين تتيح متابعة فردية لطفلك من بيته بأمان.",
    }
