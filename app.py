# app.py: supervisor application form (Streamlit entrypoint)
from __future__ import annotations

from pathlib import Path
import sys

import streamlit as st

APP_ROOT = Path(__file__).resolve().parent
if str(APP_ROOT) not in sys.path:
    sys.path.insert(0, str(APP_ROOT))

from config import get_academy_name, get_log_level  # noqa: E402
from constants import content  # noqa: E402
from state import ensure_state  # noqa: E402
from utils.logging_context import configure_logging  # noqa: E402
from wizard import run_wizard  # noqa: E402

APP_VERSION = "1.0.0"

configure_logging(level=get_log_level())

# --- Page config early ---
st.set_page_config(
    page_title=content.ROLE_TITLE,
    page_icon="📝",
    layout="centered",
)

ensure_state()
st.session_state.setdefault("app_version", APP_VERSION)

# Right-to-left text for the Arabic form.
st.markdown(
    """
    <style>
    section.main div.block-container { direction: rtl; text-align: right; }
    section.main div[data-testid="stRadio"] label { direction: rtl; }
    </style>
    """,
    unsafe_allow_html=True,
)

st.caption(content.WELCOME_TAGLINE)
st.title(get_academy_name())
st.markdown(f"#### {content.ROLE_TITLE}")
st.write(
    "يسعدنا استقبال طلبات التقديم لوظيفة **مشرفة خدمة عملاء** بالأكاديمية. "
    "النموذج التالي عبارة عن خطوات قصيرة وواضحة، ويستغرق عادةً دقائق قليلة لإتمامه."
)

run_wizard()
