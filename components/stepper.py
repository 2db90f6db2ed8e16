"""Simple progress stepper for wizard navigation."""

from __future__ import annotations

import html
from typing import Sequence

import streamlit as st


def build_summary_segments(current: int, labels: Sequence[str]) -> list[str]:
    """Return HTML segments representing the wizard step summary."""

    status_icons = {
        "done": "✔︎",
        "current": "➤",
        "upcoming": "•",
    }
    segments: list[str] = []
    for idx, label in enumerate(labels):
        step_label = f"{idx + 1}. {label}"
        if idx < current:
            status = "done"
        elif idx == current:
            status = "current"
        else:
            status = "upcoming"
        icon = status_icons[status]
        segments.append(f"<span data-state='{status}'>{html.escape(f'{icon} {step_label}')}</span>")
    return segments


def render_stepper(current: int, labels: Sequence[str], *, progress: int) -> None:
    """Render the condensed step summary and the completion bar."""

    if not labels:
        return
    arrow = "<span aria-hidden='true'>←</span>"
    st.markdown(
        "<div class='workflow-stepper__summary' dir='rtl'>"
        + arrow.join(build_summary_segments(current, labels))
        + "</div>",
        unsafe_allow_html=True,
    )
    st.progress(progress, text=f"{progress}%")
