"""Form field helpers that bind Streamlit widgets to the wizard controller.

Widgets never own state: every run primes the widget key from the
controller's record, and ``on_change`` callbacks write the new answer back
through :meth:`WizardController.set_field` so validation runs once per edit.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

import streamlit as st

from constants.keys import UIKeys
from wizard.controller import WizardController

__all__ = ["agreement_checkbox", "radio_field", "render_field_error", "text_field"]


def _build_on_change(
    controller: WizardController,
    name: str,
    key: str,
    convert: Callable[[Any], object] | None = None,
) -> Callable[[], None]:
    """Return a callback that syncs the widget value back to the controller."""

    def _callback() -> None:
        raw = st.session_state.get(key)
        controller.set_field(name, convert(raw) if convert is not None else raw)

    return _callback


def render_field_error(controller: WizardController, name: str) -> None:
    """Show the inline error for ``name`` once the field has been touched."""

    message = controller.visible_errors().get(name)
    if not message:
        return
    if controller.state.focus_field == name:
        st.error(message)
    else:
        st.caption(f":red[{message}]")


def _as_text(value: object) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def text_field(
    controller: WizardController,
    name: str,
    label: str,
    *,
    multiline: bool = False,
    help: str | None = None,
    placeholder: str | None = None,
    height: int | None = None,
) -> str:
    """Render a text input (or text area) bound to ``name``."""

    key = UIKeys.field(name)
    st.session_state[key] = _as_text(controller.value(name))
    widget_kwargs: dict[str, Any] = {
        "key": key,
        "on_change": _build_on_change(controller, name, key, _as_text),
        "disabled": controller.locked,
        "placeholder": placeholder,
        "help": help,
    }
    if multiline:
        if height is not None:
            widget_kwargs["height"] = height
        value = st.text_area(label, **widget_kwargs)
    else:
        value = st.text_input(label, **widget_kwargs)
    render_field_error(controller, name)
    return value


def radio_field(
    controller: WizardController,
    name: str,
    label: str,
    options: Sequence[str],
    *,
    help: str | None = None,
) -> str | None:
    """Render a radio group bound to ``name``; nothing is preselected."""

    key = UIKeys.field(name)
    current = controller.value(name)
    st.session_state[key] = current if current in options else None
    choice = st.radio(
        label,
        list(options),
        index=None,
        key=key,
        on_change=_build_on_change(controller, name, key, lambda raw: raw or ""),
        disabled=controller.locked,
        help=help,
    )
    render_field_error(controller, name)
    return choice


def agreement_checkbox(
    controller: WizardController,
    name: str,
    label: str,
    *,
    accepted_value: str,
    variant: str | None = None,
) -> bool:
    """Render a checkbox that stores ``accepted_value`` when ticked and ``""`` otherwise.

    ``variant`` keeps widget keys apart when the same field is shown on more
    than one step; both renders write to the one underlying field.
    """

    key = UIKeys.field(name, variant=variant)
    st.session_state[key] = controller.value(name) == accepted_value
    checked = st.checkbox(
        f"{label} **{accepted_value}**",
        key=key,
        on_change=_build_on_change(
            controller,
            name,
            key,
            lambda raw: accepted_value if raw else "",
        ),
        disabled=controller.locked,
    )
    render_field_error(controller, name)
    return checked
