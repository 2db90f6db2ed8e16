class StateKeys:
    """Keys for data stored in ``st.session_state`` outside the wizard namespace."""

    SESSION_ID = "session_id"
    STATE_READY = "state_ready"


class UIKeys:
    """Keys for UI widgets in ``st.session_state``."""

    PREVIOUS = "ui.nav.previous"
    NEXT = "ui.nav.next"
    SUBMIT = "ui.nav.submit"
    DISMISS_NOTICE = "ui.notice.dismiss"
    NEW_APPLICATION = "ui.success.new_application"

    @staticmethod
    def field(name: str, *, variant: str | None = None) -> str:
        """Return the widget key for ``name``; ``variant`` separates duplicate renders."""

        if variant:
            return f"ui.field.{name}.{variant}"
        return f"ui.field.{name}"
