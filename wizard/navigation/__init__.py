"""Navigation helpers for the Streamlit wizard.

``wizard.navigation.ui`` renders the controls and is imported explicitly by
the flow, since it depends on the controller which itself needs the keys.
"""

from __future__ import annotations

from wizard.navigation.keys import WizardSessionKeys

__all__ = ["WizardSessionKeys"]
