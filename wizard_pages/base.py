from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class WizardPage:
    """Static metadata describing an individual wizard step.

    The controller keeps this metadata separate from the rendering logic so
    that step gating and the stepper summary read the same field grouping.
    ``fields`` lists the application fields validated before leaving the step,
    in the order their widgets appear.
    """

    key: str
    title: str
    description: str
    fields: Tuple[str, ...] = ()

    def owns(self, field: str) -> bool:
        """Return ``True`` when ``field`` is validated on this step."""

        return field in self.fields
