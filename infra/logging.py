"""Structured event logging for the application form."""

from __future__ import annotations

import json
import logging
from typing import Any

import config

LOGGER = logging.getLogger("academy_intake")

# Applicant data that must never be written to the log.
_PERSONAL_FIELDS: frozenset[str] = frozenset({"full_name_3", "whatsapp_number"})


def _redact(value: str) -> str:
    """Redact known secrets from a string."""

    secrets = [config.get_submit_api_token()]
    for secret in secrets:
        if secret:
            value = value.replace(secret, "[redacted]")
    return value


def _scrub(name: str, value: Any) -> Any:
    if name in _PERSONAL_FIELDS:
        return "[redacted]"
    if isinstance(value, (list, tuple, set, frozenset)):
        return sorted(str(item) for item in value)
    if isinstance(value, (int, float, bool)):
        return value
    return _redact(str(value))


def log_event(level: str, event: str, **fields: Any) -> str:
    """Emit a structured log line for ``event`` and return it.

    Args:
        level: Logging level name (e.g., ``"info"``).
        event: Short machine-readable event name such as ``"step_blocked"``.
        fields: Extra context. ``None`` values are dropped and applicant
            personal data is replaced by ``[redacted]``.
    """

    record: dict[str, Any] = {"level": level.lower(), "event": event}
    for name, value in fields.items():
        if value is None:
            continue
        record[name] = _scrub(name, value)
    line = json.dumps(record, ensure_ascii=False, sort_keys=True)
    LOGGER.log(getattr(logging, level.upper(), logging.INFO), line)
    return line
