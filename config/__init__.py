"""Central configuration for the supervisor application form.

Settings are resolved from Streamlit secrets first, then from environment
variables (``.env`` files are loaded through ``python-dotenv`` when it is
installed) and finally from built-in defaults.

``SUBMIT_URL`` points at the endpoint that receives finished applications,
``SUBMIT_TIMEOUT`` optionally bounds the request in seconds (unset keeps the
transport default), ``SUBMIT_API_TOKEN`` adds a bearer token and
``LOG_LEVEL`` controls the root logger.
"""

import logging
import os
from collections.abc import Mapping

import streamlit as st

from constants.content import DEFAULT_ACADEMY_NAME

try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass


logger = logging.getLogger(__name__)


DEFAULT_SUBMIT_URL = "http://localhost:3000/api/submit"
DEFAULT_LOG_LEVEL = "INFO"
_SECRETS_SECTION = "submission"


def _coerce_secret_value(value: object) -> str:
    """Return ``value`` as a trimmed string without raising on unexpected types."""

    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (bytes, bytearray)):
        try:
            return value.decode("utf-8").strip()
        except UnicodeDecodeError:
            return ""
    return str(value).strip()


def _resolve_setting(name: str, default: str = "") -> str:
    """Return ``name`` from secrets, the ``[submission]`` section or the environment."""

    # 1. Streamlit secrets (top-level key)
    try:
        direct_secret = st.secrets[name]
    except Exception:
        direct_secret = None
    value = _coerce_secret_value(direct_secret)
    if value:
        return value

    # 2. Streamlit secrets (``submission`` section)
    try:
        section = st.secrets[_SECRETS_SECTION]
    except Exception:
        section = None
    if isinstance(section, Mapping):
        section_value = _coerce_secret_value(section.get(name))
        if section_value:
            return section_value

    # 3. Environment variable fallback
    env_value = _coerce_secret_value(os.getenv(name))
    if env_value:
        return env_value
    return default


def _parse_positive_float(value: str, *, env_var: str) -> float | None:
    """Return a positive float parsed from ``value`` or ``None``."""

    if not value:
        return None
    try:
        parsed = float(value)
    except ValueError:
        logger.warning("Ignoring %s=%r; expected a number of seconds.", env_var, value)
        return None
    if parsed <= 0:
        logger.warning("Ignoring %s=%r; the timeout must be positive.", env_var, value)
        return None
    return parsed


def get_submit_url() -> str:
    """Return the endpoint that receives finished applications."""

    return _resolve_setting("SUBMIT_URL", DEFAULT_SUBMIT_URL)


def get_submit_timeout() -> float | None:
    """Return the request timeout in seconds, or ``None`` for the transport default."""

    return _parse_positive_float(_resolve_setting("SUBMIT_TIMEOUT"), env_var="SUBMIT_TIMEOUT")


def get_submit_api_token() -> str:
    """Return the optional bearer token for the submission endpoint."""

    return _resolve_setting("SUBMIT_API_TOKEN")


def get_log_level() -> int:
    """Return the configured log level, falling back to ``INFO``."""

    raw = _resolve_setting("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(raw)
    if isinstance(level, int):
        return level
    logger.warning("Unknown LOG_LEVEL %r; using %s.", raw, DEFAULT_LOG_LEVEL)
    return logging.INFO


def get_academy_name() -> str:
    """Return the academy name shown in the page header."""

    return _resolve_setting("ACADEMY_NAME", DEFAULT_ACADEMY_NAME)
