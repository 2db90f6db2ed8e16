"""HTTP client for the endpoint that receives finished applications.

The endpoint is an external collaborator: it either accepts the JSON body
with a success status or answers with a non-success status and an optional
``{"message": str, "errors": {field: [str, ...]}}`` body. Only transport
failures raise; every HTTP answer is returned as a :class:`SubmissionResult`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

import requests
from requests import Response

import config

logger = logging.getLogger(__name__)


class SubmissionError(Exception):
    """Base exception for submission problems."""


class SubmissionConnectionError(SubmissionError):
    """Raised when the endpoint could not be reached or the transfer broke off."""


@dataclass(frozen=True)
class SubmissionResult:
    """Structured answer from the submission endpoint."""

    ok: bool
    status_code: int
    message: str | None = None
    field_errors: dict[str, str] = field(default_factory=dict)


def _first_messages(raw_errors: object) -> dict[str, str]:
    """Return the first non-empty message for every field in ``raw_errors``."""

    if not isinstance(raw_errors, Mapping):
        return {}
    first: dict[str, str] = {}
    for name, messages in raw_errors.items():
        if isinstance(messages, str):
            candidates: list[object] = [messages]
        elif isinstance(messages, (list, tuple)):
            candidates = list(messages)
        else:
            continue
        message = candidates[0] if candidates else None
        if isinstance(message, str) and message:
            first[str(name)] = message
    return first


def parse_response(response: Response) -> SubmissionResult:
    """Convert an HTTP response into a :class:`SubmissionResult`."""

    if response.ok:
        return SubmissionResult(ok=True, status_code=response.status_code)
    try:
        body: Any = response.json()
    except ValueError:
        body = None
    if not isinstance(body, Mapping):
        body = {}
    message = body.get("message")
    return SubmissionResult(
        ok=False,
        status_code=response.status_code,
        message=message if isinstance(message, str) and message else None,
        field_errors=_first_messages(body.get("errors")),
    )


class SubmissionClient:
    """Post validated applications to the configured endpoint.

    ``request_func`` allows dependency injection for unit tests and defaults
    to :func:`requests.post`. A ``timeout`` of ``None`` leaves the bound to the
    transport. No retries are attempted; the applicant resubmits manually.
    """

    def __init__(
        self,
        url: str,
        *,
        timeout: float | None = None,
        api_token: str | None = None,
        request_func: Callable[..., Response] | None = None,
    ) -> None:
        if not url.strip():
            raise ValueError("url is required for the submission client.")
        self.url = url
        self.timeout = timeout
        self._api_token = api_token or None
        self._request = request_func or requests.post

    @classmethod
    def from_config(cls, *, request_func: Callable[..., Response] | None = None) -> "SubmissionClient":
        """Build a client from :mod:`config` settings."""

        return cls(
            config.get_submit_url(),
            timeout=config.get_submit_timeout(),
            api_token=config.get_submit_api_token(),
            request_func=request_func,
        )

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        if self._api_token:
            headers["Authorization"] = f"Bearer {self._api_token}"
        return headers

    def submit(self, payload: Mapping[str, Any]) -> SubmissionResult:
        """Send ``payload`` once and return the endpoint's answer."""

        try:
            response = self._request(
                self.url,
                json=dict(payload),
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.warning("Submission request to %s failed: %s", self.url, exc.__class__.__name__)
            raise SubmissionConnectionError(str(exc)) from exc
        result = parse_response(response)
        logger.debug("Submission endpoint answered with status %s", result.status_code)
        return result


__all__ = [
    "SubmissionClient",
    "SubmissionConnectionError",
    "SubmissionError",
    "SubmissionResult",
    "parse_response",
]
