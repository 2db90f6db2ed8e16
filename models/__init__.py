"""Pydantic models for supervisor applications."""

from .application import ApplicationRecord, ValidationOutcome, validate_application

__all__ = [
    "ApplicationRecord",
    "ValidationOutcome",
    "validate_application",
]
