"""Utility helpers for the application form."""
