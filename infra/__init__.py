"""Infrastructure helpers for the application form."""
