"""
Application package initializer.

The application is split by concern: ``core`` (settings, logging,
storage, access guards), ``schemas`` (request and response models),
``services`` (configuration, ledger, admission, notifications,
reports) and ``api`` (versioned HTTP routes).
"""

from .main import app  # noqa: F401
