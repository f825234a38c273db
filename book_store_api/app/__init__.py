"""
Application package initializer.

The project is organised into ``core`` (configuration, logging,
errors), ``schemas`` (Pydantic models), ``services`` (the in-memory
book store) and ``api`` (versioned routers).
"""

from .main import app  # noqa: F401
