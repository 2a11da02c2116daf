"""
Application package initializer.

The API is split into a small number of layers: ``core`` holds
configuration, logging and shared errors, ``schemas`` the Pydantic
payload models, ``services`` the in‑memory student store and ``api``
the versioned HTTP routers that translate requests into store calls.
"""

from .main import app  # noqa: F401
