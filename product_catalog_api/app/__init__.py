"""
Application package initializer.

The service is organised into small layers: ``core`` holds settings,
logging, security and the middleware chain, ``schemas`` the pydantic
payload models, ``services`` the in‑memory product store and ``api``
the routers that translate HTTP requests into store operations.
"""

from .main import app  # noqa: F401
