"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules: ``core`` (settings, logging, exception handlers),
``schemas`` (pydantic models), ``services`` (the in-memory store) and
``api`` (routers and endpoints).
"""

from .main import app  # noqa: F401
