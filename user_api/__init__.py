"""
Top-level package for the User REST API.

This file makes ``user_api`` a Python package so that modules within
``app`` can be imported using fully qualified names like
``user_api.app.main``.  The Python client for the API lives in
``user_api.client``.
"""

__all__ = []
