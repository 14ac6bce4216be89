"""
Pydantic schema definitions for API payloads and responses.
"""
