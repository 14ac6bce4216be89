"""
Pydantic models for user data.

``User`` is both the stored record and its API representation; the
creation timestamp is exposed to clients under the camel-case key
``createdAt``.  ``UserPayload`` is the body accepted by the create
and update endpoints.  Its fields are optional on purpose: presence is
checked by the endpoints so that a missing field yields a 400 envelope
rather than a schema validation error.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from ..core.timestamps import isoformat_utc


class User(BaseModel):
    """A single user record."""

    id: int = Field(..., examples=[1])
    name: str = Field(..., examples=["John Doe"])
    email: str = Field(..., examples=["john@example.com"])
    created_at: datetime = Field(..., alias="createdAt")

    model_config = ConfigDict(populate_by_name=True)

    @field_serializer("created_at", when_used="json")
    def serialize_created_at(self, value: datetime) -> str:
        return isoformat_utc(value)


class UserPayload(BaseModel):
    """Request body for creating or updating a user."""

    name: Optional[str] = Field(None, examples=["John Doe"])
    email: Optional[str] = Field(None, examples=["john@example.com"])

    def is_complete(self) -> bool:
        """Return ``True`` when both fields are present and non-empty."""
        return bool(self.name) and bool(self.email)
