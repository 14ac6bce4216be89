"""
Response envelope shared by all ``/api/users`` endpoints.

Every response body has the shape
``{"success": bool, "data"?: T, "count"?: int, "message"?: str}``.
Optional keys are dropped from the JSON when they are not set, which
is what ``to_response`` does with ``exclude_none``.
"""

from typing import Generic, Optional, TypeVar

from fastapi.responses import JSONResponse
from pydantic import BaseModel

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    success: bool
    data: Optional[T] = None
    count: Optional[int] = None
    message: Optional[str] = None

    def to_response(self, status_code: int = 200) -> JSONResponse:
        """Render the envelope as a JSON response with ``status_code``."""
        content = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        return JSONResponse(status_code=status_code, content=content)


def failure(status_code: int, message: str) -> JSONResponse:
    """Shortcut for ``{"success": false, "message": ...}`` responses."""
    return Envelope(success=False, message=message).to_response(status_code)
