"""
User endpoints.

CRUD over the in-memory user store.  Every response, successful or
not, uses the ``Envelope`` shape.  Expected outcomes (missing fields,
unknown id) are answered directly with 400 and 404 envelopes; anything
unexpected is logged and answered with a generic 500 message that does
not reveal the cause.
"""

import logging
import re
import sys
from typing import List, Optional, Union

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from user_api.app.api.deps import get_user_store, read_user_payload
from user_api.app.schemas.envelope import Envelope, failure
from user_api.app.schemas.user import User, UserPayload
from user_api.app.services.user_store import UserStore

logger = logging.getLogger(__name__)

router = APIRouter()

MISSING_FIELDS_MESSAGE = "Name and email are required"

# Leading whitespace, an optional sign, then either a ``0x`` prefix with
# hex digits or a run of decimal digits.  Trailing garbage is ignored,
# so "12abc" parses as 12 and "0x1f" as 31.
_INT_PREFIX = re.compile(r"\s*([+-]?)(?:(0[xX])([0-9a-fA-F]*)|([0-9]+))")

# Any digit run longer than this overflows a double in either base.
_MAX_ID_DIGITS = 400

UserId = Union[int, float]


def parse_user_id(raw: str) -> Optional[UserId]:
    """Parse an id from a path segment the way ``parseInt`` does.

    Returns ``None`` (NaN) when no number can be read and ``±inf`` when
    the number does not fit in a double.  Neither is an error: such ids
    match no user and the caller answers with 404.
    """
    match = _INT_PREFIX.match(raw)
    if match is None:
        return None
    sign, hex_prefix, hex_digits, digits = match.groups()
    if hex_prefix:
        if not hex_digits:
            return None
        text, base = hex_digits, 16
    else:
        text, base = digits, 10

    negative = sign == "-"
    if len(text) > _MAX_ID_DIGITS:
        return float("-inf") if negative else float("inf")
    value = int(text, base)
    if value > sys.float_info.max:
        return float("-inf") if negative else float("inf")
    return -value if negative else value


def format_user_id(user_id: Optional[UserId]) -> str:
    """Render a parsed id for messages: ``NaN``, ``Infinity`` or digits."""
    if user_id is None:
        return "NaN"
    if isinstance(user_id, float):
        return "-Infinity" if user_id < 0 else "Infinity"
    return str(user_id)


def _not_found(user_id: Optional[UserId]) -> JSONResponse:
    return failure(status.HTTP_404_NOT_FOUND, f"User with id {format_user_id(user_id)} not found")


@router.get("")
async def list_users(store: UserStore = Depends(get_user_store)) -> JSONResponse:
    """Return every user in creation order together with the count."""
    try:
        users = store.get_all()
        return Envelope[List[User]](success=True, data=users, count=len(users)).to_response()
    except Exception:
        logger.exception("Failed to list users")
        return failure(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error fetching users")


@router.get("/{user_id}")
async def get_user(user_id: str, store: UserStore = Depends(get_user_store)) -> JSONResponse:
    try:
        parsed = parse_user_id(user_id)
        user = store.get_by_id(parsed)
        if user is None:
            return _not_found(parsed)
        return Envelope[User](success=True, data=user).to_response()
    except Exception:
        logger.exception("Failed to fetch user %s", user_id)
        return failure(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error fetching user")


@router.post("")
async def create_user(
    payload: Optional[UserPayload] = Depends(read_user_payload),
    store: UserStore = Depends(get_user_store),
) -> JSONResponse:
    """Create a user; both ``name`` and ``email`` must be non-empty."""
    try:
        if payload is None or not payload.is_complete():
            return failure(status.HTTP_400_BAD_REQUEST, MISSING_FIELDS_MESSAGE)
        user = store.create(payload.name, payload.email)
        return Envelope[User](
            success=True, data=user, message="User created successfully"
        ).to_response(status.HTTP_201_CREATED)
    except Exception:
        logger.exception("Failed to create user")
        return failure(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error creating user")


@router.put("/{user_id}")
async def update_user(
    user_id: str,
    payload: Optional[UserPayload] = Depends(read_user_payload),
    store: UserStore = Depends(get_user_store),
) -> JSONResponse:
    """Replace name and email of an existing user.

    Field presence is checked before the id, so an incomplete body for
    an unknown user is still a 400.
    """
    try:
        parsed = parse_user_id(user_id)
        if payload is None or not payload.is_complete():
            return failure(status.HTTP_400_BAD_REQUEST, MISSING_FIELDS_MESSAGE)
        user = store.update(parsed, payload.name, payload.email)
        if user is None:
            return _not_found(parsed)
        return Envelope[User](
            success=True, data=user, message="User updated successfully"
        ).to_response()
    except Exception:
        logger.exception("Failed to update user %s", user_id)
        return failure(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error updating user")


@router.delete("/{user_id}")
async def delete_user(user_id: str, store: UserStore = Depends(get_user_store)) -> JSONResponse:
    try:
        parsed = parse_user_id(user_id)
        if not store.delete(parsed):
            return _not_found(parsed)
        return Envelope(
            success=True, message=f"User with id {parsed} deleted successfully"
        ).to_response()
    except Exception:
        logger.exception("Failed to delete user %s", user_id)
        return failure(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error deleting user")
