"""
FastAPI dependencies shared by the endpoint modules.

The user store is owned by the application (``app.state.user_store``)
rather than by a module-level global, so each ``create_app`` call gets
its own isolated data.

``read_user_payload`` accepts the create/update body either as JSON or
as an HTML form (``application/x-www-form-urlencoded``).  Bodies that
cannot be read into ``UserPayload`` raise ``RequestValidationError``,
which the application turns into a 400 envelope.
"""

import json
from typing import Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from user_api.app.schemas.user import UserPayload
from user_api.app.services.user_store import UserStore

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def get_user_store(request: Request) -> UserStore:
    return request.app.state.user_store


async def read_user_payload(request: Request) -> Optional[UserPayload]:
    """Parse the request body into ``UserPayload``.

    Returns ``None`` for an empty body (or a JSON ``null``), leaving the
    presence check to the endpoint.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.split(";")[0].strip().lower() == FORM_CONTENT_TYPE:
        form = await request.form()
        data = dict(form)
    else:
        body = await request.body()
        if not body:
            return None
        try:
            data = json.loads(body)
        except ValueError as exc:
            error = {
                "type": "json_invalid",
                "loc": ("body",),
                "msg": "JSON decode error",
                "input": {},
                "ctx": {"error": str(exc)},
            }
            raise RequestValidationError([error]) from exc
        if data is None:
            return None

    try:
        return UserPayload.model_validate(data)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors(include_url=False)) from exc
