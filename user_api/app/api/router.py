"""
Top-level router for the ``/api`` prefix.

Domain routers are included here under their own prefix; the
application mounts this router at ``/api``.
"""

from fastapi import APIRouter

from .endpoints import users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
