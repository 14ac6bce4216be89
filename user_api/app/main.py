"""
Main entrypoint for the User REST API.

This module assembles the FastAPI application, sets up logging and
includes the routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Importing the app here makes it easy to run with uvicorn
or another ASGI server, e.g.::

    uvicorn user_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

from typing import Optional

from fastapi import FastAPI

from .api.endpoints import health
from .api.router import router as api_router
from .core.config import Settings, settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .services.user_store import UserStore


def create_app(store: Optional[UserStore] = None, config: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[UserStore]
        Store backing the user endpoints.  A new store seeded with the
        two default users is created when omitted, so every application
        owns independent data.
    config : Optional[Settings]
        Settings to use instead of the module-level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    config = config or settings
    # Initialise logging before anything else so that the handlers are
    # in place for the first request.
    setup_logging(config.log_level, config.log_file)

    app = FastAPI(title=config.project_name, version=config.api_version, debug=config.debug)
    app.state.settings = config
    app.state.user_store = store if store is not None else UserStore()

    app.include_router(health.router, tags=["health"])
    app.include_router(api_router, prefix="/api")
    register_exception_handlers(app)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
