"""
Main entrypoint for the Social Graph API.

This module assembles the FastAPI application, sets up logging,
creates the in‑memory graph store and includes the versioned router.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``, e.g.::

    uvicorn social_graph_api.app.main:app --port 8080
"""

import logging
from typing import List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.messages import get_message
from .services.user_graph import FriendshipPolicy, UserGraphStore

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str, logfile: str = "") -> None:
    """Attach console (and optional file) handlers to the root logger.

    Does nothing when the root logger already has handlers, so repeated
    ``create_app`` calls and test runners keep their own setup.
    """
    if logging.getLogger().handlers:
        return
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(logfile, encoding="utf-8"))
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[UserGraphStore] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module‑level settings
        read from the environment.
    store : Optional[UserGraphStore]
        Graph store to serve.  When omitted a fresh store is built with
        the friendship policy described by ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(settings.log_level, settings.log_file)

    if store is None:
        store = UserGraphStore(
            FriendshipPolicy(
                allow_duplicate_friends=settings.allow_duplicate_friends,
                cascade_remove_all=settings.cascade_remove_all,
                empty_list_is_error=settings.empty_list_is_error,
            )
        )

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.store = store

    @app.exception_handler(RequestValidationError)
    async def malformed_request_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Malformed bodies are a plain client error, not FastAPI's 422.
        logging.getLogger(__name__).warning(
            "Malformed request to %s %s: %s", request.method, request.url.path, exc.errors()
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": get_message("invalid_body", settings.language)},
        )

    app.include_router(v1_router, prefix=settings.api_prefix)

    logging.getLogger(__name__).info(
        "%s %s ready (policy: %s)", settings.project_name, settings.api_version, store.policy
    )
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
