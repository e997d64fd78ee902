"""
Main entrypoint for the Blog API.

This module assembles the FastAPI application, sets up logging and
includes the versioned router.  ``create_app`` builds and configures
the app; an instance is created at import time as ``app`` so it can be
served directly::

    uvicorn blog_api.app.main:app --reload

Each application owns one post repository and one comment repository
for its whole lifetime.  Pass pre-built repositories to ``create_app``
to start from known data (tests do this to get isolated stores).
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .repositories import CommentRepository, PostRepository

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "Application startup: %d post(s) and %d comment(s) loaded",
        len(app.state.post_repository),
        len(app.state.comment_repository),
    )
    yield
    logger.info("Application shutdown: in-memory posts and comments are discarded")


def create_app(
    settings: Optional[Settings] = None,
    post_repository: Optional[PostRepository] = None,
    comment_repository: Optional[CommentRepository] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Application settings; defaults to the environment-driven
        ``core.config.settings``.
    post_repository, comment_repository
        Stores to serve from.  Empty ones are created when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the routers can
    # log from the first request.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.post_repository = post_repository if post_repository is not None else PostRepository()
    app.state.comment_repository = comment_repository if comment_repository is not None else CommentRepository()

    app.include_router(v1_router, prefix="/api")
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
