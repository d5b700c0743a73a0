"""
Main entrypoint for the Blog API.

This module assembles the FastAPI application, sets up logging,
registers the error handlers and includes the versioned router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn,
e.g.::

    uvicorn blog_api.app.main:app --reload

or through ``run.py`` which honours the ``HOST`` and ``PORT`` settings.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api.error_handlers import register_error_handlers
from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging
from .services.blog_service import BlogService

logger = logging.getLogger(__name__)


def create_app(blog_service: Optional[BlogService] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    blog_service : Optional[BlogService]
        Store backing the blog endpoints.  A new, empty store is created
        when omitted, so separate applications never share records.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file)

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        logger.info("%s started (configured port %s)", settings.project_name, settings.port)
        yield
        logger.info("Server closed")

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.blog_service = blog_service if blog_service is not None else BlogService()

    register_error_handlers(app)
    app.include_router(v1_router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
