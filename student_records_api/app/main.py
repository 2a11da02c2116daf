"""
Main entrypoint for the Student Records API.

This module assembles the FastAPI application, sets up logging and
CORS and includes the versioned router.  ``create_app`` builds a fresh
application around its own ``StudentService``; the module‑level
``app`` is the instance served by uvicorn, e.g.::

    uvicorn student_records_api.app.main:app --port 8080
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging
from .services.student_service import StudentService

logger = logging.getLogger(__name__)

CORS_METHODS = ["GET", "POST", "PUT", "DELETE"]


def create_app(service: Optional[StudentService] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    service : Optional[StudentService]
        Store the application should serve.  A new, empty store is
        created when omitted, so every application starts with no
        students and id numbering at 1.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.student_service = service if service is not None else StudentService()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=CORS_METHODS,
        allow_headers=["*"],
    )
    app.include_router(v1_router)

    logger.debug("Application created with capacity %s", app.state.student_service.capacity)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
