"""
Main entrypoint for the User Cluster API.

This module assembles the FastAPI application, sets up logging and
includes the versioned router.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Each worker process that imports this module gets its own
application and therefore its own user store, e.g.::

    uvicorn user_cluster_api.app.main:app --port 3000 --workers 4

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
import os
from typing import Optional

from fastapi import FastAPI

from .core.config import settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .services.user_store import UserStore


def create_app(store: Optional[UserStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[UserStore]
        The user store served by the application.  A freshly seeded
        store is created when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the handlers
    # below can safely log messages.
    setup_logging(settings.log_level, settings.log_file or None, settings.log_format)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.user_store = store if store is not None else UserStore()

    app.include_router(v1_router)

    logging.getLogger(__name__).info(
        "Application created in process %s with %s", os.getpid(), app.state.user_store
    )
    return app


# Create the application instance at import time so that ASGI servers
# can load it by import string.
app = create_app()
