"""
Information endpoint for API v1.

Returns the name and version of the service together with the process
id of the worker that answered and the size of its user store.  When
the service runs as several worker processes, repeated calls show which
replica served each request.
"""

import os
from typing import Any, Dict

from fastapi import APIRouter, Depends

from user_cluster_api.app.core.config import settings
from user_cluster_api.app.core.dependencies import get_user_store
from user_cluster_api.app.services.user_store import UserStore

router = APIRouter()


@router.get("", response_model=Dict[str, Any])
async def get_info(store: UserStore = Depends(get_user_store)) -> Dict[str, Any]:
    """Describe the replica that handled the request."""
    return {
        "project_name": settings.project_name,
        "version": settings.api_version,
        "pid": os.getpid(),
        "user_count": len(store),
    }
