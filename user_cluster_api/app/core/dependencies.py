"""
FastAPI dependencies shared by the endpoints.

The user store of the current process is created by ``create_app`` and
kept on ``app.state``.  Endpoints obtain it through
:func:`get_user_store` so that tests can build an application around a
store of their own.
"""

from fastapi import Request

from ..services.user_store import UserStore


def get_user_store(request: Request) -> UserStore:
    """Return the user store attached to the running application."""
    return request.app.state.user_store
