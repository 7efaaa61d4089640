"""
User endpoints for API v1.

Every endpoint answers with a JSON array of ``{id, name, email}``
objects: the matching users for ``GET``, or the full collection as it
looks after the change for ``POST``, ``PUT`` and ``DELETE``.  An
unknown id is not an error and renders as ``[]``.

The path id is received as a string and parsed by the handler, so a
malformed id reaches the handler instead of being rejected by FastAPI.
Any failure is answered with ``400 Bad Request`` and the exception
message as the body.  The JSON body is likewise handed to the handler
as is, so a body that is not an object fails there too.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from user_cluster_api.app.core.dependencies import get_user_store
from user_cluster_api.app.handlers import users as handlers
from user_cluster_api.app.handlers.users import HandlerResult
from user_cluster_api.app.services.user_store import UserStore

router = APIRouter()


def _to_response(result: HandlerResult) -> JSONResponse:
    if not result.ok:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=result.error)
    return JSONResponse(content=jsonable_encoder(result.users))


@router.get("/{user_id}")
async def get_user_by_id(user_id: str, store: UserStore = Depends(get_user_store)) -> JSONResponse:
    """Return the users with the given id (zero or more)."""
    return _to_response(handlers.get_user_by_id(store, user_id))


@router.post("")
async def insert_user(
    payload: Any = Body(..., examples=[{"id": 4, "name": "Edsger Dijkstra", "email": "edsger@example.com"}]),
    store: UserStore = Depends(get_user_store),
) -> JSONResponse:
    """Return the collection with the posted user added."""
    return _to_response(handlers.insert_user(store, payload))


@router.put("")
async def update_user(
    payload: Any = Body(..., examples=[{"id": 2, "name": "Alan M. Turing", "email": "alan@example.com"}]),
    store: UserStore = Depends(get_user_store),
) -> JSONResponse:
    """Return the collection with the user of the same id replaced."""
    return _to_response(handlers.update_user(store, payload))


@router.delete("/{user_id}")
async def delete_user_by_id(user_id: str, store: UserStore = Depends(get_user_store)) -> JSONResponse:
    """Return the collection without the users of the given id."""
    return _to_response(handlers.delete_user_by_id(store, user_id))
