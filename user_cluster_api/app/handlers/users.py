"""
Handlers for the user endpoints.

Each handler receives the already parsed transport parameters (the raw
id taken from the path, or the decoded JSON body), calls the
matching :class:`UserService` operation and wraps the outcome in a
:class:`HandlerResult`.  Exactly one log record is emitted per call:
``INFO`` naming the operation on success, ``ERROR`` carrying the
exception message on failure.  An empty result is a success.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from ..schemas.user import User, create_user
from ..services.user_service import UserService
from ..services.user_store import UserStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HandlerResult:
    """Outcome of a handler call.

    ``users`` is set when ``ok`` is true, ``error`` otherwise.
    """

    ok: bool
    users: List[User] = field(default_factory=list)
    error: Optional[str] = None

    @classmethod
    def success(cls, users: List[User]) -> "HandlerResult":
        return cls(ok=True, users=users)

    @classmethod
    def failure(cls, message: str) -> "HandlerResult":
        return cls(ok=False, error=message)


def _parse_id(raw_id: Any) -> int:
    return int(raw_id)


def _user_from_payload(payload: Any) -> User:
    return create_user(payload["id"], payload["name"], payload["email"])


def _run(operation: Callable[[], List[User]], message: str) -> HandlerResult:
    try:
        users = operation()
    except Exception as exc:
        logger.error("%s", exc)
        return HandlerResult.failure(str(exc))
    logger.info(message)
    return HandlerResult.success(users)


def get_user_by_id(store: UserStore, raw_id: Any) -> HandlerResult:
    """Handle ``GET /user/{id}``."""
    return _run(lambda: UserService.get_user_by_id(store, _parse_id(raw_id)), "Retrieved")


def insert_user(store: UserStore, payload: Any) -> HandlerResult:
    """Handle ``POST /user``."""
    return _run(lambda: UserService.insert_user(store, _user_from_payload(payload)), "Inserted")


def update_user(store: UserStore, payload: Any) -> HandlerResult:
    """Handle ``PUT /user``."""
    return _run(lambda: UserService.update_user(store, _user_from_payload(payload)), "Updated")


def delete_user_by_id(store: UserStore, raw_id: Any) -> HandlerResult:
    """Handle ``DELETE /user/{id}``."""
    return _run(lambda: UserService.delete_user_by_id(store, _parse_id(raw_id)), "Deleted")
