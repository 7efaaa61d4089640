"""
In‑memory user store.

One ``UserStore`` is created per process by the application factory
and lives until the process exits.  Nothing is persisted and nothing
is shared between worker processes: every replica starts from the
same seed and then evolves on its own.
"""

from typing import Iterable, Optional, Tuple

from ..schemas.user import User, create_user


def seed_users() -> Tuple[User, ...]:
    """Return the fixed set of users every store starts with."""
    return (
        create_user(1, "Ada Lovelace", "ada@example.com"),
        create_user(2, "Alan Turing", "alan@example.com"),
        create_user(3, "Grace Hopper", "grace@example.com"),
    )


class UserStore:
    """Ordered collection of users owned by a single process.

    At most one user per id is intended but not enforced.  The store
    exposes reads only; all computation of new collections lives in
    the user service.
    """

    def __init__(self, users: Optional[Iterable[User]] = None) -> None:
        self._items = list(seed_users() if users is None else users)

    def list_users(self) -> Tuple[User, ...]:
        """Return a snapshot of the current collection."""
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"UserStore({len(self._items)} users)"
