"""
Business logic for users.

``UserService`` computes the result of every user operation from a
snapshot of a :class:`UserStore`.  The store is passed in explicitly on
each call and is never written back to: an insert, update or delete
returns the collection as it *would* look after the change, while the
store keeps its seeded content.  Repeating a call against the same
store therefore always reproduces the same output.

Every result is sorted ascending by ``id`` with a stable sort, so users
sharing an id keep their relative order.
"""

from operator import attrgetter
from typing import Any, Iterable, List

from ..schemas.user import User
from .user_store import UserStore


def _sorted(users: Iterable[User]) -> List[User]:
    return sorted(users, key=attrgetter("id"))


class UserService:
    """Read and write operations over a user store.

    None of the methods raise for missing users; an unknown id simply
    yields an empty or unchanged list.
    """

    @classmethod
    def get_user_by_id(cls, store: UserStore, user_id: Any) -> List[User]:
        """Return all users whose id equals ``user_id``."""
        return _sorted(user for user in store.list_users() if user.id == user_id)

    @classmethod
    def insert_user(cls, store: UserStore, new_user: User) -> List[User]:
        """Return the store's users plus ``new_user``.

        No uniqueness check is made, so inserting an existing id yields
        two entries with that id.
        """
        return _sorted([*store.list_users(), new_user])

    @classmethod
    def update_user(cls, store: UserStore, updated_user: User) -> List[User]:
        """Replace every user sharing ``updated_user.id`` with one copy of it."""
        others = [user for user in store.list_users() if user.id != updated_user.id]
        return _sorted([*others, updated_user])

    @classmethod
    def delete_user_by_id(cls, store: UserStore, user_id: Any) -> List[User]:
        """Return the store's users without those whose id is ``user_id``."""
        return _sorted(user for user in store.list_users() if user.id != user_id)
