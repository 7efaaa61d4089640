"""
Pydantic model for user records.

A ``User`` is a plain ``{id, name, email}`` value.  Records are built
with :func:`create_user`, which deliberately skips pydantic validation
and coercion: whatever the caller passes ends up in the record, so
duplicate ids and malformed e‑mail addresses are accepted.  The model
is frozen so records are immutable once created.

The ids of the seeded users are integers and request bodies normally
carry integers too, but nothing enforces it.  The fields are therefore
annotated ``Any`` so that a record holding e.g. a float id serializes
as it was given, without serializer warnings.
"""

from typing import Any

from pydantic import BaseModel, Field


class User(BaseModel):
    """Schema for a user as stored and returned by the API."""

    id: Any = Field(..., examples=[1], description="Integer by convention, stored as given")
    name: Any = Field(..., examples=["Ada Lovelace"], description="Text by convention, stored as given")
    email: Any = Field(..., examples=["ada@example.com"], description="Text by convention, stored as given")

    model_config = {
        "frozen": True,
    }


def create_user(id: Any, name: Any, email: Any) -> User:
    """Return a new ``User`` holding exactly the given values.

    No validation or coercion is performed.  Calling the factory twice
    with the same arguments returns two equal but distinct objects.
    """
    return User.model_construct(id=id, name=name, email=email)
