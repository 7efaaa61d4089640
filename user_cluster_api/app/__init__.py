"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  The code is layered: endpoints in ``api/v1/endpoints``
delegate to request handlers in ``handlers``, which call the pure
functions of the user service in ``services``.  The only state, the
user store, is created by ``main.create_app`` and passed down
explicitly on every call.
"""

from .main import app  # noqa: F401
