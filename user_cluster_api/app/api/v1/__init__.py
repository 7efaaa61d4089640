"""
Version 1 of the API.

The routes of this version are mounted at the application root, so
``/user`` and ``/info`` are served without a version prefix.
"""
