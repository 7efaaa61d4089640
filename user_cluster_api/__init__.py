"""
Top‑level package for the User Cluster API.

This file makes ``user_cluster_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``user_cluster_api.app.main``.  The import string of the ASGI
application, ``user_cluster_api.app.main:app``, is what each worker
process of the cluster loads.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
