"""
Service layer abstraction.

``user_store`` owns the in‑memory collection of one process and
``user_service`` computes read and write results from a snapshot of
it.  Swapping the store for a database would not change the handlers.
"""
