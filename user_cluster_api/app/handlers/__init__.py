"""
Request handlers.

Handlers sit between the HTTP endpoints and the service layer: they
turn raw request parameters into service calls and return a tagged
:class:`~user_cluster_api.app.handlers.users.HandlerResult` so that
the endpoints never have to catch exceptions themselves.
"""
