"""
Pydantic schema definitions for API payloads.

The user record doubles as the response body of every user endpoint,
so the service layer and the API share a single model.
"""
