"""Page handlers and the logic that prepares their render contexts.

Handlers are independent of FastAPI: routers resolve the collaborators and
the caller, then hand them to a handler together with the query parameters.
"""
