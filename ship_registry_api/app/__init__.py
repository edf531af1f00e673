"""
Application package.

The service is organised into ``core`` (configuration, logging,
database, errors), ``schemas`` (pydantic models), ``repositories``
(ship storage), ``services`` (business logic) and ``api`` (versioned
HTTP routers).  ``main`` assembles them into the FastAPI app.
"""
