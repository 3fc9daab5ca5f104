"""
Application package.

The project is organised by layer: ``core`` (configuration, database
handle, security, errors), ``schemas`` (pydantic payloads),
``services`` (business logic) and ``api`` (FastAPI routers).  Each
domain (events, attendees, dashboard, auth) has a module in each
layer.
"""
