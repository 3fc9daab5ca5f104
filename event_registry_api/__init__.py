"""
Top‑level package for the Event Registry API.

All functionality lives in the ``app`` subpackage; import the ASGI
application as ``event_registry_api.app.main:app``.
"""

__all__ = []
