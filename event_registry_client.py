"""Event Registry API client.

This module defines a small client wrapper around the Event Registry
HTTP API.  It uses the ``requests`` library internally and exposes one
method per endpoint:

* :meth:`login` – exchange operator credentials for a token.
* :meth:`create_event`, :meth:`update_event`, :meth:`delete_event`.
* :meth:`list_events`, :meth:`list_all_events`, :meth:`filter_events`.
* :meth:`register_attendee`, :meth:`list_attendees`,
  :meth:`list_all_attendees`.
* :meth:`dashboard` – aggregate counts.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is ``None`` (or an empty list for
list operations) and ``error`` is a dictionary with the keys
``status_code`` and ``message``.  The message is taken from the API's
``{"error": ...}`` body when present.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class EventRegistryClient:
    """Client for the Event Registry API.

    After a successful :meth:`login` the token is kept on the client
    and sent in the ``Authorization`` header of every request.
    """

    def __init__(
        self,
        *,
        base_url: str,
        token: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:5000``.
                The ``/api`` prefix is added by the client.
            token: Optional token obtained earlier (e.g. via
                ``create_token.py``).
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request against ``/api{path}``.

        Returns:
            A tuple ``(data, error)`` as described in the module
            docstring.
        """
        url = f"{self.base_url}/api{path}"
        headers: Dict[str, str] = {}
        if self.token:
            headers["Authorization"] = self.token
        if params:
            params = {key: value for key, value in params.items() if value is not None}
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("error") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, path: str, params: Dict[str, Any] | None = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path, params=params)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------
    def login(self, username: str, password: str) -> Tuple[Optional[str], Optional[Error]]:
        """Log in and remember the returned token."""
        data, error = self._request("POST", "/login", json_body={"username": username, "password": password})
        if error:
            return None, error
        self.token = data.get("token") if isinstance(data, dict) else None
        return self.token, None

    # ------------------------------------------------------------------
    # Event operations
    # ------------------------------------------------------------------
    def create_event(self, event: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/events", json_body=event)

    def list_events(self, page: int = 1, limit: int = 2) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Return ``{"events": [...], "total": n}`` for one page."""
        return self._request("GET", "/events", params={"page": page, "limit": limit})

    def list_all_events(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/events/all")

    def filter_events(
        self, event_type: Optional[str] = None, page: int = 1, limit: int = 2
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request(
            "GET", "/events/filter", params={"type": event_type, "page": page, "limit": limit}
        )

    def update_event(self, event_id: Any, fields: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PUT", f"/events/{event_id}", json_body=fields)

    def delete_event(self, event_id: Any) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/events/{event_id}")
        return error is None, error

    # ------------------------------------------------------------------
    # Attendee operations
    # ------------------------------------------------------------------
    def register_attendee(
        self, event_id: Any, name: str, email: str, phone: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        payload = {"name": name, "email": email, "phone": phone, "eventId": event_id}
        return self._request("POST", "/attendees", json_body=payload)

    def list_attendees(self, event_id: Any) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/attendees", params={"eventId": event_id})

    def list_all_attendees(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/all-attendees")

    # ------------------------------------------------------------------
    # Dashboard
    # ------------------------------------------------------------------
    def dashboard(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", "/dashboard")
