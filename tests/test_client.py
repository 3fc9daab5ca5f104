"""Tests for the requests-based API client.

The session is replaced by a stub that records calls and replays
canned ``requests.Response`` objects, so no server is needed.
"""

import json

import requests

from event_registry_client import EventRegistryClient


def _response(status_code, body=None):
    response = requests.Response()
    response.status_code = status_code
    response._content = json.dumps(body).encode() if body is not None else b""
    response.url = "http://api.test"
    return response


class StubSession:

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, **kwargs):
        self.calls.append(kwargs)
        result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


def test_login_stores_token_and_sends_it():
    session = StubSession(_response(200, {"token": "t0k3n"}), _response(200, {"totalEvents": 1, "totalAttendees": 0}))
    client = EventRegistryClient(base_url="http://api.test/", session=session)

    token, error = client.login("admin", "admin123")
    assert (token, error) == ("t0k3n", None)
    assert session.calls[0]["url"] == "http://api.test/api/login"
    assert session.calls[0]["json"] == {"username": "admin", "password": "admin123"}

    data, error = client.dashboard()
    assert error is None
    assert data == {"totalEvents": 1, "totalAttendees": 0}
    assert session.calls[1]["headers"] == {"Authorization": "t0k3n"}


def test_error_body_becomes_error_message():
    session = StubSession(_response(400, {"error": "You are already registered for this event"}))
    client = EventRegistryClient(base_url="http://api.test", token="t", session=session)

    data, error = client.register_attendee(1, "A", "a@x.com", "1")
    assert data is None
    assert error == {"status_code": 400, "message": "You are already registered for this event"}
    assert session.calls[0]["json"] == {"name": "A", "email": "a@x.com", "phone": "1", "eventId": 1}


def test_filter_drops_empty_params():
    session = StubSession(_response(200, {"events": [], "total": 0}))
    client = EventRegistryClient(base_url="http://api.test", token="t", session=session)

    data, error = client.filter_events(page=2, limit=5)
    assert data == {"events": [], "total": 0}
    assert session.calls[0]["params"] == {"page": 2, "limit": 5}
    assert session.calls[0]["url"] == "http://api.test/api/events/filter"


def test_list_failure_returns_empty_list():
    session = StubSession(_response(401, {"error": "Access denied"}))
    client = EventRegistryClient(base_url="http://api.test", session=session)

    attendees, error = client.list_all_attendees()
    assert attendees == []
    assert error == {"status_code": 401, "message": "Access denied"}


def test_connection_error_is_reported():
    session = StubSession(requests.ConnectionError("refused"))
    client = EventRegistryClient(base_url="http://api.test", token="t", session=session)

    deleted, error = client.delete_event(3)
    assert deleted is False
    assert error["status_code"] is None
    assert "refused" in error["message"]


def test_delete_success():
    session = StubSession(_response(200, {"message": "Event deleted"}))
    client = EventRegistryClient(base_url="http://api.test", token="t", session=session)

    assert client.delete_event(3) == (True, None)
    assert session.calls[0]["method"] == "DELETE"
    assert session.calls[0]["url"] == "http://api.test/api/events/3"
