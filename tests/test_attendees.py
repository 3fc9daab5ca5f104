"""API tests for attendee registration and listings."""

import pytest


def _register(client, headers, event_id, email="a@x.com", name="A", phone="1"):
    return client.post(
        "/api/attendees",
        json={"name": name, "email": email, "phone": phone, "eventId": event_id},
        headers=headers,
    )


def _event(client, headers, event_id):
    events = client.get("/api/events/all", headers=headers).json()
    return next(event for event in events if event["id"] == event_id)


class TestRegisterAttendee:

    def test_registration_scenario(self, client, auth_headers, make_event):
        event = make_event(name="Intro", date="2024-01-01", type="Meetup")

        first = _register(client, auth_headers, event["id"])
        assert first.status_code == 200
        attendee = first.json()
        assert attendee["name"] == "A"
        assert attendee["email"] == "a@x.com"
        assert attendee["phone"] == "1"
        assert attendee["eventId"] == event["id"]
        assert isinstance(attendee["id"], int)
        assert _event(client, auth_headers, event["id"])["attendeesTotal"] == 1

        second = _register(client, auth_headers, event["id"])
        assert second.status_code == 400
        assert second.json() == {"error": "You are already registered for this event"}
        assert _event(client, auth_headers, event["id"])["attendeesTotal"] == 1

    def test_duplicate_performs_no_write(self, client, auth_headers, make_event):
        event = make_event()
        _register(client, auth_headers, event["id"])
        _register(client, auth_headers, event["id"], name="Someone else", phone="2")
        attendees = client.get("/api/all-attendees", headers=auth_headers).json()
        assert len(attendees) == 1
        assert attendees[0]["name"] == "A"

    def test_each_registration_increments_by_one(self, client, auth_headers, make_event):
        event = make_event()
        for index in range(3):
            assert _register(client, auth_headers, event["id"], email=f"p{index}@x.com").status_code == 200
        assert _event(client, auth_headers, event["id"])["attendeesTotal"] == 3
        assert len(client.get("/api/all-attendees", headers=auth_headers).json()) == 3

    def test_same_email_may_register_for_another_event(self, client, auth_headers, make_event):
        first = make_event(name="First")
        second = make_event(name="Second")
        assert _register(client, auth_headers, first["id"]).status_code == 200
        assert _register(client, auth_headers, second["id"]).status_code == 200
        assert _event(client, auth_headers, first["id"])["attendeesTotal"] == 1
        assert _event(client, auth_headers, second["id"])["attendeesTotal"] == 1

    def test_unknown_event_is_not_found(self, client, auth_headers):
        response = _register(client, auth_headers, 777)
        assert response.status_code == 404
        assert response.json() == {"error": "Event not found"}
        assert client.get("/api/all-attendees", headers=auth_headers).json() == []

    @pytest.mark.parametrize("missing", ["name", "email", "phone", "eventId"])
    def test_missing_field_is_a_validation_error(self, client, auth_headers, make_event, missing):
        event = make_event()
        payload = {"name": "A", "email": "a@x.com", "phone": "1", "eventId": event["id"]}
        del payload[missing]
        response = client.post("/api/attendees", json=payload, headers=auth_headers)
        assert response.status_code == 500
        error = response.json()["error"]
        assert error.startswith("Attendee validation failed")
        assert missing in error
        assert _event(client, auth_headers, event["id"])["attendeesTotal"] == 0


class TestListAttendees:

    @pytest.fixture
    def two_events(self, client, auth_headers, make_event):
        first = make_event(name="First")
        second = make_event(name="Second")
        _register(client, auth_headers, first["id"], email="a@x.com")
        _register(client, auth_headers, first["id"], email="b@x.com")
        _register(client, auth_headers, second["id"], email="c@x.com")
        return first, second

    def test_all_attendees(self, client, auth_headers, two_events):
        attendees = client.get("/api/all-attendees", headers=auth_headers).json()
        assert [attendee["email"] for attendee in attendees] == ["a@x.com", "b@x.com", "c@x.com"]

    def test_attendees_of_one_event(self, client, auth_headers, two_events):
        first, second = two_events
        attendees = client.get(
            "/api/attendees", params={"eventId": first["id"]}, headers=auth_headers
        ).json()
        assert [attendee["email"] for attendee in attendees] == ["a@x.com", "b@x.com"]
        attendees = client.get(
            "/api/attendees", params={"eventId": second["id"]}, headers=auth_headers
        ).json()
        assert [attendee["email"] for attendee in attendees] == ["c@x.com"]

    def test_attendees_of_unknown_event_is_empty(self, client, auth_headers, two_events):
        attendees = client.get("/api/attendees", params={"eventId": 999}, headers=auth_headers).json()
        assert attendees == []

    def test_attendees_without_event_id_lists_everyone(self, client, auth_headers, two_events):
        attendees = client.get("/api/attendees", headers=auth_headers).json()
        assert len(attendees) == 3


class TestDashboard:

    def test_empty_store(self, client, auth_headers):
        response = client.get("/api/dashboard", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {"totalEvents": 0, "totalAttendees": 0}

    def test_counts_events_and_attendees(self, client, auth_headers, make_event):
        first = make_event(name="First")
        make_event(name="Second")
        _register(client, auth_headers, first["id"], email="a@x.com")
        _register(client, auth_headers, first["id"], email="b@x.com")
        _register(client, auth_headers, first["id"], email="b@x.com")
        assert client.get("/api/dashboard", headers=auth_headers).json() == {
            "totalEvents": 2,
            "totalAttendees": 2,
        }
