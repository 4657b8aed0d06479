import pytest

from eventhub.models import Feedback


def test_feedback_scenario(client, make_event, auth_headers):
    event_id = make_event()
    _, headers = auth_headers()

    too_high = client.post("/feedback", json={"eventId": event_id, "rating": 6, "comment": "!"}, headers=headers)
    accepted = client.post("/feedback", json={"eventId": event_id, "rating": 5, "comment": "Great"}, headers=headers)
    again = client.post("/feedback", json={"eventId": event_id, "rating": 4, "comment": "Meh"}, headers=headers)

    assert too_high.status_code == 400
    assert too_high.get_json()["message"] == "Rating must be between 1 and 5"
    assert accepted.status_code == 201
    assert "feedbackId" in accepted.get_json()
    assert again.status_code == 400
    assert again.get_json()["message"] == "You have already submitted feedback for this event"
    assert Feedback.query.count() == 1


@pytest.mark.parametrize("rating", [0, -3, 4.5, 1.0000001, "five", True, [5]])
def test_feedback_rejects_invalid_ratings(client, make_event, auth_headers, rating):
    event_id = make_event()
    _, headers = auth_headers()

    response = client.post("/feedback", json={"eventId": event_id, "rating": rating}, headers=headers)

    assert response.status_code == 400


def test_feedback_requires_event_and_rating(client, auth_headers):
    _, headers = auth_headers()

    response = client.post("/feedback", json={"comment": "hello"}, headers=headers)

    assert response.status_code == 400
    assert response.get_json()["message"] == "Please provide eventId and rating"


def test_feedback_for_missing_event_is_404(client, auth_headers):
    _, headers = auth_headers()

    response = client.post("/feedback", json={"eventId": 999, "rating": 3}, headers=headers)

    assert response.status_code == 404


def test_feedback_does_not_require_registration(client, make_event, auth_headers):
    event_id = make_event()
    _, headers = auth_headers()

    response = client.post("/feedback", json={"eventId": event_id, "rating": 3}, headers=headers)

    assert response.status_code == 201


def test_event_feedback_is_public_and_includes_author(client, make_event, make_user, auth_headers):
    event_id = make_event()
    _, headers = auth_headers(make_user(name="Ann"))
    client.post("/feedback", json={"eventId": event_id, "rating": 4, "comment": "Nice"}, headers=headers)

    response = client.get(f"/events/{event_id}/feedback")

    assert response.status_code == 200
    [row] = response.get_json()
    assert row["name"] == "Ann"
    assert row["rating"] == 4
    assert row["comment"] == "Nice"


def test_event_feedback_for_event_without_feedback_is_empty(client):
    response = client.get("/events/999/feedback")

    assert response.status_code == 200
    assert response.get_json() == []


def test_feedback_rejects_infinite_rating(client, make_event, auth_headers):
    event_id = make_event()
    _, headers = auth_headers()

    response = client.post(
        "/feedback",
        data=f'{{"eventId": {event_id}, "rating": 1e400}}',
        content_type="application/json",
        headers=headers,
    )

    assert response.status_code == 400
    assert response.get_json()["message"] == "Rating must be between 1 and 5"
    assert Feedback.query.count() == 0


def test_feedback_rejects_non_string_comment(client, make_event, auth_headers):
    event_id = make_event()
    _, headers = auth_headers()

    response = client.post(
        "/feedback", json={"eventId": event_id, "rating": 4, "comment": {"text": "ok"}}, headers=headers
    )

    assert response.status_code == 400
    assert response.get_json()["message"] == "comment must be a string"
