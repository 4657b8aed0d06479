from eventhub.extensions import db
from eventhub.models import Notification


def test_notifications_list_newest_first_with_event_title(client, make_event, auth_headers):
    first = make_event(title="First")
    second = make_event(title="Second")
    user, headers = auth_headers()
    client.post("/registerEvent", json={"eventId": first}, headers=headers)
    client.post("/registerEvent", json={"eventId": second}, headers=headers)
    db.session.add(Notification(user_id=user["id"], message="Welcome aboard"))
    db.session.commit()

    response = client.get("/notifications", headers=headers)

    assert response.status_code == 200
    body = response.get_json()
    assert [n["message"] for n in body] == [
        "Welcome aboard",
        "You have successfully registered for Second",
        "You have successfully registered for First",
    ]
    assert body[0]["eventTitle"] is None
    assert body[1]["eventTitle"] == "Second"
    assert all(n["isRead"] is False for n in body)


def test_notifications_are_private(client, make_event, auth_headers):
    event_id = make_event()
    _, owner = auth_headers()
    _, stranger = auth_headers()
    client.post("/registerEvent", json={"eventId": event_id}, headers=owner)

    assert client.get("/notifications", headers=stranger).get_json() == []


def test_mark_own_notification_read(client, make_event, auth_headers):
    event_id = make_event()
    _, headers = auth_headers()
    client.post("/registerEvent", json={"eventId": event_id}, headers=headers)
    notification_id = client.get("/notifications", headers=headers).get_json()[0]["id"]

    response = client.put(f"/notifications/{notification_id}/read", headers=headers)

    assert response.status_code == 200
    assert db.session.get(Notification, notification_id).is_read is True


def test_marking_another_users_notification_is_404(client, make_event, auth_headers):
    event_id = make_event()
    _, owner = auth_headers()
    _, stranger = auth_headers()
    client.post("/registerEvent", json={"eventId": event_id}, headers=owner)
    notification_id = client.get("/notifications", headers=owner).get_json()[0]["id"]

    response = client.put(f"/notifications/{notification_id}/read", headers=stranger)

    assert response.status_code == 404
    assert response.get_json() == {"message": "Notification not found"}
    assert db.session.get(Notification, notification_id).is_read is False


def test_mark_all_read(client, make_event, auth_headers):
    _, headers = auth_headers()
    for title in ("One", "Two"):
        client.post("/registerEvent", json={"eventId": make_event(title=title)}, headers=headers)

    response = client.put("/notifications/read-all", headers=headers)

    assert response.status_code == 200
    assert response.get_json()["updated"] == 2
    assert all(n["isRead"] for n in client.get("/notifications", headers=headers).get_json())
