def test_notification_defaults_and_status_filter(client):
    r = client.post("/api/notifications", json={"title": "Renewal", "message": "License expires soon"})
    assert r.status_code == 201, r.text
    first = r.json()["data"]
    assert first["status"] == "Unread"

    client.post("/api/notifications", json={"title": "Paid", "message": "Thanks", "status": "Read"})

    unread = client.get("/api/notifications/status/Unread").json()["data"]
    assert [n["title"] for n in unread] == ["Renewal"]
    assert len(client.get("/api/notifications").json()["data"]) == 2


def test_notification_update_replaces_message_and_status(client):
    nid = client.post(
        "/api/notifications", json={"title": "T", "message": "M", "status": "Read"}
    ).json()["data"]["notification_id"]

    r = client.put(f"/api/notifications/{nid}", json={"title": "T2", "message": "M2", "status": "Archived"})
    assert r.status_code == 200
    data = r.json()["data"]
    assert data == {**data, "title": "T2", "message": "M2", "status": "Archived"}

    # omitted status goes back to the default
    r = client.put(f"/api/notifications/{nid}", json={"title": "T3", "message": "M3"})
    assert r.json()["data"]["status"] == "Unread"

    r = client.put(f"/api/notifications/{nid}", json={"title": "T4"})
    assert r.status_code == 400
    assert r.json()["message"] == "Notification message is required"

    r = client.put(f"/api/notifications/{nid}", json={"title": " ", "message": "x"})
    assert r.status_code == 400
    assert r.json()["message"] == "Notification title is required"


def test_notification_field_lengths(client):
    r = client.post("/api/notifications", json={"title": "t" * 201, "message": "m"})
    assert r.status_code == 400
    assert r.json()["message"] == "Notification title must be at most 200 characters"
    r = client.post("/api/notifications", json={"title": "t", "message": "m", "status": "s" * 51})
    assert r.status_code == 400


def test_notification_required_fields_and_delete(client):
    r = client.post("/api/notifications", json={"title": "", "message": "x"})
    assert r.json()["message"] == "Notification title is required"
    r = client.post("/api/notifications", json={"title": "x", "message": "  "})
    assert r.json()["message"] == "Notification message is required"

    nid = client.post("/api/notifications", json={"title": "a", "message": "b"}).json()["data"]["notification_id"]
    assert client.delete(f"/api/notifications/{nid}").status_code == 204
    assert client.get(f"/api/notifications/{nid}").status_code == 404
