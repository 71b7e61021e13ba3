import pytest


@pytest.mark.parametrize("resource, id_field, label", [
    ("tenants", "tenant_id", "Tenant"),
    ("licenses", "license_id", "License"),
])
def test_named_resource_crud(client, resource, id_field, label):
    r = client.post(f"/api/{resource}", json={"name": "Gold"})
    assert r.status_code == 201, r.text
    item_id = r.json()["data"][id_field]

    r = client.get(f"/api/{resource}/{item_id}")
    assert r.json()["data"]["name"] == "Gold"

    r = client.put(f"/api/{resource}/{item_id}", json={"name": "Platinum"})
    assert r.status_code == 200
    assert r.json()["message"] == f"{label} updated successfully"

    assert len(client.get(f"/api/{resource}").json()["data"]) == 1
    assert client.delete(f"/api/{resource}/{item_id}").status_code == 204
    r = client.get(f"/api/{resource}/{item_id}")
    assert r.status_code == 404
    assert r.json()["message"] == f"{label} with ID {item_id} not found."


@pytest.mark.parametrize("resource, label", [("tenants", "tenant"), ("licenses", "license")])
def test_named_resource_rejects_duplicates_and_blanks(client, resource, label):
    assert client.post(f"/api/{resource}", json={"name": "Basic"}).status_code == 201
    r = client.post(f"/api/{resource}", json={"name": "basic"})
    assert r.status_code == 400
    assert r.json()["message"] == f"A {label} with this name already exists"

    r = client.post(f"/api/{resource}", json={"name": ""})
    assert r.status_code == 400
    assert r.json()["message"] == f"{label.capitalize()} name is required"

    r = client.delete(f"/api/{resource}/-1")
    assert r.status_code == 400
    assert r.json()["message"] == f"Invalid {label} ID. Must be greater than 0."


def test_renaming_to_own_name_is_allowed(client):
    tid = client.post("/api/tenants", json={"name": "Same"}).json()["data"]["tenant_id"]
    r = client.put(f"/api/tenants/{tid}", json={"name": "Same"})
    assert r.status_code == 200
