import jwt

from licensing.utils.tokens import JwtSettings


def test_user_is_created_without_exposing_password(client, make_user):
    user = make_user("alice", password="pw-alice", role="Admin")
    assert "password" not in user
    assert user["role"] == "Admin"

    r = client.get(f"/api/users/{user['user_id']}")
    assert r.status_code == 200
    assert "password" not in r.json()["data"]

    r = client.get("/api/usersauth/alice")
    assert r.status_code == 200
    assert r.json()["data"]["user_id"] == user["user_id"]

    assert client.get("/api/usersauth/nobody").status_code == 404


def test_duplicate_username(client, make_user):
    make_user("bob")
    r = client.post("/api/users", json={"username": "bob", "email": "b2@example.com", "password": "x"})
    assert r.status_code == 400
    assert r.json()["message"] == "Username already exists"


def test_tenant_assignment_and_listing(client, make_user):
    a = make_user("t1")
    make_user("t2", tenant_id=8)

    r = client.put(f"/api/users/{a['user_id']}/tenant/8")
    assert r.status_code == 200
    assert r.json()["message"] == "User assigned to tenant successfully"
    assert r.json()["data"]["tenant_id"] == 8

    r = client.get("/api/users/tenant/8")
    assert sorted(u["username"] for u in r.json()["data"]) == ["t1", "t2"]

    r = client.get("/api/users/tenant/0")
    assert r.status_code == 400


def test_update_and_delete_user(client, make_user):
    u = make_user("carol")
    r = client.put(f"/api/users/{u['user_id']}", json={"email": "carol@new.example.com", "role": "Manager"})
    assert r.status_code == 200
    assert r.json()["data"]["email"] == "carol@new.example.com"
    assert r.json()["data"]["role"] == "Manager"

    assert client.delete(f"/api/users/{u['user_id']}").status_code == 204
    assert client.get(f"/api/users/{u['user_id']}").status_code == 404


def test_login_issues_token(client, make_user):
    user = make_user("dave", password="letmein", tenant_id=2)
    r = client.post("/api/auth/login", json={"username": "dave", "password": "letmein"})
    assert r.status_code == 200, r.text
    data = r.json()["data"]
    assert data["token_type"] == "Bearer"
    assert data["user_id"] == user["user_id"]
    assert data["expires_in"] > 0

    settings = JwtSettings.from_env()
    claims = jwt.decode(
        data["access_token"],
        settings.secret_key,
        algorithms=["HS256"],
        audience=settings.audience,
        issuer=settings.issuer,
    )
    assert claims["name"] == "dave"
    assert claims["tenant_id"] == 2


def test_login_and_verify_reject_bad_credentials(client, make_user):
    make_user("erin", password="right")
    r = client.post("/api/auth/login", json={"username": "erin", "password": "wrong"})
    assert r.status_code == 401
    assert r.json()["success"] is False
    assert r.json()["message"] == "Invalid username or password"

    r = client.post("/api/auth/verify", json={"username": "erin", "password": "right"})
    assert r.status_code == 200
    assert r.json()["data"]["username"] == "erin"

    r = client.post("/api/auth/verify", json={})
    assert r.status_code == 401
