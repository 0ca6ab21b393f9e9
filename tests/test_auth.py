def test_register_login_logout(client):
    r = client.post("/api/auth/register", json={"name": "Ana", "email": "Ana@Example.com", "password": "password123"})
    assert r.status_code == 201, r.data
    assert r.get_json()["user"]["email"] == "ana@example.com"

    r = client.post("/api/auth/login", json={"email": "ana@example.com", "password": "password123"})
    assert r.status_code == 200, r.data
    token = r.get_json()["token"]

    r = client.post("/api/auth/logout", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 200


def test_register_rejects_duplicate_email_and_short_password(client, headers):
    r = client.post("/api/auth/register", json={"email": "user@example.com", "password": "password123"})
    assert r.status_code == 409
    assert r.get_json()["error"]["code"] == "EMAIL_IN_USE"

    r = client.post("/api/auth/register", json={"email": "new@example.com", "password": "short"})
    assert r.status_code == 400


def test_login_wrong_password(client, headers):
    r = client.post("/api/auth/login", json={"email": "user@example.com", "password": "nope-nope"})
    assert r.status_code == 401
    assert r.get_json()["error"]["code"] == "INVALID_CREDENTIALS"


def test_protected_routes_require_token(client):
    for path in ["/api/foods", "/api/dashboard", "/api/templates", "/api/user/preferences"]:
        r = client.get(path)
        assert r.status_code == 401, path
        assert r.get_json()["error"]["message"] == "Unauthorized"

    r = client.get("/api/foods", headers={"Authorization": "Bearer not-a-token"})
    assert r.status_code == 401


def test_cross_user_access_is_not_found(client, headers, other_headers, make_food):
    food = make_food(headers, name="Private")

    r = client.get(f"/api/foods/{food['id']}", headers=other_headers)
    assert r.status_code == 404
    r = client.delete(f"/api/foods/{food['id']}", headers=other_headers)
    assert r.status_code == 404

    r = client.get(f"/api/foods/{food['id']}", headers=headers)
    assert r.status_code == 200


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.get_json()["database"] == "healthy"
