from datetime import timedelta

from flask_jwt_extended import create_access_token

from rentdesk.extensions import db


def test_login_returns_token_and_user(client, owner):
    res = client.post("/api/auth/login", json={"phone": owner.phone, "password": "secret123"})
    assert res.status_code == 200
    body = res.get_json()
    assert body["token"]
    assert body["user"]["phone"] == owner.phone
    assert "password_hash" not in body["user"]


def test_login_rejects_bad_password(client, owner):
    res = client.post("/api/auth/login", json={"phone": owner.phone, "password": "nope"})
    assert res.status_code == 401
    assert res.get_json() == {"error": "unauthorized", "message": "Invalid credentials"}


def test_login_requires_phone_and_password(client):
    res = client.post("/api/auth/login", json={"phone": ""})
    assert res.status_code == 400
    assert res.get_json()["error"] == "validation_error"


def test_profile_with_token(client, owner, auth_headers):
    res = client.get("/api/auth/profile", headers=auth_headers)
    assert res.status_code == 200
    assert res.get_json()["id"] == owner.id


def test_missing_token_is_401(client):
    res = client.get("/api/auth/profile")
    assert res.status_code == 401
    assert res.get_json()["message"] == "Access token required"


def test_invalid_token_is_403(client):
    res = client.get("/api/auth/profile", headers={"Authorization": "Bearer not-a-jwt"})
    assert res.status_code == 403
    assert res.get_json()["message"] == "Invalid or expired token"


def test_expired_token_is_403(client, owner):
    token = create_access_token(identity=str(owner.id), expires_delta=timedelta(seconds=-1))
    res = client.get("/api/auth/profile", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 403


def test_token_for_deleted_user_is_401(client, owner, auth_headers):
    db.session.delete(owner)
    db.session.commit()
    res = client.get("/api/auth/profile", headers=auth_headers)
    assert res.status_code == 401


class TestRegister:
    payload = {"name": "New Owner", "phone": "+250788333333", "password": "secret123"}

    def test_admin_registers_owner(self, client, admin_headers):
        res = client.post("/api/auth/register", json=self.payload, headers=admin_headers)
        assert res.status_code == 201
        body = res.get_json()
        assert body["role"] == "owner"

        login = client.post("/api/auth/login", json={"phone": self.payload["phone"], "password": "secret123"})
        assert login.status_code == 200

    def test_owner_cannot_register(self, client, auth_headers):
        res = client.post("/api/auth/register", json=self.payload, headers=auth_headers)
        assert res.status_code == 403
        assert res.get_json()["error"] == "forbidden"

    def test_duplicate_phone_is_409(self, client, admin_headers, owner):
        res = client.post(
            "/api/auth/register",
            json={**self.payload, "phone": owner.phone},
            headers=admin_headers,
        )
        assert res.status_code == 409
        assert res.get_json()["error"] == "duplicate"

    def test_short_password_is_400(self, client, admin_headers):
        res = client.post("/api/auth/register", json={**self.payload, "password": "123"}, headers=admin_headers)
        assert res.status_code == 400


def test_health(client):
    res = client.get("/api/health")
    assert res.status_code == 200
    body = res.get_json()
    assert body["success"] is True
    assert body["timestamp"].endswith("Z")


def test_unknown_route_is_json_404(client):
    res = client.get("/api/nope")
    assert res.status_code == 404
    assert res.get_json()["error"] == "not_found"
