import jwt

from outreach.config import settings
from outreach.models.user import User
from outreach.services.user_service import seed_admin


class TestUsers:
    def _create(self, client, username="alice", password="s3cret", role="MEMBER"):
        return client.post("/api/users", json={"username": username, "password": password, "role": role})

    def test_create_user_hides_password(self, client):
        r = self._create(client)
        assert r.status_code == 200
        user = r.json()["user"]
        assert user["username"] == "alice"
        assert user["role"] == "MEMBER"
        assert "password" not in user
        assert "passwordHash" not in user

    def test_password_is_hashed_at_rest(self, client, db):
        self._create(client)
        stored = db.query(User).filter(User.username == "alice").one()
        assert stored.password_hash != "s3cret"
        assert stored.password_hash.startswith("$argon2")

    def test_create_user_missing_fields(self, client):
        r = client.post("/api/users", json={"username": "bob"})
        assert r.status_code == 400
        assert r.json()["detail"] == "Missing fields"

    def test_create_user_duplicate_username(self, client):
        self._create(client)
        r = self._create(client, password="other")
        assert r.status_code == 400
        assert r.json()["detail"] == "Username already exists"

    def test_list_and_delete(self, client):
        user_id = self._create(client).json()["user"]["id"]
        self._create(client, username="bob")

        users = client.get("/api/users").json()["users"]
        assert {u["username"] for u in users} == {"alice", "bob"}

        r = client.delete(f"/api/users/{user_id}")
        assert r.json() == {"success": True, "id": user_id}
        assert len(client.get("/api/users").json()["users"]) == 1


class TestLogin:
    def _create(self, client):
        return client.post("/api/users", json={"username": "alice", "password": "s3cret", "role": "ADMIN"})

    def test_login_returns_token(self, client):
        user_id = self._create(client).json()["user"]["id"]

        r = client.post("/api/users/login", json={"username": "alice", "password": "s3cret"})
        assert r.status_code == 200
        data = r.json()
        assert data["success"] is True
        assert data["user"]["id"] == user_id
        payload = jwt.decode(data["token"], settings.jwt_secret, algorithms=[settings.jwt_algorithm])
        assert payload["id"] == user_id
        assert payload["role"] == "ADMIN"

    def test_login_wrong_password(self, client):
        self._create(client)
        r = client.post("/api/users/login", json={"username": "alice", "password": "wrong"})
        assert r.status_code == 401

    def test_login_unknown_user(self, client):
        r = client.post("/api/users/login", json={"username": "nobody", "password": "x"})
        assert r.status_code == 401

    def test_me_restores_session(self, client):
        self._create(client)
        token = client.post("/api/users/login", json={"username": "alice", "password": "s3cret"}).json()["token"]

        r = client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})
        assert r.status_code == 200
        assert r.json()["user"]["username"] == "alice"

    def test_me_without_token(self, client):
        assert client.get("/api/users/me").status_code == 401

    def test_me_bad_format(self, client):
        assert client.get("/api/users/me", headers={"Authorization": "Bearer"}).status_code == 401

    def test_me_invalid_token(self, client):
        r = client.get("/api/users/me", headers={"Authorization": "Bearer not-a-jwt"})
        assert r.status_code == 401

    def test_me_deleted_user(self, client):
        user_id = self._create(client).json()["user"]["id"]
        token = client.post("/api/users/login", json={"username": "alice", "password": "s3cret"}).json()["token"]
        client.delete(f"/api/users/{user_id}")

        r = client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})
        assert r.status_code == 404


class TestAdminSeed:
    def test_seed_admin_once(self, db):
        admin = seed_admin(db)
        assert admin is not None
        assert admin.username == settings.admin_username
        assert admin.role == "ADMIN"
        assert seed_admin(db) is None
        assert db.query(User).count() == 1

    def test_seeded_admin_can_log_in(self, client, db):
        seed_admin(db)
        r = client.post("/api/users/login", json={
            "username": settings.admin_username,
            "password": settings.admin_password,
        })
        assert r.status_code == 200
