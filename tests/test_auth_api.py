"""
API tests for registration and login
"""
import asyncio
import time

import httpx
import pytest

from profile_api.config import settings
from profile_api.models import User
from profile_api.main import app
from profile_api.services import UserService, user_service
from profile_api.utils import verify_password, verify_token

from conftest import PNG_BYTES


class TestRegistration:
    """Test POST /register"""

    def test_register_success(self, register_user, db):
        """Registering stores a user with a hashed password and default role"""
        response = register_user()

        assert response.status_code == 201, f"Registration failed: {response.text}"
        assert response.json()["message"] == "User registered successfully"
        assert "token" not in response.json(), "Registration must not log in"

        user = db.query(User).filter(User.email == "a@x.com").one()
        assert user.username == "a"
        assert user.role == "user"
        assert user.photo is None
        assert user.password_hash != "p1", "Password stored in plain text"
        assert user.uuid and user.uuid != str(user.id)

    def test_duplicate_email_rejected(self, register_user, db):
        """Second registration with the same email yields 400 and no new user"""
        first = register_user()
        second = register_user(username="b")

        assert first.status_code == 201
        assert second.status_code == 400
        assert second.json()["message"] == "Email already in use."
        assert db.query(User).count() == 1

    def test_email_normalized(self, register_user, db):
        """Emails are stored lowercased, so case variants collide"""
        assert register_user(email="Mixed@X.com").status_code == 201
        assert register_user(email="mixed@x.com").status_code == 400

        assert db.query(User).one().email == "mixed@x.com"

    def test_register_with_role(self, register_user, db):
        response = register_user(role="manager")

        assert response.status_code == 201
        assert db.query(User).one().role == "manager"

    def test_register_invalid_role(self, register_user, db):
        """Roles outside admin/user/manager are rejected"""
        response = register_user(role="superuser")

        assert response.status_code == 400
        assert db.query(User).count() == 0

    def test_register_missing_field(self, client, db):
        """Missing password is a 400, not a 422"""
        response = client.post("/register", data={"username": "a", "email": "a@x.com"})

        assert response.status_code == 400
        assert "message" in response.json()
        assert db.query(User).count() == 0

    def test_register_with_photo(self, client, register_user, db):
        """Photo is stored under the upload directory and served from /uploads"""
        response = register_user(photo=PNG_BYTES)
        assert response.status_code == 201

        user = db.query(User).one()
        assert user.photo.startswith("uploads/")
        assert user.photo.endswith(".png")

        served = client.get(f"/{user.photo}")
        assert served.status_code == 200
        assert served.content == PNG_BYTES

    def test_unique_index_is_the_conflict_signal(self, register_user, db, monkeypatch):
        """A registration that slips past the existence check still gets 400"""
        assert register_user().status_code == 201

        # Simulate a concurrent registration that passed the check before the first insert
        monkeypatch.setattr(UserService, "get_by_email", staticmethod(lambda db, email: None))
        response = register_user(username="racer", photo=PNG_BYTES)

        assert response.status_code == 400
        assert response.json()["message"] == "Email already in use."
        assert db.query(User).count() == 1
        assert list(settings.upload_path.iterdir()) == [], "Rejected photo left on disk"

    def test_blank_username_rejected(self, register_user, db):
        """Whitespace-only usernames are refused and their photo is not kept"""
        response = register_user(username="   ", photo=PNG_BYTES)

        assert response.status_code == 400
        assert response.json()["message"] == "Username is required"
        assert db.query(User).count() == 0
        assert list(settings.upload_path.iterdir()) == []


class TestLogin:
    """Test POST /login"""

    def test_login_success(self, register_user, login):
        """Login returns a token, the role and a public projection of the user"""
        register_user()
        response = login()

        assert response.status_code == 200, f"Login failed: {response.text}"
        data = response.json()
        assert data["token"], "Token is empty"
        assert data["role"] == "user"
        assert data["user"]["email"] == "a@x.com"
        assert data["user"]["username"] == "a"
        assert data["user"]["photo"] is None
        assert data["user"]["uuid"]
        assert "password" not in data["user"]
        assert "password_hash" not in data["user"]

    def test_token_claims(self, register_user, login, db):
        """Token carries uuid, username and role and expires after an hour"""
        register_user(role="admin")
        data = login().json()

        user = db.query(User).one()
        claims = verify_token(data["token"])
        assert claims is not None, "Token did not verify"
        assert claims["uuid"] == user.uuid
        assert claims["username"] == user.username
        assert claims["role"] == "admin"
        assert abs(claims["exp"] - (time.time() + 3600)) < 60

    def test_login_wrong_password(self, register_user, login):
        register_user()
        response = login(password="wrong")

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid credentials"
        assert "token" not in response.json()

    def test_login_unknown_user(self, login):
        response = login(email="nobody@x.com")

        assert response.status_code == 400
        assert response.json()["message"] == "User not found"

    def test_login_email_case_insensitive(self, register_user, login):
        register_user()

        assert login(email="A@X.COM").status_code == 200

    def test_login_missing_password(self, client):
        response = client.post("/login", json={"email": "a@x.com"})

        assert response.status_code == 400


class TestConcurrency:
    """Hashing and database work must not hold up other requests"""

    @pytest.mark.asyncio
    async def test_slow_login_does_not_block_health(self, register_user, monkeypatch):
        """A login stuck in password verification leaves /health responsive"""
        register_user()

        def slow_verify(plain_password, hashed_password):
            time.sleep(1)
            return verify_password(plain_password, hashed_password)

        monkeypatch.setattr(user_service, "verify_password", slow_verify)

        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
            async def timed_health():
                # Let the login reach verification first
                await asyncio.sleep(0.1)
                started = time.perf_counter()
                response = await client.get("/health")
                return response, time.perf_counter() - started

            login_response, (health_response, health_latency) = await asyncio.gather(
                client.post("/login", json={"email": "a@x.com", "password": "p1"}),
                timed_health()
            )

        assert login_response.status_code == 200
        assert health_response.status_code == 200
        assert health_latency < 0.5, f"/health waited {health_latency:.2f}s behind a login"
