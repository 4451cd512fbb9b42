"""
Shared fixtures: a throwaway SQLite database and upload directory
"""
import os
import sys
import shutil
import tempfile
import pytest

# Configure the app before it is imported
TEST_DIR = tempfile.mkdtemp(prefix="profile_api_tests_")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(TEST_DIR, 'test.db')}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["UPLOAD_DIR"] = os.path.join(TEST_DIR, "uploads")
os.environ["LOG_LEVEL"] = "WARNING"

# Add parent directory to path
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from fastapi.testclient import TestClient

from profile_api.config import settings
from profile_api.database import Base, SessionLocal, engine
from profile_api.main import app

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


@pytest.fixture()
def client():
    Base.metadata.drop_all(bind=engine)
    shutil.rmtree(settings.UPLOAD_DIR, ignore_errors=True)
    # Lifespan creates the tables and the upload directory
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def db(client):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def register_user(client):
    """Register a user through the API, returning the response"""
    def _register(username="a", email="a@x.com", password="p1", role=None, photo=None):
        data = {"username": username, "email": email, "password": password}
        if role is not None:
            data["role"] = role
        files = None
        if photo is not None:
            files = {"photo": ("me.png", photo, "image/png")}
        return client.post("/register", data=data, files=files)

    return _register


@pytest.fixture()
def login(client):
    def _login(email="a@x.com", password="p1"):
        return client.post("/login", json={"email": email, "password": password})

    return _login
