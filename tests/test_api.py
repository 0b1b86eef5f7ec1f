"""API endpoint tests for authentication and users."""

from datetime import timedelta

from sqlalchemy.exc import OperationalError

from src.api.dependencies import get_user_store
from src.main import app
from src.models.user import User
from src.services.auth import issue_token, verify_token


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_register_user(client):
    """Test user registration."""
    response = client.post(
        "/register",
        json={"name": "New User", "email": "newuser@example.com", "password": "password123"},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "success"
    assert body["message"] == "User registered"
    user = body["data"]["user"]
    assert user["name"] == "New User"
    assert user["email"] == "newuser@example.com"
    assert user["avatar"] == "https://default-avatar-url.jpg"
    assert "createdAt" in user
    assert "password" not in user
    assert "passwordHash" not in user
    assert body["data"]["token"]


def test_register_with_avatar(client):
    """Test that a supplied avatar is kept."""
    response = client.post(
        "/register",
        json={
            "name": "Avatar User",
            "email": "avatar@example.com",
            "password": "password123",
            "avatar": "https://example.com/me.png",
        },
    )
    assert response.status_code == 201
    assert response.json()["data"]["user"]["avatar"] == "https://example.com/me.png"


def test_register_duplicate_email(client, auth_headers, db):
    """Test registration with duplicate email fails and stores nothing."""
    response = client.post(
        "/register",
        json={"name": "Duplicate", "email": auth_headers.email, "password": "password123"},
    )
    assert response.status_code == 400
    assert response.json() == {"status": "fail", "message": "Email already in use"}
    assert db.query(User).filter(User.email == auth_headers.email).count() == 1


def test_register_missing_fields(client):
    """Test registration requires name, email and password."""
    for payload in (
        {"email": "a@example.com", "password": "password123"},
        {"name": "A", "password": "password123"},
        {"name": "A", "email": "a@example.com", "password": ""},
    ):
        response = client.post("/register", json=payload)
        assert response.status_code == 400
        assert response.json()["status"] == "fail"
        assert response.json()["message"] == "Name, email, and password are required"


def test_register_malformed_body(client):
    """Test a non-JSON body is a validation failure."""
    response = client.post(
        "/register", content="not json", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400
    assert response.json()["status"] == "fail"


def test_login(client, auth_headers):
    """Test user login returns a token for the registered user."""
    response = client.post(
        "/login", json={"email": auth_headers.email, "password": "testpass123"}
    )
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "success"
    assert body["message"] == "User logged in"

    claims = verify_token(body["data"]["token"])
    assert claims["sub"] == auth_headers.user_id
    assert claims["email"] == auth_headers.email
    assert claims["name"] == "Test User"


def test_login_wrong_password(client, auth_headers):
    """Test login with wrong password."""
    response = client.post("/login", json={"email": auth_headers.email, "password": "wrongpass"})
    assert response.status_code == 400
    assert response.json() == {"status": "fail", "message": "Invalid email or password"}


def test_login_unknown_email(client):
    """Test login with an email nobody registered."""
    response = client.post(
        "/login", json={"email": "nobody@example.com", "password": "password123"}
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid email or password"


def test_login_missing_fields(client):
    """Test login requires email and password."""
    response = client.post("/login", json={"email": "test@example.com"})
    assert response.status_code == 400
    assert response.json()["message"] == "Email and password are required"


def test_get_users(client, register_user):
    """Test listing users never exposes passwords."""
    register_user(name="Alice", email="alice@example.com")
    register_user(name="Bob", email="bob@example.com")

    response = client.get("/users")
    assert response.status_code == 200
    users = response.json()["data"]["users"]
    assert {u["email"] for u in users} == {"alice@example.com", "bob@example.com"}
    for user in users:
        assert set(user) == {"id", "name", "email", "avatar"}


def test_get_current_user(client, auth_headers):
    """Test getting current user info."""
    response = client.get("/users/me", headers=auth_headers)
    assert response.status_code == 200
    user = response.json()["data"]["user"]
    assert user["id"] == auth_headers.user_id
    assert user["email"] == auth_headers.email
    assert "password" not in user


def test_get_current_user_deleted(client, auth_headers, db):
    """Test a valid token for a removed user gives 404."""
    db.delete(db.get(User, auth_headers.user_id))
    db.commit()

    response = client.get("/users/me", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["message"] == "User not found"


def test_get_user_by_id(client, auth_headers):
    """Test getting a specific user."""
    response = client.get(f"/users/{auth_headers.user_id}", headers=auth_headers)
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "User retrieved"
    user = body["data"]["user"]
    assert set(user) == {"id", "name", "email", "avatar", "createdAt"}


def test_get_user_not_found(client, auth_headers):
    """Test unknown and malformed user ids give 404."""
    response = client.get("/users/00000000-0000-0000-0000-000000000000", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["message"] == "User not found"

    response = client.get("/users/not-an-id", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["status"] == "fail"


def test_protected_endpoint_without_token(client):
    """Test that a missing bearer token gives 401."""
    for path in ("/tips", "/users/me", "/users/00000000-0000-0000-0000-000000000000"):
        response = client.get(path)
        assert response.status_code == 401
        assert response.json()["status"] == "fail"

    response = client.get("/tips", headers={"Authorization": "Basic dXNlcjpwYXNz"})
    assert response.status_code == 401


def test_protected_endpoint_with_invalid_token(client):
    """Test that a malformed token gives 403."""
    response = client.get("/tips", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 403
    assert response.json()["status"] == "fail"


def test_protected_endpoint_with_expired_token(client, auth_headers):
    """Test that an expired token gives 403."""
    token = issue_token({"sub": auth_headers.user_id}, ttl=timedelta(seconds=-10))
    response = client.get("/users/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 403


def test_token_without_subject_is_rejected(client):
    """Test that a signed token lacking a user id gives 403."""
    token = issue_token({"email": "test@example.com"})
    response = client.get("/tips", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 403


def test_database_failure_returns_error_envelope(client):
    """Test that store failures become a 500 error envelope."""

    class BrokenUserStore:
        def list_all(self):
            raise OperationalError("SELECT", {}, Exception("database is unavailable"))

    app.dependency_overrides[get_user_store] = BrokenUserStore
    response = client.get("/users")

    assert response.status_code == 500
    body = response.json()
    assert body["status"] == "error"
    assert "database is unavailable" in body["error"]


def test_unknown_route(client):
    """Test unknown routes use the envelope."""
    response = client.get("/does-not-exist")
    assert response.status_code == 404
    assert response.json()["status"] == "fail"


def test_get_current_user_with_malformed_subject(client):
    """Test a token whose user id is not a record id reads as a missing user."""
    token = issue_token({"sub": "abc"})
    response = client.get("/users/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 404
    assert response.json() == {"status": "fail", "message": "User not found"}
