import pytest
from fastapi.testclient import TestClient

from src.config import settings
from src.models import MANAGED_PASSWORD
from src.test.fake_identity import FakeIdentityClient
from src.test.utils_common_methods import TestUtils, API

utils = TestUtils()


@pytest.mark.nivel("bajo")
def test_register_creates_identity_and_linked_player(client: TestClient, identity: FakeIdentityClient):
    team = utils.create_team(client)

    res = client.post(f"{API}/auth/register", json={
        "email": "alice@example.com",
        "password": "secret123",
        "player_name": "Alice",
        "team_id": team["id"],
        "category": "Femenil",
    })

    assert res.status_code == 201
    data = res.json()["data"]
    assert data["user"]["email"] == "alice@example.com"
    assert data["user"]["user_metadata"] == {"player_name": "Alice"}
    assert data["player"]["auth_user_id"] == data["user"]["id"]
    assert data["player"]["email"] == "alice@example.com"
    assert data["player"]["team_id"] == team["id"]
    assert data["player"]["password"] == MANAGED_PASSWORD
    assert data["session"]["access_token"]
    assert "verify your account" in data["message"]
    assert "alice@example.com" in identity.users


@pytest.mark.nivel("bajo")
@pytest.mark.parametrize("payload", [
    {"password": "secret123"},
    {"email": "alice@example.com"},
    {"email": "alice@example.com", "password": ""},
])
def test_register_requires_email_and_password(client: TestClient, payload):
    res = client.post(f"{API}/auth/register", json=payload)

    assert res.status_code == 400
    assert res.json() == {"success": False, "error": "Email and password are required"}


@pytest.mark.nivel("bajo")
def test_register_with_email_in_use_returns_400(client: TestClient):
    utils.register_user(client, "alice@example.com")

    res = client.post(f"{API}/auth/register", json={
        "email": "alice@example.com", "password": "other-pass", "player_name": "Alice 2",
    })

    assert res.status_code == 400
    assert res.json() == {"success": False, "error": "User already registered"}


@pytest.mark.nivel("medio")
def test_register_rolls_back_identity_when_player_insert_fails(client: TestClient, identity: FakeIdentityClient):
    # Sin player_name el insert viola NOT NULL
    res = client.post(f"{API}/auth/register", json={"email": "bob@example.com", "password": "secret123"})

    assert res.status_code == 400
    assert res.json()["success"] is False
    assert "bob@example.com" not in identity.users
    assert len(identity.deleted_user_ids) == 1


@pytest.mark.nivel("medio")
def test_register_reports_failed_rollback(client: TestClient, identity: FakeIdentityClient):
    identity.fail_delete = True

    res = client.post(f"{API}/auth/register", json={"email": "bob@example.com", "password": "secret123"})

    assert res.status_code == 500
    assert "identity rollback failed" in res.json()["error"]
    assert "bob@example.com" in identity.users


@pytest.mark.nivel("bajo")
def test_login_success_returns_token_user_and_player(client: TestClient):
    registered = utils.register_user(client, "alice@example.com", player_name="Alice")

    res = client.post(f"{API}/auth/login", json={"email": "alice@example.com", "password": "secret123"})

    assert res.status_code == 200
    data = res.json()["data"]
    assert data["token"] == data["session"]["access_token"]
    assert data["user"]["id"] == registered["user"]["id"]
    assert data["player"]["id"] == registered["player"]["id"]


@pytest.mark.nivel("bajo")
def test_login_wrong_password(client: TestClient):
    utils.register_user(client, "alice@example.com")

    res = client.post(f"{API}/auth/login", json={"email": "alice@example.com", "password": "wrongpass"})

    assert res.status_code == 401
    assert res.json() == {"success": False, "error": "Invalid login credentials"}


@pytest.mark.nivel("bajo")
def test_login_unknown_email(client: TestClient):
    res = client.post(f"{API}/auth/login", json={"email": "nobody@example.com", "password": "secret123"})
    assert res.status_code == 401


@pytest.mark.nivel("bajo")
def test_login_requires_email_and_password(client: TestClient):
    res = client.post(f"{API}/auth/login", json={"email": "alice@example.com"})
    assert res.status_code == 400


@pytest.mark.nivel("medio")
def test_me_endpoint_with_valid_token(client: TestClient):
    utils.register_user(client, "alice@example.com", player_name="Alice")
    token = utils.login(client, "alice@example.com")

    res = client.get(f"{API}/auth/me", headers=utils.auth_headers(token))

    assert res.status_code == 200
    data = res.json()["data"]
    assert data["user"]["email"] == "alice@example.com"
    assert data["player"]["player_name"] == "Alice"


@pytest.mark.nivel("bajo")
def test_me_endpoint_without_token(client: TestClient):
    res = client.get(f"{API}/auth/me")

    assert res.status_code == 401
    assert res.json() == {"success": False, "error": "Missing or invalid authorization header"}


@pytest.mark.nivel("bajo")
def test_me_endpoint_with_invalid_token(client: TestClient):
    res = client.get(f"{API}/auth/me", headers=utils.auth_headers("expired"))

    assert res.status_code == 401
    assert res.json()["error"] == "Invalid or expired token"


@pytest.mark.nivel("medio")
def test_logout_invalidates_token(client: TestClient):
    utils.register_user(client, "alice@example.com")
    token = utils.login(client, "alice@example.com")

    res = client.post(f"{API}/auth/logout", headers=utils.auth_headers(token))
    assert res.status_code == 200
    assert res.json() == {"success": True, "message": "Logged out successfully"}

    assert client.get(f"{API}/auth/me", headers=utils.auth_headers(token)).status_code == 401


@pytest.mark.nivel("bajo")
def test_logout_without_session_is_a_success(client: TestClient):
    assert client.post(f"{API}/auth/logout").status_code == 200


@pytest.mark.nivel("bajo")
def test_logout_error_from_identity_service_returns_400(client: TestClient):
    res = client.post(f"{API}/auth/logout", headers=utils.auth_headers("unknown-session"))

    assert res.status_code == 400
    assert res.json()["success"] is False


@pytest.mark.nivel("bajo")
def test_forgot_password(client: TestClient, identity: FakeIdentityClient):
    res = client.post(f"{API}/auth/forgot-password", json={"email": "alice@example.com"})

    assert res.status_code == 200
    assert res.json() == {"success": True, "message": "Password reset email sent"}
    assert identity.reset_requests == [
        {"email": "alice@example.com", "redirect_to": settings.PASSWORD_RESET_REDIRECT_URL}
    ]


@pytest.mark.nivel("bajo")
def test_forgot_password_requires_email(client: TestClient):
    res = client.post(f"{API}/auth/forgot-password", json={})

    assert res.status_code == 400
    assert res.json()["error"] == "Email is required"
