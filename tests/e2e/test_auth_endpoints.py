"""End-to-end tests for registration, login and the user endpoints."""

from tests.harness import create_client_fixture

client = create_client_fixture()

REGISTRATION = {
    "username": "alice",
    "email": "alice@example.com",
    "password": "password123",
}


class TestRegisterAndLogin:
    """Tests for /auth/register and /auth/login."""

    def test_register(self, client):
        response = client.post("/auth/register", json=REGISTRATION)

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "User registered successfully"
        assert body["token"]
        assert body["user"]["username"] == "alice"
        assert body["user"]["email"] == "alice@example.com"
        assert "passwordHash" not in body["user"]

    def test_register_duplicate_email(self, client):
        client.post("/auth/register", json=REGISTRATION)

        response = client.post(
            "/auth/register", json={**REGISTRATION, "username": "alice2"}
        )

        assert response.status_code == 409
        assert response.json()["message"] == "Email is already registered"

    def test_register_short_password(self, client):
        response = client.post(
            "/auth/register", json={**REGISTRATION, "password": "short"}
        )

        assert response.status_code == 400

    def test_register_malformed_body(self, client):
        response = client.post(
            "/auth/register",
            content="not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert "message" in response.json()

    def test_login(self, client):
        client.post("/auth/register", json=REGISTRATION)

        response = client.post(
            "/auth/login",
            json={"email": "alice@example.com", "password": "password123"},
        )

        assert response.status_code == 200
        assert response.json()["message"] == "Login successful"
        assert response.json()["token"]

    def test_login_wrong_password(self, client):
        client.post("/auth/register", json=REGISTRATION)

        response = client.post(
            "/auth/login",
            json={"email": "alice@example.com", "password": "wrong-password"},
        )

        assert response.status_code == 401
        assert response.json() == {"message": "Invalid email or password"}


class TestAccountEndpoints:
    """Tests for password change and the current user's profile."""

    def _token(self, client) -> dict[str, str]:
        token = client.post("/auth/register", json=REGISTRATION).json()["token"]
        return {"Authorization": f"Bearer {token}"}

    def test_profile(self, client):
        headers = self._token(client)

        response = client.get("/user/profile", headers=headers)

        assert response.status_code == 200
        assert response.json()["user"]["username"] == "alice"
        assert response.json()["user"]["role"] == "user"

    def test_profile_requires_token(self, client):
        response = client.get("/user/profile")

        assert response.status_code == 401

    def test_change_password(self, client):
        headers = self._token(client)

        response = client.put(
            "/auth/change-password",
            json={"currentPassword": "password123", "newPassword": "new-password"},
            headers=headers,
        )

        assert response.status_code == 200
        assert response.json() == {"message": "Password changed successfully"}
        login = client.post(
            "/auth/login",
            json={"email": "alice@example.com", "password": "new-password"},
        )
        assert login.status_code == 200

    def test_change_password_wrong_current(self, client):
        headers = self._token(client)

        response = client.put(
            "/auth/change-password",
            json={"currentPassword": "not-it", "newPassword": "new-password"},
            headers=headers,
        )

        assert response.status_code == 401
        assert response.json() == {"message": "Current password is incorrect"}

    def test_my_comments(self, client):
        headers = self._token(client)
        journal_id = client.post(
            "/journals", json={"title": "Day one", "content": "Body"}, headers=headers
        ).json()["id"]
        client.post(
            f"/journals/{journal_id}/comments",
            json={"content": "Note to self"},
            headers=headers,
        )

        response = client.get("/user/comments", headers=headers)

        assert response.status_code == 200
        comments = response.json()["comments"]
        assert [c["content"] for c in comments] == ["Note to self"]
        assert comments[0]["journal"] == {"id": journal_id, "title": "Day one"}

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
