"""
Tests for account registration, login and profile routes.
"""


class TestRegistration:
    """POST /api/users"""

    def test_register_sets_cookie(self, client, register_user):
        response = register_user(client)
        assert response.status_code == 201
        body = response.json()
        assert body["email"] == "alex@example.com"
        assert "hashed_password" not in body
        assert "jwt" in response.cookies

    def test_duplicate_email(self, client, register_user):
        register_user(client)
        response = register_user(client, email="ALEX@example.com")
        assert response.status_code == 400
        assert response.json() == {"error": "User already exists"}

    def test_invalid_body(self, client):
        response = client.post("/api/users", json={"name": "Alex", "email": "not-an-email", "password": "secret123"})
        assert response.status_code == 400
        assert "email" in response.json()["error"]


class TestLogin:
    """POST /api/users/auth and /api/users/logout"""

    def test_login(self, client, make_client, register_user):
        register_user(client)
        other = make_client()
        response = other.post("/api/users/auth", json={"email": "alex@example.com", "password": "secret123"})
        assert response.status_code == 200
        assert response.json()["name"] == "Alex"
        assert other.get("/api/users/profile").status_code == 200

    def test_wrong_password(self, client, register_user):
        register_user(client)
        response = client.post("/api/users/auth", json={"email": "alex@example.com", "password": "nope-nope"})
        assert response.status_code == 401
        assert response.json() == {"error": "Invalid email or password"}

    def test_logout_clears_cookie(self, auth_client):
        response = auth_client.post("/api/users/logout")
        assert response.status_code == 200
        assert auth_client.get("/api/users/profile").status_code == 401

    def test_bearer_token(self, client, register_user, make_client):
        """The token is also accepted in an Authorization header."""
        token = register_user(client).cookies["jwt"]
        other = make_client()
        response = other.get("/api/users/profile", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 200

    def test_garbage_token(self, make_client):
        other = make_client()
        response = other.get("/api/users/profile", headers={"Authorization": "Bearer garbage"})
        assert response.status_code == 401
        assert response.json() == {"error": "Not authorized, token failed"}


class TestProfile:
    """/api/users/profile"""

    def test_requires_auth(self, client):
        response = client.get("/api/users/profile")
        assert response.status_code == 401
        assert response.json() == {"error": "Not authorized, no token"}

    def test_get_profile(self, auth_client):
        response = auth_client.get("/api/users/profile")
        assert response.status_code == 200
        assert response.json()["email"] == "alex@example.com"

    def test_update_profile(self, auth_client, make_client):
        response = auth_client.put("/api/users/profile", json={"name": "Alexandra", "password": "newsecret"})
        assert response.status_code == 200
        assert response.json()["name"] == "Alexandra"

        other = make_client()
        login = other.post("/api/users/auth", json={"email": "alex@example.com", "password": "newsecret"})
        assert login.status_code == 200

    def test_update_email_conflict(self, auth_client, make_client, register_user):
        register_user(make_client(), name="Sam", email="sam@example.com")
        response = auth_client.put("/api/users/profile", json={"email": "sam@example.com"})
        assert response.status_code == 400

    def test_delete_profile(self, client, register_user, make_client):
        """A deleted account's token is no longer accepted."""
        token = register_user(client).cookies["jwt"]
        client.post("/api/user/status", json={"age": 30})
        response = client.delete("/api/users/profile")
        assert response.status_code == 204
        assert client.get("/api/users/profile").status_code == 401

        other = make_client()
        headers = {"Authorization": f"Bearer {token}"}
        for method, path, body in [
            ("POST", "/api/user/status", {"age": 30}),
            ("POST", "/api/user/mealplan", {"title": "Leftover", "day": "monday"}),
            ("GET", "/api/users/profile", None),
        ]:
            response = other.request(method, path, json=body, headers=headers)
            assert response.status_code == 401
            assert response.json() == {"error": "Not authorized, token failed"}
