"""
Tests for the server shell: health, fallbacks and error mapping.
"""

from fastapi.testclient import TestClient

from fittrack.core.settings import settings
from fittrack.main import create_app


class TestServerShell:

    def test_health(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_root_in_development(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.text == "Server is ready"

    def test_unknown_route(self, client):
        response = client.get("/api/nope")
        assert response.status_code == 404
        assert response.json() == {"error": "Not Found - /api/nope"}

    def test_cors_headers(self, client):
        response = client.get("/api/health", headers={"Origin": "http://localhost:3000"})
        assert "access-control-allow-origin" in response.headers

    def test_unhandled_exception_is_json_500(self):
        app = create_app()

        @app.get("/api/explode")
        def explode():
            raise RuntimeError("kaboom")

        test_client = TestClient(app, raise_server_exceptions=False)
        response = test_client.get("/api/explode")
        assert response.status_code == 500
        assert response.json() == {"error": "Internal Server Error"}


class TestProductionFrontend:
    """Pre-built front end served in production mode."""

    def _client(self, monkeypatch, tmp_path):
        (tmp_path / "index.html").write_text("<html>app</html>")
        (tmp_path / "static").mkdir()
        (tmp_path / "static" / "main.js").write_text("console.log('hi')")
        monkeypatch.setattr(settings, "ENVIRONMENT", "production")
        monkeypatch.setattr(settings, "FRONTEND_BUILD_DIR", str(tmp_path))
        return TestClient(create_app())

    def test_serves_existing_files(self, monkeypatch, tmp_path):
        client = self._client(monkeypatch, tmp_path)
        response = client.get("/static/main.js")
        assert response.status_code == 200
        assert "console.log" in response.text

    def test_spa_fallback(self, monkeypatch, tmp_path):
        client = self._client(monkeypatch, tmp_path)
        for path in ("/", "/dashboard/meals"):
            response = client.get(path)
            assert response.status_code == 200
            assert response.text == "<html>app</html>"

    def test_api_paths_do_not_fall_back(self, monkeypatch, tmp_path):
        client = self._client(monkeypatch, tmp_path)
        response = client.get("/api/unknown")
        assert response.status_code == 404
        assert response.json()["error"].startswith("Not Found")

    def test_api_routes_still_win(self, monkeypatch, tmp_path):
        client = self._client(monkeypatch, tmp_path)
        assert client.get("/api/health").json() == {"status": "ok"}

    def test_unknown_write_is_not_found(self, monkeypatch, tmp_path):
        """Non-GET requests to unknown paths keep the JSON 404 shape."""
        client = self._client(monkeypatch, tmp_path)
        for method, path in [("POST", "/dashboard"), ("DELETE", "/api/unknown"), ("PUT", "/")]:
            response = client.request(method, path)
            assert response.status_code == 404
            assert response.json() == {"error": f"Not Found - {path}"}

    def test_write_routes_still_win(self, monkeypatch, tmp_path):
        client = self._client(monkeypatch, tmp_path)
        response = client.post("/api/askAI", json={"messages": [{"role": "user", "content": "workout"}]})
        assert response.status_code == 200
