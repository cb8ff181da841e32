"""Tests for settings and app wiring."""

from accounts.common.config import Settings


class TestSettings:

    def test_defaults(self):
        s = Settings(_env_file=None)
        assert s.database_type == "sqlite"
        assert s.token_expire_minutes is None
        assert s.expose_error_details is True

    def test_postgres_url(self):
        s = Settings(_env_file=None, database_url="postgresql+asyncpg://u:p@db:5432/accounts")
        assert s.database_type == "postgresql"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("TOKEN_EXPIRE_MINUTES", "15")
        monkeypatch.setenv("EXPOSE_ERROR_DETAILS", "false")
        s = Settings(_env_file=None)
        assert s.token_expire_minutes == 15
        assert s.expose_error_details is False

    def test_cors_origin_list(self):
        s = Settings(_env_file=None, cors_origins="http://a.test, http://b.test,")
        assert s.cors_origin_list == ["http://a.test", "http://b.test"]


class TestRoutes:

    async def test_user_routes_published(self, client):
        response = await client.get("/openapi.json")

        paths = response.json()["paths"]
        assert set(paths["/api/users"]) == {"get", "post"}
        assert set(paths["/api/users/{user_id}"]) == {"put", "delete"}
        assert set(paths["/api/users/auth"]) == {"post"}

    async def test_health(self, client):
        response = await client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
