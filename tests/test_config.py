"""Unit tests for configuration, the Supabase client, logging and /health."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient


class TestSettings:
    """Settings loading via pydantic-settings."""

    def test_settings_loads_required_fields(self) -> None:
        """Given env vars are set, settings loads without error."""
        env_overrides = {
            "SUPABASE_URL": "https://test.supabase.co",
            "SUPABASE_KEY": "test-key-123",
            "CANDIDATES_COLLECTION": "interviewees",
        }
        with patch.dict("os.environ", env_overrides, clear=False):
            from app.core.config import Settings

            s = Settings()  # type: ignore[call-arg]
            assert s.SUPABASE_URL == "https://test.supabase.co"
            assert s.SUPABASE_KEY == "test-key-123"
            assert s.CANDIDATES_COLLECTION == "interviewees"

    def test_settings_defaults(self) -> None:
        """Given minimal env vars, defaults are applied correctly."""
        env_overrides = {
            "SUPABASE_URL": "https://test.supabase.co",
            "SUPABASE_KEY": "test-key",
        }
        with patch.dict("os.environ", env_overrides, clear=False):
            from app.core.config import Settings
            from app.core.constants import DEFAULT_JOB_ROLES

            s = Settings()  # type: ignore[call-arg]
            assert s.CANDIDATES_COLLECTION == "candidates"
            assert s.ALLOWED_ORIGINS == "*"
            assert s.LOG_LEVEL == "INFO"
            assert s.job_roles == DEFAULT_JOB_ROLES

    def test_job_roles_are_split_and_trimmed(self) -> None:
        env_overrides = {
            "SUPABASE_URL": "https://test.supabase.co",
            "SUPABASE_KEY": "test-key",
            "JOB_ROLES": " Engineer, Designer ,,Recruiter",
        }
        with patch.dict("os.environ", env_overrides, clear=False):
            from app.core.config import Settings

            s = Settings()  # type: ignore[call-arg]
            assert s.job_roles == ("Engineer", "Designer", "Recruiter")


class TestSupabaseClient:
    """Shared async Supabase client."""

    @pytest.mark.asyncio
    async def test_get_supabase_returns_client(self) -> None:
        mock_client = MagicMock()
        with patch("app.db.supabase.acreate_client", AsyncMock(return_value=mock_client)):
            import app.db.supabase as supa_mod

            supa_mod._client = None
            client = await supa_mod.get_supabase()
            assert client is mock_client
            supa_mod._client = None

    @pytest.mark.asyncio
    async def test_get_supabase_is_created_once(self) -> None:
        mock_client = MagicMock()
        with patch(
            "app.db.supabase.acreate_client", AsyncMock(return_value=mock_client)
        ) as mock_create:
            import app.db.supabase as supa_mod

            supa_mod._client = None
            first = await supa_mod.get_supabase()
            second = await supa_mod.get_supabase()
            assert first is second
            mock_create.assert_awaited_once()
            supa_mod._client = None


class TestHealthEndpoint:
    """GET /health reports database connectivity."""

    def test_health_connected(self, test_client: TestClient) -> None:
        table = MagicMock()
        table.select.return_value = table
        table.limit.return_value = table
        table.execute = AsyncMock(return_value=MagicMock(data=[]))
        client = MagicMock()
        client.table.return_value = table

        with patch("app.routers.health.get_supabase", AsyncMock(return_value=client)):
            response = test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["database"] == "connected"
        assert body["records"] == 0
        client.table.assert_called_once_with("candidates")

    def test_health_disconnected(self, test_client: TestClient) -> None:
        """Given Supabase is unreachable, /health returns 503."""
        with patch(
            "app.routers.health.get_supabase",
            AsyncMock(side_effect=Exception("Connection refused")),
        ):
            response = test_client.get("/health")

        assert response.status_code == 503
        body = response.json()
        assert body["status"] == "degraded"
        assert body["database"] == "disconnected"


class TestLogging:
    """Structured logging configuration."""

    def test_setup_logging_configures_root_logger(self) -> None:
        import logging

        from app.core.logging import setup_logging

        setup_logging()
        root = logging.getLogger()
        assert len(root.handlers) == 1
        fmt = root.handlers[0].formatter._fmt
        assert "%(levelname)" in fmt
        assert "%(asctime)" in fmt
        assert "%(name)" in fmt

    def test_setup_logging_level_override(self) -> None:
        import logging

        from app.core.logging import setup_logging

        setup_logging("debug")
        assert logging.getLogger().level == logging.DEBUG
        setup_logging()
