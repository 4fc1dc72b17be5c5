"""
Tests for application bootstrap: lifespan and health endpoints.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from hiring_api.core.auth import session_tokens
from hiring_api.core.security import verify_password
from hiring_api.main import app, lifespan
from hiring_api.modules.users.models import AdminUser
from hiring_api.modules.users.repository import UserRepository


class TestLifespan:
    """Tests for startup and shutdown."""

    @pytest.mark.asyncio
    async def test_startup_seeds_admin(self, session_maker):
        with (
            patch("hiring_api.main.init_db", new_callable=AsyncMock) as mock_init,
            patch("hiring_api.main.close_db", new_callable=AsyncMock) as mock_close,
            patch("hiring_api.main.async_session_maker", session_maker),
        ):
            async with lifespan(app):
                async with session_maker() as db:
                    admin = await UserRepository.find_admin(db, "admin")
                session_tokens.issue()
                assert session_tokens.current() is not None

        mock_init.assert_awaited_once()
        mock_close.assert_awaited_once()
        assert admin is not None
        assert verify_password("password123", admin.password_hash)
        assert session_tokens.current() is None

    @pytest.mark.asyncio
    async def test_restart_does_not_duplicate_admin(self, session_maker):
        with (
            patch("hiring_api.main.init_db", new_callable=AsyncMock),
            patch("hiring_api.main.close_db", new_callable=AsyncMock),
            patch("hiring_api.main.async_session_maker", session_maker),
        ):
            for _ in range(2):
                async with lifespan(app):
                    pass

        async with session_maker() as db:
            count = await db.scalar(select(func.count()).select_from(AdminUser))
        assert count == 1

    @pytest.mark.asyncio
    async def test_schema_failure_aborts_startup(self):
        with patch("hiring_api.main.init_db", new_callable=AsyncMock) as mock_init:
            mock_init.side_effect = OperationalError("CREATE TABLE", {}, Exception("read-only"))
            with pytest.raises(OperationalError):
                async with lifespan(app):
                    pass

    @pytest.mark.asyncio
    async def test_seed_failure_aborts_startup(self, session_maker):
        with (
            patch("hiring_api.main.init_db", new_callable=AsyncMock),
            patch("hiring_api.main.async_session_maker", session_maker),
            patch(
                "hiring_api.main.ensure_admin",
                new=AsyncMock(side_effect=RuntimeError("seed failed")),
            ),
        ):
            with pytest.raises(RuntimeError):
                async with lifespan(app):
                    pass


class TestHealthEndpoints:
    """Tests for root, liveness and readiness."""

    @pytest.mark.asyncio
    async def test_root(self, client):
        response = await client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "running"

    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")
        assert response.json() == {"status": "healthy"}

    @pytest.mark.asyncio
    async def test_ready(self, client, session_maker):
        with patch("hiring_api.main.async_session_maker", session_maker):
            response = await client.get("/ready")
        assert response.status_code == 200
        assert response.json() == {"status": "ready"}

    @pytest.mark.asyncio
    async def test_not_ready_when_database_down(self, client):
        session = AsyncMock()
        session.execute.side_effect = OperationalError("SELECT 1", {}, Exception("gone"))
        broken_maker = MagicMock()
        broken_maker.return_value.__aenter__ = AsyncMock(return_value=session)
        broken_maker.return_value.__aexit__ = AsyncMock(return_value=False)

        with patch("hiring_api.main.async_session_maker", broken_maker):
            response = await client.get("/ready")

        assert response.status_code == 503
        assert response.json()["detail"]["error"] == "NOT_READY"
