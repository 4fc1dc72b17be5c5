"""
Shared fixtures: in-memory database, token issuer and an HTTP client
wired to the FastAPI app with dependency overrides.
"""

import os

# Cheap bcrypt and no real email provider for the whole test session
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.pop("RESEND_API_KEY", None)

from unittest.mock import AsyncMock, patch  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from hiring_api.core.auth import SessionTokenIssuer, get_token_issuer  # noqa: E402
from hiring_api.core.database import Base, get_db  # noqa: E402
from hiring_api.core.security import hash_password  # noqa: E402
from hiring_api.main import app  # noqa: E402
from hiring_api.modules.applications import models as _applications_models  # noqa: E402, F401
from hiring_api.modules.users.repository import UserRepository  # noqa: E402

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "password123"


@pytest_asyncio.fixture
async def engine():
    """In-memory SQLite engine shared by every session in a test."""
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_maker):
    """A real database session against the in-memory engine."""
    async with session_maker() as session:
        yield session


@pytest.fixture
def token_issuer():
    """A fresh token issuer so tests never share the process-wide token."""
    return SessionTokenIssuer()


@pytest_asyncio.fixture
async def seeded_admin(session_maker):
    """Seed the admin credential the way startup does."""
    async with session_maker() as session:
        await UserRepository.seed_admin_if_absent(
            session, ADMIN_USERNAME, hash_password(ADMIN_PASSWORD, rounds=4)
        )


@pytest.fixture
def mock_send_email():
    """Patch the confirmation email sender; succeeds by default."""
    with patch(
        "hiring_api.modules.applications.service.send_application_received",
        new_callable=AsyncMock,
    ) as mock_email:
        mock_email.return_value = True
        yield mock_email


@pytest_asyncio.fixture
async def client(session_maker, token_issuer, seeded_admin, mock_send_email):
    """HTTP client for the app, backed by the in-memory database."""

    async def override_get_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_token_issuer] = lambda: token_issuer

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def application_payload():
    """A complete POST /api/apply body."""
    return {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "mobile": "+15550100",
        "gender": "female",
        "degree": "BSc Mathematics",
        "experience": "3 years of analytical engine programming",
        "howKnow": "LinkedIn",
        "resume": "https://files.example.com/resumes/ada.pdf",
        "position": "Backend Engineer",
    }
