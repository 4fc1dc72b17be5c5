"""
Fixtures for applications tests.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from hiring_api.modules.applications.schemas import ApplicationCreate


@pytest.fixture
def mock_db():
    """Create a mock database session."""
    db = AsyncMock()
    db.commit = AsyncMock()
    db.refresh = AsyncMock()
    db.get = AsyncMock()
    db.execute = AsyncMock()
    db.add = MagicMock()
    return db


@pytest.fixture
def sample_application_create():
    """A complete application submission."""
    return ApplicationCreate(
        name="Grace Hopper",
        email="grace@example.com",
        mobile="+15550199",
        gender="female",
        degree="PhD Mathematics",
        experience="Compiler design",
        howKnow="Referral",
        resume="/uploads/grace-hopper.pdf",
        position="Staff Engineer",
    )
