"""Shared test fixtures for pytest"""
import pytest
from httpx import ASGITransport, AsyncClient

from event_timeline.api.auth import get_current_user
from event_timeline.config import Settings, get_settings
from event_timeline.main import app
from event_timeline.models.timeline import TimelineEntry
from event_timeline.models.user import CurrentUser

TEST_JWT_SECRET = "test-jwt-secret-that-is-long-enough-for-hs256"


@pytest.fixture
def test_settings():
    """Settings isolated from any local .env"""
    return Settings(_env_file=None, supabase_jwt_secret=TEST_JWT_SECRET, max_upload_size_mb=1)


@pytest.fixture
def test_user():
    return CurrentUser(id="user-1", email="planner@example.com", role="authenticated")


@pytest.fixture
async def client(test_settings, test_user):
    """HTTP client for API testing, signed in as test_user"""

    async def override_get_current_user():
        return test_user

    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_current_user] = override_get_current_user

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
async def anonymous_client(test_settings):
    """HTTP client with real token verification"""
    app.dependency_overrides[get_settings] = lambda: test_settings

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def make_entry():
    """Factory for timeline entries: make_entry("a", "09:00", "10:00")"""

    def _make(entry_id, time, end_time=None, **kwargs):
        return TimelineEntry(id=entry_id, time=time, end_time=end_time, **kwargs)

    return _make
