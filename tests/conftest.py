"""Shared test fixtures for Hintline."""

import os
import pytest
from httpx import ASGITransport, AsyncClient


JWT_SECRET = "test-jwt-secret-for-unit-tests"
API_PREFIX = "/api/support"


@pytest.fixture
def jwt_secret():
    return JWT_SECRET


@pytest.fixture
def app():
    """Create a test app with in-memory DB."""
    os.environ["HINTLINE_DB_URL"] = "sqlite+aiosqlite://"
    os.environ["HINTLINE_JWT_SECRET"] = JWT_SECRET

    # Clear caches and singletons so new env vars take effect
    from hintline.common.config import get_settings
    get_settings.cache_clear()

    from hintline.deps import reset_singletons
    reset_singletons()

    from hintline.app import create_app
    return create_app()


@pytest.fixture
async def client(app):
    # Manually init DB since ASGITransport doesn't run lifespan
    from hintline.deps import get_db
    db = get_db()
    await db.init()
    await db.create_all()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    await db.close()


@pytest.fixture
def auth_headers(app):
    """Factory: bearer headers for an actor id and role."""
    from hintline.common.security import create_access_token

    def _make(user_id: str, role: str = "user") -> dict:
        return {"Authorization": f"Bearer {create_access_token(user_id, role)}"}

    return _make
