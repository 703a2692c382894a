"""
Folio Backend - Test Configuration (conftest.py)
=================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Each test gets a fresh in-memory SQLite database (aiosqlite). The media
       host and the SMTP server are replaced with AsyncMocks, so no test
       leaves the process.

Fixture Hierarchy (all function-scoped):
    db_engine ─┬── db_session:      AsyncSession for service/store tests
               └── test_client:     HTTPX AsyncClient bound to the FastAPI app,
                                    with get_db_session overridden
    cover_asset:  the UploadedAsset mocked uploads return
    mock_media:   media_service.upload / discard replaced
    mock_mail:    mail_service.send replaced
"""

import os

# Settings are read at import time: point them at SQLite BEFORE any app import
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["REC_EMAIL"] = "owner@folio.test"
os.environ["EMAIL_USER"] = "mailer@folio.test"
os.environ.pop("SERVER_URL", None)

from typing import AsyncGenerator  # noqa: E402
from unittest.mock import AsyncMock, patch  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.database import Base, get_db_session  # noqa: E402
from app.models.blog_post import BlogPost  # noqa: E402,F401
from app.models.chat_message import ChatMessage  # noqa: E402,F401
from app.models.contact import Contact  # noqa: E402,F401
from app.models.job_posting import JobPosting  # noqa: E402,F401
from app.models.product import Product  # noqa: E402,F401
from app.services.mail_service import mail_service  # noqa: E402
from app.services.media_service import UploadedAsset, media_service  # noqa: E402

COVER_URL = "https://res.cloudinary.com/folio/image/upload/v1/cover.png"


@pytest_asyncio.fixture
async def db_engine():
    """
    Fresh in-memory database with every table created.

    StaticPool keeps a single connection, so the schema created here is the
    one every session of the test sees.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def cover_asset() -> UploadedAsset:
    """The asset every mocked upload returns unless a test overrides it."""
    return UploadedAsset(url=COVER_URL, public_id="folio/cover")


@pytest.fixture
def mock_media(cover_asset):
    """
    Replaces Cloudinary calls. `upload` returns `cover_asset` unless a
    test sets its own return_value / side_effect.
    """
    upload = AsyncMock(return_value=cover_asset)
    discard = AsyncMock()
    with patch.object(media_service, "upload", upload), \
         patch.object(media_service, "discard", discard):
        yield media_service


@pytest.fixture
def mock_mail():
    """Replaces SMTP delivery; the AsyncMock records every send() call."""
    send = AsyncMock()
    with patch.object(mail_service, "send", send):
        yield send


@pytest.fixture
def sample_image_bytes():
    """Minimal PNG signature plus a few bytes; never decoded by the app."""
    return b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


@pytest_asyncio.fixture
async def test_client(session_factory, mock_media, mock_mail):
    """
    HTTPX AsyncClient talking to the FastAPI app over ASGITransport.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/api/health")
            assert response.status_code == 200
    """
    from app.main import app

    async def override_get_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
