import os
import uuid
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

# Settings are cached on first import of app.*; configure before that happens.
TEST_JWT_SECRET = "test-jwt-secret-with-at-least-32-bytes!!"
os.environ["SUPABASE_JWT_SECRET"] = TEST_JWT_SECRET
os.environ["OPENAI_API_KEY"] = ""
os.environ["STREAK_TIMEZONE"] = "UTC"
os.environ["ENVIRONMENT"] = "test"

import jwt
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.db.base import Base
from app.db.session import get_db
from app.main import app

USER_ID = uuid.UUID("00000000-0000-0000-0000-000000000001")
OTHER_USER_ID = uuid.UUID("00000000-0000-0000-0000-000000000002")


def make_token(user_id: uuid.UUID = USER_ID, email: str | None = "alex@example.com", **overrides) -> str:
    claims = {
        "sub": str(user_id),
        "email": email,
        "aud": "authenticated",
        "role": "authenticated",
        "exp": datetime.now(timezone.utc) + timedelta(hours=1),
    }
    claims.update(overrides)
    return jwt.encode(claims, TEST_JWT_SECRET, algorithm="HS256")


def auth_headers(user_id: uuid.UUID = USER_ID, **kwargs) -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(user_id, **kwargs)}"}


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_maker(engine):
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def client(session_maker):
    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def headers():
    return auth_headers()


# ---- Fake OpenAI client -------------------------------------------------------


def completion(content: str | None, role: str = "assistant"):
    """Shape of an openai ChatCompletion, as far as the app reads it."""
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(role=role, content=content))])


class FakeCompletions:
    """Pops one scripted outcome per call: a completion object is returned, an exception is raised."""

    def __init__(self, outcomes):
        self.outcomes = list(outcomes)
        self.calls: list[dict] = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


class FakeOpenAI:
    def __init__(self, *outcomes):
        self.completions = FakeCompletions(outcomes)
        self.chat = SimpleNamespace(completions=self.completions)
