"""Shared test configuration and fixtures.

Each test gets a fresh database (in-memory SQLite through aiosqlite unless
``TEST_DATABASE_URL`` points elsewhere) and a session wrapped in a
transaction that always rolls back.
"""

import os
import uuid
from collections.abc import AsyncGenerator
from decimal import Decimal

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from staynest.auth.jwt import create_access_token
from staynest.database import Base, get_db
from staynest.main import app
from staynest.models.profile import Profile
from staynest.models.property import Property

_test_db_url = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")


def _make_engine():
    if _test_db_url.startswith("sqlite"):
        engine = create_async_engine(
            _test_db_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

        @event.listens_for(engine.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return engine
    return create_async_engine(_test_db_url, pool_pre_ping=True)


def make_auth_headers(external_id: str) -> dict[str, str]:
    """Return Authorization headers carrying an identity-provider token for ``external_id``."""
    token = create_access_token({"sub": external_id})
    return {"Authorization": f"Bearer {token}"}


async def create_profile(db_session: AsyncSession, *, is_admin: bool = False, name: str = "renter") -> Profile:
    """Helper: insert a profile with a unique external id and username."""
    unique = uuid.uuid4().hex[:8]
    profile = Profile(
        external_id=f"user_{name}_{unique}",
        first_name=name.title(),
        last_name="Tester",
        username=f"{name}-{unique}",
        email=f"{name}-{unique}@test.com",
        is_admin=is_admin,
    )
    db_session.add(profile)
    await db_session.flush()
    await db_session.refresh(profile)
    return profile


async def create_property(db_session: AsyncSession, owner: Profile, price: Decimal | str = "100.00") -> Property:
    """Helper: insert a property directly, bypassing request validation."""
    prop = Property(
        profile_id=owner.id,
        name="Cabin in the Woods",
        tagline="Quiet cabin by the lake",
        category="cabin",
        country="NO",
        description="A cosy cabin with a wood stove and a view over the lake.",
        price=Decimal(price),
        guests=4,
        bedrooms=2,
        beds=3,
        baths=1,
        amenities=["wifi", "sauna"],
    )
    db_session.add(prop)
    await db_session.flush()
    await db_session.refresh(prop)
    return prop


# ---------------------------------------------------------------------------
# Database and HTTP client
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def test_engine():
    """Create an engine with all tables, dropped again after the test."""
    engine = _make_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Yield an async session wrapped in a transaction that always rolls back."""
    async with test_engine.connect() as connection:
        transaction = await connection.begin()
        session = AsyncSession(bind=connection, expire_on_commit=False)

        try:
            yield session
        finally:
            await session.close()
            await transaction.rollback()


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Provide an httpx AsyncClient wired to use the test DB session."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Convenience fixtures: profiles and properties
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def renter(db_session: AsyncSession) -> Profile:
    return await create_profile(db_session, name="renter")


@pytest_asyncio.fixture
async def auth_headers(renter: Profile) -> dict[str, str]:
    """Authorization headers for the renter profile."""
    return make_auth_headers(renter.external_id)


@pytest_asyncio.fixture
async def owner(db_session: AsyncSession) -> Profile:
    return await create_profile(db_session, name="owner")


@pytest_asyncio.fixture
async def owner_headers(owner: Profile) -> dict[str, str]:
    return make_auth_headers(owner.external_id)


@pytest_asyncio.fixture
async def admin(db_session: AsyncSession) -> Profile:
    return await create_profile(db_session, is_admin=True, name="admin")


@pytest_asyncio.fixture
async def admin_headers(admin: Profile) -> dict[str, str]:
    return make_auth_headers(admin.external_id)


@pytest_asyncio.fixture
async def test_property(db_session: AsyncSession, owner: Profile) -> Property:
    """A property owned by ``owner`` at 100.00 per night."""
    return await create_property(db_session, owner, "100.00")


@pytest_asyncio.fixture
async def other_property(db_session: AsyncSession, owner: Profile) -> Property:
    return await create_property(db_session, owner, "250.00")
