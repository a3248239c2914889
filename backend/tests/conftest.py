"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Seeded identities: one ADMIN, one without permissions
"""

import os

os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)

from club_directory.db.base import Base  # noqa: E402
from club_directory.models.user import User  # noqa: E402
import club_directory.models  # noqa: E402,F401

ADMIN_SECRET = "admin-secret-token"
MEMBER_SECRET = "member-secret-token"


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def bare_db():
    """Session on a database with no tables: every query is a store fault."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session
    await engine.dispose()


@pytest.fixture
async def seed_users(test_db):
    """Insert an ADMIN identity and a plain member identity."""
    admin = User(
        name="Ada Admin", email="admin@example.com", image=None,
        password="$2b$12$hashedadminpassword", secret=ADMIN_SECRET,
        permissions=["ADMIN"], roles=["staff"],
    )
    member = User(
        name="Mo Member", email="member@example.com", image=None,
        password="$2b$12$hashedmemberpassword", secret=MEMBER_SECRET,
        permissions=[], roles=[],
    )
    test_db.add_all([admin, member])
    await test_db.commit()
    return {"admin": admin, "member": member}


@pytest.fixture
def admin_token(seed_users) -> str:
    return ADMIN_SECRET


@pytest.fixture
def member_token(seed_users) -> str:
    return MEMBER_SECRET


UNREACHABLE_DATABASE_URL = "postgresql+asyncpg://u:p@127.0.0.1:1/clubs"


@pytest.fixture
async def unreachable_db():
    """Session bound to a PostgreSQL server that refuses connections."""
    engine = create_async_engine(UNREACHABLE_DATABASE_URL, echo=False)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session
    await engine.dispose()
