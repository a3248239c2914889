"""Health & Readiness — tests for liveness and readiness probes."""

import pytest

from club_directory.infrastructure import database


@pytest.fixture
def no_manager(monkeypatch):
    monkeypatch.setattr(database, "db_manager", None)


async def test_liveness(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_without_database(client, no_manager):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_readiness_with_database(client, no_manager):
    database.init_db("sqlite+aiosqlite:///:memory:")
    try:
        res = await client.get("/api/v1/health/ready")
        assert res.status_code == 200
        assert res.json()["checks"]["database"] == "healthy"
    finally:
        await database.close_db()


async def test_readiness_with_unreachable_database(client, monkeypatch):
    manager = database.DatabaseSessionManager(
        "postgresql+asyncpg://u:p@127.0.0.1:1/clubs",
    )
    monkeypatch.setattr(database, "db_manager", manager)
    try:
        res = await client.get("/api/v1/health/ready")
        assert res.status_code == 503
        assert res.json()["status"] == "not_ready"
    finally:
        await manager.close()
