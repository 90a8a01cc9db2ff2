"""Fixtures de test / Test fixtures."""

from datetime import datetime

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

import fuel_tracker.models  # noqa: F401
from fuel_tracker.database import Base, get_db
from fuel_tracker.main import app
from fuel_tracker.models.user import User
from fuel_tracker.rate_limit import limiter
from fuel_tracker.services.fuel_analytics import RefuelingRecord

limiter.enabled = False


@pytest.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def users(db):
    """Deux proprietaires distincts / Two distinct owners."""
    alice = User(username="alice", hashed_password="x")
    bob = User(username="bob", hashed_password="x")
    db.add_all([alice, bob])
    await db.flush()
    return alice, bob


@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


async def register(client: AsyncClient, username: str, password: str = "secret123") -> dict:
    resp = await client.post("/auth/register", json={"username": username, "password": password})
    assert resp.status_code == 201
    return {"Authorization": f"Bearer {resp.json()['token']}"}


@pytest.fixture
async def auth_headers(client):
    return await register(client, "alice")


@pytest.fixture
async def other_headers(client):
    return await register(client, "bob")


def record(
    id: int,
    odometer: float,
    fuel: float,
    price: float = 1.5,
    full_tank: bool = True,
    timestamp: datetime | None = None,
    vehicle_id: int = 1,
) -> RefuelingRecord:
    """Construire un plein d'entree moteur / Build an engine input record."""
    return RefuelingRecord(
        id=id,
        vehicle_id=vehicle_id,
        timestamp=timestamp or datetime(2024, 1, id),
        odometer_km=odometer,
        fuel_amount_liters=fuel,
        price_per_liter=price,
        total_cost=fuel * price,
        full_tank=full_tank,
    )
