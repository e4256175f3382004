from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from soundtherapy.database import Base, get_db
from soundtherapy.main import app
from soundtherapy.sources.registry import get_biometric_source
from soundtherapy.sources.simulated import SimulatedSource
from soundtherapy.therapy.predictor import ModelLoader, get_model_loader

test_engine = create_async_engine("sqlite+aiosqlite://", echo=False)
test_session = async_sessionmaker(test_engine, expire_on_commit=False)


async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
    async with test_session() as session:
        yield session


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
async def setup_db() -> AsyncGenerator[None, None]:
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture(autouse=True)
def model_loader() -> ModelLoader:
    """Fresh loader with no model, as before start-up loading completes."""
    loader = ModelLoader(path=None)
    app.dependency_overrides[get_model_loader] = lambda: loader
    return loader


@pytest.fixture(autouse=True)
def wearable() -> SimulatedSource:
    source = SimulatedSource(seed=7)
    app.dependency_overrides[get_biometric_source] = lambda: source
    return source


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
