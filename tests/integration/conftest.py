import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import repair_shop.domain  # noqa: F401  registers tables on SQLModel.metadata
from repair_shop.depends import get_session


@pytest_asyncio.fixture(scope="function")
async def engine():
    """Create test database engine on an in-memory SQLite database"""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        echo=False,
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    """Create a new database session for each test"""
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session):
    """Create test client with database session override"""
    from repair_shop.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    # Override the session dependency to use test session
    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session

    # Use ASGITransport for httpx AsyncClient
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
