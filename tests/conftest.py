import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from linx.core.db import get_db
from linx.models import Base
from linx.main import app

TEST_DB_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine():
    """
    In-memory SQLite engine with all tables created.

    `StaticPool` keeps a single connection so every session sees the
    same in-memory database; a new engine per test keeps tests isolated.
    """
    engine = create_async_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine):
    """
    Provide a fresh AsyncSession for each test.
    """
    TestingSessionLocal = sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with TestingSessionLocal() as session:
        yield session


@pytest.fixture
def test_app(db_session):
    """
    Return the FastAPI app with get_db overridden to use the test session.
    """
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield app
    app.dependency_overrides.clear()


def rems_row(sol_number: int, earth_date: str, /, **overrides):
    """Build a REMS feed row the way the feed publishes it: every value a string."""
    row = {
        "id": str(sol_number - 2),
        "terrestrial_date": earth_date,
        "sol": str(sol_number),
        "ls": "182",
        "season": "Month 7",
        "min_temp": "-75",
        "max_temp": "-5",
        "pressure": "780",
        "pressure_string": "Higher",
        "abs_humidity": "--",
        "wind_speed": "--",
        "wind_direction": "--",
        "atmo_opacity": "Sunny",
        "sunrise": "05:26",
        "sunset": "17:20",
        "local_uv_irradiance_index": "Moderate",
        "min_gts_temp": "-80",
        "max_gts_temp": "8",
    }
    row.update(overrides)
    return row


@pytest.fixture
def rems_feed():
    """A small REMS feed document covering sols 4802-4804."""
    return {
        "descriptions": {"disclaimer_en": "ignored"},
        "soles": [
            rems_row(4804, "2026-02-10", min_temp="-74", max_temp="-3"),
            rems_row(4803, "2026-02-09"),
            rems_row(4802, "2026-02-08", pressure="--", atmo_opacity="--"),
        ],
    }


@pytest.fixture
def make_rems_row():
    return rems_row
