"""Shared test fixtures for Spoolshelf backend tests."""

import os
from collections.abc import AsyncGenerator

import pytest

# IMPORTANT: Set environment variables BEFORE any app imports
# This must happen before settings/config are loaded
os.environ["LOG_TO_FILE"] = "false"
os.environ["DEBUG"] = "false"
os.environ["SEED_SAMPLE_INVENTORY"] = "false"

from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402

from backend.app.core.config import settings  # noqa: E402

settings.log_to_file = False

from backend.app.core.database import Base  # noqa: E402

# Use in-memory SQLite for tests
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def test_engine():
    """Create a test database engine."""
    engine = create_async_engine(TEST_DATABASE_URL, echo=False)

    # Import all models to register them
    from backend.app.models import (  # noqa: F401
        brand,
        filament_color,
        filament_type,
        inventory_item,
        material_type,
        spool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async_session_maker = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)
    async with async_session_maker() as session:
        yield session


@pytest.fixture
async def async_client(test_engine) -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client bound to the test database."""
    from backend.app.core.database import get_db
    from backend.app.main import app

    test_async_session = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db():
        async with test_async_session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


# ============================================================================
# Factories
# ============================================================================


@pytest.fixture
def brand_factory(db_session):
    """Factory to create a library brand, optionally with one material type and colors."""

    async def _create_brand(name="Acme", material_type=None, colors=()):
        from backend.app.core.colors import ColorValue
        from backend.app.models.brand import Brand
        from backend.app.models.filament_color import FilamentColor
        from backend.app.models.material_type import MaterialType

        brand = Brand(name=name)
        if material_type:
            mt = MaterialType(name=material_type)
            for color_name in colors:
                mt.colors.append(FilamentColor(name=color_name, color=ColorValue(1, 0, 0).to_dict()))
            brand.material_types.append(mt)
        db_session.add(brand)
        await db_session.commit()
        return brand

    return _create_brand


@pytest.fixture
def item_factory(db_session):
    """Factory to create inventory items with spools at the given percentages."""

    async def _create_item(percentages=(100,), **kwargs):
        from backend.app.models.inventory_item import InventoryItem
        from backend.app.models.spool import Spool

        defaults = {
            "brand": "Acme",
            "material_type_name": "PLA",
            "color_name": "Red",
            "weight_grams": 1000,
            "diameter_mm": 1.75,
            "notes": "",
        }
        defaults.update(kwargs)

        item = InventoryItem(**defaults)
        item.spools = [Spool(remaining_percentage=pct, notes="") for pct in percentages]
        db_session.add(item)
        await db_session.commit()
        return item

    return _create_item
