"""Pytest configuration and shared fixtures for configuration tests."""

from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine

from pushcapture.config import ValidatedConfig
from pushcapture.database import create_engine
from pushcapture.services.config_manager import ConfigurationManager
from pushcapture.services.config_store import ConfigurationStore
from tests.utils import FakePushServiceFactory, database_url


@pytest.fixture
def public_config() -> ValidatedConfig:
    return ValidatedConfig(
        app_id="abc123",
        gateway_url="http://ppg.example.com",
        using_public_gateway=True,
        uses_sdk_as_initiator=False,
        launch_app=True,
    )


@pytest.fixture
def enterprise_sdk_config() -> ValidatedConfig:
    return ValidatedConfig(
        app_id="ent-app",
        initiator_url="https://pi.example.com/pushsample",
        using_public_gateway=False,
        uses_sdk_as_initiator=True,
        launch_app=False,
    )


@pytest_asyncio.fixture
async def engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """Engine on a fresh SQLite file per test."""
    test_engine = create_engine(database_url(tmp_path / "pushcapture.db"))
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def store(engine: AsyncEngine) -> ConfigurationStore:
    return ConfigurationStore(engine)


@pytest.fixture
def push_factory() -> FakePushServiceFactory:
    return FakePushServiceFactory()


@pytest.fixture
def manager(store: ConfigurationStore, push_factory: FakePushServiceFactory) -> ConfigurationManager:
    return ConfigurationManager(store=store, push_factory=push_factory)


@pytest.fixture
def screen_manager(tmp_path: Path) -> ConfigurationManager:
    """Manager for screen-only tests; the store is never touched."""
    unused_store = ConfigurationStore(create_engine(database_url(tmp_path / "unused.db")))
    return ConfigurationManager(store=unused_store, push_factory=FakePushServiceFactory())
