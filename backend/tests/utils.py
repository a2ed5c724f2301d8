"""Shared helpers for configuration tests."""

from pathlib import Path

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncEngine

from pushcapture.config import PushServiceOptions, ValidatedConfig
from pushcapture.database import create_table
from pushcapture.exceptions import PushServiceCreationError
from pushcapture.models.configuration import configuration_table
from pushcapture.services.config_manager import ConfigurationManager
from pushcapture.services.config_store import config_to_row
from pushcapture.services.push_service import PushService, PushServiceFactory


class FakePushServiceFactory(PushServiceFactory):
    """Records every creation request; can be told to fail."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.calls: list[PushServiceOptions] = []

    async def create(self, options: PushServiceOptions) -> PushService:
        self.calls.append(options)
        if self.fail:
            raise PushServiceCreationError()
        return PushService(options)


def database_url(path: Path) -> str:
    return f"sqlite+aiosqlite:///{path}"


async def count_rows(engine: AsyncEngine) -> int:
    async with engine.connect() as conn:
        result = await conn.execute(select(func.count()).select_from(configuration_table))
        return result.scalar_one()


async def insert_rows(engine: AsyncEngine, *configs: ValidatedConfig) -> None:
    """Write rows directly, bypassing the single-row check."""
    await create_table(engine, configuration_table)
    async with engine.begin() as conn:
        for config in configs:
            await conn.execute(insert(configuration_table).values(**config_to_row(config)))


def fill_screen(
    manager: ConfigurationManager,
    app_id: str = "",
    gateway_url: str = "",
    initiator_url: str = "",
    public: bool = True,
    use_sdk: bool = False,
    launch_app: bool = False,
) -> None:
    """Simulate the user filling in the form."""
    screen = manager.screen
    screen["appid"].value = app_id
    screen["ppgurl"].value = gateway_url
    screen["piurl"].value = initiator_url
    screen["launchapp"].checked = launch_app
    if public:
        manager.select_public_gateway()
    else:
        manager.select_enterprise_gateway()
    manager.toggle_use_sdk_as_initiator(use_sdk)
