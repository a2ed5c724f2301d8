"""
Persistence of the push configuration.

Handles lazy table creation, loading the single configuration row and the
insert-or-update decision on save.
"""
from enum import Enum
from typing import Any, Callable, Mapping, Optional
from loguru import logger
from sqlalchemy import func, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from pushcapture.config import ValidatedConfig
from pushcapture.database import create_session_factory, create_table, table_exists
from pushcapture.exceptions import MultipleConfigurationRowsError, StoreUnavailableError
from pushcapture.models.configuration import configuration_table


class SaveStage(str, Enum):
    """Steps of the save pipeline, in the order they run."""

    IDLE = "idle"
    CREATING_TABLE = "creating_table"
    COUNTING_ROWS = "counting_rows"
    WRITING = "writing"
    NOTIFYING_PUSH_SERVICE = "notifying_push_service"
    DONE = "done"
    FAILED = "failed"


def config_to_row(config: ValidatedConfig) -> dict[str, Any]:
    """Convert a configuration to column values (booleans as 0/1)."""
    return {
        "appid": config.app_id,
        "piurl": config.initiator_url,
        "ppgurl": config.gateway_url,
        "usesdkaspi": 1 if config.uses_sdk_as_initiator else 0,
        "usingpublicppg": 1 if config.using_public_gateway else 0,
        "launchapp": 1 if config.launch_app else 0,
    }


def row_to_config(row: Mapping[str, Any]) -> ValidatedConfig:
    """Convert a stored row back to a configuration."""
    return ValidatedConfig(
        app_id=row["appid"] or "",
        initiator_url=row["piurl"] or "",
        gateway_url=row["ppgurl"] or "",
        uses_sdk_as_initiator=row["usesdkaspi"] == 1,
        using_public_gateway=row["usingpublicppg"] == 1,
        launch_app=row["launchapp"] == 1,
    )


class ConfigurationStore:
    """Reads and writes the single configuration row."""

    def __init__(self, bind: AsyncEngine):
        self.bind = bind
        self._session_factory = create_session_factory(bind)

    async def load(self) -> Optional[ValidatedConfig]:
        """
        Load the stored configuration.

        Returns None if nothing has been saved yet (the table is only created
        on the first save).

        Raises:
            StoreUnavailableError: If the store cannot be read
        """
        try:
            if not await table_exists(self.bind, configuration_table.name):
                logger.info("Configuration table not created yet - nothing to load")
                return None

            async with self._session_factory() as session:
                result = await session.execute(select(configuration_table))
                rows = result.mappings().all()
        except SQLAlchemyError as e:
            logger.error(f"Failed to read configuration: {type(e).__name__}: {e}")
            raise StoreUnavailableError() from e

        if not rows:
            logger.info("No configuration stored yet")
            return None
        if len(rows) > 1:
            logger.warning(f"Found {len(rows)} configuration rows, using the first one")

        return row_to_config(rows[0])

    async def count_rows(self, session: AsyncSession) -> int:
        """Count configuration rows."""
        result = await session.execute(select(func.count()).select_from(configuration_table))
        return result.scalar_one()

    async def save(
        self,
        config: ValidatedConfig,
        on_stage: Optional[Callable[[SaveStage], None]] = None,
    ) -> bool:
        """
        Insert or update the configuration row.

        Args:
            config: Validated configuration to store
            on_stage: Optional callback invoked as each pipeline step starts

        Returns:
            True if a new row was inserted, False if the existing row was updated

        Raises:
            StoreUnavailableError: If the store cannot be written
            MultipleConfigurationRowsError: If more than one row already exists
        """
        def enter(stage: SaveStage):
            logger.debug(f"Configuration save: {stage.value}")
            if on_stage:
                on_stage(stage)

        values = config_to_row(config)

        try:
            enter(SaveStage.CREATING_TABLE)
            await create_table(self.bind, configuration_table)

            async with self._session_factory() as session:
                enter(SaveStage.COUNTING_ROWS)
                count = await self.count_rows(session)

                if count > 1:
                    logger.error(f"Refusing to save: {count} configuration rows found, expected at most one")
                    raise MultipleConfigurationRowsError(count)

                enter(SaveStage.WRITING)
                if count == 0:
                    await session.execute(insert(configuration_table).values(**values))
                else:
                    # No row filter: the count above, in this same transaction,
                    # established that exactly one row exists.
                    await session.execute(update(configuration_table).values(**values))
                await session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Failed to save configuration: {type(e).__name__}: {e}")
            raise StoreUnavailableError() from e

        inserted = count == 0
        logger.info(f"Configuration {'inserted' if inserted else 'updated'}")
        return inserted
