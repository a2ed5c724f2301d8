import pytest

from pushcapture.database import create_engine, table_exists
from pushcapture.exceptions import MultipleConfigurationRowsError, StoreUnavailableError
from pushcapture.services.config_store import ConfigurationStore, SaveStage
from tests.utils import count_rows, database_url, insert_rows


@pytest.mark.asyncio
async def test_load_before_first_save_returns_none(store, engine):
    assert await store.load() is None
    # Loading never creates the table
    assert not await table_exists(engine, "configuration")


@pytest.mark.asyncio
async def test_first_save_creates_table_and_inserts(store, engine, public_config):
    inserted = await store.save(public_config)

    assert inserted is True
    assert await table_exists(engine, "configuration")
    assert await count_rows(engine) == 1


@pytest.mark.asyncio
async def test_second_save_updates_single_row(store, engine, public_config):
    await store.save(public_config)
    changed = public_config.model_copy(update={"gateway_url": "http://other.example.com", "launch_app": False})

    inserted = await store.save(changed)

    assert inserted is False
    assert await count_rows(engine) == 1
    loaded = await store.load()
    assert loaded.gateway_url == "http://other.example.com"
    assert loaded.launch_app is False


@pytest.mark.asyncio
async def test_save_then_load_round_trip(store, enterprise_sdk_config):
    await store.save(enterprise_sdk_config)
    assert await store.load() == enterprise_sdk_config


@pytest.mark.asyncio
async def test_booleans_stored_as_integers(store, engine, public_config):
    await store.save(public_config)
    async with engine.connect() as conn:
        result = await conn.exec_driver_sql(
            "SELECT usesdkaspi, usingpublicppg, launchapp FROM configuration"
        )
        assert result.one() == (0, 1, 1)


@pytest.mark.asyncio
async def test_save_reports_stages_in_order(store, public_config):
    stages = []
    await store.save(public_config, on_stage=stages.append)
    assert stages == [SaveStage.CREATING_TABLE, SaveStage.COUNTING_ROWS, SaveStage.WRITING]


@pytest.mark.asyncio
async def test_multiple_rows_abort_the_write(store, engine, public_config, enterprise_sdk_config):
    await insert_rows(engine, public_config, public_config)
    stages = []

    with pytest.raises(MultipleConfigurationRowsError) as exc_info:
        await store.save(enterprise_sdk_config, on_stage=stages.append)

    assert exc_info.value.row_count == 2
    assert SaveStage.WRITING not in stages
    assert await count_rows(engine) == 2
    # Nothing was overwritten
    assert await store.load() == public_config


@pytest.mark.asyncio
async def test_unreachable_store(tmp_path, public_config):
    missing_dir = tmp_path / "does-not-exist" / "pushcapture.db"
    broken_engine = create_engine(database_url(missing_dir))
    broken_store = ConfigurationStore(broken_engine)

    with pytest.raises(StoreUnavailableError):
        await broken_store.load()
    with pytest.raises(StoreUnavailableError):
        await broken_store.save(public_config)

    await broken_engine.dispose()
