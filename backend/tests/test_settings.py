from loguru import logger

from pushcapture.config import Settings, settings
from pushcapture.utils.logger import setup_logger


def test_settings_defaults():
    defaults = Settings()
    assert defaults.app_name == "PushCapture"
    assert defaults.database_url.startswith("sqlite+aiosqlite://")


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:////tmp/other.db")
    monkeypatch.setenv("DEBUG", "true")

    overridden = Settings()

    assert overridden.database_url == "sqlite+aiosqlite:////tmp/other.db"
    assert overridden.debug is True


def test_setup_logger_writes_log_file(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "log_dir", str(tmp_path / "logs"))

    setup_logger()
    logger.info("configuration screen ready")
    logger.remove()

    log_file = tmp_path / "logs" / "pushcapture.log"
    assert "configuration screen ready" in log_file.read_text()
