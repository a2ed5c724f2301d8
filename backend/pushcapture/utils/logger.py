"""
Logging configuration using loguru.
"""
import sys
from pathlib import Path
from loguru import logger
from pushcapture.config import settings


def setup_logger():
    """Configure loguru logger."""
    # Remove default handler
    logger.remove()

    level = "DEBUG" if settings.debug else settings.log_level.upper()

    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=level,
        colorize=True,
    )

    # Optional file sink for log capture
    if settings.log_dir:
        log_dir = Path(settings.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_dir / "pushcapture.log",
            rotation="10 MB",
            retention="7 days",
            level=level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        )

    logger.info(f"Logger initialized (level: {level})")
