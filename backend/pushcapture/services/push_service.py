"""
Push service creation.

The push service object registers the application with the push gateway.
Its registration behaviour lives outside this package; the configuration
screen only creates it once the configuration has been saved.
"""
from abc import ABC, abstractmethod
from typing import Optional
from loguru import logger

from pushcapture.config import PushServiceOptions
from pushcapture.exceptions import PushServiceCreationError


class PushService:
    """Handle to a created push service."""

    def __init__(self, options: PushServiceOptions):
        self.options = options

    @property
    def app_id(self) -> Optional[str]:
        return self.options.app_id

    def __repr__(self) -> str:
        return f"PushService(app_id={self.app_id!r})"


class PushServiceFactory(ABC):
    """Abstract base class for push service factories."""

    @abstractmethod
    async def create(self, options: PushServiceOptions) -> PushService:
        """
        Create the push service.

        Raises:
            PushServiceCreationError: If the service cannot be created
        """
        pass


class LocalPushServiceFactory(PushServiceFactory):
    """
    Creates push services in-process.

    Like the device push APIs, a service can be created again with the same
    application ID (picking up new URLs), but never with a different one.
    """

    def __init__(self):
        self.service: Optional[PushService] = None

    async def create(self, options: PushServiceOptions) -> PushService:
        if self.service is not None and self.service.app_id != options.app_id:
            logger.error(
                f"Push service already created for app id {self.service.app_id!r}, "
                f"cannot recreate it for {options.app_id!r}"
            )
            raise PushServiceCreationError(
                "Error: The push service cannot be recreated with a different Application ID."
            )

        self.service = PushService(options)
        logger.info(f"Push service created (app id: {options.app_id or 'default'})")
        return self.service
