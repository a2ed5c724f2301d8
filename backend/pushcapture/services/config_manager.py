"""
Configuration management service.

Drives the configuration screen: field visibility, loading the stored
configuration, validation, saving and push service creation.
"""
from typing import Optional
from loguru import logger

from pushcapture.config import ConfigurationState, PushServiceOptions, ValidatedConfig
from pushcapture.constants import (
    APP_ID,
    ENTERPRISE_RADIO,
    GATEWAY_URL,
    INITIATOR_URL,
    LAUNCH_APP,
    PUBLIC_RADIO,
    SAVED_MESSAGE,
    SAVING_MESSAGE,
    USE_SDK,
)
from pushcapture.exceptions import (
    ConfigValidationError,
    ConfigurationLockedError,
    PushCaptureError,
    StoreUnavailableError,
)
from pushcapture.screen import ConfigurationScreen
from pushcapture.services.config_store import ConfigurationStore, SaveStage
from pushcapture.services.push_service import PushService, PushServiceFactory
from pushcapture.services.validation import validate_configuration
from pushcapture.visibility import derive_visibility, focus_target

# Stages during which another save must not start
IN_FLIGHT_STAGES = {
    SaveStage.CREATING_TABLE,
    SaveStage.COUNTING_ROWS,
    SaveStage.WRITING,
    SaveStage.NOTIFYING_PUSH_SERVICE,
}


class ConfigurationManager:
    """Manages the push configuration screen and its single stored record."""

    def __init__(
        self,
        store: ConfigurationStore,
        push_factory: PushServiceFactory,
        screen: Optional[ConfigurationScreen] = None,
    ):
        self.store = store
        self.push_factory = push_factory
        self.screen = screen or ConfigurationScreen()
        self.stage = SaveStage.IDLE
        self.config: Optional[ValidatedConfig] = None
        self.push_service: Optional[PushService] = None
        self.last_error: Optional[PushCaptureError] = None

    @property
    def locked(self) -> bool:
        """Whether the application ID and gateway type can no longer change."""
        return not self.screen[APP_ID].enabled and not self.screen.gateway_type_enabled

    @property
    def saving(self) -> bool:
        return self.stage in IN_FLIGHT_STAGES

    def _set_stage(self, stage: SaveStage):
        self.stage = stage

    def _report(self, error: PushCaptureError):
        self.last_error = error
        self.screen.show_error(error.message)

    def _refresh_visibility(self):
        self.screen.apply_visibility(
            derive_visibility(self.screen.using_public_gateway, self.screen.uses_sdk_as_initiator)
        )

    def _select_gateway_type(self, public: bool):
        if not self.screen.gateway_type_enabled and self.screen.using_public_gateway != public:
            logger.warning("Gateway type change rejected - configuration already saved")
            raise ConfigurationLockedError()

        self.screen.select_gateway_type(public)
        self._refresh_visibility()

    def select_public_gateway(self):
        """Public gateway: show the PPG URL and application ID inputs."""
        self._select_gateway_type(True)

    def select_enterprise_gateway(self):
        """Enterprise gateway: hide the PPG URL, keep the application ID only for the SDK."""
        self._select_gateway_type(False)

    def toggle_use_sdk_as_initiator(self, checked: Optional[bool] = None):
        """
        Update the screen after the "use SDK as Push Initiator" checkbox changed.

        Args:
            checked: New checkbox state; None flips the current state
        """
        checkbox = self.screen[USE_SDK]
        if checked is None:
            checked = not checkbox.checked
        if checkbox.enabled:
            checkbox.checked = checked
        else:
            logger.debug("Ignoring SDK toggle - checkbox is disabled")
        self._refresh_visibility()

    async def load_configuration(self) -> Optional[ValidatedConfig]:
        """
        Initialize the screen from the stored configuration.

        Returns:
            The stored configuration, or None if nothing is stored or the
            store could not be read (the error banner is shown then)
        """
        try:
            config = await self.store.load()
        except StoreUnavailableError as e:
            self._report(e)
            return None

        self.screen.hide_error()
        self.last_error = None

        if config:
            self.display_configuration(config)
        else:
            self._refresh_visibility()

        target = focus_target(
            derive_visibility(self.screen.using_public_gateway, self.screen.uses_sdk_as_initiator)
        )
        if target:
            self.screen.focus(target)

        return config

    def display_configuration(self, config: ValidatedConfig):
        """Populate the screen with a stored configuration and lock its identity."""
        screen = self.screen
        self.config = config

        screen[APP_ID].value = config.app_id
        screen[INITIATOR_URL].value = config.initiator_url
        screen[GATEWAY_URL].value = config.gateway_url
        screen[LAUNCH_APP].checked = config.launch_app
        screen[USE_SDK].checked = config.uses_sdk_as_initiator
        screen.select_gateway_type(config.using_public_gateway)
        self._refresh_visibility()

        screen[APP_ID].disable()
        screen.disable_gateway_type()

        # In enterprise mode the SDK flag decides whether the (now fixed)
        # application ID is used at all
        if not config.using_public_gateway:
            screen[USE_SDK].disable()

        logger.debug(
            f"Configuration displayed (gateway: "
            f"{PUBLIC_RADIO if config.using_public_gateway else ENTERPRISE_RADIO}, "
            f"sdk: {config.uses_sdk_as_initiator})"
        )

    def validate(self, state: Optional[ConfigurationState] = None) -> ValidatedConfig:
        """
        Validate the given form values, or the values currently on the screen.

        Raises:
            ConfigValidationError: If a validation rule fails
        """
        if state is None:
            state = self.screen.read_state()
        return validate_configuration(state)

    async def save(self, config: ValidatedConfig) -> PushService:
        """
        Store the configuration and create the push service.

        On success the application ID and gateway type are locked.

        Raises:
            StoreUnavailableError: If the store cannot be written
            MultipleConfigurationRowsError: If the single-row invariant is broken
            PushServiceCreationError: If the push service cannot be created
        """
        self.screen.show_progress(SAVING_MESSAGE)

        try:
            await self.store.save(config, on_stage=self._set_stage)

            self._set_stage(SaveStage.NOTIFYING_PUSH_SERVICE)
            push_service = await self.push_factory.create(PushServiceOptions.from_config(config))
        except Exception:
            self._set_stage(SaveStage.FAILED)
            self.screen.hide_progress()
            raise

        self.config = config
        self.push_service = push_service
        self._set_stage(SaveStage.DONE)

        self.lock(config)
        self.screen.show_progress(SAVED_MESSAGE)
        logger.info("Configuration saved successfully")
        return push_service

    def lock(self, config: ValidatedConfig):
        """Disable the application ID and gateway type after a successful save."""
        self.screen[APP_ID].value = config.app_id
        self.screen[APP_ID].disable()
        self.screen.disable_gateway_type()

        # Same rule as display_configuration: in enterprise mode the SDK flag
        # decides whether the locked application ID is used
        if not config.using_public_gateway:
            self.screen[USE_SDK].disable()

    async def configure(self) -> bool:
        """
        Validate and save the values on the screen.

        Errors are reported through the screen's error banner.

        Returns:
            True if the configuration was saved and the push service created
        """
        if self.saving:
            logger.warning(f"Save already in progress ({self.stage.value}) - ignoring submit")
            return False

        self.screen.hide_progress()
        self.screen.hide_error()
        self.last_error = None

        try:
            config = self.validate()
        except ConfigValidationError as e:
            logger.info(f"Configuration rejected: {e.kind.value}")
            self._report(e)
            return False

        try:
            await self.save(config)
        except PushCaptureError as e:
            logger.error(f"Configuration save failed: {type(e).__name__}: {e.message}")
            self._report(e)
            return False

        return True
