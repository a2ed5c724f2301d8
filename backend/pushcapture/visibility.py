"""
Field visibility rules for the configuration screen.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict

from pushcapture.constants import APP_ID, GATEWAY_URL, INITIATOR_URL


class FieldVisibility(BaseModel):
    """Which of the three text inputs are shown."""
    app_id: bool
    gateway_url: bool
    initiator_url: bool

    model_config = ConfigDict(frozen=True)

    def as_elements(self) -> dict[str, bool]:
        """Map screen element names to their visibility."""
        return {
            APP_ID: self.app_id,
            GATEWAY_URL: self.gateway_url,
            INITIATOR_URL: self.initiator_url,
        }


def derive_visibility(using_public_gateway: bool, uses_sdk_as_initiator: bool) -> FieldVisibility:
    """
    Derive input visibility from the gateway type and the SDK flag.

    A public gateway needs a PPG URL and an application ID. Using the push
    SDK in the Push Initiator needs the initiator URL and an application ID.
    An enterprise gateway without the SDK needs neither, the push APIs fall
    back to the default application ID.
    """
    return FieldVisibility(
        app_id=using_public_gateway or uses_sdk_as_initiator,
        gateway_url=using_public_gateway,
        initiator_url=uses_sdk_as_initiator,
    )


def focus_target(visibility: FieldVisibility) -> Optional[str]:
    """Return the element that should get focus when the screen is shown."""
    if visibility.gateway_url:
        return GATEWAY_URL
    if visibility.initiator_url:
        return INITIATOR_URL
    return None
