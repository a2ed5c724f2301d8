"""
Headless model of the configuration screen.

The screen is a set of named elements that a frontend renders. Services
only talk to the screen through this model, so the configuration logic has
no dependency on a widget toolkit.
"""
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field

from pushcapture.config import ConfigurationState
from pushcapture.constants import (
    APP_ID,
    ENTERPRISE_RADIO,
    ERROR_DIV,
    ERROR_MSG,
    GATEWAY_TYPE_GROUP,
    GATEWAY_URL,
    INITIATOR_URL,
    LAUNCH_APP,
    PROGRESS_INFO,
    PUBLIC_RADIO,
    USE_SDK,
)
from pushcapture.visibility import FieldVisibility, derive_visibility


class ScreenElement(BaseModel):
    """A single input, checkbox, radio button or message area."""
    name: str
    value: str = ""
    checked: bool = False
    visible: bool = True
    enabled: bool = True

    def show(self):
        self.visible = True

    def hide(self):
        self.visible = False

    def enable(self):
        self.enabled = True

    def disable(self):
        self.enabled = False


def _default_elements() -> Dict[str, ScreenElement]:
    elements = [
        ScreenElement(name=APP_ID),
        ScreenElement(name=INITIATOR_URL),
        ScreenElement(name=GATEWAY_URL),
        ScreenElement(name=USE_SDK),
        ScreenElement(name=LAUNCH_APP),
        ScreenElement(name=PUBLIC_RADIO, checked=True),
        ScreenElement(name=ENTERPRISE_RADIO),
        ScreenElement(name=ERROR_DIV, visible=False),
        ScreenElement(name=ERROR_MSG),
        ScreenElement(name=PROGRESS_INFO, visible=False),
    ]
    return {element.name: element for element in elements}


class ConfigurationScreen(BaseModel):
    """State of every element on the configuration screen."""
    elements: Dict[str, ScreenElement] = Field(default_factory=_default_elements)
    focused: Optional[str] = None

    def model_post_init(self, __context: Any) -> None:
        self.apply_visibility(derive_visibility(self.using_public_gateway, self.uses_sdk_as_initiator))

    def __getitem__(self, name: str) -> ScreenElement:
        return self.elements[name]

    def focus(self, name: str):
        self.focused = name

    @property
    def using_public_gateway(self) -> bool:
        return self[PUBLIC_RADIO].checked

    @property
    def uses_sdk_as_initiator(self) -> bool:
        return self[USE_SDK].checked

    @property
    def gateway_type_enabled(self) -> bool:
        return all(self[name].enabled for name in GATEWAY_TYPE_GROUP)

    def select_gateway_type(self, public: bool):
        """Check one radio button of the gateway type group."""
        self[PUBLIC_RADIO].checked = public
        self[ENTERPRISE_RADIO].checked = not public

    def disable_gateway_type(self):
        for name in GATEWAY_TYPE_GROUP:
            self[name].disable()

    def apply_visibility(self, visibility: FieldVisibility):
        for name, visible in visibility.as_elements().items():
            if visible:
                self[name].show()
            else:
                self[name].hide()

    def read_state(self) -> ConfigurationState:
        """Collect the current form values."""
        return ConfigurationState(
            app_id=self[APP_ID].value,
            initiator_url=self[INITIATOR_URL].value,
            gateway_url=self[GATEWAY_URL].value,
            uses_sdk_as_initiator=self.uses_sdk_as_initiator,
            using_public_gateway=self.using_public_gateway,
            launch_app=self[LAUNCH_APP].checked,
        )

    def fill(self, state: ConfigurationState):
        """
        Copy submitted form values onto the screen.

        Disabled elements keep their current value, the same way a disabled
        widget ignores user input.
        """
        for name, value in (
            (APP_ID, state.app_id),
            (INITIATOR_URL, state.initiator_url),
            (GATEWAY_URL, state.gateway_url),
        ):
            if self[name].enabled:
                self[name].value = value

        for name, checked in (
            (USE_SDK, state.uses_sdk_as_initiator),
            (LAUNCH_APP, state.launch_app),
        ):
            if self[name].enabled:
                self[name].checked = checked

        if self.gateway_type_enabled:
            self.select_gateway_type(state.using_public_gateway)

        self.apply_visibility(derive_visibility(self.using_public_gateway, self.uses_sdk_as_initiator))

    def show_error(self, message: str):
        self[ERROR_DIV].show()
        self[ERROR_MSG].value = message

    def hide_error(self):
        self[ERROR_DIV].hide()

    @property
    def error_message(self) -> Optional[str]:
        return self[ERROR_MSG].value if self[ERROR_DIV].visible else None

    def show_progress(self, message: str):
        self[PROGRESS_INFO].show()
        self[PROGRESS_INFO].value = message

    def hide_progress(self):
        self[PROGRESS_INFO].hide()
