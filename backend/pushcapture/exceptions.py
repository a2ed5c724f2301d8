"""
Errors raised by the configuration pipeline.

Every error carries the message shown in the screen's error banner.
"""
from enum import Enum

from pushcapture.constants import (
    DATABASE_ERROR_MESSAGE,
    GATEWAY_LOCKED_MESSAGE,
    MULTIPLE_ROWS_MESSAGE,
    PUSH_SERVICE_ERROR_MESSAGE,
)


class ValidationErrorKind(str, Enum):
    """Reasons a configuration form can be rejected, in evaluation order."""

    MISSING_APP_ID = "MISSING_APP_ID"
    MISSING_GATEWAY_URL = "MISSING_GATEWAY_URL"
    INVALID_GATEWAY_URL_SCHEME = "INVALID_GATEWAY_URL_SCHEME"
    TRAILING_SLASH_GATEWAY_URL = "TRAILING_SLASH_GATEWAY_URL"
    MISSING_INITIATOR_URL = "MISSING_INITIATOR_URL"
    INVALID_INITIATOR_URL_SCHEME = "INVALID_INITIATOR_URL_SCHEME"
    TRAILING_SLASH_INITIATOR_URL = "TRAILING_SLASH_INITIATOR_URL"

    @property
    def message(self) -> str:
        return _VALIDATION_MESSAGES[self]


_VALIDATION_MESSAGES = {
    ValidationErrorKind.MISSING_APP_ID: "Error: Please specify an Application ID.",
    ValidationErrorKind.MISSING_GATEWAY_URL: "Error: Please specify a PPG URL.",
    ValidationErrorKind.INVALID_GATEWAY_URL_SCHEME: "Error: The PPG URL must start with http://.",
    ValidationErrorKind.TRAILING_SLASH_GATEWAY_URL: (
        "Error: The PPG URL should not end with a /. One will be automatically added."
    ),
    ValidationErrorKind.MISSING_INITIATOR_URL: "Error: Please specify a Push Initiator URL.",
    ValidationErrorKind.INVALID_INITIATOR_URL_SCHEME: (
        "Error: The Push Initiator URL must start with http:// or https://."
    ),
    ValidationErrorKind.TRAILING_SLASH_INITIATOR_URL: (
        "Error: The Push Initiator URL should not end with a /. One will be automatically added."
    ),
}


class PushCaptureError(Exception):
    """Base class for errors reported on the configuration screen."""

    default_message = "Error: The configuration could not be saved."

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ConfigValidationError(PushCaptureError):
    """The form failed one of the validation rules."""

    def __init__(self, kind: ValidationErrorKind):
        self.kind = kind
        super().__init__(kind.message)


class StoreUnavailableError(PushCaptureError):
    """The local store could not be read or written."""

    default_message = DATABASE_ERROR_MESSAGE


class MultipleConfigurationRowsError(PushCaptureError):
    """More than one configuration row exists; the write was aborted."""

    default_message = MULTIPLE_ROWS_MESSAGE

    def __init__(self, row_count: int):
        self.row_count = row_count
        super().__init__()


class PushServiceCreationError(PushCaptureError):
    """The push service object could not be created after saving."""

    default_message = PUSH_SERVICE_ERROR_MESSAGE


class ConfigurationLockedError(PushCaptureError):
    """The gateway type was changed after the configuration was saved."""

    default_message = GATEWAY_LOCKED_MESSAGE
