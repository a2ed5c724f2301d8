"""
Validation of the configuration form.
"""
from pushcapture.config import ConfigurationState, ValidatedConfig
from pushcapture.exceptions import ConfigValidationError, ValidationErrorKind

HTTP_PREFIX = "http://"
HTTPS_PREFIX = "https://"


def validate_configuration(state: ConfigurationState) -> ValidatedConfig:
    """
    Validate the raw form values and return the normalized configuration.

    Rules are checked in a fixed order and the first failing rule wins:

    1. An application ID is required for a public gateway or when the SDK
       is the push initiator.
    2-4. A public gateway needs a PPG URL starting with http:// and not
       ending with a slash.
    5-7. The SDK needs a Push Initiator URL starting with http:// or
       https:// and not ending with a slash.

    Raises:
        ConfigValidationError: with the kind of the first failing rule
    """
    app_id = state.app_id.strip()
    gateway_url = state.gateway_url.strip()
    initiator_url = state.initiator_url.strip()
    public = state.using_public_gateway
    sdk = state.uses_sdk_as_initiator

    if (public or sdk) and app_id == "":
        raise ConfigValidationError(ValidationErrorKind.MISSING_APP_ID)

    if public:
        if gateway_url == "":
            raise ConfigValidationError(ValidationErrorKind.MISSING_GATEWAY_URL)
        if not gateway_url.startswith(HTTP_PREFIX):
            raise ConfigValidationError(ValidationErrorKind.INVALID_GATEWAY_URL_SCHEME)
        # The trailing slash is appended by the push APIs
        if gateway_url.endswith("/"):
            raise ConfigValidationError(ValidationErrorKind.TRAILING_SLASH_GATEWAY_URL)

    if sdk:
        if initiator_url == "":
            raise ConfigValidationError(ValidationErrorKind.MISSING_INITIATOR_URL)
        if not initiator_url.startswith((HTTP_PREFIX, HTTPS_PREFIX)):
            raise ConfigValidationError(ValidationErrorKind.INVALID_INITIATOR_URL_SCHEME)
        if initiator_url.endswith("/"):
            raise ConfigValidationError(ValidationErrorKind.TRAILING_SLASH_INITIATOR_URL)

    return ValidatedConfig(
        app_id=app_id,
        initiator_url=initiator_url,
        gateway_url=gateway_url,
        uses_sdk_as_initiator=sdk,
        using_public_gateway=public,
        launch_app=state.launch_app,
    )
