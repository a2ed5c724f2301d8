"""
Application constants with documented reasoning.

This file centralizes names and user-facing strings shared between the
configuration pipeline, the screen adapter and the API.
"""

# =============================================================================
# DATABASE
# =============================================================================

# SQLite busy timeout - wait for locks before failing
# The screen only ever issues one save at a time, 5 seconds is plenty
SQLITE_BUSY_TIMEOUT_MS = 5000

# Single-row table holding the push configuration
CONFIGURATION_TABLE = "configuration"

# =============================================================================
# SCREEN ELEMENTS
# =============================================================================

APP_ID = "appid"
INITIATOR_URL = "piurl"
GATEWAY_URL = "ppgurl"
USE_SDK = "usesdkaspi"
LAUNCH_APP = "launchapp"
PUBLIC_RADIO = "publicradio"
ENTERPRISE_RADIO = "enterpriseradio"
ERROR_DIV = "errordiv"
ERROR_MSG = "errormsg"
PROGRESS_INFO = "progressinfo"

# Radio group selecting the gateway type
GATEWAY_TYPE_GROUP = (PUBLIC_RADIO, ENTERPRISE_RADIO)

# Text inputs, in the order they appear on the screen
TEXT_INPUTS = (APP_ID, INITIATOR_URL, GATEWAY_URL)

# =============================================================================
# MESSAGES
# =============================================================================

SAVING_MESSAGE = "Saving..."
SAVED_MESSAGE = "Successfully saved. Please register now."
DATABASE_ERROR_MESSAGE = "Error: The configuration database could not be accessed."
MULTIPLE_ROWS_MESSAGE = "Error: There should be only one entry stored for configuration."
PUSH_SERVICE_ERROR_MESSAGE = "Error: The push service could not be created."
GATEWAY_LOCKED_MESSAGE = "Error: The PPG type cannot be changed once the configuration has been saved."
