"""Constants for the A. O. Smith cloud API client.

This module contains all the constants used throughout the package,
including the API endpoint, retry limits and domain validation bounds.
"""

API_URL = "https://r2.wh8.co/graphql"

DEFAULT_TIMEOUT = 5.0

# Attempts per top-level request before giving up on re-login
MAX_RETRIES = 2

SETPOINT_MINIMUM = 95  # Fahrenheit

MODE_DAYS_MINIMUM = 1
MODE_DAYS_MAXIMUM = 100
DEFAULT_MODE_DAYS = 100

ERROR_CODE_INVALID_CREDENTIALS = "INVALID_CREDENTIALS"

TYPENAME_NEXT_GEN_HEAT_PUMP = "NextGenHeatPump"
MODE_CONTROLS_SELECT_DAYS = "SELECT_DAYS"
