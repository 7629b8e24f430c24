"""Exceptions raised by the A. O. Smith cloud API client."""

from __future__ import annotations

from enum import StrEnum
from typing import ClassVar


class AOSmithErrorKind(StrEnum):
    """Failure category carried by every AOSmithError."""

    INVALID_CREDENTIALS = "invalid_credentials"
    INVALID_PARAMETERS = "invalid_parameters"
    UNKNOWN = "unknown"


class AOSmithError(Exception):
    """Base exception for A. O. Smith API client errors."""

    kind: ClassVar[AOSmithErrorKind]

    def __init__(self, message: str) -> None:
        """Initialize the error with a human-readable message."""
        self.message = message
        super().__init__(message)


class AOSmithInvalidCredentialsError(AOSmithError):
    """Exception raised when the server rejects the email or password."""

    kind = AOSmithErrorKind.INVALID_CREDENTIALS

    INVALID_CREDENTIALS = "Invalid email address or password"


class AOSmithInvalidParametersError(AOSmithError):
    """Exception raised when an argument violates a device rule."""

    kind = AOSmithErrorKind.INVALID_PARAMETERS

    SETPOINT_BELOW_MINIMUM = "Setpoint is below the minimum"
    SETPOINT_ABOVE_MAXIMUM = "Setpoint is above the maximum"
    INVALID_MODE = "Invalid mode for this device"
    INVALID_DAYS = "Invalid days selection"
    DAYS_NOT_SUPPORTED = "Days not supported for this operation mode"


class AOSmithUnknownError(AOSmithError):
    """Exception raised for any other failure."""

    kind = AOSmithErrorKind.UNKNOWN

    MAX_RETRIES_EXCEEDED = "Request failed - max retries exceeded"
    LOGIN_FAILED = "Login failed"
    STATUS_CODE = "Received status code {status_code}"
    UNKNOWN_ERROR = "Unknown error"
    GRAPHQL_ERROR = "Error: {messages}"
    MALFORMED_RESPONSE = "Malformed response: {error}"
    DEVICE_NOT_FOUND = "Device not found"
    SETPOINT_UPDATE_FAILED = "Failed to update setpoint"
    MODE_UPDATE_FAILED = "Failed to update mode"
