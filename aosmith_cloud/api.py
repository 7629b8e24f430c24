"""Wire helpers for the A. O. Smith cloud API.

This module provides the pure functions used to talk to the GraphQL
endpoint: passcode encoding, header construction, response decoding and
payload extraction, plus the factory for the HTTP session.
"""

import base64
import json
import logging
from typing import Any
from urllib.parse import quote

import httpx
from httpx_retries import Retry, RetryTransport

from .const import (
    DEFAULT_TIMEOUT,
    ERROR_CODE_INVALID_CREDENTIALS,
    TYPENAME_NEXT_GEN_HEAT_PUMP,
)
from .exceptions import AOSmithInvalidCredentialsError, AOSmithUnknownError
from .models import (
    Device,
    DeviceStatus,
    EnergyUseData,
    EnergyUseHistoryEntry,
    HotWaterStatus,
    LoginTokens,
    NextGenHeatPumpStatus,
    OperationModeInfo,
)

_LOGGER = logging.getLogger(__name__)

# HTTP status codes
HTTP_UNAUTHORIZED = 401

# Characters left as-is by the server's percent-escaping on top of [A-Za-z0-9_.~-]
PASSCODE_SAFE_CHARS = "!*'()"


def build_passcode(email: str, password: str) -> str:
    """Encode credentials into the login passcode.

    The passcode is the compact JSON object ``{"email": ..., "password": ...}``,
    percent-escaped, then base64 encoded.

    Args:
        email: User email address.
        password: User password.

    Returns:
        Base64 passcode string.

    """
    json_string = json.dumps(
        {"email": email, "password": password},
        separators=(",", ":"),
        ensure_ascii=False,
    )
    url_encoded = quote(json_string, safe=PASSCODE_SAFE_CHARS)
    return base64.b64encode(url_encoded.encode("ascii")).decode("ascii")


def create_headers(token: str | None = None) -> dict[str, str]:
    """Create HTTP headers for GraphQL requests.

    Args:
        token: Optional bearer token to include as Authorization.

    Returns:
        Dictionary containing HTTP headers.

    """
    headers = {
        "content-type": "application/json",
        "accept": "application/json",
    }
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


def is_auth_error(status: int) -> bool:
    """Check if HTTP status code indicates an expired session.

    Args:
        status: HTTP status code to check.

    Returns:
        True if status code is 401, False otherwise.

    """
    return status == HTTP_UNAUTHORIZED


def is_failed_response(data: dict[str, Any]) -> bool:
    """Check if a GraphQL envelope is the failure variant.

    Args:
        data: Decoded response body.

    Returns:
        True if the envelope carries an "errors" field, False otherwise.

    """
    return "errors" in data


def is_invalid_credentials_response(errors: list[dict[str, Any]]) -> bool:
    """Check if any GraphQL error reports rejected credentials.

    Entries whose "extensions" is not an object carry no code.
    """
    return any(
        isinstance(error.get("extensions"), dict)
        and error["extensions"].get("code") == ERROR_CODE_INVALID_CREDENTIALS
        for error in errors
    )


def decode_graphql_response(data: Any) -> dict[str, Any]:
    """Decode a GraphQL envelope into its data payload.

    Args:
        data: Decoded JSON response body.

    Returns:
        The "data" member of a successful response.

    Raises:
        AOSmithInvalidCredentialsError: If the server rejected the credentials.
        AOSmithUnknownError: If the response carries any other error or is
            malformed.

    """
    if not isinstance(data, dict):
        raise AOSmithUnknownError(
            AOSmithUnknownError.MALFORMED_RESPONSE.format(error="expected an object")
        )

    if is_failed_response(data):
        errors = data["errors"] or []
        if not isinstance(errors, list) or not all(
            isinstance(error, dict) for error in errors
        ):
            raise AOSmithUnknownError(
                AOSmithUnknownError.MALFORMED_RESPONSE.format(
                    error="errors must be a list of objects"
                )
            )
        if is_invalid_credentials_response(errors):
            raise AOSmithInvalidCredentialsError(
                AOSmithInvalidCredentialsError.INVALID_CREDENTIALS
            )
        messages = ", ".join(str(error.get("message", "")) for error in errors)
        raise AOSmithUnknownError(
            AOSmithUnknownError.GRAPHQL_ERROR.format(messages=messages)
        )

    payload = data.get("data")
    if not isinstance(payload, dict):
        raise AOSmithUnknownError(
            AOSmithUnknownError.MALFORMED_RESPONSE.format(error="missing data")
        )
    return payload


def extract_login_tokens(data: dict[str, Any]) -> LoginTokens:
    """Extract the token set from a login payload.

    Args:
        data: Decoded "data" member of the login response.

    Returns:
        LoginTokens with the access, id and refresh tokens.

    Raises:
        AOSmithUnknownError: If the payload is malformed.

    """
    try:
        tokens = data["login"]["user"]["tokens"]
        return LoginTokens(
            access_token=tokens["accessToken"],
            id_token=tokens.get("idToken"),
            refresh_token=tokens.get("refreshToken"),
        )
    except (KeyError, TypeError, AttributeError) as err:
        raise AOSmithUnknownError(
            AOSmithUnknownError.MALFORMED_RESPONSE.format(error=err)
        ) from err


def extract_is_everything_okay(data: dict[str, Any]) -> bool:
    """Extract the service status flag from a status payload."""
    try:
        return bool(data["status"]["isEverythingOkay"])
    except (KeyError, TypeError) as err:
        raise AOSmithUnknownError(
            AOSmithUnknownError.MALFORMED_RESPONSE.format(error=err)
        ) from err


def _extract_modes(
    modes_data: list[dict[str, Any]] | None,
) -> tuple[OperationModeInfo, ...]:
    return tuple(
        OperationModeInfo(mode=m["mode"], controls=m.get("controls"))
        for m in modes_data or []
    )


def _extract_setpoint_maximum(status_data: dict[str, Any]) -> int:
    maximum = status_data["temperatureSetpointMaximum"]
    if isinstance(maximum, bool) or not isinstance(maximum, int):
        error_msg = f"temperatureSetpointMaximum is not an integer: {maximum!r}"
        raise TypeError(error_msg)
    return maximum


def _extract_device_status(status_data: dict[str, Any]) -> DeviceStatus:
    """Build the status variant matching the payload's __typename."""
    common = {
        "typename": status_data["__typename"],
        "temperature_setpoint": status_data.get("temperatureSetpoint"),
        "temperature_setpoint_pending": status_data.get("temperatureSetpointPending"),
        "temperature_setpoint_previous": status_data.get("temperatureSetpointPrevious"),
        "temperature_setpoint_maximum": _extract_setpoint_maximum(status_data),
        "modes": _extract_modes(status_data.get("modes")),
        "is_online": status_data.get("isOnline"),
    }

    if status_data["__typename"] != TYPENAME_NEXT_GEN_HEAT_PUMP:
        return DeviceStatus(**common)

    hot_water_status = status_data.get("hotWaterStatus")
    return NextGenHeatPumpStatus(
        **common,
        firmware_version=status_data.get("firmwareVersion"),
        hot_water_status=HotWaterStatus(hot_water_status) if hot_water_status else None,
        mode=status_data.get("mode"),
        mode_pending=status_data.get("modePending"),
        vacation_mode_remaining_days=status_data.get("vacationModeRemainingDays"),
        electric_mode_remaining_days=status_data.get("electricModeRemainingDays"),
    )


def _extract_device(device_data: dict[str, Any]) -> Device:
    install = device_data.get("install") or {}
    return Device(
        brand=device_data.get("brand"),
        model=device_data.get("model"),
        device_type=device_data["deviceType"],
        dsn=device_data["dsn"],
        junction_id=device_data["junctionId"],
        name=device_data.get("name"),
        serial=device_data.get("serial"),
        install_location=install.get("location"),
        status=_extract_device_status(device_data["data"]),
    )


def extract_devices(data: dict[str, Any]) -> list[Device]:
    """Extract every device, of any type, from a devices payload.

    Args:
        data: Decoded "data" member of the devices response.

    Returns:
        List of Device objects in server order.

    Raises:
        AOSmithUnknownError: If the payload is malformed.

    """
    try:
        return [_extract_device(d) for d in data["devices"] or []]
    except (KeyError, TypeError, ValueError, AttributeError) as err:
        raise AOSmithUnknownError(
            AOSmithUnknownError.MALFORMED_RESPONSE.format(error=err)
        ) from err


def extract_energy_use_data(data: dict[str, Any]) -> EnergyUseData:
    """Extract energy use figures from a getEnergyUseData payload.

    Args:
        data: Decoded "data" member of the energy use response.

    Returns:
        EnergyUseData with the history in server order.

    Raises:
        AOSmithUnknownError: If the payload is malformed.

    """
    try:
        energy = data["getEnergyUseData"]
        return EnergyUseData(
            average=energy["average"],
            history=[
                EnergyUseHistoryEntry(date=point["date"], energy_use_kwh=point["kwh"])
                for point in energy.get("graphData") or []
            ],
            lifetime_kwh=energy["lifetimeKwh"],
            start_date=energy["startDate"],
        )
    except (KeyError, TypeError, AttributeError) as err:
        raise AOSmithUnknownError(
            AOSmithUnknownError.MALFORMED_RESPONSE.format(error=err)
        ) from err


def create_session_client() -> httpx.AsyncClient:
    """Create HTTP client with retry logic for the A. O. Smith API.

    Only gateway failures are retried at the transport level; a 401 is left
    to the query executor, which re-authenticates before replaying.

    Returns:
        Configured httpx AsyncClient with retry transport.

    """
    retry = Retry(
        total=3,
        backoff_factor=0.5,
        allowed_methods=["POST"],
        status_forcelist=[502, 503, 504],
    )
    transport = RetryTransport(transport=httpx.AsyncHTTPTransport(), retry=retry)
    return httpx.AsyncClient(transport=transport, timeout=DEFAULT_TIMEOUT)
