"""Pytest configuration and fixtures for A. O. Smith client tests."""

import json
from typing import Any

import httpx
import pytest
from pytest_httpx import HTTPXMock

from aosmith_cloud.const import API_URL
from aosmith_cloud.queries import LOGIN_QUERY

TEST_EMAIL = "test@example.com"
TEST_PASSWORD = "password123"
TEST_JUNCTION_ID = "junction1"
GENERIC_JUNCTION_ID = "junction2"
TEST_SETPOINT_MAXIMUM = 140


def create_login_response(access_token: str = "access_token_1") -> dict[str, Any]:
    """Create a login API response carrying the given access token."""
    return {
        "data": {
            "login": {
                "user": {
                    "tokens": {
                        "accessToken": access_token,
                        "idToken": "id_token",
                        "refreshToken": "refresh_token",
                    },
                },
            },
        },
    }


def add_login_response(
    httpx_mock: HTTPXMock,
    access_token: str = "access_token_1",
) -> None:
    """Register a successful login response."""
    httpx_mock.add_response(
        url=API_URL,
        method="POST",
        json=create_login_response(access_token),
    )


def add_data_response(httpx_mock: HTTPXMock, data: dict[str, Any]) -> None:
    """Register a successful GraphQL response with the given data."""
    httpx_mock.add_response(url=API_URL, method="POST", json={"data": data})


def request_body(request: httpx.Request) -> dict[str, Any]:
    """Decode the JSON body of a captured request."""
    return json.loads(request.content)


def login_requests(httpx_mock: HTTPXMock) -> list[httpx.Request]:
    """Return the captured requests that were login operations."""
    return [
        request
        for request in httpx_mock.get_requests()
        if request_body(request)["query"] == LOGIN_QUERY
    ]


@pytest.fixture
def next_gen_heat_pump_data() -> dict[str, Any]:
    """Fixture providing a NextGenHeatPump device as returned by the API."""
    return {
        "brand": "aosmith",
        "model": "HPTS-50 200 202172000",
        "deviceType": "NEXT_GEN_HEAT_PUMP",
        "dsn": "dsn1",
        "junctionId": TEST_JUNCTION_ID,
        "name": "Water Heater",
        "serial": "serial1",
        "install": {"location": "Basement"},
        "data": {
            "__typename": "NextGenHeatPump",
            "temperatureSetpoint": 130,
            "temperatureSetpointPending": False,
            "temperatureSetpointPrevious": 130,
            "temperatureSetpointMaximum": TEST_SETPOINT_MAXIMUM,
            "modes": [
                {"mode": "HYBRID", "controls": None},
                {"mode": "HEAT_PUMP", "controls": None},
                {"mode": "ELECTRIC", "controls": "SELECT_DAYS"},
                {"mode": "VACATION", "controls": "SELECT_DAYS"},
            ],
            "isOnline": True,
            "firmwareVersion": "2.14",
            "hotWaterStatus": "HIGH",
            "mode": "HEAT_PUMP",
            "modePending": False,
            "vacationModeRemainingDays": 0,
            "electricModeRemainingDays": 0,
        },
    }


@pytest.fixture
def generic_device_data() -> dict[str, Any]:
    """Fixture providing a device of an unsupported type."""
    return {
        "brand": "aosmith",
        "model": "EE12-50H55DVF",
        "deviceType": "RE3_CONNECTED",
        "dsn": "dsn2",
        "junctionId": GENERIC_JUNCTION_ID,
        "name": "Garage Heater",
        "serial": "serial2",
        "install": {"location": "Garage"},
        "data": {
            "__typename": "RE3Connected",
            "temperatureSetpoint": 120,
            "temperatureSetpointPending": False,
            "temperatureSetpointPrevious": 120,
            "temperatureSetpointMaximum": 140,
            "modes": [{"mode": "STANDARD", "controls": None}],
            "isOnline": True,
        },
    }


@pytest.fixture
def sample_devices_data(
    next_gen_heat_pump_data: dict[str, Any],
    generic_device_data: dict[str, Any],
) -> dict[str, Any]:
    """Fixture providing a devices payload with one supported device.

    Args:
        next_gen_heat_pump_data: NextGenHeatPump device fixture.
        generic_device_data: Unsupported device fixture.

    Returns:
        The "data" member of a devices API response.

    """
    return {"devices": [generic_device_data, next_gen_heat_pump_data]}


@pytest.fixture
def sample_energy_use_data() -> dict[str, Any]:
    """Fixture providing the "data" member of an energy use response."""
    return {
        "getEnergyUseData": {
            "average": 2.4,
            "graphData": [
                {"date": "2024-01-01T00:00:00.000Z", "kwh": 2.1},
                {"date": "2024-01-02T00:00:00.000Z", "kwh": 2.7},
            ],
            "lifetimeKwh": 1234.5,
            "startDate": "2023-06-01",
        },
    }
