"""Client for A. O. Smith heat pump water heaters.

This module provides the device-level operations: listing devices,
changing the setpoint or operating mode, and reading energy use. Each
operation validates its arguments against the device before mutating it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Self

from . import api
from .const import (
    API_URL,
    DEFAULT_MODE_DAYS,
    MODE_DAYS_MAXIMUM,
    MODE_DAYS_MINIMUM,
    SETPOINT_MINIMUM,
)
from .exceptions import AOSmithInvalidParametersError, AOSmithUnknownError
from .executor import AOSmithQueryExecutor
from .models import NextGenHeatPumpStatus
from .queries import (
    DEVICES_QUERY,
    ENERGY_USE_DATA_QUERY,
    STATUS_QUERY,
    UPDATE_MODE_MUTATION,
    UPDATE_SETPOINT_MUTATION,
)

if TYPE_CHECKING:
    from types import TracebackType

    import httpx

    from .models import Device, EnergyUseData

_LOGGER = logging.getLogger(__name__)


class AOSmithAPIClient:
    """Async client for the A. O. Smith cloud API.

    Example:
        >>> async with AOSmithAPIClient("me@example.com", "secret") as client:
        ...     devices = await client.async_get_devices()
        ...     await client.async_update_setpoint(devices[0].junction_id, 130)

    """

    def __init__(
        self,
        email: str,
        password: str,
        session: httpx.AsyncClient | None = None,
        api_url: str = API_URL,
    ) -> None:
        """Initialize the client.

        Args:
            email: Account email address.
            password: Account password.
            session: Optional HTTP client session. When omitted, one is
                created and closed by this client.
            api_url: GraphQL endpoint.

        """
        self._owns_session = session is None
        self._session = session if session is not None else api.create_session_client()
        self._executor = AOSmithQueryExecutor(self._session, email, password, api_url)

    async def __aenter__(self) -> Self:
        """Async context manager entry."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        """Async context manager exit."""
        await self.async_close()

    async def async_close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            await self._session.aclose()

    async def async_is_everything_okay(self) -> bool:
        """Return the service status flag reported by the API."""
        data = await self._executor.async_execute(STATUS_QUERY)
        return api.extract_is_everything_okay(data)

    async def async_get_devices(self) -> list[Device]:
        """Fetch the heat pump water heaters registered to the account.

        Fresh data is requested on every call. Devices other than
        NextGenHeatPump are left out.

        Returns:
            List of Device objects whose status is a NextGenHeatPumpStatus.

        """
        data = await self._executor.async_execute(DEVICES_QUERY, {"forceUpdate": True})
        devices = api.extract_devices(data)

        heat_pumps = [d for d in devices if isinstance(d.status, NextGenHeatPumpStatus)]
        if len(heat_pumps) != len(devices):
            _LOGGER.debug(
                "Ignoring %d unsupported devices",
                len(devices) - len(heat_pumps),
            )
        _LOGGER.debug("Retrieved %d devices from A. O. Smith API", len(heat_pumps))
        return heat_pumps

    async def _async_get_device_by_junction_id(self, junction_id: str) -> Device:
        devices = await self.async_get_devices()

        for device in devices:
            if device.junction_id == junction_id:
                return device

        raise AOSmithUnknownError(AOSmithUnknownError.DEVICE_NOT_FOUND)

    async def async_update_setpoint(self, junction_id: str, setpoint: int) -> None:
        """Change the water temperature setpoint of a device.

        Args:
            junction_id: Target device junction ID.
            setpoint: New setpoint, between 95 and the device maximum.

        Raises:
            AOSmithInvalidParametersError: If the setpoint is out of range.
            AOSmithUnknownError: If the device is not found or the update
                is not accepted.

        """
        if setpoint < SETPOINT_MINIMUM:
            raise AOSmithInvalidParametersError(
                AOSmithInvalidParametersError.SETPOINT_BELOW_MINIMUM
            )

        device = await self._async_get_device_by_junction_id(junction_id)

        if setpoint > device.status.temperature_setpoint_maximum:
            raise AOSmithInvalidParametersError(
                AOSmithInvalidParametersError.SETPOINT_ABOVE_MAXIMUM
            )

        _LOGGER.debug("Setting setpoint of device %s to %s", junction_id, setpoint)
        data = await self._executor.async_execute(
            UPDATE_SETPOINT_MUTATION,
            {"junctionId": junction_id, "value": setpoint},
        )

        if data.get("updateSetpoint") is not True:
            raise AOSmithUnknownError(AOSmithUnknownError.SETPOINT_UPDATE_FAILED)

    async def async_update_mode(
        self,
        junction_id: str,
        mode: str,
        days: int | None = None,
    ) -> None:
        """Change the operating mode of a device.

        Args:
            junction_id: Target device junction ID.
            mode: One of the modes the device advertises.
            days: Duration for day-selectable modes such as vacation.
                Defaults to 100 for those modes and must be omitted for
                the others.

        Raises:
            AOSmithInvalidParametersError: If the mode or days are invalid
                for the device.
            AOSmithUnknownError: If the device is not found or the update
                is not accepted.

        """
        device = await self._async_get_device_by_junction_id(junction_id)

        mode_info = next((m for m in device.status.modes if m.mode == mode), None)
        if mode_info is None:
            raise AOSmithInvalidParametersError(AOSmithInvalidParametersError.INVALID_MODE)

        if mode_info.has_day_selection:
            if days is None:
                days = DEFAULT_MODE_DAYS
            elif not MODE_DAYS_MINIMUM <= days <= MODE_DAYS_MAXIMUM:
                raise AOSmithInvalidParametersError(
                    AOSmithInvalidParametersError.INVALID_DAYS
                )
            mode_input = {"mode": mode, "days": days}
        elif days is not None:
            raise AOSmithInvalidParametersError(
                AOSmithInvalidParametersError.DAYS_NOT_SUPPORTED
            )
        else:
            mode_input = {"mode": mode}

        _LOGGER.debug("Setting mode of device %s to %s", junction_id, mode_input)
        data = await self._executor.async_execute(
            UPDATE_MODE_MUTATION,
            {"junctionId": junction_id, "mode": mode_input},
        )

        if not data.get("updateMode"):
            raise AOSmithUnknownError(AOSmithUnknownError.MODE_UPDATE_FAILED)

    async def async_get_energy_use_data(self, junction_id: str) -> EnergyUseData:
        """Fetch energy use history for a device.

        Args:
            junction_id: Target device junction ID.

        Returns:
            EnergyUseData for the device.

        """
        device = await self._async_get_device_by_junction_id(junction_id)

        data = await self._executor.async_execute(
            ENERGY_USE_DATA_QUERY,
            {"dsn": device.dsn, "deviceType": device.device_type},
        )
        return api.extract_energy_use_data(data)
