"""Data models for the A. O. Smith cloud API."""

from dataclasses import dataclass
from enum import StrEnum

from .const import MODE_CONTROLS_SELECT_DAYS


class HotWaterStatus(StrEnum):
    """Hot water availability reported by a heat pump."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


@dataclass(frozen=True)
class LoginTokens:
    """Tokens returned by the login operation."""

    access_token: str
    id_token: str | None
    refresh_token: str | None


@dataclass(frozen=True)
class OperationModeInfo:
    """An operating mode a device advertises.

    Attributes:
        mode: Mode name as used by the updateMode mutation.
        controls: Extra control the mode accepts, "SELECT_DAYS" or None.

    """

    mode: str
    controls: str | None

    @property
    def has_day_selection(self) -> bool:
        """Return True if the mode takes a day count."""
        return self.controls == MODE_CONTROLS_SELECT_DAYS


@dataclass(frozen=True, slots=True)
class DeviceStatus:
    """Status block shared by every device type."""

    typename: str
    temperature_setpoint: int | None
    temperature_setpoint_pending: bool | None
    temperature_setpoint_previous: int | None
    temperature_setpoint_maximum: int
    modes: tuple[OperationModeInfo, ...]
    is_online: bool | None


@dataclass(frozen=True, slots=True)
class NextGenHeatPumpStatus(DeviceStatus):
    """Status block of a NextGenHeatPump device."""

    firmware_version: str | None
    hot_water_status: HotWaterStatus | None
    mode: str | None
    mode_pending: bool | None
    vacation_mode_remaining_days: int | None
    electric_mode_remaining_days: int | None


@dataclass(frozen=True)
class Device:
    """Represents a water heater registered to the account.

    Attributes:
        junction_id: Stable identifier used by all device operations.
        dsn: Device serial number, used for energy use queries.
        status: Either a generic DeviceStatus or a NextGenHeatPumpStatus.

    """

    brand: str | None
    model: str | None
    device_type: str
    dsn: str
    junction_id: str
    name: str | None
    serial: str | None
    install_location: str | None
    status: DeviceStatus


@dataclass(frozen=True)
class EnergyUseHistoryEntry:
    """A single point of the energy use time series."""

    date: str
    energy_use_kwh: float


@dataclass(frozen=True)
class EnergyUseData:
    """Energy use summary for a single device."""

    average: float
    history: list[EnergyUseHistoryEntry]
    lifetime_kwh: float
    start_date: str
