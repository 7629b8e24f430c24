"""Async client for A. O. Smith heat pump water heaters.

Main components:
- client.py: AOSmithAPIClient (device operations)
- executor.py: GraphQL execution with re-login on expired sessions
- session.py: Credentials and bearer token
- api.py: Passcode encoding, response decoding and payload extraction
- exceptions.py: Error taxonomy
"""

from .client import AOSmithAPIClient
from .exceptions import (
    AOSmithError,
    AOSmithErrorKind,
    AOSmithInvalidCredentialsError,
    AOSmithInvalidParametersError,
    AOSmithUnknownError,
)
from .models import (
    Device,
    DeviceStatus,
    EnergyUseData,
    EnergyUseHistoryEntry,
    HotWaterStatus,
    NextGenHeatPumpStatus,
    OperationModeInfo,
)

__all__ = [
    "AOSmithAPIClient",
    "AOSmithError",
    "AOSmithErrorKind",
    "AOSmithInvalidCredentialsError",
    "AOSmithInvalidParametersError",
    "AOSmithUnknownError",
    "Device",
    "DeviceStatus",
    "EnergyUseData",
    "EnergyUseHistoryEntry",
    "HotWaterStatus",
    "NextGenHeatPumpStatus",
    "OperationModeInfo",
]
