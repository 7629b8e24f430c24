"""GraphQL documents sent to the A. O. Smith cloud API."""

LOGIN_QUERY = (
    "query login($passcode: String) { login(passcode: $passcode) "
    "{ user { tokens { accessToken idToken refreshToken } } } }"
)

STATUS_QUERY = "{ status { isEverythingOkay } }"

DEVICES_QUERY = """
query devices($forceUpdate: Boolean, $junctionIds: [String]) {
    devices(forceUpdate: $forceUpdate, junctionIds: $junctionIds) {
        brand
        model
        deviceType
        dsn
        junctionId
        name
        serial
        install {
            location
        }
        data {
            __typename
            temperatureSetpoint
            temperatureSetpointPending
            temperatureSetpointPrevious
            temperatureSetpointMaximum
            modes {
                mode
                controls
            }
            isOnline
            ... on NextGenHeatPump {
                firmwareVersion
                hotWaterStatus
                mode
                modePending
                vacationModeRemainingDays
                electricModeRemainingDays
            }
        }
    }
}
"""

UPDATE_SETPOINT_MUTATION = (
    "mutation updateSetpoint($junctionId: String!, $value: Int!) "
    "{ updateSetpoint(junctionId: $junctionId, value: $value) }"
)

UPDATE_MODE_MUTATION = (
    "mutation updateMode($junctionId: String!, $mode: ModeInput!) "
    "{ updateMode(junctionId: $junctionId, mode: $mode) }"
)

ENERGY_USE_DATA_QUERY = """
query getEnergyUseData($dsn: String!, $deviceType: DeviceType!) {
    getEnergyUseData(dsn: $dsn, deviceType: $deviceType) {
        average
        graphData {
            date
            kwh
        }
        lifetimeKwh
        startDate
    }
}
"""
