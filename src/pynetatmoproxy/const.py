"""Constants for pynetatmoproxy."""

# Vendor endpoints the raw payloads are fetched from by the caller
HOMESDATA_ENDPOINT = "/api/homesdata"
HOMESTATUS_ENDPOINT = "/syncapi/v1/homestatus"

# Room-level annotation keys
ERROR_KEY = "error"
WARNING_KEY = "warning"
ERROR_CONFIG_KEY = "error_config"

# Annotation messages (consumed verbatim by downstream displays)
MISSING_HOMESTATUS_ERROR = "Missing homestatus data from Netatmo"
MISSING_ROOM_CONFIG_WARNING = "Missing room config"
MISSING_MODULE_IDS_WARNING = "No module_ids found for this room"
MISSING_HOMESDATA_ERROR = "Missing homesdata configuration"

# Fields projected out of a homestatus room record, in output order
ROOM_STATUS_FIELDS = (
    "id",
    "reachable",
    "anticipating",
    "open_window",
    "therm_measured_temperature",
    "therm_setpoint_temperature",
    "therm_setpoint_mode",
)

# Fields projected out of a homesdata room record
ROOM_CONFIG_FIELDS = ("id", "name", "type")

# Module fields copied onto a room by the battery overlay
TELEMETRY_FIELDS = (
    "battery_state",
    "battery_level",
    "rf_strength",
    "reachable",
    "firmware_revision",
)
