"""Python library for reconciling Netatmo homestatus and homesdata room views."""

from .battery import extract_battery_state, index_module_telemetry
from .models import ModuleTelemetry, RoomConfig, RoomMembership, RoomStatus
from .pipeline import build_room_data
from .rooms import combine_room_data, filter_homesdata, filter_homestatus

__version__ = "0.1.0"

__all__ = [
    "ModuleTelemetry",
    "RoomConfig",
    "RoomMembership",
    "RoomStatus",
    "__version__",
    "build_room_data",
    "combine_room_data",
    "extract_battery_state",
    "filter_homesdata",
    "filter_homestatus",
    "index_module_telemetry",
]
