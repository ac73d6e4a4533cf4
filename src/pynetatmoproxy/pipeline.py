"""Assembly of the room list served by the proxy."""

import logging
from typing import Any

from .battery import extract_battery_state
from .rooms import combine_room_data, filter_homesdata, filter_homestatus

_LOGGER = logging.getLogger(__name__)


def build_room_data(homestatus: Any, homesdata: Any) -> dict[str, Any]:
    """Build the proxy response from the two raw Netatmo payloads.

    Runs both room projections, joins them and overlays module telemetry.
    The raw payloads are kept by reference under ``meta``.

    Args:
        homestatus: Parsed homestatus response body, or ``None`` if the
            fetch failed.
        homesdata: Parsed homesdata response body, or ``None`` if the
            fetch failed.

    Returns:
        ``{"rooms": [...], "meta": {"homestatus": ..., "homesdata": ...}}``

    """
    rooms = combine_room_data(
        filter_homestatus(homestatus),
        filter_homesdata(homesdata),
    )
    data = {
        "rooms": rooms,
        "meta": {"homestatus": homestatus, "homesdata": homesdata},
    }
    extract_battery_state(data)
    _LOGGER.debug("Built room data for %d rooms", len(rooms))
    return data
