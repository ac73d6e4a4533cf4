"""Projection and merging of the homestatus and homesdata room views."""

from collections.abc import Mapping
import logging
from typing import Any

from .const import (
    ERROR_KEY,
    MISSING_HOMESTATUS_ERROR,
    MISSING_ROOM_CONFIG_WARNING,
    WARNING_KEY,
)
from .models import RoomConfig, RoomStatus, get_path

_LOGGER = logging.getLogger(__name__)


def _as_dict(value: Any) -> dict[str, Any]:
    return dict(value) if isinstance(value, Mapping) else {}


def _as_list(value: Any) -> list[Any]:
    """Normalize an upstream room sequence; anything else reads as empty."""
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def first_home(payload: Any) -> Any:
    """Return ``payload.body.homes[0]``, or ``None`` when there is no home.

    Only the first home of an account is ever consulted; multi-home accounts
    are not supported.
    """
    homes = get_path(payload, "body", "homes")
    if not isinstance(homes, list) or not homes:
        return None
    return homes[0]


def filter_homestatus(payload: Any) -> list[dict[str, Any]]:
    """Project a homestatus response into per-room runtime fields.

    Args:
        payload: Parsed ``/syncapi/v1/homestatus`` response body.

    Returns:
        One dict per entry of ``body.home.rooms``, in source order, or an
        empty list when any level of that path is missing.

    """
    rooms = get_path(payload, "body", "home", "rooms")
    if not rooms or not isinstance(rooms, list):
        _LOGGER.debug("No rooms found in homestatus payload")
        return []

    status_rooms = [RoomStatus.from_raw(room).as_dict() for room in rooms]
    _LOGGER.debug("Extracted %d rooms from homestatus", len(status_rooms))
    return status_rooms


def filter_homesdata(payload: Any) -> list[dict[str, Any]]:
    """Project a homesdata response into per-room identity fields.

    Only ``body.homes[0].rooms`` is read. Returns an empty list when the
    homes list is missing or empty, or the first home has no rooms.
    """
    rooms = get_path(first_home(payload), "rooms")
    if not rooms or not isinstance(rooms, list):
        _LOGGER.debug("No rooms found in homesdata payload")
        return []

    config_rooms = [RoomConfig.from_raw(room).as_dict() for room in rooms]
    _LOGGER.debug("Extracted %d rooms from homesdata", len(config_rooms))
    return config_rooms


def combine_room_data(
    homestatus_rooms: Any,
    homesdata_rooms: Any,
) -> list[dict[str, Any]]:
    """Join the status and config room views on ``id``.

    The status rooms drive the result: their order and membership are kept,
    config fields are added underneath and status fields win on a key
    collision. A status room without config gets a ``warning``. When there
    is no status at all, the config rooms are returned with an ``error``
    so that every known room still shows up.

    Args:
        homestatus_rooms: Output of `filter_homestatus`; non-lists read as empty.
        homesdata_rooms: Output of `filter_homesdata`; non-lists read as empty.

    Returns:
        A list of new room dicts. The inputs are not modified.

    """
    status_rooms = _as_list(homestatus_rooms)
    config_rooms = _as_list(homesdata_rooms)

    if not status_rooms and config_rooms:
        _LOGGER.warning(
            "Homestatus has no rooms, returning %d configured rooms with an error",
            len(config_rooms),
        )
        return [
            {**_as_dict(room), ERROR_KEY: MISSING_HOMESTATUS_ERROR}
            for room in config_rooms
        ]

    combined = []
    for status_room in status_rooms:
        room_id = get_path(status_room, "id")
        config_room = next(
            (room for room in config_rooms if get_path(room, "id") == room_id),
            None,
        )
        if config_room is None:
            _LOGGER.warning("No homesdata config for room %s", room_id)
            combined.append(
                {**_as_dict(status_room), WARNING_KEY: MISSING_ROOM_CONFIG_WARNING},
            )
        else:
            combined.append({**_as_dict(config_room), **_as_dict(status_room)})

    return combined
