"""Overlay of module battery and radio telemetry onto combined rooms."""

from collections.abc import Hashable, Mapping, MutableMapping
import logging
from typing import Any

from .const import (
    ERROR_CONFIG_KEY,
    MISSING_HOMESDATA_ERROR,
    MISSING_MODULE_IDS_WARNING,
    WARNING_KEY,
)
from .models import ModuleTelemetry, RoomMembership, get_path
from .rooms import first_home

_LOGGER = logging.getLogger(__name__)


def _rooms_with_id(rooms: list[Any], room_id: Any) -> list[MutableMapping[str, Any]]:
    return [
        room
        for room in rooms
        if isinstance(room, MutableMapping) and room.get("id") == room_id
    ]


def index_module_telemetry(data: Any) -> dict[Any, ModuleTelemetry]:
    """Index the modules of ``meta.homestatus.body.home.modules`` by id.

    Only modules reporting a ``battery_state`` and an ``id`` are kept. A
    module id seen twice keeps its last record.
    """
    modules = get_path(data, "meta", "homestatus", "body", "home", "modules")
    telemetry: dict[Any, ModuleTelemetry] = {}
    if not isinstance(modules, list):
        _LOGGER.debug("No modules found in homestatus payload")
        return telemetry

    for module in modules:
        if not isinstance(module, Mapping) or module.get("battery_state") is None:
            continue
        record = ModuleTelemetry.from_raw(module)
        if record.id is not None and isinstance(record.id, Hashable):
            telemetry[record.id] = record

    _LOGGER.debug("Indexed telemetry for %d battery modules", len(telemetry))
    return telemetry


def extract_battery_state(data: Any) -> Any:
    """Copy battery, radio and firmware telemetry onto ``data["rooms"]``.

    ``data`` is the composite built by the proxy::

        {"rooms": [...], "meta": {"homestatus": {...}, "homesdata": {...}}}

    Rooms are linked to modules through the ``module_ids`` of the first
    home in ``meta.homesdata``. When several modules of one room report
    telemetry, the last one listed wins. Missing data never raises:

    * no homesdata rooms at all sets ``error_config`` on every room and
      stops there;
    * a homesdata room without ``module_ids`` sets ``warning`` on the
      matching rooms.

    The rooms are updated in place and ``data`` itself is returned.
    """
    rooms = get_path(data, "rooms")
    rooms = rooms if isinstance(rooms, list) else []
    telemetry = index_module_telemetry(data)

    memberships = get_path(first_home(get_path(data, "meta", "homesdata")), "rooms")
    if not isinstance(memberships, list):
        if rooms:
            _LOGGER.warning(
                "Homesdata has no rooms, flagging %d rooms with a config error",
                len(rooms),
            )
        for room in rooms:
            if isinstance(room, MutableMapping):
                room[ERROR_CONFIG_KEY] = MISSING_HOMESDATA_ERROR
        return data

    for membership in map(RoomMembership.from_raw, memberships):
        targets = _rooms_with_id(rooms, membership.id)

        if not membership.module_ids:
            if targets:
                _LOGGER.warning("No module_ids declared for room %s", membership.id)
            for room in targets:
                room[WARNING_KEY] = MISSING_MODULE_IDS_WARNING
            continue

        for module_id in membership.module_ids:
            module = (
                telemetry.get(module_id) if isinstance(module_id, Hashable) else None
            )
            if module is None:
                continue
            for room in targets:
                room.update(module.overlay())

    return data
