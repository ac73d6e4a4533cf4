"""Data models for pynetatmoproxy.

Each model is a minimal projection of one record found in a raw Netatmo
payload. The ``from_raw`` constructors never raise: anything that is not a
mapping is read as an empty record.
"""

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from .const import ROOM_CONFIG_FIELDS, ROOM_STATUS_FIELDS, TELEMETRY_FIELDS


def _as_record(raw: Any) -> Mapping[str, Any]:
    return raw if isinstance(raw, Mapping) else {}


def get_path(node: Any, *keys: str) -> Any:
    """Walk nested mappings along ``keys``; ``None`` as soon as a level is missing."""
    for key in keys:
        if not isinstance(node, Mapping):
            return None
        node = node.get(key)
    return node


def _coalesce(record: Mapping[str, Any], key: str) -> Any:
    """Return ``record[key]`` when truthy, else ``None``.

    Every falsy value collapses to ``None``: legitimate ``0``/``False``, but
    also ``""`` and empty containers such as ``[]`` or ``{}``. Netatmo room
    fields are scalars, so in practice only ``0``/``False`` are affected, and
    the proxy's consumers rely on that.
    """
    return record.get(key) or None


@dataclass
class RoomStatus:
    """Live state of a room, from ``homestatus.body.home.rooms``."""

    id: str | None = None
    reachable: bool | None = None
    anticipating: bool | None = None
    open_window: bool | None = None
    therm_measured_temperature: float | None = None
    therm_setpoint_temperature: float | None = None
    therm_setpoint_mode: str | None = None

    @classmethod
    def from_raw(cls, raw: Any) -> "RoomStatus":
        """Project a raw homestatus room record."""
        record = _as_record(raw)
        return cls(**{key: _coalesce(record, key) for key in ROOM_STATUS_FIELDS})

    def as_dict(self) -> dict[str, Any]:
        """Return the room as a plain dict, in field order."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass
class RoomConfig:
    """Identity of a room, from ``homesdata.body.homes[0].rooms``."""

    id: str | None = None
    name: str | None = None
    type: str | None = None

    @classmethod
    def from_raw(cls, raw: Any) -> "RoomConfig":
        """Project a raw homesdata room record."""
        record = _as_record(raw)
        return cls(**{key: _coalesce(record, key) for key in ROOM_CONFIG_FIELDS})

    def as_dict(self) -> dict[str, Any]:
        """Return the room as a plain dict, in field order."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass
class ModuleTelemetry:
    """Battery and radio health of a module, from ``homestatus.body.home.modules``."""

    id: str | None = None
    battery_state: str | None = None
    battery_level: int | None = None
    rf_strength: int | None = None
    reachable: bool | None = None
    firmware_revision: int | None = None

    @classmethod
    def from_raw(cls, raw: Any) -> "ModuleTelemetry":
        """Copy the telemetry fields of a raw module record as they are."""
        record = _as_record(raw)
        return cls(
            id=record.get("id"),
            **{key: record.get(key) for key in TELEMETRY_FIELDS},
        )

    def overlay(self) -> dict[str, Any]:
        """Return the fields written onto a room carrying this module."""
        return {key: getattr(self, key) for key in TELEMETRY_FIELDS}


@dataclass
class RoomMembership:
    """Modules declared for a room in ``homesdata.body.homes[0].rooms``."""

    id: str | None = None
    module_ids: list[str] | None = None

    @classmethod
    def from_raw(cls, raw: Any) -> "RoomMembership":
        """Read the room id and its module ids; non-list ``module_ids`` become ``None``."""
        record = _as_record(raw)
        module_ids = record.get("module_ids")
        return cls(
            id=record.get("id"),
            module_ids=list(module_ids) if isinstance(module_ids, list) else None,
        )
