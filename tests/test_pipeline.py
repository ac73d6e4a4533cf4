"""Tests for the full room data assembly."""

from pynetatmoproxy import build_room_data


def test_build_room_data_sample_payloads(homestatus, homesdata) -> None:
    data = build_room_data(homestatus, homesdata)
    bathroom, kitchen, unknown = data["rooms"]

    assert data["meta"]["homestatus"] is homestatus
    assert data["meta"]["homesdata"] is homesdata

    assert bathroom["name"] == "Bathroom"
    assert bathroom["therm_setpoint_mode"] == "schedule"
    assert bathroom["battery_state"] == "very_low"
    assert bathroom["battery_level"] == 2551
    assert bathroom["rf_strength"] == 80
    assert bathroom["reachable"] is False
    assert bathroom["firmware_revision"] == 75

    assert kitchen["name"] == "Kitchen"
    assert kitchen["battery_state"] == "full"
    assert kitchen["reachable"] is True

    assert unknown["id"] == "38038562"
    assert unknown["warning"] == "Missing room config"
    assert "battery_state" not in unknown


def test_build_room_data_without_homestatus(homesdata) -> None:
    data = build_room_data(None, homesdata)

    assert [room["name"] for room in data["rooms"]] == ["Bathroom", "Kitchen", "Bedroom"]
    assert all(
        room["error"] == "Missing homestatus data from Netatmo" for room in data["rooms"]
    )
    # No homestatus modules, so nothing to overlay
    assert all("battery_state" not in room for room in data["rooms"])
    assert data["rooms"][2]["warning"] == "No module_ids found for this room"


def test_build_room_data_without_homesdata(homestatus) -> None:
    data = build_room_data(homestatus, None)

    assert len(data["rooms"]) == 3
    for room in data["rooms"]:
        assert room["warning"] == "Missing room config"
        assert room["error_config"] == "Missing homesdata configuration"
        assert "battery_state" not in room


def test_build_room_data_without_payloads() -> None:
    assert build_room_data(None, None) == {
        "rooms": [],
        "meta": {"homestatus": None, "homesdata": None},
    }
