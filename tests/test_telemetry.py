from __future__ import annotations

from typing import Any

import pytest

from fleetmap.geo import LatLng
from fleetmap.models.vessel import Vessel
from fleetmap.telemetry import resolve_coordinates, resolve_position


def _vessel(devices: Any) -> Vessel:
    return Vessel.model_validate({"id": 1, "name": "Nereus", "devices": devices})


def test_resolves_first_device_position() -> None:
    vessel = _vessel(
        [
            {"telematicsData": {"position": {"latitude": 38.1, "longitude": 24.2, "speed": 3}}},
            {"telematicsData": {"position": {"latitude": 1.0, "longitude": 1.0}}},
        ]
    )

    position = resolve_position(vessel)

    assert position is not None
    assert (position.latitude, position.longitude, position.speed) == (38.1, 24.2, 3.0)
    assert resolve_coordinates(vessel) == LatLng(38.1, 24.2)


@pytest.mark.parametrize(
    "devices",
    [
        [],
        None,
        [None],
        [{}],
        [{"telematicsData": None}],
        [{"telematicsData": {}}],
        [{"telematicsData": {"position": None}}],
    ],
)
def test_missing_link_resolves_to_no_position(devices: Any) -> None:
    vessel = _vessel(devices)

    assert resolve_position(vessel) is None
    assert resolve_coordinates(vessel) is None


@pytest.mark.parametrize(
    "position",
    [
        {"latitude": 38.1},
        {"longitude": 24.2},
        {"latitude": "--", "longitude": 24.2},
        {"speed": 4},
    ],
)
def test_partial_position_has_no_coordinates(position: dict[str, Any]) -> None:
    vessel = _vessel([{"telematicsData": {"position": position}}])

    assert resolve_position(vessel) is not None
    assert resolve_coordinates(vessel) is None


def test_zero_coordinates_are_valid() -> None:
    vessel = _vessel([{"telematicsData": {"position": {"latitude": 0, "longitude": 0}}}])

    assert resolve_coordinates(vessel) == LatLng(0.0, 0.0)
