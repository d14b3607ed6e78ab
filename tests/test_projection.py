from __future__ import annotations

from typing import Any

import pytest

from fleetmap.models.vessel import Vessel
from fleetmap.projection import VesselListProjector


def _vessel(vessel_id: int = 3, position: dict[str, Any] | None = None) -> Vessel:
    devices = [{"telematicsData": {"position": position}}] if position is not None else []
    return Vessel.model_validate(
        {
            "id": vessel_id,
            "name": "Thetis",
            "vesselType": {"id": 1, "vesselType": "Sailing"},
            "devices": devices,
        }
    )


def test_speed_voltage_and_heading_are_converted() -> None:
    record = VesselListProjector().project(
        _vessel(position={"latitude": 37.0, "longitude": 23.0, "speed": 10, "course": 90, "attributes": {"power": 12000}}),
        None,
    )

    assert record.speed_knots == pytest.approx(5.39957)
    assert record.speed_label == "5.40 kts"
    assert record.voltage == "12.00"
    assert record.heading_degrees == 90.0
    assert record.icon_rotation == 45.0
    assert record.name == "Thetis"
    assert record.vessel_type_label == "Sailing"
    assert record.has_position is True


def test_vessel_without_position_projects_zero_defaults() -> None:
    record = VesselListProjector().project(_vessel(), None)

    assert record.speed_knots == 0
    assert record.speed_label == "0.00 kts"
    assert record.voltage == "0.00"
    assert record.heading_degrees == 0
    assert record.icon_rotation == -45.0
    assert record.has_position is False


def test_partial_position_flattens_unknowns_to_zero() -> None:
    record = VesselListProjector().project(_vessel(position={"speed": "--", "attributes": {"power": 11520}}), None)

    assert record.speed_knots == 0
    assert record.voltage == "11.52"
    assert record.has_position is False


def test_selection_flags_and_action_urls() -> None:
    projector = VesselListProjector("/map")
    vessels = [_vessel(1), _vessel(2)]

    records = projector.project_all(vessels, 2)

    assert [record.is_selected for record in records] == [False, True]
    assert [record.action_url for record in records] == ["/map?selected=1", "/map"]


def test_no_selection_marks_nothing_selected() -> None:
    records = VesselListProjector().project_all([_vessel(1), _vessel(2)], None)

    assert not any(record.is_selected for record in records)
