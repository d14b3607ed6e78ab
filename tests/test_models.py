from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError

from fleetmap.exceptions import FleetMapTransportError
from fleetmap.ingestion.vessels import parse_vessel_list
from fleetmap.models.vessel import Vessel


def _payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": 11,
        "name": "Poseidon",
        "vesselType": {"id": 2, "vesselType": "Fishing"},
        "devices": [
            {
                "telematicsData": {
                    "position": {
                        "latitude": "37.9",
                        "longitude": 23.7,
                        "speed": 10,
                        "course": 135,
                        "attributes": {"power": 12000},
                    }
                }
            }
        ],
    }
    payload.update(overrides)
    return payload


def test_vessel_parses_camel_case_payload() -> None:
    vessel = Vessel.model_validate(_payload())

    assert vessel.id == 11
    assert vessel.name == "Poseidon"
    assert vessel.vessel_type_label == "Fishing"
    position = vessel.devices[0].telematics_data.position  # type: ignore[union-attr]
    assert position is not None
    assert position.latitude == 37.9
    assert position.longitude == 23.7
    assert position.course == 135.0
    assert position.power == 12000.0
    assert vessel.raw["name"] == "Poseidon"


def test_placeholder_telemetry_becomes_unknown_not_zero() -> None:
    vessel = Vessel.model_validate(
        _payload(devices=[{"telematicsData": {"position": {"latitude": 1, "longitude": 2, "speed": "--", "course": ""}}}])
    )

    position = vessel.devices[0].telematics_data.position  # type: ignore[union-attr]
    assert position is not None
    assert position.speed is None
    assert position.course is None
    assert position.attributes is None
    assert position.power is None


def test_string_id_is_coerced() -> None:
    assert Vessel.model_validate(_payload(id="42")).id == 42


def test_missing_id_is_rejected() -> None:
    payload = _payload()
    del payload["id"]
    with pytest.raises(ValidationError):
        Vessel.model_validate(payload)


def test_garbage_nested_values_are_treated_as_absent() -> None:
    vessel = Vessel.model_validate(_payload(vesselType="boat", devices=[None, {"telematicsData": "n/a"}]))

    assert vessel.vessel_type is None
    assert vessel.vessel_type_label is None
    assert len(vessel.devices) == 2
    assert vessel.devices[0].telematics_data is None
    assert vessel.devices[1].telematics_data is None


def test_devices_not_a_list_becomes_empty() -> None:
    assert Vessel.model_validate(_payload(devices={"oops": True})).devices == []
    assert Vessel.model_validate(_payload(devices=None)).devices == []


def test_parse_vessel_list_skips_invalid_and_duplicate_records() -> None:
    vessels = parse_vessel_list(
        [
            _payload(id=1, name="first"),
            "not a vessel",
            {"name": "no id"},
            _payload(id=1, name="duplicate"),
            _payload(id=2, name="second"),
        ]
    )

    assert [(vessel.id, vessel.name) for vessel in vessels] == [(1, "first"), (2, "second")]


def test_parse_vessel_list_rejects_non_list_payload() -> None:
    with pytest.raises(FleetMapTransportError) as exc_info:
        parse_vessel_list({"vessels": []}, endpoint="/Appoploo2/vessels")

    assert exc_info.value.endpoint == "/Appoploo2/vessels"


def test_ids_beyond_float_precision_stay_distinct() -> None:
    vessels = parse_vessel_list([_payload(id=2**60), _payload(id=2**60 + 1), _payload(id=str(2**60 + 3))])

    assert [vessel.id for vessel in vessels] == [2**60, 2**60 + 1, 2**60 + 3]
