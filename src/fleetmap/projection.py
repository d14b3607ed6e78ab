"""Side-list projection of the vessel snapshot.

Unlike the map, the list flattens unknown telemetry to zero for display.
"""

from __future__ import annotations

from collections.abc import Sequence

from fleetmap._constants import (
    DEFAULT_MAP_ROUTE,
    ICON_HEADING_OFFSET_DEGREES,
    KNOTS_PER_SPEED_UNIT,
    MILLIVOLTS_PER_VOLT,
)
from fleetmap.models.vessel import Vessel
from fleetmap.models.view import VesselDisplayRecord
from fleetmap.selection import build_location
from fleetmap.telemetry import resolve_position


def speed_to_knots(speed: float | None) -> float:
    if not speed:
        return 0.0
    return speed * KNOTS_PER_SPEED_UNIT


def format_voltage(power: float | None) -> str:
    volts = power / MILLIVOLTS_PER_VOLT if power else 0.0
    return f"{volts:.2f}"


class VesselListProjector:
    """Builds :class:`VesselDisplayRecord` rows."""

    def __init__(self, route: str = DEFAULT_MAP_ROUTE) -> None:
        self._route = route

    def project(self, vessel: Vessel, selected_id: int | None) -> VesselDisplayRecord:
        position = resolve_position(vessel)
        speed = position.speed if position is not None else None
        power = position.power if position is not None else None
        heading = (position.course if position is not None else None) or 0.0

        knots = speed_to_knots(speed)
        is_selected = selected_id is not None and vessel.id == selected_id
        return VesselDisplayRecord(
            vessel_id=vessel.id,
            name=vessel.name,
            vessel_type_label=vessel.vessel_type_label,
            speed_knots=knots,
            speed_label=f"{knots:.2f} kts",
            voltage=format_voltage(power),
            heading_degrees=heading,
            icon_rotation=heading + ICON_HEADING_OFFSET_DEGREES,
            is_selected=is_selected,
            has_position=position is not None and position.coordinates is not None,
            action_url=build_location(self._route, None if is_selected else vessel.id),
        )

    def project_all(self, vessels: Sequence[Vessel], selected_id: int | None) -> list[VesselDisplayRecord]:
        return [self.project(vessel, selected_id) for vessel in vessels]
