"""Position lookup for vessel telemetry.

Every consumer reads positions through these two functions so that a
missing device, telemetry block or position is handled the same way
everywhere.
"""

from __future__ import annotations

from fleetmap.geo import LatLng
from fleetmap.models.position import TelemetryPosition
from fleetmap.models.vessel import Vessel


def resolve_position(vessel: Vessel) -> TelemetryPosition | None:
    """Return the first device's position fix, or ``None`` if any link is missing."""
    if not vessel.devices:
        return None
    telematics = vessel.devices[0].telematics_data
    if telematics is None:
        return None
    return telematics.position


def resolve_coordinates(vessel: Vessel) -> LatLng | None:
    """Return the vessel's coordinates when it has a valid position."""
    position = resolve_position(vessel)
    if position is None:
        return None
    return position.coordinates
