"""Telemetry position model."""

from __future__ import annotations

from typing import Any

from pydantic import field_validator

from fleetmap.geo import LatLng
from fleetmap.ingestion.normalize import mapping_or_none, safe_float
from fleetmap.models._base import FleetBaseModel


class PositionAttributes(FleetBaseModel):
    """Free-form device attributes attached to a position fix."""

    power: float | None = None
    """Supply voltage in millivolts."""

    @field_validator("power", mode="before")
    @classmethod
    def _coerce_power(cls, value: Any) -> float | None:
        return safe_float(value)


class TelemetryPosition(FleetBaseModel):
    """A position fix reported by a vessel's tracking device.

    Every numeric field is ``None`` when absent or unparseable. Absence
    means "unknown", never zero.

    Parameters
    ----------
    latitude : float or None
        Latitude in degrees.
    longitude : float or None
        Longitude in degrees.
    speed : float or None
        Speed over ground in km/h.
    course : float or None
        Heading in degrees.
    attributes : PositionAttributes or None
        Device attributes (power).
    """

    latitude: float | None = None
    longitude: float | None = None
    speed: float | None = None
    course: float | None = None
    attributes: PositionAttributes | None = None

    @field_validator("latitude", "longitude", "speed", "course", mode="before")
    @classmethod
    def _coerce_floats(cls, value: Any) -> float | None:
        return safe_float(value)

    @field_validator("attributes", mode="before")
    @classmethod
    def _coerce_attributes(cls, value: Any) -> Any:
        return mapping_or_none(value)

    @property
    def coordinates(self) -> LatLng | None:
        """Coordinate pair, or ``None`` unless both halves are known."""
        if self.latitude is None or self.longitude is None:
            return None
        return LatLng(self.latitude, self.longitude)

    @property
    def power(self) -> float | None:
        return self.attributes.power if self.attributes is not None else None
