"""Vessel model."""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from fleetmap.ingestion.normalize import mapping_or_none, safe_int, safe_str
from fleetmap.models._base import FleetBaseModel
from fleetmap.models.position import TelemetryPosition


class VesselType(FleetBaseModel):
    """Vessel classification."""

    id: int | None = None
    vessel_type: str = ""
    """Human-readable label (e.g. ``"Fishing"``)."""

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> int | None:
        return safe_int(value)

    @field_validator("vessel_type", mode="before")
    @classmethod
    def _coerce_label(cls, value: Any) -> str:
        return safe_str(value) or ""


class TelematicsData(FleetBaseModel):
    """Telemetry block carried by a device."""

    position: TelemetryPosition | None = None

    @field_validator("position", mode="before")
    @classmethod
    def _coerce_position(cls, value: Any) -> Any:
        return mapping_or_none(value)


class Device(FleetBaseModel):
    """A tracking device installed on a vessel."""

    telematics_data: TelematicsData | None = None

    @field_validator("telematics_data", mode="before")
    @classmethod
    def _coerce_telematics(cls, value: Any) -> Any:
        return mapping_or_none(value)


class Vessel(FleetBaseModel):
    """A vessel as returned by the vessel list endpoint.

    Only ``devices[0]`` carries telemetry that the map view consults.
    """

    id: int
    """Unique vessel identifier."""
    name: str | None = None
    vessel_type: VesselType | None = None
    devices: list[Device] = Field(default_factory=list)

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        parsed = safe_int(value)
        # Leave unparseable ids to pydantic so the record is rejected.
        return value if parsed is None else parsed

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, value: Any) -> str | None:
        return safe_str(value)

    @field_validator("vessel_type", mode="before")
    @classmethod
    def _coerce_vessel_type(cls, value: Any) -> Any:
        return mapping_or_none(value)

    @field_validator("devices", mode="before")
    @classmethod
    def _coerce_devices(cls, value: Any) -> list[Any]:
        if not isinstance(value, list):
            return []
        # A null slot is still a device slot; keep list positions stable.
        return [item if mapping_or_none(item) is not None else {} for item in value]

    @property
    def display_name(self) -> str:
        return self.name or ""

    @property
    def vessel_type_label(self) -> str | None:
        if self.vessel_type is None:
            return None
        return self.vessel_type.vessel_type or None
