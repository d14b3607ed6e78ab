"""Data models for vessel records and the map view."""

from fleetmap.models._base import FleetBaseModel
from fleetmap.models.position import PositionAttributes, TelemetryPosition
from fleetmap.models.vessel import Device, TelematicsData, Vessel, VesselType
from fleetmap.models.view import VesselDisplayRecord, ViewModel

__all__ = [
    "Device",
    "FleetBaseModel",
    "PositionAttributes",
    "TelematicsData",
    "TelemetryPosition",
    "Vessel",
    "VesselDisplayRecord",
    "VesselType",
    "ViewModel",
]
