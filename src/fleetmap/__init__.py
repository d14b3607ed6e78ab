"""fleetmap - Live vessel position map view with marker and selection reconciliation."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("fleetmap")
except PackageNotFoundError:
    __version__ = "0+local"
from fleetmap._transport import HttpVesselSource, VesselSource
from fleetmap.config import FleetMapConfig
from fleetmap.controller import MapViewController
from fleetmap.exceptions import FleetMapConfigError, FleetMapError, FleetMapTransportError
from fleetmap.geo import LatLng, LatLngBounds
from fleetmap.models import (
    Device,
    PositionAttributes,
    TelematicsData,
    TelemetryPosition,
    Vessel,
    VesselDisplayRecord,
    VesselType,
    ViewModel,
)
from fleetmap.projection import VesselListProjector
from fleetmap.reconcile import MarkerReconciler, SelectionTracker
from fleetmap.selection import SelectionChannel, parse_selection_id
from fleetmap.surface import MapMarker, MapSurface, SceneMapSurface
from fleetmap.telemetry import resolve_coordinates, resolve_position

__all__ = [
    "__version__",
    "Device",
    "FleetMapConfig",
    "FleetMapConfigError",
    "FleetMapError",
    "FleetMapTransportError",
    "HttpVesselSource",
    "LatLng",
    "LatLngBounds",
    "MapMarker",
    "MapSurface",
    "MapViewController",
    "MarkerReconciler",
    "PositionAttributes",
    "SceneMapSurface",
    "SelectionChannel",
    "SelectionTracker",
    "TelematicsData",
    "TelemetryPosition",
    "Vessel",
    "VesselDisplayRecord",
    "VesselListProjector",
    "VesselSource",
    "VesselType",
    "ViewModel",
    "parse_selection_id",
    "resolve_coordinates",
    "resolve_position",
]
