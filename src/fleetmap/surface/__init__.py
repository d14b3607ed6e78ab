"""Map surface layer."""

from fleetmap.surface.base import MapMarker, MapSurface, MapSurfaceFactory
from fleetmap.surface.scene import SceneMapSurface, SceneMarker

__all__ = [
    "MapMarker",
    "MapSurface",
    "MapSurfaceFactory",
    "SceneMapSurface",
    "SceneMarker",
]
