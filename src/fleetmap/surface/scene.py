"""In-memory map surface.

Records the scene a real map widget would draw. Used for headless runs
and as the test double for the reconcilers.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from fleetmap.exceptions import FleetMapError
from fleetmap.geo import LatLng, LatLngBounds


@dataclass
class TileLayer:
    url: str


@dataclass
class FeatureGroup:
    layers: list[Any] = field(default_factory=list)


@dataclass
class SceneMarker:
    """Marker recorded by :class:`SceneMapSurface`."""

    position: LatLng
    title: str
    surface: SceneMapSurface | None = field(default=None, repr=False, compare=False)
    popup_html: str | None = None

    def set_position(self, position: LatLng) -> None:
        self.position = position

    def set_title(self, title: str) -> None:
        self.title = title

    def bind_popup(self, html: str) -> SceneMarker:
        self.popup_html = html
        return self

    def open_popup(self) -> None:
        if self.popup_html is None:
            raise FleetMapError(f"Marker {self.title!r} has no popup bound")
        if self.surface is not None:
            # Only one popup is open on a map at a time.
            self.surface.open_marker = self

    @property
    def popup_open(self) -> bool:
        return self.surface is not None and self.surface.open_marker is self


@dataclass(frozen=True)
class ViewChange:
    center: LatLng
    zoom: int
    animate: bool


class SceneMapSurface:
    """Map surface that keeps its scene in plain Python objects."""

    def __init__(self, container_id: str, center: LatLng, zoom: int) -> None:
        self.container_id = container_id
        self.center = center
        self.zoom = zoom
        self.tile_layers: list[TileLayer] = []
        self.feature_groups: list[FeatureGroup] = []
        self.markers: list[SceneMarker] = []
        self.open_marker: SceneMarker | None = None
        self.fitted_bounds: list[LatLngBounds] = []
        self.view_changes: list[ViewChange] = []
        self.closed = False

    def _require_open(self) -> None:
        if self.closed:
            raise FleetMapError(f"Map surface {self.container_id!r} is closed")

    def add_tile_layer(self, url: str) -> TileLayer:
        self._require_open()
        layer = TileLayer(url)
        self.tile_layers.append(layer)
        return layer

    def create_feature_group(self) -> FeatureGroup:
        self._require_open()
        group = FeatureGroup()
        self.feature_groups.append(group)
        return group

    def add_marker(self, position: LatLng, title: str) -> SceneMarker:
        self._require_open()
        marker = SceneMarker(position=position, title=title, surface=self)
        self.markers.append(marker)
        return marker

    def remove_marker(self, marker: Any) -> None:
        self._require_open()
        self.markers = [existing for existing in self.markers if existing is not marker]
        if self.open_marker is marker:
            self.open_marker = None

    def fit_bounds(self, bounds: LatLngBounds) -> None:
        self._require_open()
        self.fitted_bounds.append(bounds)
        self.center = bounds.center

    def set_view(self, position: LatLng, zoom: int, *, animate: bool = False) -> None:
        self._require_open()
        self.center = position
        self.zoom = zoom
        self.view_changes.append(ViewChange(center=position, zoom=zoom, animate=animate))

    def get_zoom(self) -> int:
        return self.zoom

    def each_layer(self, visit: Callable[[Any], None]) -> None:
        for layer in [*self.tile_layers, *self.feature_groups, *self.markers]:
            visit(layer)

    def close(self) -> None:
        self.markers.clear()
        self.open_marker = None
        self.closed = True

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly description of the current scene."""
        layers: list[dict[str, Any]] = []

        def _describe(layer: Any) -> None:
            if isinstance(layer, TileLayer):
                layers.append({"type": "tiles", "url": layer.url})
            elif isinstance(layer, FeatureGroup):
                layers.append({"type": "group", "size": len(layer.layers)})
            elif isinstance(layer, SceneMarker):
                layers.append(
                    {
                        "type": "marker",
                        "title": layer.title,
                        "position": list(layer.position),
                        "popup": layer.popup_html,
                        "popup_open": layer.popup_open,
                    }
                )

        self.each_layer(_describe)
        return {
            "container_id": self.container_id,
            "center": list(self.center),
            "zoom": self.zoom,
            "layers": layers,
        }
