"""Map surface interfaces.

The rendering widget (tiles, marker drawing, projection math) lives outside
this package. Reconcilers only talk to it through these protocols.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

from fleetmap.geo import LatLng, LatLngBounds


class MapMarker(Protocol):
    """A marker placed on a map surface."""

    @property
    def title(self) -> str: ...

    @property
    def position(self) -> LatLng: ...

    def set_position(self, position: LatLng) -> None: ...

    def set_title(self, title: str) -> None: ...

    def bind_popup(self, html: str) -> MapMarker: ...

    def open_popup(self) -> None: ...


class MapSurface(Protocol):
    """A live map canvas."""

    def add_tile_layer(self, url: str) -> Any: ...

    def create_feature_group(self) -> Any: ...

    def add_marker(self, position: LatLng, title: str) -> MapMarker: ...

    def remove_marker(self, marker: MapMarker) -> None: ...

    def fit_bounds(self, bounds: LatLngBounds) -> None: ...

    def set_view(self, position: LatLng, zoom: int, *, animate: bool = False) -> None: ...

    def get_zoom(self) -> int: ...

    def each_layer(self, visit: Callable[[Any], None]) -> None: ...

    def close(self) -> None: ...


MapSurfaceFactory = Callable[[str, LatLng, int], MapSurface]
"""Creates a surface mounted into ``container_id`` at ``center``/``zoom``."""
