"""Marker layer reconciliation.

Markers are keyed by vessel id: a vessel keeps its marker across polls,
new ids get a marker and ids that disappear (or lose their position) have
their marker removed.
"""

from __future__ import annotations

import html
import logging
from collections.abc import Mapping, Sequence
from types import MappingProxyType

from fleetmap.geo import LatLng, LatLngBounds
from fleetmap.models.vessel import Vessel
from fleetmap.surface.base import MapMarker, MapSurface
from fleetmap.telemetry import resolve_coordinates

_logger = logging.getLogger(__name__)


def marker_title(vessel: Vessel, index: int) -> str:
    """Marker title ``{name}_{index}``; *index* is the vessel's place in the snapshot."""
    return f"{vessel.display_name}_{index}"


def popup_html(vessel: Vessel) -> str:
    return f"<b>{html.escape(vessel.display_name)}</b>"


class MarkerReconciler:
    """Owns the markers of one map surface."""

    def __init__(self) -> None:
        self._markers: dict[int, MapMarker] = {}

    @property
    def markers(self) -> Mapping[int, MapMarker]:
        return MappingProxyType(self._markers)

    def marker_for(self, vessel_id: int) -> MapMarker | None:
        return self._markers.get(vessel_id)

    def reconcile(self, vessels: Sequence[Vessel], surface: MapSurface) -> LatLngBounds | None:
        """Bring *surface*'s markers in line with *vessels* and frame them.

        Returns the fitted bounds, or ``None`` when no vessel has a valid
        position (the viewport is then left alone).
        """
        positions: list[LatLng] = []
        present: set[int] = set()
        created = 0

        for index, vessel in enumerate(vessels):
            position = resolve_coordinates(vessel)
            if position is None:
                continue
            if vessel.id in present:
                _logger.debug("Ignoring repeated vessel id=%d at index %d", vessel.id, index)
                continue
            present.add(vessel.id)
            positions.append(position)

            title = marker_title(vessel, index)
            marker = self._markers.get(vessel.id)
            if marker is None:
                marker = surface.add_marker(position, title)
                self._markers[vessel.id] = marker
                created += 1
            else:
                marker.set_position(position)
                marker.set_title(title)
            marker.bind_popup(popup_html(vessel))

        stale = [vessel_id for vessel_id in self._markers if vessel_id not in present]
        for vessel_id in stale:
            surface.remove_marker(self._markers.pop(vessel_id))

        _logger.debug(
            "Reconciled %d vessels: markers=%d created=%d removed=%d",
            len(vessels),
            len(self._markers),
            created,
            len(stale),
        )

        if not positions:
            return None
        bounds = LatLngBounds.from_points(positions)
        surface.fit_bounds(bounds)
        return bounds

    def clear(self, surface: MapSurface) -> None:
        """Remove every marker this reconciler placed on *surface*."""
        for marker in self._markers.values():
            surface.remove_marker(marker)
        self._markers.clear()
