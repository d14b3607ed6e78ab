"""Focus the map on the selected vessel."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from fleetmap.models.vessel import Vessel
from fleetmap.reconcile.markers import MarkerReconciler, popup_html
from fleetmap.selection import parse_selection_id
from fleetmap.surface.base import MapSurface
from fleetmap.telemetry import resolve_coordinates

_logger = logging.getLogger(__name__)


class SelectionTracker:
    """Centers the viewport on the selected vessel and opens its popup.

    Markers are looked up by vessel id through the reconciler that owns
    them, so two vessels sharing a name cannot be confused.
    """

    def __init__(self, reconciler: MarkerReconciler) -> None:
        self._reconciler = reconciler

    def apply_selection(
        self,
        selection_id: str | int | None,
        vessels: Sequence[Vessel],
        surface: MapSurface | None,
    ) -> bool:
        """Apply *selection_id*; returns ``True`` if the viewport moved.

        A missing surface, an unparseable id, an unknown vessel or a vessel
        without a position are all no-ops.
        """
        if surface is None:
            return False
        vessel_id = parse_selection_id(selection_id)
        if vessel_id is None:
            return False

        vessel = next((candidate for candidate in vessels if candidate.id == vessel_id), None)
        if vessel is None:
            _logger.debug("Selection %s matches no vessel", vessel_id)
            return False

        position = resolve_coordinates(vessel)
        if position is None:
            _logger.debug("Selected vessel id=%d has no position", vessel_id)
            return False

        surface.set_view(position, surface.get_zoom(), animate=True)

        marker = self._reconciler.marker_for(vessel_id)
        if marker is not None:
            marker.bind_popup(popup_html(vessel)).open_popup()
        return True
