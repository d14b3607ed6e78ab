"""Synchronization of the map surface with the vessel snapshot."""

from fleetmap.reconcile.markers import MarkerReconciler, marker_title, popup_html
from fleetmap.reconcile.selection import SelectionTracker

__all__ = [
    "MarkerReconciler",
    "SelectionTracker",
    "marker_title",
    "popup_html",
]
