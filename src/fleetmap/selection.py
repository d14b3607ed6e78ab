"""Selection channel backed by the shareable ``selected`` query parameter."""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Callable
from urllib.parse import parse_qs, urlencode, urlsplit

from fleetmap._constants import DEFAULT_MAP_ROUTE, SELECTED_QUERY_PARAM
from fleetmap.ingestion.normalize import safe_float

_logger = logging.getLogger(__name__)


def parse_selection_id(value: str | int | None) -> int | None:
    """Parse a selection id. Anything that is not a whole number means "none"."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    with contextlib.suppress(ValueError):
        return int(value.strip())
    parsed = safe_float(value)
    if parsed is None or not parsed.is_integer():
        return None
    return int(parsed)


def selection_from_location(location: str) -> str | None:
    """Return the raw ``selected`` value of a location, if any."""
    query = urlsplit(location).query
    values = parse_qs(query, keep_blank_values=True).get(SELECTED_QUERY_PARAM)
    if not values:
        return None
    return values[0]


def build_location(route: str, vessel_id: int | None) -> str:
    """``/map`` clears the selection, ``/map?selected={id}`` sets it."""
    if vessel_id is None:
        return route
    return f"{route}?{urlencode({SELECTED_QUERY_PARAM: vessel_id})}"


class SelectionChannel:
    """Holds the view's current location and notifies on selection changes.

    The selection is owned by the location, not by the view: the view only
    ever navigates.
    """

    def __init__(self, route: str = DEFAULT_MAP_ROUTE, location: str | None = None) -> None:
        self._route = route
        self._location = location if location is not None else route
        self._listeners: list[Callable[[int | None], None]] = []

    @property
    def route(self) -> str:
        return self._route

    @property
    def location(self) -> str:
        return self._location

    @property
    def raw_selection(self) -> str | None:
        return selection_from_location(self._location)

    @property
    def selected_id(self) -> int | None:
        return parse_selection_id(self.raw_selection)

    def subscribe(self, listener: Callable[[int | None], None]) -> Callable[[], None]:
        """Register *listener* for selection changes; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def navigate(self, location: str) -> None:
        previous = self.selected_id
        self._location = location
        current = self.selected_id
        _logger.debug("Navigated to %s (selected=%s)", location, current)
        if current == previous:
            return
        for listener in list(self._listeners):
            listener(current)

    def select(self, vessel_id: int) -> None:
        self.navigate(build_location(self._route, vessel_id))

    def clear(self) -> None:
        self.navigate(build_location(self._route, None))
