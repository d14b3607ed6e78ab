"""Constants for fleetmap."""

from __future__ import annotations

USER_AGENT = "fleetmap/1.0 (+aiohttp)"

# Telemetry speed arrives in km/h; the side list shows knots.
KNOTS_PER_SPEED_UNIT = 0.539957

# Device power attribute is reported in millivolts.
MILLIVOLTS_PER_VOLT = 1000.0

# The list icon points north-east at rest.
ICON_HEADING_OFFSET_DEGREES = -45.0

SELECTED_QUERY_PARAM = "selected"

DEFAULT_VESSELS_PATH = "/Appoploo2/vessels"
DEFAULT_TILE_URL = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
DEFAULT_CENTER_LAT = 37.98381
DEFAULT_CENTER_LNG = 23.727539
DEFAULT_ZOOM = 7
DEFAULT_CONTAINER_ID = "mapid"
DEFAULT_MAP_ROUTE = "/map"
