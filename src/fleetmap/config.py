"""View configuration for fleetmap."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from fleetmap._constants import (
    DEFAULT_CENTER_LAT,
    DEFAULT_CENTER_LNG,
    DEFAULT_CONTAINER_ID,
    DEFAULT_MAP_ROUTE,
    DEFAULT_TILE_URL,
    DEFAULT_VESSELS_PATH,
    DEFAULT_ZOOM,
)
from fleetmap.exceptions import FleetMapConfigError
from fleetmap.geo import LatLng


def _env_number(env_key: str, value: str, cast: type[float] | type[int]) -> float | int:
    try:
        return cast(value.strip())
    except ValueError as exc:
        raise FleetMapConfigError(f"{env_key} must be a number, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class FleetMapConfig:
    """Map view configuration.

    Parameters
    ----------
    base_url : str
        Root URL of the vessel API (no trailing slash).
    vessels_path : str
        Path of the vessel list endpoint, fetched with a plain GET.
    tile_url : str
        Tile layer URL template handed to the map surface.
    default_center : LatLng
        Initial map center before any vessel is known.
    default_zoom : int
        Initial zoom level. Selection keeps whatever zoom is current.
    container_id : str
        Identifier of the element the map surface is mounted into.
    map_route : str
        Route of the map view; selection links are built on top of it.
    poll_interval : float
        Seconds between vessel fetches. ``0`` fetches once on mount.
    request_timeout : float
        Upper bound in seconds for a single vessel fetch. Expiry is a
        recoverable transport failure.
    """

    base_url: str = "http://localhost:8080"
    vessels_path: str = DEFAULT_VESSELS_PATH
    tile_url: str = DEFAULT_TILE_URL
    default_center: LatLng = LatLng(DEFAULT_CENTER_LAT, DEFAULT_CENTER_LNG)
    default_zoom: int = DEFAULT_ZOOM
    container_id: str = DEFAULT_CONTAINER_ID
    map_route: str = DEFAULT_MAP_ROUTE
    poll_interval: float = 0.0
    request_timeout: float = 10.0

    def __post_init__(self) -> None:
        if self.poll_interval < 0:
            raise FleetMapConfigError("poll_interval must be >= 0")
        if self.request_timeout <= 0:
            raise FleetMapConfigError("request_timeout must be > 0")

    @property
    def vessels_url(self) -> str:
        return f"{self.base_url.rstrip('/')}{self.vessels_path}"

    @classmethod
    def from_env(cls, **overrides: Any) -> FleetMapConfig:
        """Create configuration from ``FLEETMAP_*`` environment variables.

        Explicit keyword arguments override environment values.

        Raises
        ------
        FleetMapConfigError
            If a numeric variable cannot be parsed.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "FLEETMAP_BASE_URL": "base_url",
            "FLEETMAP_VESSELS_PATH": "vessels_path",
            "FLEETMAP_TILE_URL": "tile_url",
            "FLEETMAP_CONTAINER_ID": "container_id",
            "FLEETMAP_MAP_ROUTE": "map_route",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        _ENV_NUMERIC_MAP: dict[str, tuple[str, type[float] | type[int]]] = {
            "FLEETMAP_DEFAULT_ZOOM": ("default_zoom", int),
            "FLEETMAP_POLL_INTERVAL": ("poll_interval", float),
            "FLEETMAP_REQUEST_TIMEOUT": ("request_timeout", float),
        }
        for env_key, (field_name, cast) in _ENV_NUMERIC_MAP.items():
            val = env.get(env_key)
            if val is not None and field_name not in overrides:
                config_kwargs[field_name] = _env_number(env_key, val, cast)

        center_env = env.get("FLEETMAP_DEFAULT_CENTER")
        if center_env is not None and "default_center" not in overrides:
            parts = center_env.split(",")
            if len(parts) != 2:
                raise FleetMapConfigError(f"FLEETMAP_DEFAULT_CENTER must be 'lat,lng', got {center_env!r}")
            config_kwargs["default_center"] = LatLng(
                float(_env_number("FLEETMAP_DEFAULT_CENTER", parts[0], float)),
                float(_env_number("FLEETMAP_DEFAULT_CENTER", parts[1], float)),
            )

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
