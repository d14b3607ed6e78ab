"""Custom exception hierarchy for fleetmap."""

from __future__ import annotations


class FleetMapError(Exception):
    """Base exception for all fleetmap errors."""


class FleetMapConfigError(FleetMapError):
    """Invalid or missing configuration."""


class FleetMapTransportError(FleetMapError):
    """Vessel source failure (network, non-2xx, timeout, invalid payload)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)
