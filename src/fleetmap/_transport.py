"""HTTP vessel source."""

from __future__ import annotations

import json
import logging
from typing import Any, Protocol

import aiohttp

from fleetmap._constants import USER_AGENT
from fleetmap.config import FleetMapConfig
from fleetmap.exceptions import FleetMapError, FleetMapTransportError
from fleetmap.ingestion.vessels import parse_vessel_list
from fleetmap.models.vessel import Vessel

_logger = logging.getLogger(__name__)


class VesselSource(Protocol):
    """Structural interface for anything that can supply a vessel snapshot.

    Having a protocol here makes it easy to pass test doubles while keeping
    the production implementation (`HttpVesselSource`) concrete.
    """

    async def fetch_vessels(self) -> list[Vessel]:
        ...


class HttpVesselSource:
    """Fetch the vessel list with a single GET.

    Usage::

        async with HttpVesselSource(config) as source:
            vessels = await source.fetch_vessels()
    """

    def __init__(
        self,
        config: FleetMapConfig,
        *,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self._config = config
        self._external_session = session is not None
        self._http = session

    async def __aenter__(self) -> HttpVesselSource:
        if self._http is None:
            self._http = aiohttp.ClientSession()
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http is not None:
            await self._http.close()
            self._http = None

    def _require_session(self) -> aiohttp.ClientSession:
        if self._http is None:
            raise FleetMapError("Vessel source not initialized. Use 'async with HttpVesselSource(...) as source:'")
        return self._http

    async def fetch_vessels(self) -> list[Vessel]:
        """GET the vessel list and validate it.

        Raises
        ------
        FleetMapTransportError
            On network errors, timeouts, non-2xx statuses and payloads that
            are not a JSON list.
        """
        http = self._require_session()
        endpoint = self._config.vessels_path
        url = self._config.vessels_url
        headers = {
            "accept": "application/json",
            "user-agent": USER_AGENT,
        }
        timeout = aiohttp.ClientTimeout(total=self._config.request_timeout)

        _logger.debug("GET %s", url)

        try:
            async with http.get(url, headers=headers, timeout=timeout) as resp:
                body = await resp.read()
                if not 200 <= resp.status < 300:
                    raise FleetMapTransportError(
                        f"HTTP {resp.status} from {endpoint}: {body[:200]!r}",
                        status_code=resp.status,
                        endpoint=endpoint,
                    )
        except FleetMapTransportError:
            raise
        except aiohttp.ClientError as exc:
            raise FleetMapTransportError(
                f"Request to {endpoint} failed: {exc}",
                endpoint=endpoint,
            ) from exc
        except TimeoutError as exc:
            raise FleetMapTransportError(
                f"Request to {endpoint} timed out after {self._config.request_timeout}s",
                endpoint=endpoint,
            ) from exc

        try:
            payload = json.loads(body.decode("utf-8"))
        except (UnicodeDecodeError, ValueError) as exc:
            raise FleetMapTransportError(
                f"Invalid JSON from {endpoint}: {body[:200]!r}",
                endpoint=endpoint,
            ) from exc

        vessels = parse_vessel_list(payload, endpoint=endpoint)
        _logger.debug("Fetched %d vessels from %s", len(vessels), endpoint)
        return vessels
