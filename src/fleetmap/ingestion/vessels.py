"""Vessel list ingestion + parsing."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from fleetmap.exceptions import FleetMapTransportError
from fleetmap.models.vessel import Vessel

_logger = logging.getLogger(__name__)


def parse_vessel_list(payload: Any, *, endpoint: str = "") -> list[Vessel]:
    """Validate a vessel list payload.

    Malformed records and repeated ids are dropped so one bad row cannot
    poison the whole snapshot. The first record wins for a repeated id.

    Raises
    ------
    FleetMapTransportError
        If the payload is not a list.
    """
    if not isinstance(payload, list):
        raise FleetMapTransportError(
            f"Expected a vessel list from {endpoint or 'vessel source'}, got {type(payload).__name__}",
            endpoint=endpoint,
        )

    vessels: list[Vessel] = []
    seen: set[int] = set()
    for index, item in enumerate(payload):
        if not isinstance(item, dict):
            _logger.debug("Skipping non-object vessel record at index %d", index)
            continue
        try:
            vessel = Vessel.model_validate(item)
        except ValidationError as exc:
            _logger.debug("Skipping invalid vessel record at index %d: %s", index, exc.errors())
            continue
        if vessel.id in seen:
            _logger.debug("Skipping duplicate vessel id=%d at index %d", vessel.id, index)
            continue
        seen.add(vessel.id)
        vessels.append(vessel)
    return vessels
