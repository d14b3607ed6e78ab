"""Coordinate primitives shared by the map surface and the reconcilers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import NamedTuple


class LatLng(NamedTuple):
    """A WGS84 coordinate pair in degrees."""

    lat: float
    lng: float


@dataclass(frozen=True)
class LatLngBounds:
    """Axis-aligned bounding region of a set of positions."""

    south: float
    west: float
    north: float
    east: float

    @classmethod
    def from_points(cls, points: Iterable[LatLng]) -> LatLngBounds:
        """Build the smallest bounds enclosing *points*.

        Raises
        ------
        ValueError
            If *points* is empty.
        """
        collected = list(points)
        if not collected:
            raise ValueError("Cannot compute bounds of an empty position set")
        lats = [point.lat for point in collected]
        lngs = [point.lng for point in collected]
        return cls(south=min(lats), west=min(lngs), north=max(lats), east=max(lngs))

    @property
    def center(self) -> LatLng:
        return LatLng((self.south + self.north) / 2, (self.west + self.east) / 2)
