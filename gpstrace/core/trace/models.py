"""
Trace Data Models

Defines the immutable value types that flow through trace loading:
geodetic samples read from a GPX file and planar points produced by
projecting those samples around a reference.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class GeodeticSample:
    """
    A single GPS fix in decimal degrees.

    Attributes:
        lat: Latitude in decimal degrees (positive north)
        lon: Longitude in decimal degrees (positive east)
    """
    lat: float
    lon: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.lat, self.lon)


@dataclass(frozen=True)
class PlanarPoint:
    """
    A position in metres relative to a trace's reference point.

    Attributes:
        x: Offset east of the reference (metres)
        y: Offset north of the reference (metres)
    """
    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


ORIGIN = PlanarPoint(0.0, 0.0)
