"""
Geodetic to planar projection.

Converts latitude/longitude samples into metric offsets from a reference
point using the equirectangular approximation. Accurate only for short
ranges around the reference; the longitude scale collapses towards the poles.
"""

import math

from gpstrace.core.trace.models import GeodeticSample, PlanarPoint
from gpstrace.utils.constants import EARTH_RADIUS_M


def project(
    sample: GeodeticSample,
    reference: GeodeticSample,
    earth_radius_m: float = EARTH_RADIUS_M
) -> PlanarPoint:
    """
    Project a sample onto the plane tangent at the reference.

    Args:
        sample: Point to project (decimal degrees)
        reference: Point mapped to (0, 0) (decimal degrees)
        earth_radius_m: Sphere radius used for the projection

    Returns:
        PlanarPoint with x east and y north of the reference, in metres
    """
    rlat, rlon, rref_lat, rref_lon = map(
        math.radians, (sample.lat, sample.lon, reference.lat, reference.lon)
    )
    dlat, dlon = rlat - rref_lat, rlon - rref_lon

    # cos() takes the reference latitude in radians, same units as dlon
    x = earth_radius_m * math.cos(rref_lat) * dlon
    y = earth_radius_m * dlat
    return PlanarPoint(x, y)


def longitude_scale(reference_lat: float) -> float:
    """Metres per radian of longitude, as a fraction of the equatorial value."""
    return math.cos(math.radians(reference_lat))
