"""
Trace Store

Holds the projected points of one GPX track together with the reference
point they are relative to. A Trace is filled by `load` and is read-only
for consumers afterwards.

Reference selection:
- origin supplied at construction: it is the reference, and every sample
  (the first included) is projected relative to it
- no origin: the first accepted sample becomes the reference and is stored
  as PlanarPoint(0, 0)
"""

import logging
import math
from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple, Union

import numpy as np
import pandas as pd

from gpstrace.core.gpx.processor import parse_gpx_file
from gpstrace.core.gpx.projection import project
from gpstrace.core.trace.models import GeodeticSample, PlanarPoint, ORIGIN
from gpstrace.utils.constants import (
    EARTH_RADIUS_M,
    MIN_LATITUDE_DEG,
    MAX_LATITUDE_DEG,
    MIN_LONGITUDE_DEG,
    MAX_LONGITUDE_DEG,
)
from gpstrace.utils.error_handling import (
    TraceLoadError,
    GPXSchemaError,
    EmptyTraceError,
    handle_specific_exceptions,
)

if TYPE_CHECKING:
    from gpstrace.common.config import TraceConfig

logger = logging.getLogger(__name__)

OriginLike = Union[GeodeticSample, Tuple[float, float]]


def _as_sample(origin: Optional[OriginLike]) -> Optional[GeodeticSample]:
    """Normalize an origin, raising ValueError if it is not a usable coordinate."""
    if origin is None:
        return None
    if isinstance(origin, GeodeticSample):
        sample = origin
    else:
        lat, lon = origin
        sample = GeodeticSample(lat=float(lat), lon=float(lon))

    if not (math.isfinite(sample.lat) and MIN_LATITUDE_DEG <= sample.lat <= MAX_LATITUDE_DEG):
        raise ValueError(f"Invalid origin latitude {sample.lat!r}: must be within [{MIN_LATITUDE_DEG}, {MAX_LATITUDE_DEG}]")
    if not (math.isfinite(sample.lon) and MIN_LONGITUDE_DEG <= sample.lon <= MAX_LONGITUDE_DEG):
        raise ValueError(f"Invalid origin longitude {sample.lon!r}: must be within [{MIN_LONGITUDE_DEG}, {MAX_LONGITUDE_DEG}]")
    return sample


class Trace:
    """
    Ordered, planar representation of a recorded GPS track.

    Attributes:
        origin: Caller supplied reference, or None to derive it from the data
        earth_radius_m: Sphere radius used by the projection
    """

    def __init__(
        self,
        origin: Optional[OriginLike] = None,
        earth_radius_m: float = EARTH_RADIUS_M
    ):
        self.origin: Optional[GeodeticSample] = _as_sample(origin)
        self.earth_radius_m = earth_radius_m
        self._reference: Optional[GeodeticSample] = self.origin
        self._points: Tuple[PlanarPoint, ...] = ()
        self._source: Optional[str] = None

    @classmethod
    def from_config(cls, config: "TraceConfig") -> "Trace":
        """Build an empty Trace from a TraceConfig."""
        origin = config.origin.as_sample() if config.origin is not None else None
        return cls(origin=origin, earth_radius_m=config.earth_radius_m)

    @property
    def reference(self) -> Optional[GeodeticSample]:
        """Geodetic point that (0, 0) corresponds to, None until known."""
        return self._reference

    @property
    def points(self) -> Tuple[PlanarPoint, ...]:
        return self._points

    @property
    def source(self) -> Optional[str]:
        """Path of the last successfully loaded file."""
        return self._source

    def _clear(self) -> None:
        self._reference = self.origin
        self._points = ()
        self._source = None

    def _project_all(self, samples: Iterator[GeodeticSample]) -> Tuple[Optional[GeodeticSample], List[PlanarPoint]]:
        reference = self.origin
        points: List[PlanarPoint] = []
        for sample in samples:
            if reference is None:
                reference = sample
                points.append(ORIGIN)
            else:
                points.append(project(sample, reference, self.earth_radius_m))
        return reference, points

    @handle_specific_exceptions((TraceLoadError,), error_context="Trace load failed", log_level=logging.WARNING)
    def load(self, filepath: str) -> int:
        """
        Replace the trace content with the points of a GPX file.

        Args:
            filepath: Path to the GPX file

        Returns:
            Number of points loaded

        Raises:
            GPXIOError: If the file cannot be read
            GPXSyntaxError: If the document is malformed
            EmptyTraceError: If the file holds no usable track points
        """
        self._clear()

        try:
            samples = parse_gpx_file(filepath)
        except GPXSchemaError as e:
            raise EmptyTraceError(f"No track in {filepath}: {e.message}", path=str(filepath)) from e

        reference, points = self._project_all(samples)
        if not points:
            raise EmptyTraceError(f"No usable track points in {filepath}", path=str(filepath))

        self._reference = reference
        self._points = tuple(points)
        self._source = str(filepath)
        logger.info(
            f"Loaded {len(points)} points from {filepath} "
            f"(reference lat={reference.lat:.6f}, lon={reference.lon:.6f})"
        )
        return len(points)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[PlanarPoint]:
        return iter(self._points)

    def __getitem__(self, index):
        return self._points[index]

    def __repr__(self) -> str:
        return f"Trace(points={len(self._points)}, reference={self._reference!r}, source={self._source!r})"

    def to_array(self) -> np.ndarray:
        """Points as an (N, 2) float array of x, y metres."""
        if not self._points:
            return np.empty((0, 2), dtype=float)
        return np.array([p.as_tuple() for p in self._points], dtype=float)

    def to_frame(self) -> pd.DataFrame:
        """Points as a DataFrame with columns x_m, y_m."""
        return pd.DataFrame(self.to_array(), columns=["x_m", "y_m"])
