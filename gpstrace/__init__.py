"""
gpstrace: replay recorded GPS tracks as local planar coordinates.
"""

from gpstrace.core.trace.models import GeodeticSample, PlanarPoint
from gpstrace.core.trace.trace import Trace
from gpstrace.core.gpx.processor import parse_gpx_file
from gpstrace.core.gpx.projection import project
from gpstrace.utils.error_handling import (
    TraceLoadError,
    GPXIOError,
    GPXSyntaxError,
    GPXSchemaError,
    EmptyTraceError,
)

__version__ = "0.1.0"

__all__ = [
    "GeodeticSample",
    "PlanarPoint",
    "Trace",
    "parse_gpx_file",
    "project",
    "TraceLoadError",
    "GPXIOError",
    "GPXSyntaxError",
    "GPXSchemaError",
    "EmptyTraceError",
]
