"""
Application Constants

This module contains all application-wide constants to avoid magic numbers
and improve maintainability.
"""

# Earth model
EARTH_RADIUS_M = 6371000.0  # mean Earth radius, metres

# Geodetic validity ranges (decimal degrees)
MIN_LATITUDE_DEG = -90.0
MAX_LATITUDE_DEG = 90.0
MIN_LONGITUDE_DEG = -180.0
MAX_LONGITUDE_DEG = 180.0

# GPX element and attribute names
GPX_ROOT_TAG = "gpx"
GPX_TRACK_TAG = "trk"
GPX_SEGMENT_TAG = "trkseg"
GPX_POINT_TAG = "trkpt"
GPX_LAT_ATTR = "lat"
GPX_LON_ATTR = "lon"

# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LOG_LEVEL = "INFO"
POINT_LOG_PRECISION = 17  # significant digits when logging individual points

# Configuration
DEFAULT_CONFIG_PATH = "config/trace.yml"
CONFIG_PATH_ENV = "GPSTRACE_CONFIG"
LOG_LEVEL_ENV = "GPSTRACE_LOG_LEVEL"

# CLI exit codes
EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_IO_ERROR = 3
EXIT_SYNTAX_ERROR = 4
EXIT_EMPTY_TRACE = 5
DEFAULT_HEAD_ROWS = 10
