"""
GPX Processing Module for Recorded Tracks

This module reads GPX files and extracts the geodetic track points of the
first track, flattening all of its segments into a single ordered sequence.

Document shape consumed:
    <gpx>
      <trk>
        <trkseg>
          <trkpt lat="..." lon="..."> ... </trkpt>
        </trkseg>
      </trk>
    </gpx>

Elements are matched on their local name, so GPX 1.0 and 1.1 documents with
a default namespace are accepted. Child elements such as <ele>, <time> and
<name> are ignored.
"""

import xml.etree.ElementTree as ET
import logging
import math
import re
from typing import Iterator, Optional

from gpstrace.core.trace.models import GeodeticSample
from gpstrace.utils.constants import (
    GPX_ROOT_TAG,
    GPX_TRACK_TAG,
    GPX_SEGMENT_TAG,
    GPX_POINT_TAG,
    GPX_LAT_ATTR,
    GPX_LON_ATTR,
    MIN_LATITUDE_DEG,
    MAX_LATITUDE_DEG,
    MIN_LONGITUDE_DEG,
    MAX_LONGITUDE_DEG,
    POINT_LOG_PRECISION,
)
from gpstrace.utils.error_handling import GPXIOError, GPXSyntaxError, GPXSchemaError

logger = logging.getLogger(__name__)

_DECIMAL_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


def _local_name(tag: str) -> str:
    """Strip an ElementTree '{namespace}' prefix from a tag."""
    if tag.startswith("{"):
        return tag.rsplit("}", 1)[-1]
    return tag


def _children(element: ET.Element, name: str) -> Iterator[ET.Element]:
    for child in element:
        if isinstance(child.tag, str) and _local_name(child.tag) == name:
            yield child


def _parse_coordinate(value: Optional[str], low: float, high: float) -> Optional[float]:
    """
    Parse a decimal degree attribute.

    Returns None for missing, non-decimal, non-finite or out-of-range values.
    Only plain decimal text is accepted (no "nan", "inf" or "1_0").
    """
    if value is None:
        return None
    text = value.strip()
    if not _DECIMAL_RE.match(text):
        return None
    number = float(text)
    if not math.isfinite(number) or number < low or number > high:
        return None
    return number


def parse_trkpt(trkpt: ET.Element) -> Optional[GeodeticSample]:
    """
    Convert a <trkpt> element into a GeodeticSample.

    Args:
        trkpt: The track point element

    Returns:
        GeodeticSample, or None when lat or lon is missing or unusable
    """
    lat = _parse_coordinate(trkpt.get(GPX_LAT_ATTR), MIN_LATITUDE_DEG, MAX_LATITUDE_DEG)
    lon = _parse_coordinate(trkpt.get(GPX_LON_ATTR), MIN_LONGITUDE_DEG, MAX_LONGITUDE_DEG)
    if lat is None or lon is None:
        return None
    return GeodeticSample(lat=lat, lon=lon)


def _read_document(filepath: str) -> ET.Element:
    try:
        with open(filepath, "rb") as f:
            tree = ET.parse(f)
    except ET.ParseError as e:
        raise GPXSyntaxError(
            f"Malformed GPX document {filepath}: {e}",
            path=str(filepath),
            position=getattr(e, "position", None)
        ) from e
    except OSError as e:
        raise GPXIOError(f"Failed to read GPX file {filepath}: {e}", path=str(filepath)) from e
    return tree.getroot()


def find_track(root: ET.Element, filepath: str = "") -> ET.Element:
    """
    Locate the first <trk> container under the <gpx> root.

    Raises:
        GPXSchemaError: If the root is not <gpx> or it has no <trk> child
    """
    if _local_name(root.tag) != GPX_ROOT_TAG:
        raise GPXSchemaError(
            f"Expected <{GPX_ROOT_TAG}> root element, found <{_local_name(root.tag)}>",
            path=str(filepath)
        )
    track = next(_children(root, GPX_TRACK_TAG), None)
    if track is None:
        raise GPXSchemaError(f"No <{GPX_TRACK_TAG}> element in {filepath}", path=str(filepath))
    return track


def iter_track_samples(track: ET.Element) -> Iterator[GeodeticSample]:
    """
    Yield the samples of every <trkseg> in a track, in document order.

    Points without a usable lat or lon are skipped.
    """
    skipped = 0
    emitted = 0
    for seg_index, trkseg in enumerate(_children(track, GPX_SEGMENT_TAG)):
        for pt_index, trkpt in enumerate(_children(trkseg, GPX_POINT_TAG)):
            sample = parse_trkpt(trkpt)
            if sample is None:
                skipped += 1
                logger.warning(
                    f"Skipping trkpt {pt_index} in trkseg {seg_index}: "
                    f"unusable lat={trkpt.get(GPX_LAT_ATTR)!r} lon={trkpt.get(GPX_LON_ATTR)!r}"
                )
                continue
            emitted += 1
            logger.debug(f"{sample.lat:.{POINT_LOG_PRECISION}g} - {sample.lon:.{POINT_LOG_PRECISION}g}")
            yield sample
    logger.debug(f"Track exhausted: {emitted} samples emitted, {skipped} skipped")


def parse_gpx_file(filepath: str) -> Iterator[GeodeticSample]:
    """
    Parse a GPX file and return its track samples.

    The file is read and validated immediately; the returned iterator then
    walks the first track lazily and can only be consumed once.

    Args:
        filepath: Path to the GPX file

    Returns:
        Iterator of GeodeticSample in document order

    Raises:
        GPXIOError: If the file cannot be opened or read
        GPXSyntaxError: If the document is not well-formed XML
        GPXSchemaError: If the <gpx> root or <trk> container is missing
    """
    root = _read_document(filepath)
    track = find_track(root, filepath)
    return iter_track_samples(track)
