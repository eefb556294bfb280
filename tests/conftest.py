"""
Pytest configuration for gpstrace tests.

This file contains fixtures shared across all tests for writing GPX
documents to temporary files.
"""

from pathlib import Path
from typing import Iterable, List, Optional, Tuple

import pytest

GPX_11_NS = "http://www.topografix.com/GPX/1/1"


def trkpt_xml(lat: Optional[str], lon: Optional[str], extra: str = "") -> str:
    """Render a <trkpt>, omitting any attribute passed as None."""
    attrs = []
    if lat is not None:
        attrs.append(f'lat="{lat}"')
    if lon is not None:
        attrs.append(f'lon="{lon}"')
    return f"<trkpt {' '.join(attrs)}>{extra}</trkpt>"


def gpx_xml(segments: Iterable[Iterable[Tuple]], namespace: Optional[str] = None, tracks: int = 1) -> str:
    """
    Render a GPX document.

    Args:
        segments: One iterable of (lat, lon) string/number pairs per <trkseg>
        namespace: Optional default namespace for the <gpx> root
        tracks: Number of identical <trk> elements to emit
    """
    segs: List[str] = []
    for seg in segments:
        pts = "".join(
            trkpt_xml(None if lat is None else str(lat), None if lon is None else str(lon))
            for lat, lon in seg
        )
        segs.append(f"<trkseg>{pts}</trkseg>")
    trk = f"<trk><name>Test Track</name>{''.join(segs)}</trk>"
    xmlns = f' xmlns="{namespace}"' if namespace else ""
    return f'<?xml version="1.0" encoding="UTF-8"?><gpx version="1.1"{xmlns}>{trk * tracks}</gpx>'


@pytest.fixture
def write_gpx(tmp_path):
    """Factory fixture: write raw text to a .gpx file and return its path."""
    counter = {"n": 0}

    def _write(content: str, name: Optional[str] = None) -> Path:
        counter["n"] += 1
        path = tmp_path / (name or f"track_{counter['n']}.gpx")
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def three_point_gpx(write_gpx):
    """A single-segment track heading north-east from Fredericton, NB."""
    return write_gpx(gpx_xml([[
        (45.9620, -66.6500),
        (45.9630, -66.6500),
        (45.9630, -66.6480),
    ]]))


@pytest.fixture
def make_gpx():
    """Expose the GPX document builder to tests."""
    return gpx_xml
