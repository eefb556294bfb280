#!/usr/bin/env python3
"""
GPS Trace CLI

Loads a GPX track, projects it to planar metres and prints a short summary
followed by the first projected points.
"""

import argparse
import logging
import sys
from typing import List, Optional

import yaml
from pydantic import ValidationError

from gpstrace.common.config import OriginConfig, TraceConfig, load_trace_config
from gpstrace.core.gpx.projection import longitude_scale
from gpstrace.core.trace.trace import Trace
from gpstrace.utils.constants import (
    CONFIG_PATH_ENV,
    LOG_FORMAT,
    LOG_DATE_FORMAT,
    DEFAULT_HEAD_ROWS,
    EXIT_OK,
    EXIT_CONFIG_ERROR,
    EXIT_IO_ERROR,
    EXIT_SYNTAX_ERROR,
    EXIT_EMPTY_TRACE,
)
from gpstrace.utils.env import env_optional_str
from gpstrace.utils.error_handling import GPXIOError, GPXSyntaxError, EmptyTraceError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gpstrace",
        description="Project a GPX track into planar metre offsets",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Use the first track point as the reference
  python -m gpstrace data/ride.gpx

  # Use a fixed reference and show 25 points
  python -m gpstrace data/ride.gpx --origin 45.9620 -66.6500 --head 25
        """
    )
    parser.add_argument("gpx_file", help="Path to GPX track file")
    parser.add_argument("--origin", nargs=2, type=float, metavar=("LAT", "LON"),
                       help="Fixed reference point in decimal degrees")
    parser.add_argument("--config", default=None,
                       help="Path to trace config YAML (default: config/trace.yml)")
    parser.add_argument("--head", type=int, default=DEFAULT_HEAD_ROWS,
                       help=f"Number of projected points to print (default: {DEFAULT_HEAD_ROWS})")
    parser.add_argument("--verbose", "-v", action="store_true",
                       help="Enable debug logging")
    return parser


def resolve_config(args: argparse.Namespace) -> TraceConfig:
    """Load the config file (if any) and apply command line overrides."""
    try:
        config = load_trace_config(args.config)
    except FileNotFoundError:
        if args.config or env_optional_str(CONFIG_PATH_ENV):
            raise
        logger.debug("No trace config file found, using defaults")
        config = TraceConfig()

    if args.origin is not None:
        lat, lon = args.origin
        config = config.model_copy(update={"origin": OriginConfig(lat=lat, lon=lon)})
    if args.verbose:
        config = config.model_copy(update={"log_level": "DEBUG"})
    return config


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = resolve_config(args)
    except (FileNotFoundError, ValueError, ValidationError, yaml.YAMLError) as e:
        print(f"❌ Error: Invalid configuration: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    logging.basicConfig(level=config.log_level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    trace = Trace.from_config(config)
    try:
        count = trace.load(args.gpx_file)
    except GPXIOError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return EXIT_IO_ERROR
    except GPXSyntaxError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return EXIT_SYNTAX_ERROR
    except EmptyTraceError as e:
        print(f"⚠️  {e}", file=sys.stderr)
        return EXIT_EMPTY_TRACE

    reference = trace.reference
    print(f"✅ Loaded {count} points from {trace.source}")
    print(f"   Reference: lat={reference.lat:.6f}, lon={reference.lon:.6f} "
          f"(longitude scale {longitude_scale(reference.lat):.4f})")
    if args.head > 0:
        print(trace.to_frame().head(args.head).to_string())
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
