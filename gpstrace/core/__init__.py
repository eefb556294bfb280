"""
Core Package

This package contains the core logic for loading GPS traces.

Structure:
- gpx/ - GPX parsing and geodetic to planar projection
- trace/ - Trace data models and the trace store
"""
