"""GPX parsing and projection."""
