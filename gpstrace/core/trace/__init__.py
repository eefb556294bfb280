"""Trace data models and store."""
