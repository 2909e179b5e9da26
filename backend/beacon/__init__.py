"""Beacon: typed analytics events with pluggable transport engines."""
