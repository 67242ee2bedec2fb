"""Minimal, readable differences between fully-qualified type names."""

__version__ = "0.1.0"
