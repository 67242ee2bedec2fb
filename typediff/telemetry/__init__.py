"""Convenience exports for typediff telemetry utilities."""

from . import logger

__all__ = ["logger"]
