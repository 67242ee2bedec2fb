"""Shared helpers used across typediff subsystems."""
