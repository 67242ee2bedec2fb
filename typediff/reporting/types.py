"""Typed configuration and result objects for mismatch reporting."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from typediff.typenames.parser import DEFAULT_MAX_DEPTH
from typediff.utils.config import deep_update

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off"}


def _coerce_int(value: Any, *, fallback: int) -> int:
    if value is None:
        return fallback
    try:
        return int(value)
    except (TypeError, ValueError):
        return fallback


def _coerce_bool(value: Any, *, fallback: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    return fallback


def _coerce_level(value: Any) -> str | None:
    if value is None or value == "":
        return None
    level = str(value).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"telemetry.log_level {value!r} is not a logging level")
    return level


def _section(payload: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = payload.get(key)
    return value if isinstance(value, Mapping) else {}


@dataclass(slots=True)
class ParserOptions:
    """Limits applied when parsing type names."""

    max_depth: int = DEFAULT_MAX_DEPTH


@dataclass(slots=True)
class MessageOptions:
    """How a type mismatch is presented."""

    expected_label: str = "Expected"
    actual_label: str = "But was"
    fallback_to_raw: bool = True


@dataclass(slots=True)
class TelemetryOptions:
    """Logging settings applied when the reporter runs from the CLI."""

    log_level: str | None = None


@dataclass(slots=True)
class ReporterConfig:
    """Top-level configuration bundle for :mod:`typediff.reporting`."""

    parser: ParserOptions = field(default_factory=ParserOptions)
    message: MessageOptions = field(default_factory=MessageOptions)
    telemetry: TelemetryOptions = field(default_factory=TelemetryOptions)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "ReporterConfig":
        payload = dict(data or {})
        parser_section = _section(payload, "parser")
        message_section = _section(payload, "message")
        telemetry_section = _section(payload, "telemetry")
        defaults = MessageOptions()

        max_depth = _coerce_int(parser_section.get("max_depth"), fallback=DEFAULT_MAX_DEPTH)
        if max_depth < 1:
            raise ValueError("parser.max_depth must be at least 1")

        message = MessageOptions(
            expected_label=str(message_section.get("expected_label", defaults.expected_label)),
            actual_label=str(message_section.get("actual_label", defaults.actual_label)),
            fallback_to_raw=_coerce_bool(
                message_section.get("fallback_to_raw"), fallback=defaults.fallback_to_raw
            ),
        )
        return cls(
            parser=ParserOptions(max_depth=max_depth),
            message=message,
            telemetry=TelemetryOptions(log_level=_coerce_level(telemetry_section.get("log_level"))),
        )

    def merge(self, overrides: Mapping[str, Any] | None) -> "ReporterConfig":
        if not overrides:
            return self
        return ReporterConfig.from_mapping(deep_update(self.to_dict(), overrides))

    def to_dict(self) -> dict[str, Any]:
        return {
            "parser": {"max_depth": self.parser.max_depth},
            "message": {
                "expected_label": self.message.expected_label,
                "actual_label": self.message.actual_label,
                "fallback_to_raw": self.message.fallback_to_raw,
            },
            "telemetry": {"log_level": self.telemetry.log_level},
        }


@dataclass(slots=True, frozen=True)
class TypeMismatchReport:
    """Display names for an expected/actual type pair.

    ``shortened`` is ``False`` when a name failed to parse and the raw strings
    are shown instead; ``error`` then carries the parse failure.
    """

    expected: str
    actual: str
    expected_display: str
    actual_display: str
    shortened: bool = True
    error: str | None = None
    expected_label: str = "Expected"
    actual_label: str = "But was"

    def render(self) -> str:
        width = max(len(self.expected_label), len(self.actual_label)) + 1
        expected_prefix = f"{self.expected_label}:".ljust(width)
        actual_prefix = f"{self.actual_label}:".ljust(width)
        return f"{expected_prefix} {self.expected_display}\n{actual_prefix} {self.actual_display}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "expected": self.expected,
            "actual": self.actual,
            "expected_display": self.expected_display,
            "actual_display": self.actual_display,
            "shortened": self.shortened,
            "error": self.error,
        }


__all__ = [
    "MessageOptions",
    "ParserOptions",
    "ReporterConfig",
    "TelemetryOptions",
    "TypeMismatchReport",
]
