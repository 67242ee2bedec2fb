"""Build type-mismatch descriptions for assertion failure messages."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from typediff.telemetry.logger import get_logger, set_level
from typediff.typenames.parser import ParseError, TypeNameParser
from typediff.typenames.resolver import TypeNameDifferenceResolver
from typediff.utils import config as config_loader

from .types import ReporterConfig, TypeMismatchReport

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "apply_telemetry",
    "build_resolver",
    "describe_type_mismatch",
    "load_configuration",
]

_LOGGER = get_logger("typediff.reporting")

DEFAULT_CONFIG_PATH = (
    Path(__file__).resolve().parents[2] / "configs" / "reporting" / "default.yaml"
)


def load_configuration(
    config_path: str | Path | None = None,
    *,
    overrides: Mapping[str, Any] | None = None,
) -> ReporterConfig:
    """Return a :class:`ReporterConfig` from ``config_path`` and overrides."""

    data: Mapping[str, Any] | None = None
    if config_path is not None:
        data = config_loader.load_config(config_path)
    config = ReporterConfig.from_mapping(data)
    return config.merge(overrides)


def apply_telemetry(config: ReporterConfig) -> None:
    """Apply the ``telemetry`` section of ``config`` to the logging setup."""

    if config.telemetry.log_level is not None:
        set_level(config.telemetry.log_level)


def build_resolver(config: ReporterConfig | None = None) -> TypeNameDifferenceResolver:
    cfg = config or ReporterConfig()
    return TypeNameDifferenceResolver(TypeNameParser(max_depth=cfg.parser.max_depth))


def describe_type_mismatch(
    expected: str,
    actual: str,
    *,
    config: ReporterConfig | None = None,
    resolver: TypeNameDifferenceResolver | None = None,
) -> TypeMismatchReport:
    """Shorten ``expected`` and ``actual`` into a :class:`TypeMismatchReport`.

    When either name fails to parse and ``message.fallback_to_raw`` is enabled
    the raw names are displayed unchanged; otherwise the
    :class:`~typediff.typenames.parser.ParseError` propagates.
    """

    cfg = config or ReporterConfig()
    active = resolver or build_resolver(cfg)
    labels = {
        "expected_label": cfg.message.expected_label,
        "actual_label": cfg.message.actual_label,
    }
    try:
        expected_display, actual_display = active.resolve(expected, actual)
    except ParseError as exc:
        if not cfg.message.fallback_to_raw:
            raise
        _LOGGER.warning("showing raw type names, shortening failed: %s", exc)
        return TypeMismatchReport(
            expected=expected,
            actual=actual,
            expected_display=expected,
            actual_display=actual,
            shortened=False,
            error=str(exc),
            **labels,
        )

    return TypeMismatchReport(
        expected=expected,
        actual=actual,
        expected_display=expected_display,
        actual_display=actual_display,
        **labels,
    )
