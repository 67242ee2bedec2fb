"""Public entry points for type-mismatch reporting."""

from typediff.reporting.reporter import (
    apply_telemetry,
    build_resolver,
    describe_type_mismatch,
    load_configuration,
)
from typediff.reporting.types import (
    MessageOptions,
    ParserOptions,
    ReporterConfig,
    TelemetryOptions,
    TypeMismatchReport,
)

__all__ = [
    "MessageOptions",
    "ParserOptions",
    "ReporterConfig",
    "TelemetryOptions",
    "TypeMismatchReport",
    "apply_telemetry",
    "build_resolver",
    "describe_type_mismatch",
    "load_configuration",
]
