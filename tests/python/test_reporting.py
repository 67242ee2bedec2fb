"""Tests for mismatch reports, configuration loading and the CLI."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from typediff.reporting import (
    ReporterConfig,
    describe_type_mismatch,
    load_configuration,
)
from typediff.reporting import apply_telemetry, cli, reporter
from typediff.telemetry import logger
from typediff.typenames import ParseError
from typediff.utils.config import load_config, parse_overrides


def test_report_renders_expected_and_actual_lines() -> None:
    report = describe_type_mismatch("NS.A.Dummy", "NS.B.Dummy1")

    assert report.shortened
    assert report.error is None
    assert report.render() == "Expected: Dummy\nBut was:  Dummy1"


def test_report_labels_are_padded_to_equal_width() -> None:
    config = ReporterConfig.from_mapping(
        {"message": {"expected_label": "Want", "actual_label": "Got"}}
    )

    report = describe_type_mismatch("NS.A", "NS.B", config=config)

    assert report.render() == "Want: A\nGot:  B"


def test_parse_failure_falls_back_to_raw_names(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING, logger="typediff.reporting")

    report = describe_type_mismatch("List`2[NS.A]", "NS.B")

    assert not report.shortened
    assert report.expected_display == "List`2[NS.A]"
    assert report.actual_display == "NS.B"
    assert report.error is not None and "declared arity" in report.error
    assert any("showing raw type names" in record.getMessage() for record in caplog.records)


def test_parse_failure_raises_when_fallback_disabled() -> None:
    config = load_configuration(overrides={"message": {"fallback_to_raw": False}})

    with pytest.raises(ParseError):
        describe_type_mismatch("List`2[NS.A]", "NS.B", config=config)


def test_configured_max_depth_reaches_parser() -> None:
    config = load_configuration(overrides={"parser": {"max_depth": 1}})

    report = describe_type_mismatch("A`1[B`1[C]]", "X", config=config)

    assert not report.shortened
    assert report.error is not None and "nesting" in report.error


def test_default_configuration_file_loads() -> None:
    config = load_configuration(reporter.DEFAULT_CONFIG_PATH)

    assert config.parser.max_depth == 64
    assert config.message.expected_label == "Expected"
    assert config.message.fallback_to_raw is True


def test_configuration_file_and_overrides_merge(tmp_path: Path) -> None:
    path = tmp_path / "reporting.yaml"
    path.write_text(
        "parser:\n  max_depth: 8\nmessage:\n  fallback_to_raw: false\n", encoding="utf-8"
    )

    config = load_configuration(path, overrides={"message": {"actual_label": "Got"}})

    assert config.parser.max_depth == 8
    assert config.message.fallback_to_raw is False
    assert config.message.actual_label == "Got"
    assert config.message.expected_label == "Expected"


def test_invalid_max_depth_rejected() -> None:
    with pytest.raises(ValueError):
        ReporterConfig.from_mapping({"parser": {"max_depth": 0}})


def test_string_booleans_are_coerced() -> None:
    config = ReporterConfig.from_mapping({"message": {"fallback_to_raw": "off"}})

    assert config.message.fallback_to_raw is False


def test_telemetry_level_is_normalised() -> None:
    config = ReporterConfig.from_mapping({"telemetry": {"log_level": "debug"}})

    assert config.telemetry.log_level == "DEBUG"
    assert ReporterConfig.from_mapping(None).telemetry.log_level is None
    assert load_configuration(reporter.DEFAULT_CONFIG_PATH).telemetry.log_level is None

    with pytest.raises(ValueError):
        ReporterConfig.from_mapping({"telemetry": {"log_level": "chatty"}})


def test_apply_telemetry_sets_package_logger_level() -> None:
    config = load_configuration(overrides={"telemetry": {"log_level": "DEBUG"}})
    try:
        apply_telemetry(config)
        assert logging.getLogger("typediff").level == logging.DEBUG
    finally:
        logger.configure(force=True)

    apply_telemetry(ReporterConfig())
    assert logging.getLogger("typediff").level == logging.INFO


def test_load_config_errors(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")

    listing = tmp_path / "list.yaml"
    listing.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(listing)

    empty = tmp_path / "empty.yaml"
    empty.write_text("", encoding="utf-8")
    assert load_config(empty) == {}


def test_parse_overrides_builds_nested_mapping() -> None:
    overrides = parse_overrides(["message.fallback_to_raw=False", "parser.max_depth=8"])

    assert overrides == {"message": {"fallback_to_raw": False}, "parser": {"max_depth": 8}}

    with pytest.raises(ValueError):
        parse_overrides(["message.fallback_to_raw"])


def test_cli_compare_prints_message(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["compare", "NS.A.Dummy", "NS.B.Dummy1"]) == 0

    assert capsys.readouterr().out == "Expected: Dummy\nBut was:  Dummy1\n"


def test_cli_compare_json(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["compare", "List`1[NS.A]", "List`1[NS.B]", "--json"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["expected_display"] == "List`1[A]"
    assert payload["actual_display"] == "List`1[B]"
    assert payload["shortened"] is True


def test_cli_parse_error_without_fallback(capsys: pytest.CaptureFixture[str]) -> None:
    code = cli.main(
        ["--set", "message.fallback_to_raw=False", "compare", "List`2[A]", "B"]
    )

    assert code == cli.EXIT_PARSE_ERROR
    assert "parse error" in capsys.readouterr().err


def test_cli_missing_config_reports_error(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    code = cli.main(["--config", str(tmp_path / "nope.yaml"), "compare", "A", "B"])

    assert code == cli.EXIT_ERROR
    assert "[typediff] error" in capsys.readouterr().err


def test_cli_shorten(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["shorten", "System.Collections.Generic.List`1[System.Int32]"]) == 0

    assert capsys.readouterr().out.strip() == "List`1[Int32]"


def test_cli_parse_outline(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["parse", "Dictionary`2[A.B,C[]]"]) == 0

    assert capsys.readouterr().out == "Dictionary`2\n  A.B\n  C[]\n"


def test_cli_applies_telemetry_override(capsys: pytest.CaptureFixture[str]) -> None:
    try:
        code = cli.main(
            ["--set", "telemetry.log_level=WARNING", "compare", "NS.A.Dummy", "NS.B.Dummy"]
        )
        assert code == 0
        assert logging.getLogger("typediff").level == logging.WARNING
    finally:
        logger.configure(force=True)

    assert capsys.readouterr().out == "Expected: A.Dummy\nBut was:  B.Dummy\n"


def test_cli_rejects_unknown_log_level(capsys: pytest.CaptureFixture[str]) -> None:
    code = cli.main(["--set", "telemetry.log_level=chatty", "compare", "A", "B"])

    assert code == cli.EXIT_ERROR
    assert "telemetry.log_level" in capsys.readouterr().err


def test_cli_parse_nested_generic_json(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["parse", "List`1+Enumerator[NS.Item]", "--json"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["namespace_path"] == ["List"]
    assert payload["nested_suffix"] == "+Enumerator"
