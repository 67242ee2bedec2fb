"""Tests for the helper scripts under ``scripts/``."""

from __future__ import annotations

import importlib.util
from pathlib import Path
from types import ModuleType

import pytest

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "scripts" / "diff_types.py"


def _load_script() -> ModuleType:
    spec = importlib.util.spec_from_file_location("diff_types", SCRIPT_PATH)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def forwarded(monkeypatch: pytest.MonkeyPatch) -> tuple[ModuleType, list[list[str]]]:
    script = _load_script()
    calls: list[list[str]] = []

    def fake_main(argv: list[str]) -> int:
        calls.append(list(argv))
        return 0

    monkeypatch.setattr(script.cli, "main", fake_main)
    return script, calls


def test_diff_types_forwards_options(forwarded: tuple[ModuleType, list[list[str]]]) -> None:
    script, calls = forwarded

    code = script.main(
        [
            "NS.A.Dummy",
            "NS.B.Dummy",
            "--config",
            "custom.yaml",
            "--set",
            "message.fallback_to_raw=False",
            "--set",
            "parser.max_depth=8",
            "--json",
        ]
    )

    assert code == 0
    assert calls == [
        [
            "--config",
            "custom.yaml",
            "--set",
            "message.fallback_to_raw=False",
            "--set",
            "parser.max_depth=8",
            "compare",
            "NS.A.Dummy",
            "NS.B.Dummy",
            "--json",
        ]
    ]


def test_diff_types_minimal_invocation(forwarded: tuple[ModuleType, list[list[str]]]) -> None:
    script, calls = forwarded

    assert script.main(["NS.A", "NS.B"]) == 0
    assert calls == [["compare", "NS.A", "NS.B"]]


def test_diff_types_end_to_end(capsys: pytest.CaptureFixture[str]) -> None:
    script = _load_script()

    assert script.main(["NS.A.Dummy", "NS.B.Dummy1"]) == 0
    assert capsys.readouterr().out == "Expected: Dummy\nBut was:  Dummy1\n"
