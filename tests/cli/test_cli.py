"""Tests for the a11yscore command line interface."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from a11yscore.cli.main import build_parser, main
from a11yscore.types import JsonObject


def _write_config(root: Path, content: str) -> Path:
    path = root / "a11yscore.yaml"
    path.write_text(content, encoding="utf-8")
    return path


def test_report_prints_summary_to_stdout(
    tmp_path: Path,
    axe_results_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    code = main(["report", "-i", str(axe_results_path), "-r", str(tmp_path), "-u", "https://example.com/"])

    out = capsys.readouterr().out
    assert code == 0
    assert "Score       70/100 (Acceptable)" in out
    assert "Action plan" in out
    assert "https://example.com/" in out


def test_report_writes_requested_formats(tmp_path: Path, axe_results_path: Path) -> None:
    out_dir = tmp_path / "out"

    code = main(
        [
            "report",
            "-i",
            str(axe_results_path),
            "-r",
            str(tmp_path),
            "-o",
            str(out_dir),
            "--output-format",
            "json,csv,records",
            "--no-stdout",
        ]
    )

    assert code == 0
    assert sorted(item.name for item in out_dir.iterdir()) == [
        "issues.csv",
        "records.json",
        "report.json",
        "summary.json",
    ]
    summary = json.loads((out_dir / "summary.json").read_text(encoding="utf-8"))
    assert summary["url"] == axe_results_path.resolve().as_uri()
    records = json.loads((out_dir / "records.json").read_text(encoding="utf-8"))
    assert len(records["issues"]) == 3


def test_report_uses_config_formats_and_min_severity(tmp_path: Path, axe_results_path: Path) -> None:
    _write_config(tmp_path, "output_formats: [json]\nmin_severity: High\n")
    out_dir = tmp_path / "out"

    code = main(["report", "-i", str(axe_results_path), "-r", str(tmp_path), "-o", str(out_dir), "--no-stdout"])

    assert code == 0
    assert sorted(item.name for item in out_dir.iterdir()) == ["report.json", "summary.json"]
    payload = json.loads((out_dir / "report.json").read_text(encoding="utf-8"))
    assert payload["output_filter"] == {"min_severity": "High", "shown": 2, "total": 3, "filtered": 1}


def test_no_stdout_silences_output(
    tmp_path: Path,
    axe_results_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    main(["report", "-i", str(axe_results_path), "-r", str(tmp_path), "--no-stdout"])

    assert capsys.readouterr().out == ""


def test_missing_input_is_input_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["report", "-i", str(tmp_path / "absent.json"), "-r", str(tmp_path)])

    assert code == 2
    assert "Input error" in capsys.readouterr().err


@pytest.mark.parametrize(
    "output_format",
    ["pdf", "json,,csv", ","],
    ids=["unknown", "empty_token", "only_separator"],
)
def test_bad_output_format_is_config_error(
    tmp_path: Path,
    axe_results_path: Path,
    output_format: str,
    capsys: pytest.CaptureFixture[str],
) -> None:
    code = main(["report", "-i", str(axe_results_path), "-r", str(tmp_path), "--output-format", output_format])

    assert code == 2
    assert "Configuration error" in capsys.readouterr().err


def test_invalid_config_is_config_error(
    tmp_path: Path,
    axe_results_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _write_config(tmp_path, "min_severity: extreme\n")

    code = main(["report", "-i", str(axe_results_path), "-r", str(tmp_path)])

    assert code == 2
    assert "CFG006" in capsys.readouterr().err


def test_interpret_without_endpoint_is_config_error(
    tmp_path: Path,
    axe_results_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    code = main(["report", "-i", str(axe_results_path), "-r", str(tmp_path), "--interpret"])

    assert code == 2
    assert "interpretation.endpoint" in capsys.readouterr().err


class FakeOracle:
    """Stands in for the HTTP oracle as an async context manager."""

    instances: list[FakeOracle] = []

    def __init__(self, endpoint: str, *, timeout_seconds: float) -> None:
        self.endpoint = endpoint
        self.timeout_seconds = timeout_seconds
        FakeOracle.instances.append(self)

    async def __aenter__(self) -> FakeOracle:
        return self

    async def __aexit__(self, *args: object) -> None:
        return None

    async def interpret(self, payload: JsonObject) -> str | None:
        return f"Interpreted {payload['issues'][0]['id']}"


def test_interpret_uses_configured_endpoint(
    tmp_path: Path,
    axe_results_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _write_config(tmp_path, "interpretation:\n  endpoint: https://interpret.example/api\n  timeout_seconds: 3\n")
    FakeOracle.instances = []
    monkeypatch.setattr("a11yscore.cli.handlers.HttpInterpretationOracle", FakeOracle)
    out_dir = tmp_path / "out"

    code = main(["report", "-i", str(axe_results_path), "-r", str(tmp_path), "-o", str(out_dir), "--interpret"])

    out = capsys.readouterr().out
    assert code == 0
    assert [(oracle.endpoint, oracle.timeout_seconds) for oracle in FakeOracle.instances] == [
        ("https://interpret.example/api", 3.0)
    ]
    assert "Interpreted issue-0" in out
    payload = json.loads((out_dir / "report.json").read_text(encoding="utf-8"))
    assert payload["interpretations"]["issue-2"] == "Interpreted issue-2"


def test_validate_config_success(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _write_config(tmp_path, "output_formats: [json, csv]\n")

    code = main(["validate-config", "-r", str(tmp_path)])

    assert code == 0
    assert "Configuration is valid." in capsys.readouterr().out


def test_validate_config_reports_errors(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _write_config(tmp_path, "output_format: [json]\n")

    code = main(["validate-config", "-r", str(tmp_path)])

    err = capsys.readouterr().err
    assert code == 2
    assert "CFG004" in err
    assert "did you mean `output_formats`?" in err


def test_validate_config_missing_root(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["validate-config", "-r", str(tmp_path / "nowhere")])

    assert code == 2
    assert "CFG010" in capsys.readouterr().err


def test_parser_defaults(tmp_path: Path) -> None:
    args: Any = build_parser().parse_args(["report", "-i", str(tmp_path / "in.json")])

    assert args.root == Path(".")
    assert args.output_dir is None
    assert args.output_format is None
    assert args.min_severity is None
    assert args.interpret is False
