from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from fuzzykit.cli import app

runner = CliRunner()


def test_distance_levenshtein() -> None:
    result = runner.invoke(app, ["distance", "frog", "fog"])
    assert result.exit_code == 0
    assert result.output.strip() == "1"


def test_distance_threshold_sentinel() -> None:
    result = runner.invoke(app, ["distance", "aaapppp", "", "--threshold", "6"])
    assert result.exit_code == 0
    assert result.output.startswith("-1")


def test_distance_jaro_winkler() -> None:
    result = runner.invoke(app, ["distance", "frog", "fog", "--metric", "jaro_winkler"])
    assert result.exit_code == 0
    assert "0.9250" in result.output


def test_distance_unknown_metric_fails() -> None:
    result = runner.invoke(app, ["distance", "a", "b", "--metric", "nope"])
    assert result.exit_code == 1
    assert "Unknown metric" in result.output


def test_metrics_lists_registry() -> None:
    result = runner.invoke(app, ["metrics"])
    assert result.exit_code == 0
    assert "jaro_winkler" in result.output
    assert "levenshtein_bounded" in result.output


def test_batch_then_report(tmp_path: Path) -> None:
    pairs_path = tmp_path / "pairs.jsonl"
    pairs_path.write_text(
        json.dumps({"id": "a", "left": "frog", "right": "fog"})
        + "\n"
        + json.dumps({"id": "b", "left": "fly", "right": "ant"})
        + "\n",
        encoding="utf-8",
    )
    run_dir = tmp_path / "run"
    result = runner.invoke(app, ["batch", str(pairs_path), "--run-path", str(run_dir)])
    assert result.exit_code == 0, result.output
    assert run_dir.joinpath("summary.json").exists()

    report = runner.invoke(app, ["report", str(run_dir)])
    assert report.exit_code == 0
    assert "num_pairs" in report.output


def test_batch_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["batch", str(tmp_path / "missing.jsonl")])
    assert result.exit_code == 1


def test_settings_file_drives_defaults(tmp_path: Path) -> None:
    settings_path = tmp_path / "settings.yaml"
    settings_path.write_text("metric: jaro\n", encoding="utf-8")
    result = runner.invoke(app, ["--settings", str(settings_path), "distance", "fly", "ant"])
    assert result.exit_code == 0
    assert "0.0000" in result.output


def test_matrix_command() -> None:
    result = runner.invoke(app, ["matrix", "frog", "fog", "--metric", "levenshtein"])
    assert result.exit_code == 0
    assert "levenshtein matrix" in result.output


def test_matrix_uses_bounded_levenshtein_from_settings(tmp_path: Path) -> None:
    settings_path = tmp_path / "settings.yaml"
    settings_path.write_text("threshold: 1\n", encoding="utf-8")
    result = runner.invoke(
        app, ["--settings", str(settings_path), "matrix", "elephant", "hippo"]
    )
    assert result.exit_code == 0, result.output
    assert "-1" in result.output
    assert " 7 " not in result.output


def test_report_without_trace_fails_cleanly(tmp_path: Path) -> None:
    result = runner.invoke(app, ["report", str(tmp_path)])
    assert result.exit_code == 1
    assert "Trace not found" in result.output
    assert result.exception is None or isinstance(result.exception, SystemExit)
