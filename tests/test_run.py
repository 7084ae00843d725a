"""Run-level tests ensuring determinism and the command line harnesses."""

import csv
import io
import json
import subprocess
import sys
import time
from pathlib import Path

import pytest

from mtrand import DrawConfig, MTRand, run_draws
from scripts import run_draws as run_draws_script
from scripts import summarize_runs


def test_deterministic_run_seed():
    cfg = DrawConfig(seed=0xDEADBEEF, count=50, max_value=99)
    first = run_draws(cfg)
    second = run_draws(cfg)
    assert first == second


def test_raw_draws_match_generator():
    result = run_draws(DrawConfig(seed=5489, count=5))
    rng = MTRand(5489)

    assert result["seed"] == 5489
    assert result["draws"] == [rng.next() for _ in range(5)]
    assert "summary" not in result


def test_bounded_draws_respect_max():
    result = run_draws(DrawConfig(seed=3, count=500, max_value=6))
    assert all(0 <= value <= 6 for value in result["draws"])


def test_report_echoes_config():
    cfg = DrawConfig(seed=12, count=3, max_value=9, histogram=True)
    result = run_draws(cfg)

    assert result["config"] == {
        "seed": 12,
        "use_time_seed": False,
        "count": 3,
        "max_value": 9,
        "histogram": True,
    }
    assert result["summary"]["buckets"] == 10
    assert result["summary"]["samples"] == 3


def test_time_seed_is_reported(monkeypatch):
    monkeypatch.setattr(time, "time", lambda: 86_400.5)

    result = run_draws(DrawConfig(seed=1, use_time_seed=True, count=4))
    replay = run_draws(DrawConfig(seed=result["seed"], count=4))

    assert result["seed"] == 86_400
    assert result["draws"] == replay["draws"]


def test_histogram_requires_bounded_range():
    with pytest.raises(ValueError):
        run_draws(DrawConfig(count=10, histogram=True))
    with pytest.raises(ValueError):
        run_draws(DrawConfig(count=10, max_value=2**20, histogram=True))


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        run_draws(DrawConfig(count=-1))


def test_cli_log_flag_writes_json(tmp_path, monkeypatch, capsys):
    log_path = tmp_path / "reports" / "out.json"
    monkeypatch.setattr(
        sys,
        "argv",
        [
            "run_draws.py",
            "--seed",
            "0x1571",
            "--count",
            "3",
            "--log",
            str(log_path),
        ],
    )

    run_draws_script.main()
    captured = capsys.readouterr()

    assert log_path.exists()
    payload = json.loads(log_path.read_text())
    assert payload["seed"] == 5489
    assert len(payload["draws"]) == 3

    stdout_payload = json.loads(captured.out)
    assert stdout_payload["draws"] == payload["draws"]


def test_cli_log_flag_without_value_uses_default(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    default_log = run_draws_script.DEFAULT_LOG_PATH
    monkeypatch.setattr(sys, "argv", ["run_draws.py", "--count", "2", "--log"])

    try:
        run_draws_script.main()
        captured = capsys.readouterr()

        assert default_log.exists()
        payload = json.loads(default_log.read_text())
        assert payload["seed"] == 0

        stdout_payload = json.loads(captured.out)
        assert stdout_payload == payload
    finally:
        if default_log.exists():
            default_log.unlink()


def test_cli_log_relative_path_resolves_against_repo_root(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    relative_target = Path("draw_logs/test_relative.json")
    expected = run_draws_script.PROJECT_ROOT / relative_target
    monkeypatch.setattr(
        sys,
        "argv",
        ["run_draws.py", "--count", "1", "--log", str(relative_target)],
    )

    try:
        run_draws_script.main()
        capsys.readouterr()  # drain stdout/stderr

        assert expected.exists()
        payload = json.loads(expected.read_text())
        assert len(payload["draws"]) == 1
    finally:
        if expected.exists():
            expected.unlink()


def test_cli_histogram_summary(monkeypatch, capsys):
    monkeypatch.setattr(
        sys,
        "argv",
        ["run_draws.py", "--count", "2000", "--max", "15", "--histogram"],
    )

    run_draws_script.main()
    payload = json.loads(capsys.readouterr().out)

    assert payload["summary"]["buckets"] == 16
    assert sum(payload["summary"]["counts"]) == 2000


@pytest.mark.parametrize(
    "argv",
    [
        ["--seed", "nope"],
        ["--seed", "-4"],
        ["--max", "0x100000000"],
        ["--count", "-1"],
        ["--histogram"],
    ],
)
def test_cli_rejects_bad_arguments(monkeypatch, capsys, argv):
    monkeypatch.setattr(sys, "argv", ["run_draws.py", *argv])

    with pytest.raises(SystemExit) as excinfo:
        run_draws_script.main()
    capsys.readouterr()

    assert excinfo.value.code == 2


def test_script_executes_without_pythonpath_requirement():
    repo_root = Path(__file__).resolve().parents[1]
    script_path = repo_root / "scripts" / "run_draws.py"
    result = subprocess.run(
        [sys.executable, str(script_path), "--count", "1"],
        cwd=repo_root,
        check=False,
        capture_output=True,
        text=True,
    )

    assert result.returncode == 0, result.stderr
    assert len(json.loads(result.stdout)["draws"]) == 1


def test_summarize_runs_writes_csv(tmp_path):
    first = tmp_path / "bytes.json"
    second = tmp_path / "raw.json"
    first.write_text(json.dumps(run_draws(DrawConfig(seed=1, count=400, max_value=3, histogram=True))))
    second.write_text(json.dumps(run_draws(DrawConfig(seed=2, count=5))))
    out_path = tmp_path / "sheets" / "summary.csv"

    summarize_runs.main([str(first), str(second), "--out", str(out_path)])

    rows = list(csv.reader(io.StringIO(out_path.read_text())))
    assert rows[0] == summarize_runs.HEADER
    assert rows[1][0] == "bytes"
    assert rows[1][3] == "400"
    assert rows[1][7] != ""
    assert rows[2][0] == "raw"
    assert rows[2][2] == ""
    assert rows[2][8] == ""


def test_summarize_runs_requires_existing_logs(tmp_path):
    with pytest.raises(FileNotFoundError):
        summarize_runs.main([str(tmp_path / "missing.json")])
