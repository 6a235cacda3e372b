"""Tests for the command-line entry point."""

import json
from nbody_sim.cli.main import config_from_args, main, parse_args


def test_list_presets(capsys):
    assert main(["--list-presets"]) == 0
    out = capsys.readouterr().out
    assert "figure8" in out
    assert "solar_system (anchored)" in out


def test_run_figure_eight(capsys):
    """Test a short headless run."""
    assert main(["--preset", "figure8", "--frames", "4", "--debug-every", "2"]) == 0
    out = capsys.readouterr().out
    assert "Policy: unconstrained" in out
    assert "Simulation complete!" in out


def test_flags_override_config_file(tmp_path):
    path = tmp_path / "run.json"
    path.write_text(json.dumps({"preset": "hierarchical", "frames": 7, "gravity": 50.0}))

    config = config_from_args(parse_args(["--config", str(path), "--frames", "2"]))
    assert config.preset == "hierarchical"
    assert config.frames == 2
    assert config.gravity == 50.0
    assert config.check_finite


def test_probe_and_report(tmp_path, capsys):
    """Test probe injection and report export."""
    report_path = tmp_path / "mission.json"
    code = main([
        "--preset", "solar_system",
        "--frames", "3",
        "--probe-at", "2",
        "--probe-angle", "90",
        "--report", str(report_path),
    ])

    assert code == 0
    with open(report_path, encoding="utf-8") as f:
        report = json.load(f)
    assert report["body_count"] == 8
    assert len(report["probe_log"]) == 1
    assert "launched from Earth" in report["probe_log"][0]


def test_non_finite_state_exits_with_error(capsys):
    assert main(["--preset", "figure8", "--gravity", "nan", "--frames", "3"]) == 1
    assert "non-finite state" in capsys.readouterr().out
