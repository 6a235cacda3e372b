"""Tests for orbital analytics and mission reports."""

import json
import math
import pytest
import yaml
from nbody_sim.analysis import (
    OrbitalInsight,
    build_report,
    detect_resonance,
    escape_velocity,
    find_resonance,
    orbital_insights,
    save_report,
)
from nbody_sim.presets import FigureEight, SolarSystem


def test_orbital_insights():
    """Test circular-orbit summaries for the solar system."""
    insights = {i.label: i for i in orbital_insights(SolarSystem().generate(), G=100.0)}

    assert "Sun" not in insights
    earth = insights["Earth"]
    assert earth.parent == "Sun"
    assert math.isclose(earth.velocity, math.sqrt(100.0 * 10000.0 / 150.0))
    assert math.isclose(earth.period, 2 * math.pi * 150.0 / earth.velocity)
    assert math.isclose(earth.distance, 150.0)
    assert insights["Moon"].parent == "Earth"


def test_no_insights_without_bookkeeping():
    assert orbital_insights(FigureEight().generate(), G=10.0) == []


def test_escape_velocity():
    assert math.isclose(escape_velocity(100.0, 10.0, 8.0), math.sqrt(250.0))


def test_detect_resonance():
    """Test small-integer period ratios."""
    assert detect_resonance(2.0, 1.0) == "2:1"
    assert detect_resonance(2.0, 3.0) == "3:2"
    assert detect_resonance(math.pi, 1.0, tolerance=0.01) is None
    assert detect_resonance(0.0, 1.0) is None


def test_find_resonance_between_siblings():
    insights = [
        OrbitalInsight(1, "Inner", "Star", 10.0, 5.0, 1.0, 10.0),
        OrbitalInsight(2, "Outer", "Star", 16.0, 4.0, 2.0, 16.0),
        OrbitalInsight(3, "Lonely", "Other", 5.0, 1.0, 3.7, 5.0),
    ]
    assert find_resonance(insights) == "Outer:Inner period ratio ≈ 2:1"
    assert find_resonance(insights[2:]) is None


def test_build_report():
    engine = SolarSystem().make_engine()
    report = build_report(engine, probe_log=["t=1.00: probe launched"])

    assert report.policy == "anchored"
    assert report.body_count == 7
    assert report.gravity == 100.0
    assert report.escape_body == "Earth"
    assert math.isclose(report.escape_velocity, math.sqrt(250.0))
    assert len(report.insights) == 6
    assert report.probe_log == ["t=1.00: probe launched"]
    assert "Mission Report" in report.to_text()


def test_report_without_escape_body():
    report = build_report(FigureEight().make_engine())
    assert report.escape_velocity is None
    assert report.average_velocity is None
    assert "No probe deployments" in report.to_text()


def test_save_report(tmp_path):
    """Test JSON, YAML and text export."""
    report = build_report(SolarSystem().make_engine())

    json_path = tmp_path / "report.json"
    save_report(report, str(json_path))
    with open(json_path, encoding="utf-8") as f:
        data = json.load(f)
    assert data["body_count"] == 7
    assert len(data["insights"]) == 6

    yaml_path = tmp_path / "report.yaml"
    save_report(report, str(yaml_path))
    with open(yaml_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    assert data["policy"] == "anchored"

    text_path = tmp_path / "report.txt"
    save_report(report, str(text_path))
    assert "Orbital Analytics" in text_path.read_text(encoding="utf-8")

    bad_path = tmp_path / "report.csv"
    with pytest.raises(ValueError):
        save_report(report, str(bad_path))
    assert not bad_path.exists()
