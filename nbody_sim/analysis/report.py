"""Mission report: a snapshot of analytics and telemetry for export."""

import json
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional
import yaml
from nbody_sim.analysis.orbits import (
    OrbitalInsight,
    escape_velocity,
    find_resonance,
    orbital_insights,
)
from nbody_sim.physics.engine import NBodyEngine


@dataclass
class MissionReport:
    """Summary of the current simulation state."""
    policy: str
    body_count: int
    gravity: float
    total_energy: float
    insights: List[OrbitalInsight]
    average_velocity: Optional[float] = None
    resonance: Optional[str] = None
    escape_body: Optional[str] = None
    escape_velocity: Optional[float] = None
    probe_log: List[str] = field(default_factory=list)
    generated_at: str = field(default_factory=lambda: datetime.now().isoformat(timespec="seconds"))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "policy": self.policy,
            "body_count": self.body_count,
            "gravity": self.gravity,
            "total_energy": self.total_energy,
            "insights": [insight.to_dict() for insight in self.insights],
            "average_velocity": self.average_velocity,
            "resonance": self.resonance,
            "escape_body": self.escape_body,
            "escape_velocity": self.escape_velocity,
            "probe_log": list(self.probe_log),
            "generated_at": self.generated_at,
        }

    def to_text(self) -> str:
        """Plain-text rendering of the report."""
        lines = [
            f"Mission Report - {self.generated_at}",
            "",
            "Simulation Overview",
            f"  Policy: {self.policy}",
            f"  Bodies simulated: {self.body_count}",
            f"  G: {self.gravity:g}",
            f"  Total energy: {self.total_energy:.2f}",
            "",
            "Orbital Analytics",
        ]
        if not self.insights:
            lines.append("  No orbital bookkeeping available.")
        for insight in self.insights:
            lines.append(
                f"  {insight.label}: orbital velocity {insight.velocity:.1f} u/s, "
                f"period {insight.period:.1f} t, distance {insight.distance:.1f}"
            )
        if self.resonance:
            lines.append(f"  {self.resonance}")
        if self.escape_velocity is not None:
            lines.append(f"  {self.escape_body} escape velocity ≈ {self.escape_velocity:.1f} u/s")
        if self.average_velocity is not None:
            lines.append(f"  Mean orbital velocity ≈ {self.average_velocity:.1f} u/s")
        lines += ["", "Probe Activity"]
        if not self.probe_log:
            lines.append("  No probe deployments recorded this session.")
        lines += [f"  {entry}" for entry in self.probe_log]
        return "\n".join(lines)


def build_report(
    engine: NBodyEngine,
    probe_log: Iterable[str] = (),
    escape_body: str = "Earth",
) -> MissionReport:
    """Build a report from the engine's current state.

    Args:
        engine: Engine to summarize
        probe_log: Free-form probe deployment entries
        escape_body: Label of the body whose escape velocity is reported

    Returns:
        MissionReport
    """
    bodies = engine.bodies
    insights = orbital_insights(bodies, engine.G)
    average_velocity = None
    if insights:
        average_velocity = sum(i.velocity for i in insights) / len(insights)

    escape = None
    target = next((b for b in bodies if b.label == escape_body), None)
    if target is not None and target.radius > 0:
        escape = escape_velocity(engine.G, target.mass, target.radius)

    return MissionReport(
        policy=engine.policy.name,
        body_count=len(bodies),
        gravity=engine.G,
        total_energy=engine.total_energy(),
        insights=insights,
        average_velocity=average_velocity,
        resonance=find_resonance(insights),
        escape_body=escape_body if escape is not None else None,
        escape_velocity=escape,
        probe_log=list(probe_log),
    )


def save_report(report: MissionReport, output_path: str):
    """Save report to file.

    Args:
        report: Report to save
        output_path: Output file path (.json, .yaml/.yml or .txt)
    """
    output_path = Path(output_path)
    if output_path.suffix not in (".json", ".yaml", ".yml", ".txt"):
        raise ValueError(f"Unsupported file format: {output_path.suffix}. Use .json, .yaml or .txt")

    with open(output_path, 'w', encoding='utf-8') as f:
        if output_path.suffix in ('.yaml', '.yml'):
            yaml.safe_dump(report.to_dict(), f, default_flow_style=False, allow_unicode=True)
        elif output_path.suffix == '.json':
            json.dump(report.to_dict(), f, indent=2, ensure_ascii=False)
        else:
            f.write(report.to_text() + "\n")
