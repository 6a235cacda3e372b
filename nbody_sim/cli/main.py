"""CLI main entry point."""

import argparse
import logging
import math
import sys
from typing import List, Optional
from nbody_sim.analysis.report import build_report, save_report
from nbody_sim.physics.errors import SimulationError
from nbody_sim.physics.policy import get_policy, list_policies
from nbody_sim.physics.simulator import Simulator
from nbody_sim.presets import get_preset, list_presets
from nbody_sim.presets.utils import make_probe
from nbody_sim.render.renderer_2d import Renderer2D
from nbody_sim.utils.config import Config, load_config

logger = logging.getLogger(__name__)


def build_simulator(config: Config) -> Simulator:
    """Create a simulator for the configured preset, applying overrides."""
    preset = get_preset(config.preset)
    engine_kwargs = {"check_finite": config.check_finite}
    if config.policy is not None:
        engine_kwargs["policy"] = get_policy(config.policy)
    if config.gravity is not None:
        engine_kwargs["G"] = config.gravity
    if config.softening is not None:
        engine_kwargs["softening"] = config.softening
    engine = preset.make_engine(**engine_kwargs)
    return Simulator(
        engine,
        dt=config.dt if config.dt is not None else preset.dt,
        substeps=config.substeps if config.substeps is not None else preset.substeps,
        time_scale=config.time_scale,
    )


def launch_probe(sim: Simulator, config: Config) -> Optional[str]:
    """Inject a probe from the configured body; returns a log entry."""
    engine = sim.engine
    origin = next((b for b in engine.bodies if b.label == config.probe_from), None)
    if origin is None:
        print(f"Probe skipped: no body labelled '{config.probe_from}'")
        return None
    probe = make_probe(origin, config.probe_speed, math.radians(config.probe_angle))
    probe_id = engine.add_body(probe)
    entry = (f"t={sim.time:.2f}: probe {probe_id} launched from {config.probe_from} "
             f"at {config.probe_speed:.1f} u/s, heading {config.probe_angle:.0f} deg")
    print(entry)
    return entry


def run_simulation(config: Config) -> Simulator:
    """Run a simulation."""
    sim = build_simulator(config)
    engine = sim.engine

    renderer = None
    if config.render:
        renderer = Renderer2D(show_trails=config.show_trails)

    print(f"Running simulation: {config.preset} with {len(engine)} bodies")
    print(f"Policy: {engine.policy.name}, G: {engine.G:g}, eps: {engine.softening:g}, "
          f"dt: {sim.dt:g} x {sim.substeps} substeps, time scale: {sim.time_scale:g}")

    diagnostics = engine.diagnostics
    K0, U0, E0 = diagnostics.compute_energies(
        engine.positions, engine.velocities, engine.masses, engine.is_static
    )
    print(f"{'Frame':<8} {'Time':<10} {'K':<14} {'U':<14} {'E':<14} {'dE/E0':<10}")
    print("-" * 74)
    print(f"{0:<8} {0.0:<10.2f} {K0:<14.2f} {U0:<14.2f} {E0:<14.2f} {0.0:<10.2f}%")

    probe_log: List[str] = []
    try:
        for frame in range(1, config.frames + 1):
            if config.probe_at is not None and frame == config.probe_at:
                entry = launch_probe(sim, config)
                if entry:
                    probe_log.append(entry)

            sim.step_frame()

            if renderer:
                renderer.render(engine.bodies)

            if config.debug_every and frame % config.debug_every == 0:
                K, U, E = engine.diagnostics.compute_energies(
                    engine.positions, engine.velocities, engine.masses, engine.is_static
                )
                dE = (E - E0) / abs(E0) * 100 if abs(E0) > 0 else 0.0
                print(f"{frame:<8} {sim.time:<10.2f} {K:<14.2f} {U:<14.2f} {E:<14.2f} {dE:<10.2f}%")
    finally:
        if renderer:
            renderer.close()

    if config.report_path:
        report = build_report(engine, probe_log=probe_log)
        save_report(report, config.report_path)
        print(f"Report saved to {config.report_path}")

    print("Simulation complete!")
    return sim


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="N-body Simulator - 2D gravitational N-body engine")

    # Scenario
    parser.add_argument('--config', type=str, default=None,
                        help='Load settings from a .json or .yaml file (flags override it)')
    parser.add_argument('--preset', type=str, default=None, choices=list_presets(),
                        help='Preset scenario (default: figure8)')
    parser.add_argument('--policy', type=str, default=None, choices=list_policies(),
                        help="Engine policy (default: the preset's)")

    # Physics
    parser.add_argument('--gravity', type=float, default=None,
                        help="Gravitational constant G (default: the preset's)")
    parser.add_argument('--softening', type=float, default=None,
                        help="Softening length epsilon (default: the preset's)")
    parser.add_argument('--no-check-finite', dest='check_finite', action='store_false', default=None,
                        help='Keep stepping even if the state becomes NaN/inf')

    # Timing
    parser.add_argument('--dt', type=float, default=None,
                        help="Micro-step length (default: the preset's)")
    parser.add_argument('--substeps', type=int, default=None,
                        help="Micro-steps per frame (default: the preset's)")
    parser.add_argument('--time-scale', type=float, default=None,
                        help='Multiplier applied to every micro-step (default: 1.0)')
    parser.add_argument('--frames', type=int, default=None,
                        help='Number of frames to run (default: 500)')

    # Rendering
    parser.add_argument('--render', action='store_true', default=None,
                        help='Enable real-time rendering')
    parser.add_argument('--no-trails', dest='show_trails', action='store_false', default=None,
                        help='Hide body trails when rendering')

    # Probe
    parser.add_argument('--probe-at', type=int, default=None,
                        help='Launch a probe before this frame')
    parser.add_argument('--probe-from', type=str, default=None,
                        help='Label of the launch body (default: Earth)')
    parser.add_argument('--probe-speed', type=float, default=None,
                        help='Launch speed relative to the launch body')
    parser.add_argument('--probe-angle', type=float, default=None,
                        help='Launch heading in degrees')

    # Output
    parser.add_argument('--report', dest='report_path', type=str, default=None,
                        help='Write a mission report (.json, .yaml or .txt)')
    parser.add_argument('--debug-every', type=int, default=None,
                        help='Print diagnostics every N frames (default: 50)')
    parser.add_argument('--log-level', type=str, default=None,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level (default: WARNING)')

    # Info
    parser.add_argument('--list-presets', action='store_true',
                        help='List available presets and exit')

    return parser.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> Config:
    """Start from the config file (if any) and apply every flag that was given."""
    config = load_config(args.config) if args.config else Config()
    for key in vars(Config()):
        value = getattr(args, key, None)
        if value is not None:
            setattr(config, key, value)
    return config


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    args = parse_args(argv)

    if args.list_presets:
        print("Available presets:")
        for name in list_presets():
            preset = get_preset(name)
            print(f"  - {name} ({preset.policy_name})")
        return 0

    config = config_from_args(args)
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        run_simulation(config)
    except SimulationError as exc:
        logger.error("Simulation aborted: %s", exc)
        print(f"Simulation aborted: {exc}")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
