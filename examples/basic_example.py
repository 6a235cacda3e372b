"""Basic example of using the N-body engine."""

from nbody_sim import Simulator
from nbody_sim.presets import FigureEight


def main():
    """Run the figure-eight three-body orbit for one period."""
    preset = FigureEight()
    engine = preset.make_engine(softening=1e-3)

    sim = Simulator(engine, dt=0.1, substeps=10)

    print("Running simulation...")
    print(f"Initial energy: {sim.get_energy():.6f}")

    n_frames = int(round(FigureEight.PERIOD / (sim.dt * sim.substeps)))
    for frame in range(n_frames):
        sim.step_frame()
        if frame % 100 == 0:
            energy = sim.get_energy()
            print(f"Frame {frame}: Time={sim.time:.2f}, Energy={energy:.6f}")

    print(f"Final energy: {sim.get_energy():.6f}")
    print("Simulation complete!")

if __name__ == "__main__":
    main()
