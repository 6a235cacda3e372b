"""Example with real-time rendering."""

import math
from nbody_sim import Simulator
from nbody_sim.presets import SolarSystem
from nbody_sim.presets.utils import make_probe
from nbody_sim.render import Renderer2D

def main():
    """Run the solar system with rendering and launch a probe from Earth."""
    preset = SolarSystem()
    engine = preset.make_engine()
    sim = Simulator(engine, dt=preset.dt, substeps=preset.substeps)

    renderer = Renderer2D(show_trails=True)

    print("Running simulation with rendering...")
    print("Close the matplotlib window to stop.")

    try:
        for frame in range(2000):
            if frame == 200:
                earth = next(b for b in engine.bodies if b.label == "Earth")
                engine.add_body(make_probe(earth, speed=40.0, angle=math.pi / 2))
                print("Probe launched from Earth")

            sim.step_frame()

            # Render every 2 frames for better performance
            if frame % 2 == 0:
                renderer.render(engine.bodies)
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
    finally:
        renderer.close()
        print("Simulation complete!")

if __name__ == "__main__":
    main()
