"""N-body engine: owns the bodies and advances them one micro-step at a time."""

import logging
from typing import Iterable, List, Mapping, Optional, Tuple, Union
import numpy as np
from nbody_sim.physics.body import Body, to_body
from nbody_sim.physics.collisions import CollisionResolver
from nbody_sim.physics.diagnostics import Diagnostics
from nbody_sim.physics.errors import NonFiniteStateError
from nbody_sim.physics.force_calculator import ForceCalculator
from nbody_sim.physics.frame import recenter_frame
from nbody_sim.physics.integrators.base import Integrator
from nbody_sim.physics.integrators.verlet import VerletIntegrator
from nbody_sim.physics.policy import EnginePolicy, UNCONSTRAINED, get_policy

logger = logging.getLogger(__name__)

BodyRecord = Union[Body, Mapping]


class NBodyEngine:
    """Gravitational N-body engine.

    Numeric state lives in (n, 2) arrays; each owned Body's position, velocity
    and acceleration are row views into those arrays. Everything handed in is
    deep-copied and everything handed out is a copy, so caller data is never
    aliased.

    The engine is not thread-safe: a single caller must serialize `update()`
    and the mutators.
    """

    DEFAULT_G = 100.0
    DEFAULT_SOFTENING = 5.0
    TRAIL_SAMPLE_INTERVAL = 3  # ticks between trail samples

    def __init__(
        self,
        bodies: Iterable[BodyRecord] = (),
        policy: Union[EnginePolicy, str] = UNCONSTRAINED,
        G: float = DEFAULT_G,
        softening: float = DEFAULT_SOFTENING,
        check_finite: bool = True,
        force_calculator: Optional[ForceCalculator] = None,
        integrator: Optional[Integrator] = None,
    ):
        """Initialize engine.

        Args:
            bodies: Initial bodies (Body objects or plain records); deep-copied
            policy: EnginePolicy or policy name ('unconstrained', 'anchored')
            G: Gravitational constant (mutable later via set_gravity)
            softening: Softening length eps, fixed for the engine's lifetime
            check_finite: Raise NonFiniteStateError when a step produces NaN/inf
            force_calculator: Optional force law implementation
            integrator: Optional integrator (default: velocity Verlet)
        """
        if isinstance(policy, str):
            policy = get_policy(policy)
        self.policy = policy
        self.G = float(G)
        self._softening = float(softening)
        self.check_finite = check_finite
        self.force_calculator = force_calculator or ForceCalculator()
        self.integrator = integrator or VerletIntegrator()
        self.collision_resolver = CollisionResolver(
            restitution=policy.restitution, buffer=policy.collision_buffer
        )

        self._bodies: List[Body] = []
        self.positions = np.zeros((0, 2))
        self.velocities = np.zeros((0, 2))
        self.accelerations = np.zeros((0, 2))
        self.masses = np.zeros(0)
        self.radii = np.zeros(0)
        self.is_static = np.zeros(0, dtype=bool)
        self.step_count = 0
        self._next_id = 1

        self.set_bodies(bodies)

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def set_bodies(self, bodies: Iterable[BodyRecord]):
        """Replace the live collection with deep copies of `bodies`.

        Accelerations are derived immediately and the trail-sampling tick
        counter restarts.
        """
        self._bodies = [self._own(record) for record in bodies]
        ids = [body.id for body in self._bodies if isinstance(body.id, int)]
        self._next_id = max(ids, default=0) + 1
        seen = set()
        for body in self._bodies:
            # Missing and repeated ids get fresh ones; the first holder keeps its id
            if body.id is None or body.id in seen:
                body.id = self._take_id()
            seen.add(body.id)
        self._rebuild_arrays()
        self.step_count = 0
        self._evaluate_forces()
        logger.debug("Loaded %d bodies (policy=%s)", len(self._bodies), self.policy.name)

    def load_bodies(self, bodies: Iterable[BodyRecord]):
        """Alias of set_bodies()."""
        self.set_bodies(bodies)

    def add_body(self, body: BodyRecord) -> int:
        """Append a deep copy of `body` to the live collection.

        No other body's state changes and accelerations are not recomputed;
        the newcomer takes part in forces from the next update() on.

        Args:
            body: Body or plain record; a missing or already-used id is
                replaced by a fresh one

        Returns:
            The id the body was stored under
        """
        new_body = self._own(body)
        if new_body.id is None or any(b.id == new_body.id for b in self._bodies):
            new_body.id = self._take_id()
        elif isinstance(new_body.id, int):
            self._next_id = max(self._next_id, new_body.id + 1)
        self._bodies.append(new_body)
        self._rebuild_arrays()
        logger.debug("Added body %s (now %d bodies)", new_body.id, len(self._bodies))
        return new_body.id

    def remove_body(self, body_id) -> Body:
        """Remove a body by id and return it.

        Raises:
            KeyError: If no body has this id
        """
        index = self._index_of(body_id)
        removed = self._bodies.pop(index)
        self._rebuild_arrays()
        logger.debug("Removed body %s (now %d bodies)", body_id, len(self._bodies))
        return removed.copy()

    def set_gravity(self, g: float):
        """Replace G; used from the next force evaluation on."""
        self.G = float(g)

    # ------------------------------------------------------------------
    # Time stepping
    # ------------------------------------------------------------------

    def update(self, dt: float):
        """Advance one micro-step of length dt.

        Half-kick, drift, (every third tick) trail sample, force evaluation,
        collision pass (if enabled), closing half-kick, frame correction
        (if enabled and no body is static).

        Raises:
            NonFiniteStateError: If check_finite is on and the step produced
                a NaN or infinite position or velocity
        """
        movable = ~self.is_static
        self.integrator.step(self.positions, self.velocities, self.accelerations, dt, movable)

        self.step_count += 1
        if self.step_count % self.TRAIL_SAMPLE_INTERVAL == 0:
            self._sample_trails()

        self._evaluate_forces()

        if self.policy.resolve_collisions:
            self.collision_resolver.resolve(
                self.positions, self.velocities, self.masses, self.radii, self.is_static
            )

        self.integrator.complete_step(self.velocities, self.accelerations, dt, movable)

        # A static anchor already fixes the frame
        if self.policy.recenter_frame and movable.all():
            recenter_frame(self.positions, self.velocities, self.masses)

        if self.check_finite:
            self._check_finite()

    def compute_accelerations(self) -> np.ndarray:
        """Re-evaluate the force law with the current G and positions.

        Returns:
            Copy of the (n, 2) accelerations
        """
        self._evaluate_forces()
        return self.accelerations.copy()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def softening(self) -> float:
        return self._softening

    @property
    def bodies(self) -> List[Body]:
        """Deep-copied snapshot of every body, in insertion order."""
        return [body.copy() for body in self._bodies]

    @property
    def body_ids(self) -> List:
        return [body.id for body in self._bodies]

    def body(self, body_id) -> Body:
        """Snapshot of a single body by id."""
        return self._bodies[self._index_of(body_id)].copy()

    def __len__(self) -> int:
        return len(self._bodies)

    @property
    def diagnostics(self) -> Diagnostics:
        return Diagnostics(
            G=self.G,
            epsilon=self._softening,
            soften_potential=self.policy.soften_potential,
        )

    def kinetic_energy(self) -> float:
        return self.diagnostics.compute_kinetic_energy(self.velocities, self.masses, self.is_static)

    def potential_energy(self) -> float:
        return self.diagnostics.compute_potential_energy(self.positions, self.masses)

    def total_energy(self) -> float:
        """Kinetic plus potential energy. Pure: no state changes."""
        return self.kinetic_energy() + self.potential_energy()

    def momentum(self) -> np.ndarray:
        return self.diagnostics.compute_momentum(self.velocities, self.masses)

    def center_of_mass(self) -> np.ndarray:
        return self.diagnostics.compute_center_of_mass(self.positions, self.masses)

    def angular_momentum(self) -> float:
        return self.diagnostics.compute_angular_momentum(self.positions, self.velocities, self.masses)

    def get_state(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Get current state.

        Returns:
            Tuple of (positions, velocities, masses) as numpy array copies
        """
        return self.positions.copy(), self.velocities.copy(), self.masses.copy()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _own(self, record: BodyRecord) -> Body:
        """Deep-copy an incoming record into an engine-owned Body."""
        body = to_body(record)
        body.trail = body.trail.copy(self.policy.trail_capacity)
        if body.is_static:
            body.velocity[:] = 0.0
            body.acceleration[:] = 0.0
        return body

    def _take_id(self) -> int:
        body_id = self._next_id
        self._next_id += 1
        return body_id

    def _index_of(self, body_id) -> int:
        for index, body in enumerate(self._bodies):
            if body.id == body_id:
                return index
        raise KeyError(f"No body with id {body_id!r}")

    def _rebuild_arrays(self):
        """Pack body state into arrays and rebind the bodies' vectors as row views."""
        bodies = self._bodies
        self.positions = np.array([b.position for b in bodies], dtype=float).reshape(-1, 2)
        self.velocities = np.array([b.velocity for b in bodies], dtype=float).reshape(-1, 2)
        self.accelerations = np.array([b.acceleration for b in bodies], dtype=float).reshape(-1, 2)
        self.masses = np.array([b.mass for b in bodies], dtype=float)
        self.radii = np.array([b.radius for b in bodies], dtype=float)
        self.is_static = np.array([b.is_static for b in bodies], dtype=bool)
        for i, body in enumerate(bodies):
            body.position = self.positions[i]
            body.velocity = self.velocities[i]
            body.acceleration = self.accelerations[i]

    def _evaluate_forces(self):
        accelerations = self.force_calculator.compute_accelerations(
            self.positions, self.masses, G=self.G, epsilon=self._softening
        )
        # Static bodies are never integrated
        accelerations[self.is_static] = 0.0
        self.accelerations[...] = accelerations

    def _sample_trails(self):
        for body in self._bodies:
            body.trail.append(body.position)

    def _check_finite(self):
        finite = np.isfinite(self.positions).all(axis=1) & np.isfinite(self.velocities).all(axis=1)
        if not finite.all():
            bad_ids = [self._bodies[i].id for i in np.flatnonzero(~finite)]
            raise NonFiniteStateError(bad_ids, self.step_count)
