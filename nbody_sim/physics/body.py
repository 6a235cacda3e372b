"""Body records and bounded position trails.

A Body is plain data: the engine deep-copies every Body it ingests and owns
the copy from then on. Vectors are numpy float arrays of shape (2,).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional, Union
import numpy as np

DEFAULT_TRAIL_CAPACITY = 80

# Record keys accepted in camelCase as well as snake_case
_CAMEL_KEYS = {
    "is_static": "isStatic",
    "parent_key": "parentKey",
    "orbit_radius": "orbitRadius",
}


def as_vector(value) -> np.ndarray:
    """Convert an {x, y} mapping or a 2-sequence into a float array.

    Args:
        value: Mapping with 'x' and 'y' keys, or any 2-element sequence/array

    Returns:
        New float array of shape (2,)

    Raises:
        ValueError: If the value does not describe a 2D vector
    """
    if isinstance(value, Mapping):
        value = (value["x"], value["y"])
    vec = np.array(value, dtype=float)
    if vec.shape != (2,):
        raise ValueError(f"Expected a 2D vector, got shape {vec.shape}")
    return vec


class Trail:
    """Fixed-capacity ring buffer of recently visited positions.

    Appending is O(1); once full, each append evicts the oldest sample.
    """

    def __init__(self, capacity: int = DEFAULT_TRAIL_CAPACITY, points=None):
        """Initialize trail.

        Args:
            capacity: Maximum number of samples kept
            points: Optional initial samples, oldest first
        """
        if capacity < 1:
            raise ValueError(f"Trail capacity must be positive, got {capacity}")
        self.capacity = int(capacity)
        self._buffer = np.zeros((self.capacity, 2))
        self._start = 0
        self._size = 0
        if points is not None:
            for point in points:
                self.append(point)

    def append(self, point):
        """Record a position, evicting the oldest one when at capacity."""
        index = (self._start + self._size) % self.capacity
        self._buffer[index] = as_vector(point)
        if self._size < self.capacity:
            self._size += 1
        else:
            self._start = (self._start + 1) % self.capacity

    def clear(self):
        self._start = 0
        self._size = 0

    def to_array(self) -> np.ndarray:
        """Return samples oldest to newest as a new (len, 2) array."""
        order = (self._start + np.arange(self._size)) % self.capacity
        return self._buffer[order]

    def to_list(self) -> List[Dict[str, float]]:
        return [{"x": float(x), "y": float(y)} for x, y in self.to_array()]

    def copy(self, capacity: Optional[int] = None) -> "Trail":
        """Deep copy, optionally with a new capacity (newest samples are kept)."""
        return Trail(capacity or self.capacity, self.to_array())

    @property
    def latest(self) -> Optional[np.ndarray]:
        if self._size == 0:
            return None
        return self._buffer[(self._start + self._size - 1) % self.capacity].copy()

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[np.ndarray]:
        return iter(self.to_array())

    def __repr__(self) -> str:
        return f"Trail(capacity={self.capacity}, size={self._size})"


@dataclass(eq=False)
class Body:
    """A simulated point mass.

    Only mass, position, velocity, acceleration, radius and is_static take part
    in the physics. Color, icon, label and note are display metadata;
    parent_key and orbit_radius are orbital bookkeeping read by the analysis
    layer (parent_key names the parent body's label).
    """
    id: Optional[int]
    mass: float
    position: np.ndarray
    velocity: np.ndarray = field(default_factory=lambda: np.zeros(2))
    acceleration: np.ndarray = field(default_factory=lambda: np.zeros(2))
    radius: float = 1.0
    color: str = "#FFFFFF"
    is_static: bool = False
    icon: Optional[str] = None
    label: Optional[str] = None
    note: Optional[str] = None
    parent_key: Optional[str] = None
    orbit_radius: Optional[float] = None
    trail: Trail = field(default_factory=Trail)

    def __post_init__(self):
        self.mass = float(self.mass)
        self.radius = float(self.radius)
        self.is_static = bool(self.is_static)
        self.position = as_vector(self.position)
        self.velocity = as_vector(self.velocity)
        self.acceleration = as_vector(self.acceleration)
        if not isinstance(self.trail, Trail):
            self.trail = Trail(DEFAULT_TRAIL_CAPACITY, self.trail)

    @property
    def speed(self) -> float:
        return float(np.hypot(self.velocity[0], self.velocity[1]))

    def copy(self, trail_capacity: Optional[int] = None) -> "Body":
        """Deep copy of this body; vectors and trail are never shared.

        Args:
            trail_capacity: Optional capacity for the copied trail

        Returns:
            New Body
        """
        return Body(
            id=self.id,
            mass=self.mass,
            position=self.position,
            velocity=self.velocity,
            acceleration=self.acceleration,
            radius=self.radius,
            color=self.color,
            is_static=self.is_static,
            icon=self.icon,
            label=self.label,
            note=self.note,
            parent_key=self.parent_key,
            orbit_radius=self.orbit_radius,
            trail=self.trail.copy(trail_capacity),
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Body":
        """Build a Body from a plain record.

        Vectors may be {'x': .., 'y': ..} mappings or 2-sequences. The keys
        isStatic, parentKey and orbitRadius are accepted in camelCase too.
        """
        def pick(key, default=None):
            if key in data:
                return data[key]
            return data.get(_CAMEL_KEYS.get(key, key), default)

        return cls(
            id=data.get("id"),
            mass=data["mass"],
            position=data["position"],
            velocity=data.get("velocity", (0.0, 0.0)),
            acceleration=data.get("acceleration", (0.0, 0.0)),
            radius=data.get("radius", 1.0),
            color=data.get("color", "#FFFFFF"),
            is_static=pick("is_static", False),
            icon=data.get("icon"),
            label=data.get("label"),
            note=data.get("note"),
            parent_key=pick("parent_key"),
            orbit_radius=pick("orbit_radius"),
            trail=data.get("trail", ()),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Plain, JSON-serializable record of this body."""
        def vec(v):
            return {"x": float(v[0]), "y": float(v[1])}

        return {
            "id": self.id,
            "mass": self.mass,
            "position": vec(self.position),
            "velocity": vec(self.velocity),
            "acceleration": vec(self.acceleration),
            "radius": self.radius,
            "color": self.color,
            "is_static": self.is_static,
            "icon": self.icon,
            "label": self.label,
            "note": self.note,
            "parent_key": self.parent_key,
            "orbit_radius": self.orbit_radius,
            "trail": self.trail.to_list(),
        }


def to_body(record: Union[Body, Mapping[str, Any]]) -> Body:
    """Accept a Body or a plain record; always returns a new Body."""
    if isinstance(record, Body):
        return record.copy()
    return Body.from_dict(record)
