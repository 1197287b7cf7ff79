"""Agent store: per-agent position, steering state and infection status."""

from enum import IntEnum
from typing import Iterable, Optional, Union, TYPE_CHECKING
import numpy as np

from .arena import Arena

if TYPE_CHECKING:
    from ..config import SimulationConfig, PaletteConfig


class InfectionStatus(IntEnum):
    """Closed set of disease states an agent can be in."""
    SUSCEPTIBLE = 0
    INFECTED = 1
    RECOVERED = 2

    @property
    def label(self) -> str:
        return self.name.lower()


class AgentStore:
    """
    Struct-of-arrays collection of agents keyed by index 0..n-1.

    Arrays:
    - positions: (n, 2) float current location
    - targets:   (n, 2) float location the agent steers toward
    - speeds:    (n,)   float travel rate, constant for the run
    - status:    (n,)   int InfectionStatus codes
    - markers:   (n, 3) float RGB color matching status

    The population size never changes after construction. Status and
    marker only change together through set_status().
    """

    def __init__(self, positions: np.ndarray, speeds: Union[float, np.ndarray],
                 status: np.ndarray, palette: "PaletteConfig",
                 targets: Optional[np.ndarray] = None):
        positions = np.array(positions, dtype=float).reshape(-1, 2)
        n = len(positions)

        self.positions = positions
        self.targets = (positions.copy() if targets is None
                        else np.array(targets, dtype=float).reshape(n, 2))
        self.speeds = np.broadcast_to(np.asarray(speeds, dtype=float), (n,)).copy()
        if np.any(self.speeds <= 0):
            raise ValueError("agent speeds must be strictly positive")

        self._colors = np.array([palette.susceptible, palette.infected, palette.recovered],
                                dtype=float)
        self.status = np.asarray(status, dtype=np.int8).reshape(n).copy()
        self.markers = self._colors[self.status]

    @classmethod
    def spawn(cls, config: "SimulationConfig", rng: np.random.Generator) -> "AgentStore":
        """
        Create the whole population once.

        Positions are uniform inside the arena and every agent starts out
        targeting its own position. Each agent independently starts
        infected with the configured initial probability.
        """
        arena = Arena.from_config(config.arena)
        positions = arena.sample_uniform(config.population, rng)
        infected = rng.random(config.population) < config.disease.initial_infected_probability
        status = np.where(infected, InfectionStatus.INFECTED, InfectionStatus.SUSCEPTIBLE)
        return cls(positions, config.agents.speed, status, config.palette)

    def __len__(self) -> int:
        return len(self.positions)

    def set_status(self, indices: Union[int, Iterable[int], np.ndarray],
                   status: InfectionStatus) -> None:
        """Set status and marker color for the given agents."""
        idx = np.atleast_1d(np.asarray(indices, dtype=np.intp))
        if idx.size == 0:
            return
        if np.any(self.status[idx] > status):
            raise ValueError(f"cannot move agents back to {status.label}")
        self.status[idx] = status
        self.markers[idx] = self._colors[status]

    def indices_with(self, status: InfectionStatus) -> np.ndarray:
        return np.flatnonzero(self.status == status)

    def count(self, status: InfectionStatus) -> int:
        return int(np.count_nonzero(self.status == status))

    def __repr__(self) -> str:
        return (f"AgentStore(n={len(self)}, "
                f"S={self.count(InfectionStatus.SUSCEPTIBLE)}, "
                f"I={self.count(InfectionStatus.INFECTED)}, "
                f"R={self.count(InfectionStatus.RECOVERED)})")
