"""Axis-aligned rectangular arena the population is softly contained in."""

from dataclasses import dataclass
from typing import Tuple, TYPE_CHECKING
import numpy as np

if TYPE_CHECKING:
    from ..config import ArenaConfig


@dataclass(frozen=True)
class Arena:
    """
    Rectangle given by its center and its extent on each axis.

    Bounds are inclusive: an agent exactly on an edge is inside.
    """
    center_x: float
    center_y: float
    width: float
    height: float

    @classmethod
    def from_config(cls, config: "ArenaConfig") -> "Arena":
        return cls(
            center_x=float(config.center[0]),
            center_y=float(config.center[1]),
            width=float(config.width),
            height=float(config.height)
        )

    @property
    def min_corner(self) -> np.ndarray:
        return np.array([self.center_x - self.width / 2,
                         self.center_y - self.height / 2])

    @property
    def max_corner(self) -> np.ndarray:
        return np.array([self.center_x + self.width / 2,
                         self.center_y + self.height / 2])

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """(min_x, min_y, max_x, max_y)."""
        lo, hi = self.min_corner, self.max_corner
        return float(lo[0]), float(lo[1]), float(hi[0]), float(hi[1])

    def sample_uniform(self, count: int, rng: np.random.Generator) -> np.ndarray:
        """Draw `count` points uniformly inside the arena as a (count, 2) array."""
        unit = rng.random((count, 2))
        return self.min_corner + unit * np.array([self.width, self.height])

    def outside_mask(self, positions: np.ndarray) -> np.ndarray:
        """Boolean mask of positions lying outside the arena on any axis."""
        below = positions < self.min_corner
        above = positions > self.max_corner
        return np.any(below | above, axis=1)
