"""State snapshot dataclasses for the SIR meeple simulation."""

from dataclasses import dataclass
from typing import List, Dict
import numpy as np


@dataclass(frozen=True)
class AgentSnapshot:
    """Immutable snapshot of an agent's state at a given tick."""
    agent_id: int
    x: float
    y: float
    status: str  # "susceptible", "infected", "recovered"


@dataclass
class SimulationState:
    """Complete snapshot of simulation state after a tick."""
    step: int
    time: float
    agents: List[AgentSnapshot]
    markers: np.ndarray         # Copy of (n, 3) RGB marker colors
    metrics: Dict[str, float]   # S/I/R counts, new infections, etc.

    def status_counts(self) -> Dict[str, int]:
        return {
            'susceptible': int(self.metrics.get('susceptible', 0)),
            'infected': int(self.metrics.get('infected', 0)),
            'recovered': int(self.metrics.get('recovered', 0)),
        }
