"""Simulation engine for the SIR meeple simulation."""

import logging
from typing import Dict, Optional, TYPE_CHECKING

import numpy as np

from .agent import AgentStore, InfectionStatus
from .arena import Arena
from .boundary import contain_agents
from .motion import move_agents
from .state import AgentSnapshot, SimulationState
from .transmission import transmit

if TYPE_CHECKING:
    from ..config import SimulationConfig

logger = logging.getLogger(__name__)


class SimulationEngine:
    """
    Drives the discrete-time simulation loop.

    Every tick runs, over the whole population and in this order:
    1. Motion (positions and targets)
    2. Boundary containment (targets only)
    3. Transmission (status and markers), against the positions from 1-2

    All randomness comes from one generator seeded from the config, so a
    fixed seed replays the same run.
    """

    def __init__(self, config: "SimulationConfig"):
        config.validate()
        self.config = config
        self.current_step = 0
        self.elapsed_time = 0.0
        self.rng = np.random.default_rng(config.seed)

        self.arena = Arena.from_config(config.arena)
        self.agents = AgentStore.spawn(config, self.rng)

        self.total_new_infections = 0
        self.initial_infected = self.agents.count(InfectionStatus.INFECTED)

        logger.info(
            "Spawned %d agents (%d infected) in arena %s",
            len(self.agents), self.initial_infected, self.arena.bounds,
        )

    def step(self, dt: Optional[float] = None) -> SimulationState:
        """Execute one tick of length `dt` (config.dt when omitted)."""
        if dt is None:
            dt = self.config.dt
        if not dt > 0:
            raise ValueError(f"dt must be positive, got {dt}")

        retargeted = move_agents(self.agents, dt, self.config.agents.wander_step, self.rng)
        nudged = contain_agents(self.agents, self.arena, self.config.agents.wander_step)
        newly_infected = transmit(
            self.agents,
            self.config.disease.contact_radius,
            self.config.disease.transmission_probability,
            self.rng,
        )

        self.current_step += 1
        self.elapsed_time += dt
        self.total_new_infections += len(newly_infected)

        if self.current_step % 100 == 0:
            logger.debug(
                "Tick %d: retargeted=%d, nudged=%d, new_infections=%d, %r",
                self.current_step, retargeted, nudged, len(newly_infected), self.agents,
            )

        return self._create_state_snapshot(len(newly_infected))

    def _create_state_snapshot(self, new_infections: int) -> SimulationState:
        """Create a read-only copy of the current simulation state."""
        statuses = [InfectionStatus(code).label for code in range(len(InfectionStatus))]
        agent_snapshots = [
            AgentSnapshot(agent_id=i, x=float(x), y=float(y), status=statuses[code])
            for i, ((x, y), code) in enumerate(zip(self.agents.positions, self.agents.status))
        ]

        outside = int(np.count_nonzero(self.arena.outside_mask(self.agents.positions)))

        metrics = {
            'susceptible': self.agents.count(InfectionStatus.SUSCEPTIBLE),
            'infected': self.agents.count(InfectionStatus.INFECTED),
            'recovered': self.agents.count(InfectionStatus.RECOVERED),
            'new_infections': new_infections,
            'outside_fraction': outside / len(self.agents),
        }

        return SimulationState(
            step=self.current_step,
            time=self.elapsed_time,
            agents=agent_snapshots,
            markers=self.agents.markers.copy(),
            metrics=metrics
        )

    def is_finished(self) -> bool:
        """Check if the configured step limit has been reached."""
        return (self.config.max_steps is not None and
                self.current_step >= self.config.max_steps)

    def get_summary(self) -> Dict:
        """Get summary statistics for the simulation."""
        return {
            'total_steps': self.current_step,
            'elapsed_time': self.elapsed_time,
            'population': len(self.agents),
            'initial_infected': self.initial_infected,
            'new_infections': self.total_new_infections,
            'susceptible': self.agents.count(InfectionStatus.SUSCEPTIBLE),
            'infected': self.agents.count(InfectionStatus.INFECTED),
            'recovered': self.agents.count(InfectionStatus.RECOVERED),
        }
