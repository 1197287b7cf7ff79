"""Model package for the SIR meeple simulation."""

from .state import AgentSnapshot, SimulationState
from .arena import Arena
from .agent import AgentStore, InfectionStatus
from .motion import move_agents
from .boundary import contain_agents
from .transmission import transmit
from .engine import SimulationEngine

__all__ = [
    'AgentSnapshot',
    'SimulationState',
    'Arena',
    'AgentStore',
    'InfectionStatus',
    'move_agents',
    'contain_agents',
    'transmit',
    'SimulationEngine',
]
