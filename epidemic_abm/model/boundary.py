"""Soft containment of agents inside the arena."""

import numpy as np

from .agent import AgentStore
from .arena import Arena


def contain_agents(store: AgentStore, arena: Arena, wander_step: float) -> int:
    """
    Nudge the target of every agent that has left the arena back inward.

    Each axis is handled independently: below the minimum the target moves
    +wander_step, above the maximum it moves -wander_step. Positions are
    never touched, so an escaped agent drifts back over the next ticks.
    Returns the number of agents nudged on at least one axis.
    """
    below = store.positions < arena.min_corner
    above = store.positions > arena.max_corner

    store.targets[below] += wander_step
    store.targets[above] -= wander_step

    return int(np.count_nonzero(np.any(below | above, axis=1)))
