"""Random-waypoint steering for the agent population."""

import numpy as np

from .agent import AgentStore


def move_agents(store: AgentStore, dt: float, wander_step: float,
                rng: np.random.Generator) -> int:
    """
    Advance every agent toward its target for one tick of length `dt`.

    Each agent falls in exactly one branch:
    - at target (distance exactly 0): pick a new target at a uniform
      offset in [-wander_step/2, wander_step/2) on each axis, stay put
    - target within reach this tick: snap onto the target
    - otherwise: move speed * dt along the direction to the target

    The at-target branch is decided before any direction is normalized,
    so zero-length vectors are never divided. Returns the number of
    agents that picked a new target.
    """
    vector_to_target = store.targets - store.positions
    distance_to_target = np.hypot(vector_to_target[:, 0], vector_to_target[:, 1])
    travel = store.speeds * dt

    at_target = distance_to_target == 0
    arriving = ~at_target & (distance_to_target <= travel)
    en_route = ~(at_target | arriving)

    # One (k, 2) draw for the k re-targeting agents, in index order
    retarget = np.flatnonzero(at_target)
    if retarget.size:
        offsets = (rng.random((retarget.size, 2)) - 0.5) * wander_step
        store.targets[retarget] = store.positions[retarget] + offsets

    # Snap prevents overshoot; exact equality triggers re-targeting next tick
    store.positions[arriving] = store.targets[arriving]

    direction = vector_to_target[en_route] / distance_to_target[en_route, np.newaxis]
    store.positions[en_route] += direction * travel[en_route, np.newaxis]

    return int(retarget.size)
