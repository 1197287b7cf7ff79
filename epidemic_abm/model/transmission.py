"""Pairwise stochastic disease transmission."""

import numpy as np

from .agent import AgentStore, InfectionStatus


def in_range_pairs(store: AgentStore, infected: np.ndarray, susceptible: np.ndarray,
                   contact_radius: float) -> np.ndarray:
    """
    Boolean (len(infected), len(susceptible)) matrix of pairs in contact.

    A pair is in contact when its squared distance is at most the squared
    contact radius. Every pair is checked; there is no spatial index.
    """
    a = store.positions[infected]
    b = store.positions[susceptible]
    dx = a[:, np.newaxis, 0] - b[np.newaxis, :, 0]
    dy = a[:, np.newaxis, 1] - b[np.newaxis, :, 1]
    return dx * dx + dy * dy <= contact_radius * contact_radius


def transmit(store: AgentStore, contact_radius: float, probability: float,
             rng: np.random.Generator) -> np.ndarray:
    """
    Run one transmission pass over every (infected, susceptible) pair.

    Statuses are read once at the start of the pass: agents infected here
    start spreading on the next tick. Every in-range pair gets exactly one
    uniform draw, taken in infected-major order, and a draw below
    `probability` infects the susceptible side. A susceptible agent near
    several infected ones gets several draws; any success infects it.

    Returns the indices of newly infected agents.
    """
    infected = store.indices_with(InfectionStatus.INFECTED)
    susceptible = store.indices_with(InfectionStatus.SUSCEPTIBLE)
    if infected.size == 0 or susceptible.size == 0:
        return np.empty(0, dtype=np.intp)

    contact = in_range_pairs(store, infected, susceptible, contact_radius)
    n_pairs = int(np.count_nonzero(contact))
    if n_pairs == 0:
        return np.empty(0, dtype=np.intp)

    # Boolean-mask assignment fills in C order, matching the draw order
    success = np.zeros_like(contact)
    success[contact] = rng.random(n_pairs) < probability

    newly_infected = susceptible[np.any(success, axis=0)]
    store.set_status(newly_infected, InfectionStatus.INFECTED)
    return newly_infected
