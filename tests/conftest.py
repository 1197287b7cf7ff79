"""Shared fixtures for the SIR meeple simulation tests."""

from pathlib import Path

import numpy as np
import pytest

from epidemic_abm.config import (
    AgentConfig,
    ArenaConfig,
    DiseaseConfig,
    PaletteConfig,
    SimulationConfig,
)
from epidemic_abm.model.agent import AgentStore, InfectionStatus

CONFIG_DIR = Path(__file__).resolve().parent.parent / "configs"

S = InfectionStatus.SUSCEPTIBLE
I = InfectionStatus.INFECTED  # noqa: E741


def make_store(positions, status=None, targets=None, speed=1.0) -> AgentStore:
    """Build a store from plain lists; status defaults to all susceptible."""
    positions = np.asarray(positions, dtype=float)
    if status is None:
        status = [S] * len(positions)
    return AgentStore(positions, speed, np.asarray(status), PaletteConfig(), targets=targets)


@pytest.fixture
def small_config() -> SimulationConfig:
    return SimulationConfig(
        population=50,
        max_steps=20,
        dt=0.1,
        arena=ArenaConfig(center=(0.0, 0.0), width=100.0, height=100.0),
        agents=AgentConfig(speed=10.0, wander_step=20.0),
        disease=DiseaseConfig(contact_radius=5.0, transmission_probability=0.5,
                              initial_infected_probability=0.1),
        seed=1234,
    )


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(7)
