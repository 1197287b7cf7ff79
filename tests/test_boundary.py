"""Tests for soft arena containment."""

import numpy as np

from epidemic_abm.model.arena import Arena
from epidemic_abm.model.boundary import contain_agents
from epidemic_abm.model.motion import move_agents

from conftest import make_store

ARENA = Arena(center_x=0.0, center_y=0.0, width=100.0, height=100.0)


class TestContainAgents:
    def test_just_below_min_x_nudges_target_by_step(self):
        store = make_store([[-50.001, 0.0]], targets=[[-50.001, 0.0]])
        nudged = contain_agents(store, ARENA, 7.5)
        assert nudged == 1
        assert store.targets[0, 0] == -50.001 + 7.5
        assert store.targets[0, 1] == 0.0

    def test_above_max_nudges_down(self):
        store = make_store([[0.0, 60.0]], targets=[[0.0, 70.0]])
        contain_agents(store, ARENA, 5.0)
        assert store.targets[0].tolist() == [0.0, 65.0]

    def test_corner_is_corrected_on_both_axes(self):
        store = make_store([[51.0, -51.0]], targets=[[51.0, -51.0]])
        contain_agents(store, ARENA, 2.0)
        assert store.targets[0].tolist() == [49.0, -49.0]

    def test_inside_agents_untouched(self):
        positions = [[0.0, 0.0], [50.0, -50.0], [-49.9, 49.9]]
        targets = [[1.0, 2.0], [60.0, 60.0], [-3.0, 4.0]]
        store = make_store(positions, targets=targets)
        assert contain_agents(store, ARENA, 10.0) == 0
        assert store.targets.tolist() == targets

    def test_positions_are_read_only(self):
        store = make_store([[-80.0, 90.0]], targets=[[-80.0, 90.0]])
        contain_agents(store, ARENA, 10.0)
        assert store.positions[0].tolist() == [-80.0, 90.0]


def _outside_fraction_over_run(contain: bool, ticks: int = 2000) -> float:
    rng = np.random.default_rng(2024)
    positions = ARENA.sample_uniform(300, rng)
    store = make_store(positions, speed=10.0)
    fractions = []
    for _ in range(ticks):
        move_agents(store, 0.1, 20.0, rng)
        if contain:
            contain_agents(store, ARENA, 20.0)
        fractions.append(ARENA.outside_mask(store.positions).mean())
    return float(np.mean(fractions[-500:]))


class TestLongRunContainment:
    def test_population_stays_mostly_inside(self):
        assert _outside_fraction_over_run(contain=True) < 0.1

    def test_free_wandering_escapes_without_containment(self):
        assert _outside_fraction_over_run(contain=False) > 0.3
