"""Tests for random-waypoint motion."""

import numpy as np

from epidemic_abm.model.motion import move_agents

from conftest import make_store


class TestMoveAgents:
    def test_snaps_onto_target_within_reach(self, rng):
        store = make_store([[0.0, 0.0]], targets=[[3.0, 4.0]], speed=10.0)
        retargeted = move_agents(store, 1.0, 20.0, rng)
        assert retargeted == 0
        assert store.positions[0].tolist() == [3.0, 4.0]
        assert store.targets[0].tolist() == [3.0, 4.0]

    def test_snaps_when_reach_equals_distance(self, rng):
        store = make_store([[0.0, 0.0]], targets=[[3.0, 4.0]], speed=5.0)
        move_agents(store, 1.0, 20.0, rng)
        assert store.positions[0].tolist() == [3.0, 4.0]

    def test_moves_speed_times_dt_toward_target(self, rng):
        store = make_store([[0.0, 0.0]], targets=[[30.0, 40.0]], speed=10.0)
        move_agents(store, 0.5, 20.0, rng)
        np.testing.assert_allclose(store.positions[0], [3.0, 4.0])
        assert store.targets[0].tolist() == [30.0, 40.0]

    def test_retargets_when_standing_on_target(self, rng):
        store = make_store([[5.0, -5.0]], speed=1.0)
        retargeted = move_agents(store, 1.0, 20.0, rng)
        assert retargeted == 1
        # Position does not change on the re-targeting tick
        assert store.positions[0].tolist() == [5.0, -5.0]
        offset = store.targets[0] - store.positions[0]
        assert np.all(offset >= -10.0) and np.all(offset < 10.0)
        assert not np.array_equal(store.targets[0], store.positions[0])

    def test_retarget_draws_one_pair_per_agent_in_index_order(self):
        positions = [[0.0, 0.0], [1.0, 1.0], [2.0, 2.0]]
        targets = [[0.0, 0.0], [50.0, 50.0], [2.0, 2.0]]
        store = make_store(positions, targets=targets)
        rng = np.random.default_rng(11)
        move_agents(store, 1.0, 8.0, rng)

        reference = np.random.default_rng(11)
        expected = (reference.random((2, 2)) - 0.5) * 8.0
        np.testing.assert_array_equal(store.targets[[0, 2]],
                                      np.array([[0.0, 0.0], [2.0, 2.0]]) + expected)
        assert store.targets[1].tolist() == [50.0, 50.0]
        # The stream is left exactly where the reference is
        assert rng.random() == reference.random()

    def test_arrival_then_retarget_on_next_tick(self, rng):
        store = make_store([[0.0, 0.0]], targets=[[0.5, 0.0]], speed=1.0)
        assert move_agents(store, 1.0, 4.0, rng) == 0
        assert move_agents(store, 1.0, 4.0, rng) == 1

    def test_never_overshoots(self, rng):
        n = 200
        positions = rng.uniform(-50, 50, size=(n, 2))
        targets = positions + rng.uniform(-3, 3, size=(n, 2))
        targets[::7] = positions[::7]
        speeds = rng.uniform(0.5, 5.0, size=n)
        store = make_store(positions, targets=targets, speed=speeds)
        dt = 0.3

        for _ in range(300):
            before = store.positions.copy()
            targets_before = store.targets.copy()
            move_agents(store, dt, 6.0, rng)
            step = np.hypot(*(store.positions - before).T)
            assert np.all(step <= store.speeds * dt * (1 + 1e-12))
            # Never moves past the target it was heading to
            remaining_before = np.hypot(*(targets_before - before).T)
            assert np.all(step <= remaining_before + 1e-9)

    def test_speed_is_unchanged(self, rng):
        store = make_store([[0.0, 0.0], [1.0, 0.0]], targets=[[9.0, 0.0], [1.0, 0.0]], speed=2.0)
        for _ in range(20):
            move_agents(store, 0.1, 5.0, rng)
        assert store.speeds.tolist() == [2.0, 2.0]
