#!/usr/bin/env python3
"""
Tests for highway_dash.obstacles -- registry lifecycle and spawn policy.
"""

import unittest

from highway_dash.obstacles import ObstacleRegistry, SceneEventKind, SpawnPolicy


class TestObstacleRegistry(unittest.TestCase):

    def setUp(self):
        self.events = []
        self.registry = ObstacleRegistry(spawn_depth=-500.0)
        self.registry.add_listener(self.events.append)

    def test_spawn_places_obstacle_far_away(self):
        o = self.registry.spawn(4.0)
        self.assertEqual(o.lane_position, 4.0)
        self.assertEqual(o.depth, -500.0)
        self.assertEqual(len(self.registry), 1)

    def test_spawn_notifies(self):
        o = self.registry.spawn(-4.0)
        self.assertEqual(len(self.events), 1)
        self.assertEqual(self.events[0].kind, SceneEventKind.SPAWNED)
        self.assertEqual(self.events[0].obstacle_id, o.id)

    def test_ids_are_unique(self):
        ids = {self.registry.spawn(0.0).id for _ in range(10)}
        self.assertEqual(len(ids), 10)

    def test_advance_moves_every_obstacle(self):
        a = self.registry.spawn(0.0)
        b = self.registry.spawn(4.0)
        b.depth = -100.0
        self.registry.advance(2.5)
        self.assertEqual(a.depth, -497.5)
        self.assertEqual(b.depth, -97.5)

    def test_cull_removes_passed_obstacle(self):
        """Obstacle one unit past the threshold is removed, and only it."""
        self.registry.spawn(0.0)
        passed = self.registry.spawn(4.0)
        passed.depth = 21.0
        removed = self.registry.cull(20.0)
        self.assertEqual(removed, [passed])
        self.assertEqual(len(self.registry), 1)

    def test_cull_keeps_obstacle_at_threshold(self):
        o = self.registry.spawn(0.0)
        o.depth = 20.0
        self.assertEqual(self.registry.cull(20.0), [])
        self.assertEqual(len(self.registry), 1)

    def test_cull_is_complete(self):
        for i in range(30):
            self.registry.spawn(0.0).depth = -30.0 + 2 * i
        self.registry.cull(5.0)
        self.assertTrue(all(o.depth <= 5.0 for o in self.registry))
        self.assertEqual(len(self.registry), 18)

    def test_cull_notifies_each_removal(self):
        for _ in range(3):
            self.registry.spawn(0.0).depth = 50.0
        self.events.clear()
        self.registry.cull(20.0)
        self.assertEqual([e.kind for e in self.events], [SceneEventKind.REMOVED] * 3)

    def test_clear(self):
        self.registry.spawn(0.0)
        self.registry.spawn(4.0)
        self.events.clear()
        removed = self.registry.clear()
        self.assertEqual(len(removed), 2)
        self.assertEqual(len(self.registry), 0)
        self.assertEqual(len(self.events), 2)


class TestSpawnPolicy(unittest.TestCase):

    SLOTS = (-4.0, 0.0, 4.0)

    def test_zero_probability_never_spawns(self):
        policy = SpawnPolicy(0.0, self.SLOTS, seed=1)
        self.assertFalse(any(policy.should_spawn() for _ in range(1000)))

    def test_full_probability_always_spawns(self):
        policy = SpawnPolicy(1.0, self.SLOTS, seed=1)
        self.assertTrue(all(policy.should_spawn() for _ in range(1000)))

    def test_rate_roughly_matches_probability(self):
        policy = SpawnPolicy(0.02, self.SLOTS, seed=42)
        hits = sum(policy.should_spawn() for _ in range(20000))
        self.assertGreater(hits, 250)
        self.assertLess(hits, 550)

    def test_lane_is_one_of_three_slots(self):
        policy = SpawnPolicy(0.02, self.SLOTS, seed=3)
        lanes = [policy.lane() for _ in range(300)]
        self.assertTrue(set(lanes) <= set(self.SLOTS))
        self.assertEqual(set(lanes), set(self.SLOTS))

    def test_seed_is_reproducible(self):
        a = SpawnPolicy(0.5, self.SLOTS, seed=99)
        b = SpawnPolicy(0.5, self.SLOTS, seed=99)
        self.assertEqual([(a.should_spawn(), a.lane()) for _ in range(50)],
                         [(b.should_spawn(), b.lane()) for _ in range(50)])


if __name__ == "__main__":
    unittest.main()
