# obstacles.py
import logging
from dataclasses import dataclass
from enum import Enum

import numpy as np

from .entities import Obstacle

logger = logging.getLogger(__name__)


class SceneEventKind(Enum):
    SPAWNED = "spawned"
    REMOVED = "removed"


@dataclass(frozen=True)
class SceneEvent:
    kind: SceneEventKind
    obstacle_id: int
    lane_position: float
    depth: float


class ObstacleRegistry:
    """Live obstacles in spawn order. Listeners hear about every spawn and removal."""

    def __init__(self, spawn_depth):
        self.spawn_depth = spawn_depth
        self.obstacles = []
        self._listeners = []

    def __len__(self):
        return len(self.obstacles)

    def __iter__(self):
        return iter(self.obstacles)

    def add_listener(self, callback):
        self._listeners.append(callback)

    def _notify(self, kind, obstacle):
        event = SceneEvent(kind, obstacle.id, obstacle.lane_position, obstacle.depth)
        for callback in self._listeners:
            callback(event)

    def spawn(self, lane_position):
        obstacle = Obstacle(lane_position=lane_position, depth=self.spawn_depth)
        self.obstacles.append(obstacle)
        logger.debug("spawned obstacle %d at lane %.1f", obstacle.id, lane_position)
        self._notify(SceneEventKind.SPAWNED, obstacle)
        return obstacle

    def advance(self, distance):
        for o in self.obstacles:
            o.advance(distance)

    def cull(self, threshold):
        """Drop every obstacle past `threshold`; returns the removed ones."""
        passed = [o for o in self.obstacles if o.depth > threshold]
        if passed:
            self.obstacles = [o for o in self.obstacles if o.depth <= threshold]
            for o in passed:
                logger.debug("culled obstacle %d at depth %.1f", o.id, o.depth)
                self._notify(SceneEventKind.REMOVED, o)
        return passed

    def clear(self):
        removed, self.obstacles = self.obstacles, []
        for o in removed:
            self._notify(SceneEventKind.REMOVED, o)
        return removed


class SpawnPolicy:
    """Spawn with independent probability per tick into one of the lane slots."""

    def __init__(self, probability, lane_slots, seed=None, rng=None):
        self.probability = probability
        self.lane_slots = tuple(lane_slots)
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def should_spawn(self):
        return self.rng.random() < self.probability

    def lane(self):
        return float(self.lane_slots[self.rng.integers(len(self.lane_slots))])
