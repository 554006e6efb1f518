# session.py
"""Game session: owns the vehicle and the obstacles, and advances them one tick at a time.

Nothing here touches pygame. The presentation reads `snapshot()` after each tick and
drains `drain_events()` to keep its obstacle visuals in step.
"""
import logging
import math
from dataclasses import dataclass
from enum import Enum

from .collision import intersects
from .config import GameConfig
from .entities import Vehicle
from .obstacles import ObstacleRegistry, SceneEvent, SceneEventKind, SpawnPolicy

__all__ = ["GameSession", "GameState", "InputEvent", "Snapshot", "SceneEvent", "SceneEventKind"]

logger = logging.getLogger(__name__)


class GameState(Enum):
    RUNNING = "running"
    OVER = "over"


class InputEvent(Enum):
    ACCELERATE_PRESSED = "accelerate-pressed"
    ACCELERATE_RELEASED = "accelerate-released"
    STEER_LEFT = "steer-left"
    STEER_RIGHT = "steer-right"


@dataclass(frozen=True)
class Snapshot:
    vehicle_lane: float
    obstacles: tuple  # (id, lane_position, depth)
    score: int
    speed: int
    state: GameState

    @property
    def is_over(self):
        return self.state is GameState.OVER


class GameSession:
    def __init__(self, config=None, spawn_policy=None, seed=None):
        self.config = config or GameConfig()
        self.vehicle = Vehicle()
        self.registry = ObstacleRegistry(self.config.spawn_depth)
        self.spawn_policy = spawn_policy or SpawnPolicy(
            self.config.spawn_probability, self.config.lane_slots, seed=seed)
        self.score = 0
        self.state = GameState.RUNNING
        self._events = []
        self.registry.add_listener(self._events.append)

    @property
    def is_over(self):
        return self.state is GameState.OVER

    # ---------- INPUT ----------
    def accelerate(self):
        if self.is_over:
            return
        self.vehicle.accelerate(self.config.acceleration, self.config.max_speed)

    def decelerate(self):
        if self.is_over:
            return
        self.vehicle.decelerate(self.config.deceleration)

    def steer_left(self):
        if self.is_over:
            return
        self.vehicle.steer(-self.config.turning_speed, self.config.lane_width)

    def steer_right(self):
        if self.is_over:
            return
        self.vehicle.steer(self.config.turning_speed, self.config.lane_width)

    def handle(self, event):
        handlers = {
            InputEvent.ACCELERATE_PRESSED: self.accelerate,
            InputEvent.ACCELERATE_RELEASED: self.decelerate,
            InputEvent.STEER_LEFT: self.steer_left,
            InputEvent.STEER_RIGHT: self.steer_right,
        }
        handlers[event]()

    # ---------- LOOP ----------
    def tick(self):
        if self.is_over:
            return self.state

        cfg = self.config
        self.score += math.floor(self.vehicle.speed)

        distance = self.vehicle.speed * cfg.speed_factor
        for obstacle in self.registry:
            obstacle.advance(distance)
            if intersects(self.vehicle, obstacle):
                self._game_over(obstacle)
                return self.state

        self.registry.cull(cfg.passed_threshold)

        if self.spawn_policy.should_spawn():
            self.registry.spawn(self.spawn_policy.lane())
        return self.state

    def _game_over(self, obstacle):
        self.state = GameState.OVER
        logger.info("collision with obstacle %d, game over (score %d)", obstacle.id, self.score)

    def reset(self):
        self.vehicle.reset()
        self.registry.clear()
        self.score = 0
        self.state = GameState.RUNNING

    # ---------- PRESENTATION ----------
    def snapshot(self):
        return Snapshot(
            vehicle_lane=self.vehicle.lane_position,
            obstacles=tuple((o.id, o.lane_position, o.depth) for o in self.registry),
            score=self.score,
            speed=math.floor(self.vehicle.speed),
            state=self.state,
        )

    def drain_events(self):
        events, self._events[:] = list(self._events), []
        return events
