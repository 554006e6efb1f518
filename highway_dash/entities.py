# entities.py
import itertools
from dataclasses import dataclass, field

import numpy as np

from .config import GROUND_Y, VEHICLE_BODY, WHEEL_OFFSETS, WHEEL_RADIUS, WHEEL_WIDTH, OBSTACLE_SIZE


def _vehicle_extents():
    """Body plus wheels; the wheels widen the footprint past the body sides."""
    bx, by, bz = (s / 2 for s in VEHICLE_BODY)
    # wheels are cylinders lying on their side: axis along x
    wx = max(abs(o[0]) + WHEEL_WIDTH / 2 for o in WHEEL_OFFSETS)
    wy = max(abs(o[1]) + WHEEL_RADIUS for o in WHEEL_OFFSETS)
    wz = max(abs(o[2]) + WHEEL_RADIUS for o in WHEEL_OFFSETS)
    return (2 * max(bx, wx), 2 * max(by, wy), 2 * max(bz, wz))


VEHICLE_SIZE = _vehicle_extents()

_ids = itertools.count(1)


# ---------- ENTITIES ----------
@dataclass
class Vehicle:
    lane_position: float = 0.0
    speed: float = 0.0
    depth: float = 0.0
    size: tuple = VEHICLE_SIZE

    @property
    def center(self):
        return np.array([self.lane_position, GROUND_Y, self.depth])

    def accelerate(self, amount, max_speed):
        self.speed = min(self.speed + amount, max_speed)

    def decelerate(self, amount):
        self.speed = max(self.speed - amount, 0.0)

    def steer(self, delta, lane_width):
        self.lane_position = max(-lane_width, min(lane_width, self.lane_position + delta))

    def reset(self):
        self.lane_position = 0.0
        self.speed = 0.0
        self.depth = 0.0


@dataclass
class Obstacle:
    lane_position: float
    depth: float
    size: tuple = OBSTACLE_SIZE
    id: int = field(default_factory=lambda: next(_ids))

    @property
    def center(self):
        return np.array([self.lane_position, GROUND_Y, self.depth])

    def advance(self, distance):
        self.depth += distance
