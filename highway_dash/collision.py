# collision.py
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Box:
    min: np.ndarray
    max: np.ndarray

    def intersects(self, other):
        # closed intervals: touching faces count as a hit
        return bool(np.all(self.min <= other.max) and np.all(other.min <= self.max))


def box_at(center, size):
    half = np.asarray(size, dtype=float) / 2
    c = np.asarray(center, dtype=float)
    return Box(c - half, c + half)


def bounding_box(entity):
    """Axis-aligned box around an entity's centre from its fixed size."""
    return box_at(entity.center, entity.size)


def intersects(a, b):
    return bounding_box(a).intersects(bounding_box(b))
