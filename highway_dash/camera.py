# camera.py
import math

import numpy as np

from .config import CAMERA_HEIGHT, CAMERA_DISTANCE, CAMERA_FOV, CAMERA_NEAR, CAMERA_FAR


class Camera:
    """Pinhole camera at `position` looking at `target`, y up."""

    def __init__(self, width, height, fov=CAMERA_FOV,
                 position=(0.0, CAMERA_HEIGHT, CAMERA_DISTANCE), target=(0.0, 0.0, 0.0),
                 near=CAMERA_NEAR, far=CAMERA_FAR):
        self.fov = fov
        self.near = near
        self.far = far
        self.position = np.asarray(position, dtype=float)
        forward = np.asarray(target, dtype=float) - self.position
        forward /= np.linalg.norm(forward)
        right = np.cross(forward, [0.0, 1.0, 0.0])
        right /= np.linalg.norm(right)
        up = np.cross(right, forward)
        # rows map world offsets to camera space (x right, y up, z forward)
        self.basis = np.stack([right, up, forward])
        self.resize(width, height)

    def resize(self, width, height):
        self.width, self.height = width, max(height, 1)
        self.aspect = width / self.height
        self.focal = (self.height / 2) / math.tan(math.radians(self.fov) / 2)

    def to_camera(self, points):
        return (np.atleast_2d(np.asarray(points, dtype=float)) - self.position) @ self.basis.T

    def project(self, points):
        """Project world points to pixels. Returns (pixels, visible) arrays."""
        cam = self.to_camera(points)
        depth = cam[:, 2]
        visible = (depth >= self.near) & (depth <= self.far)
        safe = np.where(visible, depth, 1.0)
        px = self.width / 2 + self.focal * cam[:, 0] / safe
        py = self.height / 2 - self.focal * cam[:, 1] / safe
        return np.stack([px, py], axis=1), visible

    def project_polygon(self, corners):
        """Pixel polygon for a world-space face, or None if any corner is behind the camera."""
        pixels, visible = self.project(corners)
        if not visible.all():
            return None
        return [(float(x), float(y)) for x, y in pixels]
