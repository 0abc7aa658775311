"""First-person camera locked to the character's eyes with mouse look."""

from __future__ import annotations

import math

import numpy as np

from .math3d import CameraData, cross, look_at_lh, normalize, perspective_lh_zo

_WORLD_UP = np.array([0.0, 1.0, 0.0])
_PITCH_LIMIT = 89.0


def _look_basis(yaw: float, pitch: float) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    yaw_rad = math.radians(yaw)
    pitch_rad = math.radians(pitch)
    forward = normalize([
        math.cos(yaw_rad) * math.cos(pitch_rad),
        math.sin(pitch_rad),
        math.sin(yaw_rad) * math.cos(pitch_rad),
    ])
    right = normalize(cross(_WORLD_UP, forward))
    up = normalize(cross(forward, right))
    return forward, right, up


class GameplayCamera:
    """Yaw/pitch look camera; angles are in degrees."""

    def __init__(self, yaw: float = -90.0, pitch: float = 0.0) -> None:
        self.yaw = float(yaw)
        self.pitch = float(pitch)
        self.sensitivity = 0.1
        self.fov = 70.0
        self.aspect = 16.0 / 9.0
        self.near_clip = 0.1
        self.far_clip = 500.0
        self.eye_position = np.array([0.0, 1.6, 0.0])
        self.view = np.identity(4)
        self.forward, self.right, self.up = _look_basis(self.yaw, self.pitch)
        self.proj = self._projection()

    def _projection(self) -> np.ndarray:
        return perspective_lh_zo(math.radians(self.fov), self.aspect, self.near_clip, self.far_clip)

    def update(self, eye_position, look_delta_x: float, look_delta_y: float) -> None:
        """Follow ``eye_position`` and turn by the mouse delta."""
        self.eye_position = np.array(eye_position, dtype=float)

        self.yaw -= look_delta_x * self.sensitivity
        self.pitch -= look_delta_y * self.sensitivity
        self.pitch = min(max(self.pitch, -_PITCH_LIMIT), _PITCH_LIMIT)

        if self.yaw > 360.0:
            self.yaw -= 360.0
        if self.yaw < -360.0:
            self.yaw += 360.0

        self.forward, self.right, self.up = _look_basis(self.yaw, self.pitch)
        self.view = look_at_lh(self.eye_position, self.eye_position + self.forward, self.up)

    def set_aspect(self, aspect: float) -> None:
        """Rebuild the projection for a new aspect ratio."""
        self.aspect = float(aspect)
        self.proj = self._projection()

    def camera_data(self) -> CameraData:
        """Snapshot of the matrices and position for the renderer."""
        return CameraData(self.view.copy(), self.proj.copy(), self.eye_position.copy())