"""Free-fly developer camera driven directly by raw input."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from .input import Input, Scancode
from .math3d import CameraData, cross, look_at_lh, normalize, perspective_lh_zo

_WORLD_UP = np.array([0.0, 1.0, 0.0])
_PITCH_LIMIT = 89.0
_MIN_SPEED = 0.5
_MAX_SPEED = 200.0


@dataclass(eq=False)
class CameraState:
    """Position and orientation in degrees; yaw -90 looks along -Z."""

    position: np.ndarray = field(default_factory=lambda: np.array([0.0, 2.0, 5.0]))
    yaw: float = -90.0
    pitch: float = -10.0


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


class DebugCamera:
    """WASD + mouse-look camera with smoothed acceleration."""

    def __init__(self, state: CameraState | None = None) -> None:
        self.base_speed = 5.0
        self.sprint_mult = 3.0
        self.smooth_factor = 12.0
        self.velocity = np.zeros(3)
        self.sensitivity = 0.1
        self.fov_degrees = 70.0
        self.aspect = 16.0 / 9.0
        self.near_clip = 0.1
        self.far_clip = 500.0
        self.state = CameraState()
        self.forward = np.array([0.0, 0.0, -1.0])
        self.right = np.array([1.0, 0.0, 0.0])
        self.up = np.array([0.0, 1.0, 0.0])
        self.view = np.identity(4)
        self.proj = np.identity(4)
        self.reset(state)

    @property
    def position(self) -> np.ndarray:
        return self.state.position

    @property
    def yaw(self) -> float:
        return self.state.yaw

    @property
    def pitch(self) -> float:
        return self.state.pitch

    @property
    def move_speed(self) -> float:
        """Base movement speed in units per second."""
        return self.base_speed

    def reset(self, state: CameraState | None = None) -> None:
        """Jump to ``state`` and rebuild all matrices."""
        state = state or CameraState()
        self.state = CameraState(np.array(state.position, dtype=float), float(state.yaw), float(state.pitch))
        self._update_vectors()
        self._update_view()
        self._update_proj()

    def _update_vectors(self) -> None:
        self.forward, self.right, self.up = _look_basis(self.state.yaw, self.state.pitch)

    def _update_view(self) -> None:
        pos = self.state.position
        self.view = look_at_lh(pos, pos + self.forward, self.up)

    def _update_proj(self) -> None:
        self.proj = perspective_lh_zo(
            math.radians(self.fov_degrees), self.aspect, self.near_clip, self.far_clip
        )

    def update(self, input: Input, delta_time: float) -> None:
        """Apply mouse look, speed keys and movement for one frame."""
        dt = float(delta_time)

        if input.mouse_captured:
            self.state.yaw -= input.mouse_delta_x * self.sensitivity
            self.state.pitch -= input.mouse_delta_y * self.sensitivity
            self.state.pitch = min(max(self.state.pitch, -_PITCH_LIMIT), _PITCH_LIMIT)
            if self.state.yaw > 360.0:
                self.state.yaw -= 360.0
            if self.state.yaw < -360.0:
                self.state.yaw += 360.0
            self._update_vectors()

        if input.is_key_down(Scancode.EQUALS):
            self.base_speed *= 1.0 + 2.0 * dt
        if input.is_key_down(Scancode.MINUS):
            self.base_speed *= 1.0 - 2.0 * dt
        self.base_speed = min(max(self.base_speed, _MIN_SPEED), _MAX_SPEED)

        direction = np.zeros(3)
        if input.is_key_down(Scancode.W):
            direction += self.forward
        if input.is_key_down(Scancode.S):
            direction -= self.forward
        if input.is_key_down(Scancode.D):
            direction += self.right
        if input.is_key_down(Scancode.A):
            direction -= self.right
        if input.is_key_down(Scancode.E) or input.is_key_down(Scancode.SPACE):
            direction[1] += 1.0
        if input.is_key_down(Scancode.Q) or input.is_key_down(Scancode.LCTRL):
            direction[1] -= 1.0

        length = float(np.linalg.norm(direction))
        if length > 0.001:
            direction /= length

        speed = self.base_speed
        if input.is_key_down(Scancode.LSHIFT):
            speed *= self.sprint_mult

        target = direction * speed
        blend = 1.0 - math.exp(-self.smooth_factor * dt)
        self.velocity = self.velocity + (target - self.velocity) * blend

        self.state.position = self.state.position + self.velocity * dt
        self._update_view()

    def set_aspect(self, aspect: float) -> None:
        self.aspect = float(aspect)
        self._update_proj()

    def set_fov(self, fov_degrees: float) -> None:
        self.fov_degrees = float(fov_degrees)
        self._update_proj()

    def set_clip_planes(self, near: float, far: float) -> None:
        self.near_clip = float(near)
        self.far_clip = float(far)
        self._update_proj()

    def camera_data(self) -> CameraData:
        """Snapshot of the matrices and position for the renderer."""
        return CameraData(self.view.copy(), self.proj.copy(), self.state.position.copy())