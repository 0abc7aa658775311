"""Kinematic first-person character controller with box collision."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

import numpy as np

from .collision import AABB, CollisionWorld
from .input_actions import InputActions


@dataclass
class FPSControllerConfig:
    """Tuning values for the first-person controller (units and seconds)."""

    move_speed: float = 5.0
    sprint_mult: float = 2.0
    jump_speed: float = 5.5
    gravity: float = 15.0
    eye_height: float = 1.6
    body_radius: float = 0.3
    body_height: float = 1.8
    crouch_height: float = 1.0
    crouch_eye_height: float = 0.85
    crouch_speed_mult: float = 0.45
    crouch_transition_speed: float = 10.0


class FPSController:
    """Grounded character movement producing an eye position for the camera.

    ``position`` is the center of the character's box, not its feet.
    """

    def __init__(self, spawn_position=(0.0, 0.0, 0.0), config: FPSControllerConfig | None = None) -> None:
        self.config = FPSControllerConfig()
        self.position = np.zeros(3)
        self.velocity = np.zeros(3)
        self.grounded = False
        self.crouching = False
        self._eye_height = self.config.eye_height
        self.reset(spawn_position, config)

    @property
    def current_eye_height(self) -> float:
        """Smoothed eye height above the feet."""
        return self._eye_height

    def reset(self, spawn_position, config: FPSControllerConfig | None = None) -> None:
        """Place the character with its feet at ``spawn_position``."""
        self.config = replace(config) if config is not None else FPSControllerConfig()
        self.position = np.array(spawn_position, dtype=float)
        self.position[1] += self.config.body_height * 0.5
        self.velocity = np.zeros(3)
        self.grounded = False
        self.crouching = False
        self._eye_height = self.config.eye_height

    def _current_height(self) -> float:
        return self.config.crouch_height if self.crouching else self.config.body_height

    def update(
        self,
        actions: InputActions,
        collision: CollisionWorld,
        camera_yaw: float,
        delta_time: float,
    ) -> None:
        """Apply input, gravity and collision for one frame."""
        cfg = self.config
        height_delta = cfg.body_height - cfg.crouch_height

        if actions.crouch and not self.crouching:
            self.position[1] -= height_delta * 0.5
            self.crouching = True
        elif not actions.crouch and self.crouching and self.grounded:
            stand_center = self.position.copy()
            stand_center[1] += height_delta * 0.5
            stand_check = AABB(
                stand_center,
                (cfg.body_radius, cfg.body_height * 0.5, cfg.body_radius),
            )
            if not collision.test_overlap(stand_check):
                self.position[1] += height_delta * 0.5
                self.crouching = False

        current_height = self._current_height()
        target_eye = cfg.crouch_eye_height if self.crouching else cfg.eye_height
        blend = 1.0 - math.exp(-cfg.crouch_transition_speed * delta_time)
        self._eye_height += (target_eye - self._eye_height) * blend

        yaw = math.radians(camera_yaw)
        forward = np.array([math.cos(yaw), 0.0, math.sin(yaw)])
        right = np.array([math.sin(yaw), 0.0, -math.cos(yaw)])
        move = np.asarray(actions.move, dtype=float)
        move_dir = forward * move[1] + right * move[0]
        length = float(np.linalg.norm(move_dir))
        if length > 0.001:
            move_dir /= length

        speed = cfg.move_speed
        if self.crouching:
            speed *= cfg.crouch_speed_mult
        elif actions.sprint:
            speed *= cfg.sprint_mult

        self.velocity[0] = move_dir[0] * speed
        self.velocity[2] = move_dir[2] * speed

        if actions.jump and self.grounded:
            self.velocity[1] = cfg.jump_speed
            self.grounded = False
            if self.crouching:
                self.position[1] += height_delta * 0.5
                self.crouching = False

        if not self.grounded:
            self.velocity[1] -= cfg.gravity * delta_time

        body = AABB(
            self.position,
            (cfg.body_radius, current_height * 0.5, cfg.body_radius),
        )
        result = collision.move_and_slide(body, self.velocity * delta_time)

        if result.grounded and self.velocity[1] < 0.0:
            self.velocity[1] = 0.0

        self.position = result.position
        self.grounded = result.grounded

    def eye_position(self) -> np.ndarray:
        """World-space position of the character's eyes."""
        feet_y = self.position[1] - self._current_height() * 0.5
        return np.array([self.position[0], feet_y + self._eye_height, self.position[2]])