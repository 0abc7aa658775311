"""Gameplay-facing actions derived from raw keyboard and mouse input."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from .input import Input, Scancode


@dataclass(eq=False)
class InputActions:
    """One frame of gameplay intent.

    ``move`` is ``(strafe, forward)`` with right and forward positive;
    ``look_delta`` is the raw mouse delta in pixels.
    """

    move: np.ndarray = field(default_factory=lambda: np.zeros(2))
    look_delta: np.ndarray = field(default_factory=lambda: np.zeros(2))
    jump: bool = False
    interact: bool = False
    sprint: bool = False
    crouch: bool = False
    toggle_debug_cam: bool = False


def update_input_actions(raw: Input) -> InputActions:
    """Map the current raw input state to gameplay actions."""
    forward = float(raw.is_key_down(Scancode.W)) - float(raw.is_key_down(Scancode.S))
    strafe = float(raw.is_key_down(Scancode.D)) - float(raw.is_key_down(Scancode.A))

    return InputActions(
        move=np.array([strafe, forward]),
        look_delta=np.array([raw.mouse_delta_x, raw.mouse_delta_y], dtype=float),
        jump=raw.is_key_pressed(Scancode.SPACE),
        interact=raw.is_key_pressed(Scancode.E),
        sprint=raw.is_key_down(Scancode.LSHIFT),
        crouch=raw.is_key_down(Scancode.LCTRL),
        toggle_debug_cam=raw.is_key_pressed(Scancode.F2),
    )