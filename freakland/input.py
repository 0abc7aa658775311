"""Raw keyboard and mouse state built from a stream of platform events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Union

MAX_KEYS = 512


class Scancode(IntEnum):
    """Physical key codes used by the engine."""

    A = 4
    D = 7
    E = 8
    Q = 20
    S = 22
    W = 26
    ESCAPE = 41
    SPACE = 44
    MINUS = 45
    EQUALS = 46
    F1 = 58
    F2 = 59
    LCTRL = 224
    LSHIFT = 225


@dataclass(frozen=True)
class QuitEvent:
    """The application was asked to close."""


@dataclass(frozen=True)
class KeyDownEvent:
    scancode: int


@dataclass(frozen=True)
class KeyUpEvent:
    scancode: int


@dataclass(frozen=True)
class MouseMotionEvent:
    x: float
    y: float
    xrel: float
    yrel: float


@dataclass(frozen=True)
class MouseButtonDownEvent:
    button: int


@dataclass(frozen=True)
class MouseButtonUpEvent:
    button: int


@dataclass(frozen=True)
class WindowResizedEvent:
    width: int
    height: int


Event = Union[
    QuitEvent,
    KeyDownEvent,
    KeyUpEvent,
    MouseMotionEvent,
    MouseButtonDownEvent,
    MouseButtonUpEvent,
    WindowResizedEvent,
]


class Input:
    """Keyboard, mouse and window state, updated once per frame."""

    def __init__(self) -> None:
        self._keys_down: set[int] = set()
        self._keys_prev: set[int] = set()
        self._buttons: set[int] = set()
        self._buttons_prev: set[int] = set()
        self.mouse_x = 0.0
        self.mouse_y = 0.0
        self.mouse_delta_x = 0.0
        self.mouse_delta_y = 0.0
        self.mouse_captured = False
        self.window_resized = False
        self.window_width = 0
        self.window_height = 0

    def poll_events(self, events: Iterable[Event]) -> bool:
        """Apply this frame's events; returns False when a quit event arrives."""
        self._keys_prev = set(self._keys_down)
        self._buttons_prev = set(self._buttons)
        self.mouse_delta_x = 0.0
        self.mouse_delta_y = 0.0
        self.window_resized = False

        for event in events:
            match event:
                case QuitEvent():
                    return False
                case KeyDownEvent(scancode=code):
                    if 0 <= code < MAX_KEYS:
                        self._keys_down.add(int(code))
                case KeyUpEvent(scancode=code):
                    if 0 <= code < MAX_KEYS:
                        self._keys_down.discard(int(code))
                case MouseMotionEvent(x=x, y=y, xrel=xrel, yrel=yrel):
                    self.mouse_x = x
                    self.mouse_y = y
                    self.mouse_delta_x += xrel
                    self.mouse_delta_y += yrel
                case MouseButtonDownEvent(button=button):
                    self._buttons.add(button)
                case MouseButtonUpEvent(button=button):
                    self._buttons.discard(button)
                case WindowResizedEvent(width=width, height=height):
                    self.window_resized = True
                    self.window_width = width
                    self.window_height = height
        return True

    def is_key_down(self, key: int) -> bool:
        """True while ``key`` is held."""
        return int(key) in self._keys_down

    def is_key_pressed(self, key: int) -> bool:
        """True on the frame ``key`` went down."""
        code = int(key)
        return code in self._keys_down and code not in self._keys_prev

    def is_key_released(self, key: int) -> bool:
        """True on the frame ``key`` went up."""
        code = int(key)
        return code not in self._keys_down and code in self._keys_prev

    def is_mouse_button_down(self, button: int) -> bool:
        """True while mouse ``button`` is held."""
        return button in self._buttons

    def set_mouse_captured(self, captured: bool) -> None:
        """Record whether the mouse is captured for relative look."""
        self.mouse_captured = bool(captured)