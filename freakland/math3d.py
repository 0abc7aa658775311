"""Vector, matrix and quaternion helpers.

Vectors are float numpy arrays. Matrices are 4x4 arrays indexed
``[row, column]`` that act on column vectors (``m @ v``). Quaternions
are arrays ordered ``(w, x, y, z)``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np


def vec3(x: float, y: float, z: float) -> np.ndarray:
    """Build a 3-component vector."""
    return np.array([x, y, z], dtype=float)


def normalize(v) -> np.ndarray:
    """Return ``v`` scaled to unit length."""
    v = np.asarray(v, dtype=float)
    return v / np.linalg.norm(v)


def cross(a, b) -> np.ndarray:
    """Cross product of two 3-vectors."""
    return np.cross(np.asarray(a, dtype=float), np.asarray(b, dtype=float))


def look_at_lh(eye, center, up) -> np.ndarray:
    """Left-handed view matrix looking from ``eye`` towards ``center``."""
    eye = np.asarray(eye, dtype=float)
    f = normalize(np.asarray(center, dtype=float) - eye)
    s = normalize(cross(up, f))
    u = cross(f, s)
    m = np.identity(4)
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = f
    m[0, 3] = -np.dot(s, eye)
    m[1, 3] = -np.dot(u, eye)
    m[2, 3] = -np.dot(f, eye)
    return m


def perspective_lh_zo(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Left-handed perspective projection with depth mapped to [0, 1]."""
    if aspect == 0.0:
        raise ValueError("aspect ratio must be non-zero")
    if far == near:
        raise ValueError("near and far clip planes must differ")
    tan_half = math.tan(fovy / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = 1.0 / (aspect * tan_half)
    m[1, 1] = 1.0 / tan_half
    m[2, 2] = far / (far - near)
    m[2, 3] = -(far * near) / (far - near)
    m[3, 2] = 1.0
    return m


def quat_from_euler(euler_radians) -> np.ndarray:
    """Quaternion ``(w, x, y, z)`` from pitch/yaw/roll angles in radians."""
    half = np.asarray(euler_radians, dtype=float) * 0.5
    cx, cy, cz = np.cos(half)
    sx, sy, sz = np.sin(half)
    return np.array([
        cx * cy * cz + sx * sy * sz,
        sx * cy * cz - cx * sy * sz,
        cx * sy * cz + sx * cy * sz,
        cx * cy * sz - sx * sy * cz,
    ])


def quat_to_mat4(q) -> np.ndarray:
    """Rotation matrix of a unit quaternion ``(w, x, y, z)``."""
    w, x, y, z = np.asarray(q, dtype=float)
    m = np.identity(4)
    m[0, 0] = 1.0 - 2.0 * (y * y + z * z)
    m[0, 1] = 2.0 * (x * y - w * z)
    m[0, 2] = 2.0 * (x * z + w * y)
    m[1, 0] = 2.0 * (x * y + w * z)
    m[1, 1] = 1.0 - 2.0 * (x * x + z * z)
    m[1, 2] = 2.0 * (y * z - w * x)
    m[2, 0] = 2.0 * (x * z - w * y)
    m[2, 1] = 2.0 * (y * z + w * x)
    m[2, 2] = 1.0 - 2.0 * (x * x + y * y)
    return m


def translation_matrix(v) -> np.ndarray:
    """Matrix translating by ``v``."""
    m = np.identity(4)
    m[:3, 3] = np.asarray(v, dtype=float)
    return m


def scale_matrix(v) -> np.ndarray:
    """Matrix scaling each axis by the components of ``v``."""
    return np.diag([*np.asarray(v, dtype=float), 1.0])


@dataclass(eq=False)
class CameraData:
    """View and projection matrices plus world position handed to the renderer."""

    view: np.ndarray = field(default_factory=lambda: np.identity(4))
    proj: np.ndarray = field(default_factory=lambda: np.identity(4))
    position: np.ndarray = field(default_factory=lambda: np.zeros(3))