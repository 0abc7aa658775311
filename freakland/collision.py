"""Axis-aligned box collision for static world geometry.

Provides per-axis move-and-slide resolution, overlap tests and raycasts
against a list of static boxes, plus an implicit ground plane at ``y = 0``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

_Y = 1
_RAY_EPSILON = 1e-8


@dataclass(eq=False)
class AABB:
    """Axis-aligned box given by its center and half-extents."""

    center: np.ndarray = field(default_factory=lambda: np.zeros(3))
    half_extents: np.ndarray = field(default_factory=lambda: np.full(3, 0.5))

    def __post_init__(self) -> None:
        self.center = np.array(self.center, dtype=float)
        self.half_extents = np.array(self.half_extents, dtype=float)

    def min(self) -> np.ndarray:
        """Corner with the smallest coordinates."""
        return self.center - self.half_extents

    def max(self) -> np.ndarray:
        """Corner with the largest coordinates."""
        return self.center + self.half_extents


@dataclass(eq=False)
class RayHit:
    """Closest hit of a raycast; ``hit`` is False when nothing was struck."""

    hit: bool = False
    distance: float = 0.0
    point: np.ndarray = field(default_factory=lambda: np.zeros(3))
    normal: np.ndarray = field(default_factory=lambda: np.zeros(3))
    body_index: int = 0


@dataclass(eq=False)
class MoveResult:
    """Resolved center position after moving, and whether it came to rest on something."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    grounded: bool = False


def _overlaps(a: AABB, b: AABB) -> bool:
    return bool(np.all(a.min() < b.max()) and np.all(a.max() > b.min()))


def _penetration(a: AABB, b: AABB) -> np.ndarray:
    """Overlap depth per axis; negative values mean a gap."""
    return (a.half_extents + b.half_extents) - np.abs(a.center - b.center)


def _ray_box(origin: np.ndarray, inv_dir: np.ndarray, box: AABB, max_dist: float) -> float | None:
    """Slab test; returns the hit distance or None."""
    t1 = (box.min() - origin) * inv_dir
    t2 = (box.max() - origin) * inv_dir
    t_min = float(np.max(np.minimum(t1, t2)))
    t_max = float(np.min(np.maximum(t1, t2)))

    if t_max < 0.0 or t_min > t_max or t_min > max_dist:
        return None
    t = t_min if t_min >= 0.0 else t_max
    return t if t <= max_dist else None


def _face_normal(point: np.ndarray, box: AABB) -> np.ndarray:
    """Normal of the box face nearest to ``point``."""
    d = (point - box.center) / box.half_extents
    ax, ay, az = np.abs(d)
    normal = np.zeros(3)
    if ax > ay and ax > az:
        normal[0] = 1.0 if d[0] > 0.0 else -1.0
    elif ay > az:
        normal[1] = 1.0 if d[1] > 0.0 else -1.0
    else:
        normal[2] = 1.0 if d[2] > 0.0 else -1.0
    return normal


class CollisionWorld:
    """Collection of static boxes that moving bodies collide with."""

    def __init__(self) -> None:
        self._bodies: list[AABB] = []

    def __len__(self) -> int:
        return len(self._bodies)

    @property
    def body_count(self) -> int:
        """Number of static bodies registered."""
        return len(self._bodies)

    def clear(self) -> None:
        """Remove every static body."""
        self._bodies.clear()

    def add_static_box(self, center, half_extents) -> int:
        """Add a static box and return its index."""
        self._bodies.append(AABB(center, half_extents))
        return len(self._bodies) - 1

    def get_body(self, index: int) -> AABB:
        """Static body at ``index``."""
        return self._bodies[index]

    def move_and_slide(self, body: AABB, displacement) -> MoveResult:
        """Move ``body`` one axis at a time, pushing it out of any box it enters."""
        displacement = np.asarray(displacement, dtype=float)
        position = body.center.copy()
        grounded = False

        for axis in range(3):
            swept = AABB(position.copy(), body.half_extents)
            swept.center[axis] += displacement[axis]

            for wall in self._bodies:
                if not _overlaps(swept, wall):
                    continue
                depth = _penetration(swept, wall)[axis]
                if depth > 0.0:
                    sign = 1.0 if swept.center[axis] > wall.center[axis] else -1.0
                    swept.center[axis] += sign * depth
                    if axis == _Y and sign > 0.0:
                        grounded = True

            position[axis] = swept.center[axis]

        if position[_Y] - body.half_extents[_Y] < 0.0:
            position[_Y] = body.half_extents[_Y]
            grounded = True

        return MoveResult(position=position, grounded=grounded)

    def test_overlap(self, box: AABB) -> bool:
        """True if ``box`` overlaps any static body."""
        return any(_overlaps(box, body) for body in self._bodies)

    def raycast(self, origin, direction, max_distance: float) -> RayHit:
        """Cast a ray and return the nearest hit within ``max_distance``."""
        origin = np.asarray(origin, dtype=float)
        direction = np.asarray(direction, dtype=float)

        closest = RayHit(distance=float(max_distance))
        safe_dir = np.where(np.abs(direction) > _RAY_EPSILON, direction, _RAY_EPSILON)
        inv_dir = 1.0 / safe_dir

        for index, box in enumerate(self._bodies):
            t = _ray_box(origin, inv_dir, box, closest.distance)
            if t is None or t >= closest.distance:
                continue
            point = origin + direction * t
            closest = RayHit(
                hit=True,
                distance=t,
                point=point,
                normal=_face_normal(point, box),
                body_index=index,
            )

        return closest