"""Built-in procedural meshes and a name-to-id mesh registry."""

from __future__ import annotations

import math
from dataclasses import dataclass

from . import log
from .scene import INVALID_MESH_ID

MAX_MESHES = 32
_MAX_NAME_LENGTH = 31

_CYLINDER_SEGMENTS = 16
_CYLINDER_RADIUS = 0.5
_CYLINDER_HALF_HEIGHT = 0.5

Vec3 = tuple[float, float, float]


def pack_color(r: float, g: float, b: float, a: float = 1.0) -> int:
    """Pack RGBA channels in [0, 1] into a 32-bit ABGR integer."""

    def channel(value: float) -> int:
        if value < 0.0:
            return 0
        if value > 1.0:
            return 255
        return int(value * 255.0)

    return (channel(a) << 24) | (channel(b) << 16) | (channel(g) << 8) | channel(r)


WHITE = pack_color(1.0, 1.0, 1.0)


@dataclass(frozen=True)
class Vertex:
    """Position, normal and packed ABGR colour of one mesh vertex."""

    position: Vec3
    normal: Vec3
    color: int = WHITE


@dataclass(frozen=True)
class MeshData:
    """Vertex and triangle-index data of one mesh."""

    vertices: tuple[Vertex, ...]
    indices: tuple[int, ...]

    @property
    def index_count(self) -> int:
        return len(self.indices)

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3


def make_plane() -> MeshData:
    """Unit XZ plane centred at the origin, facing +Y."""
    up = (0.0, 1.0, 0.0)
    corners = [
        (-0.5, 0.0, -0.5),
        (0.5, 0.0, -0.5),
        (0.5, 0.0, 0.5),
        (-0.5, 0.0, 0.5),
    ]
    vertices = tuple(Vertex(corner, up) for corner in corners)
    return MeshData(vertices, (0, 2, 1, 0, 3, 2))


_CUBE_FACES: tuple[tuple[Vec3, tuple[Vec3, Vec3, Vec3, Vec3]], ...] = (
    ((0.0, 0.0, 1.0), ((-0.5, -0.5, 0.5), (0.5, -0.5, 0.5), (0.5, 0.5, 0.5), (-0.5, 0.5, 0.5))),
    ((0.0, 0.0, -1.0), ((0.5, -0.5, -0.5), (-0.5, -0.5, -0.5), (-0.5, 0.5, -0.5), (0.5, 0.5, -0.5))),
    ((0.0, 1.0, 0.0), ((-0.5, 0.5, 0.5), (0.5, 0.5, 0.5), (0.5, 0.5, -0.5), (-0.5, 0.5, -0.5))),
    ((0.0, -1.0, 0.0), ((-0.5, -0.5, -0.5), (0.5, -0.5, -0.5), (0.5, -0.5, 0.5), (-0.5, -0.5, 0.5))),
    ((1.0, 0.0, 0.0), ((0.5, -0.5, 0.5), (0.5, -0.5, -0.5), (0.5, 0.5, -0.5), (0.5, 0.5, 0.5))),
    ((-1.0, 0.0, 0.0), ((-0.5, -0.5, -0.5), (-0.5, -0.5, 0.5), (-0.5, 0.5, 0.5), (-0.5, 0.5, -0.5))),
)


def make_cube() -> MeshData:
    """Unit cube centred at the origin, four vertices per face for flat normals."""
    vertices: list[Vertex] = []
    indices: list[int] = []
    for normal, corners in _CUBE_FACES:
        base = len(vertices)
        vertices.extend(Vertex(corner, normal) for corner in corners)
        indices.extend((base, base + 1, base + 2, base, base + 2, base + 3))
    return MeshData(tuple(vertices), tuple(indices))


def make_cylinder() -> MeshData:
    """Capped cylinder along Y with radius 0.5 and height 1."""
    segments = _CYLINDER_SEGMENTS
    radius = _CYLINDER_RADIUS
    half = _CYLINDER_HALF_HEIGHT
    rim = [
        (math.cos(i / segments * math.tau), math.sin(i / segments * math.tau))
        for i in range(segments + 1)
    ]

    vertices: list[Vertex] = []
    for cx, cz in rim:
        normal = (cx, 0.0, cz)
        vertices.append(Vertex((cx * radius, -half, cz * radius), normal))
        vertices.append(Vertex((cx * radius, half, cz * radius), normal))

    indices: list[int] = []
    for i in range(segments):
        bottom_left = i * 2
        bottom_right = (i + 1) * 2
        top_left = bottom_left + 1
        top_right = bottom_right + 1
        indices.extend((bottom_left, bottom_right, top_right, bottom_left, top_right, top_left))

    top_center = len(vertices)
    vertices.append(Vertex((0.0, half, 0.0), (0.0, 1.0, 0.0)))
    bottom_center = len(vertices)
    vertices.append(Vertex((0.0, -half, 0.0), (0.0, -1.0, 0.0)))

    top_rim = len(vertices)
    vertices.extend(Vertex((cx * radius, half, cz * radius), (0.0, 1.0, 0.0)) for cx, cz in rim)
    bottom_rim = len(vertices)
    vertices.extend(Vertex((cx * radius, -half, cz * radius), (0.0, -1.0, 0.0)) for cx, cz in rim)

    for i in range(segments):
        indices.extend((top_center, top_rim + i + 1, top_rim + i))
        indices.extend((bottom_center, bottom_rim + i, bottom_rim + i + 1))

    return MeshData(tuple(vertices), tuple(indices))


class MeshCache:
    """Meshes looked up by integer id, seeded with plane, cube and cylinder."""

    def __init__(self) -> None:
        self._entries: list[tuple[str, MeshData]] = []
        for name, factory in (("plane", make_plane), ("cube", make_cube), ("cylinder", make_cylinder)):
            self.register(name, factory())
        log.info("Render", f"MeshCache initialized: {len(self)} built-in meshes")

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def count(self) -> int:
        """Number of registered meshes."""
        return len(self._entries)

    def find_by_name(self, name: str) -> int:
        """Id of the mesh called ``name``, or ``INVALID_MESH_ID`` if unknown."""
        for mesh_id, (entry_name, _) in enumerate(self._entries):
            if entry_name == name:
                return mesh_id
        log.warn("Render", f"MeshCache: unknown mesh '{name}'")
        return INVALID_MESH_ID

    def get(self, mesh_id: int) -> MeshData:
        """Mesh data for a valid id."""
        if not 0 <= mesh_id < len(self._entries):
            raise IndexError(f"invalid mesh id {mesh_id}")
        return self._entries[mesh_id][1]

    def register(self, name: str, data: MeshData) -> int:
        """Add a mesh under ``name`` (cut to 31 characters) and return its id."""
        if len(self._entries) >= MAX_MESHES:
            raise ValueError(f"mesh cache is full ({MAX_MESHES} meshes)")
        self._entries.append((name[:_MAX_NAME_LENGTH], data))
        return len(self._entries) - 1