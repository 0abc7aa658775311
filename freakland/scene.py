"""Scene components, lighting parameters and a small entity registry."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator

import numpy as np

from .math3d import quat_to_mat4, scale_matrix, translation_matrix, vec3

INVALID_MESH_ID = 0xFFFF


@dataclass(eq=False)
class TransformComponent:
    """World-space position, rotation ``(w, x, y, z)`` and scale with a cached matrix."""

    position: np.ndarray = field(default_factory=lambda: vec3(0.0, 0.0, 0.0))
    rotation: np.ndarray = field(default_factory=lambda: np.array([1.0, 0.0, 0.0, 0.0]))
    scale: np.ndarray = field(default_factory=lambda: vec3(1.0, 1.0, 1.0))
    world_matrix: np.ndarray = field(default_factory=lambda: np.identity(4))

    def rebuild_world_matrix(self) -> None:
        """Recompute ``world_matrix`` as translation * rotation * scale."""
        self.world_matrix = (
            translation_matrix(self.position)
            @ quat_to_mat4(self.rotation)
            @ scale_matrix(self.scale)
        )


@dataclass
class MeshComponent:
    """Reference to a mesh by id, resolved when the scene is loaded."""

    mesh_id: int = INVALID_MESH_ID


@dataclass(eq=False)
class MaterialComponent:
    """Flat-colour material."""

    diffuse: np.ndarray = field(default_factory=lambda: vec3(0.5, 0.5, 0.5))
    emissive: np.ndarray = field(default_factory=lambda: vec3(0.0, 0.0, 0.0))
    roughness: float = 0.8


@dataclass
class NameComponent:
    """Debug name of an entity."""

    name: str = ""


@dataclass(eq=False)
class ColliderComponent:
    """Static box collider given by half-extents."""

    half_extents: np.ndarray = field(default_factory=lambda: vec3(0.5, 0.5, 0.5))


@dataclass
class InteractableComponent:
    """Marks an entity the player can interact with; ``label`` is shown on hover."""

    label: str = ""


@dataclass(eq=False)
class SceneLighting:
    """Global directional light and fog settings."""

    light_dir: np.ndarray = field(default_factory=lambda: vec3(-0.3, -0.7, -0.5))
    light_color: np.ndarray = field(default_factory=lambda: vec3(0.6, 0.65, 0.9))
    light_intensity: float = 0.8
    ambient_color: np.ndarray = field(default_factory=lambda: vec3(0.03, 0.02, 0.05))
    fog_color: np.ndarray = field(default_factory=lambda: vec3(0.05, 0.02, 0.08))
    fog_density: float = 0.04
    fog_start: float = 5.0
    fog_end: float = 80.0


class Registry:
    """Entities as integer ids, each holding at most one component per type."""

    def __init__(self) -> None:
        self._next_id = 0
        self._entities: dict[int, dict[type, Any]] = {}

    def __len__(self) -> int:
        return len(self._entities)

    def create(self) -> int:
        """Create a new entity and return its id."""
        entity = self._next_id
        self._next_id += 1
        self._entities[entity] = {}
        return entity

    def _components(self, entity: int) -> dict[type, Any]:
        try:
            return self._entities[entity]
        except KeyError:
            raise KeyError(f"unknown entity {entity}") from None

    def emplace(self, entity: int, component: Any) -> Any:
        """Attach ``component`` to ``entity`` and return it."""
        components = self._components(entity)
        kind = type(component)
        if kind in components:
            raise ValueError(f"entity {entity} already has a {kind.__name__}")
        components[kind] = component
        return component

    def get(self, entity: int, component_type: type) -> Any:
        """Return the component of ``component_type`` attached to ``entity``."""
        components = self._components(entity)
        try:
            return components[component_type]
        except KeyError:
            raise KeyError(
                f"entity {entity} has no {component_type.__name__}"
            ) from None

    def has(self, entity: int, *args: type) -> bool:
        """True if ``entity`` exists and holds every given component type."""
        components = self._entities.get(entity)
        return components is not None and all(kind in components for kind in args)

    def valid(self, entity: int) -> bool:
        """True if ``entity`` was created by this registry."""
        return entity in self._entities

    def view(self, *args: type) -> Iterator[tuple]:
        """Yield ``(entity, component, ...)`` for entities holding all given types."""
        for entity, components in self._entities.items():
            if all(kind in components for kind in args):
                yield (entity, *(components[kind] for kind in args))


@dataclass
class Scene:
    """Owner of the entity registry."""

    registry: Registry = field(default_factory=Registry)