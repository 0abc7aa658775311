"""Populate a registry and lighting settings from a JSON scene description."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Union

import numpy as np

from . import log
from .errors import AssetNotFoundError, InvalidDataError
from .math3d import quat_from_euler, vec3
from .scene import (
    INVALID_MESH_ID,
    ColliderComponent,
    InteractableComponent,
    MaterialComponent,
    MeshComponent,
    NameComponent,
    Registry,
    SceneLighting,
    TransformComponent,
)

MeshResolver = Callable[[str], int]

_MAX_TEXT_LENGTH = 63


@dataclass(eq=False)
class SceneLoadResult:
    """Lighting read from the scene and the number of entities created."""

    lighting: SceneLighting = field(default_factory=SceneLighting)
    entity_count: int = 0


def _contains(node: Any, key: str) -> bool:
    return isinstance(node, dict) and key in node


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _to_float(value: Any) -> float:
    if isinstance(value, (int, float)):
        return float(value)
    raise InvalidDataError(f"expected a number, got {value!r}")


def _read_vec3(node: Any, fallback) -> np.ndarray:
    """Vector from a ``[x, y, z]`` array, or a copy of ``fallback``."""
    if not isinstance(node, list) or len(node) < 3:
        return np.array(fallback, dtype=float)
    return vec3(*(_to_float(component) for component in node[:3]))


def parse_lighting(root: Any) -> SceneLighting:
    """Read the ``sun`` and ``fog`` blocks, keeping defaults for absent fields."""
    lighting = SceneLighting()

    if _contains(root, "sun"):
        sun = root["sun"]
        if _contains(sun, "direction"):
            lighting.light_dir = _read_vec3(sun["direction"], lighting.light_dir)
        if _contains(sun, "color"):
            lighting.light_color = _read_vec3(sun["color"], lighting.light_color)
        if _contains(sun, "intensity"):
            lighting.light_intensity = _to_float(sun["intensity"])
        if _contains(sun, "ambient"):
            lighting.ambient_color = _read_vec3(sun["ambient"], lighting.ambient_color)

    if _contains(root, "fog"):
        fog = root["fog"]
        if _contains(fog, "color"):
            lighting.fog_color = _read_vec3(fog["color"], lighting.fog_color)
        if _contains(fog, "density"):
            lighting.fog_density = _to_float(fog["density"])
        if _contains(fog, "start"):
            lighting.fog_start = _to_float(fog["start"])
        if _contains(fog, "end"):
            lighting.fog_end = _to_float(fog["end"])

    return lighting


def _parse_transform(ent: dict) -> TransformComponent:
    transform = TransformComponent()
    if "position" in ent:
        transform.position = _read_vec3(ent["position"], (0.0, 0.0, 0.0))
    if "rotation" in ent:
        euler_degrees = _read_vec3(ent["rotation"], (0.0, 0.0, 0.0))
        transform.rotation = quat_from_euler(np.radians(euler_degrees))
    if "scale" in ent:
        scale = ent["scale"]
        if isinstance(scale, list):
            transform.scale = _read_vec3(scale, (1.0, 1.0, 1.0))
        elif _is_number(scale):
            transform.scale = vec3(scale, scale, scale)
    transform.rebuild_world_matrix()
    return transform


def _parse_material(ent: dict) -> MaterialComponent:
    material = MaterialComponent()
    mat = ent.get("material")
    if _contains(mat, "diffuse"):
        material.diffuse = _read_vec3(mat["diffuse"], material.diffuse)
    if _contains(mat, "emissive"):
        material.emissive = _read_vec3(mat["emissive"], material.emissive)
    if _contains(mat, "roughness"):
        material.roughness = _to_float(mat["roughness"])
    return material


def _parse_entities(root: Any, registry: Registry, resolve_mesh: MeshResolver) -> int:
    entities = root.get("entities") if isinstance(root, dict) else None
    if not isinstance(entities, list):
        return 0

    count = 0
    for ent in entities:
        if not _contains(ent, "mesh") or not isinstance(ent["mesh"], str):
            log.warn("Scene", "Entity missing 'mesh' field, skipping")
            continue

        mesh_name = ent["mesh"]
        mesh_id = resolve_mesh(mesh_name)
        if mesh_id == INVALID_MESH_ID:
            log.warn("Scene", f"Unknown mesh '{mesh_name}', skipping entity")
            continue

        entity = registry.create()
        registry.emplace(entity, _parse_transform(ent))
        registry.emplace(entity, MeshComponent(mesh_id))
        registry.emplace(entity, _parse_material(ent))

        if isinstance(ent.get("name"), str):
            registry.emplace(entity, NameComponent(ent["name"][:_MAX_TEXT_LENGTH]))

        if "collider" in ent:
            collider = ColliderComponent()
            collider.half_extents = _read_vec3(ent["collider"], collider.half_extents)
            registry.emplace(entity, collider)

        if isinstance(ent.get("interactable"), str):
            registry.emplace(entity, InteractableComponent(ent["interactable"][:_MAX_TEXT_LENGTH]))

        count += 1

    return count


def load_scene_data(root: Any, registry: Registry, mesh_resolver: MeshResolver) -> SceneLoadResult:
    """Build entities and lighting from an already decoded scene document."""
    result = SceneLoadResult(
        lighting=parse_lighting(root),
        entity_count=_parse_entities(root, registry, mesh_resolver),
    )
    if _contains(root, "name") and isinstance(root["name"], str):
        log.info("Scene", f"Scene '{root['name']}' loaded: {result.entity_count} entities")
    else:
        log.info("Scene", f"Scene loaded: {result.entity_count} entities")
    return result


def load_scene(
    path: Union[str, os.PathLike],
    registry: Registry,
    mesh_resolver: MeshResolver,
) -> SceneLoadResult:
    """Read a JSON scene file into ``registry``.

    Raises AssetNotFoundError if the file cannot be opened and
    InvalidDataError if it is not valid JSON.
    """
    log.info("Scene", f"Loading scene: {path}")
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        log.error("Scene", f"Failed to open scene file: {path}")
        raise AssetNotFoundError(f"cannot open scene file: {path}") from exc

    try:
        root = json.loads(data)
    except ValueError as exc:
        log.error("Scene", f"JSON parse error: {exc}")
        raise InvalidDataError(f"invalid scene JSON in {path}: {exc}") from exc

    return load_scene_data(root, registry, mesh_resolver)