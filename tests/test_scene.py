import numpy as np
import pytest

from freakland.math3d import quat_from_euler, vec3
from freakland.scene import (
    INVALID_MESH_ID,
    ColliderComponent,
    InteractableComponent,
    MaterialComponent,
    MeshComponent,
    NameComponent,
    Registry,
    Scene,
    SceneLighting,
    TransformComponent,
)


def test_default_transform_rebuilds_to_identity():
    t = TransformComponent()
    t.rebuild_world_matrix()
    np.testing.assert_allclose(t.world_matrix, np.identity(4))


def test_world_matrix_places_origin_at_position():
    t = TransformComponent(position=vec3(3, -2, 5), scale=vec3(2, 2, 2))
    t.rotation = quat_from_euler(vec3(0.4, 1.2, -0.3))
    t.rebuild_world_matrix()
    origin = t.world_matrix @ np.array([0.0, 0.0, 0.0, 1.0])
    np.testing.assert_allclose(origin[:3], t.position)


def test_world_matrix_applies_scale_before_translation():
    t = TransformComponent(position=vec3(1, 0, 0), scale=vec3(2, 3, 4))
    t.rebuild_world_matrix()
    p = t.world_matrix @ np.array([1.0, 1.0, 1.0, 1.0])
    np.testing.assert_allclose(p[:3], t.scale + t.position)


def test_mesh_component_defaults_to_invalid():
    assert MeshComponent().mesh_id == INVALID_MESH_ID == 0xFFFF


def test_component_defaults_from_source():
    assert MaterialComponent().roughness == 0.8
    np.testing.assert_allclose(ColliderComponent().half_extents, [0.5, 0.5, 0.5])
    lighting = SceneLighting()
    assert lighting.fog_end == 80.0
    assert lighting.fog_start == 5.0


def test_create_gives_distinct_valid_entities():
    reg = Registry()
    a, b = reg.create(), reg.create()
    assert a != b
    assert reg.valid(a) and reg.valid(b)
    assert len(reg) == 2


def test_unknown_entity_not_valid():
    reg = Registry()
    assert reg.valid(42) is False
    assert reg.has(42, NameComponent) is False


def test_emplace_and_get():
    reg = Registry()
    e = reg.create()
    name = reg.emplace(e, NameComponent("crate"))
    assert reg.get(e, NameComponent) is name
    assert reg.get(e, NameComponent).name == "crate"


def test_emplace_twice_raises():
    reg = Registry()
    e = reg.create()
    reg.emplace(e, NameComponent("a"))
    with pytest.raises(ValueError):
        reg.emplace(e, NameComponent("b"))


def test_emplace_on_unknown_entity_raises():
    with pytest.raises(KeyError):
        Registry().emplace(7, NameComponent())


def test_get_missing_component_raises():
    reg = Registry()
    e = reg.create()
    with pytest.raises(KeyError):
        reg.get(e, ColliderComponent)


def test_has_requires_all_types():
    reg = Registry()
    e = reg.create()
    reg.emplace(e, InteractableComponent("Open"))
    assert reg.has(e, InteractableComponent)
    assert not reg.has(e, InteractableComponent, NameComponent)


def test_view_yields_only_matching_entities_in_order():
    reg = Registry()
    first, skipped, last = reg.create(), reg.create(), reg.create()
    for e in (first, skipped, last):
        reg.emplace(e, TransformComponent())
    reg.emplace(first, ColliderComponent())
    reg.emplace(last, ColliderComponent())
    rows = list(reg.view(TransformComponent, ColliderComponent))
    assert [row[0] for row in rows] == [first, last]
    assert rows[0][1] is reg.get(first, TransformComponent)
    assert rows[1][2] is reg.get(last, ColliderComponent)


def test_scene_owns_registry():
    scene = Scene()
    e = scene.registry.create()
    assert scene.registry.valid(e)
    assert Scene().registry is not scene.registry