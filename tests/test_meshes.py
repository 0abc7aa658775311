import numpy as np
import pytest

from freakland.meshes import (
    MAX_MESHES,
    MeshCache,
    MeshData,
    Vertex,
    make_cube,
    make_cylinder,
    make_plane,
    pack_color,
)
from freakland.scene import INVALID_MESH_ID


def test_pack_color_abgr_order():
    assert pack_color(1.0, 0.0, 0.0) == 0xFF0000FF


def test_pack_color_clamps_out_of_range():
    assert pack_color(2.0, 5.0, 1.5, 3.0) == pack_color(1.0, 1.0, 1.0, 1.0)
    assert pack_color(-1.0, -0.5, -2.0, -1.0) == pack_color(0.0, 0.0, 0.0, 0.0)
    assert pack_color(0.0, 0.0, 0.0, 0.0) == 0


def test_vertex_default_color_is_white():
    vertex = Vertex((0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    assert vertex.color == pack_color(1.0, 1.0, 1.0)


@pytest.mark.parametrize("factory", [make_plane, make_cube, make_cylinder])
def test_mesh_indices_valid_and_all_used(factory):
    mesh = factory()
    assert mesh.index_count == len(mesh.indices)
    assert mesh.index_count % 3 == 0
    assert mesh.triangle_count * 3 == mesh.index_count
    assert set(mesh.indices) == set(range(len(mesh.vertices)))


@pytest.mark.parametrize("factory", [make_plane, make_cube, make_cylinder])
def test_mesh_normals_are_unit_length(factory):
    for vertex in factory().vertices:
        assert np.linalg.norm(vertex.normal) == pytest.approx(1.0)


def test_plane_is_flat_and_facing_up():
    mesh = make_plane()
    assert mesh.index_count == 6
    assert all(v.position[1] == 0.0 for v in mesh.vertices)
    assert all(v.normal == (0.0, 1.0, 0.0) for v in mesh.vertices)


def test_cube_layout():
    mesh = make_cube()
    assert len(mesh.vertices) == 24
    assert mesh.index_count == 36
    for vertex in mesh.vertices:
        assert all(abs(c) == 0.5 for c in vertex.position)


@pytest.mark.parametrize("factory", [make_plane, make_cube])
def test_triangle_winding_matches_normals(factory):
    mesh = factory()
    for start in range(0, mesh.index_count, 3):
        a, b, c = (mesh.vertices[i] for i in mesh.indices[start:start + 3])
        p0, p1, p2 = (np.array(v.position) for v in (a, b, c))
        face = np.cross(p1 - p0, p2 - p0)
        assert np.dot(face, a.normal) > 0.0


def test_cylinder_vertices_on_surface():
    mesh = make_cylinder()
    for vertex in mesh.vertices:
        x, y, z = vertex.position
        assert abs(y) == pytest.approx(0.5)
        assert np.hypot(x, z) <= 0.5 + 1e-9


def test_cache_builtin_names():
    cache = MeshCache()
    assert len(cache) == 3
    assert cache.count == 3
    assert cache.find_by_name("plane") == 0
    assert cache.find_by_name("cube") == 1
    assert cache.find_by_name("cylinder") == 2
    assert cache.get(cache.find_by_name("cube")).index_count == 36


def test_cache_unknown_name_returns_invalid():
    cache = MeshCache()
    assert cache.find_by_name("sphere") == INVALID_MESH_ID


def test_cache_get_invalid_id_raises():
    cache = MeshCache()
    with pytest.raises(IndexError):
        cache.get(INVALID_MESH_ID)
    with pytest.raises(IndexError):
        cache.get(-1)


def test_register_truncates_long_names():
    cache = MeshCache()
    data = make_plane()
    mesh_id = cache.register("x" * 40, data)
    assert mesh_id == 3
    assert cache.find_by_name("x" * 31) == mesh_id
    assert cache.find_by_name("x" * 40) == INVALID_MESH_ID
    assert cache.get(mesh_id) is data


def test_register_beyond_capacity_raises():
    cache = MeshCache()
    data = MeshData((), ())
    for i in range(MAX_MESHES - len(cache)):
        cache.register(f"mesh{i}", data)
    assert len(cache) == MAX_MESHES
    with pytest.raises(ValueError):
        cache.register("overflow", data)