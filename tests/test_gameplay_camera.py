import math

import numpy as np
import pytest

from freakland.gameplay_camera import GameplayCamera
from freakland.math3d import perspective_lh_zo


def test_default_looks_down_negative_z():
    camera = GameplayCamera()
    assert camera.yaw == -90.0
    assert camera.pitch == 0.0
    assert np.allclose(camera.forward, [0.0, 0.0, -1.0])


def test_view_is_identity_before_first_update():
    camera = GameplayCamera()
    assert np.allclose(camera.camera_data().view, np.identity(4))


def test_mouse_delta_turns_camera():
    camera = GameplayCamera()
    camera.update((0.0, 1.6, 0.0), 10.0, 5.0)
    assert camera.yaw == pytest.approx(-90.0 - 10.0 * camera.sensitivity)
    assert camera.pitch == pytest.approx(-5.0 * camera.sensitivity)


def test_pitch_is_clamped():
    camera = GameplayCamera()
    camera.update((0.0, 0.0, 0.0), 0.0, -10000.0)
    assert camera.pitch == 89.0
    camera.update((0.0, 0.0, 0.0), 0.0, 10000.0)
    assert camera.pitch == -89.0


def test_yaw_wraps_past_full_turn():
    camera = GameplayCamera(yaw=350.0)
    camera.update((0.0, 0.0, 0.0), -200.0, 0.0)
    assert camera.yaw == pytest.approx(350.0 + 200.0 * camera.sensitivity - 360.0)


def test_basis_is_orthonormal():
    camera = GameplayCamera(yaw=37.0, pitch=20.0)
    camera.update((1.0, 2.0, 3.0), 3.0, -7.0)
    for v in (camera.forward, camera.right, camera.up):
        assert np.linalg.norm(v) == pytest.approx(1.0)
    assert np.dot(camera.forward, camera.right) == pytest.approx(0.0, abs=1e-9)
    assert np.dot(camera.forward, camera.up) == pytest.approx(0.0, abs=1e-9)
    assert np.dot(camera.right, camera.up) == pytest.approx(0.0, abs=1e-9)


def test_view_maps_eye_to_origin_and_forward_to_plus_z():
    camera = GameplayCamera(yaw=15.0, pitch=-30.0)
    eye = np.array([1.0, 2.0, 3.0])
    camera.update(eye, 0.0, 0.0)
    data = camera.camera_data()
    assert np.allclose(data.view @ np.append(eye, 1.0), [0.0, 0.0, 0.0, 1.0])
    ahead = data.view @ np.append(eye + camera.forward, 1.0)
    assert np.allclose(ahead, [0.0, 0.0, 1.0, 1.0])
    assert np.allclose(data.position, eye)


def test_set_aspect_rebuilds_projection():
    camera = GameplayCamera()
    camera.set_aspect(2.0)
    expected = perspective_lh_zo(math.radians(camera.fov), 2.0, camera.near_clip, camera.far_clip)
    assert np.allclose(camera.proj, expected)
    assert camera.proj[1, 1] / camera.proj[0, 0] == pytest.approx(2.0)


def test_camera_data_is_a_snapshot():
    camera = GameplayCamera()
    camera.update((0.0, 1.0, 0.0), 0.0, 0.0)
    data = camera.camera_data()
    camera.update((5.0, 1.0, 0.0), 0.0, 0.0)
    assert np.allclose(data.position, [0.0, 1.0, 0.0])


def test_zero_aspect_rejected():
    camera = GameplayCamera()
    with pytest.raises(ValueError):
        camera.set_aspect(0.0)