import numpy as np
import pytest

from ogt.camera import (
    Camera,
    CameraMovement,
    look_at,
    perspective,
)


def _assert_orthonormal(camera):
    for vector in (camera.front, camera.right, camera.up):
        assert np.linalg.norm(vector) == pytest.approx(1.0)
    assert np.dot(camera.front, camera.right) == pytest.approx(0.0, abs=1e-9)
    assert np.dot(camera.front, camera.up) == pytest.approx(0.0, abs=1e-9)
    assert np.dot(camera.right, camera.up) == pytest.approx(0.0, abs=1e-9)


def test_default_camera_looks_down_negative_z():
    camera = Camera((0.0, 0.0, 3.0))
    np.testing.assert_allclose(camera.front, [0.0, 0.0, -1.0], atol=1e-9)
    np.testing.assert_allclose(camera.up, [0.0, 1.0, 0.0], atol=1e-9)
    assert camera.zoom == 45.0
    assert camera.yaw == -90.0


def test_basis_stays_orthonormal_after_turning():
    camera = Camera()
    camera.process_mouse_movement(137.0, -42.0)
    _assert_orthonormal(camera)


@pytest.mark.parametrize(
    "there, back",
    [
        (CameraMovement.FORWARD, CameraMovement.BACKWARD),
        (CameraMovement.LEFT, CameraMovement.RIGHT),
    ],
)
def test_opposite_moves_cancel(there, back):
    camera = Camera((1.0, 2.0, 3.0))
    camera.process_mouse_movement(250.0, 80.0)
    start = camera.position.copy()
    camera.process_keyboard(there, 0.7)
    assert not np.allclose(camera.position, start)
    camera.process_keyboard(back, 0.7)
    np.testing.assert_allclose(camera.position, start, atol=1e-9)


def test_forward_moves_along_front_by_speed_times_time():
    camera = Camera()
    camera.process_keyboard(CameraMovement.FORWARD, 2.0)
    distance = np.linalg.norm(camera.position)
    assert distance == pytest.approx(camera.movement_speed * 2.0)
    np.testing.assert_allclose(camera.position / distance, camera.front, atol=1e-9)


def test_pitch_is_clamped():
    camera = Camera()
    camera.process_mouse_movement(0.0, 10_000.0)
    assert camera.pitch == 89.0
    camera.process_mouse_movement(0.0, -100_000.0)
    assert camera.pitch == -89.0


def test_pitch_unconstrained_when_requested():
    camera = Camera()
    camera.process_mouse_movement(0.0, 1000.0, constrain_pitch=False)
    assert camera.pitch > 89.0


def test_zoom_is_clamped():
    camera = Camera()
    camera.process_mouse_scroll(1000.0)
    assert camera.zoom == 1.0
    camera.process_mouse_scroll(-1000.0)
    assert camera.zoom == 45.0


def test_view_matrix_maps_position_to_origin():
    camera = Camera((4.0, -2.0, 7.0))
    camera.process_mouse_movement(33.0, 12.0)
    view = camera.view_matrix()
    eye = view @ np.append(camera.position, 1.0)
    np.testing.assert_allclose(eye, [0.0, 0.0, 0.0, 1.0], atol=1e-9)
    ahead = view @ np.append(camera.position + camera.front, 1.0)
    np.testing.assert_allclose(ahead, [0.0, 0.0, -1.0, 1.0], atol=1e-9)


def test_look_at_from_origin_is_identity():
    view = look_at((0.0, 0.0, 0.0), (0.0, 0.0, -1.0), (0.0, 1.0, 0.0))
    np.testing.assert_allclose(view, np.identity(4), atol=1e-12)


def test_perspective_maps_near_and_far_planes():
    projection = perspective(45.0, 800 / 600, 0.01, 100.0)
    near = projection @ np.array([0.0, 0.0, -0.01, 1.0])
    far = projection @ np.array([0.0, 0.0, -100.0, 1.0])
    assert near[2] / near[3] == pytest.approx(-1.0)
    assert far[2] / far[3] == pytest.approx(1.0)


def test_perspective_rejects_zero_aspect():
    with pytest.raises(ValueError):
        perspective(45.0, 0.0, 0.1, 10.0)


def test_invalid_movement_rejected():
    camera = Camera()
    with pytest.raises(ValueError):
        camera.process_keyboard("up", 1.0)