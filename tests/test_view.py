from __future__ import annotations

import pytest

from core.config import MAX_ZOOM, MIN_ZOOM, ZOOM_STEP
from core.maths import Size2, Vector2
from core.view import (
    CameraView,
    ImagePlacement,
    ViewController,
    apply_pan,
    apply_zoom,
    center_and_maximize,
    reset_zoom,
)
from core.viewport import LogicalCanvas


def test_center_and_maximize_height_limited_scenario() -> None:
    # 1920x1080 image on a 2560x1440 display
    placement = center_and_maximize((2560, 1440), (1920, 1080))

    assert placement.scale.x == pytest.approx(1440 / 1080)
    assert placement.scale.y == pytest.approx(1440 / 1080)
    assert abs(placement.position.x) <= 1.0
    assert placement.position.y == 0.0


def test_center_and_maximize_pillarboxes_tall_image() -> None:
    placement = center_and_maximize((1000, 500), (100, 200))

    assert placement.scale == Vector2(2.5, 2.5)
    scaled = placement.scaled_size(Size2(100, 200))
    assert scaled.h == pytest.approx(500.0)
    assert placement.position == Vector2((1000 - 250) // 2, 0.0)


def test_center_and_maximize_letterboxes_wide_image() -> None:
    placement = center_and_maximize((800, 800), (400, 100))

    assert placement.scale == Vector2(2.0, 2.0)
    assert placement.position == Vector2(0.0, (800 - 200) // 2)


def test_center_and_maximize_truncates_offsets() -> None:
    placement = center_and_maximize((1001, 700), (300, 700))

    scaled_w = int(1.0 * 300)
    assert placement.position.x == (1001 - scaled_w) // 2
    assert placement.position.x == 350


def test_center_and_maximize_never_overflows_limiting_axis() -> None:
    for target in ((640, 480), (1920, 1080), (1001, 333), (7, 5000)):
        for image in ((1, 1), (4000, 3000), (333, 1001), (123, 45)):
            placement = center_and_maximize(target, image)
            rect = placement.dest_rect(Size2(*image))
            assert rect.w <= target[0] + 1
            assert rect.h <= target[1] + 1
            assert rect.x >= 0 and rect.y >= 0


def test_center_and_maximize_rejects_empty_sizes() -> None:
    with pytest.raises(ValueError):
        center_and_maximize((800, 600), (0, 10))
    with pytest.raises(ValueError):
        center_and_maximize((0, 600), (10, 10))


def test_reset_zoom_keeps_position() -> None:
    placement = ImagePlacement(Vector2(12.0, 34.0), Vector2(2.5, 2.5))
    reset = reset_zoom(placement)

    assert reset.scale == Vector2(1.0, 1.0)
    assert reset.position == Vector2(12.0, 34.0)
    # Input placement untouched
    assert placement.scale == Vector2(2.5, 2.5)


def test_apply_zoom_direction_and_factor() -> None:
    camera = CameraView(Vector2(50.0, 25.0), zoom=1.0)

    zoomed_in = apply_zoom(camera, -1.0)
    zoomed_out = apply_zoom(camera, 3.0)

    assert zoomed_in.zoom == pytest.approx(1.0 / ZOOM_STEP)
    assert zoomed_out.zoom == pytest.approx(ZOOM_STEP)
    assert zoomed_in.center == camera.center
    assert apply_zoom(camera, 0.0) is camera


def test_apply_zoom_is_multiplicative() -> None:
    camera = CameraView(Vector2(0.0, 0.0))
    for _ in range(5):
        camera = apply_zoom(camera, -1.0)

    assert camera.zoom == pytest.approx(ZOOM_STEP ** -5)


def test_paired_zoom_drift_stays_small() -> None:
    # 1/1.1 and 1.1 are not exact inverses in floating point
    camera = CameraView(Vector2(0.0, 0.0))
    for _ in range(10):
        camera = apply_zoom(camera, -1.0)
        camera = apply_zoom(camera, 1.0)

    assert abs(camera.zoom / 1.0 - 1.0) < 1e-3


def test_apply_zoom_is_clamped() -> None:
    camera = CameraView(Vector2(0.0, 0.0))
    for _ in range(200):
        camera = apply_zoom(camera, -1.0)
    assert camera.zoom == pytest.approx(MIN_ZOOM)

    for _ in range(400):
        camera = apply_zoom(camera, 1.0)
    assert camera.zoom == pytest.approx(MAX_ZOOM)


def test_camera_view_requires_positive_zoom() -> None:
    with pytest.raises(ValueError):
        CameraView(Vector2(0.0, 0.0), zoom=0.0)


def test_apply_pan_moves_against_drag() -> None:
    camera = CameraView(Vector2(100.0, 100.0))
    moved = apply_pan(camera, (10.0, -4.0))

    assert moved.center == Vector2(90.0, 104.0)
    assert camera.center == Vector2(100.0, 100.0)


def test_pan_is_not_scaled_by_zoom() -> None:
    canvas = LogicalCanvas(200, 100)
    camera = CameraView.for_canvas(canvas)
    for _ in range(7):
        camera = apply_zoom(camera, -1.0)

    moved = apply_pan(camera, (10.0, 0.0))

    assert moved.center.x == camera.center.x - 10.0
    assert moved.center.y == camera.center.y
    assert moved.zoom == camera.zoom


def test_visible_rect_follows_zoom() -> None:
    canvas = LogicalCanvas(200, 100)
    camera = CameraView(Vector2(100.0, 50.0), zoom=0.5)
    rect = camera.visible_rect(canvas)

    assert rect.x == pytest.approx(50.0)
    assert rect.y == pytest.approx(25.0)
    assert rect.w == pytest.approx(100.0)
    assert rect.h == pytest.approx(50.0)


def test_controller_starts_centered_and_fitted() -> None:
    canvas = LogicalCanvas(2560, 1440)
    controller = ViewController(canvas, (1920, 1080))

    assert controller.camera.center == Vector2(1280.0, 720.0)
    assert controller.camera.zoom == 1.0
    assert controller.placement.scale.x == pytest.approx(4.0 / 3.0)


def test_controller_skips_reset_for_empty_image() -> None:
    canvas = LogicalCanvas(640, 480)
    controller = ViewController(canvas, (0, 0))

    assert controller.reset_view() is False
    assert controller.placement == ImagePlacement()


def test_controller_reports_changes() -> None:
    canvas = LogicalCanvas(640, 480)
    controller = ViewController(canvas, (320, 240), min_zoom=0.5, max_zoom=2.0)

    assert controller.zoom(0.0) is False
    assert controller.pan(0, 0) is False
    assert controller.pan(3, 4) is True
    assert controller.reset_camera() is True
    assert controller.reset_camera() is False

    while controller.zoom(-1.0):
        pass
    assert controller.camera.zoom == pytest.approx(0.5)


def test_controller_actual_size_then_reset() -> None:
    canvas = LogicalCanvas(1000, 500)
    controller = ViewController(canvas, (100, 200))
    fitted = controller.placement

    controller.actual_size()
    assert controller.placement.scale == Vector2(1.0, 1.0)
    assert controller.placement.position == fitted.position

    controller.reset_view()
    assert controller.placement == fitted
