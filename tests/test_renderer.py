"""
Tests for RenderCoordinator - per-frame orchestration.

Tests:
    - Draw call sequence and sampling density
    - Zero tangents skipped
    - Physics before drawing, suppressed while dragging
    - End-to-end interaction scenarios with injected time
"""

import pytest
import numpy as np

from bezier_wobble.canvas import DrawSink, RecordingCanvas
from bezier_wobble.config import AppConfig
from bezier_wobble.renderer import RenderCoordinator
from bezier_wobble.state import DynamicPointId


class FixedKick:
    """Random source that always returns zero impulse."""

    def uniform(self, low, high, size):
        return np.zeros(size)


class ManualClock:
    """Clock whose time is set by the test."""

    def __init__(self, now_ms=0.0):
        self.now_ms = now_ms

    def __call__(self):
        return self.now_ms


def make_coordinator(width=800, height=600, rng=None, clock=None):
    coordinator = RenderCoordinator(AppConfig(), clock=clock or ManualClock(), rng=rng or FixedKick())
    coordinator.resize(width, height)
    return coordinator


def tangent_segments(canvas):
    return [c for c in canvas.of_kind("stroke_polyline") if len(c.args["points"]) == 2]


class TestDrawCalls:
    """Tests for the emitted frame."""

    def test_command_order(self):
        coordinator = make_coordinator()
        canvas = RecordingCanvas()

        coordinator.tick(canvas, now_ms=16.0)

        kinds = [c.kind for c in canvas.commands]
        assert kinds[0] == "fill_rect"
        assert kinds[1] == "stroke_polyline"
        assert kinds[-4:] == ["draw_circle"] * 4

    def test_background_covers_surface(self):
        coordinator = make_coordinator()
        canvas = RecordingCanvas()
        coordinator.tick(canvas, now_ms=0.0)

        rect = canvas.of_kind("fill_rect")[0].args
        assert (rect["x"], rect["y"], rect["width"], rect["height"]) == (0, 0, 800, 600)
        assert rect["color"] == (26, 26, 26, 255)

    def test_curve_has_101_samples_from_p0_to_p3(self):
        coordinator = make_coordinator()
        canvas = RecordingCanvas()
        coordinator.tick(canvas, now_ms=0.0)

        curve = canvas.of_kind("stroke_polyline")[0].args
        assert len(curve["points"]) == 101
        assert curve["points"][0] == pytest.approx((160.0, 300.0))
        assert curve["points"][-1] == pytest.approx((640.0, 300.0))
        assert curve["thickness"] == 3.0

    def test_21_tangents_of_fixed_length(self):
        coordinator = make_coordinator()
        canvas = RecordingCanvas()
        coordinator.tick(canvas, now_ms=0.0)

        segments = tangent_segments(canvas)
        assert len(segments) == 21
        for seg in segments:
            (x0, y0), (x1, y1) = seg.args["points"]
            assert np.hypot(x1 - x0, y1 - y0) == pytest.approx(40.0)
            assert seg.args["color"] == (0, 255, 255, 255)

    def test_zero_tangent_skipped(self):
        coordinator = make_coordinator()
        state = coordinator.state
        state.p0 = np.array([0.0, 0.0])
        state.p1.place((100.0, 0.0))
        state.p2.place((0.0, 0.0))
        state.p3 = np.array([100.0, 0.0])
        canvas = RecordingCanvas()

        with np.errstate(all="raise"):
            coordinator.tick(canvas, now_ms=0.0)

        # Cusp at t = 0.5 has no direction
        assert len(tangent_segments(canvas)) == 20

    def test_fully_degenerate_curve_draws_no_tangents(self):
        coordinator = make_coordinator()
        state = coordinator.state
        state.p0 = np.array([5.0, 5.0])
        state.p1.place((5.0, 5.0))
        state.p2.place((5.0, 5.0))
        state.p3 = np.array([5.0, 5.0])
        canvas = RecordingCanvas()

        coordinator.tick(canvas, now_ms=0.0)

        assert tangent_segments(canvas) == []
        assert len(canvas.of_kind("draw_circle")) == 4

    def test_point_colors(self):
        coordinator = make_coordinator()
        canvas = RecordingCanvas()
        coordinator.tick(canvas, now_ms=0.0)

        circles = canvas.of_kind("draw_circle")
        fills = [c.args["fill"] for c in circles]
        anchor = coordinator.config.render.anchor_color
        handle = coordinator.config.render.handle_color
        assert fills == [anchor, handle, handle, anchor]
        assert [c.args["center"] for c in circles][1] == pytest.approx((340.0, 240.0))

    def test_hovered_handle_highlighted(self):
        coordinator = make_coordinator()
        canvas = RecordingCanvas()
        coordinator.move(460.0, 360.0)
        coordinator.tick(canvas, now_ms=0.0)

        outlines = [c.args["outline"] for c in canvas.of_kind("draw_circle")]
        render = coordinator.config.render
        assert outlines == [render.outline_color, render.outline_color,
                            render.highlight_color, render.outline_color]

    def test_each_tick_starts_new_frame(self):
        coordinator = make_coordinator()
        canvas = RecordingCanvas()
        coordinator.tick(canvas, now_ms=0.0)
        n = len(canvas.commands)
        coordinator.tick(canvas, now_ms=16.0)

        assert canvas.frames == 2
        assert len(canvas.commands) == n

    def test_base_sink_is_abstract(self):
        with pytest.raises(NotImplementedError):
            DrawSink().begin_frame()


class TestFrameClock:
    """Tests for time handling."""

    def test_clock_used_when_no_time_given(self):
        clock = ManualClock(250.0)
        coordinator = make_coordinator(clock=clock)
        clock.now_ms = 400.0

        coordinator.tick(RecordingCanvas())

        assert coordinator.current_time_ms == 400.0
        assert coordinator.frame == 1

    def test_release_stamped_with_frame_time(self):
        coordinator = make_coordinator()
        coordinator.tick(RecordingCanvas(), now_ms=500.0)
        coordinator.press(340.0, 240.0)
        coordinator.release()

        assert coordinator.state.p1.release_time_ms == 500.0

    def test_status_snapshot(self):
        coordinator = make_coordinator()
        coordinator.tick(RecordingCanvas(), now_ms=10.0)
        coordinator.press(340.0, 240.0)

        status = coordinator.get_status()
        assert status.dragged is DynamicPointId.P1
        assert status.wobbling == []

        coordinator.release()
        status = coordinator.get_status()
        assert status.dragged is None
        assert status.wobbling == [DynamicPointId.P1]


class TestPhysicsOrdering:
    """Physics and drawing within a tick."""

    def test_drawn_positions_are_post_step(self):
        coordinator = make_coordinator()
        coordinator.tick(RecordingCanvas(), now_ms=0.0)
        coordinator.state.p2.release((10.0, 0.0), 0.0)
        canvas = RecordingCanvas()

        coordinator.tick(canvas, now_ms=16.0)

        drawn = canvas.of_kind("draw_circle")[2].args["center"]
        assert drawn == pytest.approx(tuple(coordinator.state.p2.position))
        assert drawn != pytest.approx((460.0, 360.0))

    def test_drag_suppresses_physics_for_both_handles(self):
        coordinator = make_coordinator()
        state = coordinator.state
        coordinator.tick(RecordingCanvas(), now_ms=0.0)
        state.p2.release((10.0, 10.0), 0.0)
        coordinator.tick(RecordingCanvas(), now_ms=16.0)
        p2_before = state.p2.position.copy()

        coordinator.press(345.0, 245.0)
        coordinator.move(400.0, 250.0)
        for now in (32.0, 500.0, 999.0, 1500.0, 5000.0):
            coordinator.tick(RecordingCanvas(), now_ms=now)
            np.testing.assert_array_equal(state.p1.position, [395.0, 245.0])
            np.testing.assert_array_equal(state.p1.velocity, [0.0, 0.0])
            np.testing.assert_array_equal(state.p2.position, p2_before)
            assert state.p2.is_wobbling

    def test_frozen_wobble_settles_after_drag(self):
        """A wobble whose window expired during a drag snaps on the next free tick."""
        coordinator = make_coordinator()
        state = coordinator.state
        coordinator.tick(RecordingCanvas(), now_ms=0.0)
        state.p2.release((10.0, 10.0), 0.0)
        coordinator.press(340.0, 240.0)
        coordinator.tick(RecordingCanvas(), now_ms=2000.0)
        coordinator.release()

        coordinator.tick(RecordingCanvas(), now_ms=2016.0)

        np.testing.assert_array_equal(state.p2.position, [460.0, 360.0])
        assert not state.p2.is_wobbling
        assert state.p1.is_wobbling


class TestScenarios:
    """End-to-end sequences with synthetic time and input."""

    def test_straight_line_curve(self):
        coordinator = make_coordinator()
        state = coordinator.state
        state.p0 = np.array([0.0, 0.0])
        state.p1.place((50.0, 0.0))
        state.p2.place((50.0, 0.0))
        state.p3 = np.array([100.0, 0.0])
        canvas = RecordingCanvas()

        coordinator.tick(canvas, now_ms=0.0)

        curve = canvas.of_kind("stroke_polyline")[0].args["points"]
        assert curve[50] == pytest.approx((50.0, 0.0))
        assert len(tangent_segments(canvas)) == 21

    def test_throw_then_settle(self):
        coordinator = make_coordinator(rng=np.random.Generator(np.random.PCG64(3)))
        state = coordinator.state
        coordinator.tick(RecordingCanvas(), now_ms=1000.0)

        coordinator.press(340.0, 240.0)
        coordinator.move(370.0, 230.0)
        coordinator.tick(RecordingCanvas(), now_ms=1016.0)
        coordinator.release()

        expected_kick = np.random.Generator(np.random.PCG64(3)).uniform(-7.5, 7.5, size=2)
        np.testing.assert_array_equal(state.p1.target, [370.0, 230.0])
        np.testing.assert_allclose(state.p1.velocity, np.array([150.0, -50.0]) + expected_kick)
        assert np.all(np.abs(state.p1.velocity - [150.0, -50.0]) <= 7.5)
        assert state.p1.release_time_ms == 1016.0

        now = 1016.0
        while now < 3000.0:
            now += 1000.0 / 60.0
            coordinator.tick(RecordingCanvas(), now_ms=now)
            if now >= 2016.0:
                np.testing.assert_array_equal(state.p1.position, [370.0, 230.0])
                np.testing.assert_array_equal(state.p1.velocity, [0.0, 0.0])
                assert state.p1.release_time_ms is None

    def test_leave_surface_ends_drag(self):
        coordinator = make_coordinator()
        coordinator.tick(RecordingCanvas(), now_ms=40.0)
        coordinator.press(340.0, 240.0)
        coordinator.move(350.0, 240.0)

        coordinator.leave()

        assert not coordinator.interaction.is_dragging
        assert coordinator.state.p1.release_time_ms == 40.0

    def test_resize_keeps_dragged_handle(self):
        coordinator = make_coordinator(800, 600)
        coordinator.tick(RecordingCanvas(), now_ms=0.0)
        coordinator.press(340.0, 240.0)
        coordinator.move(200.0, 100.0)
        coordinator.release()
        for i in range(1, 80):
            coordinator.tick(RecordingCanvas(), now_ms=16.0 * i)
        p1 = coordinator.state.p1.position.copy()

        coordinator.resize(1600, 600)

        np.testing.assert_array_equal(coordinator.state.p1.position, p1)
        np.testing.assert_allclose(coordinator.state.p0, [320.0, 300.0])
        np.testing.assert_allclose(coordinator.state.p3, [1280.0, 300.0])
