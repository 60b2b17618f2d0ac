"""
Render coordinator - per-frame orchestration.

Provides:
    - Frame clock (injectable for tests)
    - Physics advance, suppressed while a handle is dragged
    - Curve, tangent and control point drawing
    - Input/resize forwarding with the frame time attached

ORDERING GUARANTEES:
    1. Both handles are advanced before the first draw call of a tick
    2. A handle is never written by drag and physics in the same tick
"""

import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional

import numpy as np

from .bezier import parameter_sweep, sample_positions, sample_tangents, unit_tangent
from .canvas import DrawSink
from .config import AppConfig
from .integrator import SpringIntegrator
from .interaction import InteractionController
from .layout import apply_resize
from .state import CurveState, DynamicPointId


def perf_counter_ms() -> float:
    """Monotonic clock in milliseconds."""
    return time.perf_counter() * 1000.0


@dataclass
class CurveStatus:
    """Read-only snapshot for status display."""
    time_ms: float
    frame: int
    dragged: Optional[DynamicPointId]
    wobbling: List[DynamicPointId] = field(default_factory=list)


class RenderCoordinator:
    """
    Owns the curve state and drives one tick per display refresh.

    Usage:
        coordinator = RenderCoordinator(config)
        coordinator.resize(800, 600)
        coordinator.tick(canvas)        # once per frame
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        clock: Optional[Callable[[], float]] = None,
        rng: Optional[np.random.Generator] = None
    ):
        """
        Args:
            config: Application configuration (defaults if omitted).
            clock: Returns the current time in ms.
            rng: Random source forwarded to the interaction controller.
        """
        self.config = config or AppConfig()
        self._clock = clock or perf_counter_ms

        self.state = CurveState()
        self.integrator = SpringIntegrator(self.config.spring)
        self.interaction = InteractionController(self.state, self.config.interaction, rng=rng)

        self.width = 0.0
        self.height = 0.0
        self.current_time_ms = self._clock()
        self.frame = 0

        # Parameter sweeps are fixed for the lifetime of the coordinator
        self._curve_ts = parameter_sweep(self.config.render.curve_samples)
        self._tangent_ts = parameter_sweep(self.config.render.tangent_samples)

    # ------------------------------------------------------------------
    # Frame loop
    # ------------------------------------------------------------------

    def advance(self, now_ms: Optional[float] = None) -> None:
        """Read the clock and advance physics unless a drag is active."""
        self.current_time_ms = self._clock() if now_ms is None else now_ms
        self.frame += 1

        if self.interaction.is_dragging:
            return  # Drag suppresses physics for both handles

        self.integrator.step(self.state, self.current_time_ms)

    def tick(self, sink: DrawSink, now_ms: Optional[float] = None) -> None:
        """
        One animation frame: advance physics, then draw.

        Args:
            sink: Drawing surface.
            now_ms: Frame time override (uses the clock when None).
        """
        self.advance(now_ms)
        self.render(sink)

    def render(self, sink: DrawSink) -> None:
        """Emit the draw calls for the current state."""
        cfg = self.config.render
        p0, p1, p2, p3 = self.state.control_points()

        sink.begin_frame()
        sink.fill_rect(0, 0, self.width, self.height, cfg.background_color)

        curve = sample_positions(self._curve_ts, p0, p1, p2, p3)
        sink.stroke_polyline(curve.tolist(), cfg.curve_color, cfg.curve_thickness)

        points = sample_positions(self._tangent_ts, p0, p1, p2, p3)
        tangents = sample_tangents(self._tangent_ts, p0, p1, p2, p3)
        for p, tan in zip(points, tangents):
            direction = unit_tangent(tan, cfg.tangent_length_px)
            if direction is None:
                continue
            end = p + direction
            sink.stroke_polyline([tuple(p), tuple(end)], cfg.tangent_color, cfg.tangent_thickness)

        highlighted = self.interaction.active_point or self.interaction.hover_point

        sink.draw_circle(tuple(p0), cfg.point_radius, cfg.anchor_color, cfg.outline_color)
        for point_id in (DynamicPointId.P1, DynamicPointId.P2):
            outline = cfg.highlight_color if point_id is highlighted else cfg.outline_color
            pos = self.state.dynamic(point_id).position
            sink.draw_circle(tuple(pos), cfg.point_radius, cfg.handle_color, outline)
        sink.draw_circle(tuple(p3), cfg.point_radius, cfg.anchor_color, cfg.outline_color)

    # ------------------------------------------------------------------
    # Input and surface events
    # ------------------------------------------------------------------

    def press(self, x: float, y: float) -> bool:
        return self.interaction.on_press_start((x, y))

    def move(self, x: float, y: float) -> None:
        self.interaction.on_pointer_move((x, y))

    def release(self) -> None:
        """Pointer released; the wobble starts at the current frame time."""
        self.interaction.on_release_or_leave(self.current_time_ms)

    def leave(self) -> None:
        """Pointer left the surface; same as a release."""
        self.interaction.on_release_or_leave(self.current_time_ms)

    def resize(self, width: float, height: float) -> bool:
        """
        Handle a new surface size.

        Returns:
            True if this was the first layout.
        """
        self.width = width
        self.height = height
        return apply_resize(self.state, width, height, self.config.layout)

    def get_status(self) -> CurveStatus:
        wobbling = [
            point_id for point_id in (DynamicPointId.P1, DynamicPointId.P2)
            if self.state.dynamic(point_id).is_wobbling
        ]
        return CurveStatus(
            time_ms=self.current_time_ms,
            frame=self.frame,
            dragged=self.interaction.active_point,
            wobbling=wobbling
        )
