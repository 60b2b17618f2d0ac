"""
Pointer interaction for the curve handles.

Provides:
    - Hit testing (P1 wins over P2 when both are in range)
    - Drag sessions with a fixed grab offset
    - Throw momentum plus a random kick on release
"""

import numpy as np
from typing import Optional

from .config import InteractionConfig
from .state import CurveState, DragSession, DynamicPointId, PointerMotionSample
from .utils.logger import Logger


def hit_test(pointer, point, radius: float = 20.0) -> bool:
    """True iff the Euclidean distance from pointer to point is <= radius."""
    d = np.asarray(pointer, dtype=np.float64) - np.asarray(point, dtype=np.float64)
    return float(np.hypot(d[0], d[1])) <= radius


class InteractionController:
    """
    Translates pointer samples into handle updates.

    Owns the drag session and the motion sample. Handle positions are
    written here only while a drag is active; the integrator owns them
    otherwise.
    """

    def __init__(
        self,
        state: CurveState,
        config: Optional[InteractionConfig] = None,
        rng: Optional[np.random.Generator] = None
    ):
        """
        Args:
            state: Curve state shared with the integrator.
            config: Interaction configuration (optional).
            rng: Random source for the release kick. Seeded from
                config.seed when omitted.
        """
        self.state = state
        self.config = config or InteractionConfig()
        if rng is None:
            rng = np.random.Generator(np.random.PCG64(self.config.seed))
        self._rng = rng

        self._session: Optional[DragSession] = None
        self._motion = PointerMotionSample()
        self._hover: Optional[DynamicPointId] = None

    @property
    def is_dragging(self) -> bool:
        return self._session is not None

    @property
    def active_point(self) -> Optional[DynamicPointId]:
        """Handle currently held, if any."""
        return self._session.point_id if self._session else None

    @property
    def hover_point(self) -> Optional[DynamicPointId]:
        """Handle under the pointer while not dragging."""
        return self._hover

    @property
    def pointer_velocity(self) -> np.ndarray:
        return self._motion.velocity.copy()

    def _point_at(self, pointer) -> Optional[DynamicPointId]:
        radius = self.config.hit_radius_px
        for point_id in (DynamicPointId.P1, DynamicPointId.P2):
            if hit_test(pointer, self.state.dynamic(point_id).position, radius):
                return point_id
        return None

    def on_press_start(self, pointer) -> bool:
        """
        Start a drag if the pointer is on a handle.

        Args:
            pointer: Pointer position (x, y).

        Returns:
            True if a drag session started.
        """
        pointer = np.asarray(pointer, dtype=np.float64)
        self._motion.reset(pointer)

        if self._session is not None:
            return False

        point_id = self._point_at(pointer)
        if point_id is None:
            return False

        point = self.state.dynamic(point_id)
        self._session = DragSession(point_id=point_id, offset=pointer - point.position)
        point.hold()
        self._hover = None

        Logger.log(f"drag start {point_id.value} offset=({self._session.offset[0]:.1f}, {self._session.offset[1]:.1f})",
                   Logger.LogPriority.INFO)
        return True

    def on_pointer_move(self, pointer) -> None:
        """
        Track pointer motion; move the held handle if dragging.

        Args:
            pointer: Pointer position (x, y).
        """
        pointer = np.asarray(pointer, dtype=np.float64)
        self._motion.update(pointer)

        if self._session is None:
            self._hover = self._point_at(pointer)
            return

        point = self.state.dynamic(self._session.point_id)
        point.hold(pointer - self._session.offset)

    def kick(self) -> np.ndarray:
        """Random impulse, uniform in [-kick_strength/2, +kick_strength/2] per axis."""
        half = self.config.kick_strength / 2.0
        return self._rng.uniform(-half, half, size=2)

    def on_release_or_leave(self, now_ms: float) -> None:
        """
        End the drag and throw the handle into its wobble.

        No-op when nothing is held.

        Args:
            now_ms: Current frame time, recorded as the release time.
        """
        if self._session is None:
            return

        point_id = self._session.point_id
        point = self.state.dynamic(point_id)

        velocity = self._motion.velocity * self.config.momentum_factor + self.kick()
        point.release(velocity, now_ms)
        self._session = None

        Logger.log(
            f"release {point_id.value} at ({point.target[0]:.1f}, {point.target[1]:.1f}) "
            f"v=({velocity[0]:.2f}, {velocity[1]:.2f}) t={now_ms:.1f}ms",
            Logger.LogPriority.INFO
        )
