"""
Spring-damped wobble integrator.

Per frame, for a point inside its release window:
    a = -k * (x - target) - c * v
    v = v + a
    x = x + v

Semi-implicit Euler with one step per rendered frame. There is no dt
factor: the motion is tied to the frame rate, not to wall-clock time.
Once the window expires the point snaps to its target.

Units:
    - Position: px
    - Velocity: px/frame
    - Time: ms (release window only)
"""

from .config import SpringConfig
from .state import CurveState, DynamicPoint
from .utils.logger import Logger


class SpringIntegrator:
    """
    Time-bounded spring integrator for the curve handles.

    States per point:
        Idle      release_time_ms is None, no work
        Wobbling  release_time_ms set and elapsed < duration
    Crossing the duration settles the point in the same tick.
    """

    def __init__(self, config: SpringConfig):
        """
        Initialize integrator.

        Args:
            config: Spring configuration with stiffness, damping and duration.
        """
        self.stiffness = config.stiffness
        self.damping = config.damping
        self.duration_ms = config.duration_ms

    def step_point(self, point: DynamicPoint, now_ms: float) -> bool:
        """
        Advance one point by one frame.

        Args:
            point: Handle to advance (mutated in place).
            now_ms: Current frame time.

        Returns:
            True if the point is still wobbling after this tick.
        """
        if not point.is_wobbling:
            return False

        elapsed = now_ms - point.release_time_ms

        if elapsed >= self.duration_ms:
            point.settle()
            Logger.log(f"wobble settled at ({point.position[0]:.1f}, {point.position[1]:.1f})",
                       Logger.LogPriority.INFO)
            return False

        accel = -self.stiffness * (point.position - point.target) - self.damping * point.velocity

        # Velocity first, then position
        point.velocity = point.velocity + accel
        point.position = point.position + point.velocity
        return True

    def step(self, state: CurveState, now_ms: float) -> None:
        """Advance both handles (P1 then P2) by one frame."""
        self.step_point(state.p1, now_ms)
        self.step_point(state.p2, now_ms)
