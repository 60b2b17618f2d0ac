"""
Curve state representation.

Curve = two fixed anchors (P0, P3) and two dynamic handles (P1, P2).
Handles carry velocity, a release timer and a spring target.

Units:
    - Positions: px
    - Time: ms
"""

import numpy as np
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


def _zeros() -> np.ndarray:
    return np.zeros(2, dtype=np.float64)


class DynamicPointId(Enum):
    """Which interior handle."""
    P1 = "P1"
    P2 = "P2"


@dataclass
class DynamicPoint:
    """
    State of a movable control point.

    Attributes:
        position: Current position (2,) in px.
        velocity: Velocity (2,) in px per frame.
        release_time_ms: Frame time of the last release while wobbling, else None.
        target: Resting position the wobble decays toward.
    """
    position: np.ndarray = field(default_factory=_zeros)
    velocity: np.ndarray = field(default_factory=_zeros)
    release_time_ms: Optional[float] = None
    target: np.ndarray = field(default_factory=_zeros)

    def __post_init__(self):
        self.position = np.asarray(self.position, dtype=np.float64)
        self.velocity = np.asarray(self.velocity, dtype=np.float64)
        self.target = np.asarray(self.target, dtype=np.float64)

    @property
    def is_wobbling(self) -> bool:
        """True while the release timer is running."""
        return self.release_time_ms is not None

    def hold(self, position=None) -> None:
        """
        Put the point under direct pointer control.

        Optionally moves it; always zeroes velocity and cancels the timer.
        """
        if position is not None:
            self.position = np.asarray(position, dtype=np.float64).copy()
        self.velocity = _zeros()
        self.release_time_ms = None

    def release(self, velocity, now_ms: float) -> None:
        """Drop the point here: target = position, start the wobble timer."""
        self.target = self.position.copy()
        self.velocity = np.asarray(velocity, dtype=np.float64).copy()
        self.release_time_ms = now_ms

    def settle(self) -> None:
        """Hard stop at the target."""
        self.position = self.target.copy()
        self.velocity = _zeros()
        self.release_time_ms = None

    def place(self, position) -> None:
        """Set position and target together (layout, no wobble)."""
        self.position = np.asarray(position, dtype=np.float64).copy()
        self.target = self.position.copy()

    def copy(self) -> "DynamicPoint":
        return DynamicPoint(
            position=self.position.copy(),
            velocity=self.velocity.copy(),
            release_time_ms=self.release_time_ms,
            target=self.target.copy()
        )


@dataclass
class CurveState:
    """
    State of the whole curve.

    All points start at the origin; a handle pair still at the origin means
    the curve has not been laid out yet.
    """
    p0: np.ndarray = field(default_factory=_zeros)
    p1: DynamicPoint = field(default_factory=DynamicPoint)
    p2: DynamicPoint = field(default_factory=DynamicPoint)
    p3: np.ndarray = field(default_factory=_zeros)

    def __post_init__(self):
        self.p0 = np.asarray(self.p0, dtype=np.float64)
        self.p3 = np.asarray(self.p3, dtype=np.float64)

    def dynamic(self, point_id: DynamicPointId) -> DynamicPoint:
        """Handle by id."""
        return self.p1 if point_id is DynamicPointId.P1 else self.p2

    def control_points(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        """Current (P0, P1, P2, P3) positions."""
        return self.p0, self.p1.position, self.p2.position, self.p3

    @property
    def is_laid_out(self) -> bool:
        """False until the first resize has placed the handles."""
        return bool(np.any(self.p1.position != 0.0) or np.any(self.p2.position != 0.0))

    def copy(self) -> "CurveState":
        """Create a deep copy of this state."""
        return CurveState(
            p0=self.p0.copy(),
            p1=self.p1.copy(),
            p2=self.p2.copy(),
            p3=self.p3.copy()
        )


@dataclass
class DragSession:
    """
    Active drag: which handle is held and the grab offset.

    Attributes:
        point_id: Held handle.
        offset: pointer - handle position at drag start.
    """
    point_id: DynamicPointId
    offset: np.ndarray

    def __post_init__(self):
        self.offset = np.asarray(self.offset, dtype=np.float64)


@dataclass
class PointerMotionSample:
    """Last pointer position and the instantaneous velocity estimate."""
    previous: np.ndarray = field(default_factory=_zeros)
    velocity: np.ndarray = field(default_factory=_zeros)

    def reset(self, pointer) -> None:
        """New baseline, no motion yet."""
        self.previous = np.asarray(pointer, dtype=np.float64).copy()
        self.velocity = _zeros()

    def update(self, pointer) -> None:
        """velocity = pointer - previous; previous = pointer."""
        pointer = np.asarray(pointer, dtype=np.float64)
        self.velocity = pointer - self.previous
        self.previous = pointer.copy()
