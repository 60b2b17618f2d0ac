"""
Drawing surface abstraction.

The renderer only talks to a DrawSink. The GUI supplies a DearPyGui
implementation; RecordingCanvas keeps the calls in memory for headless
use and tests.
"""

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from .config import RGBA

Point2 = Tuple[float, float]


class DrawSink:
    """
    Base class for drawing surfaces.
    Subclasses map each primitive onto a concrete 2D context.
    """

    def begin_frame(self) -> None:
        """Discard the previous frame's primitives."""
        raise NotImplementedError()

    def fill_rect(self, x: float, y: float, width: float, height: float, color: RGBA) -> None:
        raise NotImplementedError()

    def stroke_polyline(self, points: Sequence[Point2], color: RGBA, thickness: float) -> None:
        """Path through points (move-to first, line-to the rest), then stroke."""
        raise NotImplementedError()

    def draw_circle(self, center: Point2, radius: float, fill: RGBA, outline: RGBA) -> None:
        """Filled full circle with a 1px outline."""
        raise NotImplementedError()


@dataclass
class DrawCommand:
    """One recorded primitive."""
    kind: str
    args: dict = field(default_factory=dict)


class RecordingCanvas(DrawSink):
    """DrawSink that records the last frame's commands."""

    def __init__(self):
        self.commands: List[DrawCommand] = []
        self.frames = 0

    def begin_frame(self) -> None:
        self.commands = []
        self.frames += 1

    def fill_rect(self, x, y, width, height, color) -> None:
        self.commands.append(DrawCommand("fill_rect", {
            "x": x, "y": y, "width": width, "height": height, "color": color
        }))

    def stroke_polyline(self, points, color, thickness) -> None:
        self.commands.append(DrawCommand("stroke_polyline", {
            "points": [tuple(p) for p in points], "color": color, "thickness": thickness
        }))

    def draw_circle(self, center, radius, fill, outline) -> None:
        self.commands.append(DrawCommand("draw_circle", {
            "center": tuple(center), "radius": radius, "fill": fill, "outline": outline
        }))

    def of_kind(self, kind: str) -> List[DrawCommand]:
        return [c for c in self.commands if c.kind == kind]
