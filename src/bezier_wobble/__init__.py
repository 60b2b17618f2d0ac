"""
Bezier Wobble

Interactive cubic Bezier curve. The two interior control points can be
dragged; on release they wobble on a damped spring for one second and
then settle exactly where they were dropped.

Units:
    - Length: px (surface-local)
    - Time: ms
"""

__version__ = "0.1.0"

from .bezier import (
    position,
    tangent,
    unit_tangent,
    sample_positions,
    sample_tangents,
    parameter_sweep
)
from .state import CurveState, DynamicPoint, DynamicPointId, DragSession, PointerMotionSample
from .integrator import SpringIntegrator
from .interaction import InteractionController, hit_test
from .layout import apply_resize
from .canvas import DrawSink, RecordingCanvas, DrawCommand
from .renderer import RenderCoordinator, CurveStatus
from .exceptions import CanvasUnavailableError

from .config import (
    AppConfig,
    SpringConfig,
    InteractionConfig,
    LayoutConfig,
    RenderConfig,
    WindowConfig,
    LoggingConfig,
    load_config
)
