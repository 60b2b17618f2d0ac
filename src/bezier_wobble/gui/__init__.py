"""
Wobble curve GUI - DearPyGui-based front end.

Provides:
    - Drawlist surface implementing DrawSink
    - Mouse handling mapped to surface-local coordinates
    - Render loop driving the RenderCoordinator
"""

from .app import BezierWobbleApp, run_gui
from .viewport import CurveViewport

__all__ = ["BezierWobbleApp", "CurveViewport", "run_gui"]
