"""
Surface layout: where the anchors and the initial handles go on resize.
"""

import numpy as np

from .config import LayoutConfig
from .state import CurveState
from .utils.logger import Logger


def apply_resize(state: CurveState, width: float, height: float, config: LayoutConfig) -> bool:
    """
    Reposition control points for a new surface size.

    Anchors always follow the surface. Handles are placed around the anchor
    midpoint only on first layout (both still at the origin); later resizes
    keep wherever the user left them.

    Args:
        state: Curve state (mutated in place).
        width: Surface width in px.
        height: Surface height in px.
        config: Layout fractions.

    Returns:
        True if this call performed the first layout.
    """
    baseline = height * config.baseline_fraction
    state.p0 = np.array([width * config.anchor_start_fraction, baseline])
    state.p3 = np.array([width * config.anchor_end_fraction, baseline])

    if state.is_laid_out:
        Logger.log(f"resize {width}x{height}: anchors moved, handles kept", Logger.LogPriority.DEBUG)
        return False

    mid = (state.p0 + state.p3) / 2
    offset = min(width, height) * config.handle_offset_fraction

    state.p1.place(mid - offset)
    state.p2.place(mid + offset)

    Logger.log(f"first layout {width}x{height}: handles at {state.p1.position.tolist()} / {state.p2.position.tolist()}",
               Logger.LogPriority.INFO)
    return True
