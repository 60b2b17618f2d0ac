"""
Cubic Bezier evaluation.

Mathematical form:
    B(t)  = (1-t)³P₀ + 3(1-t)²t P₁ + 3(1-t)t² P₂ + t³ P₃
    B'(t) = 3(1-t)²(P₁-P₀) + 6(1-t)t(P₂-P₁) + 3t²(P₃-P₂)

All functions are pure. Points are (2,) float64 arrays; anything
array-like is accepted. t is not clamped.
"""

import numpy as np
from typing import Optional


def position(t: float, p0, p1, p2, p3) -> np.ndarray:
    """
    Evaluate curve position at parameter t.

    Args:
        t: Curve parameter, [0, 1] by convention.
        p0, p1, p2, p3: Control points.

    Returns:
        (x, y) array.
    """
    p0, p1, p2, p3 = (np.asarray(p, dtype=np.float64) for p in (p0, p1, p2, p3))
    mt = 1.0 - t
    mt2 = mt * mt
    t2 = t * t

    return mt2 * mt * p0 + 3 * mt2 * t * p1 + 3 * mt * t2 * p2 + t2 * t * p3


def tangent(t: float, p0, p1, p2, p3) -> np.ndarray:
    """
    Evaluate first derivative dB/dt at parameter t.

    Returns the zero vector where the derivative vanishes (cusps,
    coincident control points); callers must not normalize it.
    """
    p0, p1, p2, p3 = (np.asarray(p, dtype=np.float64) for p in (p0, p1, p2, p3))
    mt = 1.0 - t

    return (
        3 * mt * mt * (p1 - p0) +
        6 * mt * t * (p2 - p1) +
        3 * t * t * (p3 - p2)
    )


def unit_tangent(vector, length: float = 1.0) -> Optional[np.ndarray]:
    """
    Scale a tangent vector to a fixed length.

    Args:
        vector: Tangent (dx, dy).
        length: Desired output length.

    Returns:
        Scaled vector, or None if the input has zero length.
    """
    vector = np.asarray(vector, dtype=np.float64)
    norm = float(np.hypot(vector[0], vector[1]))
    if norm == 0.0:
        return None
    return vector / norm * length


def sample_positions(ts, p0, p1, p2, p3) -> np.ndarray:
    """
    Evaluate positions for an array of parameters.

    Uses the same expression as position(), broadcast over ts, so each
    row matches the scalar result.

    Returns:
        Array of shape (len(ts), 2).
    """
    t = np.asarray(ts, dtype=np.float64)[:, None]
    return position(t, p0, p1, p2, p3)


def sample_tangents(ts, p0, p1, p2, p3) -> np.ndarray:
    """Evaluate tangents for an array of parameters, shape (len(ts), 2)."""
    t = np.asarray(ts, dtype=np.float64)[:, None]
    return tangent(t, p0, p1, p2, p3)


def parameter_sweep(n_samples: int) -> np.ndarray:
    """
    Evenly spaced parameters from 0 to 1 inclusive.

    Computed as i / (n - 1) so the endpoints are exactly 0.0 and 1.0.
    """
    if n_samples < 2:
        raise ValueError("n_samples must be >= 2")
    return np.arange(n_samples, dtype=np.float64) / (n_samples - 1)
