"""
Configuration loading and validation for the wobble curve.

Loads YAML config and validates every section. Defaults reproduce the
stock look and feel, so an empty or missing file is a valid setup.

Units:
    - Lengths: px (surface-local)
    - Time: ms
"""

import math
import yaml
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Optional, Tuple
from pathlib import Path

RGBA = Tuple[int, int, int, int]


def _valid_color(color) -> bool:
    return len(color) == 4 and all(0 <= int(c) <= 255 for c in color)


def _first_non_finite(section, names) -> Optional[str]:
    """Name of the first field that is NaN or infinite, if any."""
    for name in names:
        if not math.isfinite(getattr(section, name)):
            return name
    return None


@dataclass
class SpringConfig:
    """Spring-damping wobble parameters (per-frame units, not per-second)."""
    stiffness: float = 0.6
    damping: float = 0.15
    duration_ms: float = 1000.0

    def validate(self) -> tuple[bool, Optional[str]]:
        bad = _first_non_finite(self, ("stiffness", "damping", "duration_ms"))
        if bad:
            return False, f"{bad} must be finite"
        if self.stiffness <= 0:
            return False, "stiffness must be positive"
        if self.damping < 0:
            return False, "damping must be non-negative"
        if self.duration_ms <= 0:
            return False, "duration_ms must be positive"
        return True, None


@dataclass
class InteractionConfig:
    """Pointer interaction parameters."""
    hit_radius_px: float = 20.0
    momentum_factor: float = 5.0
    kick_strength: float = 15.0  # Full width of the uniform kick interval
    seed: Optional[int] = None

    def validate(self) -> tuple[bool, Optional[str]]:
        bad = _first_non_finite(self, ("hit_radius_px", "momentum_factor", "kick_strength"))
        if bad:
            return False, f"{bad} must be finite"
        if self.hit_radius_px <= 0:
            return False, "hit_radius_px must be positive"
        if self.momentum_factor < 0:
            return False, "momentum_factor must be non-negative"
        if self.kick_strength < 0:
            return False, "kick_strength must be non-negative"
        return True, None


@dataclass
class LayoutConfig:
    """Placement of anchors and initial handles as fractions of the surface."""
    anchor_start_fraction: float = 0.2
    anchor_end_fraction: float = 0.8
    baseline_fraction: float = 0.5
    handle_offset_fraction: float = 0.1

    def validate(self) -> tuple[bool, Optional[str]]:
        for name in ("anchor_start_fraction", "anchor_end_fraction", "baseline_fraction"):
            value = getattr(self, name)
            if not (0.0 <= value <= 1.0):
                return False, f"{name} must be in [0, 1]"
        if not math.isfinite(self.handle_offset_fraction) or self.handle_offset_fraction < 0:
            return False, "handle_offset_fraction must be non-negative"
        return True, None


@dataclass
class RenderConfig:
    """Sampling density, stroke widths and colours."""
    curve_samples: int = 101
    tangent_samples: int = 21
    tangent_length_px: float = 40.0
    curve_thickness: float = 3.0
    tangent_thickness: float = 2.5
    point_radius: float = 6.0
    background_color: RGBA = (26, 26, 26, 255)
    curve_color: RGBA = (76, 175, 80, 255)
    tangent_color: RGBA = (0, 255, 255, 255)
    anchor_color: RGBA = (33, 150, 243, 255)
    handle_color: RGBA = (255, 152, 0, 255)
    outline_color: RGBA = (255, 255, 255, 255)
    highlight_color: RGBA = (255, 235, 59, 255)

    def __post_init__(self):
        for name in ("background_color", "curve_color", "tangent_color",
                     "anchor_color", "handle_color", "outline_color", "highlight_color"):
            setattr(self, name, tuple(int(c) for c in getattr(self, name)))

    def validate(self) -> tuple[bool, Optional[str]]:
        bad = _first_non_finite(self, ("tangent_length_px", "curve_thickness",
                                       "tangent_thickness", "point_radius"))
        if bad:
            return False, f"{bad} must be finite"
        if self.curve_samples < 2:
            return False, "curve_samples must be >= 2"
        if self.tangent_samples < 2:
            return False, "tangent_samples must be >= 2"
        if self.tangent_length_px <= 0:
            return False, "tangent_length_px must be positive"
        if self.point_radius <= 0:
            return False, "point_radius must be positive"
        for name in ("background_color", "curve_color", "tangent_color",
                     "anchor_color", "handle_color", "outline_color", "highlight_color"):
            if not _valid_color(getattr(self, name)):
                return False, f"{name} must be 4 integers in [0, 255]"
        return True, None


@dataclass
class WindowConfig:
    """Initial window geometry."""
    width: int = 1200
    height: int = 800
    title: str = "Bezier Wobble"

    def validate(self) -> tuple[bool, Optional[str]]:
        if _first_non_finite(self, ("width", "height")) or self.width <= 0 or self.height <= 0:
            return False, "width and height must be positive"
        return True, None


@dataclass
class LoggingConfig:
    """File logging configuration."""
    enabled: bool = True
    path: str = "logs/bezier_wobble.log"

    def validate(self) -> tuple[bool, Optional[str]]:
        if self.enabled and not self.path:
            return False, "path is required when logging is enabled"
        return True, None


@dataclass
class AppConfig:
    """Complete application configuration."""
    spring: SpringConfig = field(default_factory=SpringConfig)
    interaction: InteractionConfig = field(default_factory=InteractionConfig)
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    window: WindowConfig = field(default_factory=WindowConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def validate(self) -> tuple[bool, Optional[str]]:
        for section_name in ["spring", "interaction", "layout", "render", "window", "logging"]:
            section = getattr(self, section_name)
            is_valid, error = section.validate()
            if not is_valid:
                return False, f"{section_name}: {error}"
        return True, None


def load_config(path: Path) -> AppConfig:
    """
    Load and validate configuration from YAML file.

    Args:
        path: Path to YAML config file.

    Returns:
        Validated AppConfig.

    Raises:
        ValueError: If config is invalid.
        FileNotFoundError: If file doesn't exist.
    """
    with open(path, 'r') as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, Mapping):
        raise ValueError(f"Invalid configuration: expected a mapping, got {type(raw).__name__}")

    try:
        config = AppConfig(
            spring=SpringConfig(**raw.get("spring", {})),
            interaction=InteractionConfig(**raw.get("interaction", {})),
            layout=LayoutConfig(**raw.get("layout", {})),
            render=RenderConfig(**raw.get("render", {})),
            window=WindowConfig(**raw.get("window", {})),
            logging=LoggingConfig(**raw.get("logging", {}))
        )
        # Wrong value types surface here as TypeError/ValueError
        is_valid, error = config.validate()
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid configuration: {e}") from e

    if not is_valid:
        raise ValueError(f"Invalid configuration: {error}")

    return config
