"""
Central configuration for the spot detector plugins.
All values are overridable via environment variables.
"""
import math
import os


def _int(key: str, default: int) -> int:
    return int(os.getenv(key, str(default)))


def _float(key: str, default: float) -> float:
    return float(os.getenv(key, str(default)))


def _list(key: str, default: list[str]) -> list[str]:
    val = os.getenv(key)
    if val is None:
        return list(default)
    return [item.strip() for item in val.split(",") if item.strip()]


# ---------------------------------------------------------------------------
# Spiral dummy detector
# ---------------------------------------------------------------------------
SPIRAL_RADIAL_SPEED: float = _float("SPIRAL_RADIAL_SPEED", 3.0)
"""Outward speed of a spiral arm, in pixels per frame."""

SPIRAL_ANGULAR_SPEED: float = _float("SPIRAL_ANGULAR_SPEED", math.pi / 10)
"""Rotation speed of a spiral arm, in radians per frame."""

SPIRAL_SPOT_RADIUS: float = _float("SPIRAL_SPOT_RADIUS", 1.0)
"""Radius given to every generated spot, in physical units."""

SPIRAL_ARM_FRAME_STEP: int = _int("SPIRAL_ARM_FRAME_STEP", 10)
"""A new spiral arm starts every this many frames."""

SPIRAL_ARM_PHASE_STEP: float = _float("SPIRAL_ARM_PHASE_STEP", math.pi / 4)
"""Angular offset between consecutive spiral arms, in radians."""

# ---------------------------------------------------------------------------
# Plugin registry
# ---------------------------------------------------------------------------
DEFAULT_DETECTOR_KEYS: list[str] = _list("DEFAULT_DETECTOR_KEYS", ["SPIRAL_DUMMY_DETECTOR"])
"""Detector factory keys registered by DetectorRegistry.default()."""
