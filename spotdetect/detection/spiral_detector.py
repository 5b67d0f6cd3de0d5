"""
Spiral dummy detector.

Does not look at any image. Spots spiral out from the centre of the region
of interest, and a new spiral arm is spawned every few frames, so a tracker
fed with these detections sees a deterministic set of outward-moving tracks.
"""
from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Optional, Sequence

import numpy as np
import structlog

from spotdetect import config
from spotdetect.detection.base import SpotDetector
from spotdetect.detection.models import Region, Spot

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class SpiralParams:
    """Shape of the generated spirals."""

    radial_speed: float = field(default_factory=lambda: config.SPIRAL_RADIAL_SPEED)
    angular_speed: float = field(default_factory=lambda: config.SPIRAL_ANGULAR_SPEED)
    spot_radius: float = field(default_factory=lambda: config.SPIRAL_SPOT_RADIUS)
    arm_frame_step: int = field(default_factory=lambda: config.SPIRAL_ARM_FRAME_STEP)
    arm_phase_step: float = field(default_factory=lambda: config.SPIRAL_ARM_PHASE_STEP)

    def __post_init__(self) -> None:
        if self.arm_frame_step <= 0:
            raise ValueError(f"arm_frame_step must be > 0, got {self.arm_frame_step}")


class SpiralDummyDetector(SpotDetector):
    """
    Generates one spot per spiral arm alive at ``frame``.

    Arm ``k`` was spawned ``frame - k * arm_frame_step`` frames ago; its spot
    sits that many frames along the spiral, rotated by ``k * arm_phase_step``.
    Quality decays as ``1 / (k + 1)``.
    """

    def __init__(
        self,
        region: Region,
        calibration: Sequence[float] | np.ndarray,
        frame: int,
        params: Optional[SpiralParams] = None,
    ):
        self.region = region
        self.calibration = np.array(calibration, dtype=float)
        self.calibration.setflags(write=False)
        self.frame = frame
        self.params = params or SpiralParams()
        self._spots: Optional[list[Spot]] = None
        self._processing_time = 0.0

    @property
    def result(self) -> Optional[list[Spot]]:
        return self._spots

    @property
    def processing_time(self) -> float:
        return self._processing_time

    def check_input(self) -> bool:
        # Any region and calibration is acceptable.
        return True

    def process(self) -> bool:
        start = time.perf_counter()
        p = self.params

        x0 = int(self.region.width / 2) + self.region.xstart
        y0 = int(self.region.height / 2) + self.region.ystart

        # Frames elapsed since each live arm was spawned, newest arm last.
        t = np.arange(self.frame, -1, -p.arm_frame_step, dtype=float)
        arm = np.arange(t.size, dtype=float)

        r = t * p.radial_speed
        phi = t * p.angular_speed + arm * p.arm_phase_step

        xs = (x0 + r * np.cos(phi)) * self.calibration[0]
        ys = (y0 + r * np.sin(phi)) * self.calibration[1]
        qualities = 1.0 / (arm + 1.0)

        self._spots = [
            Spot(x=float(x), y=float(y), z=0.0, radius=p.spot_radius, quality=float(q))
            for x, y, q in zip(xs, ys, qualities)
        ]

        self._processing_time = (time.perf_counter() - start) * 1000.0
        log.debug(
            "spiral_detector.process",
            frame=self.frame,
            spots=len(self._spots),
            elapsed_ms=round(self._processing_time, 3),
        )
        return True
