"""
Plugin descriptor for the spiral dummy detector.
"""
from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from spotdetect.detection.models import Region
from spotdetect.detection.spiral_detector import SpiralDummyDetector, SpiralParams
from spotdetect.detector_plugins.base import DetectorFactory


class SpiralDummyDetectorFactory(DetectorFactory):
    """Spots spiralling out of the region centre. Has no settings."""

    def __init__(self, params: Optional[SpiralParams] = None) -> None:
        super().__init__()
        self.params = params or SpiralParams()

    @property
    def key(self) -> str:
        return "SPIRAL_DUMMY_DETECTOR"

    @property
    def name(self) -> str:
        return "Spiral dummy detector"

    @property
    def info_text(self) -> str:
        return (
            "A dummy detector that ignores image content. Spots spiral out "
            "from the centre of the region, and a new spiral starts every "
            f"{self.params.arm_frame_step} frames."
        )

    def create_detector(
        self,
        region: Region,
        calibration: Sequence[float] | np.ndarray,
        frame: int,
    ) -> SpiralDummyDetector:
        return SpiralDummyDetector(region, calibration, frame, params=self.params)
