"""
Drive a detector factory over a sequence of frames, as a host pipeline does.
"""
from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np
import structlog

from spotdetect.detection.models import Region, Spot
from spotdetect.detector_plugins.base import DetectorFactory

log = structlog.get_logger(__name__)


class DetectionError(RuntimeError):
    """Raised when a detector reports failure for a frame."""

    def __init__(self, message: str, frame: int):
        self.frame = frame
        super().__init__(f"Frame {frame}: {message}")


def detect_frames(
    factory: DetectorFactory,
    region: Region,
    calibration: Sequence[float] | np.ndarray,
    frames: Iterable[int],
) -> dict[int, list[Spot]]:
    """
    Run one fresh detector per frame and collect the spots, keyed by frame
    in iteration order.
    """
    spots_by_frame: dict[int, list[Spot]] = {}
    total_ms = 0.0
    for frame in frames:
        detector = factory.create_detector(region, calibration, frame)
        if not detector.check_input() or not detector.process():
            log.error(
                "detect_frames.failed",
                detector=factory.key,
                frame=frame,
                error=detector.error_message,
            )
            raise DetectionError(detector.error_message or "detector failed", frame)
        spots_by_frame[frame] = list(detector.result or [])
        total_ms += detector.processing_time

    log.info(
        "detect_frames.done",
        detector=factory.key,
        frames=len(spots_by_frame),
        spots=sum(len(s) for s in spots_by_frame.values()),
        processing_ms=round(total_ms, 3),
    )
    return spots_by_frame
