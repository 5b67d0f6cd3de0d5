"""
Base detector abstract class. All spot detectors implement this interface.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from spotdetect.detection.models import Spot


class SpotDetector(ABC):
    """
    Abstract base for all spot detectors.

    Detection lifecycle per frame:
      1. check_input() validates whatever the detector was built with
      2. process() runs detection and stores the spots
      3. result / processing_time / error_message are read back by the host
    """

    @abstractmethod
    def check_input(self) -> bool:
        """Return True if the detector can run on its inputs."""
        ...

    @abstractmethod
    def process(self) -> bool:
        """
        Run detection. Returns True on success.
        On failure, error_message describes what went wrong.
        """
        ...

    @property
    @abstractmethod
    def result(self) -> Optional[list[Spot]]:
        """Spots found by the last process() call, None before the first call."""
        ...

    @property
    def error_message(self) -> Optional[str]:
        """Description of the last failure, None if nothing failed."""
        return None

    @property
    def processing_time(self) -> float:
        """Milliseconds spent in the last process() call."""
        return 0.0


class NullDetector(SpotDetector):
    """No-op detector for testing and dry-run mode."""

    def __init__(self) -> None:
        self._spots: Optional[list[Spot]] = None

    def check_input(self) -> bool:
        return True

    def process(self) -> bool:
        self._spots = []
        return True

    @property
    def result(self) -> Optional[list[Spot]]:
        return self._spots
