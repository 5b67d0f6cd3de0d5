"""
Core abstraction for detector plugins.

A DetectorFactory describes one kind of detector and builds a fresh
SpotDetector for every frame the host wants processed.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Mapping, Optional, Sequence

if TYPE_CHECKING:
    import numpy as np

    from spotdetect.detection.base import SpotDetector
    from spotdetect.detection.models import Region


class DetectorFactory(ABC):
    """A plugin that creates spot detectors.

    Lifecycle:
        1. The host calls ``check_settings`` with the user's settings.
        2. For every frame, ``create_detector`` returns a new detector.
        3. The host runs ``check_input`` then ``process`` on that detector.
    """

    def __init__(self) -> None:
        self._error_message: Optional[str] = None

    @property
    @abstractmethod
    def key(self) -> str:
        """Unique identifier, e.g. ``'SPIRAL_DUMMY_DETECTOR'``."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name."""

    @property
    def info_text(self) -> str:
        return ""

    @property
    def error_message(self) -> Optional[str]:
        """Why the last ``check_settings`` call failed, if it did."""
        return self._error_message

    def default_settings(self) -> dict[str, Any]:
        """Override to expose tunable settings."""
        return {}

    def check_settings(self, settings: Mapping[str, Any]) -> bool:
        """Accept exactly the keys of ``default_settings``.

        Subclasses with typed settings should extend this check.
        """
        unknown = sorted(set(settings) - set(self.default_settings()))
        if unknown:
            self._error_message = (
                f"Unknown settings for {self.key}: {unknown}. "
                f"Expected: {sorted(self.default_settings())}"
            )
            return False
        self._error_message = None
        return True

    @abstractmethod
    def create_detector(
        self,
        region: Region,
        calibration: Sequence[float] | np.ndarray,
        frame: int,
    ) -> SpotDetector:
        """Build a detector for one frame of the given region."""
