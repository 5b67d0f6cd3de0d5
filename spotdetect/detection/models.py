"""
Detection data models.
These types flow from detectors to whatever host collects the spots.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Region(BaseModel):
    """Axis-aligned region of interest in pixel coordinates.

    No sign or size checks are made: a degenerate or negative region is
    accepted as-is and handed to the detector.
    """
    model_config = ConfigDict(frozen=True)

    width: int
    height: int
    xstart: int = 0
    ystart: int = 0

    @classmethod
    def from_bounds(cls, xmin: int, ymin: int, xmax: int, ymax: int) -> Region:
        """Build a region from inclusive pixel bounds."""
        return cls(
            width=xmax - xmin + 1,
            height=ymax - ymin + 1,
            xstart=xmin,
            ystart=ymin,
        )

    @property
    def xend(self) -> int:
        return self.xstart + self.width - 1

    @property
    def yend(self) -> int:
        return self.ystart + self.height - 1


class Spot(BaseModel):
    """Single point detection, positioned in physical units."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    z: float = 0.0
    radius: float
    quality: float
