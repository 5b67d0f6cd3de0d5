"""
Shared pytest fixtures for all test levels.
Uses only synthetic regions and calibrations — never requires real images.
"""
import pytest

from spotdetect.detection.models import Region


# ---------------------------------------------------------------------------
# Region / calibration helpers
# ---------------------------------------------------------------------------
@pytest.fixture
def square_region() -> Region:
    """100x100 region at the origin."""
    return Region(width=100, height=100, xstart=0, ystart=0)


@pytest.fixture
def offset_region() -> Region:
    """Odd-sized region away from the origin."""
    return Region(width=51, height=31, xstart=10, ystart=20)


@pytest.fixture
def unit_calibration() -> list[float]:
    return [1.0, 1.0]
