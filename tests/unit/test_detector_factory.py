"""
Unit tests for the DetectorFactory ABC and SpiralDummyDetectorFactory.
"""
from __future__ import annotations

import pytest

from spotdetect.detection.spiral_detector import SpiralDummyDetector, SpiralParams
from spotdetect.detector_plugins.base import DetectorFactory
from spotdetect.detector_plugins.spiral import SpiralDummyDetectorFactory


@pytest.mark.unit
class TestDetectorFactoryABC:
    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            DetectorFactory()  # type: ignore[abstract]


@pytest.mark.unit
class TestSpiralFactoryDescriptor:
    def test_key_and_name(self):
        f = SpiralDummyDetectorFactory()
        assert f.key == "SPIRAL_DUMMY_DETECTOR"
        assert f.name == "Spiral dummy detector"

    def test_info_text_mentions_arm_step(self):
        f = SpiralDummyDetectorFactory(SpiralParams(arm_frame_step=7))
        assert "every 7 frames" in f.info_text

    def test_no_default_settings(self):
        assert SpiralDummyDetectorFactory().default_settings() == {}


@pytest.mark.unit
class TestSpiralFactorySettings:
    def test_empty_settings_accepted(self):
        f = SpiralDummyDetectorFactory()
        assert f.check_settings({}) is True
        assert f.error_message is None

    def test_unknown_settings_rejected(self):
        f = SpiralDummyDetectorFactory()
        assert f.check_settings({"THRESHOLD": 3.0}) is False
        assert "THRESHOLD" in f.error_message

    def test_error_cleared_on_success(self):
        f = SpiralDummyDetectorFactory()
        f.check_settings({"RADIUS": 1.0})
        assert f.check_settings({}) is True
        assert f.error_message is None


@pytest.mark.unit
class TestSpiralFactoryCreate:
    def test_creates_spiral_detector(self, square_region, unit_calibration):
        f = SpiralDummyDetectorFactory()
        d = f.create_detector(square_region, unit_calibration, 12)
        assert isinstance(d, SpiralDummyDetector)
        assert d.frame == 12
        assert d.region == square_region

    def test_detectors_share_params(self, square_region, unit_calibration):
        params = SpiralParams(spot_radius=4.0)
        f = SpiralDummyDetectorFactory(params)
        a = f.create_detector(square_region, unit_calibration, 0)
        b = f.create_detector(square_region, unit_calibration, 1)
        assert a.params is params
        assert b.params is params

    def test_detectors_are_independent(self, square_region, unit_calibration):
        f = SpiralDummyDetectorFactory()
        a = f.create_detector(square_region, unit_calibration, 0)
        b = f.create_detector(square_region, unit_calibration, 20)
        a.process()
        assert b.result is None
