"""
Detector plugin system.

Each plugin is a factory that describes a detector and creates one
SpotDetector per frame.  Hosts look factories up by key and drive them
frame by frame.

Quick start:
    from spotdetect.detector_plugins.registry import DetectorRegistry
    registry = DetectorRegistry.default()
"""
from spotdetect.detector_plugins.base import DetectorFactory

__all__ = ["DetectorFactory"]
