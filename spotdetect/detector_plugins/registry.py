"""
Detector registry: stores and looks up detector factories by key.
"""
from __future__ import annotations

import structlog

from spotdetect import config
from spotdetect.detector_plugins.base import DetectorFactory

log = structlog.get_logger(__name__)


# Built-in factory classes, populated by _load_builtins() on first access.
_BUILTIN_FACTORIES: dict[str, type[DetectorFactory]] | None = None


def _load_builtins() -> dict[str, type[DetectorFactory]]:
    """Import built-in factory classes lazily to avoid circular imports."""
    from spotdetect.detector_plugins.spiral import SpiralDummyDetectorFactory

    return {
        "SPIRAL_DUMMY_DETECTOR": SpiralDummyDetectorFactory,
    }


def _get_builtins() -> dict[str, type[DetectorFactory]]:
    global _BUILTIN_FACTORIES
    if _BUILTIN_FACTORIES is None:
        _BUILTIN_FACTORIES = _load_builtins()
    return _BUILTIN_FACTORIES


class DetectorRegistry:
    """Manages the detector factories available to a host."""

    def __init__(self) -> None:
        self._factories: dict[str, DetectorFactory] = {}

    def register(self, factory: DetectorFactory) -> None:
        if factory.key in self._factories:
            raise ValueError(
                f"Duplicate detector key '{factory.key}'. "
                f"Already registered: {self._factories[factory.key]!r}"
            )
        self._factories[factory.key] = factory
        log.debug("registry.registered", key=factory.key, name=factory.name)

    def get(self, key: str) -> DetectorFactory:
        if key not in self._factories:
            raise KeyError(
                f"Unknown detector '{key}'. "
                f"Available: {sorted(self._factories.keys())}"
            )
        return self._factories[key]

    @property
    def keys(self) -> list[str]:
        return list(self._factories.keys())

    def __len__(self) -> int:
        return len(self._factories)

    def __contains__(self, key: object) -> bool:
        return key in self._factories

    # ----- Factory methods ------------------------------------------------

    @classmethod
    def from_config(cls, keys: list[str]) -> DetectorRegistry:
        """Build a registry from a list of detector keys.

        Keys are looked up in the built-in factory table.  Unknown keys
        raise ``KeyError`` so configuration errors are caught early.
        """
        builtins = _get_builtins()
        registry = cls()
        for key in keys:
            if key not in builtins:
                raise KeyError(
                    f"Unknown detector '{key}'. "
                    f"Available: {sorted(builtins.keys())}"
                )
            registry.register(builtins[key]())
        return registry

    @classmethod
    def default(cls) -> DetectorRegistry:
        """Registry with the detectors named in DEFAULT_DETECTOR_KEYS."""
        return cls.from_config(config.DEFAULT_DETECTOR_KEYS)
