"""
Configuration Package Initialization.

Flat access to the configuration schema. Classes are resolved on first
attribute access through ``__getattr__``, so importing the package does not
pull in pydantic models (and hardware detection through torch) until one is
needed.

Example:
    >>> from digitforge.core.config import Config, DatasetConfig
    >>> cfg = DatasetConfig(root_folder="mnist/train", color_mode="grayscale")
"""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "Config",
    "ColorMode",
    "DatasetConfig",
    "HardwareConfig",
    "NetworkConfig",
    "TelemetryConfig",
    "TrainingConfig",
    "ValidatedPath",
]

# LAZY IMPORTS MAPPING
_LAZY_IMPORTS: dict[str, str] = {
    "Config": "digitforge.core.config.manifest",
    "ColorMode": "digitforge.core.config.types",
    "DatasetConfig": "digitforge.core.config.dataset_config",
    "HardwareConfig": "digitforge.core.config.hardware_config",
    "NetworkConfig": "digitforge.core.config.network_config",
    "TelemetryConfig": "digitforge.core.config.telemetry_config",
    "TrainingConfig": "digitforge.core.config.training_config",
    "ValidatedPath": "digitforge.core.config.types",
}


# LAZY LOADER FUNCTION
def __getattr__(name: str) -> Any:
    """Resolves a schema class from its module and caches it here."""
    if name not in _LAZY_IMPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module = import_module(_LAZY_IMPORTS[name])
    attr = getattr(module, name)

    globals()[name] = attr
    return attr


def __dir__() -> list[str]:
    """Support for dir() and IDE auto-completion."""
    return sorted(__all__)
