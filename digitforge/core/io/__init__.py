"""
Input/Output & Persistence Utilities.

Manages configuration serialization (YAML) and per-epoch model checkpoints.
"""

from .checkpoints import (
    checkpoint_path,
    find_latest_checkpoint,
    load_checkpoint,
    load_model_weights,
    save_checkpoint,
)
from .serialization import load_config_from_yaml, save_config_as_yaml

__all__ = [
    "save_config_as_yaml",
    "load_config_from_yaml",
    "checkpoint_path",
    "save_checkpoint",
    "find_latest_checkpoint",
    "load_checkpoint",
    "load_model_weights",
]
