"""
Filesystem Authority and Path Orchestration Package.

Centralizes the default dataset folders and the file naming
used inside a model folder.
"""

from .constants import (
    CHECKPOINT_SUFFIX,
    CONFIG_FILENAME,
    DATASET_DIR,
    DEFAULT_MODEL_FOLDER,
    LOGGER_NAME,
    TRAIN_DIR,
    VALID_DIR,
    setup_static_directories,
)

__all__ = [
    "DATASET_DIR",
    "TRAIN_DIR",
    "VALID_DIR",
    "DEFAULT_MODEL_FOLDER",
    "CONFIG_FILENAME",
    "CHECKPOINT_SUFFIX",
    "LOGGER_NAME",
    "setup_static_directories",
]
