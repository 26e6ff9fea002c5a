"""
Core Utilities Package

This package exposes the essential components for configuration, logging,
errors, environment management, persistence and project constants. It also
includes the RootOrchestrator that prepares a training session.
"""

# Command Line Interface
from .cli import (
    build_classify_parser,
    build_train_parser,
    parse_classify_args,
    parse_train_args,
)

# Configuration
from .config import (
    ColorMode,
    Config,
    DatasetConfig,
    HardwareConfig,
    NetworkConfig,
    TelemetryConfig,
    TrainingConfig,
)

# Environment & Hardware
from .environment import (
    detect_best_device,
    get_num_workers,
    is_repro_mode_requested,
    set_seed,
    to_device_obj,
    worker_init_fn,
)

# Errors
from .errors import (
    CheckpointNotFoundError,
    DigitForgeError,
    EmptyDatasetError,
    IndexOutOfRangeError,
    InvalidRootError,
    UnknownLabelError,
    UnreadableImageError,
)

# Input/Output Utilities
from .io import (
    checkpoint_path,
    find_latest_checkpoint,
    load_config_from_yaml,
    load_model_weights,
    save_checkpoint,
    save_config_as_yaml,
)

# Logging
from .logger import Logger, LogStyle, Reporter

# Session Orchestration
from .orchestrator import RootOrchestrator

# Constants & Paths
from .paths import (
    CONFIG_FILENAME,
    DEFAULT_MODEL_FOLDER,
    LOGGER_NAME,
    TRAIN_DIR,
    VALID_DIR,
)

__all__ = [
    # Configuration
    "Config",
    "ColorMode",
    "DatasetConfig",
    "HardwareConfig",
    "NetworkConfig",
    "TelemetryConfig",
    "TrainingConfig",
    # Errors
    "DigitForgeError",
    "InvalidRootError",
    "EmptyDatasetError",
    "UnknownLabelError",
    "IndexOutOfRangeError",
    "UnreadableImageError",
    "CheckpointNotFoundError",
    # Constants & Paths
    "TRAIN_DIR",
    "VALID_DIR",
    "DEFAULT_MODEL_FOLDER",
    "CONFIG_FILENAME",
    "LOGGER_NAME",
    # Orchestration
    "RootOrchestrator",
    # Logging
    "Logger",
    "LogStyle",
    "Reporter",
    # Environment
    "set_seed",
    "detect_best_device",
    "get_num_workers",
    "to_device_obj",
    "worker_init_fn",
    "is_repro_mode_requested",
    # I/O
    "save_config_as_yaml",
    "load_config_from_yaml",
    "checkpoint_path",
    "save_checkpoint",
    "find_latest_checkpoint",
    "load_model_weights",
    # CLI
    "build_train_parser",
    "build_classify_parser",
    "parse_train_args",
    "parse_classify_args",
]
