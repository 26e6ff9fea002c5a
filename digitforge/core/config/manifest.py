"""
Training Configuration Manifest.

Declarative core aggregating the hierarchical schema for a training run.
Transforms raw inputs (CLI, YAML) into a structured, type-safe manifest.

Key Features:
    * Hierarchical aggregation: Unifies training data, validation data,
      network, optimization, hardware and telemetry sub-configs into a single
      immutable object.
    * Cross-domain validation: Decode mode of the data must match the
      channel count the network is initialized with.
    * Factory polymorphism: Dual entry points via YAML files or CLI arguments.
"""

import argparse
from pathlib import Path
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..io import load_config_from_yaml
from .dataset_config import DatasetConfig
from .hardware_config import HardwareConfig
from .network_config import NetworkConfig
from .telemetry_config import TelemetryConfig
from .training_config import TrainingConfig
from .types import ColorMode


# MAIN CONFIGURATION
class Config(BaseModel):
    """
    Main training manifest aggregating specialized sub-configurations.

    Attributes:
        train_data: Labeled folder used for optimization
        val_data: Labeled folder used to measure progress after each epoch
        network: Fully connected topology
        training: Epochs, batch size, optimizer and scheduler
        hardware: Device selection and worker policy
        telemetry: Model folder and log level

    Example:
        >>> from digitforge.core import Config, parse_train_args
        >>> cfg = Config.from_args(parse_train_args())
        >>> cfg.network.hidden_sizes
        (256, 128, 64)
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    train_data: DatasetConfig
    val_data: DatasetConfig
    network: NetworkConfig = Field(default_factory=NetworkConfig)
    training: TrainingConfig = Field(default_factory=TrainingConfig)
    hardware: HardwareConfig = Field(default_factory=HardwareConfig)
    telemetry: TelemetryConfig = Field(default_factory=TelemetryConfig)

    @model_validator(mode="after")
    def validate_logic(self) -> "Config":
        """
        Cross-domain validation enforcing consistency across sub-configs.

        Raises:
            ValueError: When data and network geometry disagree
        """
        if self.train_data.color_mode != self.val_data.color_mode:
            raise ValueError(
                f"Training data is decoded as '{self.train_data.color_mode.value}' but "
                f"validation data as '{self.val_data.color_mode.value}'."
            )

        if self.train_data.channels != self.network.in_channels:
            raise ValueError(
                f"Network '{self.network.name}' expects {self.network.in_channels} channel(s), "
                f"but color mode '{self.train_data.color_mode.value}' yields "
                f"{self.train_data.channels}."
            )

        return self

    @property
    def num_workers(self) -> int:
        """Effective DataLoader workers from hardware policy."""
        return self.hardware.effective_num_workers

    def dump_serialized(self) -> Dict[str, Any]:
        """Converts config to JSON-compatible dict for YAML serialization."""
        return self.model_dump(mode="json")

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "Config":
        """
        Factory from a YAML recipe.

        Relative dataset and model folders are resolved against the current
        working directory, the same way the CLI treats them.

        Args:
            yaml_path: Path to config YAML

        Returns:
            Validated Config instance
        """
        raw_data = load_config_from_yaml(yaml_path) or {}
        return cls.model_validate(raw_data)

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "Config":
        """
        Factory from CLI arguments.

        **PRECEDENCE ORDER:**
        1. If --config provided: YAML values are authoritative (CLI ignored)
        2. Otherwise: CLI arguments, falling back to field defaults

        Args:
            args: Parsed argparse namespace

        Returns:
            Configured instance
        """
        if getattr(args, "config", None):
            return cls.from_yaml(Path(args.config))

        color_mode = ColorMode(getattr(args, "color_mode", None) or ColorMode.GRAYSCALE)
        return cls(
            train_data=DatasetConfig.from_args(args, "training_folder", color_mode),
            val_data=DatasetConfig.from_args(args, "validation_folder", color_mode),
            network=NetworkConfig.from_args(args),
            training=TrainingConfig.from_args(args),
            hardware=HardwareConfig.from_args(args),
            telemetry=TelemetryConfig.from_args(args),
        )
