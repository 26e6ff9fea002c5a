"""
Telemetry Configuration.

Where a training run writes its checkpoints, log files and config mirror,
and how verbose the console is.
"""

# Standard Imports
import argparse
from pathlib import Path

# Third-Party Imports
from pydantic import BaseModel, ConfigDict, Field

# Internal Imports
from ..paths import DEFAULT_MODEL_FOLDER
from .types import LogLevel, ValidatedPath


class TelemetryConfig(BaseModel):
    """Output folder and logging verbosity."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    model_folder: ValidatedPath = Field(
        default=DEFAULT_MODEL_FOLDER,
        description="Folder to save training progress (logs & models) to",
    )
    log_level: LogLevel = Field(default="INFO")

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "TelemetryConfig":
        args_dict = vars(args)
        params = {}
        if args_dict.get("model_folder") is not None:
            params["model_folder"] = Path(args_dict["model_folder"])
        if args_dict.get("log_level") is not None:
            params["log_level"] = args_dict["log_level"].upper()
        return cls(**params)
