"""
Hardware Manifest.

Device selection and DataLoader worker policy. Strict reproducibility forces
single-process data loading.
"""

# Standard Imports
import argparse
from typing import Optional

# Third-Party Imports
from pydantic import BaseModel, ConfigDict, Field

# Internal Imports
from ..environment import get_num_workers, is_repro_mode_requested
from .types import DeviceName, WorkerCount


class HardwareConfig(BaseModel):
    """Compute device and data loading resources."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    device: DeviceName = Field(default="auto", description="Computing device")
    num_workers: Optional[WorkerCount] = Field(
        default=None,
        description="DataLoader subprocesses (None = derived from CPU count)",
    )
    reproducible: bool = Field(default=False, description="Strict determinism")

    @property
    def use_deterministic_algorithms(self) -> bool:
        return is_repro_mode_requested(self.reproducible)

    @property
    def effective_num_workers(self) -> int:
        """Worker count actually handed to DataLoader."""
        if self.use_deterministic_algorithms:
            return 0
        if self.num_workers is not None:
            return self.num_workers
        return get_num_workers()

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "HardwareConfig":
        args_dict = vars(args)
        valid_fields = cls.model_fields.keys()
        params = {k: v for k, v in args_dict.items() if k in valid_fields and v is not None}
        return cls(**params)
