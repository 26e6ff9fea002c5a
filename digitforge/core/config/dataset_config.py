"""
Dataset Source Configuration.

Validated description of one labeled image folder: where it lives and how its
images are decoded. Replaces a mutable builder with a single frozen object
that rejects a missing or unreadable root at construction time.
"""

# Standard Imports
import argparse
from pathlib import Path

# Third-Party Imports
from pydantic import BaseModel, ConfigDict, Field

# Internal Imports
from .types import ColorMode, DatasetRoot


class DatasetConfig(BaseModel):
    """
    Validated manifest for a labeled image folder.

    Attributes:
        root_folder: Folder whose immediate subfolders are the class labels.
        color_mode: Decode images as one grayscale channel or three RGB channels.

    Raises:
        InvalidRootError: If ``root_folder`` is not a readable directory.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    root_folder: DatasetRoot = Field(
        description="Folder containing one subfolder per label"
    )
    color_mode: ColorMode = Field(
        default=ColorMode.COLOR,
        description="Image decode mode: 'grayscale' or 'color'",
    )

    @property
    def channels(self) -> int:
        """Channel count of every normalized tensor (1 or 3)."""
        return self.color_mode.channels

    @classmethod
    def from_args(
        cls, args: argparse.Namespace, folder_attr: str, color_mode: ColorMode
    ) -> "DatasetConfig":
        """
        Factory from CLI arguments.

        Args:
            args: Parsed command-line arguments
            folder_attr: Name of the namespace attribute holding the folder
            color_mode: Decode mode shared by training and validation data

        Returns:
            DatasetConfig pointing at the requested folder
        """
        return cls(root_folder=Path(getattr(args, folder_attr)), color_mode=color_mode)
