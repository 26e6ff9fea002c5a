"""
Semantic Type Definitions & Validation Primitives.

Foundational type-system for the configuration engine. Uses Pydantic's
Annotated types and functional validators to enforce domain constraints
(learning rate bounds, batch sizes, readable dataset folders) before values
reach the training and inference code.

Core Responsibilities:
    * Path Sanitization: Expands ``~`` without touching the disk.
    * Dataset Roots: Verifies a folder exists and is readable, raising
      ``InvalidRootError`` so the failure carries the data-layer type.
    * Color Modes: Enumerates the decode modes supported by the normalizer.
"""

# Standard Imports
import os
from enum import Enum
from pathlib import Path
from typing import Annotated, Literal

# Third-Party Imports
from pydantic import AfterValidator, Field, PlainSerializer

# Internal Imports
from ..errors import InvalidRootError


# VALIDATORS
def _sanitize_path(v: Path) -> Path:
    """Expand the home directory without disk side-effects."""
    return v.expanduser()


def _readable_directory(v: Path) -> Path:
    """Fail fast when a dataset root cannot be listed."""
    v = v.expanduser()
    if not v.is_dir() or not os.access(v, os.R_OK | os.X_OK):
        raise InvalidRootError(f"Cannot read from folder '{v}'.")
    return v


class ColorMode(str, Enum):
    """Decode mode for images: one grayscale channel or three RGB channels."""

    GRAYSCALE = "grayscale"
    COLOR = "color"

    @property
    def channels(self) -> int:
        return 1 if self is ColorMode.GRAYSCALE else 3

    @property
    def pil_mode(self) -> str:
        return "L" if self is ColorMode.GRAYSCALE else "RGB"


# 1. GENERIC PRIMITIVES
PositiveInt = Annotated[int, Field(gt=0)]
NonNegativeInt = Annotated[int, Field(ge=0)]
Probability = Annotated[float, Field(ge=0.0, le=1.0)]

# 2. FILESYSTEM
ValidatedPath = Annotated[
    Path,
    AfterValidator(_sanitize_path),
    PlainSerializer(lambda v: str(v), when_used="json", return_type=str),
]
DatasetRoot = Annotated[
    Path,
    AfterValidator(_readable_directory),
    PlainSerializer(lambda v: str(v), when_used="json", return_type=str),
]

# 3. HARDWARE & PERFORMANCE
WorkerCount = Annotated[int, Field(ge=0)]
BatchSize = Annotated[int, Field(ge=1, le=4096)]
DeviceName = Literal["auto", "cpu", "cuda", "mps"]

# 4. NETWORK GEOMETRY
LayerWidth = Annotated[int, Field(ge=1, le=65536)]
DropoutRate = Annotated[float, Field(ge=0.0, lt=1.0)]
ActivationName = Literal["relu", "tanh", "sigmoid", "gelu"]

# 5. OPTIMIZATION
LearningRate = Annotated[float, Field(gt=1e-8, lt=1.0)]
WeightDecay = Annotated[float, Field(ge=0.0, le=0.2)]
Momentum = Annotated[float, Field(ge=0.0, lt=1.0)]
OptimizerName = Literal["adam", "adamw", "sgd"]
SchedulerName = Literal["none", "cosine", "step"]

# 6. SYSTEM
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
