"""
Fully Connected Network Configuration.

Declares the topology of the multilayer perceptron: the input geometry it is
initialized with, the hidden layer widths, the activation applied after each
hidden layer and the dropout probability. Defaults reproduce the MNIST
preset (28x28x1 input, hidden sizes 256/128/64, 10 digits, ReLU, dropout 0.2).
"""

# Standard Imports
import argparse
import math
from typing import Tuple

# Third-Party Imports
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Internal Imports
from .types import ActivationName, DropoutRate, LayerWidth, PositiveInt

MNIST_PRESET_NAME = "fully_connected_mnist"
MNIST_PRESET_GEOMETRY = ((28, 28, 1), (256, 128, 64), 10, "relu", 0.2)


class NetworkConfig(BaseModel):
    """Architecture selection and layer geometry."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(
        default=MNIST_PRESET_NAME,
        description="Registered network builder ('fully_connected_mnist', 'fully_connected')",
    )
    input_shape: Tuple[PositiveInt, PositiveInt, PositiveInt] = Field(
        default=(28, 28, 1),
        description="Per-sample input shape [width, height, channels]",
    )
    hidden_sizes: Tuple[LayerWidth, ...] = Field(
        default=(256, 128, 64),
        description="Output width of each hidden layer",
    )
    num_classes: PositiveInt = Field(default=10, description="Output layer width")
    activation: ActivationName = Field(default="relu", description="Hidden layer activation")
    dropout: DropoutRate = Field(
        default=0.2,
        description="Dropout after each hidden layer (0 disables)",
    )

    @field_validator("name")
    @classmethod
    def normalize_name(cls, v: str) -> str:
        return v.strip().lower()

    @model_validator(mode="after")
    def validate_preset(self) -> "NetworkConfig":
        """The MNIST preset has a fixed topology; custom layouts use 'fully_connected'."""
        if self.name != MNIST_PRESET_NAME:
            return self
        geometry = (
            self.input_shape,
            self.hidden_sizes,
            self.num_classes,
            self.activation,
            self.dropout,
        )
        if geometry != MNIST_PRESET_GEOMETRY:
            raise ValueError(
                f"Network '{MNIST_PRESET_NAME}' is fixed to input (28, 28, 1), hidden sizes "
                "(256, 128, 64), 10 classes, relu and dropout 0.2. "
                "Use 'fully_connected' for a custom topology."
            )
        return self

    @property
    def input_size(self) -> int:
        """Flattened feature count fed to the first linear layer."""
        return math.prod(self.input_shape)

    @property
    def in_channels(self) -> int:
        return self.input_shape[-1]

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "NetworkConfig":
        """
        Factory from CLI arguments.

        Only overrides schema fields present in args and not None.
        """
        args_dict = vars(args)
        params = {
            "name": args_dict.get("network"),
            "hidden_sizes": args_dict.get("hidden_sizes"),
            "dropout": args_dict.get("dropout"),
        }
        return cls(**{k: v for k, v in params.items() if v is not None})
