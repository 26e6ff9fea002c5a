"""
Fully Connected Network (Multilayer Perceptron).

A stack of linear layers over the flattened input: each hidden layer is a
biased ``nn.Linear`` followed by the activation and, when the probability is
positive, ``nn.Dropout``. The output layer is a single linear projection
producing unnormalized class scores.
"""

# Standard Imports
from typing import Callable, Dict, Sequence, Type

# Third-Party Imports
import torch
import torch.nn as nn

ACTIVATIONS: Dict[str, Type[nn.Module]] = {
    "relu": nn.ReLU,
    "tanh": nn.Tanh,
    "sigmoid": nn.Sigmoid,
    "gelu": nn.GELU,
}

MNIST_INPUT_SIZE = 28 * 28 * 1
MNIST_HIDDEN_SIZES = (256, 128, 64)
MNIST_NUM_CLASSES = 10
MNIST_DROPOUT = 0.2


def flatten_for_fully_connected(x: torch.Tensor) -> torch.Tensor:
    """
    Reshapes ``[B, d1, d2, ...]`` into ``[B, d1*d2*...]``.

    The first dimension is the batch; everything else is folded into one
    feature dimension, e.g. ``[B, W, H, C]`` becomes ``[B, W*H*C]``.
    """
    batch_size = x.shape[0]
    return x.reshape(batch_size, -1)


class FullyConnectedNetwork(nn.Module):
    """
    Simple fully connected network.

    Args:
        input_size: Flattened feature count of one sample.
        hidden_sizes: Output width of each hidden layer.
        output_size: Width of the final linear layer (number of classes).
        activation: Activation name ('relu', 'tanh', 'sigmoid', 'gelu') or a
            zero-argument factory returning an ``nn.Module``.
        dropout: Dropout probability after each hidden layer; <= 0 disables it.
    """

    def __init__(
        self,
        input_size: int,
        hidden_sizes: Sequence[int],
        output_size: int,
        activation: str | Callable[[], nn.Module] = "relu",
        dropout: float = 0.0,
    ):
        super().__init__()
        if isinstance(activation, str):
            try:
                activation = ACTIVATIONS[activation.lower()]
            except KeyError:
                raise ValueError(
                    f"Unknown activation '{activation}'. Available: {sorted(ACTIVATIONS)}"
                ) from None

        self.input_size = input_size
        self.hidden_sizes = tuple(hidden_sizes)
        self.output_size = output_size

        layers: list[nn.Module] = []
        in_features = input_size
        for hidden_size in self.hidden_sizes:
            layers.append(nn.Linear(in_features, hidden_size, bias=True))
            layers.append(activation())
            if dropout > 0:
                layers.append(nn.Dropout(p=dropout))
            in_features = hidden_size
        layers.append(nn.Linear(in_features, output_size))

        self.layers = nn.Sequential(*layers)

    def forward(self, x: torch.Tensor) -> torch.Tensor:
        return self.layers(flatten_for_fully_connected(x))


def build_fully_connected_mnist() -> FullyConnectedNetwork:
    """
    MNIST preset: 28x28x1 input, hidden sizes 256/128/64, one output per
    digit, ReLU activation and a dropout probability of 0.2 during training.
    """
    return FullyConnectedNetwork(
        input_size=MNIST_INPUT_SIZE,
        hidden_sizes=MNIST_HIDDEN_SIZES,
        output_size=MNIST_NUM_CLASSES,
        activation="relu",
        dropout=MNIST_DROPOUT,
    )
