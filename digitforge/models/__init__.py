"""
Models Factory Package

Fully connected network assembly and the registry-based factory that routes
network names from the configuration to their builders.
"""

from .factory import get_model
from .fully_connected import (
    ACTIVATIONS,
    FullyConnectedNetwork,
    build_fully_connected_mnist,
    flatten_for_fully_connected,
)

__all__ = [
    "get_model",
    "FullyConnectedNetwork",
    "build_fully_connected_mnist",
    "flatten_for_fully_connected",
    "ACTIVATIONS",
]
