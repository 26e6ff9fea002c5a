"""
Inference Package

Result types, the MNIST input/output translator and the checkpoint-backed
predictor used by the classification driver.
"""

from .classifications import Classification, Classifications
from .predictor import MnistClassifier, list_all_files, load_network_config
from .translator import (
    MNIST_CLASS_NAMES,
    MnistClassificationTranslator,
    render_ascii,
)

__all__ = [
    "Classification",
    "Classifications",
    "MnistClassificationTranslator",
    "MNIST_CLASS_NAMES",
    "render_ascii",
    "MnistClassifier",
    "list_all_files",
    "load_network_config",
]
