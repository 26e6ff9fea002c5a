"""
DigitForge: MNIST digit classification on PyTorch.

Adapts labeled image folders into datasets, trains a fully connected network
with per-epoch checkpoints and classifies image files with the latest one.
"""

__version__ = "0.1.0"
