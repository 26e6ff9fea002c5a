"""
Data Handler Package

Adapts labeled image folders on disk into PyTorch datasets and DataLoaders:
directory indexing, label registry, image normalization and batching.
"""

from .dataset import ImageClassifierDataset
from .index import HIDDEN_MARKER, LabeledFileIndex, Sample
from .labels import LabelRegistry
from .loader import get_dataloader, get_dataloaders
from .normalizer import NormalizeFn, image_to_tensor, normalize_image

__all__ = [
    "ImageClassifierDataset",
    "LabeledFileIndex",
    "LabelRegistry",
    "Sample",
    "HIDDEN_MARKER",
    "NormalizeFn",
    "image_to_tensor",
    "normalize_image",
    "get_dataloader",
    "get_dataloaders",
]
