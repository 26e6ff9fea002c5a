"""
PyTorch Dataset over Labeled Image Folders.

``ImageClassifierDataset`` loads images from a folder with one subfolder per
label. Each image is assigned the name of its subfolder as label and decoded
at its native width and height, in grayscale or RGB.

The file listing is built once at construction; after that the dataset is
read-only, so random-access reads from shuffling samplers or DataLoader
worker processes need no locking. Every ``get`` opens, decodes and closes its
own file.
"""

# Standard Imports
from pathlib import Path
from typing import Tuple

# Third-Party Imports
import torch
from torch.utils.data import Dataset

# Internal Imports
from ..core.config import ColorMode, DatasetConfig
from ..core.errors import IndexOutOfRangeError
from .index import LabeledFileIndex, Sample
from .labels import LabelRegistry
from .normalizer import NormalizeFn, normalize_image


class ImageClassifierDataset(Dataset[Tuple[torch.Tensor, torch.Tensor]]):
    """
    Random-access dataset of ``(normalized image, class id)`` pairs.

    Sample order: sorted label folders, then sorted file names within each.
    Class ids follow the sorted label order starting at 0.

    Args:
        config: Validated root folder and color mode.
        normalize_fn: Decode/normalize strategy, ``normalize_image`` by default.

    Raises:
        InvalidRootError: Root folder unreadable.
        EmptyDatasetError: Root folder holds no label subfolder.
    """

    def __init__(self, config: DatasetConfig, normalize_fn: NormalizeFn = normalize_image):
        self.config = config
        self.normalize_fn = normalize_fn

        index = LabeledFileIndex.scan(config.root_folder)
        self.registry = LabelRegistry(index.labels)
        self._files: Tuple[Path, ...] = tuple(path for path, _ in index)

    @property
    def root_folder(self) -> Path:
        return self.config.root_folder

    @property
    def color_mode(self) -> ColorMode:
        return self.config.color_mode

    @property
    def labels(self) -> Tuple[str, ...]:
        """All possible labels; positions are class ids."""
        return self.registry.labels

    @property
    def num_classes(self) -> int:
        return len(self.registry)

    def class_id(self, label: str) -> int:
        return self.registry.id_of(label)

    def label(self, class_id: int) -> str:
        return self.registry.label_of(class_id)

    def size(self) -> int:
        """Number of samples; valid indices are ``0 <= index < size()``."""
        return len(self._files)

    def sample(self, index: int) -> Sample:
        """Resolves ``index`` to its file, label and class id without decoding."""
        if not 0 <= index < len(self._files):
            raise IndexOutOfRangeError(f"Index {index} out of range [0, {len(self._files)}).")
        path = self._files[index]
        label = path.parent.name
        return Sample(path=path, label=label, class_id=self.registry.id_of(label))

    @property
    def samples(self) -> Tuple[Sample, ...]:
        return tuple(self.sample(i) for i in range(len(self._files)))

    @property
    def targets(self) -> Tuple[int, ...]:
        """Class id of every sample, in sample order."""
        return tuple(self.registry.id_of(path.parent.name) for path in self._files)

    def get(self, index: int) -> Tuple[torch.Tensor, int]:
        """
        Returns the normalized image at ``index`` and its class id.

        Raises:
            IndexOutOfRangeError: ``index`` outside ``[0, size())``.
            UnreadableImageError: The file cannot be decoded.
        """
        sample = self.sample(index)
        return self.normalize_fn(sample.path, self.color_mode), sample.class_id

    def __len__(self) -> int:
        return self.size()

    def __getitem__(self, index: int) -> Tuple[torch.Tensor, torch.Tensor]:
        """Same as :meth:`get`, with the class id as a long tensor for batching."""
        image, class_id = self.get(index)
        return image, torch.tensor(class_id, dtype=torch.long)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(root_folder={str(self.root_folder)!r}, "
            f"color_mode={self.color_mode.value!r}, size={self.size()}, "
            f"labels={list(self.labels)!r})"
        )
