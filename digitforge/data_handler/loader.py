"""
Data Loader Orchestration Module.

Builds PyTorch DataLoaders over ``ImageClassifierDataset``. The dataset only
exposes random access; shuffling, batching and worker parallelism are handed
to ``torch.utils.data.DataLoader`` here.

Example:
    >>> from digitforge.data_handler import get_dataloaders
    >>> train_loader, val_loader = get_dataloaders(cfg)
    >>> print(f"Batches: {len(train_loader)}")
"""

import logging
from typing import Optional, Tuple

import torch
from torch.utils.data import DataLoader, Dataset

from ..core import LOGGER_NAME, Config, worker_init_fn
from .dataset import ImageClassifierDataset
from .normalizer import NormalizeFn, normalize_image

logger = logging.getLogger(LOGGER_NAME)


def get_dataloader(
    dataset: Dataset,
    batch_size: int,
    shuffle: bool,
    num_workers: int = 0,
    seed: Optional[int] = None,
    pin_memory: bool = False,
) -> DataLoader:
    """
    Wraps a dataset into a DataLoader with seeded shuffling.

    Args:
        dataset: Random-access dataset
        batch_size: Samples per batch
        shuffle: Reshuffle the sample order every epoch
        num_workers: Loader subprocesses (0 = load in the main process)
        seed: Seed for the shuffling generator (None = torch default RNG)
        pin_memory: Page-lock batches for faster host-to-GPU copies
    """
    generator = None
    if seed is not None:
        generator = torch.Generator()
        generator.manual_seed(seed)

    return DataLoader(
        dataset,
        batch_size=batch_size,
        shuffle=shuffle,
        num_workers=num_workers,
        pin_memory=pin_memory,
        worker_init_fn=worker_init_fn if num_workers > 0 else None,
        generator=generator,
        persistent_workers=num_workers > 0,
    )


def get_dataloaders(
    cfg: Config,
    normalize_fn: NormalizeFn = normalize_image,
    device: Optional[torch.device] = None,
) -> Tuple[DataLoader, DataLoader]:
    """
    Builds the shuffled training loader and the ordered validation loader.

    Args:
        cfg: Validated training manifest
        normalize_fn: Decode/normalize strategy passed to both datasets
        device: Target device, used to decide on pinned memory

    Returns:
        (train_loader, val_loader)

    Raises:
        ValueError: If the two folders do not hold the same label names.
    """
    train_set = ImageClassifierDataset(cfg.train_data, normalize_fn=normalize_fn)
    val_set = ImageClassifierDataset(cfg.val_data, normalize_fn=normalize_fn)

    if train_set.labels != val_set.labels:
        raise ValueError(
            f"Training labels {list(train_set.labels)} differ from validation labels "
            f"{list(val_set.labels)}; class ids would not line up."
        )

    logger.info(
        f"Training set: {train_set.size()} images in {train_set.num_classes} classes "
        f"from '{train_set.root_folder}'"
    )
    logger.info(
        f"Validation set: {val_set.size()} images in {val_set.num_classes} classes "
        f"from '{val_set.root_folder}'"
    )

    pin_memory = device is not None and device.type == "cuda"
    num_workers = cfg.num_workers

    train_loader = get_dataloader(
        train_set,
        batch_size=cfg.training.batch_size,
        shuffle=True,
        num_workers=num_workers,
        seed=cfg.training.seed,
        pin_memory=pin_memory,
    )
    val_loader = get_dataloader(
        val_set,
        batch_size=cfg.training.batch_size,
        shuffle=False,
        num_workers=num_workers,
        pin_memory=pin_memory,
    )
    return train_loader, val_loader
