"""
Reproducibility Environment.

Seeds every random source a training run touches (Python, NumPy, PyTorch and
the DataLoader workers). Strict mode additionally switches PyTorch to
deterministic kernels; HardwareConfig pairs it with single-process loading.
"""

import logging
import os
import random

import numpy as np
import torch

from ..paths import LOGGER_NAME

REPRO_ENV_VAR = "DIGITFORGE_REPRODUCIBLE"

logger = logging.getLogger(LOGGER_NAME)


def is_repro_mode_requested(cli_flag: bool = False) -> bool:
    """True when ``--reproducible`` was passed or DIGITFORGE_REPRODUCIBLE is 1/true."""
    env_flag = os.environ.get(REPRO_ENV_VAR, "").strip().lower() in ("1", "true")
    return cli_flag or env_flag


def set_seed(seed: int, strict: bool = False) -> None:
    """
    Seeds Python, NumPy and PyTorch (all CUDA devices included).

    Args:
        seed: Shared seed value.
        strict: Also force deterministic algorithms on CUDA.
    """
    os.environ["PYTHONHASHSEED"] = str(seed)
    for seeder in (random.seed, np.random.seed, torch.manual_seed):
        seeder(seed)

    if not torch.cuda.is_available():
        return

    torch.cuda.manual_seed_all(seed)
    torch.backends.cudnn.benchmark = False
    torch.backends.cudnn.deterministic = True
    if strict:
        os.environ["CUBLAS_WORKSPACE_CONFIG"] = ":4096:8"
        torch.use_deterministic_algorithms(True)
        logger.info("Strict reproducibility: deterministic CUDA kernels enabled.")


def worker_init_fn(worker_id: int) -> None:
    """
    Derives the RNG state of a DataLoader worker from the loader's base seed.

    Does nothing when called outside a worker process.
    """
    info = torch.utils.data.get_worker_info()
    if info is None:
        return

    worker_seed = (info.seed + worker_id) % 2**32
    random.seed(worker_seed)
    np.random.seed(worker_seed)
    torch.manual_seed(worker_seed)
