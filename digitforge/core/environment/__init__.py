"""
Environment & Infrastructure Abstraction Layer.

Exposes hardware discovery and reproducibility helpers used by the
orchestrator, the data loaders and the inference driver.
"""

from .hardware import (
    detect_best_device,
    get_cuda_name,
    get_num_workers,
    to_device_obj,
)
from .reproducibility import (
    is_repro_mode_requested,
    set_seed,
    worker_init_fn,
)

__all__ = [
    "detect_best_device",
    "get_cuda_name",
    "get_num_workers",
    "to_device_obj",
    "is_repro_mode_requested",
    "set_seed",
    "worker_init_fn",
]
