"""
Hardware Acceleration & Computing Environment.

Chooses the device a run executes on and how many DataLoader worker
processes the host can afford.
"""

# Standard Imports
import os

# Third-Party Imports
import torch

SUPPORTED_DEVICES = ("cuda", "mps", "cpu")
MAX_WORKERS = 8


def _mps_available() -> bool:
    mps = getattr(torch.backends, "mps", None)
    return mps is not None and mps.is_available()


def detect_best_device() -> str:
    """Preference order: CUDA, then Apple MPS, then CPU."""
    if torch.cuda.is_available():
        return "cuda"
    return "mps" if _mps_available() else "cpu"


def to_device_obj(device_str: str) -> torch.device:
    """
    Resolves a device name ('auto' included) into a torch.device.

    Raises:
        ValueError: Unknown name, or CUDA requested on a host without it
    """
    name = detect_best_device() if device_str == "auto" else device_str
    if name not in SUPPORTED_DEVICES:
        raise ValueError(f"Unsupported device: {device_str}")
    if name == "cuda" and not torch.cuda.is_available():
        raise ValueError("CUDA requested but not available")
    return torch.device(name)


def get_cuda_name() -> str:
    return torch.cuda.get_device_name(0) if torch.cuda.is_available() else ""


def get_num_workers() -> int:
    """Half of the logical CPUs, at most MAX_WORKERS; 0 on single-core hosts."""
    return min(MAX_WORKERS, (os.cpu_count() or 1) // 2)
