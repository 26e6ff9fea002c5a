"""
Model Checkpoint & Weight Management.

A model folder holds one checkpoint per finished epoch, named
``<network>-<epoch:04d>.pt``. Each file stores the state dict next to string
properties (the epoch number among them), so the latest one can be located
and restored without the trainer's help.
"""

# Standard Imports
import re
from pathlib import Path
from typing import Dict, Optional

# Third-Party Imports
import torch

# Internal Imports
from ..errors import CheckpointNotFoundError
from ..paths import CHECKPOINT_SUFFIX


def checkpoint_path(model_folder: Path, network_name: str, epoch: int) -> Path:
    """Path of the checkpoint written after ``epoch``."""
    return model_folder / f"{network_name}-{epoch:04d}{CHECKPOINT_SUFFIX}"


def save_checkpoint(
    model: torch.nn.Module,
    model_folder: Path,
    network_name: str,
    epoch: int,
    properties: Optional[Dict[str, str]] = None,
) -> Path:
    """
    Persists model weights and metadata for one epoch.

    Args:
        model: Network whose parameters are saved
        model_folder: Destination folder (created if missing)
        network_name: Prefix of the checkpoint file name
        epoch: 1-based epoch number stored as the "Epoch" property
        properties: Additional string metadata

    Returns:
        Path of the written checkpoint
    """
    model_folder.mkdir(parents=True, exist_ok=True)
    props = {"Epoch": str(epoch)}
    props.update(properties or {})

    path = checkpoint_path(model_folder, network_name, epoch)
    torch.save(
        {"network": network_name, "properties": props, "state_dict": model.state_dict()},
        path,
    )
    return path


def find_latest_checkpoint(model_folder: Path, network_name: str) -> Path:
    """
    Locates the checkpoint with the highest epoch number.

    Raises:
        CheckpointNotFoundError: If the folder holds no checkpoint for ``network_name``.
    """
    pattern = re.compile(rf"^{re.escape(network_name)}-(\d+){re.escape(CHECKPOINT_SUFFIX)}$")
    candidates = []
    if model_folder.is_dir():
        for child in model_folder.iterdir():
            match = pattern.match(child.name)
            if match and child.is_file():
                candidates.append((int(match.group(1)), child))

    if not candidates:
        raise CheckpointNotFoundError(
            f"No '{network_name}' checkpoint found in model folder '{model_folder}'."
        )
    return max(candidates)[1]


def load_checkpoint(path: Path, device: torch.device) -> Dict:
    """
    Reads a checkpoint dict using weight-only loading.

    Raises:
        CheckpointNotFoundError: If the file does not exist.
    """
    if not path.exists():
        raise CheckpointNotFoundError(f"Model checkpoint not found at: {path}")

    # weights_only=True avoids arbitrary code execution
    return torch.load(path, map_location=device, weights_only=True)


def load_model_weights(model: torch.nn.Module, path: Path, device: torch.device) -> Dict[str, str]:
    """
    Restores model state from a checkpoint.

    Args:
        model: The model instance to populate.
        path: Filesystem path to the checkpoint file.
        device: Target device for mapping the tensors.

    Returns:
        The string properties stored alongside the weights.
    """
    checkpoint = load_checkpoint(path, device)
    model.load_state_dict(checkpoint["state_dict"])
    return dict(checkpoint.get("properties", {}))
