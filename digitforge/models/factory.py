"""
Models Factory Module.

Registry-based factory decoupling network instantiation from the training and
inference drivers.

Example:
    >>> from digitforge.models import get_model
    >>> model = get_model(device=device, cfg=cfg.network)
    >>> print(f"Parameters: {sum(p.numel() for p in model.parameters()):,}")
"""

import logging
from typing import Callable, Dict

import torch
import torch.nn as nn

from ..core import LOGGER_NAME, NetworkConfig
from .fully_connected import FullyConnectedNetwork, build_fully_connected_mnist

logger = logging.getLogger(LOGGER_NAME)


def _build_fully_connected(cfg: NetworkConfig) -> nn.Module:
    return FullyConnectedNetwork(
        input_size=cfg.input_size,
        hidden_sizes=cfg.hidden_sizes,
        output_size=cfg.num_classes,
        activation=cfg.activation,
        dropout=cfg.dropout,
    )


def _build_fully_connected_mnist(cfg: NetworkConfig) -> nn.Module:
    return build_fully_connected_mnist()


_MODEL_REGISTRY: Dict[str, Callable[[NetworkConfig], nn.Module]] = {
    "fully_connected": _build_fully_connected,
    "fully_connected_mnist": _build_fully_connected_mnist,
}


def get_model(device: torch.device, cfg: NetworkConfig, verbose: bool = True) -> nn.Module:
    """
    Resolves, instantiates and deploys a registered network.

    Args:
        device: Hardware accelerator target.
        cfg: Network section of the manifest.
        verbose: Log architecture and parameter count.

    Returns:
        nn.Module: The instantiated model on ``device``.

    Raises:
        ValueError: If the requested network is not registered.
    """
    builder = _MODEL_REGISTRY.get(cfg.name.lower())
    if builder is None:
        error_msg = (
            f"Network '{cfg.name}' is not registered in the Factory. "
            f"Available: {sorted(_MODEL_REGISTRY)}"
        )
        logger.error(f" [!] {error_msg}")
        raise ValueError(error_msg)

    model = builder(cfg).to(device)

    if verbose:
        total_params = sum(p.numel() for p in model.parameters())
        logger.info(
            f"Initializing Network: {cfg.name} | Input: {'x'.join(map(str, cfg.input_shape))} | "
            f"Output: {cfg.num_classes} classes"
        )
        logger.info(f"Model deployed to {str(device).upper()} | Total Parameters: {total_params:,}")

    return model
