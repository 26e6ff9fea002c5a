"""
Pipeline Phase Functions.

Reusable functions for each phase of a training session, designed to work
with a shared RootOrchestrator that owns seeding, logging and the model
folder.

Phases:
    1. Data preparation: labeled folders to DataLoaders
    2. Training: epoch loop with per-epoch checkpoints
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Dict, List, Tuple

import torch.nn as nn
from torch.utils.data import DataLoader

from ..core import LOGGER_NAME, Config, LogStyle
from ..data_handler import get_dataloaders
from ..models import get_model
from ..trainer import ModelTrainer, get_criterion, get_optimizer, get_scheduler

if TYPE_CHECKING:  # pragma: no cover
    from ..core import RootOrchestrator

logger = logging.getLogger(LOGGER_NAME)


def run_data_phase(
    orchestrator: RootOrchestrator,
    cfg: Config | None = None,
) -> Tuple[DataLoader, DataLoader]:
    """
    Indexes the training and validation folders and wraps them in loaders.

    Raises:
        ValueError: If the training folder holds more labels than the
            network has outputs.
    """
    cfg = cfg or orchestrator.cfg
    run_logger = orchestrator.run_logger or logger

    run_logger.info("")
    run_logger.info(LogStyle.HEAVY)
    run_logger.info(f"{'DATA PREPARATION':^80}")
    run_logger.info(LogStyle.HEAVY)

    train_loader, val_loader = get_dataloaders(cfg, device=orchestrator.get_device())

    num_labels = train_loader.dataset.num_classes
    if num_labels > cfg.network.num_classes:
        raise ValueError(
            f"Training folder '{cfg.train_data.root_folder}' has {num_labels} labels but "
            f"network '{cfg.network.name}' only {cfg.network.num_classes} outputs."
        )

    return train_loader, val_loader


def run_training_phase(
    orchestrator: RootOrchestrator,
    cfg: Config | None = None,
) -> Tuple[Path, List[float], List[Dict[str, float]], nn.Module]:
    """
    Execute model training phase.

    Builds the loaders and the network, then trains for the configured
    number of epochs, writing a checkpoint into the model folder after each.

    Args:
        orchestrator: Active RootOrchestrator providing device and logger
        cfg: Optional config override (defaults to orchestrator's config)

    Returns:
        Tuple of (last_checkpoint_path, train_losses, val_metrics, model)

    Example:
        >>> with RootOrchestrator(cfg) as orch:
        ...     last_path, losses, metrics, model = run_training_phase(orch)
    """
    cfg = cfg or orchestrator.cfg
    device = orchestrator.get_device()
    run_logger = orchestrator.run_logger or logger

    train_loader, val_loader = run_data_phase(orchestrator, cfg)

    run_logger.info("")
    run_logger.info(LogStyle.HEAVY)
    run_logger.info(f"{'TRAINING PIPELINE - ' + cfg.network.name.upper():^80}")
    run_logger.info(LogStyle.HEAVY)

    model = get_model(device=device, cfg=cfg.network)
    criterion = get_criterion(cfg)
    optimizer = get_optimizer(model, cfg)
    scheduler = get_scheduler(optimizer, cfg)

    trainer = ModelTrainer(
        model=model,
        train_loader=train_loader,
        val_loader=val_loader,
        optimizer=optimizer,
        scheduler=scheduler,
        criterion=criterion,
        device=device,
        cfg=cfg,
    )

    last_checkpoint, train_losses, val_metrics_history = trainer.train()
    return last_checkpoint, train_losses, val_metrics_history, model
