"""
Model Training & Lifecycle Orchestration.

This module encapsulates the `ModelTrainer` engine, responsible for running
the epoch loop: one pass over the training data, one pass over the
validation data, a scheduler step and a checkpoint. Checkpoints are written
after every epoch so an interrupted run keeps all finished epochs.
"""

# Standard Imports
import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

# Third-Party Imports
import torch
import torch.nn as nn
from torch.utils.data import DataLoader

# Internal Imports
from ..core import LOGGER_NAME, Config, save_checkpoint
from .engine import train_one_epoch, validate_epoch

logger = logging.getLogger(LOGGER_NAME)


class ModelTrainer:
    """
    Runs ``cfg.training.epochs`` epochs and writes one checkpoint per epoch.

    Every collaborator is built by the caller (see
    :func:`digitforge.pipeline.run_training_phase`); the trainer only owns the
    loop and the loss and metric history.
    """

    def __init__(
        self,
        model: nn.Module,
        train_loader: DataLoader,
        val_loader: DataLoader,
        optimizer: torch.optim.Optimizer,
        scheduler: torch.optim.lr_scheduler.LRScheduler,
        criterion: nn.Module,
        device: torch.device,
        cfg: Config,
        model_folder: Optional[Path] = None,
    ):
        self.model = model
        self.train_loader = train_loader
        self.val_loader = val_loader
        self.optimizer = optimizer
        self.scheduler = scheduler
        self.criterion = criterion
        self.device = device
        self.cfg = cfg

        self.epochs = cfg.training.epochs
        self.network_name = cfg.network.name
        self.model_folder = model_folder or cfg.telemetry.model_folder
        self.model_folder.mkdir(parents=True, exist_ok=True)

        self.best_acc = -1.0
        self.last_checkpoint: Optional[Path] = None

        self.train_losses: List[float] = []
        self.val_metrics_history: List[Dict[str, float]] = []

        logger.info(f"Trainer initialized. Checkpoints go to: {self.model_folder}")

    def train(self) -> Tuple[Path, List[float], List[Dict[str, float]]]:
        """
        Executes the epoch loop, checkpointing after each epoch.

        Returns:
            (last checkpoint path, training loss per epoch, validation metrics per epoch)
        """
        for epoch in range(1, self.epochs + 1):
            logger.info(f"Starting epoch {epoch}")

            epoch_loss = train_one_epoch(
                model=self.model,
                loader=self.train_loader,
                criterion=self.criterion,
                optimizer=self.optimizer,
                device=self.device,
                epoch=epoch,
                total_epochs=self.epochs,
                use_tqdm=self.cfg.training.use_tqdm,
            )
            self.train_losses.append(epoch_loss)

            val_metrics = validate_epoch(
                model=self.model,
                val_loader=self.val_loader,
                criterion=self.criterion,
                device=self.device,
                num_classes=self.cfg.network.num_classes,
            )
            self.val_metrics_history.append(val_metrics)

            self.scheduler.step()
            self.last_checkpoint = self._save_epoch(epoch, epoch_loss, val_metrics)

            self.best_acc = max(self.best_acc, val_metrics["accuracy"])

            current_lr = self.optimizer.param_groups[0]["lr"]
            logger.info(
                f"Loss: [T: {epoch_loss:.4f} | V: {val_metrics['loss']:.4f}] | "
                f"Acc: {val_metrics['accuracy']:.4f} (Best Acc: {self.best_acc:.4f}) | "
                f"AUC: {val_metrics['auc']:.4f} | LR: {current_lr:.2e}"
            )

        logger.info(f"Training finished. Best validation accuracy: {self.best_acc:.4f}")
        return self.last_checkpoint, self.train_losses, self.val_metrics_history

    def _save_epoch(self, epoch: int, train_loss: float, val_metrics: Dict[str, float]) -> Path:
        """Saves the current weights with the epoch number and metrics as properties."""
        path = save_checkpoint(
            model=self.model,
            model_folder=self.model_folder,
            network_name=self.network_name,
            epoch=epoch,
            properties={
                "TrainLoss": f"{train_loss:.6f}",
                "ValidateLoss": f"{val_metrics['loss']:.6f}",
                "Accuracy": f"{val_metrics['accuracy']:.6f}",
            },
        )
        logger.info(f"Checkpoint saved: {path.name}")
        return path
