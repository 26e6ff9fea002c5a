"""
Trainer Package Facade

Exposes the ModelTrainer class, the optimization factories, and the
single-epoch execution engines.
"""

from .engine import train_one_epoch, validate_epoch
from .setup import get_criterion, get_optimizer, get_scheduler
from .trainer import ModelTrainer

__all__ = [
    "ModelTrainer",
    "train_one_epoch",
    "validate_epoch",
    "get_optimizer",
    "get_scheduler",
    "get_criterion",
]
