"""
Optimization Setup Module

Factory functions instantiating PyTorch optimization components (loss,
optimizer, learning rate scheduler) from the training manifest.
"""

import torch.nn as nn
import torch.optim as optim
from torch.optim import lr_scheduler

from ..core import Config


def get_criterion(cfg: Config) -> nn.Module:
    """
    Softmax cross entropy over the unnormalized class scores, the standard
    multiclass classification loss.
    """
    return nn.CrossEntropyLoss()


def get_optimizer(model: nn.Module, cfg: Config) -> optim.Optimizer:
    """
    Instantiates the optimizer named by ``training.optimizer_type``.

    Raises:
        ValueError: For an unsupported optimizer name.
    """
    opt_type = cfg.training.optimizer_type.lower()
    lr = cfg.training.learning_rate
    wd = cfg.training.weight_decay

    if opt_type == "adam":
        return optim.Adam(model.parameters(), lr=lr, weight_decay=wd)

    elif opt_type == "adamw":
        return optim.AdamW(model.parameters(), lr=lr, weight_decay=wd)

    elif opt_type == "sgd":
        return optim.SGD(
            model.parameters(), lr=lr, momentum=cfg.training.momentum, weight_decay=wd
        )

    else:
        raise ValueError(
            f"Unsupported optimizer_type: '{opt_type}'. Available options: ['adam', 'adamw', 'sgd']"
        )


def get_scheduler(optimizer: optim.Optimizer, cfg: Config) -> lr_scheduler.LRScheduler:
    """
    Scheduler Factory.

    Supports:
        - none: Maintains a constant learning rate.
        - cosine: Smooth decay to ``min_lr`` over all epochs.
        - step: Multiplies the LR by ``scheduler_factor`` every ``step_size`` epochs.
    """
    sched_type = cfg.training.scheduler_type.lower()

    if sched_type == "none":
        return lr_scheduler.LambdaLR(optimizer, lr_lambda=lambda epoch: 1.0)

    elif sched_type == "cosine":
        return lr_scheduler.CosineAnnealingLR(
            optimizer, T_max=cfg.training.epochs, eta_min=cfg.training.min_lr
        )

    elif sched_type == "step":
        return lr_scheduler.StepLR(
            optimizer, step_size=cfg.training.step_size, gamma=cfg.training.scheduler_factor
        )

    else:
        raise ValueError(
            f"Unsupported scheduler_type: '{sched_type}'. "
            "Available options: ['none', 'cosine', 'step']"
        )
