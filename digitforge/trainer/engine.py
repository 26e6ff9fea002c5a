"""
Core Training and Validation Engines.

One pass over the training loader with gradient updates, and one gradient-free
pass over the validation loader that reports loss, accuracy and macro
one-vs-rest ROC AUC.
"""

# Standard Imports
from typing import Dict, Optional

# Third-Party Imports
import numpy as np
import torch
import torch.nn as nn
from sklearn.metrics import roc_auc_score
from tqdm.auto import tqdm


def train_one_epoch(
    model: nn.Module,
    loader: torch.utils.data.DataLoader,
    criterion: nn.Module,
    optimizer: torch.optim.Optimizer,
    device: torch.device,
    epoch: int = 0,
    total_epochs: int = 1,
    use_tqdm: bool = True,
) -> float:
    """
    Runs forward, backward and optimizer step for every batch of ``loader``.

    Returns:
        Sample-weighted mean loss (0.0 for an empty loader)
    """
    model.train()
    loss_sum, seen = 0.0, 0

    batches = (
        tqdm(loader, desc=f"Train Epoch {epoch}/{total_epochs}", ncols=100) if use_tqdm else loader
    )
    for inputs, targets in batches:
        inputs, targets = inputs.to(device), targets.to(device)

        optimizer.zero_grad()
        loss = criterion(model(inputs), targets)
        loss.backward()
        optimizer.step()

        n = inputs.size(0)
        loss_sum += loss.item() * n
        seen += n
        if use_tqdm:
            batches.set_postfix(loss=f"{loss.item():.4f}")

    return loss_sum / seen if seen else 0.0


def _macro_auc(y_true: np.ndarray, y_score: np.ndarray, num_classes: int) -> float:
    """Macro OvR ROC AUC; 0.0 whenever it is undefined for these targets."""
    try:
        if num_classes == 2:
            auc = roc_auc_score(y_true, y_score[:, 1])
        else:
            auc = roc_auc_score(
                y_true,
                y_score,
                labels=np.arange(num_classes),
                multi_class="ovr",
                average="macro",
            )
    except ValueError:
        return 0.0
    return float(auc) if np.isfinite(auc) else 0.0


def validate_epoch(
    model: nn.Module,
    val_loader: torch.utils.data.DataLoader,
    criterion: nn.Module,
    device: torch.device,
    num_classes: Optional[int] = None,
) -> Dict[str, float]:
    """
    Evaluates ``model`` on the validation loader.

    Args:
        model: Network in any mode; switched to eval here
        val_loader: Validation batches
        criterion: Loss function
        device: Hardware target
        num_classes: Class count for the AUC labels (defaults to the output width)

    Returns:
        dict with 'loss', 'accuracy' and 'auc'
    """
    model.eval()
    loss_sum, correct, total = 0.0, 0, 0
    targets_seen, probabilities = [], []

    with torch.no_grad():
        for inputs, targets in val_loader:
            inputs, targets = inputs.to(device), targets.to(device)
            logits = model(inputs)

            loss_sum += criterion(logits, targets).item() * inputs.size(0)
            correct += (logits.argmax(dim=1) == targets).sum().item()
            total += targets.size(0)

            targets_seen.append(targets.cpu())
            probabilities.append(torch.softmax(logits, dim=1).cpu())

    if total == 0:
        return {"loss": 0.0, "accuracy": 0.0, "auc": 0.0}

    y_score = torch.cat(probabilities).numpy()
    auc = _macro_auc(torch.cat(targets_seen).numpy(), y_score, num_classes or y_score.shape[1])
    return {"loss": loss_sum / total, "accuracy": correct / total, "auc": auc}
