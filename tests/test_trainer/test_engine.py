"""
Test Suite for Training Engine.

Covers the single-epoch training and validation kernels.
"""

# Standard Imports
from unittest.mock import MagicMock

# Third-Party Imports
import pytest
import torch
import torch.nn as nn

# Internal Imports
from digitforge.trainer import train_one_epoch, validate_epoch


# FIXTURES
@pytest.fixture
def simple_model():
    torch.manual_seed(0)
    return nn.Sequential(nn.Flatten(), nn.Linear(28 * 28, 10))


def _loader(batches):
    loader = MagicMock()
    loader.__iter__ = MagicMock(side_effect=lambda: iter(batches))
    loader.__len__ = MagicMock(return_value=len(batches))
    return loader


@pytest.fixture
def simple_loader():
    return _loader(
        [
            (torch.rand(4, 28, 28, 1), torch.tensor([0, 1, 2, 3])),
            (torch.rand(4, 28, 28, 1), torch.tensor([4, 5, 6, 7])),
        ]
    )


@pytest.fixture
def criterion():
    return nn.CrossEntropyLoss()


@pytest.fixture
def optimizer(simple_model):
    return torch.optim.SGD(simple_model.parameters(), lr=0.1)


# TESTS: train_one_epoch
@pytest.mark.unit
@pytest.mark.parametrize("use_tqdm", [False, True])
def test_train_one_epoch_returns_mean_loss(simple_model, simple_loader, criterion, optimizer, use_tqdm):
    loss = train_one_epoch(
        model=simple_model,
        loader=simple_loader,
        criterion=criterion,
        optimizer=optimizer,
        device=torch.device("cpu"),
        epoch=1,
        total_epochs=2,
        use_tqdm=use_tqdm,
    )

    assert isinstance(loss, float)
    assert loss > 0


@pytest.mark.unit
def test_train_one_epoch_updates_weights(simple_model, simple_loader, criterion, optimizer):
    before = simple_model[1].weight.detach().clone()

    train_one_epoch(simple_model, simple_loader, criterion, optimizer, torch.device("cpu"), use_tqdm=False)

    assert not torch.equal(before, simple_model[1].weight)
    assert simple_model.training


@pytest.mark.unit
def test_train_one_epoch_empty_loader(simple_model, criterion, optimizer):
    loss = train_one_epoch(simple_model, _loader([]), criterion, optimizer, torch.device("cpu"), use_tqdm=False)

    assert loss == 0.0


# TESTS: validate_epoch
@pytest.mark.unit
def test_validate_epoch_metrics(simple_model, simple_loader, criterion):
    metrics = validate_epoch(simple_model, simple_loader, criterion, torch.device("cpu"))

    assert set(metrics) == {"loss", "accuracy", "auc"}
    assert 0.0 <= metrics["accuracy"] <= 1.0
    assert metrics["loss"] > 0
    assert not simple_model.training


@pytest.mark.unit
def test_validate_epoch_perfect_predictions(criterion):
    class Oracle(nn.Module):
        def forward(self, x):
            return x.reshape(x.shape[0], -1) * 50.0

    batches = [(torch.eye(3), torch.tensor([0, 1, 2]))]

    metrics = validate_epoch(Oracle(), _loader(batches), criterion, torch.device("cpu"))

    assert metrics["accuracy"] == 1.0
    assert metrics["auc"] == pytest.approx(1.0)


@pytest.mark.unit
def test_validate_epoch_single_class_auc_is_zero(simple_model, criterion):
    batches = [(torch.rand(3, 28, 28, 1), torch.tensor([2, 2, 2]))]

    metrics = validate_epoch(simple_model, _loader(batches), criterion, torch.device("cpu"), num_classes=10)

    assert metrics["auc"] == 0.0


@pytest.mark.unit
def test_validate_epoch_empty_loader(simple_model, criterion):
    metrics = validate_epoch(simple_model, _loader([]), criterion, torch.device("cpu"))

    assert metrics == {"loss": 0.0, "accuracy": 0.0, "auc": 0.0}
