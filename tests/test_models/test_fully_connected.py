"""
Test Suite for the fully connected network.
"""

# Third-Party Imports
import pytest
import torch
import torch.nn as nn

# Internal Imports
from digitforge.models import (
    FullyConnectedNetwork,
    build_fully_connected_mnist,
    flatten_for_fully_connected,
)


@pytest.mark.unit
def test_flatten_keeps_batch_dimension():
    x = torch.zeros(5, 28, 28, 1)

    assert flatten_for_fully_connected(x).shape == (5, 784)


@pytest.mark.unit
def test_layer_sequence_with_dropout():
    net = FullyConnectedNetwork(10, [8, 4], 3, activation="tanh", dropout=0.5)

    kinds = [type(layer) for layer in net.layers]
    assert kinds == [nn.Linear, nn.Tanh, nn.Dropout, nn.Linear, nn.Tanh, nn.Dropout, nn.Linear]
    assert all(layer.bias is not None for layer in net.layers if isinstance(layer, nn.Linear))


@pytest.mark.unit
def test_no_dropout_layers_when_disabled():
    net = FullyConnectedNetwork(10, [8], 3, dropout=0.0)

    assert not any(isinstance(layer, nn.Dropout) for layer in net.layers)
    assert [type(layer) for layer in net.layers] == [nn.Linear, nn.ReLU, nn.Linear]


@pytest.mark.unit
def test_no_hidden_layers_is_a_single_linear():
    net = FullyConnectedNetwork(6, [], 2)

    assert len(net.layers) == 1
    assert net(torch.ones(3, 2, 3)).shape == (3, 2)


@pytest.mark.unit
def test_activation_factory_is_accepted():
    net = FullyConnectedNetwork(4, [4], 2, activation=nn.LeakyReLU)

    assert isinstance(net.layers[1], nn.LeakyReLU)


@pytest.mark.unit
def test_unknown_activation_rejected():
    with pytest.raises(ValueError, match="Unknown activation"):
        FullyConnectedNetwork(4, [4], 2, activation="swish")


@pytest.mark.unit
def test_mnist_preset_geometry():
    net = build_fully_connected_mnist()

    linears = [layer for layer in net.layers if isinstance(layer, nn.Linear)]
    assert [(l.in_features, l.out_features) for l in linears] == [
        (784, 256),
        (256, 128),
        (128, 64),
        (64, 10),
    ]
    dropouts = [layer for layer in net.layers if isinstance(layer, nn.Dropout)]
    assert len(dropouts) == 3 and all(d.p == 0.2 for d in dropouts)


@pytest.mark.unit
def test_mnist_preset_forward_shape():
    net = build_fully_connected_mnist().eval()

    assert net(torch.rand(4, 28, 28, 1)).shape == (4, 10)
