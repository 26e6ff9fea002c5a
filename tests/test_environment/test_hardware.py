"""
Test Suite for device detection and worker sizing.
"""

# Standard Imports
from unittest.mock import patch

# Third-Party Imports
import pytest
import torch

# Internal Imports
from digitforge.core.environment import detect_best_device, get_num_workers, to_device_obj


@pytest.mark.unit
def test_detect_best_device_prefers_cuda():
    with patch("torch.cuda.is_available", return_value=True):
        assert detect_best_device() == "cuda"


@pytest.mark.unit
def test_detect_best_device_falls_back_to_cpu():
    with patch("torch.cuda.is_available", return_value=False), patch(
        "torch.backends.mps.is_available", return_value=False
    ):
        assert detect_best_device() == "cpu"


@pytest.mark.unit
def test_to_device_obj_cpu():
    assert to_device_obj("cpu") == torch.device("cpu")


@pytest.mark.unit
def test_to_device_obj_auto_resolves():
    with patch("digitforge.core.environment.hardware.detect_best_device", return_value="cpu"):
        assert to_device_obj("auto") == torch.device("cpu")


@pytest.mark.unit
def test_unavailable_cuda_rejected():
    with patch("torch.cuda.is_available", return_value=False):
        with pytest.raises(ValueError, match="CUDA"):
            to_device_obj("cuda")


@pytest.mark.unit
def test_unknown_device_rejected():
    with pytest.raises(ValueError, match="Unsupported"):
        to_device_obj("tpu")


@pytest.mark.unit
@pytest.mark.parametrize("cpus,expected", [(None, 0), (1, 0), (4, 2), (64, 8)])
def test_num_workers_scaling(cpus, expected):
    with patch("os.cpu_count", return_value=cpus):
        assert get_num_workers() == expected
