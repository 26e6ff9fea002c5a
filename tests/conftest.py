"""
Pytest Configuration and Shared Fixtures for the DigitForge Test Suite.

Builds tiny labeled image trees with Pillow inside ``tmp_path``:
- A digit tree with unsorted label folders, a hidden folder and stray files
- Training/validation trees of 28x28 grayscale digits
- Black and white reference images

Fixtures are automatically discovered by pytest across all test modules.
"""

# Standard Imports
import argparse
from pathlib import Path

# Third-Party Imports
import pytest
from PIL import Image


def write_image(path: Path, value=0, size=(28, 28), mode: str = "L") -> Path:
    """Writes a uniform PNG; ``value`` is an int for "L" or an RGB tuple for "RGB"."""
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new(mode, size, value).save(path)
    return path


def build_digit_folders(root: Path, labels, per_label: int = 2) -> Path:
    """Creates ``root/<label>/img_<i>.png`` with one intensity per label."""
    for n, label in enumerate(labels):
        for i in range(per_label):
            write_image(root / label / f"img_{i}.png", value=(40 * n + 10 * i) % 256)
    return root


# IMAGE TREES
@pytest.fixture
def image_writer():
    """Exposes write_image to tests that need custom files."""
    return write_image


@pytest.fixture
def digit_tree(tmp_path):
    """
    Label folders created out of order, plus entries the index must skip.

        root/
          b/ img_0.png img_1.png
          a/ img_0.png img_1.png img_2.png
          .hidden/ img_0.png
          stray.png
    """
    root = tmp_path / "digits"
    write_image(root / "b" / "img_1.png", value=200)
    write_image(root / "b" / "img_0.png", value=150)
    write_image(root / "a" / "img_2.png", value=100)
    write_image(root / "a" / "img_0.png", value=0)
    write_image(root / "a" / "img_1.png", value=50)
    write_image(root / ".hidden" / "img_0.png", value=255)
    write_image(root / "stray.png", value=255)
    return root


@pytest.fixture
def black_white_tree(tmp_path):
    """One all-black and one all-white 28x28 image under separate labels."""
    root = tmp_path / "bw"
    write_image(root / "black" / "black.png", value=0)
    write_image(root / "white" / "white.png", value=255)
    return root


@pytest.fixture
def mnist_trees(tmp_path):
    """Small train/valid trees with the digits 0, 1 and 2."""
    train = build_digit_folders(tmp_path / "mnist" / "train", ["0", "1", "2"], per_label=3)
    valid = build_digit_folders(tmp_path / "mnist" / "valid", ["0", "1", "2"], per_label=2)
    return train, valid


# CLI ARGUMENT FIXTURES
@pytest.fixture
def train_args(mnist_trees, tmp_path):
    """Training CLI namespace pointing at the temporary trees."""
    train, valid = mnist_trees
    return argparse.Namespace(
        config=None,
        reproducible=False,
        training_folder=str(train),
        validation_folder=str(valid),
        color_mode="grayscale",
        batch_size=4,
        epochs=2,
        learning_rate=0.01,
        optimizer_type="adam",
        scheduler_type="none",
        seed=7,
        use_tqdm=False,
        hidden_sizes=[16, 8],
        dropout=0.0,
        device="cpu",
        num_workers=0,
        model_folder=str(tmp_path / "MnistTrainer"),
        log_level="INFO",
        network="fully_connected",
    )


# YAML CONFIGURATION FIXTURES
@pytest.fixture
def temp_yaml_config(mnist_trees, tmp_path):
    """Valid YAML recipe referencing the temporary trees."""
    train, valid = mnist_trees
    yaml_content = f"""
train_data:
  root_folder: {train}
  color_mode: grayscale
val_data:
  root_folder: {valid}
  color_mode: grayscale
network:
  name: fully_connected
  hidden_sizes: [32, 16]
  dropout: 0.1
training:
  epochs: 4
  batch_size: 8
  learning_rate: 0.005
hardware:
  device: cpu
telemetry:
  model_folder: {tmp_path / "yaml_models"}
"""
    yaml_file = tmp_path / "config.yaml"
    yaml_file.write_text(yaml_content)
    return yaml_file


# MINIMAL CONFIG
@pytest.fixture
def minimal_config(mnist_trees, tmp_path):
    """Small, fast Config for training tests."""
    from digitforge.core import Config

    train, valid = mnist_trees
    return Config(
        train_data={"root_folder": train, "color_mode": "grayscale"},
        val_data={"root_folder": valid, "color_mode": "grayscale"},
        network={"name": "fully_connected", "hidden_sizes": (16, 8), "dropout": 0.0},
        training={"epochs": 2, "batch_size": 4, "learning_rate": 0.01, "use_tqdm": False},
        hardware={"device": "cpu", "num_workers": 0},
        telemetry={"model_folder": tmp_path / "MnistTrainer"},
    )
