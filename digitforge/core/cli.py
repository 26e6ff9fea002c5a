"""
Argument Parsing Module.

Handles the command-line interfaces of the training and classification
drivers. Defaults are read from the Pydantic configuration schema so the
CLI never drifts from the validated manifest.
"""

import argparse
from typing import List, Optional

from .config.hardware_config import HardwareConfig
from .config.network_config import NetworkConfig
from .config.telemetry_config import TelemetryConfig
from .config.training_config import TrainingConfig
from .config.types import ColorMode
from .paths import DEFAULT_MODEL_FOLDER, TRAIN_DIR, VALID_DIR


def _add_logging_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--log-level",
        type=str,
        dest="log_level",
        default=TelemetryConfig().log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console and file logging verbosity",
    )


# TRAINING ARGUMENTS
def build_train_parser() -> argparse.ArgumentParser:
    """Configure the argument parser of the training driver."""
    parser = argparse.ArgumentParser(
        prog="digitforge-train",
        description="Train a fully connected MNIST classifier from labeled image folders.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    train_def = TrainingConfig()
    hardware_def = HardwareConfig()
    network_def = NetworkConfig()

    # ===== Global Strategy =====
    strat_group = parser.add_argument_group("Global Strategy")
    strat_group.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML config file (overrides every other option)",
    )
    strat_group.add_argument(
        "--reproducible",
        action="store_true",
        dest="reproducible",
        help="Enforce strict determinism (deterministic algorithms, num_workers=0)",
    )

    # ===== Data =====
    data_group = parser.add_argument_group("Data")
    data_group.add_argument(
        "-t",
        "--training-folder",
        type=str,
        dest="training_folder",
        default=str(TRAIN_DIR),
        help="Folder with training data.",
    )
    data_group.add_argument(
        "-v",
        "--validation-folder",
        type=str,
        dest="validation_folder",
        default=str(VALID_DIR),
        help="Folder with validation data.",
    )
    data_group.add_argument(
        "--color-mode",
        type=str,
        dest="color_mode",
        default=ColorMode.GRAYSCALE.value,
        choices=[mode.value for mode in ColorMode],
        help="Decode images as grayscale (1 channel) or color (3 channels)",
    )

    # ===== Training Hyperparameters =====
    train_group = parser.add_argument_group("Training Hyperparameters")
    train_group.add_argument(
        "-b",
        "--batch-size",
        type=int,
        dest="batch_size",
        default=train_def.batch_size,
        help="Batch size to train with.",
    )
    train_group.add_argument(
        "-e",
        "--epochs",
        type=int,
        default=train_def.epochs,
        help="Number of epochs to train with.",
    )
    train_group.add_argument(
        "--lr",
        "--learning-rate",
        type=float,
        dest="learning_rate",
        default=train_def.learning_rate,
    )
    train_group.add_argument(
        "--optimizer",
        type=str,
        dest="optimizer_type",
        default=train_def.optimizer_type,
        choices=["adam", "adamw", "sgd"],
    )
    train_group.add_argument(
        "--scheduler",
        type=str,
        dest="scheduler_type",
        default=train_def.scheduler_type,
        choices=["none", "cosine", "step"],
        help="Learning rate decay strategy",
    )
    train_group.add_argument("--seed", type=int, default=train_def.seed)
    train_group.add_argument(
        "--no-tqdm",
        action="store_false",
        dest="use_tqdm",
        default=train_def.use_tqdm,
        help="Disable the per-batch progress bar",
    )

    # ===== Network =====
    net_group = parser.add_argument_group("Network")
    net_group.add_argument(
        "--network",
        type=str,
        default=network_def.name,
        choices=["fully_connected_mnist", "fully_connected"],
        help="Network builder; the MNIST preset has a fixed topology",
    )
    net_group.add_argument(
        "--hidden-sizes",
        type=int,
        nargs="+",
        dest="hidden_sizes",
        default=list(network_def.hidden_sizes),
        help="Output width of each hidden layer",
    )
    net_group.add_argument("--dropout", type=float, default=network_def.dropout)

    # ===== System & Output =====
    sys_group = parser.add_argument_group("System & Output")
    sys_group.add_argument(
        "--device",
        type=str,
        default=hardware_def.device,
        choices=["auto", "cpu", "cuda", "mps"],
        help="Computing device",
    )
    sys_group.add_argument(
        "--num-workers",
        type=int,
        dest="num_workers",
        default=None,
        help="Data loading subprocesses",
    )
    sys_group.add_argument(
        "-m",
        "--model-folder",
        type=str,
        dest="model_folder",
        default=str(DEFAULT_MODEL_FOLDER),
        help="Folder to save training progress (logs & models) to.",
    )
    _add_logging_argument(sys_group)

    return parser


def parse_train_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments for the training driver.

    Args:
        argv: Argument list (defaults to ``sys.argv[1:]``)

    Returns:
        Parsed arguments namespace
    """
    return build_train_parser().parse_args(argv)


# CLASSIFICATION ARGUMENTS
def build_classify_parser() -> argparse.ArgumentParser:
    """Configure the argument parser of the classification driver."""
    parser = argparse.ArgumentParser(
        prog="digitforge-classify",
        description="Classify digit images with a previously trained model.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "-m",
        "--model-folder",
        type=str,
        dest="model_folder",
        default=str(DEFAULT_MODEL_FOLDER),
        help="Folder to load trained model from.",
    )
    parser.add_argument(
        "--network",
        type=str,
        default=None,
        help="Network the checkpoints were trained with (default: read from the model folder's config.yaml)",
    )
    parser.add_argument(
        "--device",
        type=str,
        default=HardwareConfig().device,
        choices=["auto", "cpu", "cuda", "mps"],
    )
    parser.add_argument(
        "--top-k",
        type=int,
        dest="top_k",
        default=5,
        help="Number of most probable classes to report per image",
    )
    _add_logging_argument(parser)
    parser.add_argument(
        "image_files",
        nargs="*",
        default=[],
        help="Image files to classify, a list of files and/or folders.",
    )
    return parser


def parse_classify_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments for the classification driver."""
    return build_classify_parser().parse_args(argv)
