"""
Project-wide Path Constants and Static Directory Management.

Default dataset folders and model folder used by the command-line drivers.
All of them are relative: like the drivers' arguments, they resolve against
the working directory the commands are launched from.
"""

# Standard Imports
from pathlib import Path
from typing import Final

# Global logger identity used by all modules to ensure log synchronization
LOGGER_NAME: Final[str] = "digitforge"


# Input: MNIST image folders, one subfolder per digit
DATASET_DIR: Final[Path] = Path("mnist")
TRAIN_DIR: Final[Path] = DATASET_DIR / "train"
VALID_DIR: Final[Path] = DATASET_DIR / "valid"

# Output: trainer checkpoints and logs land here unless overridden
DEFAULT_MODEL_FOLDER: Final[Path] = Path("MnistTrainer")

# File names inside a model folder
CONFIG_FILENAME: Final[str] = "config.yaml"
CHECKPOINT_SUFFIX: Final[str] = ".pt"


def setup_static_directories(model_folder: Path = DEFAULT_MODEL_FOLDER) -> None:
    """
    Ensures the output folder is present before the trainer writes to it.

    Args:
        model_folder: Folder receiving checkpoints, logs and the config mirror.
    """
    model_folder.mkdir(parents=True, exist_ok=True)
