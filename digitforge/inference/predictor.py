"""
MNIST Predictor.

Rebuilds the network architecture used during training, restores the most
recent checkpoint from the model folder and classifies image files. Command
line arguments may name files or folders; folders are walked recursively.
"""

# Standard Imports
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

# Third-Party Imports
import torch

# Internal Imports
from ..core import (
    CONFIG_FILENAME,
    LOGGER_NAME,
    NetworkConfig,
    find_latest_checkpoint,
    load_config_from_yaml,
    load_model_weights,
    to_device_obj,
)
from ..models import get_model
from .classifications import Classifications
from .translator import MnistClassificationTranslator

logger = logging.getLogger(LOGGER_NAME)


def list_all_files(names: Iterable[Union[str, Path]]) -> List[Path]:
    """
    Expands file and folder names into a flat list of regular files.

    Files are kept in argument order; folder contents are walked recursively
    in sorted order. Names that do not exist are skipped with a warning.
    """
    files: List[Path] = []
    for name in names:
        path = Path(name)
        if path.is_file():
            files.append(path)
        elif path.is_dir():
            files.extend(sorted(p for p in path.rglob("*") if p.is_file()))
        else:
            logger.warning(f"Skipping '{path}': no such file or folder.")
    return files


def load_network_config(model_folder: Path) -> NetworkConfig:
    """
    Recovers the network section of the config.yaml a training run left in
    ``model_folder``; falls back to the MNIST preset when there is none.
    """
    config_path = model_folder / CONFIG_FILENAME
    if not config_path.is_file():
        return NetworkConfig()
    section = (load_config_from_yaml(config_path) or {}).get("network")
    return NetworkConfig.model_validate(section) if section else NetworkConfig()


class MnistClassifier:
    """
    Loads trained weights and classifies digit images.

    Args:
        model_folder: Folder the trainer wrote checkpoints to.
        network: Architecture the checkpoints were produced with (default: the
            one recorded in the model folder, see :func:`load_network_config`).
        device: 'auto', 'cpu', 'cuda', 'mps' or a torch.device.
        translator: Input/output adapter, defaults to the MNIST translator.

    Raises:
        CheckpointNotFoundError: If the model folder holds no checkpoint.
    """

    def __init__(
        self,
        model_folder: Union[str, Path],
        network: Optional[NetworkConfig] = None,
        device: Union[str, torch.device] = "auto",
        translator: Optional[MnistClassificationTranslator] = None,
    ):
        self.model_folder = Path(model_folder)
        self.network = network or load_network_config(self.model_folder)
        self.device = device if isinstance(device, torch.device) else to_device_obj(device)
        self.translator = translator or MnistClassificationTranslator()

        self.checkpoint = find_latest_checkpoint(self.model_folder, self.network.name)
        self.model = get_model(device=self.device, cfg=self.network, verbose=False)
        self.properties = load_model_weights(self.model, self.checkpoint, self.device)
        self.model.eval()

        logger.info(
            f"Loaded '{self.checkpoint.name}' (epoch {self.properties.get('Epoch', '?')}) "
            f"on {str(self.device).upper()}"
        )

    @torch.no_grad()
    def predict(self, path: Union[str, Path]) -> Classifications:
        """Classifies a single image file."""
        batch = self.translator.process_input(path).to(self.device)
        logits = self.model(batch)
        return self.translator.process_output(logits.cpu())

    def classify(
        self, names: Iterable[Union[str, Path]], top_k: int = Classifications.DEFAULT_TOP_K
    ) -> List[Tuple[Path, Classifications]]:
        """
        Classifies every file reachable from ``names`` and logs each result.

        Returns:
            (file, classifications) pairs in the order the files were listed.
        """
        results = []
        for image_file in list_all_files(names):
            logger.info(str(image_file))
            prediction = self.predict(image_file)
            logger.info(prediction.to_string(top_k))
            results.append((image_file, prediction))
        return results
