"""
Configuration Serialization & Persistence Utilities.

A model folder always carries a ``config.yaml`` mirror of the manifest it was
trained with; the classifier reads the network section back from it.
"""

# Standard Imports
import logging
import os
from enum import Enum
from pathlib import Path
from typing import Any, Dict

# Third-Party Imports
import yaml

# Internal Imports
from ..paths import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)


def save_config_as_yaml(data: Any, yaml_path: Path) -> Path:
    """
    Writes a pydantic model (or a plain mapping) to ``yaml_path``.

    The file is written next to its destination and moved into place, so a
    reader never sees a half-written config.

    Returns:
        ``yaml_path``
    """
    payload = data.model_dump(mode="json") if hasattr(data, "model_dump") else data
    try:
        _write_yaml(_to_plain(payload), yaml_path)
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Could not write configuration to '{yaml_path}': {e}")
        raise

    logger.info(f"Configuration saved → {yaml_path.name}")
    return yaml_path


def load_config_from_yaml(yaml_path: Path) -> Dict[str, Any]:
    """
    Reads a YAML file into a raw dictionary.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    if not yaml_path.exists():
        raise FileNotFoundError(f"YAML configuration file not found at: {yaml_path}")
    return yaml.safe_load(yaml_path.read_text(encoding="utf-8"))


def _to_plain(obj: Any) -> Any:
    """Paths to strings, tuples to lists, enums to their values."""
    if isinstance(obj, dict):
        return {key: _to_plain(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_to_plain(item) for item in obj]
    if isinstance(obj, Path):
        return str(obj)
    if isinstance(obj, Enum):
        return obj.value
    return obj


def _write_yaml(data: Any, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_name(f".{path.name}.tmp")
    with open(tmp_path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
        f.flush()
        os.fsync(f.fileno())
    os.replace(tmp_path, path)
