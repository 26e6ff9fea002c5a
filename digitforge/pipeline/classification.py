"""
Classification Driver.

Command line entry point ``digitforge-classify``: loads the latest
checkpoint from the model folder and classifies the given image files and
folders, logging the most probable digits of each.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from ..core import (
    LOGGER_NAME,
    DigitForgeError,
    Logger,
    NetworkConfig,
    parse_classify_args,
)
from ..inference import MnistClassifier, load_network_config

logger = logging.getLogger(LOGGER_NAME)

NO_IMAGES_HINT = (
    "You did not specify any images to classify - "
    "you can find test images in the mnist/test folder."
)


def resolve_network(model_folder: Path, network_name: Optional[str]) -> NetworkConfig:
    """
    Network geometry recorded in ``model_folder``; ``network_name``, when
    given, replaces only the name and the result is validated again.
    """
    recorded = load_network_config(model_folder)
    if not network_name:
        return recorded
    return NetworkConfig.model_validate({**recorded.model_dump(), "name": network_name})


def main(argv: Optional[List[str]] = None) -> None:
    """Classifies images from the command line."""
    args = parse_classify_args(argv)
    run_logger = Logger.setup(name=LOGGER_NAME, level=args.log_level)

    if not args.image_files:
        print(NO_IMAGES_HINT, file=sys.stderr)
        sys.exit(1)

    try:
        classifier = MnistClassifier(
            model_folder=args.model_folder,
            network=resolve_network(Path(args.model_folder), args.network),
            device=args.device,
        )
        results = classifier.classify(args.image_files, top_k=args.top_k)
        run_logger.info(f"Classified {len(results)} image(s).")
    except (DigitForgeError, ValueError, RuntimeError, yaml.YAMLError) as e:
        # RuntimeError: checkpoint weights do not fit the resolved network
        run_logger.error(f"[!] Classification failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
