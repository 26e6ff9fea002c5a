"""
Training Driver.

Command line entry point ``digitforge-train``: parses arguments (or a YAML
recipe), validates them into a Config, prepares the session through the
RootOrchestrator and runs the training phase. Any configuration or data
error ends the process with exit status 1.
"""

import logging
import sys
from typing import List, Optional

import yaml
from pydantic import ValidationError

from ..core import (
    LOGGER_NAME,
    Config,
    DigitForgeError,
    LogStyle,
    RootOrchestrator,
    parse_train_args,
)
from .phases import run_training_phase

logger = logging.getLogger(LOGGER_NAME)


def main(argv: Optional[List[str]] = None) -> None:
    """Trains a classifier from the command line."""
    args = parse_train_args(argv)

    try:
        cfg = Config.from_args(args)
    except (DigitForgeError, ValidationError, FileNotFoundError, yaml.YAMLError) as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    with RootOrchestrator(cfg) as orchestrator:
        run_logger = orchestrator.run_logger or logger
        try:
            last_checkpoint, train_losses, val_metrics, _ = run_training_phase(orchestrator)
        except KeyboardInterrupt:
            run_logger.warning("[!] Interrupted by user. Finished epochs are saved.")
            sys.exit(130)
        except (DigitForgeError, ValueError) as e:
            run_logger.error(f"[!] Training failed: {e}")
            sys.exit(1)

        final = val_metrics[-1] if val_metrics else {"accuracy": 0.0, "auc": 0.0}
        run_logger.info("")
        run_logger.info(LogStyle.HEAVY)
        run_logger.info(f"{'TRAINING SUMMARY':^80}")
        run_logger.info(LogStyle.HEAVY)
        run_logger.info(f"{LogStyle.INDENT}{LogStyle.ARROW} {'Epochs':<14}: {len(train_losses)}")
        run_logger.info(f"{LogStyle.INDENT}{LogStyle.ARROW} {'Val Accuracy':<14}: {final['accuracy']:.2%}")
        run_logger.info(f"{LogStyle.INDENT}{LogStyle.ARROW} {'Val AUC':<14}: {final['auc']:.4f}")
        run_logger.info(f"{LogStyle.INDENT}{LogStyle.ARROW} {'Checkpoint':<14}: {last_checkpoint}")


if __name__ == "__main__":
    main()
