"""
Telemetry & Environment Reporting Engine.

Renders the banner logged once per training session: where the run executes,
which folders it reads, the network it builds and the hyperparameters it
optimizes with. Sections are plain ``(label, value)`` rows so new entries only
touch the row builders.
"""

# Standard Imports
import logging
from typing import TYPE_CHECKING, Any, List, Protocol, Tuple

# Third-Party Imports
import torch
from pydantic import BaseModel, ConfigDict

# Internal Imports
from ..environment import get_cuda_name

if TYPE_CHECKING:  # pragma: no cover
    from ..config import Config

Row = Tuple[str, Any]


class LogStyle:
    """Separators and markers shared by every banner."""

    HEAVY = "━" * 80
    LIGHT = "─" * 80

    ARROW = "»"
    WARNING = "⚠"

    INDENT = "  "


class ReporterProtocol(Protocol):
    """What RootOrchestrator needs from a reporter."""

    def log_initial_status(
        self,
        logger_instance: logging.Logger,
        cfg: "Config",
        device: torch.device,
        num_workers: int,
    ) -> None: ...


class Reporter(BaseModel):
    """Logs the start-of-run environment banner."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    def log_initial_status(
        self,
        logger_instance: logging.Logger,
        cfg: "Config",
        device: torch.device,
        num_workers: int,
    ) -> None:
        """
        Args:
            logger_instance: Active session logger
            cfg: Validated manifest
            device: Device the run was resolved to
            num_workers: DataLoader worker processes
        """
        logger_instance.info("")
        logger_instance.info(LogStyle.HEAVY)
        logger_instance.info(f"{'ENVIRONMENT INITIALIZATION':^80}")
        logger_instance.info(LogStyle.HEAVY)

        self._log_hardware_section(logger_instance, cfg, device, num_workers)

        train, val, net = cfg.train_data, cfg.val_data, cfg.network
        sections: List[Tuple[str, List[Row]]] = [
            (
                "[DATASET]",
                [
                    ("Training Folder", train.root_folder),
                    ("Validation Folder", val.root_folder),
                    ("Color Mode", train.color_mode.value),
                ],
            ),
            (
                "[NETWORK]",
                [
                    ("Architecture", net.name),
                    ("Input Shape", list(net.input_shape)),
                    ("Hidden Sizes", list(net.hidden_sizes)),
                    ("Activation", net.activation),
                    ("Dropout", net.dropout),
                ],
            ),
            ("[HYPERPARAMETERS]", self._hyperparameter_rows(cfg)),
            ("[FILESYSTEM]", [("Model Folder", cfg.telemetry.model_folder)]),
        ]
        for title, rows in sections:
            logger_instance.info("")
            self._log_rows(logger_instance, title, rows)

        logger_instance.info(LogStyle.HEAVY)
        logger_instance.info("")

    @staticmethod
    def _log_rows(logger_instance: logging.Logger, title: str, rows: List[Row]) -> None:
        logger_instance.info(title)
        for label, value in rows:
            logger_instance.info(f"{LogStyle.INDENT}{LogStyle.ARROW} {label:<18}: {value}")

    @staticmethod
    def _hyperparameter_rows(cfg: "Config") -> List[Row]:
        training = cfg.training
        return [
            ("Epochs", training.epochs),
            ("Batch Size", training.batch_size),
            ("Optimizer", training.optimizer_type),
            ("Initial LR", f"{training.learning_rate:.2e}"),
            ("Scheduler", training.scheduler_type),
            ("Global Seed", training.seed),
        ]

    def _log_hardware_section(
        self,
        logger_instance: logging.Logger,
        cfg: "Config",
        device: torch.device,
        num_workers: int,
    ) -> None:
        """Device rows, plus a warning when a requested accelerator fell back to CPU."""
        rows: List[Row] = [("Active Device", str(device).upper())]
        if device.type == "cuda":
            rows.append(("GPU Model", get_cuda_name()))
        rows.append(("DataLoader", f"{num_workers} workers"))
        self._log_rows(logger_instance, "[HARDWARE]", rows)

        requested = cfg.hardware.device.lower()
        if requested not in ("cpu", "auto") and device.type == "cpu":
            logger_instance.warning(
                f"{LogStyle.INDENT}{LogStyle.WARNING} FALLBACK: Requested '{requested}' "
                "unavailable, using CPU"
            )
