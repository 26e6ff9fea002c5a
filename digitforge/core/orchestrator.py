"""
Training Session Lifecycle Orchestration.

RootOrchestrator prepares everything a training run needs before the first
epoch (seeds, model folder, file log, config mirror, device) and closes the
log handlers when the run ends, whether it succeeded or not. Each
collaborator is a constructor argument so tests can substitute mocks.

Typical Usage:
    >>> from digitforge.core import Config, RootOrchestrator, parse_train_args
    >>> cfg = Config.from_args(parse_train_args())
    >>> with RootOrchestrator(cfg) as orchestrator:
    ...     device = orchestrator.get_device()
    ...     run_logger = orchestrator.run_logger
"""

import logging
from typing import TYPE_CHECKING, Callable, Literal, Optional

import torch

from .environment import set_seed, to_device_obj
from .io import save_config_as_yaml
from .logger import Logger, Reporter
from .logger.reporter import ReporterProtocol
from .paths import CONFIG_FILENAME, LOGGER_NAME, setup_static_directories

if TYPE_CHECKING:  # pragma: no cover
    from .config.manifest import Config

logger = logging.getLogger(LOGGER_NAME)


# ROOT ORCHESTRATOR
class RootOrchestrator:
    """
    Central coordinator for the training session lifecycle.

    Initialization Phases:
        1. Determinism: Seeds Python, NumPy and PyTorch
        2. Filesystem Provisioning: Model folder creation
        3. Logging Initialization: File-based persistent logging in the model folder
        4. Config Persistence: YAML mirror of the validated manifest
        5. Environment Reporting: Hardware, data and hyperparameter banner

    Injectable collaborators (defaults in parentheses):
        reporter (Reporter), log_initializer (Logger.setup),
        seed_setter (set_seed), static_dir_setup (setup_static_directories),
        config_saver (save_config_as_yaml), device_resolver (to_device_obj)

    Attributes:
        cfg (Config): Validated global configuration
        run_logger (logging.Logger): Active logger instance for the session
        repro_mode (bool): Whether deterministic kernels are forced
        num_workers (int): Worker processes the DataLoaders will use
    """

    def __init__(
        self,
        cfg: "Config",
        reporter: Optional[ReporterProtocol] = None,
        log_initializer: Optional[Callable] = None,
        seed_setter: Optional[Callable] = None,
        static_dir_setup: Optional[Callable] = None,
        config_saver: Optional[Callable] = None,
        device_resolver: Optional[Callable] = None,
    ) -> None:
        self.cfg = cfg

        self.reporter = reporter if reporter is not None else Reporter()
        self._log_initializer = log_initializer or Logger.setup
        self._seed_setter = seed_setter or set_seed
        self._static_dir_setup = static_dir_setup or setup_static_directories
        self._config_saver = config_saver or save_config_as_yaml
        self._device_resolver = device_resolver or to_device_obj

        self._initialized: bool = False
        self.run_logger: Optional[logging.Logger] = None
        self._device_cache: Optional[torch.device] = None

        self.repro_mode = self.cfg.hardware.use_deterministic_algorithms
        self.num_workers = self.cfg.hardware.effective_num_workers

    def __enter__(self) -> "RootOrchestrator":
        """
        Context Manager entry: runs the initialization phases.

        If any phase raises, cleanup() is called before re-raising so that
        partially opened log handlers are released.
        """
        try:
            self.initialize_core_services()
            return self
        except Exception:
            self.cleanup()
            raise

    def __exit__(self, exc_type, exc_val, exc_tb) -> Literal[False]:
        """Context Manager exit: releases handlers; exceptions are never suppressed."""
        self.cleanup()
        return False

    # --- Private Lifecycle Phases ---

    def _phase_1_determinism(self) -> None:
        """Seeds every RNG; strict mode also forces deterministic kernels."""
        logger.debug(f"Phase 1: Applying deterministic seeding (seed={self.cfg.training.seed})")
        self._seed_setter(self.cfg.training.seed, strict=self.repro_mode)

    def _phase_2_filesystem_provisioning(self) -> None:
        logger.debug("Phase 2: Provisioning model folder")
        self._static_dir_setup(self.cfg.telemetry.model_folder)

    def _phase_3_logging_initialization(self) -> None:
        """Reconfigures handlers for file-based persistence in the model folder."""
        logger.debug("Phase 3: Initializing session logging")
        self.run_logger = self._log_initializer(
            name=LOGGER_NAME,
            log_dir=self.cfg.telemetry.model_folder,
            level=self.cfg.telemetry.log_level,
        )

    def _phase_4_config_persistence(self) -> None:
        logger.debug("Phase 4: Persisting configuration to YAML")
        self._config_saver(
            data=self.cfg, yaml_path=self.cfg.telemetry.model_folder / CONFIG_FILENAME
        )

    def _phase_5_environment_reporting(self) -> None:
        """Emits baseline environment report to active logging streams."""
        logger.debug("Phase 5: Generating environment report")
        phase_logger = self.run_logger or logging.getLogger(LOGGER_NAME)

        self.reporter.log_initial_status(
            logger_instance=phase_logger,
            cfg=self.cfg,
            device=self.get_device(),
            num_workers=self.num_workers,
        )

    def _close_logging_handlers(self) -> None:
        """Flush and close all logging handlers to release file resources."""
        if self.run_logger:
            for handler in self.run_logger.handlers[:]:
                handler.flush()
                handler.close()
                self.run_logger.removeHandler(handler)

    # --- Public Interface ---

    def initialize_core_services(self) -> None:
        """
        Executes the initialization phases in order.

        Idempotent: subsequent calls are no-ops.
        """
        if self._initialized:
            return

        self._phase_1_determinism()
        self._phase_2_filesystem_provisioning()
        self._phase_3_logging_initialization()
        self._phase_4_config_persistence()
        self._phase_5_environment_reporting()

        self._initialized = True

    def cleanup(self) -> None:
        """Releases logging handlers; safe to call more than once."""
        self._close_logging_handlers()

    def get_device(self) -> torch.device:
        """
        Resolves and caches the optimal computation device.

        Returns:
            torch.device: PyTorch device object for model execution
        """
        if self._device_cache is None:
            self._device_cache = self._device_resolver(self.cfg.hardware.device)
        return self._device_cache
