"""
Logging Management Module

One named logger serves the whole project. Drivers first configure it for the
console; once a model folder exists the RootOrchestrator reconfigures it so
that every record is also written to a rotating file next to the checkpoints.
"""

# Standard Imports
import logging
import os
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Optional, Set

# Internal Imports
from ..paths import LOGGER_NAME

LOG_FORMAT: Final[str] = "%(asctime)s - %(levelname)s - %(message)s"
DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
MAX_LOG_BYTES: Final[int] = 5 * 1024 * 1024
LOG_BACKUPS: Final[int] = 5


def _resolve_level(level: str) -> int:
    """Maps a level name to its numeric value; DEBUG=1 in the environment wins."""
    if os.getenv("DEBUG") == "1":
        return logging.DEBUG
    return getattr(logging, str(level).upper(), logging.INFO)


def _detach_handlers(target: logging.Logger) -> None:
    for handler in list(target.handlers):
        handler.close()
        target.removeHandler(handler)


class Logger:
    """
    Configures the project logger exactly once per name.

    A second construction with the same name is a no-op unless it brings a
    log directory, in which case the handlers are rebuilt with a file sink.
    Records never propagate to the root logger.

    Example:
        >>> log = Logger.setup(name=LOGGER_NAME)
        >>> log.info("Scanning mnist/train")
        >>> log = Logger.setup(name=LOGGER_NAME, log_dir=Path("MnistTrainer"))
    """

    _configured: Set[str] = set()
    _active_log_file: Optional[Path] = None

    def __init__(
        self,
        name: str = LOGGER_NAME,
        log_dir: Optional[Path] = None,
        log_to_file: bool = True,
        level: int = logging.INFO,
        max_bytes: int = MAX_LOG_BYTES,
        backup_count: int = LOG_BACKUPS,
    ):
        self.name = name
        self.log_dir = Path(log_dir) if log_dir is not None else None
        self.log_to_file = log_to_file and self.log_dir is not None
        self.level = level
        self.max_bytes = max_bytes
        self.backup_count = backup_count
        self.logger = logging.getLogger(name)

        if name not in Logger._configured or self.log_dir is not None:
            self._configure()
            Logger._configured.add(name)

    def _configure(self) -> None:
        formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)

        _detach_handlers(self.logger)
        self.logger.setLevel(self.level)
        self.logger.propagate = False

        console = logging.StreamHandler(sys.stdout)
        console.setFormatter(formatter)
        self.logger.addHandler(console)

        if self.log_to_file:
            file_handler = self._open_log_file()
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def _open_log_file(self) -> RotatingFileHandler:
        """Creates ``<log_dir>/<name>_<utc timestamp>.log`` and records it as active."""
        self.log_dir.mkdir(parents=True, exist_ok=True)
        stamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
        path = self.log_dir / f"{self.name}_{stamp}.log"
        Logger._active_log_file = path
        return RotatingFileHandler(
            path, maxBytes=self.max_bytes, backupCount=self.backup_count, encoding="utf-8"
        )

    def get_logger(self) -> logging.Logger:
        return self.logger

    @classmethod
    def get_log_file(cls) -> Optional[Path]:
        """Most recently opened log file, or None while logging to the console only."""
        return cls._active_log_file

    @classmethod
    def setup(
        cls, name: str, log_dir: Optional[Path] = None, level: str = "INFO", **kwargs
    ) -> logging.Logger:
        """
        Configures ``name`` and returns the underlying logging.Logger.

        Args:
            name: Logger identifier, normally LOGGER_NAME
            log_dir: Folder for the rotating log file (None keeps console only)
            level: Level name; unknown names fall back to INFO
            **kwargs: Forwarded to the constructor (rotation size, backups)
        """
        return cls(name=name, log_dir=log_dir, level=_resolve_level(level), **kwargs).get_logger()
