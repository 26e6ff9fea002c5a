"""
Telemetry and Reporting Package.

Centralizes logger initialization and the run summary emitted at the start
of training and classification sessions.
"""

from .logger import Logger
from .reporter import LogStyle, Reporter, ReporterProtocol

__all__ = [
    "Logger",
    "LogStyle",
    "Reporter",
    "ReporterProtocol",
]
