"""
Pipeline Package

Phase functions and the command line drivers for training and
classification.
"""

from .phases import run_data_phase, run_training_phase

__all__ = [
    "run_data_phase",
    "run_training_phase",
]
