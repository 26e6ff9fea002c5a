"""Narrated, runnable introductions to the underlying tensor library."""

from .tensor_walkthrough import run_walkthrough

__all__ = ["run_walkthrough"]
