"""
Error Taxonomy.

Every failure raised by digitforge derives from ``DigitForgeError`` and
from the closest builtin exception, so callers can catch either the project
hierarchy or the familiar builtin (``IndexError``, ``KeyError``...).
None of these errors are retried or logged here; they surface to the caller.
"""


class DigitForgeError(Exception):
    """Base class for all errors raised by digitforge."""


class InvalidRootError(DigitForgeError, NotADirectoryError):
    """Dataset root does not exist, is not a directory, or is not readable."""


class EmptyDatasetError(DigitForgeError, ValueError):
    """Dataset root contains no eligible (non-hidden) label subdirectories."""


class UnknownLabelError(DigitForgeError, KeyError):
    """A label name was never registered."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message instead.
        return str(self.args[0]) if self.args else ""


class IndexOutOfRangeError(DigitForgeError, IndexError):
    """A sample index or class id lies outside ``[0, count)``."""


class UnreadableImageError(DigitForgeError, OSError):
    """A file could not be decoded as an image."""


class CheckpointNotFoundError(DigitForgeError, FileNotFoundError):
    """A model folder holds no saved checkpoint."""
