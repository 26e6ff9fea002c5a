"""
Test Suite for the error taxonomy.

Each error is catchable both as a DigitForgeError and as its closest
builtin exception.
"""

# Third-Party Imports
import pytest

# Internal Imports
from digitforge.core.errors import (
    CheckpointNotFoundError,
    DigitForgeError,
    EmptyDatasetError,
    IndexOutOfRangeError,
    InvalidRootError,
    UnknownLabelError,
    UnreadableImageError,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    "error,builtin",
    [
        (InvalidRootError, NotADirectoryError),
        (EmptyDatasetError, ValueError),
        (UnknownLabelError, KeyError),
        (IndexOutOfRangeError, IndexError),
        (UnreadableImageError, OSError),
        (CheckpointNotFoundError, FileNotFoundError),
    ],
)
def test_error_hierarchy(error, builtin):
    assert issubclass(error, DigitForgeError)
    assert issubclass(error, builtin)

    with pytest.raises(builtin):
        raise error("boom")


@pytest.mark.unit
def test_unknown_label_message_is_not_quoted():
    assert str(UnknownLabelError("Unknown label 'x'.")) == "Unknown label 'x'."
    assert str(UnknownLabelError()) == ""
