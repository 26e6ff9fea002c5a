"""
Labeled File Index.

Scans a root folder whose immediate, non-hidden subfolders name the classes
and collects the regular, readable files inside each of them. Subfolders are
visited in lexicographic order, files within a subfolder likewise, so the
resulting sample order is identical on every run over the same tree.

Layout::

    <root>/
      <label_A>/<image files...>
      <label_B>/<image files...>

Files directly under ``<root>`` are ignored and nothing below one level is
traversed. The directory listing happens once, in :meth:`LabeledFileIndex.scan`.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Tuple, Union

from ..core.errors import EmptyDatasetError, IndexOutOfRangeError, InvalidRootError

HIDDEN_MARKER = "."


@dataclass(frozen=True)
class Sample:
    """One labeled file: its path, the label (parent folder name) and class id."""

    path: Path
    label: str
    class_id: int


def _is_readable(path: Path) -> bool:
    return os.access(path, os.R_OK)


def _is_eligible_label_dir(path: Path) -> bool:
    return (
        not path.name.startswith(HIDDEN_MARKER)
        and path.is_dir()
        and os.access(path, os.R_OK | os.X_OK)
    )


class LabeledFileIndex:
    """
    Ordered ``(file path, label)`` pairs plus the ordered label names.

    Use :meth:`scan` to build one from disk. Labels whose folder holds no
    files still appear in :attr:`labels`, so class ids do not shift when a
    folder happens to be empty.
    """

    __slots__ = ("_root", "_labels", "_entries")

    def __init__(self, root: Path, labels: Tuple[str, ...], entries: Tuple[Tuple[Path, str], ...]):
        self._root = root
        self._labels = labels
        self._entries = entries

    @classmethod
    def scan(cls, root: Union[str, Path]) -> "LabeledFileIndex":
        """
        Lists the label subfolders of ``root`` and their files.

        Raises:
            InvalidRootError: ``root`` is missing, not a directory, or unreadable.
            EmptyDatasetError: ``root`` holds no eligible label subfolder.
        """
        root = Path(root)
        if not root.is_dir() or not os.access(root, os.R_OK | os.X_OK):
            raise InvalidRootError(f"Cannot read from folder '{root}'.")

        label_dirs = sorted(
            (child for child in root.iterdir() if _is_eligible_label_dir(child)),
            key=lambda p: p.name,
        )
        if not label_dirs:
            raise EmptyDatasetError(f"Folder '{root}' contains no subfolders.")

        entries: List[Tuple[Path, str]] = []
        for label_dir in label_dirs:
            files = sorted(
                (f for f in label_dir.iterdir() if f.is_file() and _is_readable(f)),
                key=lambda p: p.name,
            )
            entries.extend((f, label_dir.name) for f in files)

        return cls(root, tuple(d.name for d in label_dirs), tuple(entries))

    @property
    def root(self) -> Path:
        return self._root

    @property
    def labels(self) -> Tuple[str, ...]:
        """Label names in class-id order."""
        return self._labels

    @property
    def entries(self) -> Tuple[Tuple[Path, str], ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> Tuple[Path, str]:
        if not 0 <= index < len(self._entries):
            raise IndexOutOfRangeError(
                f"Index {index} out of range [0, {len(self._entries)})."
            )
        return self._entries[index]

    def __iter__(self) -> Iterator[Tuple[Path, str]]:
        return iter(self._entries)
