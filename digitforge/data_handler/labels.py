"""
Label Registry.

Bijection between label names (subfolder names) and dense, 0-based class ids.
Ids are positions in the label sequence handed over by the file index, which
is already sorted, so a model trained on one tree maps outputs to the same
names when the tree is scanned again.
"""

from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Tuple

from ..core.errors import IndexOutOfRangeError, UnknownLabelError


class LabelRegistry:
    """
    Immutable label name <-> class id mapping.

    Args:
        labels: Ordered, unique label names; id = position.

    Raises:
        ValueError: If ``labels`` contains duplicates.
    """

    __slots__ = ("_labels", "_ids")

    def __init__(self, labels: Iterable[str]):
        ordered: Tuple[str, ...] = tuple(labels)
        ids: Dict[str, int] = {label: class_id for class_id, label in enumerate(ordered)}
        if len(ids) != len(ordered):
            raise ValueError(f"Label names must be unique, got {list(ordered)}")

        self._labels = ordered
        self._ids: Mapping[str, int] = MappingProxyType(ids)

    def id_of(self, label: str) -> int:
        """Class id of ``label``; raises UnknownLabelError if never registered."""
        try:
            return self._ids[label]
        except KeyError:
            raise UnknownLabelError(f"Unknown label '{label}'.") from None

    def label_of(self, class_id: int) -> str:
        """Label of ``class_id``; raises IndexOutOfRangeError outside [0, count)."""
        if not 0 <= class_id < len(self._labels):
            raise IndexOutOfRangeError(
                f"Class id {class_id} out of range [0, {len(self._labels)})."
            )
        return self._labels[class_id]

    @property
    def labels(self) -> Tuple[str, ...]:
        return self._labels

    def as_dict(self) -> Dict[str, int]:
        return dict(self._ids)

    def __len__(self) -> int:
        return len(self._labels)

    def __contains__(self, label: object) -> bool:
        return label in self._ids

    def __iter__(self) -> Iterator[str]:
        return iter(self._labels)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LabelRegistry):
            return NotImplemented
        return self._labels == other._labels

    def __hash__(self) -> int:
        return hash(self._labels)

    def __repr__(self) -> str:
        return f"LabelRegistry({list(self._labels)!r})"
