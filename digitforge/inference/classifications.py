"""
Classification Results.

Pairs the ordered class names of a classifier with the probabilities it
produced for one input, and answers the usual questions about them: which
class won, which k classes ranked highest, and how to print the ranking.
"""

# Standard Imports
from dataclasses import dataclass
from typing import List, Sequence

# Third-Party Imports
import torch


@dataclass(frozen=True)
class Classification:
    """One class name with its probability."""

    class_name: str
    probability: float


class Classifications:
    """
    Probability distribution over named classes.

    Args:
        class_names: Names in class-id order.
        probabilities: One probability per class, same order. Tensors are
            converted to plain floats.

    Raises:
        ValueError: If names and probabilities differ in length or are empty.
    """

    DEFAULT_TOP_K = 5

    def __init__(self, class_names: Sequence[str], probabilities):
        if isinstance(probabilities, torch.Tensor):
            probabilities = probabilities.detach().flatten().cpu().tolist()
        probabilities = [float(p) for p in probabilities]

        if len(class_names) != len(probabilities):
            raise ValueError(
                f"Got {len(class_names)} class names but {len(probabilities)} probabilities."
            )
        if not class_names:
            raise ValueError("Classifications need at least one class.")

        self._class_names = tuple(str(name) for name in class_names)
        self._probabilities = tuple(probabilities)

    @property
    def class_names(self) -> List[str]:
        return list(self._class_names)

    @property
    def probabilities(self) -> List[float]:
        return list(self._probabilities)

    def items(self) -> List[Classification]:
        """All classes in class-id order."""
        return [Classification(n, p) for n, p in zip(self._class_names, self._probabilities)]

    def best(self) -> Classification:
        """The most probable class; ties go to the lower class id."""
        return self.top_k(1)[0]

    def top_k(self, k: int = DEFAULT_TOP_K) -> List[Classification]:
        """
        The ``k`` most probable classes, highest first.

        ``k`` larger than the class count returns every class.
        """
        if k < 1:
            raise ValueError(f"k must be positive, got {k}")
        ranked = sorted(self.items(), key=lambda c: -c.probability)
        return ranked[:k]

    def get(self, class_name: str) -> Classification:
        """Looks up one class by name; raises KeyError when absent."""
        for item in self.items():
            if item.class_name == class_name:
                return item
        raise KeyError(class_name)

    def __len__(self) -> int:
        return len(self._class_names)

    def __repr__(self) -> str:
        best = self.best()
        return f"Classifications(best='{best.class_name}', p={best.probability:.4f}, classes={len(self)})"

    def to_string(self, k: int = DEFAULT_TOP_K) -> str:
        """Lists the k most probable classes, one JSON-like entry per line."""
        lines = ["["]
        for item in self.top_k(k):
            lines.append(f'\t{{"class": "{item.class_name}", "probability": {item.probability:.5f}}},')
        lines.append("]")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_string()
