"""
MNIST Classification Translator.

Adapts an image file into the batch tensor the MNIST network consumes and
turns raw network scores back into named class probabilities.

Key Features:
    * Input: grayscale decode, [0, 1] scaling, reshape to [1, 28, 28, 1]
    * Preview: ASCII rendering of the digit logged at DEBUG level
    * Output: softmax over the class dimension, class names "0".."9"
"""

# Standard Imports
import logging
from pathlib import Path
from typing import Sequence, Union

# Third-Party Imports
import torch

# Internal Imports
from ..core import LOGGER_NAME, ColorMode
from ..data_handler import NormalizeFn, normalize_image
from .classifications import Classifications

logger = logging.getLogger(LOGGER_NAME)

MNIST_WIDTH = 28
MNIST_HEIGHT = 28
MNIST_CLASS_NAMES = tuple(str(digit) for digit in range(10))

# Intensity thresholds of the ASCII preview
LIGHT_THRESHOLD = 0.33
DARK_THRESHOLD = 0.66


def render_ascii(image: torch.Tensor) -> str:
    """
    Renders a [W, H, 1] (or [1, W, H, 1]) intensity tensor as text.

    Pixels below 0.33 become ' ', below 0.66 'x', anything brighter 'X'.
    One text line per image row.
    """
    plane = image.reshape(image.shape[-3], image.shape[-2], -1)[..., 0]
    width, height = plane.shape
    rows = []
    for y in range(height):
        row = []
        for x in range(width):
            value = float(plane[x, y])
            if value < LIGHT_THRESHOLD:
                row.append(" ")
            elif value < DARK_THRESHOLD:
                row.append("x")
            else:
                row.append("X")
        rows.append("".join(row))
    return "\n".join(rows)


class MnistClassificationTranslator:
    """
    Converts image files to network input and logits to Classifications.

    Args:
        class_names: Output names in class-id order.
        normalize_fn: Decode/normalize strategy, grayscale is always requested.
    """

    def __init__(
        self,
        class_names: Sequence[str] = MNIST_CLASS_NAMES,
        normalize_fn: NormalizeFn = normalize_image,
    ):
        self.class_names = tuple(class_names)
        self.normalize_fn = normalize_fn

    def process_input(self, path: Union[str, Path]) -> torch.Tensor:
        """
        Decodes ``path`` into a [1, 28, 28, 1] float tensor.

        Raises:
            UnreadableImageError: The file cannot be decoded.
            ValueError: The image is not 28x28 pixels.
        """
        image = self.normalize_fn(Path(path), ColorMode.GRAYSCALE)
        if tuple(image.shape[:2]) != (MNIST_WIDTH, MNIST_HEIGHT):
            raise ValueError(
                f"Expected a {MNIST_WIDTH}x{MNIST_HEIGHT} image, "
                f"got {image.shape[0]}x{image.shape[1]} from '{path}'."
            )

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Preview of '{path}':\n{render_ascii(image)}")

        return image.reshape(1, MNIST_WIDTH, MNIST_HEIGHT, 1)

    def process_output(self, logits: torch.Tensor) -> Classifications:
        """
        Applies softmax over the class dimension of a single prediction.

        Args:
            logits: Scores of shape [num_classes] or [1, num_classes].
        """
        scores = logits.detach().reshape(-1, logits.shape[-1])[0]
        if scores.numel() != len(self.class_names):
            raise ValueError(
                f"Network produced {scores.numel()} scores for {len(self.class_names)} classes."
            )
        probabilities = torch.softmax(scores.float(), dim=0)
        return Classifications(self.class_names, probabilities)
