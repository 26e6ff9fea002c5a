"""
Image-to-Tensor Normalizer.

Decodes an image file into a float32 tensor of shape [width, height, channels]
with intensities rescaled from [0, 255] to [0.0, 1.0]. Pillow handles the file
formats, torchvision the PIL-to-tensor conversion. Nothing is cached: every
call decodes the file again.
"""

from pathlib import Path
from typing import Callable, Union

import torch
from PIL import Image
from torchvision.transforms.functional import pil_to_tensor

from ..core.config.types import ColorMode
from ..core.errors import UnreadableImageError

# Decode/normalize strategy injected into ImageClassifierDataset
NormalizeFn = Callable[[Path, ColorMode], torch.Tensor]

MAX_INTENSITY = 255.0


def image_to_tensor(image: Image.Image, color_mode: ColorMode) -> torch.Tensor:
    """
    Converts a decoded PIL image into a normalized [W, H, C] float32 tensor.

    Args:
        image: Decoded image in any PIL mode.
        color_mode: GRAYSCALE yields one channel, COLOR three.
    """
    converted = image.convert(color_mode.pil_mode)
    # pil_to_tensor returns uint8 [C, H, W]
    chw = pil_to_tensor(converted)
    return chw.permute(2, 1, 0).contiguous().to(torch.float32).div_(MAX_INTENSITY)


def normalize_image(path: Union[str, Path], color_mode: ColorMode = ColorMode.COLOR) -> torch.Tensor:
    """
    Decodes ``path`` and returns its normalized [W, H, C] tensor.

    The file handle is closed before returning, whether decoding succeeds or not.

    Raises:
        UnreadableImageError: The file is missing, corrupt, or not an image.
    """
    try:
        with Image.open(path) as image:
            image.load()
            return image_to_tensor(image, ColorMode(color_mode))
    except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as e:
        raise UnreadableImageError(f"Cannot decode image '{path}': {e}") from e
