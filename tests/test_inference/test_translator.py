"""
Test Suite for the MNIST classification translator.
"""

# Standard Imports
from unittest.mock import MagicMock

# Third-Party Imports
import pytest
import torch

# Internal Imports
from digitforge.core.config import ColorMode
from digitforge.core.errors import UnreadableImageError
from digitforge.inference import MNIST_CLASS_NAMES, MnistClassificationTranslator, render_ascii


@pytest.fixture
def translator():
    return MnistClassificationTranslator()


@pytest.mark.unit
def test_class_names_are_digits():
    assert MNIST_CLASS_NAMES == ("0", "1", "2", "3", "4", "5", "6", "7", "8", "9")


@pytest.mark.unit
def test_process_input_shape(translator, image_writer, tmp_path):
    path = image_writer(tmp_path / "digit.png", value=255)

    batch = translator.process_input(path)

    assert batch.shape == (1, 28, 28, 1)
    assert torch.all(batch == 1.0)


@pytest.mark.unit
def test_process_input_always_grayscale(image_writer, tmp_path):
    fake = MagicMock(return_value=torch.zeros(28, 28, 1))
    translator = MnistClassificationTranslator(normalize_fn=fake)

    translator.process_input(tmp_path / "x.png")

    assert fake.call_args.args[1] is ColorMode.GRAYSCALE


@pytest.mark.unit
def test_process_input_converts_color_files(translator, image_writer, tmp_path):
    path = image_writer(tmp_path / "rgb.png", value=(0, 0, 0), mode="RGB")

    assert translator.process_input(path).shape == (1, 28, 28, 1)


@pytest.mark.unit
def test_process_input_rejects_wrong_size(translator, image_writer, tmp_path):
    path = image_writer(tmp_path / "big.png", size=(32, 32))

    with pytest.raises(ValueError, match="28x28"):
        translator.process_input(path)


@pytest.mark.unit
def test_process_input_unreadable(translator, tmp_path):
    path = tmp_path / "bad.png"
    path.write_text("nope")

    with pytest.raises(UnreadableImageError):
        translator.process_input(path)


@pytest.mark.unit
def test_process_output_softmax(translator):
    logits = torch.zeros(1, 10)
    logits[0, 7] = 10.0

    result = translator.process_output(logits)

    assert result.best().class_name == "7"
    assert sum(result.probabilities) == pytest.approx(1.0)
    assert result.class_names == list(MNIST_CLASS_NAMES)


@pytest.mark.unit
def test_process_output_uniform_logits(translator):
    result = translator.process_output(torch.zeros(10))

    assert all(p == pytest.approx(0.1) for p in result.probabilities)


@pytest.mark.unit
def test_process_output_wrong_width(translator):
    with pytest.raises(ValueError):
        translator.process_output(torch.zeros(1, 3))


# ASCII PREVIEW
@pytest.mark.unit
def test_render_ascii_thresholds():
    image = torch.zeros(3, 1, 1)
    image[0, 0, 0] = 0.2
    image[1, 0, 0] = 0.5
    image[2, 0, 0] = 0.9

    assert render_ascii(image) == " xX"


@pytest.mark.unit
def test_render_ascii_threshold_boundaries():
    image = torch.tensor([0.33, 0.66]).reshape(2, 1, 1)

    assert render_ascii(image) == "xX"


@pytest.mark.unit
def test_render_ascii_rows_are_image_rows():
    """Width 2, height 3: three lines of two characters."""
    image = torch.zeros(2, 3, 1)
    image[1, 2, 0] = 1.0

    assert render_ascii(image) == "  \n  \n X"


@pytest.mark.unit
def test_render_ascii_accepts_batch_tensor():
    assert render_ascii(torch.ones(1, 28, 28, 1)).splitlines()[0] == "X" * 28
