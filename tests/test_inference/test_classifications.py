"""
Test Suite for Classifications.
"""

# Third-Party Imports
import pytest
import torch

# Internal Imports
from digitforge.inference import Classification, Classifications


@pytest.fixture
def result():
    return Classifications(["0", "1", "2", "3"], [0.1, 0.6, 0.25, 0.05])


@pytest.mark.unit
def test_best(result):
    assert result.best() == Classification("1", 0.6)


@pytest.mark.unit
def test_top_k_is_sorted(result):
    assert [c.class_name for c in result.top_k(3)] == ["1", "2", "0"]


@pytest.mark.unit
def test_top_k_larger_than_classes(result):
    assert len(result.top_k(10)) == 4


@pytest.mark.unit
def test_top_k_rejects_non_positive(result):
    with pytest.raises(ValueError):
        result.top_k(0)


@pytest.mark.unit
def test_items_keep_class_order(result):
    assert [c.class_name for c in result.items()] == ["0", "1", "2", "3"]
    assert result.get("2").probability == 0.25
    with pytest.raises(KeyError):
        result.get("9")


@pytest.mark.unit
def test_ties_prefer_lower_class_id():
    tied = Classifications(["a", "b"], [0.5, 0.5])

    assert tied.best().class_name == "a"


@pytest.mark.unit
def test_accepts_tensor_probabilities():
    result = Classifications(["x", "y"], torch.tensor([[0.3, 0.7]]))

    assert result.probabilities == pytest.approx([0.3, 0.7])
    assert len(result) == 2


@pytest.mark.unit
def test_length_mismatch_rejected():
    with pytest.raises(ValueError):
        Classifications(["a", "b"], [1.0])
    with pytest.raises(ValueError):
        Classifications([], [])


@pytest.mark.unit
def test_string_form_lists_top_classes(result):
    text = str(result)

    assert text.startswith("[") and text.endswith("]")
    assert '"class": "1", "probability": 0.60000' in text
    assert text.index('"1"') < text.index('"2"')
    assert len(result.to_string(1).splitlines()) == 3
    assert "best='1'" in repr(result)
