import numpy
import pytest
import torch

from rankcorr import compute_kendall_tau
from rankcorr.utils import to_sequence


def test_list_and_generator():
    assert to_sequence([1, 2, 3]) == (1, 2, 3)
    assert to_sequence(x for x in "abc") == ("a", "b", "c")


def test_numpy_array():
    values = to_sequence(numpy.array([[1.5, 2.0], [0.5, 3.0]]))
    assert values == (1.5, 2.0, 0.5, 3.0)
    assert all(type(v) is float for v in values)


def test_torch_tensor():
    values = to_sequence(torch.tensor([3, 1, 2]))
    assert values == (3, 1, 2)
    assert all(type(v) is int for v in values)


def test_not_a_sequence():
    with pytest.raises(ValueError):
        to_sequence(42)


def test_tensor_and_array_inputs_match_lists():
    a, b = [12, 2, 1, 12, 2], [1, 4, 7, 1, 0]
    expected = compute_kendall_tau(a, b)
    assert compute_kendall_tau(torch.tensor(a), numpy.array(b)) == expected
    assert compute_kendall_tau(numpy.array(a), torch.tensor(b, dtype=torch.float)) == expected
