# tests/test_mathutil.py

import pytest

from solarhijri.core.mathutil import true_mod
from solarhijri.core.errors import InvalidArgumentError


def test_true_mod_is_floor_mod():
    assert true_mod(7, 3) == 1
    assert true_mod(-1, 7) == 6
    assert true_mod(-2820, 2820) == 0
    assert true_mod(-473, 2820) == 2347


def test_true_mod_floats():
    assert true_mod(-0.5, 7) == pytest.approx(6.5)
    assert true_mod(1029982.0, 1029983) == 1029982.0
    assert 0.0 <= true_mod(-1e-9, 1.0) < 1.0


@pytest.mark.parametrize("b", [0, -7, 0.0])
def test_true_mod_rejects_non_positive_modulus(b):
    with pytest.raises(InvalidArgumentError):
        true_mod(5, b)


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        true_mod(5, 0)
