import numpy as np
import pytest

from hill_regression.errors import NumericDegenerate, PreconditionViolation
from hill_regression.training import mean_squared_error, validate_dataset


def test_mean_squared_error_values() -> None:
    xs = [1.0, 2.0, 3.0]
    ys = [2.0, 4.0, 6.0]
    assert mean_squared_error(xs, ys, 2.0) == 0.0
    # residuals 1, 2, 3 -> (1 + 4 + 9) / 3
    assert mean_squared_error(xs, ys, 3.0) == pytest.approx(14.0 / 3.0)
    # with bias 1: residuals 1, 1, 1
    assert mean_squared_error(xs, ys, 2.0, 1.0) == pytest.approx(1.0)


def test_mean_squared_error_single_observation() -> None:
    assert mean_squared_error([2.0], [1.0], 0.0) == 1.0


def test_mean_squared_error_returns_float() -> None:
    assert isinstance(mean_squared_error(np.arange(3), np.arange(3), 1.0), float)


def test_length_mismatch_fails_fast() -> None:
    with pytest.raises(PreconditionViolation):
        mean_squared_error([1.0, 2.0], [1.0], 1.0)


def test_empty_dataset_is_degenerate() -> None:
    with pytest.raises(NumericDegenerate):
        mean_squared_error([], [], 1.0)


def test_non_one_dimensional_input_rejected() -> None:
    with pytest.raises(PreconditionViolation):
        mean_squared_error([[1.0, 2.0]], [[1.0, 2.0]], 1.0)


def test_errors_are_value_errors() -> None:
    with pytest.raises(ValueError):
        mean_squared_error([1.0], [], 1.0)


def test_validate_dataset_returns_read_only_copies() -> None:
    xs = [1, 2, 3]
    ys = np.array([4.0, 5.0, 6.0])
    x_arr, y_arr = validate_dataset(xs, ys)
    assert x_arr.dtype == float
    with pytest.raises(ValueError):
        x_arr[0] = 10.0
    assert ys.flags.writeable
    assert y_arr is not ys


@pytest.mark.parametrize(
    "xs, ys",
    [
        ([1.0, float("nan")], [2.0, 4.0]),
        ([1.0, 2.0], [2.0, float("inf")]),
        ([-np.inf, 2.0], [2.0, 4.0]),
    ],
)
def test_non_finite_values_rejected(xs, ys) -> None:
    with pytest.raises(PreconditionViolation):
        mean_squared_error(xs, ys, 1.0)
