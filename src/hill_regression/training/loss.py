"""Mean squared error over a full dataset."""

from __future__ import annotations

from typing import Sequence, Tuple, Union

import numpy as np

from hill_regression.errors import NumericDegenerate, PreconditionViolation
from hill_regression.models.linear import predict

ArrayLike = Union[Sequence[float], np.ndarray]


def validate_dataset(xs: ArrayLike, ys: ArrayLike) -> Tuple[np.ndarray, np.ndarray]:
    """
    Check the dataset invariants and return read-only float copies of both columns.

    Raises:
        PreconditionViolation: if either column is not one-dimensional, the lengths differ,
            or a value is NaN or infinite.
        NumericDegenerate: if the dataset is empty.
    """
    x_arr = np.array(xs, dtype=float)
    y_arr = np.array(ys, dtype=float)
    if x_arr.ndim != 1 or y_arr.ndim != 1:
        raise PreconditionViolation(
            f"xs and ys must be one-dimensional, got shapes {x_arr.shape} and {y_arr.shape}"
        )
    if len(x_arr) != len(y_arr):
        raise PreconditionViolation(f"xs and ys differ in length ({len(x_arr)} != {len(y_arr)})")
    if len(x_arr) == 0:
        raise NumericDegenerate("Mean squared error is undefined for an empty dataset")
    if not (np.isfinite(x_arr).all() and np.isfinite(y_arr).all()):
        raise PreconditionViolation("xs and ys must contain only finite values")
    x_arr.setflags(write=False)
    y_arr.setflags(write=False)
    return x_arr, y_arr


def squared_error_mean(xs: np.ndarray, ys: np.ndarray, weight: float, bias: float = 0.0) -> float:
    """Unchecked MSE for arrays that already passed validate_dataset."""
    residuals = predict(xs, weight, bias) - ys
    return float(np.mean(residuals ** 2))


def mean_squared_error(xs: ArrayLike, ys: ArrayLike, weight: float, bias: float = 0.0) -> float:
    """Average of ``(x_i * weight + bias - y_i) ** 2`` over the dataset."""
    x_arr, y_arr = validate_dataset(xs, ys)
    return squared_error_mean(x_arr, y_arr, weight, bias)
