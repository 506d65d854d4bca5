"""Dataset container and loader for two-column observation tables."""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Tuple, Union

import numpy as np

from hill_regression.errors import DatasetError, NumericDegenerate, PreconditionViolation
from hill_regression.training.loss import ArrayLike, validate_dataset
from hill_regression.utils import get_logger

logger = get_logger("data")


@dataclass(frozen=True, eq=False)
class Dataset:
    """Paired observations held as two read-only float arrays of equal length."""

    xs: np.ndarray
    ys: np.ndarray

    @classmethod
    def from_columns(cls, xs: ArrayLike, ys: ArrayLike) -> "Dataset":
        x_arr, y_arr = validate_dataset(xs, ys)
        return cls(xs=x_arr, ys=y_arr)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[float, float]]) -> "Dataset":
        try:
            table = np.array(list(pairs), dtype=float)
        except (TypeError, ValueError) as exc:
            raise PreconditionViolation(f"Expected (x, y) pairs of numbers: {exc}") from exc
        if table.size == 0:
            raise NumericDegenerate("Dataset must contain at least one observation")
        if table.ndim != 2 or table.shape[1] != 2:
            raise PreconditionViolation(f"Expected (x, y) pairs, got array of shape {table.shape}")
        return cls.from_columns(table[:, 0], table[:, 1])

    def __len__(self) -> int:
        return len(self.xs)

    def __iter__(self) -> Iterator[Tuple[float, float]]:
        return zip(self.xs.tolist(), self.ys.tolist())


def load_table(path: Union[str, Path]) -> Dataset:
    """
    Load a whitespace-delimited table with one header line and two numeric columns.

    Raises:
        FileNotFoundError: if the file does not exist.
        DatasetError: if the body does not parse as exactly two numeric columns.
        NumericDegenerate: if the table has a header but no rows.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Dataset file not found: {path}")
    try:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", UserWarning)
            columns = np.loadtxt(path, skiprows=1, ndmin=2, unpack=True)
    except ValueError as exc:
        raise DatasetError(f"Could not parse {path}: {exc}") from exc
    if columns.size == 0:
        raise NumericDegenerate(f"Dataset {path} contains no rows")
    if columns.shape[0] != 2:
        raise DatasetError(f"Expected 2 columns in {path}, found {columns.shape[0]}")
    dataset = Dataset.from_columns(columns[0], columns[1])
    logger.info(f"Loaded {len(dataset)} observations from {path}")
    return dataset
