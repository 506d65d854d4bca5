from pathlib import Path

import pytest

from hill_regression.data import Dataset, load_table
from hill_regression.errors import DatasetError, NumericDegenerate, PreconditionViolation

REPO_DATA = Path(__file__).resolve().parents[2] / "data" / "pizza.txt"


def test_load_table_reads_two_columns(tmp_path: Path) -> None:
    path = tmp_path / "pizza.txt"
    path.write_text("Reservations  Pizzas\n13  33\n2   16\n14  32\n")
    dataset = load_table(path)
    assert len(dataset) == 3
    assert dataset.xs.tolist() == [13.0, 2.0, 14.0]
    assert dataset.ys.tolist() == [33.0, 16.0, 32.0]
    assert list(dataset) == [(13.0, 33.0), (2.0, 16.0), (14.0, 32.0)]


def test_load_table_single_row(tmp_path: Path) -> None:
    path = tmp_path / "one.txt"
    path.write_text("x y\n1 2\n")
    dataset = load_table(path)
    assert dataset.xs.tolist() == [1.0]
    assert dataset.ys.tolist() == [2.0]


def test_bundled_example_loads() -> None:
    dataset = load_table(REPO_DATA)
    assert len(dataset) == 30


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_table(tmp_path / "absent.txt")


def test_header_only_is_degenerate(tmp_path: Path) -> None:
    path = tmp_path / "empty.txt"
    path.write_text("Reservations  Pizzas\n")
    with pytest.raises(NumericDegenerate):
        load_table(path)


def test_wrong_column_count(tmp_path: Path) -> None:
    path = tmp_path / "three.txt"
    path.write_text("a b c\n1 2 3\n4 5 6\n")
    with pytest.raises(DatasetError):
        load_table(path)


def test_unparsable_row(tmp_path: Path) -> None:
    path = tmp_path / "bad.txt"
    path.write_text("a b\n1 2\nthree 4\n")
    with pytest.raises(DatasetError):
        load_table(path)


def test_dataset_is_read_only() -> None:
    dataset = Dataset.from_pairs([(1, 2), (3, 4)])
    assert dataset.xs.tolist() == [1.0, 3.0]
    with pytest.raises(ValueError):
        dataset.xs[0] = 5.0
    with pytest.raises(AttributeError):
        dataset.xs = dataset.ys  # type: ignore[misc]


def test_from_pairs_validation() -> None:
    with pytest.raises(NumericDegenerate):
        Dataset.from_pairs([])
    with pytest.raises(PreconditionViolation):
        Dataset.from_pairs([(1, 2, 3)])


def test_from_columns_length_mismatch() -> None:
    with pytest.raises(PreconditionViolation):
        Dataset.from_columns([1, 2], [1])


def test_non_finite_table_values(tmp_path: Path) -> None:
    path = tmp_path / "nan.txt"
    path.write_text("x y\n1 2\nnan 4\n")
    with pytest.raises(PreconditionViolation):
        load_table(path)


def test_from_pairs_ragged_input() -> None:
    with pytest.raises(PreconditionViolation):
        Dataset.from_pairs([(1, 2), (3,)])
