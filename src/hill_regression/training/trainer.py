"""Hill-climbing trainer: discrete coordinate search with a fixed iteration budget."""

from __future__ import annotations

import contextlib
import math
import numbers
from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from hill_regression.errors import PreconditionViolation
from hill_regression.models.linear import BiasedLinearModel, LinearModel
from hill_regression.training.loss import ArrayLike, squared_error_mean, validate_dataset
from hill_regression.utils import TrainingMetrics, get_logger

logger = get_logger("trainer")

ProgressCallback = Callable[["ProgressRecord"], None]


@dataclass(frozen=True)
class LinearParams:
    """Fitted parameters. ``bias`` stays 0.0 for the model without intercept."""

    weight: float = 0.0
    bias: float = 0.0


@dataclass(frozen=True)
class ProgressRecord:
    """Loss observed at the start of one iteration."""

    iteration: int
    loss: float


@dataclass
class TrainingState:
    """Current position of the search."""

    iteration: int = 0
    params: Tuple[float, ...] = ()
    current_loss: float = float("inf")
    updates: int = 0
    last_move: str = ""


@dataclass
class TrainingResult:
    params: LinearParams
    final_loss: float
    updates: int
    history: List[ProgressRecord] = field(default_factory=list)

    @property
    def losses(self) -> List[float]:
        return [record.loss for record in self.history]


def _check_budget(iterations: object, learning_rate: object) -> None:
    if isinstance(iterations, bool) or not isinstance(iterations, numbers.Integral):
        raise PreconditionViolation(f"iterations must be an integer, got {iterations!r}")
    if iterations < 0:
        raise PreconditionViolation(f"iterations must be non-negative, got {iterations}")
    if isinstance(learning_rate, bool) or not isinstance(learning_rate, numbers.Real):
        raise PreconditionViolation(f"learning_rate must be a real number, got {learning_rate!r}")
    if not math.isfinite(learning_rate) or learning_rate <= 0:
        raise PreconditionViolation(f"learning_rate must be positive and finite, got {learning_rate}")


class HillClimbTrainer:
    """
    Fits a linear model by nudging one coordinate at a time.

    Every iteration evaluates the loss at the current parameters, then tries
    ``+learning_rate`` and ``-learning_rate`` on each coordinate in the model's
    ``parameter_names`` order. The first candidate with a strictly lower loss is
    taken and the rest are skipped, so at most one coordinate moves per
    iteration and ties leave the state unchanged.

    The loop runs ``iterations + 1`` times with no early exit. Once no candidate
    improves, the parameters stay fixed for the remainder of the budget.
    """

    def __init__(
        self,
        iterations: int,
        learning_rate: float,
        metrics: Optional[TrainingMetrics] = None,
        progress: Optional[ProgressCallback] = None,
    ) -> None:
        _check_budget(iterations, learning_rate)
        self.iterations = int(iterations)
        self.learning_rate = float(learning_rate)
        self.metrics = metrics
        self.progress = progress
        self.state = TrainingState()

    def _candidates(self, names: Sequence[str]) -> Iterator[Tuple[str, Tuple[float, ...]]]:
        params = self.state.params
        for dim, name in enumerate(names):
            for sign, delta in (("+", self.learning_rate), ("-", -self.learning_rate)):
                candidate = list(params)
                candidate[dim] = params[dim] + delta
                yield f"{name}{sign}", tuple(candidate)

    def step(self, model: LinearModel, xs: np.ndarray, ys: np.ndarray) -> ProgressRecord:
        """Run a single iteration against validated arrays and return its progress record."""
        current_loss = squared_error_mean(xs, ys, *self.state.params)
        self.state.current_loss = current_loss
        self.state.last_move = ""
        for move, candidate in self._candidates(model.parameter_names):
            if squared_error_mean(xs, ys, *candidate) < current_loss:
                self.state.params = candidate
                self.state.updates += 1
                self.state.last_move = move
                model.set_parameters(candidate)
                if self.metrics is not None:
                    self.metrics.record_move(move)
                break

        record = ProgressRecord(iteration=self.state.iteration, loss=current_loss)
        logger.info(f"Iteration {record.iteration:4d} => Loss: {record.loss:.6f}")
        if self.metrics is not None:
            self.metrics.record_loss(record.iteration, current_loss)
        if self.progress is not None:
            self.progress(record)
        self.state.iteration += 1
        return record

    def fit(self, model: LinearModel, xs: ArrayLike, ys: ArrayLike) -> TrainingResult:
        """
        Reset ``model`` to zero parameters and train it on ``(xs, ys)``.

        Raises:
            PreconditionViolation: if xs and ys differ in length, are not 1-D, or hold NaN/inf.
            NumericDegenerate: if the dataset is empty.
        """
        x_arr, y_arr = validate_dataset(xs, ys)
        model.reset()
        self.state = TrainingState(params=model.parameters())
        history: List[ProgressRecord] = []

        timer = (
            self.metrics.time_fit(type(model).__name__)
            if self.metrics is not None
            else contextlib.nullcontext()
        )
        with timer:
            for _ in range(self.iterations + 1):
                history.append(self.step(model, x_arr, y_arr))

        final_loss = squared_error_mean(x_arr, y_arr, *self.state.params)
        logger.debug(
            f"Finished {len(history)} iterations with {self.state.updates} updates, "
            f"final loss {final_loss:.6f}"
        )
        return TrainingResult(
            params=LinearParams(weight=model.weight, bias=model.bias),
            final_loss=final_loss,
            updates=self.state.updates,
            history=history,
        )


def train(xs: ArrayLike, ys: ArrayLike, iterations: int, learning_rate: float) -> float:
    """Fit ``y = x * weight`` and return the weight."""
    result = HillClimbTrainer(iterations, learning_rate).fit(LinearModel(), xs, ys)
    return result.params.weight


def train_with_bias(
    xs: ArrayLike, ys: ArrayLike, iterations: int, learning_rate: float
) -> Tuple[float, float]:
    """Fit ``y = x * weight + bias`` and return ``(weight, bias)``."""
    result = HillClimbTrainer(iterations, learning_rate).fit(BiasedLinearModel(), xs, ys)
    return result.params.weight, result.params.bias
