"""Training metrics: the loss curve, accepted moves and fit durations."""

from __future__ import annotations

import contextlib
import time
from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterator, List, Tuple


@dataclass(frozen=True)
class FitTiming:
    model: str
    seconds: float


class TrainingMetrics:
    """
    Sink the trainer reports into while it searches.

    A sink shared across several fits accumulates losses and moves in call
    order, and each fit adds one timing.
    """

    def __init__(self) -> None:
        self.losses: List[Tuple[int, float]] = []
        self.moves: Counter = Counter()
        self.fits: List[FitTiming] = []

    def record_loss(self, iteration: int, loss: float) -> None:
        self.losses.append((iteration, loss))

    def record_move(self, move: str) -> None:
        self.moves[move] += 1

    @contextlib.contextmanager
    def time_fit(self, model: str) -> Iterator[None]:
        start = time.monotonic()
        try:
            yield
        finally:
            self.fits.append(FitTiming(model=model, seconds=time.monotonic() - start))

    def loss_curve(self) -> List[float]:
        return [loss for _, loss in self.losses]

    @property
    def updates(self) -> int:
        return sum(self.moves.values())

    def move_counts(self) -> Dict[str, int]:
        return dict(self.moves)
