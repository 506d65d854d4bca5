"""Serialisable summary of a finished training run."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from pydantic import BaseModel, Field

from hill_regression.config.models import ModelKind
from hill_regression.models.linear import LinearModel
from hill_regression.training.trainer import TrainingResult


class Prediction(BaseModel):
    x: float
    y: float


class FitReport(BaseModel):
    """Fitted parameters plus the settings that produced them."""

    model: ModelKind
    weight: float
    bias: Optional[float] = None
    iterations: int
    learning_rate: float
    final_loss: float
    updates: int
    predictions: List[Prediction] = Field(default_factory=list)

    @classmethod
    def from_result(
        cls,
        kind: ModelKind,
        model: LinearModel,
        result: TrainingResult,
        iterations: int,
        learning_rate: float,
        xs_to_predict: Iterable[float] = (),
    ) -> "FitReport":
        return cls(
            model=kind,
            weight=result.params.weight,
            bias=result.params.bias if "bias" in model.parameter_names else None,
            iterations=iterations,
            learning_rate=learning_rate,
            final_loss=result.final_loss,
            updates=result.updates,
            predictions=[Prediction(x=x, y=model.predict(x)) for x in xs_to_predict],
        )

    def prediction_map(self) -> Dict[float, float]:
        return {p.x: p.y for p in self.predictions}
