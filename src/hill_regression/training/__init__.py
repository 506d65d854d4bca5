from hill_regression.training.loss import mean_squared_error, validate_dataset
from hill_regression.training.trainer import (
    HillClimbTrainer,
    LinearParams,
    ProgressRecord,
    TrainingResult,
    TrainingState,
    train,
    train_with_bias,
)

__all__ = [
    "HillClimbTrainer",
    "LinearParams",
    "ProgressRecord",
    "TrainingResult",
    "TrainingState",
    "mean_squared_error",
    "train",
    "train_with_bias",
    "validate_dataset",
]
