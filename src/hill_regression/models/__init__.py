from hill_regression.models.linear import BiasedLinearModel, LinearModel, predict
from hill_regression.models.registry import ModelRegistry

__all__ = [
    "BiasedLinearModel",
    "LinearModel",
    "ModelRegistry",
    "predict",
]
