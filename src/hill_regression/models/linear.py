"""Linear predictor and the two model shapes trained by coordinate search."""

from __future__ import annotations

from typing import ClassVar, Dict, Mapping, Sequence, Tuple, Union

import numpy as np

Number = Union[int, float]


def predict(x: Union[Number, Sequence[Number], np.ndarray], weight: float, bias: float = 0.0):
    """
    Apply ``x * weight + bias`` elementwise.

    A scalar input yields a Python float; a sequence yields a numpy array of the
    same length and order (an empty sequence yields an empty array).
    """
    if np.ndim(x) == 0:
        return float(x) * weight + bias
    return np.asarray(x, dtype=float) * weight + bias


class LinearModel:
    """Line through the origin: ``y = x * weight``."""

    parameter_names: ClassVar[Tuple[str, ...]] = ("weight",)

    def __init__(self, weight: float = 0.0) -> None:
        self.weight = float(weight)

    @property
    def bias(self) -> float:
        return 0.0

    def parameters(self) -> Tuple[float, ...]:
        """Current parameters in coordinate-search order."""
        return tuple(getattr(self, name) for name in self.parameter_names)

    def set_parameters(self, values: Sequence[float]) -> None:
        if len(values) != len(self.parameter_names):
            raise ValueError("Parameter length mismatch")
        for name, value in zip(self.parameter_names, values):
            setattr(self, name, float(value))

    def reset(self) -> None:
        self.set_parameters([0.0] * len(self.parameter_names))

    def predict(self, x):
        return predict(x, *self.parameters())

    def state_dict(self) -> Dict[str, float]:
        return dict(zip(self.parameter_names, self.parameters()))

    def load_state_dict(self, state: Mapping[str, float]) -> None:
        unknown = set(state) - set(self.parameter_names)
        if unknown:
            raise ValueError(f"Unknown parameters {sorted(unknown)} for {type(self).__name__}")
        missing = [name for name in self.parameter_names if name not in state]
        if missing:
            raise ValueError(f"Missing parameters {missing} for {type(self).__name__}")
        self.set_parameters([state[name] for name in self.parameter_names])

    def __repr__(self) -> str:
        params = ", ".join(f"{k}={v!r}" for k, v in self.state_dict().items())
        return f"{type(self).__name__}({params})"


class BiasedLinearModel(LinearModel):
    """Line with an intercept: ``y = x * weight + bias``."""

    parameter_names: ClassVar[Tuple[str, ...]] = ("weight", "bias")

    def __init__(self, weight: float = 0.0, bias: float = 0.0) -> None:
        super().__init__(weight)
        self._bias = float(bias)

    @property
    def bias(self) -> float:
        return self._bias

    @bias.setter
    def bias(self, value: float) -> None:
        self._bias = float(value)
