"""Lookup of model shapes by the names used in configs and on the command line."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, List, Tuple, Union

from hill_regression.models.linear import BiasedLinearModel, LinearModel

ModelFactory = Callable[..., LinearModel]


def _key(name: Union[str, Enum]) -> str:
    return str(name.value if isinstance(name, Enum) else name)


class ModelRegistry:
    """Maps model names to factories; ``linear`` and ``linear_bias`` are built in."""

    def __init__(self) -> None:
        self._factories: Dict[str, ModelFactory] = {
            "linear": LinearModel,
            "linear_bias": BiasedLinearModel,
        }

    def register(self, name: Union[str, Enum], factory: ModelFactory) -> None:
        key = _key(name)
        if key in self._factories:
            raise ValueError(f"Model '{key}' already registered")
        self._factories[key] = factory

    def create(self, name: Union[str, Enum], **params: float) -> LinearModel:
        """Instantiate a model, optionally with starting parameters."""
        key = _key(name)
        try:
            factory = self._factories[key]
        except KeyError:
            raise ValueError(f"Unknown model '{key}'; expected one of {self.names()}") from None
        return factory(**params)

    def parameter_names(self, name: Union[str, Enum]) -> Tuple[str, ...]:
        return self.create(name).parameter_names

    def names(self) -> List[str]:
        return sorted(self._factories)
