import json
import math
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

ITERATIONS_ENV_VAR = "HILL_REGRESSION_ITERATIONS"
LEARNING_RATE_ENV_VAR = "HILL_REGRESSION_LEARNING_RATE"


class ModelKind(str, Enum):
    LINEAR = "linear"
    LINEAR_BIAS = "linear_bias"


def _whole_number(value: Any) -> int:
    """Accept ints and integer strings; reject bools and fractional floats."""
    if isinstance(value, bool):
        raise ValueError(f"iterations must be an integer, got {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"iterations must be a whole number, got {value!r}")
        return int(value)
    if isinstance(value, str):
        return int(value.strip())
    return int(value)


def _real_number(value: Any) -> float:
    if isinstance(value, bool):
        raise ValueError(f"learning_rate must be a number, got {value!r}")
    return float(value)


@dataclass
class TrainingConfig:
    iterations: int = 10000
    learning_rate: float = 0.01
    model: ModelKind = ModelKind.LINEAR_BIAS

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "TrainingConfig":
        """
        Build a config from a mapping, using defaults for missing fields.

        Environment overrides (HILL_REGRESSION_ITERATIONS, HILL_REGRESSION_LEARNING_RATE)
        take precedence over values from the mapping.
        """
        data = dict(data or {})
        base = cls()
        unknown = set(data) - {"iterations", "learning_rate", "model"}
        if unknown:
            raise ValueError(f"Unknown training keys {sorted(unknown)}")
        env_iterations = os.getenv(ITERATIONS_ENV_VAR)
        if env_iterations:
            data["iterations"] = env_iterations
        env_learning_rate = os.getenv(LEARNING_RATE_ENV_VAR)
        if env_learning_rate:
            data["learning_rate"] = env_learning_rate

        try:
            iterations = _whole_number(data.get("iterations", base.iterations))
            learning_rate = _real_number(data.get("learning_rate", base.learning_rate))
            model = ModelKind(str(data.get("model", base.model.value)))
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid training config: {exc}") from exc
        cfg = cls(iterations=iterations, learning_rate=learning_rate, model=model)
        cfg.validate()
        return cfg

    def validate(self) -> None:
        if self.iterations < 0:
            raise ValueError("iterations must be non-negative")
        if not math.isfinite(self.learning_rate) or self.learning_rate <= 0:
            raise ValueError("learning_rate must be positive and finite")


@dataclass
class RunConfig:
    data_path: Optional[Path] = None
    training: TrainingConfig = field(default_factory=TrainingConfig)
    predict: List[float] = field(default_factory=list)
    output_path: Optional[Path] = None

    @classmethod
    def from_file(cls, path: Path) -> "RunConfig":
        """Load a run config from JSON, or from YAML when the suffix is .yaml/.yml."""
        path = Path(path)
        text = path.read_text()
        try:
            if path.suffix.lower() in {".yaml", ".yml"}:
                data = yaml.safe_load(text)
            else:
                data = json.loads(text)
        except (json.JSONDecodeError, yaml.YAMLError) as exc:
            raise ValueError(f"Invalid run config at {path}: {exc}") from exc
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Run config at {path} must be a mapping")
        cfg = cls.from_dict(data)
        # Relative data/output paths are taken relative to the config file.
        base_dir = path.parent
        if cfg.data_path is not None and not cfg.data_path.is_absolute():
            cfg.data_path = base_dir / cfg.data_path
        if cfg.output_path is not None and not cfg.output_path.is_absolute():
            cfg.output_path = base_dir / cfg.output_path
        return cfg

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RunConfig":
        unknown = set(data) - {"data_path", "training", "predict", "output_path"}
        if unknown:
            raise ValueError(f"Unknown run config keys {sorted(unknown)}")
        data_path = data.get("data_path")
        output_path = data.get("output_path")
        predict = data.get("predict") or []
        if not isinstance(predict, list):
            raise ValueError("predict must be a list of numbers")
        try:
            predict_values = [float(x) for x in predict]
        except (TypeError, ValueError) as exc:
            raise ValueError(f"predict must be a list of numbers: {exc}") from exc
        return cls(
            data_path=Path(data_path) if data_path else None,
            training=TrainingConfig.from_dict(data.get("training")),
            predict=predict_values,
            output_path=Path(output_path) if output_path else None,
        )
