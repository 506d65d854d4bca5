from hill_regression.config.models import (
    ITERATIONS_ENV_VAR,
    LEARNING_RATE_ENV_VAR,
    ModelKind,
    RunConfig,
    TrainingConfig,
)
from hill_regression.config.system import RUN_CONFIG_ENV_VAR, load_run_config, resolve_config_path

__all__ = [
    "ITERATIONS_ENV_VAR",
    "LEARNING_RATE_ENV_VAR",
    "RUN_CONFIG_ENV_VAR",
    "ModelKind",
    "RunConfig",
    "TrainingConfig",
    "load_run_config",
    "resolve_config_path",
]
