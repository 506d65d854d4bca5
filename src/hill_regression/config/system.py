"""Utilities for locating and loading the run configuration."""

import os
from pathlib import Path
from typing import Optional, Tuple

from hill_regression.config.models import RunConfig

RUN_CONFIG_ENV_VAR = "HILL_REGRESSION_CONFIG"


def resolve_config_path(explicit: Optional[Path] = None) -> Optional[Path]:
    """
    Resolve the path to the run configuration file.

    An explicit path wins; otherwise the HILL_REGRESSION_CONFIG environment
    variable is used (relative values resolve against the working directory).
    Returns None when neither is set.
    """
    if explicit is not None:
        return Path(explicit).resolve()
    env_value = os.getenv(RUN_CONFIG_ENV_VAR)
    if env_value:
        candidate = Path(env_value)
        if not candidate.is_absolute():
            candidate = (Path.cwd() / candidate).resolve()
        return candidate
    return None


def load_run_config(explicit: Optional[Path] = None) -> Tuple[RunConfig, Optional[Path]]:
    """
    Load the run configuration.

    Returns:
        (config, resolved_path); defaults and None when no file is configured.

    Raises:
        FileNotFoundError: if a configured path does not exist.
        ValueError: if the file is not a valid config document.
    """
    path = resolve_config_path(explicit)
    if path is None:
        return RunConfig.from_dict({}), None
    if not path.exists():
        raise FileNotFoundError(f"Run config not found at {path}")
    return RunConfig.from_file(path), path
