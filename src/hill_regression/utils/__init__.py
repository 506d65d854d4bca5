from .logging import configure_logging, get_logger
from .metrics import FitTiming, TrainingMetrics

__all__ = [
    "configure_logging",
    "get_logger",
    "FitTiming",
    "TrainingMetrics",
]
