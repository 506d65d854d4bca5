"""
Fit the bundled pizza table (reservations -> pizzas) and predict for 20 reservations.

Usage:
  pip install -e .
  python scripts/run_pizza_regression.py
"""

from pathlib import Path

from hill_regression.cli import run
from hill_regression.config import ModelKind, RunConfig, TrainingConfig
from hill_regression.utils import configure_logging, get_logger

DATA_PATH = Path(__file__).resolve().parent.parent / "data" / "pizza.txt"


def main() -> None:
    configure_logging()
    logger = get_logger("pizza_regression")
    cfg = RunConfig(
        data_path=DATA_PATH,
        training=TrainingConfig(iterations=10000, learning_rate=0.01, model=ModelKind.LINEAR_BIAS),
        predict=[20.0],
    )
    report = run(cfg)
    logger.info(f"Accepted updates: {report.updates}")
    logger.info(f"Final loss: {report.final_loss:.4f}")


if __name__ == "__main__":
    main()
