"""Command line entry point: fit a line to a two-column data table."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from hill_regression.config import ModelKind, RunConfig, TrainingConfig, load_run_config
from hill_regression.data import load_table
from hill_regression.errors import HillRegressionError
from hill_regression.models import ModelRegistry
from hill_regression.report import FitReport
from hill_regression.training import HillClimbTrainer
from hill_regression.utils import configure_logging, get_logger

logger = get_logger("cli")

EXIT_OK = 0
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hill-regression",
        description="Fit y = x * w (+ b) by hill climbing over a fixed iteration budget",
    )
    parser.add_argument("data", nargs="?", help="Whitespace-delimited table with one header line")
    parser.add_argument("--config", type=Path, help="Run config (JSON or YAML)")
    parser.add_argument("--model", choices=[kind.value for kind in ModelKind], help="Model shape")
    parser.add_argument("--iterations", type=int, help="Iteration budget")
    parser.add_argument("--learning-rate", type=float, help="Step size tried on each parameter")
    parser.add_argument("--predict", type=float, nargs="+", metavar="X", help="Inputs to predict after training")
    parser.add_argument("--output", type=Path, help="Write the fit report as JSON to this path")
    parser.add_argument("--log-level", default=None, help="Logging level (default: LOG_LEVEL or INFO)")
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON objects")
    return parser


def apply_overrides(cfg: RunConfig, args: argparse.Namespace) -> RunConfig:
    """Command line values take precedence over the config file."""
    if args.data:
        cfg.data_path = Path(args.data)
    if args.output:
        cfg.output_path = args.output
    if args.predict:
        cfg.predict = list(args.predict)
    training = TrainingConfig(
        iterations=args.iterations if args.iterations is not None else cfg.training.iterations,
        learning_rate=args.learning_rate if args.learning_rate is not None else cfg.training.learning_rate,
        model=ModelKind(args.model) if args.model else cfg.training.model,
    )
    training.validate()
    cfg.training = training
    return cfg


def run(cfg: RunConfig) -> FitReport:
    if cfg.data_path is None:
        raise ValueError("No dataset given: pass DATA or set data_path in the config")
    dataset = load_table(cfg.data_path)
    model = ModelRegistry().create(cfg.training.model)
    trainer = HillClimbTrainer(cfg.training.iterations, cfg.training.learning_rate)
    result = trainer.fit(model, dataset.xs, dataset.ys)
    logger.info(f"w={result.params.weight:.3f}, b={result.params.bias:.3f}")

    report = FitReport.from_result(
        cfg.training.model,
        model,
        result,
        iterations=cfg.training.iterations,
        learning_rate=cfg.training.learning_rate,
        xs_to_predict=cfg.predict,
    )
    for prediction in report.predictions:
        logger.info(f"Prediction: x={prediction.x:g} => y={prediction.y:.2f}")
    if cfg.output_path is not None:
        cfg.output_path.parent.mkdir(parents=True, exist_ok=True)
        cfg.output_path.write_text(report.model_dump_json(indent=2))
        logger.info(f"Wrote fit report to {cfg.output_path}")
    return report


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the hill-regression command."""
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level, json_output=args.json_logs)
    try:
        cfg, cfg_path = load_run_config(args.config)
        if cfg_path is not None:
            logger.info(f"Using run config {cfg_path}")
        cfg = apply_overrides(cfg, args)
        run(cfg)
    except (OSError, HillRegressionError, ValueError) as exc:
        logger.error(str(exc))
        return EXIT_CONFIG_ERROR
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
