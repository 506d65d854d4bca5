"""
Univariate linear regression fitted by discrete coordinate search.

Components:
- Predictor and model objects (models)
- Mean squared error loss (training.loss)
- Hill-climbing trainer with a fixed iteration budget (training.trainer)
- Dataset ingestion, configuration and a command line entry point
"""

__all__ = ["config", "data", "errors", "models", "report", "training", "utils"]
