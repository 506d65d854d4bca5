"""Exception hierarchy shared by the predictor, loss and trainer."""


class HillRegressionError(Exception):
    """Base class for all errors raised by this package."""


class PreconditionViolation(HillRegressionError, ValueError):
    """Raised when inputs break a documented precondition (lengths, budget, step size)."""


class NumericDegenerate(HillRegressionError, ValueError):
    """Raised when a computation has no defined value, e.g. the mean over an empty dataset."""


class DatasetError(HillRegressionError, ValueError):
    """Raised when a data table cannot be parsed into two numeric columns."""
