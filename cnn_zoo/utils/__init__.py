"""Training helpers, initialization and model inspection utilities."""

from .initialization import initialize
from .summary import summarize
from .training import accuracy, linreg, sgd, sgd_inplace, squared_loss

__all__ = [
    "initialize",
    "summarize",
    "accuracy",
    "linreg",
    "sgd",
    "sgd_inplace",
    "squared_loss",
]
