"""onlinemoments package public API."""

from .base import Estimator, merge_all
from .kurtosis import Kurtosis
from .mean import Mean
from .skewness import Skewness
from .variance import Variance

__all__ = [
    "Mean",
    "Variance",
    "Skewness",
    "Kurtosis",
    "Estimator",
    "merge_all",
]

__version__ = "0.1.0"
