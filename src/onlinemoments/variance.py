r"""
onlinemoments.variance
======================
Running variance (Welford's algorithm) built on :class:`~onlinemoments.mean.Mean`.

The estimator keeps

.. math::

   S_2 = \sum_i (x_i - \mu_i)^2

where :math:`\mu_i` is the running mean at the time :math:`x_i` was added,
and derives the sample variance, population variance and the standard error
of the mean from it.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from .base import EstimatorMixin, _as_observation
from .mean import Mean

__all__ = ["Variance"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Variance(EstimatorMixin):
    r"""
    Estimate the mean and the variance of a population in a single pass.

    Attributes
    ----------
    avg : Mean
        Owned estimator of the count and the mean.
    sum_2 : float, default 0.0
        Running sum of squared deviations from the running mean.

    Examples
    --------
    >>> v = Variance.from_iter([1.0, 2.0, 3.0, 4.0, 5.0])
    >>> v.mean(), v.sample_variance(), v.population_variance()
    (3.0, 2.5, 2.0)
    """

    avg: Mean = field(default_factory=Mean)
    sum_2: float = 0.0

    def __post_init__(self) -> None:
        if self.sum_2 < 0:
            raise ValueError("sum_2 must be >= 0")

    @property
    def n(self) -> int:
        """Sample size."""
        return self.avg.n

    def add(self, x: float) -> None:
        """Add an observation sampled from the population."""
        x = _as_observation(x)
        delta = x - self.avg.avg
        self._increment()
        self._add_inner(delta, delta / self.n)

    def _increment(self) -> None:
        self.avg._increment()

    def _add_inner(self, delta: float, delta_n: float) -> None:
        # Count already advanced; sum_2 first, the mean last.
        n = self.n
        self.sum_2 += delta * delta_n * (n - 1)
        self.avg._add_inner(delta_n)

    def mean(self) -> float:
        """Estimate the mean of the population (0 for an empty sample)."""
        return self.avg.mean()

    def sample_variance(self) -> float:
        r"""
        Unbiased sample variance :math:`S_2 / (n - 1)`.

        Returns
        -------
        float
            ``0.0`` when fewer than two observations were seen.
        """
        if self.n < 2:
            return 0.0
        return self.sum_2 / (self.n - 1)

    def population_variance(self) -> float:
        r"""
        Biased population variance :math:`S_2 / n` (``0.0`` for an empty sample).
        """
        if self.n == 0:
            return 0.0
        return self.sum_2 / self.n

    def error_mean(self) -> float:
        r"""
        Standard error of the mean, :math:`\sqrt{s^2 / n}`.

        Returns
        -------
        float
            ``0.0`` when fewer than two observations were seen.
        """
        if self.n < 2:
            return 0.0
        return math.sqrt(self.sample_variance() / self.n)

    def merge(self, other: Variance) -> None:
        r"""
        Merge another sample into this one.

        Parameters
        ----------
        other : Variance
            Estimator over a disjoint set of observations.

        Notes
        -----
        With :math:`\delta = \mu_b - \mu_a`,

        .. math::

           S_2 = S_{2,a} + S_{2,b} + \delta^2 \frac{n_a n_b}{n_a + n_b}
        """
        self._check_kind(other)
        if other.is_empty():
            return
        if self.is_empty():
            self.avg = other.avg.copy()
            self.sum_2 = other.sum_2
            logger.debug(f"Variance: adopted merged sample (n={self.n})")
            return
        len_self = self.n
        len_other = other.n
        len_total = len_self + len_other
        delta = other.mean() - self.mean()
        self.sum_2 += other.sum_2 + delta * delta * len_self * len_other / len_total
        self.avg.merge(other.avg)

    def summary(self) -> dict[str, float]:
        return {
            "n": self.n,
            "mean": self.mean(),
            "sample_variance": self.sample_variance(),
            "population_variance": self.population_variance(),
            "error_mean": self.error_mean(),
        }
