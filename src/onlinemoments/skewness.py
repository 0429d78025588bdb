r"""
onlinemoments.skewness
======================
Running skewness built on :class:`~onlinemoments.variance.Variance`.

The third power sum is advanced with Terriberry's single-pass update, which
needs the second power sum *before* the current observation is folded into
it, so every update here runs before the owned :class:`Variance` is touched.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from .base import EstimatorMixin, _as_observation
from .variance import Variance

__all__ = ["Skewness"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Skewness(EstimatorMixin):
    r"""
    Estimate the mean, the variance and the skewness of a population.

    Attributes
    ----------
    var : Variance
        Owned estimator of the count, mean and second power sum.
    sum_3 : float, default 0.0
        Running sum of cubed deviations from the running mean.

    Notes
    -----
    :meth:`skewness` is the sample skewness

    .. math::

       g_1 = \frac{\sqrt{n}\, S_3}{S_2^{3/2}}

    without small-sample correction; it matches
    ``scipy.stats.skew(x, bias=True)``.

    Examples
    --------
    >>> s = Skewness.from_iter([1.0, 2.0, 3.0, 4.0, 5.0])
    >>> s.skewness()
    0.0
    """

    var: Variance = field(default_factory=Variance)
    sum_3: float = 0.0

    @property
    def n(self) -> int:
        """Sample size."""
        return self.var.n

    def add(self, x: float) -> None:
        """Add an observation sampled from the population."""
        x = _as_observation(x)
        delta = x - self.mean()
        self._increment()
        self._add_inner(delta, delta / self.n)

    def _increment(self) -> None:
        self.var._increment()

    def _add_inner(self, delta: float, delta_n: float) -> None:
        n = self.n
        term = delta * delta_n * (n - 1)
        self.sum_3 += term * delta_n * (n - 2) - 3 * delta_n * self.var.sum_2
        self.var._add_inner(delta, delta_n)

    def mean(self) -> float:
        """Estimate the mean of the population (0 for an empty sample)."""
        return self.var.mean()

    def sample_variance(self) -> float:
        """Unbiased sample variance (0 for fewer than two observations)."""
        return self.var.sample_variance()

    def population_variance(self) -> float:
        """Biased population variance (0 for an empty sample)."""
        return self.var.population_variance()

    def error_mean(self) -> float:
        """Standard error of the mean (0 for fewer than two observations)."""
        return self.var.error_mean()

    def skewness(self) -> float:
        r"""
        Sample skewness :math:`g_1`.

        Returns
        -------
        float
            ``0.0`` for fewer than two observations and for samples without
            spread or without asymmetry.
        """
        sum_2 = self.var.sum_2
        if self.n < 2 or sum_2 == 0.0 or self.sum_3 == 0.0:
            return 0.0
        return math.sqrt(self.n) * self.sum_3 / sum_2**1.5

    def merge(self, other: Skewness) -> None:
        r"""
        Merge another sample into this one.

        Parameters
        ----------
        other : Skewness
            Estimator over a disjoint set of observations.

        Notes
        -----
        With :math:`n = n_a + n_b` and :math:`\delta = \mu_b - \mu_a`,

        .. math::

           S_3 = S_{3,a} + S_{3,b}
                 + \delta^3 \frac{n_a n_b (n_a - n_b)}{n^2}
                 + 3 \frac{\delta}{n} (n_a S_{2,b} - n_b S_{2,a})
        """
        self._check_kind(other)
        if other.is_empty():
            return
        if self.is_empty():
            self.var = other.var.copy()
            self.sum_3 = other.sum_3
            logger.debug(f"Skewness: adopted merged sample (n={self.n})")
            return
        len_self = self.n
        len_other = other.n
        len_total = len_self + len_other
        delta = other.mean() - self.mean()
        delta_n = delta / len_total
        self.sum_3 += (
            other.sum_3
            + delta * delta * delta * len_self * len_other * (len_self - len_other) / (len_total * len_total)
            + 3 * delta_n * (len_self * other.var.sum_2 - len_other * self.var.sum_2)
        )
        self.var.merge(other.var)

    def summary(self) -> dict[str, float]:
        out = self.var.summary()
        out["skewness"] = self.skewness()
        return out
