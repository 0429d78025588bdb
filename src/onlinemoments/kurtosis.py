r"""
onlinemoments.kurtosis
======================
Running excess kurtosis, the outermost estimator of the chain.

:class:`Kurtosis` owns a :class:`~onlinemoments.skewness.Skewness`, which owns a
:class:`~onlinemoments.variance.Variance`, which owns a
:class:`~onlinemoments.mean.Mean`. Updates flow outside-in: the fourth power
sum is advanced from the old third and second sums, then the third from the
old second, then the second, then the mean.

References
----------
P. Pébay, "Formulas for robust, one-pass parallel computation of covariances
and arbitrary-order statistical moments", Sandia Report SAND2008-6212, 2008.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .base import EstimatorMixin, _as_observation
from .skewness import Skewness

__all__ = ["Kurtosis"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Kurtosis(EstimatorMixin):
    r"""
    Estimate the mean, variance, skewness and kurtosis of a population.

    This can also be used to estimate the standard error of the mean.

    Attributes
    ----------
    skew : Skewness
        Owned estimator of the count, mean, second and third power sums.
    sum_4 : float, default 0.0
        Running sum of fourth-power deviations from the running mean.

    Notes
    -----
    :meth:`kurtosis` returns the excess kurtosis

    .. math::

       g_2 = \frac{n\, S_4}{S_2^2} - 3

    which matches ``scipy.stats.kurtosis(x, fisher=True, bias=True)``.

    Examples
    --------
    >>> k = Kurtosis.from_iter([1.0, 2.0, 3.0, 4.0])
    >>> round(k.kurtosis(), 6)
    -1.36
    """

    skew: Skewness = field(default_factory=Skewness)
    sum_4: float = 0.0

    def __post_init__(self) -> None:
        if self.sum_4 < 0:
            raise ValueError("sum_4 must be >= 0")

    @property
    def n(self) -> int:
        """Sample size."""
        return self.skew.n

    def add(self, x: float) -> None:
        """Add an observation sampled from the population."""
        x = _as_observation(x)
        delta = x - self.mean()
        self._increment()
        self._add_inner(delta, delta / self.n)

    def _increment(self) -> None:
        self.skew._increment()

    def _add_inner(self, delta: float, delta_n: float) -> None:
        # Terriberry's update; reads sum_2 and sum_3 before the chain advances.
        n = self.n
        term = delta * delta_n * (n - 1)
        delta_n_sq = delta_n * delta_n
        self.sum_4 += (
            term * delta_n_sq * (n * n - 3 * n + 3)
            + 6 * delta_n_sq * self.skew.var.sum_2
            - 4 * delta_n * self.skew.sum_3
        )
        self.skew._add_inner(delta, delta_n)

    def mean(self) -> float:
        """Estimate the mean of the population (0 for an empty sample)."""
        return self.skew.mean()

    def sample_variance(self) -> float:
        """Unbiased sample variance (0 for fewer than two observations)."""
        return self.skew.sample_variance()

    def population_variance(self) -> float:
        """Biased population variance (0 for an empty sample)."""
        return self.skew.population_variance()

    def error_mean(self) -> float:
        """Standard error of the mean (0 for fewer than two observations)."""
        return self.skew.error_mean()

    def skewness(self) -> float:
        """Sample skewness (see :meth:`Skewness.skewness`)."""
        return self.skew.skewness()

    def kurtosis(self) -> float:
        r"""
        Excess kurtosis :math:`g_2`.

        Returns
        -------
        float
            ``0.0`` when the fourth power sum is zero, which covers empty and
            single-observation samples as well as constant sequences.
        """
        if self.sum_4 == 0.0:
            return 0.0
        sum_2 = self.skew.var.sum_2
        return self.n * self.sum_4 / (sum_2 * sum_2) - 3.0

    def merge(self, other: Kurtosis) -> None:
        r"""
        Merge another sample into this one.

        Parameters
        ----------
        other : Kurtosis
            Estimator over a disjoint set of observations.

        Notes
        -----
        With :math:`n = n_a + n_b`, :math:`\delta = \mu_b - \mu_a` and
        :math:`\delta_n = \delta / n`,

        .. math::

           S_4 = S_{4,a} + S_{4,b}
                 + \delta\, \delta_n^3\, n_a n_b (n_a^2 - n_a n_b + n_b^2)
                 + 6 \delta_n^2 (n_a^2 S_{2,b} + n_b^2 S_{2,a})
                 + 4 \delta_n (n_a S_{3,b} - n_b S_{3,a})
        """
        self._check_kind(other)
        if other.is_empty():
            return
        if self.is_empty():
            self.skew = other.skew.copy()
            self.sum_4 = other.sum_4
            logger.debug(f"Kurtosis: adopted merged sample (n={self.n})")
            return
        len_self = self.n
        len_other = other.n
        len_total = len_self + len_other
        delta = other.mean() - self.mean()
        delta_n = delta / len_total
        delta_n_sq = delta_n * delta_n
        self.sum_4 += (
            other.sum_4
            + delta * delta_n * delta_n_sq * len_self * len_other
            * (len_self * len_self - len_self * len_other + len_other * len_other)
            + 6 * delta_n_sq * (len_self * len_self * other.skew.var.sum_2 + len_other * len_other * self.skew.var.sum_2)
            + 4 * delta_n * (len_self * other.skew.sum_3 - len_other * self.skew.sum_3)
        )
        self.skew.merge(other.skew)

    def summary(self) -> dict[str, float]:
        out = self.skew.summary()
        out["kurtosis"] = self.kurtosis()
        return out
