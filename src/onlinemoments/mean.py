r"""
onlinemoments.mean
==================
Running arithmetic mean, the leaf of the estimator chain.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .base import EstimatorMixin, _as_observation

__all__ = ["Mean"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Mean(EstimatorMixin):
    r"""
    Estimate the arithmetic mean of a population in a single pass.

    Attributes
    ----------
    n : int, default 0
        Number of observations seen so far.
    avg : float, default 0.0
        Running mean :math:`\mu` of those observations.

    Notes
    -----
    Each observation moves the mean by :math:`\delta / n` with
    :math:`\delta = x - \mu`, which stays well conditioned as :math:`n` grows.

    Examples
    --------
    >>> m = Mean.from_iter([1.0, 2.0, 3.0])
    >>> m.mean(), len(m)
    (2.0, 3)
    """

    n: int = 0
    avg: float = 0.0

    def __post_init__(self) -> None:
        if self.n < 0:
            raise ValueError("n must be >= 0")
        if self.n == 0 and self.avg != 0.0:
            raise ValueError("avg must be 0 for an empty sample")

    def add(self, x: float) -> None:
        """Add an observation sampled from the population."""
        x = _as_observation(x)
        self._increment()
        self._add_inner((x - self.avg) / self.n)

    def _increment(self) -> None:
        # Only the count; callers follow up with _add_inner.
        self.n += 1

    def _add_inner(self, delta_n: float) -> None:
        self.avg += delta_n

    def mean(self) -> float:
        """Estimate the mean of the population (0 for an empty sample)."""
        return self.avg

    def merge(self, other: Mean) -> None:
        r"""
        Merge another sample into this one.

        Parameters
        ----------
        other : Mean
            Estimator over a disjoint set of observations.

        Raises
        ------
        TypeError
            If ``other`` is not a :class:`Mean`.
        """
        self._check_kind(other)
        n_total = self.n + other.n
        if n_total == 0:
            return
        if self.n == 0:
            self.n, self.avg = other.n, other.avg
            logger.debug(f"Mean: adopted merged sample (n={self.n})")
            return
        delta = other.avg - self.avg
        self.avg += delta * other.n / n_total
        self.n = n_total

    def summary(self) -> dict[str, float]:
        return {"n": self.n, "mean": self.mean()}
