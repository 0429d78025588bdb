r"""
Shared scaffolding for the online moment estimators.

This module provides:

Protocol
    :class:`Estimator` — Interface shared by every estimator kind

Mixins
    :class:`EstimatorMixin` — Folding, copying and operator support

Functions
    :func:`merge_all` — Combine many partial estimators into one
"""

from __future__ import annotations

import copy
import logging
import numbers
from typing import Any, Iterable, Protocol, TypeVar

import numpy as np

__all__ = [
    "Estimator",
    "EstimatorMixin",
    "merge_all",
]

# Package-wide logger; module loggers propagate to it.
logger = logging.getLogger(__package__)
if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)


E = TypeVar("E", bound="EstimatorMixin")


class Estimator(Protocol):
    r"""
    Protocol describing the surface common to all moment estimators.

    Any of :class:`~onlinemoments.Mean`, :class:`~onlinemoments.Variance`,
    :class:`~onlinemoments.Skewness` or :class:`~onlinemoments.Kurtosis`
    satisfies it, so caller code that only needs counts and means can accept
    any of them.
    """

    def add(self, x: float) -> None: ...

    def merge(self, other: Any) -> None: ...

    def mean(self) -> float: ...

    def __len__(self) -> int: ...


def _as_observation(x: Any) -> float:
    """Coerce a single observation to ``float``, rejecting non-numeric input."""
    if not isinstance(x, numbers.Real):
        raise TypeError(f"observation must be a real number, got {type(x).__name__}")
    return float(x)


def _iter_values(values: Iterable[float] | np.ndarray) -> Iterable[float]:
    r"""
    Normalize the input of a fold.

    NumPy arrays are flattened in C order and converted to Python floats in one
    step; any other iterable is returned unchanged.
    """
    if isinstance(values, np.ndarray):
        return np.asarray(values, dtype=float).ravel().tolist()
    return values


class EstimatorMixin:
    r"""
    Kind-independent behavior shared by the four estimators.

    Subclasses are slotted dataclasses that define :meth:`add`, :meth:`merge`,
    :meth:`summary` and an ``n`` attribute or property holding the sample size.
    The mixin only supplies the scaffolding around those primitives; it never
    touches the power sums directly.
    """

    __slots__ = ()

    n: int

    # abstract primitives, implemented by each kind
    def add(self, x: float) -> None:  # pragma: no cover
        raise NotImplementedError

    def merge(self, other: Any) -> None:  # pragma: no cover
        raise NotImplementedError

    def summary(self) -> dict[str, float]:  # pragma: no cover
        raise NotImplementedError

    @classmethod
    def from_iter(cls: type[E], values: Iterable[float] | np.ndarray) -> E:
        r"""
        Build a fresh estimator by folding a finite sequence of observations.

        Parameters
        ----------
        values : iterable of float or ndarray
            Observations, added in iteration order. Arrays of any shape are
            flattened first.

        Returns
        -------
        estimator
            A new estimator of the calling kind.

        Examples
        --------
        >>> from onlinemoments import Variance
        >>> Variance.from_iter([1.0, 2.0, 3.0, 4.0, 5.0]).sample_variance()
        2.5
        """
        est = cls()
        est.extend(values)
        return est

    def extend(self, values: Iterable[float] | np.ndarray) -> None:
        r"""
        Add every observation of ``values`` in order.

        Equivalent to calling :meth:`add` once per element.
        """
        before = self.n
        for x in _iter_values(values):
            self.add(x)
        logger.debug(f"{type(self).__name__}: folded {self.n - before} observations (n={self.n})")

    def copy(self: E) -> E:
        """Return an independent copy of the whole estimator chain."""
        return copy.deepcopy(self)

    def is_empty(self) -> bool:
        """Return ``True`` when no observation has been added or merged."""
        return self.n == 0

    def __len__(self) -> int:
        return self.n

    def __add__(self: E, other: Any) -> E:
        if type(other) is not type(self):
            return NotImplemented
        out = self.copy()
        out.merge(other)
        return out

    def __iadd__(self: E, other: Any) -> E:
        if type(other) is not type(self):
            return NotImplemented
        self.merge(other)
        return self

    def _check_kind(self, other: Any) -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"cannot merge {type(other).__name__} into {type(self).__name__}; "
                "both estimators must be of the same kind"
            )


def merge_all(estimators: Iterable[E]) -> E:
    r"""
    Combine partial estimators into the estimator of their union.

    Parameters
    ----------
    estimators : iterable of estimators
        Non-empty collection of estimators of one kind, typically one per shard.

    Returns
    -------
    estimator
        A new estimator; the inputs are left untouched.

    Raises
    ------
    ValueError
        If ``estimators`` is empty.
    TypeError
        If the estimators are not all of the same kind.

    Notes
    -----
    The estimators are merged left to right. Any other pairing order gives the
    same result up to floating-point rounding.

    Examples
    --------
    >>> from onlinemoments import Mean
    >>> shards = [Mean.from_iter([1.0, 2.0]), Mean.from_iter([3.0]), Mean()]
    >>> merge_all(shards).mean()
    2.0
    """
    it = iter(estimators)
    try:
        first = next(it)
    except StopIteration:
        raise ValueError("merge_all() requires at least one estimator") from None
    total = first.copy()
    parts = 1
    for est in it:
        total.merge(est)
        parts += 1
    logger.debug(f"merge_all: combined {parts} {type(total).__name__} estimators (n={total.n})")
    return total
