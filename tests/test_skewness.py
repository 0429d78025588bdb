import math

import pytest
from scipy.stats import skew as sp_skew

from onlinemoments import Skewness


def test_trivial():
    a = Skewness()
    assert len(a) == 0
    a.add(1.0)
    assert a.mean() == 1.0
    assert len(a) == 1
    assert a.sample_variance() == 0.0
    assert a.population_variance() == 0.0
    assert a.error_mean() == 0.0
    assert a.skewness() == 0.0
    a.add(1.0)
    assert a.mean() == 1.0
    assert len(a) == 2
    assert a.sample_variance() == 0.0
    assert a.population_variance() == 0.0
    assert a.error_mean() == 0.0
    assert a.skewness() == 0.0


def test_simple():
    a = Skewness.from_iter(float(i) for i in range(1, 6))
    assert a.mean() == 3.0
    assert len(a) == 5
    assert a.sample_variance() == 2.5
    assert a.error_mean() == pytest.approx(math.sqrt(0.5), abs=1e-16)
    assert a.skewness() == 0.0
    a.add(1.0)
    assert a.mean() == pytest.approx(3.0 - 1.0 / 3.0, abs=1e-15)
    assert a.skewness() == pytest.approx(0.2795084971874741, abs=1e-15)


def test_merge(mixed_sequence):
    avg_total = Skewness.from_iter(mixed_sequence)
    for mid in range(len(mixed_sequence)):
        left, right = mixed_sequence[:mid], mixed_sequence[mid:]
        avg_left = Skewness.from_iter(left)
        avg_right = Skewness.from_iter(right)
        avg_left.merge(avg_right)
        assert len(avg_total) == len(avg_left)
        assert avg_left.mean() == pytest.approx(avg_total.mean(), rel=1e-14, abs=1e-14)
        assert avg_left.sample_variance() == pytest.approx(avg_total.sample_variance(), rel=1e-14, abs=1e-14)
        assert avg_left.skewness() == pytest.approx(avg_total.skewness(), rel=1e-14, abs=1e-14)


def test_matches_scipy(skewed_data):
    a = Skewness.from_iter(skewed_data)
    expected = float(sp_skew(skewed_data, bias=True))
    assert expected > 1.0
    assert a.skewness() == pytest.approx(expected, rel=1e-10)


def test_sign_follows_tail():
    right = Skewness.from_iter([0.0, 0.0, 0.0, 0.0, 10.0])
    left = Skewness.from_iter([0.0, 0.0, 0.0, 0.0, -10.0])
    assert right.skewness() > 0.0
    assert left.skewness() == pytest.approx(-right.skewness(), rel=1e-14)


@pytest.mark.parametrize("value", [0.0, 0.1, -3.7, 1e12])
def test_constant_sequence(value):
    a = Skewness.from_iter([value] * 25)
    assert a.sample_variance() == 0.0
    assert a.skewness() == 0.0
    assert not math.isnan(a.skewness())


def test_summary_adds_skewness():
    s = Skewness.from_iter([1.0, 2.0, 3.0, 4.0, 5.0, 1.0]).summary()
    assert s["n"] == 6
    assert s["skewness"] == pytest.approx(0.2795084971874741, abs=1e-15)
    assert "kurtosis" not in s
