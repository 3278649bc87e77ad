"""
Test cases for descriptive statistics, covering central tendency, spread, interpolated percentiles, mode bucketing and the shape measures, including the zero defaults for empty and undersized inputs.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import math

import pytest

from config import settings
from engine.statistics import (
    StatisticsSummary,
    describe,
    mean,
    median,
    mode,
    percentile,
    std_deviation,
    variance,
)


def test_describe_simple_sequence():
    s = describe([1, 2, 3, 4, 5])
    assert s.count == 5
    assert s.sum == 15
    assert pytest.approx(s.mean) == 3.0
    assert pytest.approx(s.median) == 3.0
    assert s.mode == []
    assert s.min == 1 and s.max == 5 and s.range == 4
    assert pytest.approx(s.variance) == 2.5
    assert pytest.approx(s.std_deviation) == math.sqrt(2.5)
    assert pytest.approx(s.percentile_25) == 2.0
    assert pytest.approx(s.percentile_50) == 3.0
    assert pytest.approx(s.percentile_75) == 4.0
    assert pytest.approx(s.percentile_90) == 4.6
    assert pytest.approx(s.iqr) == 2.0
    assert s.skewness == pytest.approx(0.0, abs=1e-12)
    assert pytest.approx(s.kurtosis, rel=1e-9) == -1.2


def test_describe_empty_is_all_zero():
    s = describe([])
    assert s == StatisticsSummary()
    assert s.count == 0 and s.mean == 0.0 and s.mode == []


def test_single_value_has_no_spread():
    s = describe([7.5])
    assert s.variance == 0.0
    assert s.std_deviation == 0.0
    assert s.skewness == 0.0
    assert s.kurtosis == 0.0
    assert s.percentile_90 == 7.5


def test_even_length_median():
    assert pytest.approx(median([1, 2, 3, 4])) == 2.5
    assert pytest.approx(describe([4, 1, 3, 2]).median) == 2.5


def test_sample_standard_deviation():
    data = [2, 4, 4, 4, 5, 5, 7, 9]
    # n-1 denominator: sqrt(32 / 7)
    assert pytest.approx(std_deviation(data), rel=1e-9) == math.sqrt(32 / 7)
    # the population figure for the same data is exactly 2
    n = len(data)
    assert pytest.approx(math.sqrt(variance(data) * (n - 1) / n)) == 2.0


def test_variance_below_two_points_is_zero():
    assert variance([]) == 0.0
    assert variance([3.0]) == 0.0


def test_mode_buckets_to_two_decimals():
    assert mode([1, 2, 2, 3, 3]) == [2.0, 3.0]
    assert mode([1.001, 1.004, 2.0]) == [1.0]
    assert mode([1, 2, 3]) == []
    assert mode([]) == []


def test_mode_precision_is_configurable(monkeypatch):
    monkeypatch.setattr(settings, "mode_decimals", 0)
    assert mode([1.2, 1.4, 3.0]) == [1.0]


def test_percentile_interpolates_and_clamps():
    data = [10, 20, 30, 40]
    assert pytest.approx(percentile(data, 50)) == 25.0
    assert pytest.approx(percentile(data, 100)) == 40.0
    assert pytest.approx(percentile(data, 150)) == 40.0
    assert pytest.approx(percentile(data, -5)) == 10.0
    assert percentile([], 50) == 0.0


def test_percentile_does_not_reorder_input():
    data = [5, 1, 4, 2]
    percentile(data, 25)
    assert data == [5, 1, 4, 2]


def test_percentile_matches_median():
    data = [3.2, 9.1, 4.4, 7.0, 5.5, 6.1]
    assert pytest.approx(percentile(data, 50)) == median(data)


def test_skewness_sign_and_guard():
    assert describe([1, 2, 3, 10]).skewness > 0
    assert describe([1, 8, 9, 10]).skewness < 0
    assert describe([1, 5]).skewness == 0.0
    assert describe([4, 4, 4, 4]).skewness == 0.0


def test_kurtosis_requires_four_points():
    assert describe([1, 2, 10]).kurtosis == 0.0
    assert describe([1, 2, 3, 10]).kurtosis != 0.0


def test_shape_measures_match_closed_forms():
    # mean 4, deviations -3, -2, -1, 6, sample variance 50/3
    s = describe([1, 2, 3, 10])
    var = 50 / 3
    sum_z3 = (-27 - 8 - 1 + 216) / var ** 1.5
    sum_z4 = (81 + 16 + 1 + 1296) / var ** 2
    assert s.skewness == pytest.approx(4 / (3 * 2) * sum_z3)
    assert s.skewness == pytest.approx(1.76363, rel=1e-4)
    assert s.kurtosis == pytest.approx(4 * 5 * sum_z4 / (3 * 2 * 1) - 3 * 9 / (2 * 1))
    assert s.kurtosis == pytest.approx(3.228, rel=1e-4)


def test_shape_measures_finite_for_near_constant_data():
    # 0.1 + 0.2 differs from 0.3 in the last bit, so the deviation is tiny but nonzero
    s = describe([0.1 + 0.2, 0.3, 0.3, 0.3])
    assert s.std_deviation > 0
    assert math.isfinite(s.skewness)
    assert math.isfinite(s.kurtosis)


def test_mode_rounds_halves_away_from_zero():
    assert mode([0.125, 0.125]) == [0.13]
    # 0.125 lands in bucket 13 and 0.115 in bucket 12, so nothing repeats
    assert mode([0.125, 0.115]) == []
    assert mode([-0.125, -0.125]) == [-0.13]


def test_mean_empty():
    assert mean([]) == 0.0
    assert median([]) == 0.0
