"""
Test cases for least-squares trend fitting, including re-based intercepts, direction and strength classification and the degenerate inputs (too few points, equal timestamps, flat values).

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest

from engine.enums import TrendDirection, TrendStrength
from engine.trend import TrendModel, fit


def test_perfect_line():
    model = fit([(1, 5.0), (2, 6.0), (3, 7.0), (4, 8.0), (5, 9.0)])
    assert pytest.approx(model.slope) == 1.0
    # intercept is measured at the earliest timestamp, not at t=0
    assert pytest.approx(model.intercept) == 5.0
    assert pytest.approx(model.r_squared) == 1.0
    assert model.direction == TrendDirection.improving
    assert model.strength == TrendStrength.strong
    assert model.predicted_values == pytest.approx([5.0, 6.0, 7.0, 8.0, 9.0])


def test_fewer_than_two_points():
    assert fit([]) == TrendModel()
    single = fit([(10, 7.0)])
    assert single.slope == 0.0 and single.intercept == 0.0
    assert single.direction == TrendDirection.stable
    assert single.strength == TrendStrength.none
    assert single.predicted_values == []


def test_equal_timestamps_fall_back_to_mean():
    model = fit([(3, 4.0), (3, 6.0)])
    assert model.slope == 0.0
    assert pytest.approx(model.intercept) == 5.0
    assert model.r_squared == 0.0
    assert model.direction == TrendDirection.stable
    assert model.predicted_values == []


def test_flat_values_have_zero_r_squared():
    model = fit([(0, 5.0), (1, 5.0), (2, 5.0)])
    assert model.slope == pytest.approx(0.0)
    assert model.r_squared == 0.0
    assert model.strength == TrendStrength.none
    assert model.predicted_values == pytest.approx([5.0, 5.0, 5.0])


def test_declining_series():
    model = fit([(0, 9.0), (10, 8.0), (20, 7.0)])
    assert pytest.approx(model.slope) == -0.1
    assert model.direction == TrendDirection.declining


def test_small_slope_is_stable():
    model = fit([(0, 5.0), (1000, 5.5)])
    assert pytest.approx(model.slope) == 0.0005
    assert model.direction == TrendDirection.stable


def test_input_order_is_kept():
    model = fit([(2, 7.0), (0, 5.0), (1, 6.0)])
    assert pytest.approx(model.slope) == 1.0
    assert model.predicted_values == pytest.approx([7.0, 5.0, 6.0])


def test_large_timestamps_are_rebased():
    base = 1_700_000_000_000
    model = fit([(base, 6.0), (base + 1000, 7.0), (base + 2000, 8.0)])
    assert pytest.approx(model.slope) == 0.001
    assert pytest.approx(model.intercept) == 6.0
