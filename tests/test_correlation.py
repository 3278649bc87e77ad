"""
Test cases for Pearson correlation and lagged autocorrelation, including the zero results for mismatched lengths, short inputs and constant sequences.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest

from engine.correlation import autocorrelation, correlation


def test_perfect_positive_and_negative():
    a = [1.0, 2.0, 3.0, 4.0, 5.0]
    assert pytest.approx(correlation(a, a)) == 1.0
    assert pytest.approx(correlation(a, list(reversed(a)))) == -1.0


def test_scaled_series_is_perfectly_correlated():
    a = [6.0, 7.5, 5.0, 9.0]
    b = [2 * v + 1 for v in a]
    assert pytest.approx(correlation(a, b)) == 1.0


def test_degenerate_inputs_return_zero():
    assert correlation([1, 2, 3], [1, 2]) == 0.0
    assert correlation([1], [1]) == 0.0
    assert correlation([5, 5, 5], [1, 2, 3]) == 0.0


def test_autocorrelation_lag_one():
    # deviations -2,-1,0,1,2; lagged products sum to 4 over 4 pairs, variance 2.5
    assert pytest.approx(autocorrelation([1, 2, 3, 4, 5], 1)) == 0.4


def test_autocorrelation_lag_zero():
    assert pytest.approx(autocorrelation([1, 2, 3, 4, 5], 0)) == 0.8


def test_autocorrelation_guards():
    assert autocorrelation([1, 2, 3], 3) == 0.0
    assert autocorrelation([1, 2, 3], 5) == 0.0
    assert autocorrelation([4, 4, 4, 4], 1) == 0.0
    assert autocorrelation([1, 2, 3], -1) == 0.0
