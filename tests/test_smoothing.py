import pytest

from engine.smoothing import coefficient_of_variation, ema, moving_average, z_scores


def test_moving_average_shrinking_start():
    assert moving_average([1, 2, 3, 4, 5], 3) == pytest.approx([1.0, 1.5, 2.0, 3.0, 4.0])


def test_moving_average_window_clamped():
    assert moving_average([2, 4], 10) == pytest.approx([2.0, 3.0])


def test_moving_average_empty_or_zero_window():
    assert moving_average([], 3) == []
    assert moving_average([1, 2], 0) == []


def test_ema_blends_previous_output():
    assert ema([1, 2, 3], 0.5) == pytest.approx([1.0, 1.5, 2.25])


def test_ema_alpha_is_clamped():
    assert ema([1, 5], 2.0) == pytest.approx([1.0, 5.0])
    assert ema([1, 5], -1.0) == pytest.approx([1.0, 1.0])
    assert ema([], 0.3) == []


def test_z_scores():
    assert z_scores([1, 2, 3]) == pytest.approx([-1.0, 0.0, 1.0])
    assert z_scores([5, 5, 5]) == [0.0, 0.0, 0.0]


def test_coefficient_of_variation():
    assert pytest.approx(coefficient_of_variation([1, 2, 3])) == 50.0
    assert coefficient_of_variation([-1, 0, 1]) == 0.0
    assert coefficient_of_variation([]) == 0.0
