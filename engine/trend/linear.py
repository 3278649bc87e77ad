"""
Ordinary least-squares trend fitting over (timestamp, value) pairs, producing slope, intercept, goodness of fit and a derived direction/strength classification. Timestamps are re-based to their minimum before fitting; the input order is kept as given.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

import numpy as np

from engine.enums import TrendDirection, TrendStrength
from config import settings


@dataclass(frozen=True)
class TrendModel:
    slope: float = 0.0
    intercept: float = 0.0
    r_squared: float = 0.0
    direction: TrendDirection = TrendDirection.stable
    strength: TrendStrength = TrendStrength.none
    predicted_values: List[float] = field(default_factory=list)


def _rebase(points: Sequence[Tuple[int, float]]) -> Tuple[np.ndarray, np.ndarray]:
    ts = [int(t) for t, _ in points]
    origin = min(ts)
    x = np.array([t - origin for t in ts], dtype=float)
    y = np.array([v for _, v in points], dtype=float)
    return x, y


def _r_squared(x: np.ndarray, y: np.ndarray, slope: float, intercept: float) -> float:
    ss_tot = float(np.sum((y - np.mean(y)) ** 2))
    ss_res = float(np.sum((y - (slope * x + intercept)) ** 2))
    return 1.0 - ss_res / ss_tot if ss_tot > 0 else 0.0


def fit(points: Sequence[Tuple[int, float]]) -> TrendModel:
    """Fit ``value = slope * (t - min(t)) + intercept``.

    Callers that care about temporal order must sort ``points`` first.
    """
    if len(points) < 2:
        return TrendModel()

    x, y = _rebase(points)
    n = float(len(x))

    sum_x = float(np.sum(x))
    sum_y = float(np.sum(y))
    sum_xy = float(np.sum(x * y))
    sum_x2 = float(np.sum(x * x))

    denominator = n * sum_x2 - sum_x * sum_x
    if abs(denominator) < settings.numeric_epsilon:
        return TrendModel(intercept=sum_y / n)

    slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = (sum_y - slope * sum_x) / n
    r2 = _r_squared(x, y, slope, intercept)

    return TrendModel(
        slope=slope,
        intercept=intercept,
        r_squared=r2,
        direction=TrendDirection.from_slope(slope),
        strength=TrendStrength.from_r_squared(r2),
        predicted_values=[float(v) for v in slope * x + intercept],
    )
