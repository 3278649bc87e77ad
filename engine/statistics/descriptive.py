"""
Descriptive statistics over a flat numeric sequence: central tendency, spread, interpolated percentiles and the shape measures (skewness, excess kurtosis), with fixed zero defaults for inputs too small for a formula.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass, field
from typing import List, Sequence

import numpy as np

from config import settings


@dataclass(frozen=True)
class StatisticsSummary:
    count: int = 0
    sum: float = 0.0
    mean: float = 0.0
    median: float = 0.0
    mode: List[float] = field(default_factory=list)
    min: float = 0.0
    max: float = 0.0
    range: float = 0.0
    variance: float = 0.0
    std_deviation: float = 0.0
    percentile_25: float = 0.0
    percentile_50: float = 0.0
    percentile_75: float = 0.0
    percentile_90: float = 0.0
    iqr: float = 0.0
    skewness: float = 0.0
    kurtosis: float = 0.0


def mean(data: Sequence[float]) -> float:
    if len(data) == 0:
        return 0.0
    return float(np.mean(np.asarray(data, dtype=float)))


def median(data: Sequence[float]) -> float:
    if len(data) == 0:
        return 0.0
    return float(np.median(np.asarray(data, dtype=float)))


def _bucket(value: float, scale: int) -> int:
    # halves round away from zero
    return int(math.copysign(math.floor(abs(value) * scale + 0.5), value))


def mode(data: Sequence[float]) -> List[float]:
    """Most frequent values after bucketing to ``settings.mode_decimals`` places.

    Returns an empty list when every bucket holds a single value.
    """
    if len(data) == 0:
        return []
    scale = 10 ** settings.mode_decimals
    frequency = Counter(_bucket(float(v), scale) for v in data)
    top = max(frequency.values())
    if top <= 1:
        return []
    return sorted(key / scale for key, count in frequency.items() if count == top)


def variance(data: Sequence[float]) -> float:
    if len(data) < 2:
        return 0.0
    return float(np.var(np.asarray(data, dtype=float), ddof=1))


def std_deviation(data: Sequence[float]) -> float:
    return math.sqrt(variance(data))


def _percentile_sorted(arr: np.ndarray, p: float) -> float:
    if arr.size == 0:
        return 0.0
    p = min(100.0, max(0.0, float(p)))
    return float(np.percentile(arr, p, method="linear"))


def percentile(data: Sequence[float], p: float) -> float:
    """Linearly interpolated percentile, ``p`` clamped to [0, 100]."""
    return _percentile_sorted(np.sort(np.asarray(data, dtype=float)), p)


def _standardized(arr: np.ndarray, std: float) -> np.ndarray:
    return (arr - np.mean(arr)) / std


def _skewness(arr: np.ndarray, std: float) -> float:
    """Adjusted Fisher-Pearson skewness, n / ((n-1)(n-2)) * sum(z^3)."""
    n = arr.size
    if n < settings.skewness_min_samples or std == 0:
        return 0.0
    z = _standardized(arr, std)
    return float(n / ((n - 1) * (n - 2)) * np.sum(z ** 3))


def _kurtosis(arr: np.ndarray, std: float) -> float:
    """Bias-corrected excess kurtosis over z-scores taken with the sample deviation."""
    n = arr.size
    if n < settings.kurtosis_min_samples or std == 0:
        return 0.0
    z = _standardized(arr, std)
    body = n * (n + 1) * np.sum(z ** 4) / ((n - 1) * (n - 2) * (n - 3))
    return float(body - 3 * (n - 1) ** 2 / ((n - 2) * (n - 3)))


def describe(data: Sequence[float]) -> StatisticsSummary:
    if len(data) == 0:
        return StatisticsSummary()

    arr = np.asarray(data, dtype=float)
    ordered = np.sort(arr)
    n = int(arr.size)
    total = float(np.sum(arr))

    var = variance(arr)
    std = math.sqrt(var)

    p25 = _percentile_sorted(ordered, 25.0)
    p50 = _percentile_sorted(ordered, 50.0)
    p75 = _percentile_sorted(ordered, 75.0)
    p90 = _percentile_sorted(ordered, 90.0)

    lo = float(ordered[0])
    hi = float(ordered[-1])

    return StatisticsSummary(
        count=n,
        sum=total,
        mean=total / n,
        median=float(np.median(ordered)),
        mode=mode(data),
        min=lo,
        max=hi,
        range=hi - lo,
        variance=var,
        std_deviation=std,
        percentile_25=p25,
        percentile_50=p50,
        percentile_75=p75,
        percentile_90=p90,
        iqr=p75 - p25,
        skewness=_skewness(arr, std),
        kurtosis=_kurtosis(arr, std),
    )
