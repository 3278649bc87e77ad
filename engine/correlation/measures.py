"""
Correlation measures between grade sequences (Pearson) and within one sequence (lagged autocorrelation), returning 0 instead of NaN whenever a variance term vanishes.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from engine.statistics import variance
from config import settings


def correlation(data1: Sequence[float], data2: Sequence[float]) -> float:
    if len(data1) != len(data2) or len(data1) < 2:
        return 0.0

    a = np.asarray(data1, dtype=float)
    b = np.asarray(data2, dtype=float)
    da = a - np.mean(a)
    db = b - np.mean(b)

    denominator = math.sqrt(float(np.sum(da * da)) * float(np.sum(db * db)))
    if abs(denominator) < settings.numeric_epsilon:
        return 0.0
    return float(np.sum(da * db)) / denominator


def autocorrelation(data: Sequence[float], lag: int) -> float:
    if lag < 0 or len(data) <= lag:
        return 0.0

    var = variance(data)
    if var == 0:
        return 0.0

    arr = np.asarray(data, dtype=float)
    m = float(np.mean(arr))
    n = arr.size - lag
    lagged = float(np.sum((arr[:n] - m) * (arr[lag : lag + n] - m)))
    return lagged / (n * var)
