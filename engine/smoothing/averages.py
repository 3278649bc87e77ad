"""
Smoothing helpers for grade sequences: trailing moving average with a shrinking start window and a seeded exponential moving average.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np


def moving_average(data: Sequence[float], window: int) -> List[float]:
    if len(data) == 0 or window <= 0:
        return []
    arr = np.asarray(data, dtype=float)
    window = min(int(window), arr.size)
    result = np.zeros(arr.size)
    for i in range(arr.size):
        start = max(0, i - window + 1)
        result[i] = np.mean(arr[start : i + 1])
    return result.tolist()


def ema(data: Sequence[float], alpha: float) -> List[float]:
    if len(data) == 0:
        return []
    alpha = min(1.0, max(0.0, float(alpha)))
    result = np.zeros(len(data))
    result[0] = data[0]
    for i in range(1, len(data)):
        result[i] = alpha * data[i] + (1 - alpha) * result[i - 1]
    return result.tolist()
