"""
Equal-width histogram bucketing and mid-rank percentile of a single value within a grade sequence.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from config import settings


@dataclass(frozen=True)
class HistogramBucket:
    start: float
    end: float
    count: int


def histogram(data: Sequence[float], buckets: int) -> List[HistogramBucket]:
    if len(data) == 0 or buckets <= 0:
        return []

    arr = np.asarray(data, dtype=float)
    lo = float(np.min(arr))
    hi = float(np.max(arr))

    if abs(hi - lo) < settings.numeric_epsilon:
        return [HistogramBucket(start=lo, end=hi, count=int(arr.size))]

    size = (hi - lo) / buckets
    # last edge is nudged up so the maximum lands inside the final bucket
    edges = [
        (lo + i * size, hi + settings.histogram_upper_nudge if i == buckets - 1 else lo + (i + 1) * size)
        for i in range(buckets)
    ]

    index = np.floor((arr - lo) / size)
    index = np.nan_to_num(index, nan=0.0, posinf=buckets - 1, neginf=0.0)
    index = np.clip(index, 0, buckets - 1).astype(int)
    counts = np.bincount(index, minlength=buckets)

    return [
        HistogramBucket(start=start, end=end, count=int(c))
        for (start, end), c in zip(edges, counts)
    ]


def value_percentile(data: Sequence[float], value: float) -> float:
    """Mid-rank percentile (0-100) of ``value`` among ``data``."""
    if len(data) == 0:
        return 0.0
    arr = np.asarray(data, dtype=float)
    below = int(np.sum(arr < value))
    equal = int(np.sum(np.abs(arr - value) < settings.value_percentile_tolerance))
    return (below + 0.5 * equal) / arr.size * 100.0
