"""
Outlier detection using Tukey fences on the interquartile range.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from engine.statistics import describe
from config import settings


@dataclass(frozen=True)
class Outlier:
    index: int
    value: float


def detect(data: Sequence[float], factor: float | None = None) -> List[Outlier]:
    if factor is None:
        factor = settings.outlier_iqr_factor
    if len(data) < settings.outlier_min_samples:
        return []

    summary = describe(data)
    lower = summary.percentile_25 - factor * summary.iqr
    upper = summary.percentile_75 + factor * summary.iqr

    return [
        Outlier(index=i, value=float(v))
        for i, v in enumerate(data)
        if v < lower or v > upper
    ]
