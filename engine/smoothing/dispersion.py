"""
Relative spread and standardisation helpers.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from engine.statistics import mean, std_deviation


def z_scores(data: Sequence[float]) -> List[float]:
    m = mean(data)
    std = std_deviation(data)
    if std == 0:
        return [0.0] * len(data)
    return ((np.asarray(data, dtype=float) - m) / std).tolist()


def coefficient_of_variation(data: Sequence[float]) -> float:
    """Sample standard deviation as a percentage of ``|mean|``; 0 when the mean is 0."""
    m = mean(data)
    if m == 0:
        return 0.0
    return std_deviation(data) / abs(m) * 100.0
