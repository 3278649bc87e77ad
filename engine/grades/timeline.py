"""
Time-ordered views over a grade history: running weighted average, calendar-month grouping and first-to-last-quarter improvement.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, List, Sequence, Tuple

from engine.models import Grade, sorted_by_time, values_of
from engine.statistics import mean
from config import settings


def running_average(grades: Sequence[Grade]) -> List[Tuple[int, float]]:
    running_sum = 0.0
    running_weight = 0.0
    points: List[Tuple[int, float]] = []
    for g in sorted_by_time(grades):
        running_sum += g.value * g.weight
        running_weight += g.weight
        avg = running_sum / running_weight if running_weight > 0 else g.value
        points.append((g.timestamp, avg))
    return points


def month_key(timestamp_ms: int) -> str:
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc).strftime("%Y-%m")


def group_by_month(grades: Sequence[Grade]) -> Dict[str, List[Grade]]:
    groups: Dict[str, List[Grade]] = {}
    for g in grades:
        groups.setdefault(month_key(g.timestamp), []).append(g)
    return dict(sorted(groups.items()))


def improvement(grades: Sequence[Grade]) -> float:
    if len(grades) < 2:
        return 0.0
    ordered = sorted_by_time(grades)
    quarter = max(1, len(ordered) // settings.improvement_quarter_divisor)
    first = mean(values_of(ordered[:quarter]))
    last = mean(values_of(ordered[-quarter:]))
    return last - first
