"""
Observation value type shared by the grade bookkeeping, forecast and scenario packages.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple


@dataclass(frozen=True)
class Grade:
    value: float
    weight: float = 1.0
    subject: str = ""
    description: str = ""
    timestamp: int = 0
    is_passing: Optional[bool] = field(default=None)

    def __post_init__(self) -> None:
        if self.is_passing is None:
            from config import settings

            object.__setattr__(self, "is_passing", self.value >= settings.passing_grade)


def values_of(grades: Sequence[Grade]) -> List[float]:
    return [g.value for g in grades]


def time_series(grades: Sequence[Grade]) -> List[Tuple[int, float]]:
    return [(g.timestamp, g.value) for g in grades]


def sorted_by_time(grades: Sequence[Grade]) -> List[Grade]:
    return sorted(grades, key=lambda g: g.timestamp)


def weighted_totals(grades: Sequence[Grade]) -> Tuple[float, float]:
    """(total weight, weight-scaled sum of values)."""
    total_weight = sum(g.weight for g in grades)
    weighted_sum = sum(g.value * g.weight for g in grades)
    return float(total_weight), float(weighted_sum)


def for_subject(grades: Sequence[Grade], subject: str) -> List[Grade]:
    wanted = subject.lower()
    return [g for g in grades if g.subject.lower() == wanted]
