"""
What-if analysis over weighted grade averages: the grade needed on the next assessment to reach a target average, the effect of adding hypothetical grades, and impact curves over the whole grade scale.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from engine.models import Grade, for_subject, values_of, weighted_totals
from engine.statistics import mean
from config import settings


@dataclass(frozen=True)
class GradeNeeded:
    target_average: float
    grade_needed: float
    weight: float
    achievable: bool


@dataclass(frozen=True)
class ImpactEntry:
    hypothetical_grade: float
    resulting_average: float
    impact: float


@dataclass(frozen=True)
class WhatIfResult:
    current_average: float = 0.0
    new_average: float = 0.0
    change: float = 0.0
    change_percent: float = 0.0
    grades_needed_for_target: List[GradeNeeded] = field(default_factory=list)
    impact_analysis: List[ImpactEntry] = field(default_factory=list)


def grade_needed(
    current_average: float,
    current_total_weight: float,
    target_average: float,
    new_grade_weight: float,
) -> float:
    """Solve ``target = (avg*W + x*w) / (W + w)`` for ``x``; NaN when ``w <= 0``."""
    if new_grade_weight <= 0:
        return float("nan")
    total_weight = current_total_weight + new_grade_weight
    return (target_average * total_weight - current_average * current_total_weight) / new_grade_weight


def _achievable(value: float) -> bool:
    return settings.grade_min <= value <= settings.grade_max


def _needed_entries(
    current_average: float,
    current_weight: float,
    weight: float,
    targets: Sequence[float],
) -> List[GradeNeeded]:
    rows: List[GradeNeeded] = []
    for target in targets:
        needed = grade_needed(current_average, current_weight, target, weight)
        rows.append(GradeNeeded(
            target_average=target,
            grade_needed=needed,
            weight=weight,
            achievable=_achievable(needed),
        ))
    return rows


def _scale_points() -> List[float]:
    step = settings.impact_grade_step
    steps = int(round((settings.grade_max - settings.grade_min) / step))
    return [settings.grade_min + i * step for i in range(steps + 1)]


def impact_entries(current_avg: float, current_weight: float, new_weight: float) -> List[ImpactEntry]:
    total_weight = current_weight + new_weight
    entries: List[ImpactEntry] = []
    for grade in _scale_points():
        if total_weight > 0:
            resulting = (current_avg * current_weight + grade * new_weight) / total_weight
        else:
            resulting = current_avg
        entries.append(ImpactEntry(
            hypothetical_grade=grade,
            resulting_average=resulting,
            impact=resulting - current_avg,
        ))
    return entries


def _subject_standing(grades: Sequence[Grade]) -> tuple[float, float]:
    weight, total = weighted_totals(grades)
    if weight > 0:
        return total / weight, weight
    return mean(values_of(grades)), weight


def whatif(
    grades: Sequence[Grade],
    hypothetical: Sequence[Grade],
    targets: Optional[Sequence[float]] = None,
) -> WhatIfResult:
    if not grades and not hypothetical:
        return WhatIfResult()
    if targets is None:
        targets = settings.scenario_targets

    current_weight, current_sum = weighted_totals(grades)
    current_average = current_sum / current_weight if current_weight > 0 else 0.0

    extra_weight, extra_sum = weighted_totals(hypothetical)
    new_weight = current_weight + extra_weight
    new_average = (current_sum + extra_sum) / new_weight if new_weight > 0 else 0.0

    change = new_average - current_average
    change_percent = change / current_average * 100.0 if current_average > 0 else 0.0

    step_weight = hypothetical[0].weight if hypothetical else 1.0

    return WhatIfResult(
        current_average=current_average,
        new_average=new_average,
        change=change,
        change_percent=change_percent,
        grades_needed_for_target=_needed_entries(new_average, new_weight, step_weight, targets),
        impact_analysis=impact_entries(new_average, new_weight, step_weight),
    )


def impact_analysis(grades: Sequence[Grade], subject: str, weight: float) -> List[ImpactEntry]:
    scoped = for_subject(grades, subject)
    if not scoped:
        # no history: the first grade becomes the average
        return [
            ImpactEntry(hypothetical_grade=g, resulting_average=g, impact=0.0)
            for g in _scale_points()
        ]
    current_avg, current_weight = _subject_standing(scoped)
    return impact_entries(current_avg, current_weight, weight)


def grades_for_targets(
    grades: Sequence[Grade],
    subject: str,
    weight: float,
    targets: Sequence[float],
) -> List[GradeNeeded]:
    scoped = for_subject(grades, subject)
    if not scoped:
        return [
            GradeNeeded(target_average=t, grade_needed=t, weight=weight, achievable=_achievable(t))
            for t in targets
        ]
    current_avg, current_weight = _subject_standing(scoped)
    return _needed_entries(current_avg, current_weight, weight, targets)
