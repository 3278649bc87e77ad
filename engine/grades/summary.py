"""
Grade bookkeeping: simple and weighted averages, GPA conversion, per-subject summaries and pass/fail tallies.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from engine.forecast import predict_next
from engine.models import Grade, for_subject, sorted_by_time, time_series, values_of, weighted_totals
from engine.statistics import mean
from engine.trend import fit
from config import settings


@dataclass(frozen=True)
class GpaScale:
    max_grade: float
    passing_grade: float
    gpa_max: float

    @classmethod
    def default(cls) -> GpaScale:
        return cls(
            max_grade=settings.grade_max,
            passing_grade=settings.passing_grade,
            gpa_max=settings.gpa_max,
        )


@dataclass(frozen=True)
class SubjectSummary:
    subject: str
    average: float = 0.0
    weighted_average: float = 0.0
    grade_count: int = 0
    total_weight: float = 0.0
    highest: float = 0.0
    lowest: float = 0.0
    passing_count: int = 0
    failing_count: int = 0
    trend: float = 0.0
    predicted_next: float = 0.0


@dataclass(frozen=True)
class PassFailStats:
    total: int = 0
    passing: int = 0
    failing: int = 0
    pass_rate: float = 0.0
    fail_rate: float = 0.0
    average_passing: float = 0.0
    average_failing: float = 0.0


def simple_average(grades: Sequence[Grade]) -> float:
    return mean(values_of(grades))


def weighted_average(grades: Sequence[Grade]) -> float:
    if not grades:
        return 0.0
    total_weight, weighted_sum = weighted_totals(grades)
    if total_weight == 0:
        return simple_average(grades)
    return weighted_sum / total_weight


def gpa(grades: Sequence[Grade], scale: Optional[GpaScale] = None) -> float:
    """Linear rescale of the weighted average from [1, max_grade] onto [0, gpa_max]."""
    if not grades:
        return 0.0
    if scale is None:
        scale = GpaScale.default()
    span = scale.max_grade - settings.grade_min
    if abs(span) < settings.numeric_epsilon:
        return 0.0
    normalized = (weighted_average(grades) - settings.grade_min) / span
    return min(scale.gpa_max, max(0.0, normalized * scale.gpa_max))


def subject_average(grades: Sequence[Grade], subject: str) -> float:
    return weighted_average(for_subject(grades, subject))


def subject_summary(grades: Sequence[Grade], subject: str) -> SubjectSummary:
    scoped = for_subject(grades, subject)
    if not scoped:
        return SubjectSummary(subject=subject)

    values = values_of(scoped)
    total_weight, _ = weighted_totals(scoped)
    passing = sum(1 for g in scoped if g.is_passing)

    slope = fit(time_series(sorted_by_time(scoped))).slope if len(scoped) >= 2 else 0.0

    return SubjectSummary(
        subject=subject,
        average=mean(values),
        weighted_average=weighted_average(scoped),
        grade_count=len(scoped),
        total_weight=total_weight,
        highest=max(values),
        lowest=min(values),
        passing_count=passing,
        failing_count=len(scoped) - passing,
        trend=slope,
        predicted_next=predict_next(scoped).predicted_value,
    )


def subjects_of(grades: Sequence[Grade]) -> List[str]:
    return sorted({g.subject.lower() for g in grades})


def all_subject_summaries(grades: Sequence[Grade]) -> List[SubjectSummary]:
    return [subject_summary(grades, subject) for subject in subjects_of(grades)]


def pass_fail_stats(grades: Sequence[Grade]) -> PassFailStats:
    if not grades:
        return PassFailStats()

    passing = [g.value for g in grades if g.is_passing]
    failing = [g.value for g in grades if not g.is_passing]
    total = len(grades)

    return PassFailStats(
        total=total,
        passing=len(passing),
        failing=len(failing),
        pass_rate=len(passing) / total * 100.0,
        fail_rate=len(failing) / total * 100.0,
        average_passing=mean(passing),
        average_failing=mean(failing),
    )
