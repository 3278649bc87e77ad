from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import List, Sequence

from engine.enums import TrendDirection
from engine.forecast import Prediction, predict_next
from engine.grades import (
    GpaScale,
    SubjectSummary,
    all_subject_summaries,
    gpa,
    pass_fail_stats,
    simple_average,
    weighted_average,
)
from engine.models import Grade, for_subject, sorted_by_time, time_series, values_of
from engine.statistics import StatisticsSummary, describe
from engine.trend import TrendModel, fit

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalyticsReport:
    overall_average: float = 0.0
    weighted_average: float = 0.0
    gpa: float = 0.0
    total_grades: int = 0
    passing_grades: int = 0
    failing_grades: int = 0
    pass_rate: float = 0.0
    subjects: List[SubjectSummary] = field(default_factory=list)
    statistics: StatisticsSummary = field(default_factory=StatisticsSummary)
    trend: TrendModel = field(default_factory=TrendModel)
    predictions: List[Prediction] = field(default_factory=list)
    summary: str = ""


def _summary(report: AnalyticsReport) -> str:
    if report.total_grades == 0:
        return "No grades to analyze."
    parts = [
        f"{report.total_grades} grade(s) across {len(report.subjects)} subject(s)",
        f"weighted average {report.weighted_average:.2f}",
        f"pass rate {report.pass_rate:.0f}%",
    ]
    if report.trend.direction != TrendDirection.stable:
        parts.append(f"{report.trend.direction.value} ({report.trend.strength.value})")
    failing = [s.subject for s in report.subjects if s.failing_count > 0]
    if failing:
        parts.append(f"failing grades in {', '.join(failing)}")
    return " | ".join(parts) + "."


def run(grades: Sequence[Grade], scale: GpaScale | None = None) -> AnalyticsReport:
    if not grades:
        report = AnalyticsReport()
        return replace(report, summary=_summary(report))

    pass_fail = pass_fail_stats(grades)
    subjects = all_subject_summaries(grades)
    trend = fit(time_series(sorted_by_time(grades)))
    predictions = [predict_next(for_subject(grades, s.subject)) for s in subjects]

    log.debug(
        "analyze grades=%d subjects=%d slope=%.6f r2=%.3f",
        len(grades), len(subjects), trend.slope, trend.r_squared,
    )

    report = AnalyticsReport(
        overall_average=simple_average(grades),
        weighted_average=weighted_average(grades),
        gpa=gpa(grades, scale),
        total_grades=len(grades),
        passing_grades=pass_fail.passing,
        failing_grades=pass_fail.failing,
        pass_rate=pass_fail.pass_rate,
        subjects=subjects,
        statistics=describe(values_of(grades)),
        trend=trend,
        predictions=predictions,
    )
    return replace(report, summary=_summary(report))
