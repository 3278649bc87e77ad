"""
Subject-level insights over a grade history: the integer-grade distribution, best and worst subjects, subjects that need attention, and a ranked list of study priorities with a short reason for each.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from engine.grades.summary import SubjectSummary, all_subject_summaries, subjects_of
from engine.models import Grade, for_subject, sorted_by_time, values_of
from engine.statistics import mean
from config import settings


@dataclass(frozen=True)
class Priority:
    subject: str
    score: float
    reason: str


def distribution(grades: Sequence[Grade]) -> Dict[str, int]:
    lo, hi = int(settings.grade_min), int(settings.grade_max)
    counts = {str(i): 0 for i in range(lo, hi + 1)}
    if not grades:
        return counts
    buckets = np.floor(np.asarray(values_of(grades), dtype=float))
    buckets = np.clip(np.nan_to_num(buckets, nan=lo, posinf=hi, neginf=lo), lo, hi).astype(int)
    for b in buckets:
        counts[str(int(b))] += 1
    return counts


def extreme_subjects(grades: Sequence[Grade]) -> Tuple[Optional[SubjectSummary], Optional[SubjectSummary]]:
    summaries = all_subject_summaries(grades)
    if not summaries:
        return None, None
    best = max(summaries, key=lambda s: s.weighted_average)
    worst = min(summaries, key=lambda s: s.weighted_average)
    return best, worst


def attention_needed(grades: Sequence[Grade]) -> List[SubjectSummary]:
    return [
        s for s in all_subject_summaries(grades)
        if s.weighted_average < settings.attention_average_cutoff
        or s.trend < settings.attention_trend_cutoff
    ]


def _recent_mean(ordered: Sequence[Grade]) -> Optional[float]:
    if len(ordered) < settings.priority_recent_count:
        return None
    return mean(values_of(ordered[-settings.priority_recent_count:]))


def _score(avg: float, failing: int, recent: Optional[float]) -> float:
    score = (settings.grade_max - avg) * settings.priority_average_factor
    score += failing * settings.priority_failing_weight
    if recent is not None and recent < avg:
        score += settings.priority_decline_weight
    return score


def _reason(avg: float, failing: int, recent: Optional[float]) -> str:
    if avg < settings.passing_grade:
        return "Failing average - immediate attention needed"
    if failing > 0:
        return f"{failing} failing grade(s) affecting average"
    if avg < settings.priority_target_average:
        return "Below target average - room for improvement"
    if recent is not None and recent < avg - settings.priority_decline_margin:
        return "Recent decline detected"
    return "Maintain current performance"


def suggest_priorities(grades: Sequence[Grade]) -> List[Priority]:
    ranked: List[Priority] = []
    for subject in subjects_of(grades):
        ordered = sorted_by_time(for_subject(grades, subject))
        avg = mean(values_of(ordered))
        failing = sum(1 for g in ordered if not g.is_passing)
        recent = _recent_mean(ordered)
        ranked.append(Priority(
            subject=subject,
            score=_score(avg, failing, recent),
            reason=_reason(avg, failing, recent),
        ))
    return sorted(ranked, key=lambda p: (-p.score, p.subject))
