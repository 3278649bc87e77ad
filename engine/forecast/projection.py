"""
Forward projections built on the next-grade ensemble: the expected final average after the remaining assessments, and the probability of finishing at or above the passing grade.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Sequence

from scipy.special import expit

from engine.enums import PredictionMethod
from engine.forecast.ensemble import Prediction, clamp_grade, predict_next
from engine.models import Grade, values_of, weighted_totals
from engine.statistics import mean
from config import settings


def predict_final_grade(
    grades: Sequence[Grade],
    remaining_assessments: int,
    typical_weight: float,
) -> Prediction:
    if not grades:
        return Prediction()

    remaining = max(0, int(remaining_assessments))
    nxt = predict_next(grades)
    current_weight, current_sum = weighted_totals(grades)

    future_weight = remaining * typical_weight
    total_weight = current_weight + future_weight
    if total_weight > 0:
        final = (current_sum + nxt.predicted_value * future_weight) / total_weight
    else:
        final = nxt.predicted_value

    decay = 1.0 / (1.0 + remaining * settings.projection_confidence_decay)
    spread = settings.projection_spread
    return Prediction(
        predicted_value=clamp_grade(final),
        confidence=nxt.confidence * decay,
        lower_bound=max(final - spread, settings.grade_min),
        upper_bound=min(final + spread, settings.grade_max),
        method=PredictionMethod.final_projection,
    )


def pass_probability(grades: Sequence[Grade], remaining_weight: float) -> float:
    if not grades:
        return settings.pass_probability_unknown

    current_weight, current_sum = weighted_totals(grades)
    current_avg = current_sum / current_weight if current_weight > 0 else mean(values_of(grades))

    if remaining_weight <= 0:
        return 1.0 if current_avg >= settings.passing_grade else 0.0

    needed = (settings.passing_grade * (current_weight + remaining_weight) - current_sum) / remaining_weight
    if needed <= settings.grade_min:
        return 1.0
    if needed > settings.grade_max:
        return 0.0

    difficulty = (needed - current_avg) / settings.pass_probability_scale
    return float(expit(-difficulty))
