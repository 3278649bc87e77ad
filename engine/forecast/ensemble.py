"""
Next-grade prediction from a grade history. Three independent estimators (trend extrapolation, exponential smoothing and a recency-weighted average) each produce a clamped sub-prediction; a fixed-weight reducer blends their point estimates while the blended confidence is the plain mean of the three sub-confidences. The prediction interval is derived from the spread of the raw history.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from engine.enums import PredictionMethod
from engine.models import Grade, sorted_by_time, time_series, values_of
from engine.smoothing import coefficient_of_variation, ema
from engine.statistics import mean, std_deviation, variance
from engine.trend import fit
from config import settings


@dataclass(frozen=True)
class Prediction:
    predicted_value: float = 0.0
    confidence: float = 0.0
    lower_bound: float = 0.0
    upper_bound: float = 0.0
    method: PredictionMethod = PredictionMethod.none


def clamp_grade(value: float) -> float:
    return min(settings.grade_max, max(settings.grade_min, value))


def _clamp_confidence(value: float) -> float:
    return min(settings.ensemble_confidence_ceiling, max(settings.ensemble_confidence_floor, value))


def _banded(value: float, confidence: float, spread: float, method: PredictionMethod) -> Prediction:
    return Prediction(
        predicted_value=clamp_grade(value),
        confidence=confidence,
        lower_bound=max(value - spread, settings.grade_min),
        upper_bound=min(value + spread, settings.grade_max),
        method=method,
    )


def _from_trend(ordered: Sequence[Grade]) -> Prediction:
    model = fit(time_series(ordered))
    elapsed = ordered[-1].timestamp - ordered[0].timestamp
    # whole-unit interval, matching the integer timestamp domain
    interval = elapsed // (len(ordered) - 1)
    value = model.slope * float(elapsed + interval) + model.intercept
    return _banded(value, model.r_squared, settings.ensemble_trend_spread, PredictionMethod.trend)


def _from_ema(values: List[float]) -> Prediction:
    smoothed = ema(values, settings.ensemble_ema_alpha)
    value = smoothed[-1]
    spread = variance(smoothed) if len(smoothed) > 1 else 1.0
    confidence = _clamp_confidence(1.0 / (1.0 + math.sqrt(spread)))
    return _banded(value, confidence, settings.ensemble_ema_spread, PredictionMethod.ema)


def _from_regression(values: List[float]) -> Prediction:
    if len(values) < settings.ensemble_regression_min_samples:
        return _banded(
            mean(values),
            settings.ensemble_fallback_confidence,
            settings.ensemble_regression_spread,
            PredictionMethod.simple_average,
        )

    arr = np.asarray(values, dtype=float)
    weights = (np.arange(arr.size, dtype=float) + 1.0) ** 2
    value = float(np.sum(arr * weights) / np.sum(weights))

    cv = coefficient_of_variation(values)
    confidence = _clamp_confidence((100.0 - min(cv, 100.0)) / 100.0)
    return _banded(value, confidence, settings.ensemble_regression_spread, PredictionMethod.weighted_regression)


def blend_weights(n: int) -> Tuple[float, float, float]:
    """(trend, ema, regression) weights for a history of ``n`` grades."""
    if n >= settings.ensemble_trend_full_min_samples:
        trend_w = settings.ensemble_trend_weight_full
    else:
        trend_w = settings.ensemble_trend_weight_sparse
    ema_w = settings.ensemble_ema_weight
    return trend_w, ema_w, 1.0 - trend_w - ema_w


def combine(parts: Sequence[Tuple[Prediction, float]], values: List[float]) -> Prediction:
    combined = sum(p.predicted_value * w for p, w in parts)
    confidence = sum(p.confidence for p, _ in parts) / len(parts)

    spread = settings.ensemble_bound_sigma * std_deviation(values)
    return Prediction(
        predicted_value=clamp_grade(combined),
        confidence=confidence,
        lower_bound=max(combined - spread, settings.grade_min),
        upper_bound=min(combined + spread, settings.grade_max),
        method=PredictionMethod.ensemble,
    )


def predict_next(grades: Sequence[Grade]) -> Prediction:
    if not grades:
        return Prediction()

    if len(grades) == 1:
        only = grades[0].value
        return Prediction(
            predicted_value=only,
            confidence=settings.single_value_confidence,
            lower_bound=max(only - settings.single_value_spread, settings.grade_min),
            upper_bound=min(only + settings.single_value_spread, settings.grade_max),
            method=PredictionMethod.single_value,
        )

    ordered = sorted_by_time(grades)
    values = values_of(ordered)

    trend_w, ema_w, regression_w = blend_weights(len(ordered))
    return combine(
        [
            (_from_trend(ordered), trend_w),
            (_from_ema(values), ema_w),
            (_from_regression(values), regression_w),
        ],
        values,
    )
