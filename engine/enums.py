"""
Enumerations for trend direction, trend strength and prediction methods.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum


class TrendDirection(str, Enum):
    declining = "declining"
    stable = "stable"
    improving = "improving"

    @classmethod
    def from_slope(cls, slope: float) -> TrendDirection:
        from config import settings

        if abs(slope) < settings.trend_stable_slope:
            return cls.stable
        if slope > 0:
            return cls.improving
        return cls.declining


class TrendStrength(str, Enum):
    none = "none"
    weak = "weak"
    moderate = "moderate"
    strong = "strong"

    @classmethod
    def from_r_squared(cls, r_squared: float) -> TrendStrength:
        # thresholds live in settings so tests can move the breakpoints
        from config import settings

        for cutoff, label in settings.trend_strength_thresholds:
            if r_squared >= cutoff:
                return cls(label)
        return cls.none


class PredictionMethod(str, Enum):
    none = "none"
    single_value = "single_value"
    trend = "trend"
    ema = "ema"
    simple_average = "simple_average"
    weighted_regression = "weighted_regression"
    ensemble = "ensemble"
    final_projection = "final_projection"
