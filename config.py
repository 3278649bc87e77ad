"""
Constants and configuration for Gradesight.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os
from typing import List, Tuple

from pydantic_settings import BaseSettings


APP_VERSION = "1.2.0"

GRADESIGHT_HOST = os.getenv("GRADESIGHT_HOST", "0.0.0.0")
GRADESIGHT_PORT = int(os.getenv("GRADESIGHT_PORT", "4330"))
GRADESIGHT_LOG_LEVEL = os.getenv("GRADESIGHT_LOG_LEVEL", "INFO").upper()

# valid grade scale, inclusive on both ends
GRADE_MIN: float = 1.0
GRADE_MAX: float = 10.0
PASSING_GRADE: float = float(os.getenv("GRADESIGHT_PASSING_GRADE", "5.5"))
GPA_MAX: float = 4.0

# targets evaluated by the what-if scenario when none are supplied
DEFAULT_SCENARIO_TARGETS: List[float] = [5.5, 6.0, 6.5, 7.0, 7.5, 8.0]


class Settings(BaseSettings):
    host: str = GRADESIGHT_HOST
    port: int = GRADESIGHT_PORT
    log_level: str = GRADESIGHT_LOG_LEVEL

    grade_min: float = GRADE_MIN
    grade_max: float = GRADE_MAX
    passing_grade: float = PASSING_GRADE
    gpa_max: float = GPA_MAX

    # guard used wherever a denominator or a spread could collapse to zero
    numeric_epsilon: float = 1e-10

    # descriptive statistics
    mode_decimals: int = 2
    skewness_min_samples: int = 3
    kurtosis_min_samples: int = 4

    # outlier fencing and distribution helpers
    outlier_min_samples: int = 4
    outlier_iqr_factor: float = 1.5
    histogram_upper_nudge: float = 0.001
    value_percentile_tolerance: float = 0.001

    # trend classification
    trend_stable_slope: float = 0.001
    # (r_squared cutoff, label) checked from the top down
    trend_strength_thresholds: List[Tuple[float, str]] = [
        (0.6, "strong"),
        (0.3, "moderate"),
        (0.1, "weak"),
    ]

    # prediction ensemble
    ensemble_ema_alpha: float = 0.3
    ensemble_trend_weight_full: float = 0.4
    ensemble_trend_weight_sparse: float = 0.2
    ensemble_trend_full_min_samples: int = 5
    ensemble_ema_weight: float = 0.3
    ensemble_regression_min_samples: int = 3
    ensemble_bound_sigma: float = 2.0
    ensemble_confidence_floor: float = 0.1
    ensemble_confidence_ceiling: float = 0.9
    ensemble_trend_spread: float = 1.5
    ensemble_ema_spread: float = 1.0
    ensemble_regression_spread: float = 1.5
    ensemble_fallback_confidence: float = 0.3
    single_value_confidence: float = 0.2
    single_value_spread: float = 1.0

    # final grade projection
    projection_confidence_decay: float = 0.1
    projection_spread: float = 1.0
    pass_probability_unknown: float = 0.5
    pass_probability_scale: float = 2.0

    # scenario engine
    scenario_targets: List[float] = DEFAULT_SCENARIO_TARGETS
    impact_grade_step: float = 0.5

    # subject bookkeeping
    attention_average_cutoff: float = 6.0
    attention_trend_cutoff: float = -0.1
    improvement_quarter_divisor: int = 4
    priority_recent_count: int = 3
    priority_average_factor: float = 10.0
    priority_failing_weight: float = 15.0
    priority_decline_weight: float = 10.0
    priority_target_average: float = 6.5
    priority_decline_margin: float = 0.5

    model_config = {
        "env_prefix": "GRADESIGHT_",
        "extra": "ignore",
    }


settings = Settings()
