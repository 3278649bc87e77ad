"""
Forecasting logic for grade histories: the multi-method next-grade ensemble with confidence bounds, and the final-average and pass-probability projections built on top of it.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""


from engine.forecast.ensemble import Prediction, blend_weights, clamp_grade, predict_next
from engine.forecast.projection import pass_probability, predict_final_grade

__all__ = [
    "Prediction",
    "blend_weights",
    "clamp_grade",
    "predict_next",
    "pass_probability",
    "predict_final_grade",
]
