"""
Smoothing subpackage: moving averages, exponential smoothing, z-scores and the coefficient of variation used by the prediction ensemble.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.smoothing.averages import ema, moving_average
from engine.smoothing.dispersion import coefficient_of_variation, z_scores

__all__ = ["ema", "moving_average", "coefficient_of_variation", "z_scores"]
