"""
Distribution subpackage: IQR outlier fencing, histogram bucketing and value-rank percentiles.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.distribution.histogram import HistogramBucket, histogram, value_percentile
from engine.distribution.outliers import Outlier, detect as detect_outliers

__all__ = ["HistogramBucket", "histogram", "value_percentile", "Outlier", "detect_outliers"]
