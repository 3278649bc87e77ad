"""
Descriptive statistics subpackage.

Re-exports :class:`StatisticsSummary`, :func:`describe` and the single-measure
helpers from :mod:`engine.statistics.descriptive` so callers can import them
from ``engine.statistics`` directly.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.statistics.descriptive import (
    StatisticsSummary,
    describe,
    mean,
    median,
    mode,
    percentile,
    std_deviation,
    variance,
)

__all__ = [
    "StatisticsSummary",
    "describe",
    "mean",
    "median",
    "mode",
    "percentile",
    "std_deviation",
    "variance",
]
