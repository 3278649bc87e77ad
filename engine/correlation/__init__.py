"""
Correlation logic for relating two grade sequences to each other, or one sequence to its own lagged copy, to surface consistent up/down patterns across subjects and terms.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.correlation.measures import autocorrelation, correlation

__all__ = ["autocorrelation", "correlation"]
