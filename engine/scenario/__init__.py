"""
Scenario subpackage for what-if, grade-needed and impact-curve calculations.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.scenario.whatif import (
    GradeNeeded,
    ImpactEntry,
    WhatIfResult,
    grade_needed,
    grades_for_targets,
    impact_analysis,
    impact_entries,
    whatif,
)

__all__ = [
    "GradeNeeded",
    "ImpactEntry",
    "WhatIfResult",
    "grade_needed",
    "grades_for_targets",
    "impact_analysis",
    "impact_entries",
    "whatif",
]
