"""
Grade bookkeeping subpackage: averages, GPA, subject summaries, pass/fail tallies, timelines and study-priority insights.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.grades.insights import (
    Priority,
    attention_needed,
    distribution,
    extreme_subjects,
    suggest_priorities,
)
from engine.grades.summary import (
    GpaScale,
    PassFailStats,
    SubjectSummary,
    all_subject_summaries,
    gpa,
    pass_fail_stats,
    simple_average,
    subject_average,
    subject_summary,
    weighted_average,
)
from engine.grades.timeline import group_by_month, improvement, running_average

__all__ = [
    "Priority",
    "attention_needed",
    "distribution",
    "extreme_subjects",
    "suggest_priorities",
    "GpaScale",
    "PassFailStats",
    "SubjectSummary",
    "all_subject_summaries",
    "gpa",
    "pass_fail_stats",
    "simple_average",
    "subject_average",
    "subject_summary",
    "weighted_average",
    "group_by_month",
    "improvement",
    "running_average",
]
