from __future__ import annotations

from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from config import settings
from engine.grades import GpaScale
from engine.models import Grade


class GradeIn(BaseModel):
    value: float
    weight: float = Field(default=1.0, ge=0.0)
    subject: str = ""
    description: str = ""
    timestamp: int = 0
    is_passing: Optional[bool] = None

    def to_grade(self) -> Grade:
        return Grade(
            value=self.value,
            weight=self.weight,
            subject=self.subject,
            description=self.description,
            timestamp=self.timestamp,
            is_passing=self.is_passing,
        )


class GpaScaleIn(BaseModel):
    max_grade: float = Field(default_factory=lambda: settings.grade_max)
    passing_grade: float = Field(default_factory=lambda: settings.passing_grade)
    gpa_max: float = Field(default_factory=lambda: settings.gpa_max, gt=0.0)

    def to_scale(self) -> GpaScale:
        return GpaScale(max_grade=self.max_grade, passing_grade=self.passing_grade, gpa_max=self.gpa_max)


class GradesRequest(BaseModel):
    grades: List[GradeIn] = Field(default_factory=list)

    def to_grades(self) -> List[Grade]:
        return [g.to_grade() for g in self.grades]


class GpaRequest(GradesRequest):
    scale: Optional[GpaScaleIn] = None


class SubjectRequest(GradesRequest):
    subject: str


class SeriesRequest(BaseModel):
    data: List[float] = Field(default_factory=list)


class PercentileRequest(SeriesRequest):
    percentile: float


class ValuePercentileRequest(SeriesRequest):
    value: float


class HistogramRequest(SeriesRequest):
    buckets: int = Field(default=10, ge=0, le=1000)


class MovingAverageRequest(SeriesRequest):
    window: int = Field(default=3, ge=0)


class EmaRequest(SeriesRequest):
    alpha: float = Field(default_factory=lambda: settings.ensemble_ema_alpha)


class AutocorrelationRequest(SeriesRequest):
    lag: int = Field(default=1, ge=0)


class CorrelationRequest(BaseModel):
    data1: List[float]
    data2: List[float]


class TrendRequest(BaseModel):
    points: List[Tuple[int, float]] = Field(default_factory=list)


class GradeNeededRequest(BaseModel):
    current_average: float
    current_total_weight: float
    target_average: float
    new_grade_weight: float


class WhatIfRequest(GradesRequest):
    hypothetical: List[GradeIn] = Field(default_factory=list)
    targets: Optional[List[float]] = None

    def to_hypothetical(self) -> List[Grade]:
        return [g.to_grade() for g in self.hypothetical]


class ImpactRequest(SubjectRequest):
    weight: float = Field(default=1.0, ge=0.0)


class TargetsRequest(ImpactRequest):
    targets: List[float] = Field(default_factory=lambda: list(settings.scenario_targets))


class FinalGradeRequest(GradesRequest):
    remaining_assessments: int = Field(default=1, ge=0, le=1000)
    typical_weight: float = Field(default=1.0, ge=0.0)


class PassProbabilityRequest(GradesRequest):
    remaining_weight: float = Field(default=1.0, ge=0.0)
