"""
Forecast routes for next-grade prediction, final-average projection and pass probability.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter

from api.requests import FinalGradeRequest, GradesRequest, PassProbabilityRequest
from api.responses import ValueResponse, payload
from api.routes.exception import handle_exceptions
from engine.forecast import pass_probability, predict_final_grade, predict_next

router = APIRouter(tags=["Forecast"])


@router.post("/predict/next", summary="Ensemble prediction of the next grade")
@handle_exceptions
async def next_grade(req: GradesRequest) -> Dict[str, Any]:
    return payload(predict_next(req.to_grades()))


@router.post("/predict/final", summary="Projected final average after remaining assessments")
@handle_exceptions
async def final_grade(req: FinalGradeRequest) -> Dict[str, Any]:
    return payload(predict_final_grade(req.to_grades(), req.remaining_assessments, req.typical_weight))


@router.post("/predict/pass-probability", response_model=ValueResponse)
@handle_exceptions
async def passing_chance(req: PassProbabilityRequest) -> ValueResponse:
    return ValueResponse(value=pass_probability(req.to_grades(), req.remaining_weight))
