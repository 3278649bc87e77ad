"""
Scenario routes: grade needed for a target, what-if with hypothetical grades, impact curves and per-target requirements for one subject.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter

from api.requests import GradeNeededRequest, ImpactRequest, TargetsRequest, WhatIfRequest
from api.responses import ValueResponse, payload
from api.routes.exception import handle_exceptions
from engine.scenario import grade_needed, grades_for_targets, impact_analysis, whatif

router = APIRouter(tags=["Scenario"])


@router.post("/scenario/grade-needed", response_model=ValueResponse)
@handle_exceptions
async def needed(req: GradeNeededRequest) -> ValueResponse:
    return ValueResponse(value=grade_needed(
        req.current_average,
        req.current_total_weight,
        req.target_average,
        req.new_grade_weight,
    ))


@router.post("/scenario/whatif", summary="Averages after adding hypothetical grades")
@handle_exceptions
async def scenario_whatif(req: WhatIfRequest) -> Dict[str, Any]:
    return payload(whatif(req.to_grades(), req.to_hypothetical(), req.targets))


@router.post("/scenario/impact", summary="Resulting subject average for every grade on the scale")
@handle_exceptions
async def scenario_impact(req: ImpactRequest) -> List[Dict[str, Any]]:
    return payload(impact_analysis(req.to_grades(), req.subject, req.weight))


@router.post("/scenario/targets")
@handle_exceptions
async def scenario_targets(req: TargetsRequest) -> List[Dict[str, Any]]:
    return payload(grades_for_targets(req.to_grades(), req.subject, req.weight, req.targets))
