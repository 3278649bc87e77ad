"""
Grade bookkeeping routes: averages, GPA, subject summaries, pass/fail tallies, timelines, insights and the display helpers for validating, formatting and parsing single grade values.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Query

from api.requests import GpaRequest, GradesRequest
from api.responses import FormattedGrade, ValidityResponse, ValueResponse, payload
from api.routes.exception import handle_exceptions
from engine import analyzer
from engine.formatting import format_grade, parse_grade, validate_grade
from engine.grades import (
    all_subject_summaries,
    attention_needed,
    distribution,
    extreme_subjects,
    gpa,
    group_by_month,
    improvement,
    pass_fail_stats,
    running_average,
    simple_average,
    subject_summary,
    suggest_priorities,
    weighted_average,
)

router = APIRouter(tags=["Grades"])


def _coerce_query_value(value: Any, cast: Any) -> Any:
    # Allow direct unit-test invocation without FastAPI Query parsing.
    raw = value.default if hasattr(value, "default") else value
    return cast(raw)


@router.post("/grades/average", response_model=ValueResponse)
@handle_exceptions
async def grades_average(req: GradesRequest) -> ValueResponse:
    return ValueResponse(value=simple_average(req.to_grades()))


@router.post("/grades/weighted-average", response_model=ValueResponse)
@handle_exceptions
async def grades_weighted_average(req: GradesRequest) -> ValueResponse:
    return ValueResponse(value=weighted_average(req.to_grades()))


@router.post("/grades/gpa", response_model=ValueResponse)
@handle_exceptions
async def grades_gpa(req: GpaRequest) -> ValueResponse:
    scale = req.scale.to_scale() if req.scale else None
    return ValueResponse(value=gpa(req.to_grades(), scale))


@router.post("/grades/subjects", summary="Summary for every subject, sorted by name")
@handle_exceptions
async def grades_subjects(req: GradesRequest) -> List[Dict[str, Any]]:
    return payload(all_subject_summaries(req.to_grades()))


@router.post("/grades/subjects/{subject}")
@handle_exceptions
async def grades_subject(subject: str, req: GradesRequest) -> Dict[str, Any]:
    return payload(subject_summary(req.to_grades(), subject))


@router.post("/grades/pass-fail")
@handle_exceptions
async def grades_pass_fail(req: GradesRequest) -> Dict[str, Any]:
    return payload(pass_fail_stats(req.to_grades()))


@router.post("/grades/analyze", summary="Full analytics report over all grades")
@handle_exceptions
async def grades_analyze(req: GpaRequest) -> Dict[str, Any]:
    scale = req.scale.to_scale() if req.scale else None
    return payload(analyzer.run(req.to_grades(), scale))


@router.post("/grades/running-average")
@handle_exceptions
async def grades_running_average(req: GradesRequest) -> List[Dict[str, Any]]:
    return [
        {"timestamp": ts, "average": payload(avg)}
        for ts, avg in running_average(req.to_grades())
    ]


@router.post("/grades/by-month")
@handle_exceptions
async def grades_by_month(req: GradesRequest) -> Dict[str, Any]:
    return payload(group_by_month(req.to_grades()))


@router.post("/grades/distribution")
@handle_exceptions
async def grades_distribution(req: GradesRequest) -> Dict[str, int]:
    return distribution(req.to_grades())


@router.post("/grades/extremes", summary="Best and worst subject by weighted average")
@handle_exceptions
async def grades_extremes(req: GradesRequest) -> Dict[str, Any]:
    best, worst = extreme_subjects(req.to_grades())
    return {"best": payload(best), "worst": payload(worst)}


@router.post("/grades/improvement", response_model=ValueResponse)
@handle_exceptions
async def grades_improvement(req: GradesRequest) -> ValueResponse:
    return ValueResponse(value=improvement(req.to_grades()))


@router.post("/grades/attention")
@handle_exceptions
async def grades_attention(req: GradesRequest) -> List[Dict[str, Any]]:
    return payload(attention_needed(req.to_grades()))


@router.post("/grades/priorities", summary="Subjects ranked by study priority")
@handle_exceptions
async def grades_priorities(req: GradesRequest) -> List[Dict[str, Any]]:
    return payload(suggest_priorities(req.to_grades()))


@router.get("/grades/validate", response_model=ValidityResponse)
@handle_exceptions
async def grades_validate(value: float = Query(...)) -> ValidityResponse:
    value = _coerce_query_value(value, float)
    return ValidityResponse(value=value, valid=validate_grade(value))


@router.get("/grades/format", response_model=FormattedGrade)
@handle_exceptions
async def grades_format(
    value: float = Query(...),
    decimals: int = Query(default=1, ge=0, le=6),
) -> FormattedGrade:
    value = _coerce_query_value(value, float)
    decimals = _coerce_query_value(decimals, int)
    return FormattedGrade(value=value, formatted=format_grade(value, decimals))


@router.get("/grades/parse", response_model=ValueResponse)
@handle_exceptions
async def grades_parse(text: str = Query(..., min_length=1)) -> ValueResponse:
    text = _coerce_query_value(text, str)
    return ValueResponse(value=parse_grade(text, field="text"))
