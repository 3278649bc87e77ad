"""
Descriptive statistics routes: full summary, single percentile, IQR outliers, histogram buckets and value-rank percentile.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter

from api.requests import HistogramRequest, PercentileRequest, SeriesRequest, ValuePercentileRequest
from api.responses import ValueResponse, payload
from api.routes.exception import handle_exceptions
from engine.distribution import detect_outliers, histogram, value_percentile
from engine.statistics import describe, percentile

router = APIRouter(tags=["Statistics"])


@router.post("/statistics", summary="Descriptive statistics for a numeric sequence")
@handle_exceptions
async def statistics_summary(req: SeriesRequest) -> Dict[str, Any]:
    return payload(describe(req.data))


@router.post("/statistics/percentile", response_model=ValueResponse)
@handle_exceptions
async def statistics_percentile(req: PercentileRequest) -> ValueResponse:
    return ValueResponse(value=percentile(req.data, req.percentile))


@router.post("/statistics/outliers", summary="Values outside the 1.5 IQR fences")
@handle_exceptions
async def statistics_outliers(req: SeriesRequest) -> List[Dict[str, Any]]:
    return payload(detect_outliers(req.data))


@router.post("/statistics/histogram")
@handle_exceptions
async def statistics_histogram(req: HistogramRequest) -> List[Dict[str, Any]]:
    return payload(histogram(req.data, req.buckets))


@router.post("/statistics/value-percentile", response_model=ValueResponse)
@handle_exceptions
async def statistics_value_percentile(req: ValuePercentileRequest) -> ValueResponse:
    return ValueResponse(value=value_percentile(req.data, req.value))
